"""
Thin FastAPI REST layer wrapping the catalog.

Run with::

    uvicorn vier.server:app --reload --port 8100
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from vier.catalog import VierCatalog, create_catalog_from_config
from vier.models import EpisodeByNodeIdKey, EpisodeKey, EpisodeUuid, ProgramKey
from vier.responses import Failure, FailureKind

logger = logging.getLogger(__name__)

app = FastAPI(
    title='VIER Catalog API',
    version='0.1.0',
    description='Programs, episodes, search and categories of the VIER video catalog.',
)

FAILURE_STATUS = {
    FailureKind.NO_EPISODE_FOUND: 404,
    FailureKind.AUTHENTICATION: 401,
    FailureKind.NETWORK: 502,
    FailureKind.EMPTY_JSON: 502,
    FailureKind.JSON_PARSING: 502,
    FailureKind.HTML_PARSING: 502,
}

_catalog: Optional[VierCatalog] = None


def get_catalog() -> VierCatalog:
    """Catalog shared by all requests, created from config.py on first use."""
    global _catalog
    if _catalog is None:
        _catalog = create_catalog_from_config()
    return _catalog


def _respond(result):
    """Convert a catalog result to a JSON body, or raise for a failure."""
    if isinstance(result, Failure):
        logger.warning('Request failed: %s', result.describe())
        raise HTTPException(status_code=FAILURE_STATUS[result.kind], detail=result.to_dict())
    return result.to_dict()


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = 'ok'


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get('/api/health', response_model=HealthResponse)
async def health_check():
    """Simple liveness probe."""
    return HealthResponse()


@app.get('/api/programs')
async def api_programs(catalog: VierCatalog = Depends(get_catalog)):
    """All programs of the homepage.  Slow: one upstream request per program."""
    return _respond(await catalog.fetch_programs())


@app.get('/api/program')
async def api_program(path: str = Query(..., min_length=1), catalog: VierCatalog = Depends(get_catalog)):
    """A single program by path, e.g. ``/de-slimste-mens-ter-wereld``."""
    return _respond(await catalog.fetch_program(ProgramKey(path)))


@app.get('/api/episode')
async def api_episode(
    node_id: Optional[str] = None,
    program_path: Optional[str] = None,
    url: Optional[str] = None,
    video_id: Optional[str] = None,
    catalog: VierCatalog = Depends(get_catalog),
):
    """A single episode.

    Pass exactly one of: ``video_id`` alone; ``program_path`` + ``node_id``;
    ``url`` + ``node_id``.
    """
    if video_id and not (program_path or url or node_id):
        key = EpisodeUuid(video_id)
    elif node_id and program_path and not (url or video_id):
        key = EpisodeKey(program_path=program_path, node_id=node_id)
    elif node_id and url and not (program_path or video_id):
        key = EpisodeByNodeIdKey(url=url, node_id=node_id)
    else:
        raise HTTPException(
            status_code=422,
            detail='pass video_id, or node_id with exactly one of program_path / url',
        )
    return _respond(await catalog.fetch_episode(key))


@app.get('/api/search')
async def api_search(q: str = Query(..., min_length=1), catalog: VierCatalog = Depends(get_catalog)):
    """Search the catalog (first result page only)."""
    return _respond(await catalog.search(q))


@app.get('/api/categories')
async def api_categories(catalog: VierCatalog = Depends(get_catalog)):
    return _respond(await catalog.fetch_categories())
