"""
VIER catalog – content resolution for the VIER video catalog.

This package resolves programs, episodes, search hits and categories from
the server-rendered pages and JSON endpoints of www.vier.be, and exposes
them through per-entity repositories plus a thin FastAPI REST interface.

Quick start (Python)::

    import asyncio
    from vier.catalog import create_catalog_from_config
    from vier.models import ProgramKey

    catalog = create_catalog_from_config()
    result = asyncio.run(catalog.fetch_program(ProgramKey('/de-slimste-mens-ter-wereld')))

Quick start (REST)::

    uvicorn vier.server:app --reload
"""

from vier.models import (
    Category,
    Episode,
    EpisodeByNodeIdKey,
    EpisodeKey,
    EpisodeUuid,
    PageInfo,
    Playlist,
    Program,
    ProgramKey,
    SearchHit,
)
from vier.responses import (
    Categories,
    Failure,
    FailureKind,
    Programs,
    SearchResults,
    SingleEpisode,
    SingleProgram,
)

__all__ = [
    # Models
    'Program',
    'Playlist',
    'Episode',
    'PageInfo',
    'SearchHit',
    'Category',
    # Keys
    'ProgramKey',
    'EpisodeKey',
    'EpisodeByNodeIdKey',
    'EpisodeUuid',
    # Responses
    'Programs',
    'SingleProgram',
    'SingleEpisode',
    'SearchResults',
    'Categories',
    'Failure',
    'FailureKind',
]
