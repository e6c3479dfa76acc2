"""
``VierCatalog`` – the single entry point bundling the four repositories.

Usage::

    import asyncio
    from vier.catalog import create_catalog_from_config

    catalog = create_catalog_from_config()
    result = asyncio.run(catalog.search('slimste mens'))
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from utils.auth import TokenProvider, create_token_provider_from_config
from utils.request_handler import RequestHandler, create_request_handler_from_config
from vier.models import EpisodeByNodeIdKey, EpisodeKey, ProgramKey, SearchKey
from vier.repos import (
    CategoryRepo,
    EpisodeRepo,
    HttpCategoryRepo,
    HttpEpisodeRepo,
    HttpProgramRepo,
    HttpSearchRepo,
    ProgramRepo,
    SearchRepo,
)
from vier.repos.episode_repo import EpisodeLookupKey
from vier.responses import (
    Categories,
    Failure,
    Programs,
    SearchResults,
    SingleEpisode,
    SingleProgram,
)

logger = logging.getLogger(__name__)

# config.py name -> RequestConfig field
CONFIG_FIELDS = {
    'BASE_URL': 'base_url',
    'API_BASE_URL': 'api_base_url',
    'CATEGORIES_URL': 'categories_url',
    'SEARCH_SITE': 'search_site',
    'REQUEST_TIMEOUT': 'timeout',
}


class VierCatalog:
    """Facade over the program, episode, search and category repositories."""

    def __init__(self, programs: ProgramRepo, episodes: EpisodeRepo, search_repo: SearchRepo,
                 categories: CategoryRepo, request_handler: Optional[RequestHandler] = None):
        self.programs = programs
        self.episodes = episodes
        self.search_repo = search_repo
        self.categories = categories
        self.request_handler = request_handler

    async def fetch_programs(self) -> Union[Programs, Failure]:
        return await self.programs.fetch_programs()

    async def fetch_program(self, key: ProgramKey) -> Union[SingleProgram, Failure]:
        return await self.programs.fetch_program(key)

    async def fetch_episode(self, key: EpisodeLookupKey) -> Union[SingleEpisode, Failure]:
        return await self.episodes.fetch_episode(key)

    async def search(self, query: str) -> Union[SearchResults, Failure]:
        return await self.search_repo.search(query)

    async def fetch_categories(self) -> Union[Categories, Failure]:
        return await self.categories.fetch_categories()

    async def resolve(self, key: SearchKey) -> Union[SingleProgram, SingleEpisode, Failure]:
        """Resolve the key of a search hit (``hit.source.search_key``)."""
        if isinstance(key, ProgramKey):
            return await self.fetch_program(key)
        if isinstance(key, (EpisodeKey, EpisodeByNodeIdKey)):
            return await self.fetch_episode(key)
        raise TypeError(f"Unsupported search key: {type(key).__name__}")

    def close(self):
        if self.request_handler is not None:
            self.request_handler.close()


def create_catalog(request_handler: RequestHandler) -> VierCatalog:
    programs = HttpProgramRepo(request_handler)
    return VierCatalog(
        programs=programs,
        episodes=HttpEpisodeRepo(request_handler, programs),
        search_repo=HttpSearchRepo(request_handler),
        categories=HttpCategoryRepo(request_handler),
        request_handler=request_handler,
    )


def load_config_values() -> dict:
    """
    Read the catalog settings from config.py.

    Returns:
        ``RequestConfig`` keyword arguments plus ``access_token``; names
        missing from config.py (or a missing config.py) are left out so the
        defaults apply.
    """
    try:
        import config
    except ImportError:
        logger.debug('config.py not found, using default settings')
        return {}

    values = {field: getattr(config, name) for name, field in CONFIG_FIELDS.items() if hasattr(config, name)}
    if getattr(config, 'ACCESS_TOKEN', None):
        values['access_token'] = config.ACCESS_TOKEN
    return values


def create_catalog_from_config(token_provider: Optional[TokenProvider] = None, **overrides) -> VierCatalog:
    """
    Create a VierCatalog from config.py.

    Args:
        token_provider: Token provider to use instead of ``ACCESS_TOKEN``
        **overrides: ``RequestConfig`` fields taking precedence over config.py

    Returns:
        Configured VierCatalog instance
    """
    values = load_config_values()
    values.update(overrides)
    access_token = values.pop('access_token', None)
    if token_provider is None:
        token_provider = create_token_provider_from_config(access_token)

    handler = create_request_handler_from_config(token_provider=token_provider, **values)
    logger.debug(f"Catalog configured for {handler.config.base_url} / {handler.config.api_base_url}")
    return create_catalog(handler)
