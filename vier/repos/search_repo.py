"""
Search repository backed by the VIER search index.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from utils.request_handler import HttpRequest, RequestHandler
from vier.parsers import parse_search_results
from vier.repos.common import fetch_text
from vier.responses import Failure, SearchResults

logger = logging.getLogger(__name__)


class SearchRepo(ABC):

    @abstractmethod
    async def search(self, query: str) -> Union[SearchResults, Failure]:
        """Search the catalog.

        Equivalent of::

            curl -X POST \\
                 -d '{"query": <query>, "sites": ["vier"], "page": 0, "mode": "byDate"}' \\
                 "https://api.viervijfzes.be/search"

        Only the first page of results is returned.
        """


def search_request_body(query: str, site: str) -> dict:
    return {
        'query': query,
        'sites': [site],
        'page': 0,
        'mode': 'byDate',
    }


class HttpSearchRepo(SearchRepo):

    def __init__(self, request_handler: RequestHandler):
        self._handler = request_handler

    async def search(self, query: str) -> Union[SearchResults, Failure]:
        config = self._handler.config
        request = HttpRequest(
            'POST',
            f"{config.api_base_url}/search",
            json_body=search_request_body(query, config.search_site),
        )
        body = await fetch_text(self._handler, request)
        if isinstance(body, Failure):
            return body

        hits = parse_search_results(body)
        if isinstance(hits, Failure):
            return hits

        logger.debug("Search '%s' returned %d hits", query, len(hits))
        return SearchResults(hits)
