"""
Category repository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from utils.request_handler import HttpRequest, RequestHandler
from vier.parsers import parse_categories
from vier.repos.common import fetch_text
from vier.responses import Categories, Failure


class CategoryRepo(ABC):

    @abstractmethod
    async def fetch_categories(self) -> Union[Categories, Failure]:
        """Fetch the category list (``GET`` on the configured category URL)."""


class HttpCategoryRepo(CategoryRepo):

    def __init__(self, request_handler: RequestHandler):
        self._handler = request_handler

    async def fetch_categories(self) -> Union[Categories, Failure]:
        body = await fetch_text(self._handler, HttpRequest('GET', self._handler.config.categories_url))
        if isinstance(body, Failure):
            return body

        categories = parse_categories(body)
        if isinstance(categories, Failure):
            return categories
        return Categories(categories)
