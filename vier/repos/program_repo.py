"""
Program repository.

Programs live on server-rendered pages: the catalog index
(``https://www.vier.be/``) lists them, and every program page embeds its
full data as JSON in a ``data-hero`` attribute.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Union
from urllib.parse import urljoin

from utils.request_handler import HttpRequest, RequestHandler
from vier.models import PartialProgram, Program, ProgramKey
from vier.parsers import parse_partial_programs, parse_program_page
from vier.repos.common import fetch_text, gather_fail_fast
from vier.responses import Failure, Programs, SingleProgram

logger = logging.getLogger(__name__)


class ProgramRepo(ABC):

    @abstractmethod
    async def fetch_programs(self) -> Union[Programs, Failure]:
        """Fetch every program listed on the VIER homepage.

        Equivalent of::

            curl -X GET "https://www.vier.be/"

        followed by one request per listed program, issued concurrently.
        This is expensive; callers should cache the result.
        """

    @abstractmethod
    async def fetch_program(self, key: ProgramKey) -> Union[SingleProgram, Failure]:
        """Fetch a single program by path.

        Equivalent of::

            curl -X GET "https://www.vier.be/de-slimste-mens-ter-wereld"
        """


class HttpProgramRepo(ProgramRepo):

    def __init__(self, request_handler: RequestHandler):
        self._handler = request_handler

    def program_url(self, path: str) -> str:
        """Absolute URL for a program path; absolute URLs pass through."""
        return urljoin(self._handler.config.base_url, path)

    async def fetch_programs(self) -> Union[Programs, Failure]:
        html = await fetch_text(self._handler, HttpRequest('GET', self._handler.config.base_url))
        if isinstance(html, Failure):
            return html

        partial_programs = parse_partial_programs(html)
        if isinstance(partial_programs, Failure):
            return partial_programs

        programs = await self._fetch_program_details(partial_programs)
        if isinstance(programs, Failure):
            return programs

        logger.info('Fetched %d programs', len(programs))
        return Programs(tuple(programs))

    async def fetch_program(self, key: ProgramKey) -> Union[SingleProgram, Failure]:
        program = await self._fetch_program_from_url(self.program_url(key.path))
        if isinstance(program, Failure):
            return program
        return SingleProgram(program)

    async def _fetch_program_from_url(self, url: str) -> Union[Program, Failure]:
        html = await fetch_text(self._handler, HttpRequest('GET', url))
        if isinstance(html, Failure):
            return html
        return parse_program_page(html)

    async def _fetch_program_details(self, partial_programs: List[PartialProgram]) -> Union[List[Program], Failure]:
        logger.debug('Fetching details for %d programs', len(partial_programs))
        return await gather_fail_fast(
            self._fetch_program_from_url(self.program_url(p.path)) for p in partial_programs
        )
