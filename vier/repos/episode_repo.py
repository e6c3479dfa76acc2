"""
Episode repository.

An episode can be reached three ways, each with its own key type:

* ``EpisodeKey`` – through its parent program page, by node id
* ``EpisodeByNodeIdKey`` – through its own page, which is either a full
  program page or a clip page (VIER does not tell them apart in its URLs)
* ``EpisodeUuid`` – directly through the ``/video/{uuid}`` API endpoint
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from utils.request_handler import HttpRequest, RequestHandler
from vier.models import EpisodeByNodeIdKey, EpisodeKey, EpisodeUuid, Program, ProgramKey
from vier.parsers import (
    EpisodeType,
    detect_episode_type,
    parse_clip_episode,
    parse_episode,
    parse_program_page,
)
from vier.repos.common import fetch_text
from vier.repos.program_repo import ProgramRepo
from vier.responses import Failure, SingleEpisode, no_episode_found

logger = logging.getLogger(__name__)

EpisodeLookupKey = Union[EpisodeKey, EpisodeByNodeIdKey, EpisodeUuid]


class EpisodeRepo(ABC):

    @abstractmethod
    async def fetch_episode(self, key: EpisodeLookupKey) -> Union[SingleEpisode, Failure]:
        """Fetch a single episode.

        The type of *key* selects the lookup path.  Equivalent of one of::

            curl -X GET "https://www.vier.be/de-slimste-mens-ter-wereld"
            curl -X GET "https://www.vier.be/video/de-slimste-mens/aflevering-1"
            curl -X GET "https://api.viervijfzes.be/video/<uuid>"
        """


def episode_from_program(program: Program, node_id: str) -> Union[SingleEpisode, Failure]:
    """Pick the episode with *node_id*; the earliest playlist entry wins."""
    episode = program.find_episode(node_id)
    if episode is None:
        logger.debug("No episode with node id %s in program '%s'", node_id, program.title)
        return no_episode_found()
    return SingleEpisode(episode)


class HttpEpisodeRepo(EpisodeRepo):

    def __init__(self, request_handler: RequestHandler, program_repo: ProgramRepo):
        self._handler = request_handler
        self._program_repo = program_repo

    async def fetch_episode(self, key: EpisodeLookupKey) -> Union[SingleEpisode, Failure]:
        if isinstance(key, EpisodeKey):
            return await self._fetch_by_program(key)
        if isinstance(key, EpisodeByNodeIdKey):
            return await self._fetch_by_page(key)
        if isinstance(key, EpisodeUuid):
            return await self._fetch_by_video_id(key)
        raise TypeError(f"Unsupported episode key: {type(key).__name__}")

    async def _fetch_by_program(self, key: EpisodeKey) -> Union[SingleEpisode, Failure]:
        response = await self._program_repo.fetch_program(ProgramKey(key.program_path))
        if isinstance(response, Failure):
            return response
        return episode_from_program(response.program, key.node_id)

    async def _fetch_by_page(self, key: EpisodeByNodeIdKey) -> Union[SingleEpisode, Failure]:
        html = await fetch_text(self._handler, HttpRequest('GET', key.url))
        if isinstance(html, Failure):
            return html

        episode_type = detect_episode_type(html)
        if episode_type is EpisodeType.FULL_EPISODE:
            program = parse_program_page(html)
            if isinstance(program, Failure):
                return program
            return episode_from_program(program, key.node_id)

        if episode_type is EpisodeType.CLIP:
            video_id = parse_clip_episode(html)
            if isinstance(video_id, Failure):
                return video_id
            return await self._fetch_by_video_id(video_id)

        logger.info('Unrecognised episode page: %s', key.url)
        return no_episode_found()

    async def _fetch_by_video_id(self, video_id: EpisodeUuid) -> Union[SingleEpisode, Failure]:
        url = f"{self._handler.config.api_base_url}/video/{video_id.id}"
        body = await fetch_text(self._handler, HttpRequest('GET', url, authenticated=True))
        if isinstance(body, Failure):
            return body

        episode = parse_episode(body)
        if isinstance(episode, Failure):
            return episode
        return SingleEpisode(episode)
