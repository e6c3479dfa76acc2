"""
Episode parsers.

``parse_episode`` decodes the body of the ``/video/{uuid}`` endpoint.
``parse_clip_episode`` reads the video id out of the ``data-video`` blob of a
clip page; clip pages carry no episode metadata themselves, so the id is then
resolved through the video endpoint.
"""

from __future__ import annotations

import logging
from typing import Union

from pydantic import TypeAdapter

from vier.models import Episode, EpisodeUuid
from vier.parsers.common import DECODE_ERRORS, has_marker, load_json, read_marker_json, validate
from vier.responses import Failure, json_parsing

logger = logging.getLogger(__name__)

CLIP_DATA_ATTRIBUTE = 'data-video'

_episode_adapter = TypeAdapter(Episode)


def parse_episode(json_content: str) -> Union[Episode, Failure]:
    data = load_json(json_content)
    if isinstance(data, Failure):
        return data
    return validate(_episode_adapter, data)


def has_clip_data(html_content: str) -> bool:
    """Cheap probe for the ``data-video`` marker of a clip page.

    The attribute is not decoded, a clip page with a broken blob still
    probes positive.
    """
    return has_marker(html_content, CLIP_DATA_ATTRIBUTE)


def parse_clip_episode(html_content: str) -> Union[EpisodeUuid, Failure]:
    video = read_marker_json(html_content, CLIP_DATA_ATTRIBUTE)
    if isinstance(video, Failure):
        return video

    try:
        video_id = video['id']
        if not isinstance(video_id, str) or not video_id:
            raise ValueError(f"invalid video id: {video_id!r}")
    except DECODE_ERRORS as exc:
        logger.debug("'%s' payload has no usable 'id'", CLIP_DATA_ATTRIBUTE)
        return json_parsing(exc)

    return EpisodeUuid(id=video_id)
