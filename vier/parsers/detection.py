"""
Content-type detection for episode pages.

VIER routes clips and full episodes through the same kind of URL, but the
two page kinds embed their data differently.  ``detect_episode_type`` probes
the page for the structural markers only, so that the matching parser can
be picked before any full parse is attempted.
"""

from __future__ import annotations

import logging
from enum import Enum

from vier.parsers.episode_parser import has_clip_data
from vier.parsers.program_parser import has_program_data

logger = logging.getLogger(__name__)


class EpisodeType(str, Enum):
    FULL_EPISODE = 'full_episode'
    CLIP = 'clip'
    UNKNOWN = 'unknown'


def detect_episode_type(html_content: str) -> EpisodeType:
    """Classify an episode page.

    The program marker is checked first: a page carrying both markers is a
    full program page.
    """
    if has_program_data(html_content):
        episode_type = EpisodeType.FULL_EPISODE
    elif has_clip_data(html_content):
        episode_type = EpisodeType.CLIP
    else:
        episode_type = EpisodeType.UNKNOWN
    logger.debug('Detected episode page type: %s', episode_type.value)
    return episode_type
