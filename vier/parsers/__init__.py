"""
VIER page and payload parsers – public API.

Usage::

    from vier.parsers import parse_program_page, detect_episode_type

All parsers are pure: they take the raw HTML / JSON text and return either
the decoded value or a ``vier.responses.Failure``.
"""

from vier.parsers.category_parser import parse_categories
from vier.parsers.detection import EpisodeType, detect_episode_type
from vier.parsers.episode_parser import has_clip_data, parse_clip_episode, parse_episode
from vier.parsers.program_parser import (
    has_program_data,
    parse_partial_programs,
    parse_program_page,
)
from vier.parsers.search_parser import parse_search_results

__all__ = [
    'parse_partial_programs',
    'parse_program_page',
    'has_program_data',
    'parse_episode',
    'parse_clip_episode',
    'has_clip_data',
    'parse_search_results',
    'parse_categories',
    'EpisodeType',
    'detect_episode_type',
]
