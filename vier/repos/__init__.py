"""
VIER repositories – one per entity family.

The abstract classes are the public contract; the ``Http*`` classes resolve
it against the live site through an injected ``RequestHandler``.
"""

from vier.repos.category_repo import CategoryRepo, HttpCategoryRepo
from vier.repos.episode_repo import EpisodeRepo, HttpEpisodeRepo
from vier.repos.program_repo import HttpProgramRepo, ProgramRepo
from vier.repos.search_repo import HttpSearchRepo, SearchRepo

__all__ = [
    'ProgramRepo',
    'EpisodeRepo',
    'SearchRepo',
    'CategoryRepo',
    'HttpProgramRepo',
    'HttpEpisodeRepo',
    'HttpSearchRepo',
    'HttpCategoryRepo',
]
