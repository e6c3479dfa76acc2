"""
Data models for the VIER catalog layer.

Entities decoded from upstream JSON (programs, episodes, search hits,
categories) are frozen pydantic models: unknown fields are ignored because
the upstream payloads change without notice, and every field the upstream
may omit is an explicit ``Optional``.  Lookup keys and scrape intermediates
are plain frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class UpstreamModel(BaseModel):
    """Base for every model decoded from an upstream payload."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore', coerce_numbers_to_str=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode='json')


# ---------------------------------------------------------------------------
# Program / playlist / episode
# ---------------------------------------------------------------------------

class PageInfo(UpstreamModel):
    """Page metadata attached to programs and episodes.

    ``node_id`` is unique within one program page, not across the site.
    """
    node_id: str = Field(alias='nodeId')
    url: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None
    site: Optional[str] = None


class Image(UpstreamModel):
    url: Optional[str] = None
    alt: Optional[str] = None


class Episode(UpstreamModel):
    id: str
    title: str
    page_info: PageInfo = Field(alias='pageInfo')
    description: Optional[str] = None
    video_uuid: Optional[str] = Field(default=None, alias='videoUuid')
    duration: Optional[float] = None
    episode_number: Optional[int] = Field(default=None, alias='episodeNumber')
    season_number: Optional[int] = Field(default=None, alias='seasonNumber')
    created_date: Optional[int] = Field(default=None, alias='createdDate')
    unpublish_date: Optional[int] = Field(default=None, alias='unpublishDate')
    image: Optional[Image] = None
    link: Optional[str] = None
    is_protected: Optional[bool] = Field(default=None, alias='isProtected')
    type: Optional[str] = None


class Playlist(UpstreamModel):
    id: str
    title: str
    episodes: Tuple[Episode, ...] = ()


class Program(UpstreamModel):
    id: str
    title: str
    playlists: Tuple[Playlist, ...]
    description: Optional[str] = None
    page_info: Optional[PageInfo] = Field(default=None, alias='pageInfo')
    images: Optional[Image] = None

    def episodes(self) -> Iterator[Episode]:
        """Yield every episode, playlist by playlist, in page order."""
        for playlist in self.playlists:
            yield from playlist.episodes

    def find_episode(self, node_id: str) -> Optional[Episode]:
        """Return the first episode whose page node id equals *node_id*."""
        return next((e for e in self.episodes() if e.page_info.node_id == node_id), None)


# ---------------------------------------------------------------------------
# Lookup keys
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProgramKey:
    """A program addressed by its path (``/de-slimste-mens``) or full URL."""
    path: str


@dataclass(frozen=True)
class EpisodeKey:
    """An episode addressed through its parent program page."""
    program_path: str
    node_id: str


@dataclass(frozen=True)
class EpisodeByNodeIdKey:
    """An episode addressed by its own page URL.

    The page behind ``url`` is either a full program page or a clip page;
    which one is only known after fetching it.
    """
    url: str
    node_id: str


@dataclass(frozen=True)
class EpisodeUuid:
    """Opaque video id served by the ``/video/{id}`` endpoint."""
    id: str


SearchKey = Union[ProgramKey, EpisodeKey, EpisodeByNodeIdKey]


# ---------------------------------------------------------------------------
# Scrape intermediate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PartialProgram:
    """Name and relative path of a program as listed on the catalog index."""
    name: str
    path: str


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

class Source(UpstreamModel):
    id: str
    title: str
    url: str
    intro: Optional[str] = None
    img: Optional[str] = None
    bundle: Optional[str] = None
    program_url: Optional[str] = Field(default=None, alias='programUrl')
    site: Optional[str] = None

    @property
    def search_key(self) -> SearchKey:
        """The lookup key that resolves this hit to a catalog entity."""
        if self.bundle == 'program':
            return ProgramKey(path=self.url)
        if self.program_url:
            return EpisodeKey(program_path=self.program_url, node_id=self.id)
        return EpisodeByNodeIdKey(url=self.url, node_id=self.id)


class SearchHit(UpstreamModel):
    index: Optional[str] = Field(default=None, alias='_index')
    id: Optional[str] = Field(default=None, alias='_id')
    score: Optional[float] = Field(default=None, alias='_score')
    source: Source = Field(alias='_source')


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class Category(UpstreamModel):
    name: str
    title: str
    image_store_url: Optional[str] = Field(default=None, alias='imageStoreUrl')
    link: Optional[str] = None
