"""
Result taxonomy for the catalog layer.

Every public operation returns either one of the success containers
(``Programs``, ``SingleProgram``, ``SingleEpisode``, ``SearchResults``,
``Categories``) or a ``Failure``.  Failures are plain values: they are
returned, never raised, and carry a ``FailureKind`` tag plus the payload
relevant to that kind.

Two composition strategies are provided and deliberately kept apart:

* ``collect_all`` – accumulates *every* failure of a batch of independent
  validations (used for HTML field validation).
* ``vier.repos.common.gather_fail_fast`` – stops at the first failure of a
  concurrent fan-out (used for network fetches); sequential resolution
  steps simply return the first failure they meet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple, TypeVar, Union

from vier.models import Category, Episode, Program, SearchHit

T = TypeVar('T')


# ---------------------------------------------------------------------------
# HTML validation errors
# ---------------------------------------------------------------------------

class HtmlErrorKind(str, Enum):
    NO_SELECTION = 'no_selection'
    INVALID_ELEMENT = 'invalid_element'


@dataclass(frozen=True)
class HtmlError:
    """One structural scraping defect.

    Attributes:
        kind: What went wrong.
        selector: CSS selector that was being processed.
        position: Index of the offending element within the selection,
                  *None* when the selection itself failed.
        missing: Parts of the element that were absent (``'href'``,
                 ``'text'`` …).
    """
    kind: HtmlErrorKind
    selector: str
    position: Optional[int] = None
    missing: Tuple[str, ...] = ()

    def describe(self) -> str:
        if self.kind is HtmlErrorKind.NO_SELECTION:
            return f"no element matches '{self.selector}'"
        return (f"element #{self.position} of '{self.selector}' "
                f"is missing {', '.join(self.missing)}")


# ---------------------------------------------------------------------------
# Failure
# ---------------------------------------------------------------------------

class FailureKind(str, Enum):
    NETWORK = 'network_failure'
    EMPTY_JSON = 'empty_json'
    JSON_PARSING = 'json_parsing_exception'
    HTML_PARSING = 'html_parsing'
    NO_EPISODE_FOUND = 'no_episode_found'
    AUTHENTICATION = 'authentication'


@dataclass(frozen=True)
class Failure:
    """A failed lookup.

    Only the payload fields belonging to ``kind`` are populated:

    * ``NETWORK`` – ``status_code`` (None for connection errors), ``request``
      and optionally ``cause``
    * ``JSON_PARSING`` / ``AUTHENTICATION`` – ``cause``
    * ``HTML_PARSING`` – ``errors`` (never empty)
    """
    kind: FailureKind
    status_code: Optional[int] = None
    request: Any = field(default=None, compare=False)
    cause: Optional[BaseException] = field(default=None, compare=False)
    errors: Tuple[HtmlError, ...] = ()

    def describe(self) -> str:
        if self.kind is FailureKind.NETWORK:
            url = getattr(self.request, 'url', '?')
            status = self.status_code if self.status_code is not None else 'no response'
            return f"network failure ({status}) for {url}"
        if self.kind is FailureKind.HTML_PARSING:
            return 'html parsing failed: ' + '; '.join(e.describe() for e in self.errors)
        if self.cause is not None:
            return f"{self.kind.value}: {self.cause}"
        return self.kind.value

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.value,
            'status_code': self.status_code,
            'detail': self.describe(),
            'errors': [e.describe() for e in self.errors],
        }


def network_failure(status_code: Optional[int], request: Any,
                    cause: Optional[BaseException] = None) -> Failure:
    return Failure(FailureKind.NETWORK, status_code=status_code, request=request, cause=cause)


def empty_json() -> Failure:
    return Failure(FailureKind.EMPTY_JSON)


def json_parsing(cause: BaseException) -> Failure:
    return Failure(FailureKind.JSON_PARSING, cause=cause)


def html_parsing(errors: Iterable[HtmlError]) -> Failure:
    errors = tuple(errors)
    if not errors:
        raise ValueError('html_parsing requires at least one HtmlError')
    return Failure(FailureKind.HTML_PARSING, errors=errors)


def no_episode_found() -> Failure:
    return Failure(FailureKind.NO_EPISODE_FOUND)


def authentication_failure(cause: Optional[BaseException] = None) -> Failure:
    return Failure(FailureKind.AUTHENTICATION, cause=cause)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Invalid:
    """Outcome of a validation that found one or more defects."""
    errors: Tuple[HtmlError, ...]


def collect_all(validations: Iterable[Union[T, Invalid]]) -> Union[List[T], Invalid]:
    """Accumulate a batch of independent validations.

    Each item is either a validated value or an ``Invalid``.  Returns the
    list of values when every item validated, otherwise one ``Invalid``
    holding the errors of *all* invalid items (input order preserved).
    """
    values: List[T] = []
    errors: List[HtmlError] = []
    for item in validations:
        if isinstance(item, Invalid):
            errors.extend(item.errors)
        else:
            values.append(item)
    if errors:
        return Invalid(tuple(errors))
    return values


# ---------------------------------------------------------------------------
# Success containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Programs:
    programs: Tuple[Program, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {'programs': [p.to_dict() for p in self.programs]}


@dataclass(frozen=True)
class SingleProgram:
    program: Program

    def to_dict(self) -> dict:
        return {'program': self.program.to_dict()}


@dataclass(frozen=True)
class SingleEpisode:
    episode: Episode

    def to_dict(self) -> dict:
        return {'episode': self.episode.to_dict()}


@dataclass(frozen=True)
class SearchResults:
    hits: Tuple[SearchHit, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {'hits': [h.to_dict() for h in self.hits]}


@dataclass(frozen=True)
class Categories:
    categories: Tuple[Category, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {'categories': [c.to_dict() for c in self.categories]}
