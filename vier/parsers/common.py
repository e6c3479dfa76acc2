"""
Shared parsing utilities used by the HTML and JSON extractors.

Every helper here is total: decoding problems come back as a ``Failure``
value instead of an exception.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag
from pydantic import TypeAdapter, ValidationError

from vier.responses import Failure, json_parsing

logger = logging.getLogger(__name__)

# Exceptions raised while walking an untyped JSON tree or validating it.
DECODE_ERRORS = (ValueError, KeyError, TypeError, AttributeError, ValidationError)


class MissingMarker(LookupError):
    """Raised internally when a structural marker is absent from a page."""


def make_soup(html_content: str) -> BeautifulSoup:
    return BeautifulSoup(html_content, 'html.parser')


# ---------------------------------------------------------------------------
# Marker lookup
# ---------------------------------------------------------------------------

def marker_selector(attribute: str) -> str:
    """CSS selector for the ``<div>`` carrying the *attribute* data set."""
    return f'div[{attribute}]'


def find_marker(soup: BeautifulSoup, attribute: str) -> Optional[Tag]:
    """Return the first ``<div>`` carrying *attribute*, or *None*."""
    element = soup.select_one(marker_selector(attribute))
    return element if isinstance(element, Tag) else None


def has_marker(html_content: str, attribute: str) -> bool:
    """Cheap probe: does the page contain a ``<div>`` with *attribute*?

    Only the element lookup is performed; the attribute value is not decoded.
    """
    return find_marker(make_soup(html_content), attribute) is not None


def read_marker_json(html_content: str, attribute: str) -> Union[Any, Failure]:
    """Locate the *attribute* marker and JSON-decode its value."""
    try:
        element = find_marker(make_soup(html_content), attribute)
        if element is None:
            raise MissingMarker(f"no element matches '{marker_selector(attribute)}'")
        raw = element.get(attribute)
        if not raw:
            raise MissingMarker(f"attribute '{attribute}' is empty")
        return json.loads(raw)
    except (MissingMarker,) + DECODE_ERRORS as exc:
        logger.debug("Could not read JSON from '%s': %s", attribute, exc)
        return json_parsing(exc)


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------

def load_json(json_content: str) -> Union[Any, Failure]:
    try:
        return json.loads(json_content)
    except DECODE_ERRORS as exc:
        logger.debug('Invalid JSON payload: %s', exc)
        return json_parsing(exc)


def validate(adapter: TypeAdapter, data: Any) -> Union[Any, Failure]:
    """Validate decoded JSON *data* through a pydantic ``TypeAdapter``."""
    try:
        return adapter.validate_python(data)
    except DECODE_ERRORS as exc:
        logger.debug('Payload does not match %s: %s', adapter, exc)
        return json_parsing(exc)
