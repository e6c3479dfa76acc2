"""
Program parsers.

* ``parse_partial_programs`` scrapes the catalog index (``https://www.vier.be/``)
  into ``PartialProgram`` entries.  Every anchor is validated on its own and
  *all* defects of the page are reported together.
* ``parse_program_page`` decodes the ``data-hero`` JSON blob of a program
  page into a full ``Program``.
"""

from __future__ import annotations

import logging
from typing import List, Union

from bs4.element import Tag
from pydantic import TypeAdapter

from vier.models import PartialProgram, Program
from vier.parsers.common import (
    DECODE_ERRORS,
    has_marker,
    make_soup,
    read_marker_json,
    validate,
)
from vier.responses import (
    Failure,
    HtmlError,
    HtmlErrorKind,
    Invalid,
    collect_all,
    html_parsing,
    json_parsing,
)

logger = logging.getLogger(__name__)

PROGRAM_LINK_SELECTOR = 'a.program-overview__link'
PROGRAM_DATA_ATTRIBUTE = 'data-hero'

_program_adapter = TypeAdapter(Program)


# ---------------------------------------------------------------------------
# Catalog index
# ---------------------------------------------------------------------------

def _validate_program_link(link: Tag, position: int) -> Union[PartialProgram, Invalid]:
    href = link.get('href')
    name = link.get_text(strip=True)

    missing = []
    if not href:
        missing.append('href')
    if not name:
        missing.append('text')
    if missing:
        return Invalid((HtmlError(
            kind=HtmlErrorKind.INVALID_ELEMENT,
            selector=PROGRAM_LINK_SELECTOR,
            position=position,
            missing=tuple(missing),
        ),))
    return PartialProgram(name=name, path=href)


def parse_partial_programs(html_content: str) -> Union[List[PartialProgram], Failure]:
    """Return every program listed on the catalog index, in page order.

    Fails with an ``HTML_PARSING`` failure holding one error per malformed
    anchor, or a single ``NO_SELECTION`` error when the page lists nothing.
    """
    soup = make_soup(html_content)
    links = soup.select(PROGRAM_LINK_SELECTOR)
    if not links:
        logger.warning("No program links found ('%s')", PROGRAM_LINK_SELECTOR)
        return html_parsing([HtmlError(HtmlErrorKind.NO_SELECTION, PROGRAM_LINK_SELECTOR)])

    result = collect_all(_validate_program_link(link, i) for i, link in enumerate(links))
    if isinstance(result, Invalid):
        logger.warning('%d of %d program links are malformed', len(result.errors), len(links))
        return html_parsing(result.errors)

    logger.debug('Parsed %d partial programs', len(result))
    return result


# ---------------------------------------------------------------------------
# Program page
# ---------------------------------------------------------------------------

def has_program_data(html_content: str) -> bool:
    """Cheap probe for the ``data-hero`` marker of a full program page."""
    return has_marker(html_content, PROGRAM_DATA_ATTRIBUTE)


def parse_program_page(html_content: str) -> Union[Program, Failure]:
    hero = read_marker_json(html_content, PROGRAM_DATA_ATTRIBUTE)
    if isinstance(hero, Failure):
        return hero

    try:
        data = hero['data']
    except DECODE_ERRORS as exc:
        logger.debug("'%s' payload has no 'data' object", PROGRAM_DATA_ATTRIBUTE)
        return json_parsing(exc)

    return validate(_program_adapter, data)
