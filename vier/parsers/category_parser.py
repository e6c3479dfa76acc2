"""
Parser for the category model JSON.

A body without an ``items`` array is reported as ``EMPTY_JSON``: the
endpoint answers that way when it has nothing to list, which is different
from a payload that is present but malformed.
"""

from __future__ import annotations

import logging
from typing import Tuple, Union

from pydantic import TypeAdapter

from vier.models import Category
from vier.parsers.common import load_json, validate
from vier.responses import Failure, empty_json

logger = logging.getLogger(__name__)

_categories_adapter = TypeAdapter(Tuple[Category, ...])


def parse_categories(json_content: str) -> Union[Tuple[Category, ...], Failure]:
    data = load_json(json_content)
    if isinstance(data, Failure):
        return data

    items = data.get('items') if isinstance(data, dict) else None
    if items is None:
        logger.debug("Category payload has no 'items' array")
        return empty_json()

    return validate(_categories_adapter, items)
