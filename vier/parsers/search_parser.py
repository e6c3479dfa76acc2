"""
Parser for the search index response (``POST /search``).
"""

from __future__ import annotations

from typing import Tuple, Union

from pydantic import TypeAdapter

from vier.models import SearchHit
from vier.parsers.common import DECODE_ERRORS, load_json, validate
from vier.responses import Failure, json_parsing

_hits_adapter = TypeAdapter(Tuple[SearchHit, ...])


def parse_search_results(json_content: str) -> Union[Tuple[SearchHit, ...], Failure]:
    """Decode the ``hits.hits`` array, keeping the index ranking order."""
    data = load_json(json_content)
    if isinstance(data, Failure):
        return data

    try:
        hits = data['hits']['hits']
    except DECODE_ERRORS as exc:
        return json_parsing(exc)

    return validate(_hits_adapter, hits)
