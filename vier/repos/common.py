"""
Shared plumbing for the HTTP repositories.

The transport is blocking (``requests``); ``fetch_text`` runs it on the
default worker thread pool so that the repositories stay ``async`` and the
transport call is their only suspension point.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Iterable, List, TypeVar, Union

from utils.request_handler import HttpRequest, RequestHandler
from vier.responses import Failure

logger = logging.getLogger(__name__)

T = TypeVar('T')


async def fetch_text(handler: RequestHandler, request: HttpRequest) -> Union[str, Failure]:
    return await asyncio.to_thread(handler.fetch, request)


async def gather_fail_fast(awaitables: Iterable[Awaitable[Union[T, Failure]]]) -> Union[List[T], Failure]:
    """Run *awaitables* concurrently and join them, stopping at a failure.

    All awaitables are scheduled at once.  Results are then collected in
    input order; the first ``Failure`` found in that order is returned and
    the siblings still pending are cancelled.  Work already handed to a
    worker thread runs to completion and its result is discarded.

    For a fixed input the reported failure is therefore always the one with
    the lowest position, whatever order the responses arrive in.
    """
    tasks = [asyncio.ensure_future(a) for a in awaitables]
    try:
        results: List[T] = []
        for position, task in enumerate(tasks):
            result = await task
            if isinstance(result, Failure):
                logger.debug('Fan-out item %d of %d failed: %s', position, len(tasks), result.describe())
                return result
            results.append(result)
        return results
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
