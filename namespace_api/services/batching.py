from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_GROUP_SIZE = 5
DEFAULT_PAUSE = 0.1

_logger = logging.getLogger(__name__)


def partition(items: Sequence[T], group_size: int) -> list[Sequence[T]]:
    if group_size < 1:
        raise ValueError("group_size must be at least 1.")
    return [items[start : start + group_size] for start in range(0, len(items), group_size)]


async def run_in_groups(
    items: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    *,
    group_size: int = DEFAULT_GROUP_SIZE,
    pause: float = DEFAULT_PAUSE,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    logger: logging.Logger | None = None,
) -> list[R | Exception]:
    """Run ``worker`` over ``items`` in sequential groups of concurrent calls.

    Every member of a group is awaited before the next group starts, and
    ``pause`` seconds elapse between groups. The returned list lines up with
    ``items``: each slot holds the worker's result or the exception it raised.
    One failing item never cancels the others.
    """
    logger = logger or _logger
    groups = partition(items, group_size)
    outcomes: list[R | Exception] = []
    for number, group in enumerate(groups, start=1):
        if number > 1 and pause > 0:
            logger.debug("Waiting %.3fs before group %d", pause, number)
            await sleep(pause)
        logger.info("Processing group %d/%d (%d items)", number, len(groups), len(group))
        results = await asyncio.gather(
            *(worker(item) for item in group), return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
        outcomes.extend(results)
    return outcomes
