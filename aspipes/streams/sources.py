"""Async sequence producers and sinks used with the stream combinators."""

import asyncio
import logging
from typing import Any, AsyncIterable, AsyncIterator, Iterable, List

logger = logging.getLogger(__name__)


async def event_stream(events: Iterable[Any]) -> AsyncIterator[Any]:
    """Yield each event from an in-memory iterable."""
    for event in events:
        yield event


async def delayed_stream(events: Iterable[Any], delay: float = 0.0) -> AsyncIterator[Any]:
    """
    Yield each event after sleeping ``delay`` seconds.

    Simulates timer-driven sources (mouse moves, ticks). Abandoning the
    stream part-way is fine; nothing needs cleaning up.
    """
    for event in events:
        if delay > 0:
            await asyncio.sleep(delay)
        yield event


def ensure_async_iterable(source: Any) -> AsyncIterable[Any]:
    """Return source unchanged if it is async iterable, else adapt a plain iterable."""
    if hasattr(source, "__aiter__"):
        return source
    if hasattr(source, "__iter__"):
        return event_stream(source)
    raise TypeError(f"Expected an async iterable, got {type(source).__name__}")


async def collect(stream: Any) -> List[Any]:
    """Drain a stream into a list. Never call this on an infinite stream."""
    return [item async for item in ensure_async_iterable(stream)]
