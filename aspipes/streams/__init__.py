"""Stream operations for lazy, possibly infinite, async sequences.

``map``, ``filter``, ``take``, ``scan`` and ``reduce`` here are bound to the
default environment. Use ``create_stream_pipes(pipes.lift)`` for an isolated
one.
"""

from ..pipeline.env import DEFAULT_PIPES
from .combinators import (
    UNSET,
    StreamPipes,
    create_stream_pipes,
    filter_items,
    map_items,
    reduce_items,
    scan_items,
    take_items,
)
from .sources import collect, delayed_stream, ensure_async_iterable, event_stream

map, filter, take, scan, reduce = create_stream_pipes(DEFAULT_PIPES.lift)

__all__ = [
    "UNSET",
    "StreamPipes",
    "collect",
    "create_stream_pipes",
    "delayed_stream",
    "ensure_async_iterable",
    "event_stream",
    "filter",
    "filter_items",
    "map",
    "map_items",
    "reduce",
    "reduce_items",
    "scan",
    "scan_items",
    "take",
    "take_items",
]
