"""Lazy combinators over async sequences.

Each combinator takes the upstream sequence as its first argument, so once
lifted it can be declared as a pipeline step:

    numbers = begin(naturals())
    numbers | map(lambda x: x * 2) | filter(lambda x: x > 5) | take(3)
    await collect(await numbers.run())   # [6, 8, 10]

Everything except ``reduce`` returns a new async generator and pulls from
upstream only when the consumer pulls. Callbacks may be sync or async.
Upstream failures surface at the consumer's pull, unchanged.
"""

import inspect
from typing import Any, AsyncIterator, Callable, NamedTuple

from .sources import ensure_async_iterable


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def map_items(source: Any, fn: Callable[[Any], Any]) -> AsyncIterator[Any]:
    async for item in ensure_async_iterable(source):
        yield await _resolve(fn(item))


async def filter_items(source: Any, predicate: Callable[[Any], Any]) -> AsyncIterator[Any]:
    async for item in ensure_async_iterable(source):
        if await _resolve(predicate(item)):
            yield item


async def take_items(source: Any, n: int) -> AsyncIterator[Any]:
    """Yield at most ``n`` items. Item ``n + 1`` is never requested from upstream."""
    if n <= 0:
        return
    taken = 0
    async for item in ensure_async_iterable(source):
        yield item
        taken += 1
        if taken >= n:
            break


async def scan_items(
    source: Any,
    reducer: Callable[[Any, Any], Any],
    initial: Any = UNSET,
) -> AsyncIterator[Any]:
    """
    Yield the running accumulator after every item.

    Without an initial value the first item seeds the accumulator and is
    yielded as-is.
    """
    accumulator = initial
    seeded = initial is not UNSET
    async for item in ensure_async_iterable(source):
        if seeded:
            accumulator = await _resolve(reducer(accumulator, item))
        else:
            accumulator = item
            seeded = True
        yield accumulator


async def reduce_items(
    source: Any,
    reducer: Callable[[Any, Any], Any],
    initial: Any = UNSET,
) -> Any:
    """Fold the whole sequence; returns ``None`` for an empty, unseeded sequence."""
    accumulator = initial
    seeded = initial is not UNSET
    async for item in ensure_async_iterable(source):
        if seeded:
            accumulator = await _resolve(reducer(accumulator, item))
        else:
            accumulator = item
            seeded = True
    return accumulator if seeded else None


class StreamPipes(NamedTuple):
    map: Any
    filter: Any
    take: Any
    scan: Any
    reduce: Any


def create_stream_pipes(lift: Callable[[Callable], Any]) -> StreamPipes:
    """Lift the combinators with the given environment's ``lift``."""
    return StreamPipes(
        map=lift(map_items),
        filter=lift(filter_items),
        take=lift(take_items),
        scan=lift(scan_items),
        reduce=lift(reduce_items),
    )
