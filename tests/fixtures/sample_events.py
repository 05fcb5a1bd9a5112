"""Sample event data and sources for stream tests."""

from typing import Any, AsyncIterator, Dict, List


MOUSE_EVENTS: List[Dict[str, Any]] = [
    {"type": "mousemove", "x": 10, "y": 20},
    {"type": "click", "x": 10, "y": 20},
    {"type": "mousemove", "x": 15, "y": 25},
    {"type": "click", "x": 15, "y": 25},
    {"type": "mousemove", "x": 20, "y": 30},
    {"type": "click", "x": 20, "y": 30},
]

DRAG_EVENTS: List[Dict[str, Any]] = [
    {"type": "mousedown", "x": 10, "y": 10},
    {"type": "mousemove", "x": 15, "y": 15},
    {"type": "mousemove", "x": 20, "y": 20},
    {"type": "mousemove", "x": 25, "y": 25},
    {"type": "mouseup", "x": 25, "y": 25},
    {"type": "mousemove", "x": 30, "y": 30},
]

CLICK_EVENTS: List[Dict[str, Any]] = [
    {"type": "click", "timestamp": 100, "x": 10, "y": 10},
    {"type": "click", "timestamp": 150, "x": 10, "y": 10},
    {"type": "move", "timestamp": 200, "x": 15, "y": 15},
    {"type": "click", "timestamp": 500, "x": 20, "y": 20},
    {"type": "click", "timestamp": 600, "x": 20, "y": 20},
]

STATUS_EVENTS: List[Dict[str, str]] = [
    {"type": "load", "data": "starting"},
    {"type": "update", "data": "processing"},
    {"type": "update", "data": "processing"},
    {"type": "complete", "data": "finished"},
    {"type": "update", "data": "after"},
]


async def numbers(*values: Any) -> AsyncIterator[Any]:
    for value in values:
        yield value


async def naturals(start: int = 1) -> AsyncIterator[int]:
    """Endless 1, 2, 3, ..."""
    value = start
    while True:
        yield value
        value += 1


class CountingSource:
    """Infinite async source that records how many items were pulled."""

    def __init__(self, start: int = 1):
        self.next_value = start
        self.pulled = 0

    def __aiter__(self) -> "CountingSource":
        return self

    async def __anext__(self) -> int:
        value = self.next_value
        self.next_value += 1
        self.pulled += 1
        return value
