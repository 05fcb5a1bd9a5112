"""Pending-construction registry for pipelines being declared.

The registry is a LIFO stack whose top entry is the context currently
accepting step declarations. The stack lives in a ``contextvars.ContextVar``
so each asyncio task (and each thread) works on its own copy; pipelines built
concurrently on different tasks never see each other's entries.
"""

import contextvars
import itertools
import logging
from typing import List, Tuple

from .context import PipelineContext

logger = logging.getLogger(__name__)

_registry_ids = itertools.count()


class AspipesError(Exception):
    """Base class for aspipes errors."""


class EmptyRegistryError(AspipesError, LookupError):
    """Raised when a declaration happens with no pipeline under construction."""


class Registry:
    """Task-local stack of pipeline contexts under construction."""

    def __init__(self, name: str | None = None):
        self.name = name or f"registry-{next(_registry_ids)}"
        self._stack: contextvars.ContextVar[Tuple[PipelineContext, ...]] = (
            contextvars.ContextVar(f"aspipes_{self.name}", default=())
        )

    def push(self, context: PipelineContext) -> None:
        self._stack.set(self._stack.get() + (context,))

    def peek(self) -> PipelineContext:
        """Return the context currently accepting declarations."""
        stack = self._stack.get()
        if not stack:
            raise EmptyRegistryError(
                f"No pipeline is under construction in {self.name}"
            )
        return stack[-1]

    def pop(self) -> PipelineContext:
        stack = self._stack.get()
        if not stack:
            raise EmptyRegistryError(
                f"Cannot pop from {self.name}: no pipeline is under construction"
            )
        self._stack.set(stack[:-1])
        return stack[-1]

    def unwind(self, depth: int) -> List[PipelineContext]:
        """
        Pop every entry above ``depth``.

        Args:
            depth: Stack size to restore

        Returns:
            Popped contexts, most recently pushed first
        """
        popped = []
        while len(self) > depth:
            popped.append(self.pop())
        return popped

    def is_active(self, context: PipelineContext) -> bool:
        stack = self._stack.get()
        return bool(stack) and stack[-1] is context

    def discard(self, context: PipelineContext) -> int:
        """Remove every occurrence of ``context``. Returns how many were removed."""
        stack = self._stack.get()
        kept = tuple(entry for entry in stack if entry is not context)
        self._stack.set(kept)
        return len(stack) - len(kept)

    def __len__(self) -> int:
        return len(self._stack.get())

    def __repr__(self) -> str:
        return f"Registry(name={self.name!r}, depth={len(self)})"
