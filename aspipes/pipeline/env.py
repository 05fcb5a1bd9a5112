"""Isolated pipeline environments.

Each environment owns one registry. Pipelines and operations created from
different environments never share construction state.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from .base import Pipeline, pipe_fn
from .operations import Operation, compose, lift
from .registry import Registry


@dataclass
class Pipes:
    """Construction API bound to a single registry."""

    registry: Registry = field(default_factory=Registry)

    def begin(self, initial_value: Any) -> Pipeline:
        """Start a pipeline. Its context is pushed lazily, on first declaration."""
        return Pipeline(initial_value, self.registry)

    def lift(self, target: Any) -> Any:
        return lift(target, registry=self.registry)

    def compose(self, *operations: Any) -> Operation:
        return compose(*operations, registry=self.registry)

    def pipe_fn(self, build: Callable[[Pipeline], Any]) -> Callable:
        return pipe_fn(build, registry=self.registry)


def create_pipes(name: str | None = None) -> Pipes:
    """Create an environment with its own registry."""
    return Pipes(Registry(name))


DEFAULT_PIPES = create_pipes("default")
