"""Pipeline context: the initial value and ordered steps of one pipeline."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List

StepFn = Callable[[Any], Awaitable[Any]]


@dataclass(eq=False)
class PipelineContext:
    """
    Mutable accumulator backing one pipeline handle.

    Steps are appended while the context is the active registry entry and
    are evaluated in insertion order. Identity comparison only: two contexts
    with equal contents are still different pipelines.
    """

    initial_value: Any = None
    steps: List[StepFn] = field(default_factory=list)

    def add_step(self, step: StepFn) -> None:
        self.steps.append(step)
