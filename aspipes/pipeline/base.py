import inspect
import logging
from typing import Any, Callable, Iterable

from .. import config
from .context import PipelineContext, StepFn
from .registry import Registry

logger = logging.getLogger(__name__)


def _step_name(step: Callable) -> str:
    return getattr(step, "__name__", repr(step))


async def run_steps(initial_value: Any, steps: Iterable[StepFn]) -> Any:
    """
    Fold steps left-to-right over the initial value.

    Each step receives the settled result of the previous one. The first
    exception stops the fold and propagates unchanged; no later step runs.
    """
    steps = list(steps)
    value = initial_value
    for index, step in enumerate(steps, start=1):
        if config.TRACE_STEPS:
            logger.debug(f"Step {index}/{len(steps)}: {_step_name(step)}")
        result = step(value)
        value = await result if inspect.isawaitable(result) else result
    return value


class Pipeline:
    """Handle to a deferred chain of steps. Declaring a step never executes it."""

    def __init__(self, initial_value: Any, registry: Registry):
        self.context = PipelineContext(initial_value)
        self.registry = registry

    def activate(self) -> "Pipeline":
        """Make this pipeline's context the one accepting declarations."""
        if not self.registry.is_active(self.context):
            self.registry.push(self.context)
        return self

    def then(self, operation) -> "Pipeline":
        """
        Append an operation as the next step and return this same handle.

        Plain callables are lifted first, so ``pipeline.then(str.upper)`` works.
        """
        from .operations import Operation

        if not isinstance(operation, Operation):
            operation = Operation(operation, registry=self.registry)
        self.activate()
        operation.declare(self.registry)
        return self

    def __or__(self, operation) -> "Pipeline":
        return self.then(operation)

    async def run(self) -> Any:
        """
        Evaluate every declared step. Safe to call again; nothing is memoized.

        Running ends construction: the context leaves the registry, so later
        declarations need a fresh ``then()`` or ``activate()``.
        """
        self.registry.discard(self.context)
        return await run_steps(self.context.initial_value, self.context.steps)

    def discard(self) -> None:
        """Drop this pipeline's context from the registry."""
        self.registry.discard(self.context)

    def __len__(self) -> int:
        return len(self.context.steps)

    def __repr__(self) -> str:
        step_names = [_step_name(step) for step in self.context.steps]
        return f"Pipeline(initial_value={self.context.initial_value!r}, steps={step_names})"


def pipe_fn(build: Callable[[Pipeline], Any], *, registry: Registry) -> Callable:
    """
    Turn a pipeline-building callable into a reusable async function.

    Example:
        format_name = pipe_fn(lambda v: v | trim | truncate(15) | bold, registry=...)
        await format_name("  John Doe  ")

    ``build`` receives a fresh pipeline for each call. If it returns a
    Pipeline, that one is run instead of the fresh one.
    """

    async def runner(value: Any) -> Any:
        pipeline = Pipeline(value, registry)
        depth = len(registry)
        try:
            built = build(pipeline)
        finally:
            registry.unwind(depth)
        if isinstance(built, Pipeline):
            pipeline = built
        return await pipeline.run()

    runner.__name__ = getattr(build, "__name__", "pipe_fn")
    return runner
