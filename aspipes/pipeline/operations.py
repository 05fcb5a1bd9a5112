"""Lifting plain callables into pipeline operations.

An Operation wraps a callable so it can be declared as a pipeline step,
either bare (``pipeline | upper``) or with extra arguments bound first
(``pipeline | exclaim("!!!")``). Binding never registers anything; only
declaring does.

Steps whose callable builds a nested pipeline are flattened: returning a
Pipeline handle means "run it and use its result". ``Value`` marks a result
that must be used verbatim.
"""

import functools
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Tuple

from .base import Pipeline
from .context import PipelineContext, StepFn
from .registry import Registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Value:
    """Step result used as-is, even when it is a Pipeline."""

    value: Any


async def flatten_result(result: Any) -> Any:
    if isinstance(result, Value):
        return result.value
    if isinstance(result, Pipeline):
        logger.debug(f"Flattening nested {result!r}")
        return await result.run()
    return result


class Operation:
    """A lifted callable, optionally pre-bound with extra arguments."""

    def __init__(
        self,
        fn: Callable,
        args: Tuple[Any, ...] = (),
        kwargs: Dict[str, Any] | None = None,
        *,
        registry: Registry,
        name: str | None = None,
    ):
        if not callable(fn):
            raise TypeError(f"Operation requires a callable, got {type(fn).__name__}")
        functools.update_wrapper(self, fn, updated=())
        self.fn = fn
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})
        self.registry = registry
        self.name = name or getattr(fn, "__name__", type(fn).__name__)

    @property
    def is_bound(self) -> bool:
        return bool(self.args or self.kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> "Operation":
        """Return a new operation with extra arguments bound. Registers nothing."""
        return Operation(
            self.fn,
            self.args + args,
            {**self.kwargs, **kwargs},
            registry=self.registry,
            name=self.name,
        )

    def step(self) -> StepFn:
        """Build the async step function appended to a pipeline context."""
        fn, args, kwargs, registry = self.fn, self.args, self.kwargs, self.registry

        async def step(accumulated: Any) -> Any:
            depth = len(registry)
            try:
                result = fn(accumulated, *args, **kwargs)
                if inspect.isawaitable(result):
                    result = await result
            finally:
                nested = registry.unwind(depth)

            returned = result.context if isinstance(result, Pipeline) else None
            abandoned = [context for context in nested if context is not returned]
            if abandoned:
                # Built but neither returned nor run: left for the GC.
                logger.debug(
                    f"Step {step.__name__} abandoned {len(abandoned)} nested pipeline(s)"
                )
            return await flatten_result(result)

        step.__name__ = step.__qualname__ = self.name
        return step

    def declare(self, registry: Registry | None = None) -> PipelineContext:
        """
        Append this operation as a step of the active pipeline.

        Args:
            registry: Registry to declare into, defaults to the operation's own

        Returns:
            The context that received the step

        Raises:
            EmptyRegistryError: If no pipeline is under construction
        """
        if registry is None:
            registry = self.registry
        context = registry.peek()
        context.add_step(self.step())
        logger.debug(f"Declared {self!r} as step {len(context.steps)}")
        return context

    def __repr__(self) -> str:
        if not self.is_bound:
            return f"Operation({self.name})"
        bound = [repr(arg) for arg in self.args]
        bound += [f"{key}={value!r}" for key, value in self.kwargs.items()]
        return f"Operation({self.name}({', '.join(bound)}))"


def lift(target: Any, *, registry: Registry) -> Any:
    """
    Lift a callable, or every callable in a mapping, into operations.

    Non-callable mapping values pass through unchanged. To lift an object's
    methods or a module's functions, pass a mapping built from it, e.g.
    ``lift(vars(math))``.

    Raises:
        TypeError: If target is neither callable nor a mapping
    """
    if isinstance(target, Operation):
        return target
    if isinstance(target, Mapping):
        return {
            key: lift(value, registry=registry) if callable(value) else value
            for key, value in target.items()
        }
    if callable(target):
        return Operation(target, registry=registry)
    raise TypeError(
        f"Cannot lift {type(target).__name__}: expected a callable or a mapping"
    )


def compose(*operations: Any, registry: Registry) -> Operation:
    """
    Combine operations into a single operation.

    The composed operation builds a nested pipeline from its input and the
    given operations, which the outer pipeline then flattens.
    """
    ops = [
        op if isinstance(op, Operation) else Operation(op, registry=registry)
        for op in operations
    ]

    def composed(value: Any) -> Pipeline:
        pipeline = Pipeline(value, registry)
        for op in ops:
            pipeline.then(op)
        return pipeline

    name = f"compose({', '.join(op.name for op in ops)})"
    return Operation(composed, registry=registry, name=name)
