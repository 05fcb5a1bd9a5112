"""Deferred async pipelines with lazy stream combinators."""

from .pipeline import (
    DEFAULT_PIPES,
    AspipesError,
    EmptyRegistryError,
    Operation,
    Pipeline,
    Pipes,
    Registry,
    Value,
    create_pipes,
)
from .streams import UNSET, collect, create_stream_pipes, delayed_stream, event_stream

# Construction API of the default environment
begin = DEFAULT_PIPES.begin
lift = DEFAULT_PIPES.lift
compose = DEFAULT_PIPES.compose
pipe_fn = DEFAULT_PIPES.pipe_fn

__version__ = "0.1.0"

__all__ = [
    "AspipesError",
    "DEFAULT_PIPES",
    "EmptyRegistryError",
    "Operation",
    "Pipeline",
    "Pipes",
    "Registry",
    "UNSET",
    "Value",
    "begin",
    "collect",
    "compose",
    "create_pipes",
    "create_stream_pipes",
    "delayed_stream",
    "event_stream",
    "lift",
    "pipe_fn",
]
