"""Deferred pipeline construction and evaluation.

This module provides:
- Registry: task-local stack of pipelines under construction
- Pipeline: handle that collects steps and folds them on run()
- Operation: lifted callable, bare or with bound arguments
- Pipes: isolated environment bundling the construction API
"""

from .base import Pipeline, pipe_fn, run_steps
from .context import PipelineContext, StepFn
from .env import DEFAULT_PIPES, Pipes, create_pipes
from .operations import Operation, Value, compose, flatten_result, lift
from .registry import AspipesError, EmptyRegistryError, Registry

__all__ = [
    "AspipesError",
    "DEFAULT_PIPES",
    "EmptyRegistryError",
    "Operation",
    "Pipeline",
    "PipelineContext",
    "Pipes",
    "Registry",
    "StepFn",
    "Value",
    "compose",
    "create_pipes",
    "flatten_result",
    "lift",
    "pipe_fn",
    "run_steps",
]
