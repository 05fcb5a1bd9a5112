"""Shared test fixtures and sample data for aspipes tests.

This package provides:
- Sample event sequences (mouse, click, status events)
- Infinite sources that record how many items were pulled
"""

__all__ = [
    "sample_events",
]
