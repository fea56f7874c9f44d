"""Runtime module for supervising the lint-mcp child process.

This module provides process execution with inherited standard streams,
signal forwarding and exit-status classification.
"""

from __future__ import annotations

from .process_runner import ChildOutcome, ProcessRunner, ProcessSpec

__all__ = [
    "ChildOutcome",
    "ProcessRunner",
    "ProcessSpec",
]
