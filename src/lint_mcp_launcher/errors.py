"""Launcher exceptions and exit codes.

Every launcher failure is terminal. Each exception carries the exit status
the launcher terminates with.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .binary import BINARY_NAME

if TYPE_CHECKING:
    from .runtime.process_runner import ChildOutcome

__all__ = [
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    "LauncherError",
    "BinaryNotFoundError",
    "SpawnError",
    "ChildExitError",
]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class LauncherError(Exception):
    """Base launcher error."""

    exit_code: int = EXIT_FAILURE


class BinaryNotFoundError(LauncherError):
    """No binary at the resolved path. Raised before any spawn attempt.

    Attributes:
        path: The path that was checked
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Binary not found at {path}")

    @property
    def hint(self) -> str:
        return (
            f"Build the Go binary with \"go build -o {self.path}\" "
            "or point LINT_MCP_BIN_DIR at the directory that contains it."
        )


class SpawnError(LauncherError):
    """The operating system refused to start the binary.

    Attributes:
        path: Binary that failed to start
        cause: Underlying OSError
    """

    def __init__(self, path: Path | str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        message = cause.strerror or str(cause)
        super().__init__(f"Failed to start {BINARY_NAME}: {message}")


class ChildExitError(LauncherError):
    """The child terminated abnormally.

    ``exit_code`` mirrors the child's exit status, or is ``EXIT_FAILURE``
    when the child was killed by a signal.
    """

    def __init__(self, outcome: ChildOutcome) -> None:
        self.outcome = outcome
        self.exit_code = outcome.exit_code
        if outcome.signal is not None:
            message = f"{BINARY_NAME} was killed with signal {outcome.signal.name}"
        else:
            message = f"{BINARY_NAME} exited with code {outcome.returncode}"
        super().__init__(message)
