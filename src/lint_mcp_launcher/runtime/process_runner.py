"""Process runner that hands the terminal over to the child.

lint-mcp launcher runtime module

This module provides:
- Spawning with inherited stdin/stdout/stderr (no launcher-owned buffering)
- Signal forwarding scoped to the child's lifetime
- Classification of the child's termination (exit code vs. signal)

Key design points:
- The child stays in the launcher's session/process group
- The environment is copied, never mutated
- Cancellation from an embedding caller kills the child before returning
"""

from __future__ import annotations

import logging
import os
import signal
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import anyio

from ..errors import EXIT_FAILURE, EXIT_SUCCESS, SpawnError
from ..signal_forwarder import FORWARDED_SIGNALS, SignalForwarder, open_signal_subscription

__all__ = [
    "ChildOutcome",
    "ProcessRunner",
    "ProcessSpec",
]

logger = logging.getLogger(__name__)

# Platform detection
IS_WINDOWS = sys.platform == "win32"


@dataclass(frozen=True)
class ProcessSpec:
    """Specification for the child process.

    Attributes:
        argv: Command line arguments (first element is the executable)
        env: Environment variables (None = copy of the parent's)
        cwd: Working directory (None = inherit)
    """

    argv: list[str]
    env: Mapping[str, str] | None = None
    cwd: Path | None = None


@dataclass(frozen=True)
class ChildOutcome:
    """How the child terminated.

    On POSIX a negative return code ``-N`` means the child was killed by
    signal ``N``.
    """

    returncode: int

    @property
    def signal(self) -> signal.Signals | None:
        if IS_WINDOWS or self.returncode >= 0:
            return None
        try:
            return signal.Signals(-self.returncode)
        except ValueError:
            return None

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def exit_code(self) -> int:
        """Exit status the launcher should terminate with."""
        if self.ok:
            return EXIT_SUCCESS
        if self.returncode < 0:
            return EXIT_FAILURE
        return self.returncode


@dataclass
class ProcessRunner:
    """Runs one child with inherited stdio and forwards signals to it.

    Example:
        runner = ProcessRunner()
        outcome = await runner.run(ProcessSpec(argv=["/opt/bin/lint-mcp"]))
        sys.exit(outcome.exit_code)
    """

    forward_signals: Sequence[signal.Signals] = field(default=FORWARDED_SIGNALS)

    async def run(self, spec: ProcessSpec) -> ChildOutcome:
        """Run the child to completion.

        This method:
        1. Subscribes to the forwarded signals
        2. Starts the child with stdin/stdout/stderr inherited
        3. Relays signals (including any queued during spawn) to the child
        4. Waits for the child without a timeout
        5. Removes the signal subscription

        Args:
            spec: Process specification

        Returns:
            The child's outcome

        Raises:
            SpawnError: If the operating system cannot start the child
        """
        env = dict(spec.env) if spec.env is not None else dict(os.environ)

        # Subscribe before the fork; signals received during spawn are queued
        with open_signal_subscription(self.forward_signals) as received:
            try:
                process = await anyio.open_process(
                    spec.argv,
                    stdin=None,
                    stdout=None,
                    stderr=None,
                    cwd=spec.cwd,
                    env=env,
                )
            except OSError as e:
                raise SpawnError(spec.argv[0], e) from e

            logger.debug(f"Started subprocess pid={process.pid} argv={spec.argv[0]}")

            # Closing the process waits for it; if we are cancelled it is killed first
            async with process:
                forwarder = SignalForwarder(process, received)
                async with anyio.create_task_group() as tg:
                    tg.start_soon(forwarder.run)
                    await process.wait()
                    tg.cancel_scope.cancel()

        outcome = ChildOutcome(process.returncode)
        logger.debug(
            f"Subprocess completed pid={process.pid} "
            f"returncode={outcome.returncode}"
        )
        return outcome
