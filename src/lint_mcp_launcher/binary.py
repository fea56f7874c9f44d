"""Location of the bundled lint-mcp binary.

The binary is built outside this package and dropped into ``bin/`` next to
this module. Only one file name exists per operating system family.
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

from .config import get_config

__all__ = [
    "BINARY_NAME",
    "BIN_SUBDIR",
    "INSTALL_DIR",
    "binary_filename",
    "get_binary_path",
    "is_windows",
]

logger = logging.getLogger(__name__)

BINARY_NAME = "lint-mcp"
BIN_SUBDIR = "bin"

# Directory the launcher itself is installed in
INSTALL_DIR = Path(__file__).resolve().parent


def is_windows(os_id: str) -> bool:
    """Return True for the platform family that needs an ``.exe`` suffix."""
    return os_id == "win32"


def binary_filename(os_id: str | None = None) -> str:
    """Return the executable file name for ``os_id`` (default: host OS)."""
    if os_id is None:
        os_id = sys.platform
    if is_windows(os_id):
        return f"{BINARY_NAME}.exe"
    return BINARY_NAME


def get_binary_path(
    *,
    os_id: str | None = None,
    arch: str | None = None,
    install_dir: Path | None = None,
    bin_dir: Path | None = None,
) -> Path:
    """Resolve the path of the lint-mcp binary.

    Args:
        os_id: Operating system identifier (default: ``sys.platform``)
        arch: CPU architecture (default: ``platform.machine()``). Read for
            diagnostics only; every architecture shares one file name.
        install_dir: Launcher installation directory (default: package dir)
        bin_dir: Directory holding the binary. Takes precedence over
            ``install_dir``; defaults to ``LINT_MCP_BIN_DIR`` when configured.

    Returns:
        Path of the binary. Existence is not checked here.
    """
    if os_id is None:
        os_id = sys.platform
    if arch is None:
        arch = platform.machine()

    if bin_dir is None:
        bin_dir = get_config().bin_dir
    if bin_dir is None:
        bin_dir = (install_dir or INSTALL_DIR) / BIN_SUBDIR

    path = Path(bin_dir) / binary_filename(os_id)
    logger.debug(f"Resolved binary path={path} platform={os_id} arch={arch}")
    return path
