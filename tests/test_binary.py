"""Binary path resolution tests."""

from __future__ import annotations

import os
from pathlib import Path
from unittest import mock

import pytest

from lint_mcp_launcher.binary import (
    BINARY_NAME,
    INSTALL_DIR,
    binary_filename,
    get_binary_path,
    is_windows,
)
from lint_mcp_launcher.config import reload_config


class TestBinaryFilename:
    """Platform suffix rule."""

    def test_windows_gets_exe_suffix(self):
        assert binary_filename("win32") == "lint-mcp.exe"

    @pytest.mark.parametrize("os_id", ["linux", "darwin", "freebsd", "cygwin", "aix"])
    def test_other_platforms_have_no_suffix(self, os_id: str):
        assert binary_filename(os_id) == BINARY_NAME
        assert not is_windows(os_id)


class TestGetBinaryPath:
    """get_binary_path() tests."""

    def test_default_location_is_bundled_bin_dir(self):
        path = get_binary_path(os_id="linux", arch="x86_64")
        assert path == INSTALL_DIR / "bin" / "lint-mcp"
        assert path.is_absolute()

    def test_install_dir_is_joined_with_bin(self, tmp_path: Path):
        path = get_binary_path(os_id="linux", install_dir=tmp_path)
        assert path == tmp_path / "bin" / "lint-mcp"

    def test_windows_path_ends_with_exe(self, tmp_path: Path):
        path = get_binary_path(os_id="win32", install_dir=tmp_path)
        assert path.name == "lint-mcp.exe"
        assert str(path).endswith(".exe")

    def test_non_windows_path_has_no_suffix(self, tmp_path: Path):
        path = get_binary_path(os_id="darwin", install_dir=tmp_path)
        assert path.suffix == ""

    def test_deterministic(self, tmp_path: Path):
        first = get_binary_path(os_id="linux", arch="aarch64", install_dir=tmp_path)
        second = get_binary_path(os_id="linux", arch="aarch64", install_dir=tmp_path)
        assert first == second
        assert str(first) == str(second)

    @pytest.mark.parametrize("arch", ["x86_64", "arm64", "aarch64", "i386"])
    def test_architecture_does_not_change_name(self, tmp_path: Path, arch: str):
        path = get_binary_path(os_id="linux", arch=arch, install_dir=tmp_path)
        assert path == tmp_path / "bin" / "lint-mcp"

    def test_host_defaults(self):
        """Without arguments the host platform is used."""
        with mock.patch("lint_mcp_launcher.binary.sys.platform", "win32"):
            assert get_binary_path().name == "lint-mcp.exe"
        with mock.patch("lint_mcp_launcher.binary.sys.platform", "linux"):
            assert get_binary_path().name == "lint-mcp"

    def test_explicit_bin_dir_wins(self, tmp_path: Path):
        path = get_binary_path(os_id="linux", install_dir=tmp_path / "ignored", bin_dir=tmp_path)
        assert path == tmp_path / "lint-mcp"

    def test_configured_bin_dir(self, tmp_path: Path):
        with mock.patch.dict(os.environ, {"LINT_MCP_BIN_DIR": str(tmp_path)}):
            reload_config()
            path = get_binary_path(os_id="linux")
        assert path == tmp_path / "lint-mcp"

    def test_no_side_effects(self, tmp_path: Path):
        get_binary_path(os_id="linux", install_dir=tmp_path)
        assert list(tmp_path.iterdir()) == []
