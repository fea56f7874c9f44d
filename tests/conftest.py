"""Pytest 配置和 fixtures。"""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent

# 添加 src 目录到 Python 路径
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

FIXTURES_DIR = PROJECT_ROOT / "tests" / "fixtures"
FAKE_SERVER_PATH = FIXTURES_DIR / "fake_server.py"

IS_WINDOWS = sys.platform == "win32"

# 测试中会被修改的环境变量
FAKE_SERVER_VARS = (
    "FAKE_SERVER_LINES",
    "FAKE_SERVER_ECHO_ENV",
    "FAKE_SERVER_WAIT",
    "FAKE_SERVER_SELF_KILL",
    "FAKE_SERVER_EXIT_CODE",
)
LAUNCHER_VARS = ("LINT_MCP_BIN_DIR", "LINT_MCP_LOG_DEBUG")


def write_stand_in_binary(bin_dir: Path) -> Path:
    """在 bin_dir 中写入一个可执行的 lint-mcp 替身（转调 fake_server.py）。"""
    bin_dir.mkdir(parents=True, exist_ok=True)
    binary = bin_dir / "lint-mcp"
    binary.write_text(
        "#!/bin/sh\n"
        f'exec "{sys.executable}" -u "{FAKE_SERVER_PATH}"\n',
        encoding="utf-8",
    )
    binary.chmod(binary.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return binary


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """清理相关环境变量并重新加载配置。"""
    for name in FAKE_SERVER_VARS + LAUNCHER_VARS:
        monkeypatch.delenv(name, raising=False)

    from lint_mcp_launcher.config import reload_config

    reload_config()
    yield
    reload_config()


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """替身二进制所在目录。"""
    return tmp_path / "bin"


@pytest.fixture
def stand_in_binary(bin_dir: Path) -> Path:
    """可执行的 lint-mcp 替身（仅 POSIX）。"""
    if IS_WINDOWS:
        pytest.skip("Stand-in binary is a POSIX shell script")
    return write_stand_in_binary(bin_dir)


@pytest.fixture
def launcher_env(bin_dir: Path) -> dict[str, str]:
    """以子进程方式运行启动器时使用的环境变量。"""
    env = {
        k: v for k, v in os.environ.items()
        if k not in FAKE_SERVER_VARS + LAUNCHER_VARS
    }
    env["LINT_MCP_BIN_DIR"] = str(bin_dir)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(SRC_DIR), env.get("PYTHONPATH", "")) if p
    )
    return env
