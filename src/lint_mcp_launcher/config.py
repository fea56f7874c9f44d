"""lint-mcp 启动器环境变量配置管理。

环境变量:
    LINT_MCP_BIN_DIR: 二进制文件所在目录
        - 空/未设置 = 使用包内置的 bin/ 目录 (默认)
        - 例: "/opt/lint-mcp/bin"

    LINT_MCP_LOG_DEBUG: 日志调试模式
        - true/1/yes/on = 开启 (DEBUG 级别，并额外输出到临时文件)
        - false/0/no = 关闭 (默认，只输出到 stderr)

注意：这些变量只影响启动器本身，子进程仍会原样收到完整的环境变量。
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

__all__ = ["Config", "load_config", "get_config", "reload_config"]


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """解析布尔值环境变量。"""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _parse_bin_dir(value: str | None) -> Path | None:
    """解析二进制目录环境变量。

    Args:
        value: 环境变量值，支持 ~ 展开

    Returns:
        目录路径，空值返回 None
    """
    if not value or not value.strip():
        return None
    return Path(value.strip()).expanduser()


@dataclass
class Config:
    """启动器配置。

    Attributes:
        bin_dir: 二进制文件目录覆盖，None 表示使用包内置目录
        log_debug: 日志调试模式
        log_file: 日志文件路径（当 log_debug=True 时自动设置）
    """

    bin_dir: Path | None = None
    log_debug: bool = False
    log_file: str | None = None

    def __repr__(self) -> str:
        return (
            f"Config(bin_dir={self.bin_dir or 'bundled'}, "
            f"log_debug={self.log_debug}, "
            f"log_file={self.log_file})"
        )


def _generate_log_file_path() -> str:
    """生成日志文件路径。

    Returns:
        临时目录下的日志文件绝对路径
    """
    log_dir = Path(tempfile.gettempdir()) / "lint-mcp"
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"launcher_debug_{timestamp}.log"

    return str(log_file.resolve())


def load_config() -> Config:
    """从环境变量加载配置。"""
    log_debug = _parse_bool(os.environ.get("LINT_MCP_LOG_DEBUG"), default=False)
    log_file = _generate_log_file_path() if log_debug else None

    return Config(
        bin_dir=_parse_bin_dir(os.environ.get("LINT_MCP_BIN_DIR")),
        log_debug=log_debug,
        log_file=log_file,
    )


# 全局配置实例（延迟加载）
_config: Config | None = None


def get_config() -> Config:
    """获取全局配置实例。"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """重新加载配置（用于测试）。"""
    global _config
    _config = load_config()
    return _config
