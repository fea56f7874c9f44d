"""lint-mcp launcher - 启动预编译的 lint-mcp MCP 服务器。

环境变量:
    LINT_MCP_BIN_DIR: 二进制文件所在目录（默认为包内置 bin/）
    LINT_MCP_LOG_DEBUG: 日志调试模式 (默认 false)

用法:
    uvx lint-mcp
"""

__version__ = "0.1.0"

from .app import main, run_launcher, start_server
from .binary import get_binary_path

__all__ = ["__version__", "get_binary_path", "main", "run_launcher", "start_server"]
