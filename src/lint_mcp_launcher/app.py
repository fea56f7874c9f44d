"""lint-mcp 启动器应用入口。

包含子进程生命周期管理和主入口点。
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import anyio

from .binary import get_binary_path
from .config import Config, get_config
from .errors import EXIT_SUCCESS, BinaryNotFoundError, ChildExitError, LauncherError
from .runtime import ProcessRunner, ProcessSpec

__all__ = ["run_launcher", "start_server", "configure_logging", "main"]

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


async def run_launcher(
    binary_path: Path | None = None,
    runner: ProcessRunner | None = None,
) -> int:
    """运行 lint-mcp 子进程并返回启动器应使用的退出码。

    流程严格线性：解析路径 -> 检查存在 -> 启动 -> 等待退出。
    所有错误都是终止性的，报告到 stderr 后返回对应退出码，不重试。

    Args:
        binary_path: 二进制路径（默认自动解析）
        runner: 进程运行器（默认新建）

    Returns:
        0 表示子进程正常退出；否则为非零退出码
    """
    path = binary_path if binary_path is not None else get_binary_path()
    runner = runner or ProcessRunner()

    try:
        if not path.is_file():
            raise BinaryNotFoundError(path)

        outcome = await runner.run(ProcessSpec(argv=[str(path)]))
        if not outcome.ok:
            raise ChildExitError(outcome)

    except BinaryNotFoundError as e:
        logger.error(str(e))
        logger.error(e.hint)
        return e.exit_code

    except LauncherError as e:
        logger.error(str(e))
        return e.exit_code

    return EXIT_SUCCESS


def start_server(binary_path: Path | None = None) -> None:
    """启动 lint-mcp 并等待其结束。

    子进程以 0 退出时正常返回；其他情况抛出 SystemExit，退出码与子进程结果一致。
    已在事件循环中运行的调用方应直接 await run_launcher()。
    """
    exit_code = anyio.run(run_launcher, binary_path)
    if exit_code != EXIT_SUCCESS:
        sys.exit(exit_code)


def configure_logging(config: Config) -> None:
    """配置日志输出。

    错误报告始终输出到 stderr（stdout 属于子进程的协议流）；
    LOG_DEBUG 模式额外写入临时日志文件。
    """
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    log_handlers: list[logging.Handler] = [stderr_handler]

    if config.log_debug and config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log_handlers.append(file_handler)
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    # 配置 root logger（第三方库）为 WARNING，减少噪音
    logging.basicConfig(
        level=logging.WARNING,
        handlers=log_handlers,
    )
    # 只对 lint_mcp_launcher 命名空间启用详细日志
    logging.getLogger("lint_mcp_launcher").setLevel(log_level)


def main() -> None:
    """主入口点。"""
    config = get_config()
    configure_logging(config)
    logger.debug(f"Starting lint-mcp launcher: {config}")
    start_server()


if __name__ == "__main__":
    main()
