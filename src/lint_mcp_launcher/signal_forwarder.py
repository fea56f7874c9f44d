"""信号转发模块。

把启动器收到的 OS 信号原样转发给子进程：
- SIGINT: 转发给子进程（启动器本身不退出）
- SIGTERM: 转发给子进程（启动器本身不退出）

启动器的退出只由子进程的退出驱动。信号订阅在启动子进程之前打开，
启动期间收到的信号会排队，待子进程存在后再转发；子进程结束后关闭订阅
并恢复原处理器，因此在同一进程中多次嵌入调用也不会遗留处理器。
"""

from __future__ import annotations

import contextlib
import logging
import signal
import sys
from collections.abc import AsyncIterator, Iterator, Sequence
from typing import Any

import anyio
from anyio.abc import Process

__all__ = ["SignalForwarder", "FORWARDED_SIGNALS", "open_signal_subscription"]

logger = logging.getLogger(__name__)

FORWARDED_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)

# Windows 上排队等待转发的信号上限
_WINDOWS_QUEUE_SIZE = 16


@contextlib.contextmanager
def open_signal_subscription(
    signals: Sequence[signal.Signals] = FORWARDED_SIGNALS,
) -> Iterator[AsyncIterator[int]]:
    """订阅信号，返回按到达顺序产出信号的异步迭代器。

    退出上下文时移除处理器。必须在事件循环中、主线程里调用。
    """
    if sys.platform != "win32":
        # POSIX: 通过事件循环订阅，退出上下文时自动移除处理器
        with anyio.open_signal_receiver(*signals) as received:
            logger.debug(f"Subscribed to {', '.join(s.name for s in signals)}")
            yield received
        return

    # Windows: 事件循环不支持信号处理器，使用 signal.signal() 并在退出时恢复
    send, receive = anyio.create_memory_object_stream(_WINDOWS_QUEUE_SIZE)
    original: dict[signal.Signals, Any] = {}

    def handler(signum: int, frame: Any) -> None:
        try:
            send.send_nowait(signum)
        except anyio.WouldBlock:
            logger.debug(f"Signal queue full, dropping {signal.Signals(signum).name}")

    try:
        for sig in signals:
            original[sig] = signal.signal(sig, handler)
        logger.debug("Signal handlers installed on Windows")
        yield receive
    finally:
        for sig, previous in original.items():
            try:
                signal.signal(sig, previous)
            except (OSError, ValueError) as e:
                logger.debug(f"Error restoring {sig.name} handler: {e}")
        send.close()
        receive.close()


class SignalForwarder:
    """信号转发器。

    从已打开的订阅中读取信号，并把每个信号转发给子进程。

    Example:
        ```python
        with open_signal_subscription() as received:
            process = await anyio.open_process(argv, stdin=None, stdout=None, stderr=None)
            async with anyio.create_task_group() as tg:
                tg.start_soon(SignalForwarder(process, received).run)
                await process.wait()
                tg.cancel_scope.cancel()
        ```

    Attributes:
        process: 接收信号的子进程
        received: 信号订阅（open_signal_subscription 的返回值）
        forwarded: 已转发的信号（按顺序）
    """

    def __init__(self, process: Process, received: AsyncIterator[int]) -> None:
        self.process = process
        self.received = received
        self.forwarded: list[signal.Signals] = []

    async def run(self) -> None:
        """持续转发订阅到的信号，直到被取消。"""
        logger.debug(f"Forwarding signals to pid={self.process.pid}")
        async for signum in self.received:
            self.forward(signum)

    def forward(self, signum: int) -> None:
        """把信号转发给子进程。子进程已退出时忽略。"""
        sig = signal.Signals(signum)
        if self.process.returncode is not None:
            logger.debug(f"{sig.name} received after child exit, ignored")
            return

        logger.info(f"{sig.name} received, forwarding to pid={self.process.pid}")
        try:
            self.process.send_signal(sig)
        except ProcessLookupError:
            # 子进程在检查与发送之间退出
            logger.debug(f"Child pid={self.process.pid} already exited")
            return
        except ValueError as e:
            # Windows 只支持 SIGTERM / CTRL_*_EVENT；同一控制台的子进程会自己收到 Ctrl+C
            logger.debug(f"Cannot forward {sig.name}: {e}")
            return
        self.forwarded.append(sig)
