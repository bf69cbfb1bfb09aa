"""
日誌與計時工具

所有 logger 都掛在 "conceptsearch" 命名空間之下。
函式庫本身預設不安裝任何 handler，使用者可以透過標準 logging 控制輸出：

    import logging
    logging.getLogger("conceptsearch").setLevel(logging.DEBUG)

或使用便捷函數：

    from conceptsearch import enable_debug_logging
    enable_debug_logging()
"""

from __future__ import annotations

import logging
import sys
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "conceptsearch"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# 由 setup_logger() 安裝的 handler，重複呼叫時更新等級與 (有指定時的) 輸出目標
_handler: Optional[logging.StreamHandler] = None

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 conceptsearch 命名空間下的 logger

    Args:
        name: 子模組名稱 (例如 "search.concept")，None 表示根 logger

    Returns:
        logging.Logger: "conceptsearch.<name>"
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, stream=None) -> logging.Logger:
    """
    為 conceptsearch 根 logger 安裝單一 stream handler

    Args:
        level: 日誌等級
        stream: 輸出目標，預設 sys.stderr；handler 已存在時改寫到新的 stream

    Returns:
        logging.Logger: 根 logger
    """
    global _handler

    logger = get_logger()
    logger.setLevel(level)

    if _handler is None or _handler not in logger.handlers:
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(fmt=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT))
        logger.addHandler(_handler)
    elif stream is not None:
        _handler.setStream(stream)
    _handler.setLevel(level)

    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級輸出 (包含建構與掃描的計時資訊)"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時 logger 的 DEBUG 輸出，其餘維持 INFO"""
    logger = setup_logger(level=logging.INFO)
    _handler.setLevel(logging.DEBUG)
    get_logger("timing").setLevel(logging.DEBUG)
    return logger


class TimingContext:
    """
    計時上下文管理器

    使用範例:
        with TimingContext("AhoCorasick.build", logger):
            ...

    Args:
        operation: 操作名稱
        logger: 輸出用 logger，None 時使用 "conceptsearch.timing"
        level: 日誌等級
        callback: 計時回呼 (operation, elapsed_seconds) -> None
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed: float = 0.0
        self._start: float = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start

        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")

        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")

        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    Args:
        operation: 操作名稱，預設為函數的 __qualname__
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
