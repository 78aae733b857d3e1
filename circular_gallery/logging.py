"""Frame-stamped logging.

Every line starts with seconds since start-up and the render frame number,
followed by a ``[TAG]`` chosen by the caller:

    [  1.204s F000072] [LOAD] seed-3.jpg (800x600)
"""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO


class Logger:
    def __init__(self, stream: Optional[TextIO] = None):
        self.started = time.perf_counter()
        self.frame = 0
        self.enabled = True
        self.stream = stream

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self.started

    def increment_frame(self) -> None:
        self.frame += 1

    def format(self, msg: str) -> str:
        return f"[{self.elapsed:7.3f}s F{self.frame:06d}] {msg}\n"

    def log(self, msg: str) -> None:
        if not self.enabled:
            return
        line = self.format(msg)
        out = self.stream if self.stream is not None else sys.stdout
        try:
            out.write(line)
            out.flush()
        except (OSError, ValueError):
            # closed or broken pipe
            sys.stderr.write(line)

    __call__ = log


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    get_logger().log(msg)


def set_enabled(enabled: bool) -> None:
    """Silence (or restore) the shared logger, e.g. for --quiet."""
    get_logger().enabled = enabled


def increment_frame() -> None:
    get_logger().increment_frame()


def now() -> float:
    """Monotonic high-resolution time in seconds."""
    return time.perf_counter()
