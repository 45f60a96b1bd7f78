from __future__ import annotations

import os
import sys
import time
from datetime import datetime, timezone
from typing import Dict, Literal, Optional, TextIO


LogLevel = Literal["DEBUG", "INFO", "WARN", "ERROR"]

_LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}

# minimum level for the shared logger, e.g. EMOJI_CATALOG_LOG_LEVEL=DEBUG
LEVEL_ENV = "EMOJI_CATALOG_LOG_LEVEL"


class Logger:
    """
    A simple, typed logger used across the project.
    Writes `[timestamp] [LEVEL] message` lines to a text stream and drops
    anything below `level`.
    """

    def __init__(self, stream: Optional[TextIO] = None, level: str = "WARN") -> None:
        # None means "whatever sys.stderr is at write time" (plays well with capture)
        self.stream = stream
        self.level = level.upper() if level.upper() in _LEVELS else "WARN"

    def enabled(self, level: LogLevel) -> bool:
        return _LEVELS[level] >= _LEVELS[self.level]

    def _log(self, level: LogLevel, msg: str) -> None:
        if not self.enabled(level):
            return
        timestamp = datetime.now(timezone.utc).isoformat()
        out = self.stream if self.stream is not None else sys.stderr
        out.write(f"[{timestamp}] [{level}] {msg}\n")

    def debug(self, msg: str) -> None:
        self._log("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._log("INFO", msg)

    def warn(self, msg: str) -> None:
        self._log("WARN", msg)

    def error(self, msg: str) -> None:
        self._log("ERROR", msg)


# shared instance; components log through this
log = Logger(level=os.environ.get(LEVEL_ENV, "WARN"))


def time_block(label: str, logger: Optional[Logger] = None) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("[SearchIndex] build"):
            do_some_work()
    The duration is logged at DEBUG when the block exits.
    """
    return _Timer(label, logger or log)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str, logger: Logger):
        self.label = label
        self.logger = logger
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.logger.debug(f"{self.label} done in {self.elapsed * 1000:.1f}ms")
        return False
