"""Structured logging utilities.

Records are written as JSON lines and, when registered, handed to trace
hooks. Hooks let a caller observe solver intermediates (closure
coefficients, discriminants) without changing any function signature:

    records = []
    get_logger("fourbar.kinematics.solver").add_hook(records.append)
    set_log_level("DEBUG")
"""

from __future__ import annotations

import json
import sys
import time
from collections.abc import Callable
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

LEVELS = {"DEBUG": 0, "INFO": 1, "WARN": 2, "ERROR": 3}
DEFAULT_LEVEL = "INFO"


@dataclass
class LogRecord:
    """Structured log record."""

    level: str
    message: str
    timestamp: float = field(default_factory=time.time)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp,
            **self.data,
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str)


TraceHook = Callable[[LogRecord], None]


class StructuredLogger:
    """Simple structured logger with JSON output and trace hooks."""

    def __init__(
        self,
        name: str,
        output: TextIO | None = None,
        min_level: str = DEFAULT_LEVEL,
    ) -> None:
        self.name = name
        # None means "whatever sys.stderr is at emit time"
        self.output = output
        self._min_level = LEVELS.get(min_level.upper(), LEVELS[DEFAULT_LEVEL])
        self._hooks: list[TraceHook] = []

    def is_enabled_for(self, level: str) -> bool:
        return LEVELS.get(level, 0) >= self._min_level

    def set_level(self, level: str) -> None:
        self._min_level = LEVELS.get(level.upper(), LEVELS[DEFAULT_LEVEL])

    def add_hook(self, hook: TraceHook) -> None:
        """Register a callable that receives every emitted record."""
        self._hooks.append(hook)

    def remove_hook(self, hook: TraceHook) -> None:
        if hook in self._hooks:
            self._hooks.remove(hook)

    def _log(self, level: str, message: str, **data: Any) -> None:
        if not self.is_enabled_for(level):
            return

        record = LogRecord(level=level, message=message, data={"logger": self.name, **data})
        print(record.to_json(), file=self.output or sys.stderr)
        for hook in list(self._hooks):
            hook(record)

    def debug(self, message: str, **data: Any) -> None:
        """Log at DEBUG level."""
        self._log("DEBUG", message, **data)

    def info(self, message: str, **data: Any) -> None:
        """Log at INFO level."""
        self._log("INFO", message, **data)

    def warn(self, message: str, **data: Any) -> None:
        """Log at WARN level."""
        self._log("WARN", message, **data)

    def error(self, message: str, **data: Any) -> None:
        """Log at ERROR level."""
        self._log("ERROR", message, **data)

    @contextmanager
    def timer(self, operation: str):
        """Context manager for timing operations.

        Usage:
            with logger.timer("solve_theta4"):
                pair = solve_theta4(...)
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.debug(f"{operation} completed", elapsed_ms=elapsed * 1000)


# Global logger cache
_loggers: dict[str, StructuredLogger] = {}
_global_level = DEFAULT_LEVEL


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, min_level=_global_level)
    return _loggers[name]


def set_log_level(level: str) -> None:
    """Set minimum log level for all loggers, including ones created later.

    Args:
        level: One of DEBUG, INFO, WARN, ERROR.
    """
    global _global_level
    _global_level = level.upper() if level.upper() in LEVELS else DEFAULT_LEVEL
    for logger in _loggers.values():
        logger.set_level(_global_level)
