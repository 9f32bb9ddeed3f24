from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from logdorak.backends.base import LogBackend
from logdorak.types import LogLevel


@dataclass
class LogRecord:
    level: LogLevel
    message: str
    logger_name: str
    error: Optional[BaseException] = None
    timestamp: Optional[datetime] = None


class InMemoryBackend(LogBackend):
    """
    Backend that keeps every record in a list instead of emitting it.

    Usage:
        backend = InMemoryBackend("billing")
        Logger("billing", backend=backend).info("charged ", 12, "EUR")
        backend.records()[0].message  # "charged 12EUR"
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._records: List[LogRecord] = []

    def records(self, level: Optional[LogLevel] = None) -> List[LogRecord]:
        """Return a copy of the stored records, optionally for one level."""
        if level is None:
            return list(self._records)
        return [r for r in self._records if r.level == level]

    def clear(self) -> None:
        self._records.clear()

    def _add(self, level: LogLevel, message: str, error: Optional[BaseException]) -> None:
        self._records.append(
            LogRecord(
                level=level,
                message=message,
                logger_name=self._name,
                error=error,
                timestamp=datetime.now(timezone.utc),
            )
        )

    def error(self, message: str, error: Optional[BaseException] = None) -> None:
        self._add(LogLevel.ERROR, message, error)

    def warn(self, message: str, error: Optional[BaseException] = None) -> None:
        self._add(LogLevel.WARN, message, error)

    def info(self, message: str, error: Optional[BaseException] = None) -> None:
        self._add(LogLevel.INFO, message, error)

    def debug(self, message: str, error: Optional[BaseException] = None) -> None:
        self._add(LogLevel.DEBUG, message, error)

    def trace(self, message: str, error: Optional[BaseException] = None) -> None:
        self._add(LogLevel.TRACE, message, error)
