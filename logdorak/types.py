from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

from logdorak.config import NULL_PLACEHOLDER
from logdorak.sanitize import concat_sanitized


class LogLevel(str, Enum):
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


class EmptyLogCallError(IndexError):
    """Raised when a log call has neither fragments nor an exception."""

    def __init__(self, level: Optional[LogLevel] = None):
        where = f" at {level.value} level" if level is not None else ""
        super().__init__(f"log call{where} needs at least one fragment")
        self.level = level


@dataclass(frozen=True)
class LogCall:
    """
    One logging call, split into:
      - parts: fragments rendered into the message text
      - error: exception handed to the backend separately, or None
    """
    parts: Tuple[Any, ...]
    error: Optional[BaseException] = None

    @classmethod
    def from_fragments(
        cls,
        fragments: Sequence[Any],
        exc: Optional[BaseException] = None,
        level: Optional[LogLevel] = None,
    ) -> "LogCall":
        """
        Build a call from positional fragments.

        When ``exc`` is given every fragment is message text. Otherwise a
        trailing exception instance is taken out of the fragments and becomes
        the call's error.
        """
        if exc is not None:
            return cls(parts=tuple(fragments), error=exc)
        if not fragments:
            raise EmptyLogCallError(level)
        last = fragments[-1]
        if isinstance(last, BaseException):
            return cls(parts=tuple(fragments[:-1]), error=last)
        return cls(parts=tuple(fragments))

    def message(self, placeholder: str = NULL_PLACEHOLDER) -> str:
        return concat_sanitized(self.parts, placeholder=placeholder)
