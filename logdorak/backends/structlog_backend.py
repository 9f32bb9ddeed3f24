from __future__ import annotations

from typing import Any, Optional

import structlog

from logdorak.backends.base import LogBackend
from logdorak.config import TRACE_VERBOSITY_KEY, TRACE_VERBOSITY_VALUE


class StructlogBackend(LogBackend):
    """
    Backend delegating to structlog.

    The underlying logger is a lazy proxy: it is assembled from the current
    structlog configuration on every call, so a Logger created at import time
    still honours a later ``structlog.configure()``.

    Usage:
        import structlog
        structlog.configure(processors=[..., structlog.processors.JSONRenderer()])

        LOGGER = Logger(Thermostat, backend=StructlogBackend("thermostat"))
        LOGGER.error("Unable to set the temperature to ", 21, "°C", exc)
    """

    def __init__(self, name: str, logger: Optional[Any] = None):
        super().__init__(name)
        self._logger = logger or structlog.get_logger(name, component=name)

    def _emit(self, method: str, message: str, error: Optional[BaseException], **kw: Any) -> None:
        if error is not None:
            kw["exc_info"] = error
        getattr(self._logger, method)(message, **kw)

    def error(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit("error", message, error)

    def warn(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit("warning", message, error)

    def info(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit("info", message, error)

    def debug(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit("debug", message, error)

    def trace(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit("debug", message, error, **{TRACE_VERBOSITY_KEY: TRACE_VERBOSITY_VALUE})
