"""Logger facade.

Builds one sanitized message out of loosely typed fragments and hands it,
with an optional exception, to a LogBackend.

Usage:
    LOGGER = Logger(__name__)

    class Thermostat:
        def set_temperature(self, temperature: int) -> None:
            LOGGER.trace("Will set the temperature to ", temperature, "°C.")
            try:
                self._connector.set_temperature(temperature)
                LOGGER.info("Temperature has been set to ", temperature, "°C.")
            except OSError as exc:
                LOGGER.error("Unable to set the temperature to ", temperature, "°C", exc)
"""

from __future__ import annotations

import types
from typing import Any, Optional, Union

from logdorak.backends import LogBackend, create_backend
from logdorak.types import LogCall, LogLevel


def resolve_name(identifier: Any) -> str:
    """
    Name of the backend logger for an identifier.

    Strings are used as-is, modules give their ``__name__``, classes and
    functions give ``"<module>.<qualname>"``. Any other object is named
    after its type.
    """
    if isinstance(identifier, str):
        return identifier
    if isinstance(identifier, types.ModuleType):
        return identifier.__name__
    qualname = getattr(identifier, "__qualname__", None)
    if isinstance(identifier, type) or (callable(identifier) and qualname):
        module = getattr(identifier, "__module__", None)
        return f"{module}.{qualname}" if module else qualname
    return resolve_name(type(identifier))


class Logger:
    def __init__(self, identifier: Any, backend: Optional[LogBackend] = None):
        self._name = resolve_name(identifier)
        self._backend = backend if backend is not None else create_backend(self._name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def backend(self) -> LogBackend:
        return self._backend

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, backend={type(self._backend).__name__})"

    def error(self, *fragments: Any, exc: Optional[BaseException] = None) -> None:
        """Log at ERROR level. A trailing exception is attached, not rendered."""
        self._dispatch(LogLevel.ERROR, LogCall.from_fragments(fragments, exc=exc, level=LogLevel.ERROR))

    def warn(self, *fragments: Any, exc: Optional[BaseException] = None) -> None:
        """Log at WARN level. A trailing exception is attached, not rendered."""
        self._dispatch(LogLevel.WARN, LogCall.from_fragments(fragments, exc=exc, level=LogLevel.WARN))

    warning = warn

    def info(self, *fragments: Any, exc: Optional[BaseException] = None) -> None:
        """Log at INFO level. A trailing exception is attached, not rendered."""
        self._dispatch(LogLevel.INFO, LogCall.from_fragments(fragments, exc=exc, level=LogLevel.INFO))

    def debug(self, *fragments: Any, exc: Optional[BaseException] = None) -> None:
        """Log at DEBUG level. A trailing exception is attached, not rendered."""
        self._dispatch(LogLevel.DEBUG, LogCall.from_fragments(fragments, exc=exc, level=LogLevel.DEBUG))

    def trace(self, *fragments: Any, exc: Optional[BaseException] = None) -> None:
        """Log at TRACE level. A trailing exception is attached, not rendered."""
        self._dispatch(LogLevel.TRACE, LogCall.from_fragments(fragments, exc=exc, level=LogLevel.TRACE))

    def log(
        self,
        level: Union[LogLevel, str],
        *fragments: Any,
        exc: Optional[BaseException] = None,
    ) -> None:
        """
        Log fragments at ``level``.

        Args:
            level: LogLevel or its value ("error", "warn", ...)
            fragments: Message parts, optionally ending with an exception
            exc: Exception to attach; when given, no fragment is treated as one

        Raises:
            EmptyLogCallError: No fragments and no ``exc``
        """
        level = LogLevel(level)
        self._dispatch(level, LogCall.from_fragments(fragments, exc=exc, level=level))

    def emit(self, level: Union[LogLevel, str], call: LogCall) -> None:
        """Dispatch an already split call to the backend."""
        self._dispatch(LogLevel(level), call)

    # Public methods call _dispatch directly: the application frame is always
    # FACADE_FRAMES above the backend method.
    def _dispatch(self, level: LogLevel, call: LogCall) -> None:
        method = getattr(self._backend, level.value)
        message = call.message()
        if call.error is None:
            method(message)
        else:
            method(message, call.error)
