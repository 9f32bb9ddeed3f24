from __future__ import annotations

import logging
from typing import Optional

from logdorak.backends.base import LogBackend
from logdorak.config import FACADE_FRAMES, TRACE_LEVEL_NAME, TRACE_LEVEL_NUM

logging.addLevelName(TRACE_LEVEL_NUM, TRACE_LEVEL_NAME)

# _emit and the level method
_OWN_FRAMES = 2


class StdlibBackend(LogBackend):
    """Backend delegating to ``logging.getLogger(name)``.

    Trace records use the TRACE level (5), below DEBUG. Records carry the
    application's call site (funcName, lineno) rather than this module's;
    pass ``facade_frames=0`` when calling the backend without a Logger.
    """

    def __init__(
        self,
        name: str,
        logger: Optional[logging.Logger] = None,
        facade_frames: int = FACADE_FRAMES,
    ):
        super().__init__(name)
        self._logger = logger or logging.getLogger(name)
        self._stacklevel = _OWN_FRAMES + facade_frames + 1

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _emit(self, level: int, message: str, error: Optional[BaseException]) -> None:
        # No args are passed, so '%' in the message is never interpolated
        self._logger.log(level, message, exc_info=error, stacklevel=self._stacklevel)

    def error(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit(logging.ERROR, message, error)

    def warn(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit(logging.WARNING, message, error)

    def info(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit(logging.INFO, message, error)

    def debug(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit(logging.DEBUG, message, error)

    def trace(self, message: str, error: Optional[BaseException] = None) -> None:
        self._emit(TRACE_LEVEL_NUM, message, error)
