from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Union

from logdorak.config import DEFAULT_BACKEND_KIND
from .base import LogBackend
from .memory import InMemoryBackend, LogRecord
from .stdlib import StdlibBackend
from .structlog_backend import StructlogBackend


class BackendKind(str, Enum):
    STRUCTLOG = "structlog"
    STDLIB = "stdlib"
    MEMORY = "memory"


_FACTORIES: Dict[BackendKind, Callable[[str], LogBackend]] = {
    BackendKind.STRUCTLOG: StructlogBackend,
    BackendKind.STDLIB: StdlibBackend,
    BackendKind.MEMORY: InMemoryBackend,
}


def create_backend(
    name: str, kind: Union[BackendKind, str] = DEFAULT_BACKEND_KIND
) -> LogBackend:
    """Build the backend for a logger name. Unknown kinds raise ValueError."""
    return _FACTORIES[BackendKind(kind)](name)


__all__ = [
    "BackendKind",
    "LogBackend",
    "LogRecord",
    "InMemoryBackend",
    "StdlibBackend",
    "StructlogBackend",
    "create_backend",
]
