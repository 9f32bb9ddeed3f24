from .types import LogLevel, LogCall, EmptyLogCallError
from .sanitize import concat_sanitized, strip_line_endings, to_text
from .backends import (
    BackendKind,
    LogBackend,
    LogRecord,
    InMemoryBackend,
    StdlibBackend,
    StructlogBackend,
    create_backend,
)
from .logger import Logger, resolve_name

__all__ = [
    # Types
    "LogLevel",
    "LogCall",
    "EmptyLogCallError",
    # Sanitization
    "concat_sanitized",
    "strip_line_endings",
    "to_text",
    # Backends
    "BackendKind",
    "LogBackend",
    "LogRecord",
    "InMemoryBackend",
    "StdlibBackend",
    "StructlogBackend",
    "create_backend",
    # Facade
    "Logger",
    "resolve_name",
]
