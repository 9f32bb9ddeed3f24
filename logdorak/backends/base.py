from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class LogBackend(ABC):
    """
    Emission side of a logdorak Logger.

    Each method receives an already sanitized message and, optionally, the
    exception to attach to the record. Level filtering, formatting and output
    are up to the implementation.
    """

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def error(self, message: str, error: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def warn(self, message: str, error: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def info(self, message: str, error: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def debug(self, message: str, error: Optional[BaseException] = None) -> None:
        ...

    @abstractmethod
    def trace(self, message: str, error: Optional[BaseException] = None) -> None:
        ...
