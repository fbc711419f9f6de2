"""
Абстрактный интерфейс для приёмника вершинных буферов.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

class BufferSink(ABC):
    """Base interface for GPU buffer sinks."""

    @abstractmethod
    def create_buffer(self, data: bytes, size: int) -> Any:
        """Выделить буфер размером size байт и заполнить его data."""

    @abstractmethod
    def release_buffer(self, buffer: Any) -> None:
        pass
