# -*- coding: utf-8 -*-
"""
conftest.py – мок‑приёмник буферов и общие OBJ‑фикстуры.
Не требует GL‑контекста, только записывает вызовы.
"""

from typing import Any, Tuple

import pytest

from objmesh.graphics.backend import BufferSink
from objmesh.utils.config import Config


# ----------------------------------------------------------------------
# MockSink – полностью реализует интерфейс BufferSink.
# ----------------------------------------------------------------------
class MockSink(BufferSink):
    """Каждый метод только записывает вызов в `self.calls`."""

    def __init__(self) -> None:
        # (method_name, args)
        self.calls: list[Tuple[str, Tuple[Any, ...]]] = []
        self.live: dict[int, bytes] = {}
        self._next = 1

    def _record(self, name: str, *a) -> None:
        self.calls.append((name, a))

    def create_buffer(self, data: bytes, size: int) -> Any:
        self._record("create_buffer", data, size)
        handle = self._next
        self._next += 1
        self.live[handle] = data
        return handle

    def release_buffer(self, buffer: Any) -> None:
        self._record("release_buffer", buffer)
        self.live.pop(buffer)


ROUND_TRIP = (
    "v 0.0 0.0 0.0\n"
    "v 1.0 0.0 0.0\n"
    "vn 0.0 1.0 0.0\n"
    "usemtl mat1\n"
    "f 1//1 2//1\n"
)

TWO_MESHES = (
    "v 0 0 0\n"
    "v 1 0 0\n"
    "v 0 1 0\n"
    "v 0 0 1\n"
    "vn 0 0 1\n"
    "vn 1 0 0\n"
    "usemtl front\n"
    "f 1//1 2//1 3//1\n"
    "usemtl side\n"
    "f 2//2 3//2 4//2\n"
)


@pytest.fixture
def sink():
    return MockSink()


@pytest.fixture
def round_trip_text():
    return ROUND_TRIP


@pytest.fixture
def two_meshes_text():
    return TWO_MESHES


@pytest.fixture
def config(tmp_path):
    """Свежий Config в tmp_path; синглтон сбрасывается до и после."""
    Config.reset()
    cfg = Config(str(tmp_path / "config.json"))
    yield cfg
    Config.reset()
