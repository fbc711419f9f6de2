# objmesh/math/vec4.py
"""
Однородная 4‑мерная точка (float32).

Позиции хранятся с w = 1.0 (точка), нормали – с w = 0.0 (направление,
перенос на них не действует). Раскладка совпадает с плотной структурой
из четырёх float32, т.е. 16 байт на элемент вершинного буфера.
"""

import numpy as np
from typing import Tuple


class Vec4:
    """Короткий и быстрый вектор‑4 (float32)."""

    __slots__ = ("_v",)

    # размер одного элемента в GPU‑буфере
    STRIDE = 16

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 1.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    # -----------------------------------------------------------------
    # фабрики
    # -----------------------------------------------------------------
    @classmethod
    def point(cls, x: float, y: float, z: float) -> "Vec4":
        """Позиция (w = 1)."""
        return cls(x, y, z, 1.0)

    @classmethod
    def direction(cls, x: float, y: float, z: float) -> "Vec4":
        """Направление, например нормаль (w = 0)."""
        return cls(x, y, z, 0.0)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    @property
    def w(self) -> float:
        return float(self._v[3])

    @w.setter
    def w(self, value: float) -> None:
        self._v[3] = float(value)

    @property
    def is_direction(self) -> bool:
        return bool(self._v[3] == 0.0)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec4") -> "Vec4":
        return Vec4(*(self._v + other._v))

    def __sub__(self, other: "Vec4") -> "Vec4":
        return Vec4(*(self._v - other._v))

    def __mul__(self, scalar: float) -> "Vec4":
        return Vec4(*(self._v * scalar))

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other: "Vec4") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

    # -----------------------------------------------------------------
    # приведение к кортежу (удобно для сравнения и передачи в OpenGL)
    # -----------------------------------------------------------------
    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())
