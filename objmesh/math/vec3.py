# -*- coding: utf-8 -*-
"""
Трёхмерная точка на базе NumPy (float32).
Парсером напрямую не используется, но входит в семейство примитивов.
"""
import numpy as np

from objmesh.math.vec4 import Vec4


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float):
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float):
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float):
        self._v[2] = float(value)

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar):
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self):
        return tuple(self._v.tolist())

    def extend(self, w: float = 1.0):
        """Однородная 4‑компонентная версия точки."""
        return Vec4(self.x, self.y, self.z, w)

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
