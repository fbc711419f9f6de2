"""
Математический суб‑пакет: Vec3, Vec4.
"""

from objmesh.math.vec3 import Vec3
from objmesh.math.vec4 import Vec4

__all__ = ["Vec3", "Vec4"]
