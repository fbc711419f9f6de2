# objmesh/mesh/obj_mesh.py
"""
Описание одного под‑меша OBJ‑файла (один на каждую директиву usemtl)
и формат атрибутов всего документа.
"""

from enum import Enum
from typing import List


class MeshFormat(Enum):
    """Какие атрибуты, кроме позиции, есть у вершин."""

    VERTEX_ONLY = "v"
    VERTEX_TEXTURE = "v/vt"
    VERTEX_TEXTURE_NORMAL = "v/vt/vn"
    VERTEX_NORMAL = "v//vn"

    @classmethod
    def infer(cls, has_normals: bool, has_texcoords: bool) -> "MeshFormat":
        """Все четыре комбинации флагов – других вариантов нет."""
        if has_normals:
            return cls.VERTEX_TEXTURE_NORMAL if has_texcoords else cls.VERTEX_NORMAL
        return cls.VERTEX_TEXTURE if has_texcoords else cls.VERTEX_ONLY

    @property
    def buildable(self) -> bool:
        """Умеет ли ArrayBuilder разворачивать этот формат."""
        return self in (MeshFormat.VERTEX_ONLY, MeshFormat.VERTEX_NORMAL)


class ObjMesh:
    """Параллельные списки индексов (0‑based) + имя материала."""

    __slots__ = ("_material", "vertex_indices", "texcoord_indices",
                 "normal_indices", "index_count")

    def __init__(self, material: str = ""):
        self._material = material
        self.vertex_indices: List[int] = []
        self.texcoord_indices: List[int] = []   # парсер пока не заполняет
        self.normal_indices: List[int] = []
        self.index_count = 0

    # -----------------------------------------------------------------
    @property
    def material(self) -> str:
        return self._material

    @property
    def has_texcoords(self) -> bool:
        return len(self.texcoord_indices) > 0

    @property
    def has_normals(self) -> bool:
        return len(self.normal_indices) > 0

    # -----------------------------------------------------------------
    def add_vertex_normal(self, vertex_index: int, normal_index: int) -> None:
        """Одна вершина грани вида v//vn."""
        self.vertex_indices.append(vertex_index)
        self.normal_indices.append(normal_index)

    def finalize(self) -> None:
        """Закешировать количество индексов после разбора файла."""
        self.index_count = len(self.vertex_indices)

    def __repr__(self) -> str:
        return (f"ObjMesh(material={self._material!r}, "
                f"indices={len(self.vertex_indices)}, normals={self.has_normals})")
