# objmesh/io/array_builder.py
"""
Разворачивание индексов меша в плоский interleaved‑массив float32,
готовый к glBufferData без дополнительной обработки.

Порядок для VERTEX_NORMAL: позиция, нормаль, позиция, нормаль …
Каждый элемент – 4 float32 (16 байт).
"""

from typing import Sequence, Union

import numpy as np

from objmesh.errors import UnsupportedFormat
from objmesh.math.vec4 import Vec4
from objmesh.mesh.obj_mesh import MeshFormat, ObjMesh

Pool = Union[Sequence[Vec4], np.ndarray]


def pool_to_np(pool: Pool) -> np.ndarray:
    """Список Vec4 → ndarray (N, 4) float32."""
    if isinstance(pool, np.ndarray):
        return pool.astype(np.float32, copy=False).reshape(-1, 4)
    return np.array([p.to_tuple() for p in pool], dtype=np.float32).reshape(-1, 4)


def build_array(vertices: Pool,
                normals: Pool,
                mesh: ObjMesh,
                fmt: MeshFormat) -> np.ndarray:
    """
    Собрать вершинный поток для одного меша.

    Параметры
    ----------
    vertices : пул позиций (w = 1).
    normals  : пул нормалей (w = 0).
    mesh     : какой под‑меш разворачивать.
    fmt      : формат документа (см. ObjDocument.format).

    Возврат – C‑contiguous ndarray формы (N, 4), где N = index_count
    для VERTEX_ONLY и 2 * index_count для VERTEX_NORMAL.
    """
    if not fmt.buildable:
        raise UnsupportedFormat(f"{fmt.name} array construction not implemented yet")

    count = mesh.index_count
    v_idx = np.asarray(mesh.vertex_indices[:count], dtype=np.intp)
    positions = pool_to_np(vertices)[v_idx]

    if fmt is MeshFormat.VERTEX_ONLY:
        return np.ascontiguousarray(positions)

    n_idx = np.asarray(mesh.normal_indices[:count], dtype=np.intp)
    data = np.empty((count * 2, 4), dtype=np.float32)
    data[0::2] = positions
    data[1::2] = pool_to_np(normals)[n_idx]
    return data
