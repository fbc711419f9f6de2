# -*- coding: utf-8 -*-
"""
Минимальный парсер Wavefront OBJ (только позиции, нормали, грани v//vn
и директивы usemtl).

Каждая строка проверяется по фиксированным префиксам:
    vn      – нормаль  (w = 0)
    v       – позиция  (w = 1)
    f       – грань, учитываются только пары «v//vn»
    usemtl  – начало нового под‑меша
Всё остальное игнорируется. Строки режутся только по "\\n", символ "\\r"
остаётся в конце строки (на разбор чисел и индексов он не влияет).
"""

import re
from typing import List

import numpy as np

from objmesh.errors import MalformedDocument, UnparsableIndex
from objmesh.io.array_builder import build_array
from objmesh.math.vec4 import Vec4
from objmesh.mesh.obj_mesh import MeshFormat, ObjMesh
from objmesh.utils.logger import logger

NORMAL_HEADER = "vn"
VERTEX_HEADER = "v "
FACE_HEADER = "f "
NEW_MATERIAL_HEADER = "usemtl"

NEW_MESH_RE = re.compile(r"usemtl (\w+)", re.IGNORECASE)
VERTEX_NORMAL_RE = re.compile(r"(\d+)//(\d+)")
# число = непрерывный кусок из цифр, '-' и '.'; прочие символы – разделители
NUMBER_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


class ObjDocument:
    """Результат разбора: пулы, под‑меши и формат (по первому мешу)."""

    def __init__(self,
                 vertices: List[Vec4],
                 normals: List[Vec4],
                 meshes: List[ObjMesh],
                 fmt: MeshFormat):
        self.vertices = vertices
        self.normals = normals
        self.meshes = meshes
        self.format = fmt

    def mesh(self, index: int = 0) -> ObjMesh:
        if not 0 <= index < len(self.meshes):
            raise IndexError(f"Mesh #{index} out of range "
                             f"(document has {len(self.meshes)})")
        return self.meshes[index]

    def array_data(self, mesh_index: int = 0) -> np.ndarray:
        """Interleaved‑поток для выбранного меша (по умолчанию – первый)."""
        return build_array(self.vertices, self.normals,
                           self.mesh(mesh_index), self.format)

    def __repr__(self) -> str:
        return (f"ObjDocument(vertices={len(self.vertices)}, "
                f"normals={len(self.normals)}, meshes={len(self.meshes)}, "
                f"format={self.format.name})")


# ---------------------------------------------------------------------
# чтение отдельных записей
# ---------------------------------------------------------------------
def scan_floats(line: str) -> List[float]:
    """Первые три числа строки как (x, y, z); недостающие остаются 0.0."""
    values = [0.0, 0.0, 0.0]
    for i, match in enumerate(NUMBER_RE.finditer(line)):
        if i == 3:
            break
        values[i] = float(match.group())
    return values


def _to_index(token: str, what: str, lineno: int) -> int:
    # \d ловит любые юникодные цифры, а индексы в OBJ – только ASCII
    if not token.isascii():
        raise UnparsableIndex(
            f"line {lineno}: could not extract {what} index from {token!r}")
    try:
        # OBJ считает с единицы
        return int(token) - 1
    except ValueError:
        raise UnparsableIndex(
            f"line {lineno}: could not extract {what} index from {token!r}") from None


def read_face(line: str, meshes: List[ObjMesh], lineno: int = 0) -> int:
    """Добавить пары v//vn в последний меш. Возвращает число пар."""
    matches = VERTEX_NORMAL_RE.findall(line)
    if not matches:
        return 0
    if not meshes:
        raise MalformedDocument(f"line {lineno}: face before any usemtl directive")
    mesh = meshes[-1]
    for v_token, n_token in matches:
        mesh.add_vertex_normal(_to_index(v_token, "vertex", lineno),
                               _to_index(n_token, "normal", lineno))
    return len(matches)


def read_new_mesh(line: str) -> ObjMesh:
    match = NEW_MESH_RE.search(line)
    material = match.group(1) if match else ""
    return ObjMesh(material)


def _check_indices(meshes: List[ObjMesh], vertex_count: int, normal_count: int) -> None:
    for mesh in meshes:
        for what, indices, limit in (("vertex", mesh.vertex_indices, vertex_count),
                                     ("normal", mesh.normal_indices, normal_count)):
            if not indices:
                continue
            lo, hi = min(indices), max(indices)
            if lo < 0 or hi >= limit:
                bad = lo if lo < 0 else hi
                raise MalformedDocument(
                    f"mesh {mesh.material!r}: {what} index {bad + 1} "
                    f"out of range 1..{limit}")


# ---------------------------------------------------------------------
# основной проход
# ---------------------------------------------------------------------
def parse_obj(text: str) -> ObjDocument:
    vertices: List[Vec4] = []
    normals: List[Vec4] = []
    meshes: List[ObjMesh] = []

    for lineno, line in enumerate(text.split("\n"), start=1):
        if line.startswith(NORMAL_HEADER):
            normals.append(Vec4.direction(*scan_floats(line)))
            logger.debug(f"[ObjParser] {lineno}: normal")

        if line.startswith(VERTEX_HEADER):
            vertices.append(Vec4.point(*scan_floats(line)))
            logger.debug(f"[ObjParser] {lineno}: vertex")

        if line.startswith(FACE_HEADER):
            count = read_face(line, meshes, lineno)
            logger.debug(f"[ObjParser] {lineno}: face ({count} v//vn pairs)")

        if line.startswith(NEW_MATERIAL_HEADER):
            meshes.append(read_new_mesh(line))
            logger.debug(f"[ObjParser] {lineno}: new material {meshes[-1].material!r}")

    if not meshes:
        raise MalformedDocument("No usemtl directive found – document has no mesh")

    _check_indices(meshes, len(vertices), len(normals))

    # формат всего документа определяется первым мешем
    first = meshes[0]
    fmt = MeshFormat.infer(first.has_normals, first.has_texcoords)
    for mesh in meshes:
        mesh.finalize()

    logger.info(f"[ObjParser] Parsed {len(vertices)} vertices, {len(normals)} normals, "
                f"{len(meshes)} mesh(es), format {fmt.name}")
    return ObjDocument(vertices, normals, meshes, fmt)
