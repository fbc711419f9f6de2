"""
Пакет mesh – записи под‑мешей и формат вершин.
"""

from objmesh.mesh.obj_mesh import MeshFormat, ObjMesh

__all__ = ["MeshFormat", "ObjMesh"]
