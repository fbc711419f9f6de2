"""
Разбор OBJ и сборка вершинных массивов.
"""

from objmesh.io.obj_parser import ObjDocument, parse_obj
from objmesh.io.array_builder import build_array

__all__ = ["ObjDocument", "parse_obj", "build_array"]
