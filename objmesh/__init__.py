"""
objmesh – загрузчик Wavefront OBJ в плоские interleaved‑массивы float32
для вершинных буферов GPU.

Окно (objmesh.window) и OpenGL‑приёмник (objmesh.graphics.gl_backend)
импортируются отдельно: им нужны glfw и libGL.
"""

from objmesh.utils import logger, Config
from objmesh.errors import (
    ErrorPolicy, ObjError, ResourceNotFound, MalformedDocument,
    UnparsableIndex, UnsupportedFormat,
)
from objmesh.math import Vec3, Vec4
from objmesh.mesh import MeshFormat, ObjMesh
from objmesh.io import ObjDocument, parse_obj, build_array
from objmesh.resources import ResourceProvider, TextProvider
from objmesh.graphics import BufferSink
from objmesh.reader import ObjReader
from objmesh.model import ObjModel

__version__ = "1.0.0"

__all__ = [
    "Config",
    "ErrorPolicy",
    "ObjError",
    "ResourceNotFound",
    "MalformedDocument",
    "UnparsableIndex",
    "UnsupportedFormat",
    "Vec3",
    "Vec4",
    "MeshFormat",
    "ObjMesh",
    "ObjDocument",
    "parse_obj",
    "build_array",
    "ResourceProvider",
    "TextProvider",
    "BufferSink",
    "ObjReader",
    "ObjModel",
]
