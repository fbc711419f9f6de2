"""
Модель = OBJ‑меш, уже загруженный в GPU‑буфер.
"""

from objmesh.errors import ErrorPolicy
from objmesh.reader import ObjReader
from objmesh.utils.logger import logger


class ObjModel:
    """Держит ObjReader и созданный по нему вершинный буфер."""

    def __init__(self, obj_file_name: str, sink, provider=None,
                 policy: ErrorPolicy = ErrorPolicy.RAISE, mesh_index: int = 0):
        self.sink = sink
        self.mesh_index = mesh_index
        self.buffer = None
        self.vertex_count = 0
        self.reader = ObjReader(obj_file_name, provider, policy)
        self.prepare_model()

    def prepare_model(self):
        """Собрать поток и создать буфер (повторный вызов пересоздаёт его)."""
        self.release()
        data = self.reader.array_data(self.mesh_index)
        if data is None:
            return None
        self.buffer = self.sink.create_buffer(data.tobytes(), data.nbytes)
        self.vertex_count = self.reader.meshes[self.mesh_index].index_count
        return self.buffer

    @property
    def format(self):
        return self.reader.format

    @property
    def ok(self) -> bool:
        return self.buffer is not None

    def release(self):
        """Освободить GPU‑буфер."""
        if self.buffer is not None:
            self.sink.release_buffer(self.buffer)
            logger.debug(f"[ObjModel] Released buffer of {self.reader.name}")
            self.buffer = None
            self.vertex_count = 0
