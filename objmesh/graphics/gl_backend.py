"""
OpenGL‑приёмник буферов: GL_ARRAY_BUFFER + GL_STATIC_DRAW.
Нужен текущий GL‑контекст (см. objmesh.window.Window).
"""

from typing import Any

from OpenGL import GL

from objmesh.graphics.backend import BufferSink
from objmesh.utils.logger import logger, gl_check_error

class GLBufferSink(BufferSink):
    """Создаёт VBO через PyOpenGL."""

    def __init__(self, target=None, usage=None):
        self.target = GL.GL_ARRAY_BUFFER if target is None else target
        self.usage = GL.GL_STATIC_DRAW if usage is None else usage
        self.buffers: list = []

    def create_buffer(self, data: bytes, size: int) -> Any:
        if size != len(data):
            raise ValueError(f"Buffer size {size} does not match data length {len(data)}")
        vbo = GL.glGenBuffers(1)
        GL.glBindBuffer(self.target, vbo)
        GL.glBufferData(self.target, size, data, self.usage)
        GL.glBindBuffer(self.target, 0)
        if not gl_check_error("GLBufferSink.create_buffer"):
            raise RuntimeError("[GLBufferSink] glBufferData failed")
        self.buffers.append(vbo)
        logger.debug(f"[GLBufferSink] Created buffer {vbo} ({size} bytes)")
        return vbo

    def release_buffer(self, buffer: Any) -> None:
        GL.glDeleteBuffers(1, [buffer])
        if buffer in self.buffers:
            self.buffers.remove(buffer)

    def cleanup(self) -> None:
        """Освободить все созданные буферы."""
        for vbo in list(self.buffers):
            self.release_buffer(vbo)
