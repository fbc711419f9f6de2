"""
Приёмники вершинных буферов.

GLBufferSink импортируется явно (objmesh.graphics.gl_backend) –
ему нужен PyOpenGL и системная libGL.
"""

from objmesh.graphics.backend import BufferSink

__all__ = ["BufferSink"]
