"""
Скрытое окно + GLFW‑контекст OpenGL, в котором живут буферы GLBufferSink.
"""

import glfw

class Window:
    """Окно + GLFW‑контекст."""
    def __init__(self, width: int = 64, height: int = 64,
                 title: str = "objmesh", visible: bool = False):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        glfw.window_hint(glfw.VISIBLE, glfw.TRUE if visible else glfw.FALSE)
        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self.handle)

        self.width, self.height = width, height
        self.title = title

    @classmethod
    def from_config(cls, config):
        w = config.section("window")
        return cls(w["width"], w["height"], w["title"], w["visible"])

    def should_close(self) -> bool:
        return glfw.window_should_close(self.handle)

    def swap_buffers(self):
        glfw.swap_buffers(self.handle)

    def poll_events(self):
        glfw.poll_events()

    def close(self):
        if self.handle:
            glfw.destroy_window(self.handle)
            self.handle = None
        glfw.terminate()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
