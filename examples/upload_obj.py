import sys

import objmesh as om
from objmesh.graphics.gl_backend import GLBufferSink
from objmesh.utils import logger
from objmesh.window import Window


if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "quad"
    logger.info(f"Uploading {name}...")

    # без скрытого окна нет GL‑контекста, а значит и буферов
    with Window(visible=False):
        sink = GLBufferSink()
        model = om.ObjModel(name, sink,
                            provider=om.ResourceProvider.builtin(),
                            policy=om.ErrorPolicy.FATAL)
        logger.info(f"Format {model.format.name}, {model.vertex_count} vertices, "
                    f"buffer {model.buffer}")
        model.release()
