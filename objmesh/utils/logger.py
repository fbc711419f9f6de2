# objmesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер + OpenGL‑сообщения для отладки.
# ---------------------------------------------------------------

import logging

def init_logger(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("objmesh")

logger = init_logger()

def set_level(level) -> None:
    """Уровень из конфига: 'DEBUG', 'INFO' … или число."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    logger.setLevel(level)

def gl_check_error(context: str = ""):
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    from OpenGL import GL   # нужен только при живом GL‑контексте
    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        logger.error(f"OpenGL error 0x{int(err):04X} [{context}]")
        return False
    return True
