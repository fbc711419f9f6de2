# objmesh/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger         – готовый объект logging.Logger (с level INFO)
    * gl_check_error – вспомогательная функция, проверяющая GL‑ошибки
    * Config         – JSON‑конфигурация загрузчика
"""

from .logger import logger, gl_check_error, set_level
from .config import Config

__all__ = ["logger", "gl_check_error", "set_level", "Config"]
