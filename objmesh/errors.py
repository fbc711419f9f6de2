# objmesh/errors.py
"""
Ошибки загрузчика OBJ и политика их обработки.

Все ошибки ядра терминальны: частичного результата нет. Что делать
дальше – прерывать процесс или подставить запасной меш – решает
вызывающий код через ErrorPolicy.
"""

from enum import Enum


class ObjError(Exception):
    """Базовая ошибка загрузки OBJ."""
    kind = "obj_error"


class ResourceNotFound(ObjError):
    """OBJ‑ресурс не найден или не читается."""
    kind = "resource_not_found"


class MalformedDocument(ObjError):
    """Документ разобран, но пригодного меша нет (или индексы битые)."""
    kind = "malformed_document"


class UnparsableIndex(ObjError):
    """Индекс грани совпал с шаблоном, но не приводится к int."""
    kind = "unparsable_index"


class UnsupportedFormat(ObjError):
    """Формат с текстурными координатами – сборка массива не реализована."""
    kind = "unsupported_format"


class ErrorPolicy(Enum):
    RAISE = "raise"      # пробросить исключение
    FATAL = "fatal"      # залогировать и завершить процесс
    RETURN = "return"    # сохранить ошибку, вернуть None

    @classmethod
    def from_name(cls, name: str) -> "ErrorPolicy":
        try:
            return cls(str(name).lower())
        except ValueError:
            raise ValueError(f"Unknown error policy: {name!r}") from None
