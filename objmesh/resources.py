"""
Поиск и чтение OBJ‑ресурсов по логическому имени ("cube" → resources/cube.obj).
"""

from pathlib import Path

from objmesh.errors import ResourceNotFound
from objmesh.utils.logger import logger


BUILTIN_ROOT = Path(__file__).resolve().parent / "data"


class ResourceProvider:
    """Каталог с ресурсами + расширение по‑умолчанию."""

    def __init__(self, root="resources", extension: str = "obj",
                 encoding: str = "utf-8"):
        self.root = Path(root).expanduser()
        self.extension = extension.lstrip(".")
        self.encoding = encoding

    @classmethod
    def builtin(cls) -> "ResourceProvider":
        """Ресурсы, поставляемые вместе с пакетом (objmesh/data)."""
        return cls(BUILTIN_ROOT)

    def path_for(self, name: str) -> Path:
        p = Path(name)
        if not p.suffix and self.extension:
            p = p.with_name(f"{p.name}.{self.extension}")
        if not p.is_absolute():
            p = self.root / p
        return p.resolve()

    def load_text(self, name: str) -> str:
        """Полный текст ресурса; ResourceNotFound, если прочитать нельзя."""
        p = self.path_for(name)
        if not p.is_file():
            raise ResourceNotFound(f"Resource not found: {p}")
        try:
            # newline="" – "\r" остаётся в тексте как есть
            with p.open("r", encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceNotFound(f"Unable to read {p}: {exc}") from exc
        logger.debug(f"[Resources] Loaded {p} ({len(text)} chars)")
        return text


class TextProvider:
    """Ресурсы из памяти: {имя: текст}. Удобно для тестов и встраивания."""

    def __init__(self, sources: dict):
        self.sources = dict(sources)

    def load_text(self, name: str) -> str:
        try:
            return self.sources[name]
        except KeyError:
            raise ResourceNotFound(f"Resource not found: {name}") from None
