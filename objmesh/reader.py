# objmesh/reader.py
"""
ObjReader – загрузка OBJ‑ресурса по имени, разбор и сборка вершинного
потока. Что делать с ошибкой, решает ErrorPolicy:

    RAISE  – исключение из objmesh.errors (по‑умолчанию);
    FATAL  – CRITICAL в лог и SystemExit (старое поведение);
    RETURN – ошибка сохраняется в reader.error, методы возвращают None.
"""

from typing import Any, Optional

import numpy as np

from objmesh.errors import ErrorPolicy, ObjError
from objmesh.io.obj_parser import ObjDocument, parse_obj
from objmesh.resources import ResourceProvider
from objmesh.utils.config import Config
from objmesh.utils.logger import logger, set_level


class ObjReader:
    """Один OBJ‑файл: пулы вершин/нормалей, под‑меши, формат."""

    def __init__(self, obj_file_name: str, provider=None,
                 policy: ErrorPolicy = ErrorPolicy.RAISE):
        self.name = obj_file_name
        self.provider = provider if provider is not None else ResourceProvider()
        self.policy = policy if isinstance(policy, ErrorPolicy) else ErrorPolicy.from_name(policy)
        self.document: Optional[ObjDocument] = None
        self.error: Optional[ObjError] = None

        try:
            text = self.provider.load_text(obj_file_name)
            logger.debug(f"[ObjReader] Source of {obj_file_name}:\n{text}")
            self.document = parse_obj(text)
        except ObjError as exc:
            self._fail(exc)

    @classmethod
    def from_config(cls, obj_file_name: str, config: Config = None) -> "ObjReader":
        """Каталог ресурсов, политика ошибок и уровень лога – из Config."""
        config = config if config is not None else Config()
        res = config.section("resources")
        set_level(config["log_level"])
        provider = ResourceProvider(res["root"], res["extension"], res["encoding"])
        return cls(obj_file_name, provider, ErrorPolicy.from_name(config["error_policy"]))

    # -----------------------------------------------------------------
    def _fail(self, exc: ObjError):
        self.error = exc
        if self.policy is ErrorPolicy.RAISE:
            raise exc
        if self.policy is ErrorPolicy.FATAL:
            logger.critical(f"[ObjReader] {self.name}: {exc}")
            raise SystemExit(f"{exc.kind}: {exc}") from exc
        logger.error(f"[ObjReader] {self.name}: {exc}")
        return None

    # -----------------------------------------------------------------
    @property
    def ok(self) -> bool:
        return self.document is not None and self.error is None

    @property
    def vertices(self):
        return self.document.vertices if self.document else []

    @property
    def normals(self):
        return self.document.normals if self.document else []

    @property
    def meshes(self):
        return self.document.meshes if self.document else []

    @property
    def format(self):
        return self.document.format if self.document else None

    # -----------------------------------------------------------------
    def array_data(self, mesh_index: int = 0) -> Optional[np.ndarray]:
        """Interleaved‑поток меша mesh_index (по умолчанию – первого)."""
        if self.document is None:
            return None
        try:
            return self.document.array_data(mesh_index)
        except ObjError as exc:
            return self._fail(exc)

    def upload(self, sink, mesh_index: int = 0) -> Any:
        """Отдать поток в BufferSink; размер = 16 байт * число точек."""
        data = self.array_data(mesh_index)
        if data is None:
            return None
        buffer = sink.create_buffer(data.tobytes(), data.nbytes)
        logger.info(f"[ObjReader] Uploaded {self.name} mesh #{mesh_index}: "
                    f"{len(data)} points, {data.nbytes} bytes")
        return buffer
