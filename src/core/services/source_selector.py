"""Selector de fuente de datos (mock vs live).

Reemplaza el flag global del proceso: el modo se lee de `AppSettings` al
construir el selector y a partir de ahí es de sólo lectura.

Orden de resolución:
1) `endpoint_overrides[endpoint]` (migración incremental endpoint a endpoint)
2) `data_source` global
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from core.config import AppSettings, DataSourceMode


class SourceSelector:
    def __init__(
        self,
        mode: DataSourceMode = DataSourceMode.MOCK,
        overrides: Mapping[str, DataSourceMode] | None = None,
    ) -> None:
        self._mode = DataSourceMode(mode)
        self._overrides = MappingProxyType({k: DataSourceMode(v) for k, v in (overrides or {}).items()})

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "SourceSelector":
        return cls(settings.data_source, settings.endpoint_overrides)

    @property
    def default_mode(self) -> DataSourceMode:
        return self._mode

    def mode_for(self, endpoint: str) -> DataSourceMode:
        return self._overrides.get(endpoint, self._mode)

    def is_live(self, endpoint: str) -> bool:
        return self.mode_for(endpoint) is DataSourceMode.LIVE

    def is_mock(self, endpoint: str) -> bool:
        return self.mode_for(endpoint) is DataSourceMode.MOCK
