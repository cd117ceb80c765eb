"""Fuente de datos mock: fixtures estáticos, sin red.

Cada lectura devuelve una copia profunda para que ninguna llamada pueda
alterar lo que ve la siguiente.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from adapters.data_sources.fixtures import DEFAULT_FIXTURES
from core.domain import endpoints
from core.domain.errors import NetworkErrorCode, NetworkResult
from core.interfaces.data_source import DataSource


class FixtureDataSource(DataSource):
    def __init__(self, payloads: Mapping[str, Any] | None = None) -> None:
        # Las claves son plantillas de endpoint; los ids de ruta se ignoran.
        self._payloads = dict(DEFAULT_FIXTURES if payloads is None else payloads)

    def _read(self, endpoint: str) -> NetworkResult:
        if endpoint not in self._payloads:
            return NetworkResult.failure(
                NetworkErrorCode.NOT_FOUND,
                f"No fixture registered for {endpoint}",
            )
        return NetworkResult.success(copy.deepcopy(self._payloads[endpoint]))

    async def fetch_hustler_home(self) -> NetworkResult:
        return self._read(endpoints.HUSTLER_HOME)

    async def fetch_task_feed(self) -> NetworkResult:
        return self._read(endpoints.TASK_FEED)

    async def fetch_task_detail(self, task_id: str) -> NetworkResult:
        return self._read(endpoints.TASK_DETAIL)

    async def fetch_task_progress(self, task_id: str) -> NetworkResult:
        return self._read(endpoints.TASK_PROGRESS)

    async def fetch_task_completion(self, task_id: str) -> NetworkResult:
        return self._read(endpoints.TASK_COMPLETION)

    async def fetch_xp(self) -> NetworkResult:
        return self._read(endpoints.XP)
