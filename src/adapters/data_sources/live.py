"""Fuente de datos live: GET contra el backend real."""

from __future__ import annotations

import httpx

from adapters.http_client import get
from core.config import AppSettings
from core.domain import endpoints
from core.domain.errors import NetworkResult
from core.interfaces.data_source import DataSource


class LiveDataSource(DataSource):
    """Una petición HTTP por llamada, con el timeout configurado."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def _get(self, endpoint: str, params: dict[str, str] | None = None) -> NetworkResult:
        url = endpoints.build_url(self._settings.api_base_url, endpoint, params)
        return await get(
            url,
            timeout_seconds=self._settings.http_timeout_seconds,
            settings=self._settings,
            client=self._client,
        )

    async def fetch_hustler_home(self) -> NetworkResult:
        return await self._get(endpoints.HUSTLER_HOME)

    async def fetch_task_feed(self) -> NetworkResult:
        return await self._get(endpoints.TASK_FEED)

    async def fetch_task_detail(self, task_id: str) -> NetworkResult:
        return await self._get(endpoints.TASK_DETAIL, {"taskId": task_id})

    async def fetch_task_progress(self, task_id: str) -> NetworkResult:
        return await self._get(endpoints.TASK_PROGRESS, {"taskId": task_id})

    async def fetch_task_completion(self, task_id: str) -> NetworkResult:
        return await self._get(endpoints.TASK_COMPLETION, {"taskId": task_id})

    async def fetch_xp(self) -> NetworkResult:
        return await self._get(endpoints.XP)
