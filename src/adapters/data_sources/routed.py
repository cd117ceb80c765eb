"""Fuente de datos enrutada: decide mock/live por endpoint.

La decisión la toma `SourceSelector`; esta clase sólo delega. Así los
adaptadores de pantalla nunca ramifican por modo.
"""

from __future__ import annotations

from core.domain import endpoints
from core.domain.errors import NetworkResult
from core.interfaces.data_source import DataSource
from core.services.source_selector import SourceSelector


class RoutedDataSource(DataSource):
    def __init__(self, selector: SourceSelector, *, live: DataSource, fixtures: DataSource) -> None:
        self._selector = selector
        self._live = live
        self._fixtures = fixtures

    def _pick(self, endpoint: str) -> DataSource:
        return self._live if self._selector.is_live(endpoint) else self._fixtures

    async def fetch_hustler_home(self) -> NetworkResult:
        return await self._pick(endpoints.HUSTLER_HOME).fetch_hustler_home()

    async def fetch_task_feed(self) -> NetworkResult:
        return await self._pick(endpoints.TASK_FEED).fetch_task_feed()

    async def fetch_task_detail(self, task_id: str) -> NetworkResult:
        return await self._pick(endpoints.TASK_DETAIL).fetch_task_detail(task_id)

    async def fetch_task_progress(self, task_id: str) -> NetworkResult:
        return await self._pick(endpoints.TASK_PROGRESS).fetch_task_progress(task_id)

    async def fetch_task_completion(self, task_id: str) -> NetworkResult:
        return await self._pick(endpoints.TASK_COMPLETION).fetch_task_completion(task_id)

    async def fetch_xp(self) -> NetworkResult:
        return await self._pick(endpoints.XP).fetch_xp()
