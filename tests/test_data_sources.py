from __future__ import annotations

import httpx
import pytest

from adapters.data_sources import FixtureDataSource, LiveDataSource, RoutedDataSource, build_data_source
from adapters.data_sources.fixtures import DEFAULT_FIXTURES
from conftest import FakeDataSource, VALID_XP
from core.config import AppSettings, DataSourceMode
from core.domain import endpoints
from core.domain.errors import NetworkErrorCode
from core.interfaces.data_source import DataSource
from core.services.source_selector import SourceSelector


@pytest.mark.asyncio
async def test_fixture_source_returns_independent_copies():
    source = FixtureDataSource()

    first = await source.fetch_hustler_home()
    first.data["user"]["xp"] = -1
    second = await source.fetch_hustler_home()

    assert second.ok is True
    assert second.data["user"]["xp"] == DEFAULT_FIXTURES[endpoints.HUSTLER_HOME]["user"]["xp"]


@pytest.mark.asyncio
async def test_fixture_source_missing_endpoint_is_not_found():
    source = FixtureDataSource({endpoints.XP: VALID_XP})

    result = await source.fetch_task_detail("task-9")

    assert result.ok is False
    assert result.error.code is NetworkErrorCode.NOT_FOUND
    assert endpoints.TASK_DETAIL in result.error.message


@pytest.mark.asyncio
async def test_live_source_builds_url_with_task_id():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    settings = AppSettings(api_base_url="https://api.test.com/")
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await LiveDataSource(settings, client=client).fetch_task_progress("task-42")

    assert result.ok is True
    assert str(seen[0].url) == "https://api.test.com/api/tasks/task-42/progress"


@pytest.mark.asyncio
async def test_live_source_surfaces_transport_failures():
    settings = AppSettings(api_base_url="https://api.test.com")
    transport = httpx.MockTransport(lambda request: httpx.Response(401))
    async with httpx.AsyncClient(transport=transport) as client:
        result = await LiveDataSource(settings, client=client).fetch_xp()

    assert result.ok is False
    assert result.error.code is NetworkErrorCode.UNAUTHORIZED


@pytest.mark.asyncio
async def test_routed_source_delegates_per_endpoint():
    live = FakeDataSource.with_payload({"from": "live"})
    fixtures = FakeDataSource.with_payload({"from": "fixtures"})
    selector = SourceSelector(DataSourceMode.MOCK, {endpoints.TASK_COMPLETION: DataSourceMode.LIVE})
    routed = RoutedDataSource(selector, live=live, fixtures=fixtures)

    completion = await routed.fetch_task_completion("task-7")
    home = await routed.fetch_hustler_home()

    assert completion.data == {"from": "live"}
    assert home.data == {"from": "fixtures"}
    assert live.calls == [("task_completion", ("task-7",))]
    assert fixtures.calls == [("hustler_home", ())]


def test_sources_satisfy_protocol():
    assert isinstance(FixtureDataSource(), DataSource)
    assert isinstance(LiveDataSource(AppSettings()), DataSource)
    assert isinstance(build_data_source(AppSettings()), DataSource)


@pytest.mark.asyncio
async def test_build_data_source_mock_mode_never_hits_network():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("network must not be used in mock mode")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        source = build_data_source(AppSettings(data_source=DataSourceMode.MOCK), client=client)
        result = await source.fetch_task_feed()

    assert result.ok is True
    assert result.data == DEFAULT_FIXTURES[endpoints.TASK_FEED]
