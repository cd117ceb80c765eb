from __future__ import annotations

from core.config import AppSettings, DataSourceMode
from core.domain import endpoints
from core.services.source_selector import SourceSelector


def test_defaults_to_mock_everywhere():
    selector = SourceSelector()

    assert selector.default_mode is DataSourceMode.MOCK
    for endpoint in endpoints.ALL_ENDPOINTS:
        assert selector.is_mock(endpoint)
        assert not selector.is_live(endpoint)


def test_override_wins_over_global_mode():
    selector = SourceSelector(DataSourceMode.MOCK, {endpoints.TASK_FEED: DataSourceMode.LIVE})

    assert selector.is_live(endpoints.TASK_FEED)
    assert selector.is_mock(endpoints.HUSTLER_HOME)


def test_accepts_plain_string_modes():
    selector = SourceSelector("live", {endpoints.XP: "mock"})

    assert selector.default_mode is DataSourceMode.LIVE
    assert selector.mode_for(endpoints.XP) is DataSourceMode.MOCK
    assert selector.mode_for(endpoints.TASK_DETAIL) is DataSourceMode.LIVE


def test_from_settings_reads_mode_and_overrides():
    settings = AppSettings(
        data_source=DataSourceMode.LIVE,
        endpoint_overrides={endpoints.HUSTLER_HOME: DataSourceMode.MOCK},
    )

    selector = SourceSelector.from_settings(settings)

    assert selector.is_mock(endpoints.HUSTLER_HOME)
    assert selector.is_live(endpoints.TASK_FEED)


def test_overrides_are_copied_at_construction():
    overrides = {endpoints.XP: DataSourceMode.LIVE}
    selector = SourceSelector(DataSourceMode.MOCK, overrides)

    overrides[endpoints.XP] = DataSourceMode.MOCK

    assert selector.is_live(endpoints.XP)
