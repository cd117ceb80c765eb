from __future__ import annotations

import pytest

from adapters.screens import xp
from adapters.screens.xp import get_xp_data
from conftest import DROP, VALID_XP, FakeDataSource, clone
from core.domain.models import AdapterState


@pytest.mark.asyncio
async def test_valid_xp_is_success(error_log):
    result = await get_xp_data(source=FakeDataSource.with_payload(VALID_XP), log_error=error_log)

    assert result.state is AdapterState.SUCCESS
    props = result.to_dict()["props"]
    assert props["totalXP"] == 1200
    assert props["xpToNextLevel"] == 300
    assert props["history"][0]["taskTitle"] == "Help move couch"
    assert props["breakdown"] == [{"source": "Task completion", "amount": 1200}]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("history", "breakdown"),
    [([], []), (None, None), (DROP, DROP), ("nope", 12)],
)
async def test_no_entries_is_empty(history, breakdown, error_log):
    payload = clone(VALID_XP, history=history, breakdown=breakdown)

    result = await get_xp_data(source=FakeDataSource.with_payload(payload), log_error=error_log)

    assert result.state is AdapterState.EMPTY
    assert result.props.history == []
    assert result.props.breakdown == []
    assert result.props.total_xp == 1200


@pytest.mark.asyncio
async def test_breakdown_alone_is_success(error_log):
    payload = clone(VALID_XP, history=[])

    result = await get_xp_data(source=FakeDataSource.with_payload(payload), log_error=error_log)

    assert result.state is AdapterState.SUCCESS


@pytest.mark.asyncio
@pytest.mark.parametrize("breakdown", [[], "not-array", None])
async def test_history_alone_is_success(breakdown, error_log):
    payload = clone(VALID_XP, breakdown=breakdown)

    result = await get_xp_data(source=FakeDataSource.with_payload(payload), log_error=error_log)

    assert result.state is AdapterState.SUCCESS
    assert [entry.id for entry in result.props.history] == ["xp-1"]
    assert result.props.breakdown == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        clone(VALID_XP, totalXP=DROP),
        clone(VALID_XP, totalXP="1200"),
        clone(VALID_XP, level=None),
        clone(VALID_XP, xpToNextLevel=float("nan")),
        clone(VALID_XP, history=[{"id": "xp-1", "amount": "25", "source": "x", "earnedAt": "t"}]),
        clone(VALID_XP, breakdown=[{"source": "Task completion"}]),
    ],
)
async def test_malformed_xp_returns_stub(payload, error_log):
    result = await get_xp_data(source=FakeDataSource.with_payload(payload), log_error=error_log)

    assert result.state is AdapterState.ERROR
    assert result.props == xp.STUB_PROPS
    assert result.to_dict()["props"] == {
        "totalXP": 0,
        "level": 0,
        "xpToNextLevel": 0,
        "xpProgress": 0,
        "history": [],
        "breakdown": [],
    }
