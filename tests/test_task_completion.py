from __future__ import annotations

import pytest

from adapters.screens import task_completion
from adapters.screens.task_completion import get_task_completion_data
from conftest import DROP, VALID_TASK_COMPLETION, FakeDataSource, clone
from core.domain.errors import NetworkErrorCode
from core.domain.models import AdapterState


@pytest.mark.asyncio
async def test_approved_submission_is_success(error_log):
    source = FakeDataSource.with_payload(VALID_TASK_COMPLETION)

    result = await get_task_completion_data("task-1", source=source, log_error=error_log)

    assert result.state is AdapterState.SUCCESS
    assert result.props.submission_status == "approved"
    assert result.props.earnings_amount == 40
    assert result.props.xp_awarded == 25


@pytest.mark.asyncio
async def test_missing_submission_means_pending(error_log):
    payload = clone(VALID_TASK_COMPLETION, submission=DROP)

    result = await get_task_completion_data("task-1", source=FakeDataSource.with_payload(payload), log_error=error_log)

    assert result.state is AdapterState.SUCCESS
    props = result.to_dict()["props"]
    assert props["submissionStatus"] == "pending"
    assert props["rejectionReason"] is None


@pytest.mark.asyncio
async def test_rejected_submission_keeps_reason(error_log):
    payload = clone(
        VALID_TASK_COMPLETION,
        submission={"status": "rejected", "rejectionReason": "Blurry photo"},
    )

    result = await get_task_completion_data("task-1", source=FakeDataSource.with_payload(payload), log_error=error_log)

    assert result.state is AdapterState.SUCCESS
    assert result.props.submission_status == "rejected"
    assert result.props.rejection_reason == "Blurry photo"


@pytest.mark.asyncio
@pytest.mark.parametrize("earnings", [{"amount": 40}, {"amount": 40, "xpAwarded": None}])
async def test_absent_xp_awarded_is_none(earnings, error_log):
    payload = clone(VALID_TASK_COMPLETION, earnings=earnings)

    result = await get_task_completion_data("task-1", source=FakeDataSource.with_payload(payload), log_error=error_log)

    assert result.state is AdapterState.SUCCESS
    assert result.props.xp_awarded is None
    assert "xpAwarded" in result.to_dict()["props"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        clone(VALID_TASK_COMPLETION, earnings=DROP),
        clone(VALID_TASK_COMPLETION, earnings=None),
        clone(VALID_TASK_COMPLETION, earnings={"xpAwarded": 25}),
        clone(VALID_TASK_COMPLETION, earnings={"amount": "40"}),
        clone(VALID_TASK_COMPLETION, earnings={"amount": 40, "xpAwarded": "25"}),
        clone(VALID_TASK_COMPLETION, submission={"status": "Approved"}),
        clone(VALID_TASK_COMPLETION, submission={"status": "approved", "rejectionReason": 3}),
        clone(VALID_TASK_COMPLETION, task=None),
    ],
)
async def test_malformed_completion_returns_stub(payload, error_log):
    result = await get_task_completion_data("task-1", source=FakeDataSource.with_payload(payload), log_error=error_log)

    assert result.state is AdapterState.ERROR
    assert result.props == task_completion.STUB_PROPS
    assert result.props.xp_awarded is None


@pytest.mark.asyncio
async def test_invalid_json_is_logged_as_invalid_response(error_log):
    source = FakeDataSource.failing(NetworkErrorCode.INVALID_JSON, "Invalid JSON response", 200)

    result = await get_task_completion_data("task-1", source=source, log_error=error_log)

    assert result.state is AdapterState.ERROR
    assert error_log.calls[0]["code"] == "INVALID_RESPONSE"
    assert error_log.calls[0]["meta"]["statusCode"] == 200
