"""Adaptador: TaskCompletionScreen <- GET /api/tasks/:taskId/completion.

Estado: `task` o `earnings.amount` inválidos -> error; `submission.status`
fuera del enum -> error. Sin `submission` -> pending / sin motivo, success.
`xpAwarded` ausente o null -> None.
"""

from __future__ import annotations

from typing import Any

from adapters.screens._runner import run_adapter
from adapters.screens._stubs import stub_task
from core.domain import endpoints, guards
from core.domain.errors import InvalidResponseError
from core.domain.models import SUBMISSION_STATUSES, AdapterResult, AdapterState, TaskCompletionProps
from core.domain.validators import (
    optional_number,
    optional_string,
    parse_enum,
    parse_task,
    require_number,
    require_object,
    require_root,
)
from core.interfaces.data_source import DataSource
from core.interfaces.error_logger import ErrorLogger
from core.observability import log_error as default_log_error

STUB_PROPS = TaskCompletionProps(
    task=stub_task("completed"),
    submission_status="pending",
    rejection_reason=None,
    xp_awarded=None,
    earnings_amount=0,
)


def project_task_completion(payload: Any) -> tuple[AdapterState, TaskCompletionProps]:
    data = require_root(payload)
    task = parse_task(data.get("task"), "task")
    earnings = require_object(data, "earnings")

    submission_status = "pending"
    rejection_reason = None
    submission = data.get("submission")
    if submission is not None:
        if not guards.is_object(submission):
            raise InvalidResponseError("submission", "expected an object or null")
        submission_status = parse_enum(submission, "status", SUBMISSION_STATUSES, "submission", default="pending")
        rejection_reason = optional_string(submission, "rejectionReason", "submission")

    props = TaskCompletionProps(
        task=task,
        submission_status=submission_status,
        rejection_reason=rejection_reason,
        xp_awarded=optional_number(earnings, "xpAwarded", "earnings", default=None),
        earnings_amount=require_number(earnings, "amount", "earnings"),
    )
    return AdapterState.SUCCESS, props


async def get_task_completion_data(
    task_id: str,
    *,
    source: DataSource,
    log_error: ErrorLogger = default_log_error,
) -> AdapterResult[TaskCompletionProps]:
    return await run_adapter(
        screen="TaskCompletionScreen",
        adapter="task_completion",
        endpoint=endpoints.TASK_COMPLETION,
        ids={"taskId": task_id},
        fetch=source.fetch_task_completion(task_id),
        project=project_task_completion,
        stub=STUB_PROPS,
        log_error=log_error,
    )
