"""Adaptador: TaskDetailScreen <- GET /api/tasks/:taskId.

Estado: `task` o `poster` inválidos -> error; `eligibility.status ==
'ineligible'` -> blocked (props completos, con el motivo); si no, success.
"""

from __future__ import annotations

from typing import Any

from adapters.screens._runner import run_adapter
from adapters.screens._stubs import stub_task
from core.domain import endpoints, guards
from core.domain.errors import InvalidResponseError
from core.domain.models import (
    ELIGIBILITY_STATUSES,
    AdapterResult,
    AdapterState,
    PosterSummary,
    TaskDetailProps,
)
from core.domain.validators import optional_string, parse_enum, parse_poster, parse_task, require_root
from core.interfaces.data_source import DataSource
from core.interfaces.error_logger import ErrorLogger
from core.observability import log_error as default_log_error

STUB_PROPS = TaskDetailProps(
    task=stub_task("open"),
    eligibility_status="checking",
    eligibility_reason=None,
    poster=PosterSummary(name="", rating=0, task_count=0),
)


def project_task_detail(payload: Any) -> tuple[AdapterState, TaskDetailProps]:
    data = require_root(payload)
    task = parse_task(data.get("task"), "task")
    poster = parse_poster(data.get("poster"), "poster")

    status = "checking"
    reason = None
    eligibility = data.get("eligibility")
    if eligibility is not None:
        if not guards.is_object(eligibility):
            raise InvalidResponseError("eligibility", "expected an object or null")
        status = parse_enum(eligibility, "status", ELIGIBILITY_STATUSES, "eligibility", default="checking")
        reason = optional_string(eligibility, "reason", "eligibility")

    props = TaskDetailProps(
        task=task,
        eligibility_status=status,
        eligibility_reason=reason,
        poster=poster,
    )
    return (AdapterState.BLOCKED if status == "ineligible" else AdapterState.SUCCESS), props


async def get_task_detail_data(
    task_id: str,
    *,
    source: DataSource,
    log_error: ErrorLogger = default_log_error,
) -> AdapterResult[TaskDetailProps]:
    return await run_adapter(
        screen="TaskDetailScreen",
        adapter="task_detail",
        endpoint=endpoints.TASK_DETAIL,
        ids={"taskId": task_id},
        fetch=source.fetch_task_detail(task_id),
        project=project_task_detail,
        stub=STUB_PROPS,
        log_error=log_error,
    )
