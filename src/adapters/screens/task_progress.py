"""Adaptador: TaskInProgressScreen <- GET /api/tasks/:taskId/progress.

Estado: `task`/`destination` inválidos o `state` fuera de {EN_ROUTE, WORKING}
-> error; si no, success.
"""

from __future__ import annotations

from typing import Any

from adapters.screens._runner import run_adapter
from adapters.screens._stubs import stub_task
from core.domain import endpoints
from core.domain.models import (
    TASK_PROGRESS_STATES,
    AdapterResult,
    AdapterState,
    Destination,
    TaskProgressProps,
)
from core.domain.validators import optional_number, parse_destination, parse_enum, parse_task, require_root
from core.interfaces.data_source import DataSource
from core.interfaces.error_logger import ErrorLogger
from core.observability import log_error as default_log_error

STUB_PROPS = TaskProgressProps(
    task=stub_task("in_progress"),
    task_state="WORKING",
    elapsed_time=0,
    destination=Destination(lat=0, lng=0, address=""),
)


def project_task_progress(payload: Any) -> tuple[AdapterState, TaskProgressProps]:
    data = require_root(payload)
    props = TaskProgressProps(
        task=parse_task(data.get("task"), "task"),
        destination=parse_destination(data.get("destination"), "destination"),
        task_state=parse_enum(data, "state", TASK_PROGRESS_STATES, ""),
        elapsed_time=optional_number(data, "elapsedTime", ""),
    )
    return AdapterState.SUCCESS, props


async def get_task_progress_data(
    task_id: str,
    *,
    source: DataSource,
    log_error: ErrorLogger = default_log_error,
) -> AdapterResult[TaskProgressProps]:
    return await run_adapter(
        screen="TaskInProgressScreen",
        adapter="task_progress",
        endpoint=endpoints.TASK_PROGRESS,
        ids={"taskId": task_id},
        fetch=source.fetch_task_progress(task_id),
        project=project_task_progress,
        stub=STUB_PROPS,
        log_error=log_error,
    )
