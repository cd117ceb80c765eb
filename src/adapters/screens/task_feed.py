"""Adaptador: TaskFeedScreen <- GET /api/tasks.

Estado:
- `lastUpdatedAt` ausente o vacío -> error.
- `tasks` no-lista se degrada a `[]`; sin tareas -> empty; si no, success.
- Una sola tarea inválida invalida el feed completo.
"""

from __future__ import annotations

from typing import Any

from adapters.screens._runner import run_adapter
from core.domain import endpoints, guards
from core.domain.models import AdapterResult, AdapterState, FilterState, TaskFeedProps
from core.domain.validators import (
    optional_boolean,
    parse_system_status,
    parse_task,
    require_non_empty_string,
    require_root,
)
from core.interfaces.data_source import DataSource
from core.interfaces.error_logger import ErrorLogger
from core.observability import log_error as default_log_error

STUB_PROPS = TaskFeedProps(
    tasks=[],
    has_more=False,
    filters=FilterState(),
    system_status=None,
    last_updated_at="",
)


def project_task_feed(payload: Any) -> tuple[AdapterState, TaskFeedProps]:
    data = require_root(payload)
    last_updated_at = require_non_empty_string(data, "lastUpdatedAt", "")
    raw_tasks = guards.to_array_or_empty(data.get("tasks"))
    tasks = [parse_task(raw, f"tasks[{i}]") for i, raw in enumerate(raw_tasks)]

    props = TaskFeedProps(
        tasks=tasks,
        has_more=optional_boolean(data, "hasMore", ""),
        filters=FilterState(),
        system_status=parse_system_status(data.get("systemStatus")),
        last_updated_at=last_updated_at,
    )
    return (AdapterState.EMPTY if not tasks else AdapterState.SUCCESS), props


async def get_task_feed_data(
    *,
    source: DataSource,
    log_error: ErrorLogger = default_log_error,
) -> AdapterResult[TaskFeedProps]:
    return await run_adapter(
        screen="TaskFeedScreen",
        adapter="task_feed",
        endpoint=endpoints.TASK_FEED,
        ids={},
        fetch=source.fetch_task_feed(),
        project=project_task_feed,
        stub=STUB_PROPS,
        log_error=log_error,
    )
