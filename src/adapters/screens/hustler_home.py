"""Adaptador: HustlerHomeScreen <- GET /api/hustler/home.

Estado: `user` ausente o con campos no numéricos -> error; si no, success.
"""

from __future__ import annotations

from typing import Any

from adapters.screens._runner import run_adapter
from core.domain import endpoints
from core.domain.models import AdapterResult, AdapterState, HustlerHomeProps, UserSummary
from core.domain.validators import (
    optional_number,
    parse_optional_task,
    parse_system_status,
    parse_user_summary,
    require_root,
)
from core.interfaces.data_source import DataSource
from core.interfaces.error_logger import ErrorLogger
from core.observability import log_error as default_log_error

STUB_PROPS = HustlerHomeProps(
    user=UserSummary(xp=0, level=0, trust_tier=0),
    active_task=None,
    available_tasks_count=0,
    recent_earnings=0,
    weekly_task_count=0,
    current_streak=0,
    system_status=None,
)


def project_hustler_home(payload: Any) -> tuple[AdapterState, HustlerHomeProps]:
    data = require_root(payload)
    props = HustlerHomeProps(
        user=parse_user_summary(data.get("user")),
        active_task=parse_optional_task(data.get("activeTask"), "activeTask"),
        available_tasks_count=optional_number(data, "availableTasksCount", ""),
        recent_earnings=optional_number(data, "recentEarnings", ""),
        weekly_task_count=optional_number(data, "weeklyTaskCount", ""),
        current_streak=optional_number(data, "currentStreak", ""),
        system_status=parse_system_status(data.get("systemStatus")),
    )
    return AdapterState.SUCCESS, props


async def get_hustler_home_data(
    *,
    source: DataSource,
    log_error: ErrorLogger = default_log_error,
) -> AdapterResult[HustlerHomeProps]:
    return await run_adapter(
        screen="HustlerHomeScreen",
        adapter="hustler_home",
        endpoint=endpoints.HUSTLER_HOME,
        ids={},
        fetch=source.fetch_hustler_home(),
        project=project_hustler_home,
        stub=STUB_PROPS,
        log_error=log_error,
    )
