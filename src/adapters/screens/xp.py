"""Adaptador: XPBreakdownScreen <- GET /api/xp.

Estado: `totalXP`/`level`/`xpToNextLevel` no numéricos -> error;
`history` y `breakdown` vacíos (tras degradar no-listas a `[]`) -> empty;
si no, success.
"""

from __future__ import annotations

from typing import Any

from adapters.screens._runner import run_adapter
from core.domain import endpoints, guards
from core.domain.models import AdapterResult, AdapterState, XPBreakdownProps
from core.domain.validators import (
    optional_number,
    parse_breakdown_item,
    parse_xp_entry,
    require_number,
    require_root,
)
from core.interfaces.data_source import DataSource
from core.interfaces.error_logger import ErrorLogger
from core.observability import log_error as default_log_error

STUB_PROPS = XPBreakdownProps(
    total_xp=0,
    level=0,
    xp_to_next_level=0,
    xp_progress=0,
    history=[],
    breakdown=[],
)


def project_xp(payload: Any) -> tuple[AdapterState, XPBreakdownProps]:
    data = require_root(payload)
    total_xp = require_number(data, "totalXP", "")
    level = require_number(data, "level", "")
    xp_to_next_level = require_number(data, "xpToNextLevel", "")

    history = [
        parse_xp_entry(raw, f"history[{i}]") for i, raw in enumerate(guards.to_array_or_empty(data.get("history")))
    ]
    breakdown = [
        parse_breakdown_item(raw, f"breakdown[{i}]")
        for i, raw in enumerate(guards.to_array_or_empty(data.get("breakdown")))
    ]

    props = XPBreakdownProps(
        total_xp=total_xp,
        level=level,
        xp_to_next_level=xp_to_next_level,
        xp_progress=optional_number(data, "xpProgress", ""),
        history=history,
        breakdown=breakdown,
    )
    state = AdapterState.EMPTY if not history and not breakdown else AdapterState.SUCCESS
    return state, props


async def get_xp_data(
    *,
    source: DataSource,
    log_error: ErrorLogger = default_log_error,
) -> AdapterResult[XPBreakdownProps]:
    return await run_adapter(
        screen="XPBreakdownScreen",
        adapter="xp",
        endpoint=endpoints.XP,
        ids={},
        fetch=source.fetch_xp(),
        project=project_xp,
        stub=STUB_PROPS,
        log_error=log_error,
    )
