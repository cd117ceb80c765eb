"""CLI principal (Typer).

Cada comando ejecuta un adaptador de pantalla una vez y muestra el
`AdapterResult` resultante (panel Rich o JSON crudo con `--json`).
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Optional

import typer
from rich.console import Console

from adapters.data_sources import build_data_source
from adapters.screens import (
    get_hustler_home_data,
    get_task_completion_data,
    get_task_detail_data,
    get_task_feed_data,
    get_task_progress_data,
    get_xp_data,
)
from cli import doctor
from cli.ui_components import build_result_panel
from core.config import AppSettings, DataSourceMode
from core.domain.models import AdapterResult
from core.interfaces.data_source import DataSource
from core.observability import configure_logging, log_info, log_screen_mount, log_screen_transition, log_screen_unmount

app = typer.Typer(no_args_is_help=True, help="HustleXP data layer: run screen adapters against mock or live data.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

LiveOption = typer.Option(
    None,
    "--live/--mock",
    help="Fuerza el modo de datos para esta ejecución (por defecto: configuración).",
)
JsonOption = typer.Option(False, "--json", help="Imprime el resultado como JSON.")


def _settings(live: Optional[bool]) -> AppSettings:
    settings = AppSettings()
    if live is None:
        return settings
    mode = DataSourceMode.LIVE if live else DataSourceMode.MOCK
    return settings.model_copy(update={"data_source": mode, "endpoint_overrides": {}})


def _run_screen(
    screen: str,
    live: Optional[bool],
    as_json: bool,
    call: Callable[[DataSource], Awaitable[AdapterResult]],
) -> None:
    settings = _settings(live)
    configure_logging(settings)
    source = build_data_source(settings)
    log_info("cli", "data source ready", meta={"mode": settings.data_source.value})

    log_screen_mount(screen)
    result = asyncio.run(call(source))
    log_screen_transition(screen, "loading", result.state.value)
    log_screen_unmount(screen)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        _console.print(build_result_panel(screen, result))


@app.callback()
def main() -> None:
    """HustleXP data layer."""


@app.command()
def home(live: Optional[bool] = LiveOption, as_json: bool = JsonOption) -> None:
    """Hustler home dashboard."""

    _run_screen("HustlerHomeScreen", live, as_json, lambda source: get_hustler_home_data(source=source))


@app.command()
def feed(live: Optional[bool] = LiveOption, as_json: bool = JsonOption) -> None:
    """Task feed."""

    _run_screen("TaskFeedScreen", live, as_json, lambda source: get_task_feed_data(source=source))


@app.command(name="task-detail")
def task_detail(task_id: str, live: Optional[bool] = LiveOption, as_json: bool = JsonOption) -> None:
    """Task detail (eligibility + poster)."""

    _run_screen("TaskDetailScreen", live, as_json, lambda source: get_task_detail_data(task_id, source=source))


@app.command(name="task-progress")
def task_progress(task_id: str, live: Optional[bool] = LiveOption, as_json: bool = JsonOption) -> None:
    """Task in progress (state + destination)."""

    _run_screen(
        "TaskInProgressScreen", live, as_json, lambda source: get_task_progress_data(task_id, source=source)
    )


@app.command(name="task-completion")
def task_completion(task_id: str, live: Optional[bool] = LiveOption, as_json: bool = JsonOption) -> None:
    """Task completion (submission + earnings)."""

    _run_screen(
        "TaskCompletionScreen", live, as_json, lambda source: get_task_completion_data(task_id, source=source)
    )


@app.command()
def xp(live: Optional[bool] = LiveOption, as_json: bool = JsonOption) -> None:
    """XP summary (history + breakdown)."""

    _run_screen("XPBreakdownScreen", live, as_json, lambda source: get_xp_data(source=source))


def run() -> None:
    app()
