"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.data_sources import FixtureDataSource
from adapters.http_client import get
from adapters.screens import (
    get_hustler_home_data,
    get_task_completion_data,
    get_task_detail_data,
    get_task_feed_data,
    get_task_progress_data,
    get_xp_data,
)
from cli.ui_components import build_self_check_table, print_banner
from core.config import AppSettings, DataSourceMode, write_user_env_vars
from core.domain import endpoints
from core.domain.models import AdapterResult, AdapterState
from core.services.source_selector import SourceSelector

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    """Best-effort: cualquier respuesta HTTP (aunque sea 404) prueba conectividad."""

    result = await get(endpoints.build_url(settings.api_base_url, endpoints.HUSTLER_HOME), settings=settings)
    error = result.error
    if error is None:
        return True, "HTTP 2xx"
    if error.status_code is not None:
        return True, f"HTTP {error.status_code} ({error.code.value})"
    return False, f"{error.code.value}: {error.message}"


async def _fixture_self_check() -> list[tuple[str, str, AdapterResult]]:
    """Ejecuta cada adaptador contra los fixtures por defecto."""

    source = FixtureDataSource()
    return [
        ("hustler_home", endpoints.HUSTLER_HOME, await get_hustler_home_data(source=source)),
        ("task_feed", endpoints.TASK_FEED, await get_task_feed_data(source=source)),
        ("task_detail", endpoints.TASK_DETAIL, await get_task_detail_data("task-1", source=source)),
        ("task_progress", endpoints.TASK_PROGRESS, await get_task_progress_data("task-1", source=source)),
        ("task_completion", endpoints.TASK_COMPLETION, await get_task_completion_data("task-1", source=source)),
        ("xp", endpoints.XP, await get_xp_data(source=source)),
    ]


@app.command()
def run(check_api: bool = typer.Option(True, "--check-api/--no-check-api", help="Probar conectividad con el backend.")) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    print_banner(_console)
    settings = AppSettings()
    selector = SourceSelector.from_settings(settings)

    table = Table(title="HustleXP Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Data source", "OK", selector.default_mode.value)
    for endpoint in endpoints.ALL_ENDPOINTS:
        table.add_row(f"  {endpoint}", "OK", selector.mode_for(endpoint).value)

    # Connectivity (best-effort)
    if check_api:
        ok_http, detail_http = asyncio.run(_check_http(settings))
        table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    checks = build_self_check_table()
    failed = False
    for name, endpoint, result in asyncio.run(_fixture_self_check()):
        failed = failed or result.state is AdapterState.ERROR
        checks.add_row(name, endpoint, result.state.value)
    _console.print(checks)

    if failed:
        _console.print("\n[red]Fixture self-check failed:[/red] at least one adapter rejected its fixture.")
        raise typer.Exit(code=1)


@app.command(name="set-source")
def set_source(mode: DataSourceMode = typer.Argument(..., help="mock | live")) -> None:
    """Persist the global data source mode in the user config .env."""

    env_path = write_user_env_vars({"HUSTLEXP_DATA_SOURCE": mode.value})
    _console.print(f"[green]Saved data source '{mode.value}' to:[/green] {env_path}")
