"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import json

from rich.align import Align
from rich.console import Console, Group
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import AdapterResult, AdapterState

_STATE_STYLES: dict[AdapterState, str] = {
    AdapterState.SUCCESS: "green",
    AdapterState.EMPTY: "cyan",
    AdapterState.BLOCKED: "yellow",
    AdapterState.ERROR: "red",
    AdapterState.LOADING: "dim",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("HustleXP", style="bold cyan")
    subtitle = Text("Data layer • Adaptadores de pantalla", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_result_panel(screen: str, result: AdapterResult) -> Panel:
    """Panel con el estado derivado y los props proyectados."""

    style = _STATE_STYLES.get(result.state, "white")
    state = Text(f"state: {result.state.value}", style=f"bold {style}")
    props = JSON(json.dumps(result.to_dict()["props"], ensure_ascii=False))
    return Panel(Group(state, props), title=Text(screen, style="bold"), border_style=style)


def build_self_check_table() -> Table:
    table = Table(title="Screen adapters")
    table.add_column("Adapter", style="cyan", no_wrap=True)
    table.add_column("Endpoint", style="white")
    table.add_column("State", style="green")
    return table
