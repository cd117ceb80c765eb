"""Adaptadores de pantalla.

Por qué un paquete:
- Un módulo por pantalla; cada uno traduce el payload crudo de su endpoint a
  `AdapterResult` con props listos para renderizar.
- Todos reciben la `DataSource` por inyección y nunca lanzan.
"""

from adapters.screens.hustler_home import get_hustler_home_data
from adapters.screens.task_completion import get_task_completion_data
from adapters.screens.task_detail import get_task_detail_data
from adapters.screens.task_feed import get_task_feed_data
from adapters.screens.task_progress import get_task_progress_data
from adapters.screens.xp import get_xp_data

__all__ = [
    "get_hustler_home_data",
    "get_task_completion_data",
    "get_task_detail_data",
    "get_task_feed_data",
    "get_task_progress_data",
    "get_xp_data",
]
