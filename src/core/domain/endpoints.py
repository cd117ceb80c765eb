"""Endpoints del backend consumidos por los adaptadores de pantalla.

Las rutas son plantillas: `:taskId` se sustituye con `build_url`.
"""

from __future__ import annotations

from urllib.parse import quote

HUSTLER_HOME = "/api/hustler/home"
TASK_FEED = "/api/tasks"
TASK_DETAIL = "/api/tasks/:taskId"
TASK_PROGRESS = "/api/tasks/:taskId/progress"
TASK_COMPLETION = "/api/tasks/:taskId/completion"
XP = "/api/xp"

ALL_ENDPOINTS: tuple[str, ...] = (
    HUSTLER_HOME,
    TASK_FEED,
    TASK_DETAIL,
    TASK_PROGRESS,
    TASK_COMPLETION,
    XP,
)


def build_url(base_url: str, endpoint: str, params: dict[str, str] | None = None) -> str:
    """Construye la URL completa sustituyendo `:param` por su valor URL-encoded."""

    url = f"{base_url.rstrip('/')}{endpoint}"
    for key, value in (params or {}).items():
        url = url.replace(f":{key}", quote(value, safe=""))
    return url
