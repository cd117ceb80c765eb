"""Pytest configuration and fixtures."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from core.domain.errors import NetworkErrorCode, NetworkResult

VALID_TASK: dict[str, Any] = {
    "id": "task-1",
    "title": "Help move couch",
    "description": "Move a couch from living room to second floor.",
    "status": "open",
    "priceAmount": 40,
    "priceCurrency": "USD",
    "estimatedDuration": 25,
    "requiredTrustTier": 1,
    "location": {"address": "123 Main St", "lat": 37.7749, "lng": -122.4194, "distance": 0.4},
    "category": "moving",
    "createdAt": "2025-01-30T10:00:00.000Z",
    "expiresAt": "2025-01-30T18:00:00.000Z",
}

VALID_HUSTLER_HOME: dict[str, Any] = {
    "user": {"xp": 1200, "level": 4, "trustTier": 2},
    "activeTask": None,
    "availableTasksCount": 12,
    "recentEarnings": 240,
    "weeklyTaskCount": 6,
    "currentStreak": 3,
    "systemStatus": None,
}

VALID_TASK_FEED: dict[str, Any] = {
    "tasks": [VALID_TASK],
    "hasMore": True,
    "cursor": "cursor-abc",
    "lastUpdatedAt": "2025-01-30T12:00:00.000Z",
    "systemStatus": None,
}

VALID_TASK_DETAIL: dict[str, Any] = {
    "task": VALID_TASK,
    "eligibility": {"status": "eligible", "reason": None, "missingRequirements": []},
    "poster": {"name": "Alex P.", "rating": 4.8, "taskCount": 24},
}

VALID_TASK_PROGRESS: dict[str, Any] = {
    "task": {**VALID_TASK, "status": "in_progress"},
    "state": "WORKING",
    "elapsedTime": 420,
    "destination": {"lat": 37.7749, "lng": -122.4194, "address": "123 Main St"},
}

VALID_TASK_COMPLETION: dict[str, Any] = {
    "task": {**VALID_TASK, "status": "completed"},
    "submission": {"status": "approved", "rejectionReason": None, "submittedAt": "2025-01-30T14:30:00.000Z"},
    "earnings": {"amount": 40, "xpAwarded": 25},
}

VALID_XP: dict[str, Any] = {
    "totalXP": 1200,
    "level": 4,
    "xpToNextLevel": 300,
    "xpProgress": 0.4,
    "history": [
        {
            "id": "xp-1",
            "amount": 25,
            "source": "Task completion",
            "earnedAt": "2025-01-30T14:30:00.000Z",
            "taskTitle": "Help move couch",
        }
    ],
    "breakdown": [{"source": "Task completion", "amount": 1200}],
}


DROP = object()


def clone(payload: dict[str, Any], **changes: Any) -> dict[str, Any]:
    """Copia profunda con claves sustituidas; el valor `DROP` elimina la clave."""

    out = copy.deepcopy(payload)
    for key, value in changes.items():
        if value is DROP:
            out.pop(key, None)
        else:
            out[key] = value
    return out


class FakeDataSource:
    """DataSource en memoria: devuelve siempre el mismo resultado y registra llamadas."""

    def __init__(self, result: NetworkResult) -> None:
        self._result = result
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    @classmethod
    def with_payload(cls, payload: Any) -> "FakeDataSource":
        return cls(NetworkResult.success(copy.deepcopy(payload)))

    @classmethod
    def failing(cls, code: NetworkErrorCode, message: str, status_code: int | None = None) -> "FakeDataSource":
        return cls(NetworkResult.failure(code, message, status_code))

    async def _fetch(self, name: str, *args: Any) -> NetworkResult:
        self.calls.append((name, args))
        return self._result

    async def fetch_hustler_home(self) -> NetworkResult:
        return await self._fetch("hustler_home")

    async def fetch_task_feed(self) -> NetworkResult:
        return await self._fetch("task_feed")

    async def fetch_task_detail(self, task_id: str) -> NetworkResult:
        return await self._fetch("task_detail", task_id)

    async def fetch_task_progress(self, task_id: str) -> NetworkResult:
        return await self._fetch("task_progress", task_id)

    async def fetch_task_completion(self, task_id: str) -> NetworkResult:
        return await self._fetch("task_completion", task_id)

    async def fetch_xp(self) -> NetworkResult:
        return await self._fetch("xp")


class RecordingLogger:
    """ErrorLogger que guarda cada llamada para inspección."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def __call__(self, domain: str, code: str, message: str, **kwargs: Any) -> None:
        self.calls.append({"domain": domain, "code": code, "message": message, **kwargs})


@pytest.fixture
def error_log() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Las variables HUSTLEXP_* del entorno del desarrollador no deben filtrarse."""

    import os

    for key in list(os.environ):
        if key.upper().startswith("HUSTLEXP_"):
            monkeypatch.delenv(key, raising=False)
