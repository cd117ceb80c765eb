"""Payloads estáticos para el modo mock.

Tienen exactamente la forma que devuelve el backend (camelCase, JSON crudo),
así el modo mock ejercita la misma validación que el modo live.
"""

from __future__ import annotations

from typing import Any

from core.domain import endpoints


def _sample_task(status: str) -> dict[str, Any]:
    return {
        "id": "task-1",
        "title": "Help move couch",
        "description": "Move a couch from living room to second floor.",
        "status": status,
        "priceAmount": 40,
        "priceCurrency": "USD",
        "estimatedDuration": 25,
        "requiredTrustTier": 1,
        "location": {
            "address": "123 Main St",
            "lat": 37.7749,
            "lng": -122.4194,
            "distance": 0.4,
        },
        "category": "moving",
        "createdAt": "2025-01-30T10:00:00.000Z",
        "expiresAt": "2025-01-30T18:00:00.000Z",
    }


HUSTLER_HOME_FIXTURE: dict[str, Any] = {
    "user": {"xp": 1200, "level": 4, "trustTier": 2},
    "activeTask": None,
    "availableTasksCount": 12,
    "recentEarnings": 240,
    "weeklyTaskCount": 6,
    "currentStreak": 3,
    "systemStatus": None,
}

TASK_FEED_FIXTURE: dict[str, Any] = {
    "tasks": [
        _sample_task("open"),
        {
            **_sample_task("open"),
            "id": "task-2",
            "title": "Assemble IKEA furniture",
            "description": "Assemble a wardrobe and two nightstands.",
            "priceAmount": 55,
            "estimatedDuration": 90,
            "category": "assembly",
        },
    ],
    "hasMore": False,
    "lastUpdatedAt": "2025-01-30T12:00:00.000Z",
    "systemStatus": None,
}

TASK_DETAIL_FIXTURE: dict[str, Any] = {
    "task": _sample_task("open"),
    "eligibility": {"status": "eligible", "reason": None, "missingRequirements": []},
    "poster": {"name": "Alex P.", "rating": 4.8, "taskCount": 24},
}

TASK_PROGRESS_FIXTURE: dict[str, Any] = {
    "task": _sample_task("in_progress"),
    "state": "WORKING",
    "elapsedTime": 420,
    "destination": {"lat": 37.7749, "lng": -122.4194, "address": "123 Main St"},
}

TASK_COMPLETION_FIXTURE: dict[str, Any] = {
    "task": _sample_task("completed"),
    "submission": {
        "status": "approved",
        "rejectionReason": None,
        "submittedAt": "2025-01-30T14:30:00.000Z",
    },
    "earnings": {"amount": 40, "xpAwarded": 25},
}

XP_FIXTURE: dict[str, Any] = {
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
        },
        {
            "id": "xp-2",
            "amount": 30,
            "source": "Task completion",
            "earnedAt": "2025-01-29T11:00:00.000Z",
            "taskTitle": "Assemble IKEA furniture",
        },
    ],
    "breakdown": [{"source": "Task completion", "amount": 1200}],
}

DEFAULT_FIXTURES: dict[str, Any] = {
    endpoints.HUSTLER_HOME: HUSTLER_HOME_FIXTURE,
    endpoints.TASK_FEED: TASK_FEED_FIXTURE,
    endpoints.TASK_DETAIL: TASK_DETAIL_FIXTURE,
    endpoints.TASK_PROGRESS: TASK_PROGRESS_FIXTURE,
    endpoints.TASK_COMPLETION: TASK_COMPLETION_FIXTURE,
    endpoints.XP: XP_FIXTURE,
}
