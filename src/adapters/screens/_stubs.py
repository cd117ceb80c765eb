"""Valores stub compartidos (props completos devueltos en ERROR)."""

from __future__ import annotations

from core.domain.models import Task, TaskLocation, TaskStatus


def stub_task(status: TaskStatus) -> Task:
    return Task(
        id="",
        title="",
        description="",
        status=status,
        price_amount=0,
        price_currency="USD",
        estimated_duration=0,
        required_trust_tier=0,
        location=TaskLocation(address="", lat=0, lng=0),
        category="",
        created_at="",
        expires_at=None,
    )
