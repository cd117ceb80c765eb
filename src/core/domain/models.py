"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da modelos inmutables (`frozen`) y documentación autocontenida (Field)
  sin acoplar el Core a librerías de I/O.
- Los nombres en Python son snake_case; `model_dump(by_alias=True)` produce
  los nombres camelCase del contrato del backend.

Nota:
- Estos modelos describen *qué* recibe una pantalla, no *cómo* se valida el
  payload crudo (eso vive en `core.domain.validators`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

Number = Union[int, float]

TaskStatus = Literal["open", "assigned", "in_progress", "completed", "disputed", "cancelled", "expired"]
SystemStatusTone = Literal["info", "warning", "danger", "success"]
EligibilityStatus = Literal["eligible", "ineligible", "checking"]
TaskProgressState = Literal["EN_ROUTE", "WORKING"]
SubmissionStatus = Literal["pending", "submitted", "approved", "rejected"]

TASK_STATUSES: frozenset[str] = frozenset(
    {"open", "assigned", "in_progress", "completed", "disputed", "cancelled", "expired"}
)
SYSTEM_STATUS_TONES: frozenset[str] = frozenset({"info", "warning", "danger", "success"})
ELIGIBILITY_STATUSES: frozenset[str] = frozenset({"eligible", "ineligible", "checking"})
TASK_PROGRESS_STATES: frozenset[str] = frozenset({"EN_ROUTE", "WORKING"})
SUBMISSION_STATUSES: frozenset[str] = frozenset({"pending", "submitted", "approved", "rejected"})


class _Contract(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TaskLocation(_Contract):
    address: str = Field(..., description="Dirección legible.")
    lat: Number = Field(..., description="Latitud.")
    lng: Number = Field(..., description="Longitud.")
    distance: Number | None = Field(
        default=None,
        description="Distancia al hustler (si el backend la calcula).",
    )


class Task(_Contract):
    """Tarea publicada por un poster."""

    id: str = Field(..., description="Identificador de la tarea.")
    title: str = Field(..., description="Título visible.")
    description: str = Field(..., description="Descripción libre.")
    status: TaskStatus = Field(..., description="Estado del ciclo de vida.")
    price_amount: Number = Field(..., description="Precio (unidades de moneda, >= 0).")
    price_currency: str = Field(default="USD", description="Moneda ISO.")
    estimated_duration: Number = Field(..., description="Duración estimada (minutos).")
    required_trust_tier: Number = Field(..., description="Trust tier mínimo para aceptarla.")
    location: TaskLocation = Field(..., description="Ubicación de la tarea.")
    category: str = Field(..., description="Categoría (p.ej. 'moving').")
    created_at: str = Field(..., description="Fecha de creación (ISO 8601).")
    expires_at: str | None = Field(default=None, description="Fecha de expiración (ISO 8601) o None.")


class UserSummary(_Contract):
    xp: Number
    level: Number
    trust_tier: Number


class PosterSummary(_Contract):
    name: str = Field(..., description="Nombre público del poster.")
    rating: Number = Field(..., description="Valoración media.")
    task_count: Number = Field(..., description="Tareas publicadas.")


class Destination(_Contract):
    lat: Number
    lng: Number
    address: str


class SystemStatus(_Contract):
    tone: SystemStatusTone
    message: str


class XPEntry(_Contract):
    id: str
    amount: Number
    source: str
    earned_at: str
    task_title: str | None = None


class XPBreakdownItem(_Contract):
    source: str
    amount: Number


class FilterState(_Contract):
    """Filtros del feed; el backend no los devuelve, siempre es el default."""

    category: str | None = None
    max_distance: Number | None = None


class HustlerHomeProps(_Contract):
    user: UserSummary
    active_task: Task | None = None
    available_tasks_count: Number = 0
    recent_earnings: Number = 0
    weekly_task_count: Number = 0
    current_streak: Number = 0
    system_status: SystemStatus | None = None


class TaskFeedProps(_Contract):
    tasks: list[Task] = Field(default_factory=list)
    has_more: bool = False
    filters: FilterState = Field(default_factory=FilterState)
    system_status: SystemStatus | None = None
    last_updated_at: str = ""


class TaskDetailProps(_Contract):
    task: Task
    eligibility_status: EligibilityStatus
    eligibility_reason: str | None = None
    poster: PosterSummary


class TaskProgressProps(_Contract):
    task: Task
    task_state: TaskProgressState
    elapsed_time: Number = 0
    destination: Destination


class TaskCompletionProps(_Contract):
    task: Task
    submission_status: SubmissionStatus = "pending"
    rejection_reason: str | None = None
    xp_awarded: Number | None = None
    earnings_amount: Number = 0


class XPBreakdownProps(_Contract):
    total_xp: Number = Field(..., alias="totalXP")
    level: Number
    xp_to_next_level: Number
    xp_progress: Number = 0
    history: list[XPEntry] = Field(default_factory=list)
    breakdown: list[XPBreakdownItem] = Field(default_factory=list)


class AdapterState(str, Enum):
    """Estado derivado de una pantalla.

    `LOADING` es un estado del llamador (antes de resolver la corrutina); los
    adaptadores nunca lo devuelven.
    """

    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"
    BLOCKED = "blocked"
    LOADING = "loading"


PropsT = TypeVar("PropsT", bound=BaseModel)


@dataclass(frozen=True)
class AdapterResult(Generic[PropsT]):
    """Resultado de un adaptador: estado + props listos para renderizar.

    Invariante: `props` siempre está completo; en `ERROR` es el stub fijo del
    adaptador.
    """

    state: AdapterState
    props: PropsT

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state.value,
            "props": self.props.model_dump(mode="json", by_alias=True),
        }
