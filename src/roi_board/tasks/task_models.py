# src/roi_board/tasks/task_models.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any


class UnknownPriorityError(ValueError):
    """A priority label outside the High/Medium/Low set reached the ranking boundary."""


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, raw: Any) -> Priority:
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            label = raw.strip().lower()
            for member in cls:
                if member.value.lower() == label:
                    return member
        raise UnknownPriorityError(f"Unknown priority: {raw!r} (expected High, Medium or Low)")


DEFAULT_STATUS = "Todo"


@dataclass(slots=True)
class Task:
    """
    A unit of work tracked by the board.

    `status` and `notes` are opaque to ranking; `notes` is always plain text.
    """

    id: str
    title: str
    revenue: float
    time_taken: float
    priority: Priority
    status: str = DEFAULT_STATUS
    notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class DerivedTask(Task):
    """Task annotated with a precomputed ROI (None when undefined)."""

    roi: float | None = None

    @classmethod
    def from_task(cls, task: Task, roi: float | None) -> DerivedTask:
        return cls(
            id=task.id,
            title=task.title,
            revenue=task.revenue,
            time_taken=task.time_taken,
            priority=task.priority,
            status=task.status,
            notes=task.notes,
            roi=roi,
        )


# Fields a caller may patch via update intents (id is owned by the store).
TASK_FIELDS: frozenset[str] = frozenset(
    {"title", "revenue", "time_taken", "priority", "status", "notes"}
)
