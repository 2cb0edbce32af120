# src/roi_board/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Ranking and ROI are pure functions; the only write paths are the three
mutation intents below, implemented by whatever owns the task collection.
After any mutation the caller re-derives ROI and re-ranks before display.
"""

from typing import Any, Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Mutation intents
    def add_task(
            self,
            *,
            title: str,
            revenue: float,
            time_taken: float,
            priority: Any,
            status: str = "Todo",
            notes: str | None = None,
    ) -> str: ...

    def update_task(self, task_id: str, **patch: Any) -> bool: ...

    def delete_task(self, task_id: str) -> bool: ...

    # Read side
    def get_task(self, task_id: str) -> Task | None: ...
    def list_tasks(self) -> list[Task]: ...
    def existing_titles(self) -> list[str]: ...
    def count_tasks(self) -> int: ...
