# src/roi_board/tasks/task_store.py

from __future__ import annotations

import logging
import math
import re
import uuid
from dataclasses import replace
from decimal import Decimal
from numbers import Real
from typing import Any

from .task_models import DEFAULT_STATUS, TASK_FIELDS, Priority, Task

logger = logging.getLogger(__name__)

_TITLE_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


class TaskStore:
    """
    In-memory task store.

    Owns id assignment and title uniqueness. Titles are unique ignoring case
    and surrounding whitespace.

    Returned Task objects are copies: mutate only through add/update/delete.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        logger.info("TaskStore ready total=%s", self.count_tasks())

    # ---- validation helpers ----

    @staticmethod
    def _title_key(title: str) -> str:
        return title.strip().casefold()

    @staticmethod
    def _clean_number(name: str, raw: Any) -> float:
        if isinstance(raw, bool) or not isinstance(raw, (Real, Decimal, str)):
            raise ValueError(f"{name} must be a number")
        try:
            value = float(raw)
        except ValueError:
            raise ValueError(f"{name} must be a number, got {raw!r}") from None
        if math.isnan(value):
            raise ValueError(f"{name} must be a number, got NaN")
        return value

    def _check_title(self, title: Any, *, exclude_id: str | None = None) -> str:
        if not isinstance(title, str) or not title.strip():
            raise ValueError("title is required")
        if _TITLE_CONTROL_RE.search(title.strip()):
            raise ValueError("title must not contain control characters")
        key = self._title_key(title)
        for t in self._tasks.values():
            if t.id != exclude_id and self._title_key(t.title) == key:
                raise ValueError(f"A task titled {title.strip()!r} already exists")
        return title.strip()

    def _build(self, task_id: str, fields: dict[str, Any]) -> Task:
        title = self._check_title(fields.get("title"), exclude_id=task_id)

        revenue = self._clean_number("revenue", fields.get("revenue"))
        if not math.isfinite(revenue) or revenue < 0:
            raise ValueError("revenue must be a finite non-negative number")

        # Zero or negative time is accepted here; ROI renders it as undefined.
        time_taken = self._clean_number("time_taken", fields.get("time_taken"))
        if not math.isfinite(time_taken):
            raise ValueError("time_taken must be a finite number")

        status = fields.get("status") or DEFAULT_STATUS
        notes = fields.get("notes")
        if notes is not None:
            notes = str(notes)

        return Task(
            id=task_id,
            title=title,
            revenue=revenue,
            time_taken=time_taken,
            priority=Priority.parse(fields.get("priority")),
            status=str(status),
            notes=notes or None,
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(
        self,
        *,
        title: str,
        revenue: float,
        time_taken: float,
        priority: Priority | str,
        status: str = DEFAULT_STATUS,
        notes: str | None = None,
    ) -> str:
        task_id = uuid.uuid4().hex
        task = self._build(
            task_id,
            {
                "title": title,
                "revenue": revenue,
                "time_taken": time_taken,
                "priority": priority,
                "status": status,
                "notes": notes,
            },
        )
        self._tasks[task_id] = task
        logger.debug(
            "Task added id=%s title=%r priority=%s", task_id, task.title, task.priority.value
        )
        return task_id

    def update_task(self, task_id: str, **patch: Any) -> bool:
        """
        Merge `patch` into the task. Unknown field names raise ValueError.

        Returns False (and changes nothing) when the id is unknown.
        """
        unknown = set(patch) - TASK_FIELDS
        if unknown:
            raise ValueError(f"Unknown task fields: {', '.join(sorted(unknown))}")

        current = self._tasks.get(task_id)
        if current is None:
            logger.debug("update_task: unknown id=%s", task_id)
            return False

        merged = current.to_dict()
        merged.update(patch)
        self._tasks[task_id] = self._build(task_id, merged)
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(patch))
        return True

    def delete_task(self, task_id: str) -> bool:
        removed = self._tasks.pop(task_id, None)
        if removed is None:
            logger.debug("delete_task: unknown id=%s", task_id)
            return False
        logger.debug("Task deleted id=%s title=%r", task_id, removed.title)
        return True

    def get_task(self, task_id: str) -> Task | None:
        task = self._tasks.get(task_id)
        return replace(task) if task is not None else None

    def list_tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        return [replace(t) for t in self._tasks.values()]

    def existing_titles(self) -> list[str]:
        return [t.title for t in self._tasks.values()]
