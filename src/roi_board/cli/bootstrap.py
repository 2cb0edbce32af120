# src/roi_board/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the concrete task store into AppState,
- optionally seeds a few demo tasks.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_models import Priority
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

DEMO_TASKS: tuple[dict[str, object], ...] = (
    {
        "title": "Landing page refresh",
        "revenue": 4200,
        "time_taken": 12,
        "priority": Priority.HIGH,
        "status": "In Progress",
        "notes": "Coordinate copy with marketing",
    },
    {
        "title": "Invoice automation",
        "revenue": 1800,
        "time_taken": 6,
        "priority": Priority.MEDIUM,
        "status": "Todo",
    },
    {
        "title": "Internal wiki cleanup",
        "revenue": 0,
        "time_taken": 3,
        "priority": Priority.LOW,
        "status": "Todo",
        "notes": "No direct revenue",
    },
)


def seed_demo_tasks(repo: TaskRepo) -> int:
    """Add DEMO_TASKS whose titles are not taken yet. Returns how many were added."""
    taken = {t.strip().casefold() for t in repo.existing_titles()}
    added = 0
    for payload in DEMO_TASKS:
        if str(payload["title"]).casefold() in taken:
            continue
        repo.add_task(**payload)  # type: ignore[arg-type]
        added += 1
    logger.info("Seeded %d demo tasks.", added)
    return added


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    state = AppState(settings=settings, task_store=TaskStore())
    if getattr(settings, "seed_demo", False):
        seed_demo_tasks(state.task_store)
    return state
