# src/roi_board/tasks/ranking.py

from __future__ import annotations

"""
Task ranking.

Order, first difference wins:
1. ROI descending (missing ROI counts as 0),
2. priority descending via PRIORITY_RANK,
3. title ascending, locale-aware (LC_COLLATE), raw title as the last resort.

Tasks equal on ROI, priority and title keep no guaranteed relative order:
the natural key is exhausted at that point.
"""

import locale
import logging
import math
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

from .task_models import DerivedTask, Priority, UnknownPriorityError

logger = logging.getLogger(__name__)

PRIORITY_RANK: MappingProxyType[Priority, int] = MappingProxyType(
    {
        Priority.HIGH: 3,
        Priority.MEDIUM: 2,
        Priority.LOW: 1,
    }
)


def priority_weight(priority: Any) -> int:
    try:
        return PRIORITY_RANK[Priority(priority)]
    except (ValueError, KeyError):
        raise UnknownPriorityError(
            f"Unknown priority: {priority!r} (expected High, Medium or Low)"
        ) from None


def _roi_or_zero(roi: float | None) -> float:
    if roi is None or math.isnan(roi):
        return 0.0
    return float(roi)


def _collation_key(title: str) -> str:
    try:
        return locale.strxfrm(title)
    except ValueError:
        # strxfrm rejects embedded NULs; the raw title still orders totally.
        return title


def rank_key(task: DerivedTask) -> tuple[float, int, str, str]:
    return (
        -_roi_or_zero(task.roi),
        -priority_weight(task.priority),
        _collation_key(task.title),
        task.title,
    )


def rank_tasks(tasks: Iterable[DerivedTask]) -> list[DerivedTask]:
    """Return a new list ordered for display; the input is never mutated."""
    keyed = [(rank_key(t), t) for t in tasks]
    keyed.sort(key=lambda pair: pair[0])
    logger.debug("Ranked %d tasks", len(keyed))
    return [t for _, t in keyed]
