# src/roi_board/tasks/metrics.py

from __future__ import annotations

"""
ROI calculation.

ROI is revenue divided by hours invested, kept at two decimals. It is
undefined (None, rendered as a dash) when:
- revenue is missing, NaN or exactly zero (zero revenue carries no signal),
- time is missing, NaN, infinite, zero or negative,
- the ratio itself is not finite.

Undefined is a normal value, never an exception and never a numeric code.
"""

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any

from .task_models import DerivedTask, Task

ROI_DECIMALS = 2
ROI_UNDEFINED = "—"
_ROI_QUANTUM = Decimal(1).scaleb(-ROI_DECIMALS)


def _as_number(raw: Any) -> float | None:
    # bool is an int subclass
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (Real, Decimal)):
        value = float(raw)
        return None if math.isnan(value) else value
    return None


def _round_half_up(value: float) -> Decimal:
    # Decimal(float) is the exact binary value, so halves round the way toFixed does.
    return Decimal(value).quantize(_ROI_QUANTUM, rounding=ROUND_HALF_UP)


def compute_roi(revenue: Any, time_taken: Any) -> float | None:
    rev = _as_number(revenue)
    hours = _as_number(time_taken)

    if rev is None or rev == 0:
        return None
    if hours is None or hours <= 0 or not math.isfinite(hours):
        return None

    ratio = rev / hours
    if not math.isfinite(ratio):
        return None
    return float(_round_half_up(ratio))


def format_roi(value: float | None) -> str:
    if value is None:
        return ROI_UNDEFINED
    return str(_round_half_up(value))


def roi_display(revenue: Any, time_taken: Any) -> str:
    return format_roi(compute_roi(revenue, time_taken))


def derive_task(task: Task) -> DerivedTask:
    return DerivedTask.from_task(task, compute_roi(task.revenue, task.time_taken))


def derive_tasks(tasks: Iterable[Task]) -> list[DerivedTask]:
    """Compute ROI once per task; ranking consumes the cached value."""
    return [derive_task(t) for t in tasks]
