# tests/test_metrics.py

from __future__ import annotations

from decimal import Decimal

import pytest

from roi_board.tasks.metrics import (
    ROI_UNDEFINED,
    compute_roi,
    derive_task,
    derive_tasks,
    format_roi,
    roi_display,
)
from roi_board.tasks.task_models import DerivedTask, Priority, Task


def test_roi_value_is_rounded_to_two_decimals() -> None:
    assert compute_roi(100, 4) == 25.00
    assert compute_roi(7, 3) == 2.33
    assert roi_display(100, 4) == "25.00"
    assert roi_display(7, 3) == "2.33"


@pytest.mark.parametrize("revenue", [1, 100, 7.5, 1_000_000])
def test_zero_or_negative_time_is_undefined(revenue: float) -> None:
    assert compute_roi(revenue, 0) is None
    assert compute_roi(revenue, -5) is None
    assert roi_display(revenue, 0) == ROI_UNDEFINED


@pytest.mark.parametrize("time_taken", [0.5, 1, 3, 40])
def test_zero_revenue_is_undefined_not_zero(time_taken: float) -> None:
    assert compute_roi(0, time_taken) is None
    assert compute_roi(0.0, time_taken) is None
    assert roi_display(0, time_taken) == "—"


@pytest.mark.parametrize(
    ("revenue", "time_taken"),
    [
        (None, 4),
        (100, None),
        (float("nan"), 4),
        (100, float("nan")),
        ("100", 4),
        (True, 1),
        (float("inf"), 2),
    ],
)
def test_absent_or_unusable_inputs_are_undefined(revenue, time_taken) -> None:
    assert compute_roi(revenue, time_taken) is None


def test_decimal_inputs_are_accepted() -> None:
    assert compute_roi(Decimal("10"), Decimal("4")) == 2.5


def test_negative_revenue_with_positive_time_is_a_number() -> None:
    assert compute_roi(-10, 4) == -2.5


def test_format_roi() -> None:
    assert format_roi(None) == ROI_UNDEFINED
    assert format_roi(2.5) == "2.50"
    assert format_roi(25.0) == "25.00"


def test_derive_task_caches_roi_and_keeps_fields() -> None:
    task = Task(id="t1", title="A", revenue=50, time_taken=4, priority=Priority.HIGH, notes="n")
    derived = derive_task(task)

    assert isinstance(derived, DerivedTask)
    assert derived.roi == 12.5
    assert (derived.id, derived.title, derived.priority, derived.notes) == ("t1", "A", Priority.HIGH, "n")
    # displayed value and sort key agree
    assert format_roi(derived.roi) == roi_display(task.revenue, task.time_taken)


def test_derive_tasks_preserves_order() -> None:
    tasks = [
        Task(id="a", title="A", revenue=0, time_taken=1, priority=Priority.LOW),
        Task(id="b", title="B", revenue=10, time_taken=2, priority=Priority.LOW),
    ]
    derived = derive_tasks(tasks)
    assert [d.id for d in derived] == ["a", "b"]
    assert [d.roi for d in derived] == [None, 5.0]


@pytest.mark.parametrize(
    ("revenue", "time_taken", "expected"),
    [(1, 8, "0.13"), (5, 8, "0.63"), (3, 8, "0.38"), (1, 4, "0.25")],
)
def test_exact_halves_round_up(revenue: float, time_taken: float, expected: str) -> None:
    assert roi_display(revenue, time_taken) == expected
    assert compute_roi(revenue, time_taken) == float(expected)


def test_format_roi_rounds_halves_up() -> None:
    assert format_roi(0.125) == "0.13"
    assert format_roi(-2.5) == "-2.50"


def test_infinite_time_is_undefined() -> None:
    assert compute_roi(100, float("inf")) is None
    assert roi_display(100, float("inf")) == ROI_UNDEFINED
