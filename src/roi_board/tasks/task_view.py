# src/roi_board/tasks/task_view.py

from __future__ import annotations

"""
Text rendering of ranked tasks for the console.

Notes are user free text and are always shown as plain text: control
characters (including terminal escape sequences) and line breaks collapse
to single spaces, nothing is interpreted.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .metrics import roi_display
from .task_models import DerivedTask, Task

SHORT_ID_LEN = 8
EMPTY_MESSAGE = "No tasks yet. Use /add to get started."
HEADERS = ("ID", "Title", "Revenue", "Time (h)", "ROI", "Priority", "Status")
RIGHT_ALIGNED = frozenset({"Revenue", "Time (h)", "ROI"})
SEP = " | "

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\s]+")


def plain_text(raw: str | None) -> str:
    if not raw:
        return ""
    return _CONTROL_RE.sub(" ", raw).strip()


def preview(raw: str | None, limit: int) -> str:
    text = plain_text(raw)
    if limit <= 0 or len(text) <= limit:
        return text
    return text[: max(1, limit - 1)].rstrip() + "…"


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_money(value: float, currency_symbol: str = "$") -> str:
    """Thousands separators, at most three fraction digits (1234.5 -> $1,234.5)."""
    if float(value).is_integer():
        body = f"{int(value):,}"
    else:
        body = f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{currency_symbol}{body}"


@dataclass(slots=True, frozen=True)
class TaskRow:
    short_id: str
    title: str
    notes: str
    revenue: str
    time_taken: str
    roi: str
    priority: str
    status: str

    def cells(self) -> tuple[str, ...]:
        return (
            self.short_id,
            self.title,
            self.revenue,
            self.time_taken,
            self.roi,
            self.priority,
            self.status,
        )


def build_row(task: Task, *, currency_symbol: str = "$", notes_preview_chars: int = 48) -> TaskRow:
    # ROI text is recomputed from the raw numbers; for a DerivedTask it
    # equals format_roi(task.roi) because both come from compute_roi.
    return TaskRow(
        short_id=task.id[:SHORT_ID_LEN],
        title=plain_text(task.title),
        notes=preview(task.notes, notes_preview_chars),
        revenue=format_money(task.revenue, currency_symbol),
        time_taken=format_number(task.time_taken),
        roi=roi_display(task.revenue, task.time_taken),
        priority=str(task.priority),
        status=plain_text(task.status),
    )


def build_rows(
    tasks: Sequence[Task], *, currency_symbol: str = "$", notes_preview_chars: int = 48
) -> list[TaskRow]:
    return [
        build_row(t, currency_symbol=currency_symbol, notes_preview_chars=notes_preview_chars)
        for t in tasks
    ]


def render_table(
    tasks: Sequence[DerivedTask], *, currency_symbol: str = "$", notes_preview_chars: int = 48
) -> str:
    """Render tasks in the given order. Callers pass an already ranked list."""
    if not tasks:
        return EMPTY_MESSAGE

    rows = build_rows(
        tasks, currency_symbol=currency_symbol, notes_preview_chars=notes_preview_chars
    )

    widths = [len(h) for h in HEADERS]
    for row in rows:
        for i, cell in enumerate(row.cells()):
            widths[i] = max(widths[i], len(cell))
        # notes preview sits under the title, indented by two spaces
        widths[1] = max(widths[1], len(row.notes) + 2 if row.notes else 0)

    def fmt(cells: Sequence[str]) -> str:
        out = []
        for header, cell, width in zip(HEADERS, cells, widths):
            out.append(cell.rjust(width) if header in RIGHT_ALIGNED else cell.ljust(width))
        return SEP.join(out).rstrip()

    lines = [fmt(HEADERS), SEP.join("-" * w for w in widths)]
    for row in rows:
        lines.append(fmt(row.cells()))
        if row.notes:
            blank = [""] * len(HEADERS)
            blank[1] = "  " + row.notes
            lines.append(fmt(blank))
    return "\n".join(lines)


def render_details(task: Task, *, currency_symbol: str = "$") -> str:
    notes = plain_text(task.notes) or "(none)"
    return (
        f"Task {task.id}\n"
        f"  Title:    {plain_text(task.title)}\n"
        f"  Revenue:  {format_money(task.revenue, currency_symbol)}\n"
        f"  Time (h): {format_number(task.time_taken)}\n"
        f"  ROI:      {roi_display(task.revenue, task.time_taken)}\n"
        f"  Priority: {task.priority}\n"
        f"  Status:   {plain_text(task.status)}\n"
        f"  Notes:    {notes}"
    )
