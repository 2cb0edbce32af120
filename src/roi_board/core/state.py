# src/roi_board/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test double with the same attributes).
    settings: Any
    task_store: TaskRepo
