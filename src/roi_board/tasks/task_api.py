# src/roi_board/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..core.ports import TaskRepo
from .metrics import derive_tasks
from .ranking import rank_tasks
from .task_models import DerivedTask

logger = logging.getLogger(__name__)


def ranked_tasks(repo: TaskRepo) -> list[DerivedTask]:
    """
    Snapshot of the repo ready for display: ROI derived once per task, then ranked.
    Call again after every mutation.
    """
    return rank_tasks(derive_tasks(repo.list_tasks()))


def submit_task(repo: TaskRepo, payload: Mapping[str, Any]) -> str:
    """
    Form-style submit: a payload carrying an `id` updates that task with the
    remaining fields, anything else is added as a new task.

    Returns the task id. Raises ValueError when the payload is rejected or the
    id no longer exists.
    """
    fields = dict(payload)
    task_id = fields.pop("id", None)

    if task_id:
        if not repo.update_task(str(task_id), **fields):
            raise ValueError(f"Task {task_id} not found")
        logger.info("Task updated id=%s", task_id)
        return str(task_id)

    new_id = repo.add_task(**fields)
    logger.info("Task added id=%s", new_id)
    return new_id
