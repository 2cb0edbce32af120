# tests/test_bootstrap.py

from __future__ import annotations

from roi_board.cli.bootstrap import DEMO_TASKS, create_initial_state, seed_demo_tasks
from roi_board.config import Settings
from roi_board.tasks.task_api import ranked_tasks


def test_create_initial_state_makes_data_dir(settings) -> None:
    state = create_initial_state(settings=settings)
    assert settings.data_dir.is_dir()
    assert state.task_store.count_tasks() == 0


def test_seed_demo_is_opt_in_and_idempotent(settings) -> None:
    settings.seed_demo = True
    state = create_initial_state(settings=settings)
    assert state.task_store.count_tasks() == len(DEMO_TASKS)
    assert seed_demo_tasks(state.task_store) == 0

    ranked = ranked_tasks(state.task_store)
    assert ranked[-1].roi is None


def test_settings_from_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("ROI_APP_NAME", "board")
    monkeypatch.setenv("ROI_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ROI_NOTES_PREVIEW_CHARS", "not-a-number")
    monkeypatch.setenv("ROI_SEED_DEMO", "yes")
    monkeypatch.delenv("ROI_CURRENCY_SYMBOL", raising=False)

    s = Settings.from_env()
    assert s.app_name == "board"
    assert s.data_dir == tmp_path
    assert s.notes_preview_chars == 48
    assert s.seed_demo is True
    assert s.currency_symbol == "$"
