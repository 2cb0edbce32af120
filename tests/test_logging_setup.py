# tests/test_logging_setup.py

from __future__ import annotations

import logging

from roi_board.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("roi_board.cli.main", logging.INFO))
    assert not f.filter(_record("roi_board.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("roi_board.tasks.task_store", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


def test_setup_logging_writes_file(tmp_path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        log_file = setup_logging(log_dir=tmp_path)
        logging.getLogger("roi_board.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert log_file == tmp_path / "roi-board.log"
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)
