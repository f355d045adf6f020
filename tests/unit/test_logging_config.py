"""
Unit tests for config/logging_config.py
"""
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from config.logging_config import ROOT_LOGGER_NAME, add_file_handler, get_logger

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def detach_file_handlers():
    """Remove and close any file handler a test attached to the root logger."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


class TestImportSideEffects:

    def test_import_and_render_create_no_files(self, tmp_path):
        env = {k: v for k, v in os.environ.items() if not k.startswith("GYMAI_")}
        env["PYTHONPATH"] = str(PROJECT_ROOT)
        script = (
            "import plan_export\n"
            "assert plan_export.render_plan_pdf('Rutina', '- Corre 5km').startswith(b'%PDF')\n"
        )

        result = subprocess.run(
            [sys.executable, "-c", script],
            cwd=tmp_path, env=env, capture_output=True, text=True,
        )

        assert result.returncode == 0, result.stderr
        assert list(tmp_path.iterdir()) == []

    def test_only_console_handler_by_default(self):
        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


class TestAddFileHandler:

    def test_writes_to_requested_path(self, tmp_path, detach_file_handlers):
        log_file = tmp_path / "logs" / "export.log"
        handler = add_file_handler(str(log_file))

        get_logger("tests").warning("escrito en disco")
        handler.flush()

        assert "escrito en disco" in log_file.read_text(encoding="utf-8")

    def test_same_path_reuses_handler(self, tmp_path, detach_file_handlers):
        log_file = str(tmp_path / "export.log")
        first = add_file_handler(log_file)
        second = add_file_handler(log_file)

        assert first is second
        file_handlers = [h for h in logging.getLogger(ROOT_LOGGER_NAME).handlers
                         if isinstance(h, logging.FileHandler)]
        assert file_handlers == [first]

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            add_file_handler("")


class TestGetLogger:

    @pytest.mark.parametrize("name, expected", [
        (None, "plan_export"),
        ("plan_export", "plan_export"),
        ("plan_export.segmenter", "plan_export.segmenter"),
        ("tests", "plan_export.tests"),
    ])
    def test_names_live_under_root(self, name, expected):
        assert get_logger(name).name == expected
