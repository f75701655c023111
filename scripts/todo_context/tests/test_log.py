"""Tests for configure_logging()."""

from __future__ import annotations

import logging

import pytest

from todo_context.log import HANDLER_NAME, LOGGER_NAMES, configure_logging


@pytest.fixture(autouse=True)
def restore_loggers():
    """Put the package loggers back the way the test found them."""
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers))
        for name in LOGGER_NAMES
    }
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers[:] = handlers


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_debug_flag_enables_debug_level(self) -> None:
        configure_logging(debug=True)

        for name in LOGGER_NAMES:
            assert logging.getLogger(name).level == logging.DEBUG

    def test_defaults_to_warning(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DEBUG", raising=False)

        configure_logging()

        for name in LOGGER_NAMES:
            assert logging.getLogger(name).level == logging.WARNING

    def test_reads_debug_environment_variable(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DEBUG", "1")

        configure_logging()

        assert logging.getLogger("todo_context").level == logging.DEBUG

    def test_does_not_stack_handlers(self) -> None:
        """Repeated calls keep a single stderr handler per logger."""
        before = len(logging.getLogger("storage").handlers)

        configure_logging(debug=False)
        configure_logging(debug=True)

        assert len(logging.getLogger("storage").handlers) == before + 1

    def test_handler_is_named(self) -> None:
        """The stderr handler is found by its public name."""
        configure_logging(debug=False)

        for name in LOGGER_NAMES:
            names = [h.get_name() for h in logging.getLogger(name).handlers]
            assert names.count(HANDLER_NAME) == 1

    def test_writes_container_messages_to_stderr(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        from storage.memory_backend import MemoryStorageBackend
        from todo_context.container import TodoContainer

        configure_logging(debug=True)
        TodoContainer(MemoryStorageBackend(), clock=lambda: 1).create("logged")

        err = capsys.readouterr().err
        assert "DEBUG todo_context.container: Created todo 'logged1'" in err
