# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fishron.logging_setup import level_from_name, setup_logging


@pytest.fixture()
def root_handlers() -> Iterator[list[logging.Handler]]:
    """Restore the root logger (pytest's own capture handlers included) afterwards."""
    root = logging.getLogger()
    saved = list(root.handlers)
    level = root.level
    yield saved
    for h in list(root.handlers):
        if h not in saved:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _ours() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_fishron", False)]


def test_file_gets_everything_stderr_only_own_warnings(
    tmp_path: Path, root_handlers, capsys: pytest.CaptureFixture[str]
) -> None:
    log_file = tmp_path / "logs" / "fishron.log"
    setup_logging(log_file=log_file, console_level=logging.WARNING)

    logging.getLogger("fishron.test").debug("quiet detail")
    logging.getLogger("fishron.test").warning("heads up")
    logging.getLogger("somelib").warning("library chatter")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[WARNING] heads up" in captured.err
    assert "quiet detail" not in captured.err
    assert "library chatter" not in captured.err

    for h in _ours():
        h.flush()
    text = log_file.read_text("utf-8")
    assert "DEBUG fishron.test: quiet detail" in text
    assert "WARNING somelib: library chatter" in text


def test_calling_again_replaces_only_own_handlers(tmp_path: Path, root_handlers) -> None:
    setup_logging(log_file=tmp_path / "a.log")
    setup_logging(log_file=tmp_path / "b.log")

    assert len(_ours()) == 2
    for h in root_handlers:
        assert h in logging.getLogger().handlers


@pytest.mark.parametrize(
    ("name", "level"),
    [("debug", logging.DEBUG), (" INFO ", logging.INFO), ("Error", logging.ERROR), ("loud", logging.WARNING)],
)
def test_level_from_name(name: str, level: int) -> None:
    assert level_from_name(name) == level
