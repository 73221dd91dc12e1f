from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from colorexp.config import load_config
from colorexp.core.palette import HighlightMode
from colorexp.utils.logger import setup_logging


def test_defaults() -> None:
    config = load_config()
    assert config.highlight_mode == HighlightMode.FOREGROUND
    assert config.max_line_length == 65536
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLOREXP_HIGHLIGHT_MODE", "both")
    monkeypatch.setenv("COLOREXP_MAX_LINE_LENGTH", "128")
    config = load_config()
    assert config.highlight_mode == HighlightMode.BOTH
    assert config.max_line_length == 128


def test_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("COLOREXP_HIGHLIGHT_MODE=background\n", encoding="utf-8")
    assert load_config().highlight_mode == HighlightMode.BACKGROUND


@pytest.mark.parametrize(
    ("name", "value"),
    [("COLOREXP_MAX_LINE_LENGTH", "0"), ("COLOREXP_HIGHLIGHT_MODE", "rainbow")],
)
def test_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        load_config()


# ── Logging ───────────────────────────────────────────────────────


def test_setup_logging_is_idempotent() -> None:
    first = setup_logging(log_level="DEBUG")
    second = setup_logging(log_level="ERROR")
    assert first is second
    assert len(first.handlers) == 1
    assert first.level == logging.DEBUG


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "colorexp.log"
    logger = setup_logging(log_file=log_file, log_level="INFO")
    logging.getLogger("colorexp.core.collector").info("compiled")
    for handler in logger.handlers:
        handler.flush()
    assert "compiled" in log_file.read_text(encoding="utf-8")
