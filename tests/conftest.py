from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user settings and stray .env files out of the tests."""
    for name in (
        "COLOREXP_HIGHLIGHT_MODE",
        "COLOREXP_MAX_LINE_LENGTH",
        "COLOREXP_LOG_LEVEL",
        "COLOREXP_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    logger = logging.getLogger("colorexp")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
