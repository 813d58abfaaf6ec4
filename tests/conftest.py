from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from vernum.core.config import VernumConfig, set_config


@pytest.fixture(autouse=True)
def case_sensitive_config():
    """Pin a case-sensitive config so results do not depend on the host OS."""
    config = VernumConfig(case_sensitive=True)
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture(autouse=True)
def reset_vernum_logger():
    yield
    # configure_logging() detaches the package logger from the root logger
    root = logging.getLogger("vernum")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[..., Path]:
    """Create empty files under tmp_path and return the directory."""

    def _make(*names: str) -> Path:
        for name in names:
            (tmp_path / name).write_text("", encoding="utf-8")
        return tmp_path

    return _make
