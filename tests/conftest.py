# tests/conftest.py
import os

import pytest

# Widget tests run headless (CI / no display).
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from hangul_rr.domain.hangul_parser import HangulParser


@pytest.fixture(scope="session")
def parser() -> HangulParser:
    return HangulParser()


@pytest.fixture
def settings_path(tmp_path):
    """A settings.yaml in a temp dir whose vocabulary log stays in that dir."""
    p = tmp_path / "settings.yaml"
    p.write_text("log_path: hangul-log.yaml\n", encoding="utf-8")
    return p
