"""Shared test fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture():
    """Return a helper that reads an HTML fixture file."""

    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def fixture_path():
    """Return a helper that builds the path of a fixture file."""

    def _path(name: str) -> Path:
        return FIXTURES_DIR / name

    return _path
