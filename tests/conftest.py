"""Pytest configuration and fixtures for g-dep-tree tests."""
from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GDEP_* settings from the developer's shell out of the tests."""
    monkeypatch.delenv("GDEP_ENCODING", raising=False)
    monkeypatch.delenv("GDEP_LOG_LEVEL", raising=False)


@pytest.fixture
def sample_report_path() -> Path:
    return DATA_DIR / "sample-report.txt"


@pytest.fixture
def sample_report_text(sample_report_path: Path) -> str:
    return sample_report_path.read_text(encoding="utf-8")
