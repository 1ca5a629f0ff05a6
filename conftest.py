"""Pytest configuration and fixtures.

This module provides shared fixtures and configuration for the test suite.
Every test gets its own config root so nothing touches ~/.config/ilo.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"


if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture
def config_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point $ILO_CONFIG_HOME at a not-yet-created directory."""
    root = tmp_path / "nested" / "ilo"
    monkeypatch.setenv("ILO_CONFIG_HOME", str(root))
    return root
