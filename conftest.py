"""
Root conftest.py: isolates tests from the caller's environment and
registers custom markers.

Markers:
  @pytest.mark.rendering  : asserts on an emulated screen (needs pyte)
"""
from __future__ import annotations

import os

import pytest

_ENV_PREFIX = "TERMTRAILER_"


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_termtrailer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop TERMTRAILER_* variables so a developer's shell can't change results."""
    for key in list(os.environ):
        if key.startswith(_ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "rendering: test feeds controller output into an emulated VT100 screen",
    )
