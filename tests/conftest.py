"""Shared fixtures for transchoice tests."""

from __future__ import annotations

import os

import pytest

from transchoice.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TRANSCHOICE_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
