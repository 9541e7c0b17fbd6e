"""Shared pytest fixtures for mediatype tests."""

from __future__ import annotations

from pathlib import Path

import pytest

_ENV_KEYS = ("MEDIATYPE_LOG_LEVEL", "MEDIATYPE_FALLBACK", "MEDIATYPE_HISTORY_FILE")


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    history = tmp_path / ".mediatype_history"
    monkeypatch.setenv("MEDIATYPE_HISTORY_FILE", str(history))
    return history


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: Path):
    from mediatype.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def history_file(_isolate_env: Path) -> Path:
    return _isolate_env
