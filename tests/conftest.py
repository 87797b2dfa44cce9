from __future__ import annotations

from pathlib import Path

import pytest

from tellme.config import get_settings
from tellme.storage import SessionStore


@pytest.fixture
def store(tmp_path: Path) -> SessionStore:
    return SessionStore(
        99999,
        config_dir=tmp_path / "my_tellme_config",
        temp_dir=tmp_path / "tellme",
    )


@pytest.fixture
def tellme_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("TELLME_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("TELLME_TEMP_DIR", str(tmp_path / "temp"))
    monkeypatch.setenv("TELLME_SHELL_PID", "4242")
    monkeypatch.delenv("TELLME_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
