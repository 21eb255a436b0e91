from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from posh_setup.lib.env import UserPaths
from posh_setup.logging_utils import reset_logging


@pytest.fixture
def user_paths(tmp_path: Path) -> UserPaths:
    return UserPaths(
        home=tmp_path / "home",
        local_appdata=tmp_path / "home" / "AppData" / "Local",
        windir=tmp_path / "Windows",
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 12, 30, 45)


@pytest.fixture
def no_path_lookup(monkeypatch):
    """Keep tests from finding real executables on PATH."""
    monkeypatch.setattr("shutil.which", lambda name, *a, **kw: None)


@pytest.fixture
def write_json():
    def _write(path: Path, data) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=4), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()
