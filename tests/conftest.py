from __future__ import annotations

from pathlib import Path
import pytest

from pysimpleini import ConfigStore


@pytest.fixture()
def ini_path(tmp_path: Path) -> Path:
    """
    path of a not-yet-existing ini file.
    tests write the content they need into it.
    """
    return tmp_path / "settings.ini"


@pytest.fixture()
def store(ini_path: Path) -> ConfigStore:
    return ConfigStore(ini_path, header_comment="Created by tests")


@pytest.fixture()
def unwritable_path(tmp_path: Path) -> Path:
    # parent directory never gets created, so open() fails.
    return tmp_path / "missing" / "settings.ini"
