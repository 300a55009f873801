"""Shared fixtures for Pi-hole Monitor tests."""

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator
from unittest.mock import patch

import pytest

from helpers import NOW, FakePihole
from pihole_monitor.config import PiholeSettings


@pytest.fixture(autouse=True)
def isolated_env() -> Iterator[None]:
    """Hide PIHOLE_* and CONFIG_PATH from the host and restore os.environ afterwards."""
    env = {
        key: value
        for key, value in os.environ.items()
        if not (key.startswith("PIHOLE_") or key == "CONFIG_PATH")
    }
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: NOW


@pytest.fixture
def settings(tmp_path: Path) -> PiholeSettings:
    """Settings pointing at a fake appliance and a temp state dir."""
    return PiholeSettings(
        base_url="http://pihole.test",
        password="",
        state_dir=str(tmp_path / "state"),
    )


@pytest.fixture
def fake_pihole() -> FakePihole:
    return FakePihole()
