"""Shared fixtures for hook engine tests."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest

from contexthooks.hooks.cache import HookCache
from contexthooks.hooks.manager import HookExecutor


class FakeClock:
    """A manually advanced clock for deterministic expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def executor() -> HookExecutor:
    return HookExecutor()


@pytest.fixture
def clocked_executor(clock: FakeClock) -> HookExecutor:
    """An executor whose cache expiry follows the fake clock."""
    return HookExecutor(HookCache(clock=clock))


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at an empty temp dir so no real config leaks in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def write_agent(tmp_path: Path):
    """Write an agent document as JSON and return its path."""

    def _write(data: dict[str, Any], name: str = "agent.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write
