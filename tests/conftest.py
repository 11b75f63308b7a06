"""Shared pytest fixtures for ernkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from ernkit.domain.clock import FixedClock
from ernkit.domain.root import RootIdGenerator

EPOCH_MS = 1_700_000_000_000


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery away from the developer's own ernkit.toml and env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ERNKIT_CONFIG", raising=False)
    for name in ("ERNKIT_JSON_OUTPUT", "ERNKIT_QUIET", "ERNKIT_VERBOSE", "ERNKIT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock pinned at a known instant; advance it explicitly."""
    return FixedClock(EPOCH_MS)


@pytest.fixture
def generator(fixed_clock: FixedClock) -> RootIdGenerator:
    """Deterministic generator: fixed clock, zero random bits."""
    return RootIdGenerator(clock=fixed_clock, randbits=lambda _k: 0)
