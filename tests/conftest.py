"""Pytest fixtures: scripted random source, sample config."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

import pytest

# Tests must not pick up a developer's env overrides.
for _var in ("TXGEN_CONFIG_PATH", "TXGEN_LOG_LEVEL"):
    os.environ.pop(_var, None)

from txgen.random_source import RandomSource


class ScriptedRandomSource(RandomSource):
    """Replays fixed draws; fails the test if a draw falls outside the requested range."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def next_uniform_int(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self._values:
            raise AssertionError(f"Scripted source exhausted at draw [{low}, {high}]")
        value = self._values.pop(0)
        assert low <= value <= high, f"scripted value {value} outside [{low}, {high}]"
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def scripted():
    """Factory: scripted(values) -> ScriptedRandomSource."""
    return ScriptedRandomSource


@pytest.fixture
def three_record_draws() -> list[int]:
    """Draws for n=3, max_client_id=10, max_amount=100.

    Order per record: kind index, client, tx_ref (referencing kinds only), amount.
    """
    return [
        0, 7, 55,  # deposit, tx 1
        2, 3, 1, 100,  # dispute of tx 1
        4, 10, 2, 1,  # chargeback of tx 2
    ]


@pytest.fixture
def three_record_lines() -> list[str]:
    return [
        "type, client, tx, amount",
        "deposit, 7, 1, 55",
        "dispute, 3, 1, 100",
        "chargeback, 10, 2, 1",
    ]


@pytest.fixture
def config_path(tmp_path: Path) -> str:
    """Return path to a temporary config dir with default.yaml."""
    cfg_dir = tmp_path / "config"
    cfg_dir.mkdir()
    (cfg_dir / "default.yaml").write_text(
        """
app:
  log_level: WARNING
generator:
  record_count: 25
  max_client_id: 50
  max_amount: 500
  seed: 7
"""
    )
    return str(cfg_dir / "default.yaml")
