"""Shared test fixtures for revtree.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from revtree.model.nodes import Game, Group

CASINO_TEXT = (
    "GROUP Casino\n"
    "  GROUP Table Games\n"
    "    GAME Blackjack 100.0\n"
    "    GAME Roulette 50.5\n"
    "  GROUP Slot Games\n"
    "    GAME Mega Joker 0\n"
)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "revtree"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def casino_text() -> str:
    """Serialized form of the ``casino`` tree."""
    return CASINO_TEXT


@pytest.fixture()
def casino() -> Group:
    """A two-level casino tree with three games and a total of 150.5."""
    table_games = Group("Table Games")
    table_games.add(Game("Blackjack", 100.0))
    table_games.add(Game("Roulette", 50.5))
    slot_games = Group("Slot Games")
    slot_games.add(Game("Mega Joker", 0.0))
    root = Group("Casino")
    root.add(table_games)
    root.add(slot_games)
    return root


@pytest.fixture()
def casino_file(tmp_path: Path) -> Path:
    """A tree file on disk holding ``CASINO_TEXT``."""
    path = tmp_path / "casino.txt"
    path.write_text(CASINO_TEXT, encoding="utf-8")
    return path
