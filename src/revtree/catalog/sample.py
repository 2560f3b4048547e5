"""Starter catalog used when no tree file exists yet."""
from __future__ import annotations

from revtree.model.nodes import Game, Group


def sample_catalog() -> Group:
    """Return a fresh copy of the starter casino tree, all revenues zero."""
    table_games = Group("Table Games")
    table_games.add(Game("Blackjack", 0))
    table_games.add(Game("Roulette", 0))

    slot_games = Group("Slot Games")
    slot_games.add(Game("Mega Joker", 0))

    root = Group("Casino Games")
    root.add(table_games)
    root.add(slot_games)
    return root
