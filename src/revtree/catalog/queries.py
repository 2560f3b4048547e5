"""Menu-facing queries and mutations over a revenue tree.

Menus present numbered lists, so listings use 1-based indices and the
``select_*`` helpers resolve those indices back to nodes.
"""
from __future__ import annotations

from revtree.codec.errors import RevtreeError
from revtree.model.display import display
from revtree.model.nodes import Game, Group


class SelectionError(RevtreeError, IndexError):
    """Raised when a 1-based menu index is out of range."""

    def __init__(self, what: str, index: int, count: int) -> None:
        super().__init__(f"No {what} at position {index} (choose 1-{count})")
        self.index = index
        self.count = count


def list_direct_groups(root: Group) -> list[tuple[int, str]]:
    """Return ``(index, name)`` for each direct child group of ``root``.

    Indices count groups only, 1..n, not their position among all children.
    """
    return [(i, group.name) for i, group in enumerate(root.get_groups(), start=1)]


def list_all_games(root: Group) -> list[tuple[int, str, float]]:
    """Return ``(index, name, revenue)`` for every game, depth-first."""
    return [
        (i, game.name, game.revenue)
        for i, game in enumerate(root.get_all_games(), start=1)
    ]


def select_group(root: Group, index: int) -> Group:
    """Resolve a 1-based index from ``list_direct_groups``."""
    groups = root.get_groups()
    if not 1 <= index <= len(groups):
        raise SelectionError("group", index, len(groups))
    return groups[index - 1]


def select_game(root: Group, index: int) -> Game:
    """Resolve a 1-based index from ``list_all_games``."""
    games = root.get_all_games()
    if not 1 <= index <= len(games):
        raise SelectionError("game", index, len(games))
    return games[index - 1]


def add_game_to_group(group: Group, name: str, revenue: float) -> Game:
    """Create a game and append it to ``group``.

    Runs of whitespace in ``name`` collapse to single spaces, matching the
    name the parser reads back.

    Raises
    ------
    ValueError
        If ``name`` is blank or contains a line break.
    """
    if not name.strip():
        raise ValueError("Game name must not be blank")
    if "\n" in name or "\r" in name:
        raise ValueError("Game name must not contain line breaks")
    game = Game(name=" ".join(name.split()), revenue=revenue)
    group.add(game)
    return game


def add_revenue_to_game(game: Game, amount: float) -> float:
    """Add ``amount`` to ``game`` and return its new revenue."""
    game.add_revenue(amount)
    return game.revenue


def render_tree(root: Group) -> list[str]:
    """Return the display lines for the whole tree."""
    return display(root)
