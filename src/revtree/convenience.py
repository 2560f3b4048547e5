"""Convenience API for revtree: a tree bound to its file.

``RevenueCatalog`` holds the current root together with the path it is
saved to, and offers the menu operations by 1-based index.  A failed
``load`` leaves the current root in place.

Example
-------
::

    from revtree import RevenueCatalog

    catalog = RevenueCatalog("casino.txt")
    catalog.add_revenue(1, 25.0)
    catalog.save()
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from revtree.codec.errors import ParsePolicy

if TYPE_CHECKING:
    from revtree.model.nodes import Game, Group


class RevenueCatalog:
    """A revenue tree bound to a file path.

    Parameters
    ----------
    path:
        File used by ``load`` and ``save``.
    root:
        Starting tree.  When omitted the starter catalog is used.
    policy:
        Recovery policy used by ``load``.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        root: "Group | None" = None,
        policy: ParsePolicy = ParsePolicy.LENIENT,
    ) -> None:
        from revtree.catalog import sample_catalog

        self._path = Path(path)
        self._policy = policy
        self._root: Group = root if root is not None else sample_catalog()

    @classmethod
    def open(
        cls, path: str | os.PathLike[str], policy: ParsePolicy = ParsePolicy.LENIENT
    ) -> "RevenueCatalog":
        """Return a catalog loaded from ``path``, or the starter one if it is missing."""
        from revtree.storage import TreeNotFoundError

        catalog = cls(path, policy=policy)
        try:
            catalog.load()
        except TreeNotFoundError:
            pass
        return catalog

    @property
    def path(self) -> Path:
        return self._path

    @property
    def root(self) -> "Group":
        """The current root group."""
        return self._root

    @property
    def total(self) -> float:
        return self._root.total_revenue()

    def load(self) -> "Group":
        """Replace the current root with the tree stored at ``path``.

        Raises the storage or parse error unchanged; the current root is
        kept when loading fails.
        """
        from revtree.storage import load_tree

        self._root = load_tree(self._path, policy=self._policy)
        return self._root

    def save(self) -> Path:
        """Write the current root to ``path``."""
        from revtree.storage import save_tree

        return save_tree(self._root, self._path)

    def render(self) -> list[str]:
        """Return the display lines of the current tree."""
        from revtree.catalog import render_tree

        return render_tree(self._root)

    def add_game(self, group_index: int, name: str, revenue: float) -> "Game":
        """Add a game to the direct child group at ``group_index`` (1-based)."""
        from revtree.catalog import add_game_to_group, select_group

        return add_game_to_group(select_group(self._root, group_index), name, revenue)

    def add_revenue(self, game_index: int, amount: float) -> float:
        """Add revenue to the game at ``game_index`` (1-based, depth-first)."""
        from revtree.catalog import add_revenue_to_game, select_game

        return add_revenue_to_game(select_game(self._root, game_index), amount)

    def __repr__(self) -> str:
        return f"RevenueCatalog(root={self._root.name!r}, path={str(self._path)!r})"
