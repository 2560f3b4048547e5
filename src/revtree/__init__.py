"""revtree: hierarchical game revenue catalog with an indented text format.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import revtree

    root = revtree.parse('''
    GROUP Casino
      GROUP Table Games
        GAME Blackjack 100.0
        GAME Roulette 50.5
    ''')

    root.total_revenue()          # 150.5
    print(revtree.dumps(root))    # canonical indented text
    revtree.render(root)          # display lines with totals

    revtree.save(root, "casino.txt")
    root = revtree.load("casino.txt")

    revtree.__version__
    '0.1.0'
"""
from __future__ import annotations

import os
from typing import TYPE_CHECKING

from revtree.codec.errors import ParsePolicy
from revtree.convenience import RevenueCatalog
from revtree.model.nodes import Game, Group, Node

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from pathlib import Path


def parse(source: str, strict: bool = False) -> Group:
    """Parse indented tree text into its root ``Group``.

    Parameters
    ----------
    source:
        Complete serialized tree.
    strict:
        When ``True``, any malformed record raises instead of being
        skipped.

    Raises
    ------
    revtree.codec.TreeParseError
        If no root group can be read, or in strict mode on any issue.
    """
    from revtree.codec.parser import parse as _parse

    return _parse(source, policy=ParsePolicy.STRICT if strict else ParsePolicy.LENIENT)


def dumps(root: Node) -> str:
    """Serialize a tree to the indented text format."""
    from revtree.codec.writer import dumps as _dumps

    return _dumps(root)


def render(root: Node) -> list[str]:
    """Return human-readable display lines with per-group totals."""
    from revtree.model.display import display

    return display(root)


def load(path: str | os.PathLike[str], strict: bool = False) -> Group:
    """Load a tree from ``path``.

    Raises
    ------
    revtree.storage.TreeNotFoundError
        If the file does not exist.
    revtree.codec.TreeParseError
        If no root group can be read, or in strict mode on any issue.
    """
    from revtree.storage.files import load_tree

    return load_tree(path, policy=ParsePolicy.STRICT if strict else ParsePolicy.LENIENT)


def save(root: Group, path: str | os.PathLike[str]) -> "Path":
    """Save a tree to ``path``, replacing the file atomically."""
    from revtree.storage.files import save_tree

    return save_tree(root, path)


__all__ = [
    "__version__",
    "Game",
    "Group",
    "Node",
    "ParsePolicy",
    "RevenueCatalog",
    "parse",
    "dumps",
    "render",
    "load",
    "save",
]
