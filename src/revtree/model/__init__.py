"""Revenue tree model.

Exports the ``Game`` and ``Group`` node variants, the ``Node`` union,
variant dispatch helpers, and the ``display`` renderer.
"""
from __future__ import annotations

from revtree.model.display import TreeDisplay, display
from revtree.model.nodes import (
    Game,
    Group,
    Node,
    NodeKind,
    format_revenue,
    get_revenue,
    is_group,
)

__all__ = [
    "Game",
    "Group",
    "Node",
    "NodeKind",
    "TreeDisplay",
    "display",
    "format_revenue",
    "get_revenue",
    "is_group",
]
