"""Node definitions for the revenue tree.

A revenue tree is a composite of two node variants:

- ``Game`` is a leaf that carries a mutable revenue figure.
- ``Group`` is a named container that owns an ordered list of child nodes.

``Node`` is the union of both variants.  Operations that apply to every
node (``get_revenue``, ``is_group``) are plain functions that dispatch on
the variant with ``isinstance`` so callers never need to downcast.  The
matching methods on each class delegate to the same logic.

Ownership is strictly hierarchical: a child belongs to exactly one group
and nodes hold no reference to their parent.  Aggregate revenue is never
cached; it is recomputed from the leaves on every call.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class NodeKind(Enum):
    """Discriminator for the two node variants."""

    GAME = auto()
    GROUP = auto()


# ---------------------------------------------------------------------------
# Leaf
# ---------------------------------------------------------------------------


@dataclass
class Game:
    """A revenue-generating leaf.

    Parameters
    ----------
    name:
        Display name.  May contain spaces, must not contain newlines.
    revenue:
        Current revenue.  Negative values are allowed.
    """

    name: str
    revenue: float = 0.0

    def __post_init__(self) -> None:
        self.revenue = float(self.revenue)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.GAME

    def is_group(self) -> bool:
        return False

    def total_revenue(self) -> float:
        """Return the stored revenue."""
        return self.revenue

    def add_revenue(self, amount: float) -> None:
        """Add ``amount`` to the stored revenue.

        No bounds checking is applied, so the total may become negative.
        """
        self.revenue += float(amount)


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------


@dataclass
class Group:
    """A named container of games and nested groups.

    Parameters
    ----------
    name:
        Display name of the group.
    children:
        Owned child nodes in insertion order.
    """

    name: str
    children: list[Node] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.GROUP

    def is_group(self) -> bool:
        return True

    def total_revenue(self) -> float:
        """Return the sum of every game revenue in this subtree."""
        return sum((get_revenue(child) for child in self.children), 0.0)

    def add(self, child: Node) -> Node:
        """Append ``child`` to the end of this group and return it.

        Raises
        ------
        TypeError
            If ``child`` is not a ``Game`` or ``Group``.
        ValueError
            If ``child`` is this group itself.
        """
        if not isinstance(child, (Game, Group)):
            raise TypeError(f"Cannot add {type(child).__name__!r} to a group")
        if child is self:
            raise ValueError(f"Group {self.name!r} cannot contain itself")
        self.children.append(child)
        return child

    def get_children(self) -> list[Node]:
        """Return the direct children in insertion order.

        The returned list is a copy; mutating it does not change the group.
        """
        return list(self.children)

    def get_groups(self) -> list[Group]:
        """Return only the direct children that are groups."""
        return [child for child in self.children if isinstance(child, Group)]

    def get_all_games(self) -> list[Game]:
        """Return every game in the subtree, depth-first, left to right."""
        games: list[Game] = []
        for child in self.children:
            if isinstance(child, Group):
                games.extend(child.get_all_games())
            else:
                games.append(child)
        return games

    def walk(self, depth: int = 0) -> Iterator[tuple[int, Node]]:
        """Yield ``(depth, node)`` pairs in pre-order, starting with ``self``."""
        yield depth, self
        for child in self.children:
            if isinstance(child, Group):
                yield from child.walk(depth + 1)
            else:
                yield depth + 1, child


Node = Union[Game, Group]


# ---------------------------------------------------------------------------
# Variant dispatch
# ---------------------------------------------------------------------------


def get_revenue(node: Node) -> float:
    """Return the revenue of a game or the aggregate revenue of a group."""
    if isinstance(node, Game):
        return node.revenue
    if isinstance(node, Group):
        return node.total_revenue()
    raise TypeError(f"Unknown node type: {type(node)}")


def is_group(node: Node) -> bool:
    """Return True if ``node`` is a ``Group``."""
    if isinstance(node, Group):
        return True
    if isinstance(node, Game):
        return False
    raise TypeError(f"Unknown node type: {type(node)}")


def format_revenue(value: float) -> str:
    """Render a revenue as the shortest text that ``float()`` reads back exactly."""
    return repr(float(value))
