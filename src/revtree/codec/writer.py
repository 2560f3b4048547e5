"""Serializer: revenue tree → indented text.

Output uses 2-space indentation per level and one record per line::

    GROUP Casino
      GROUP Table Games
        GAME Blackjack 100.0

Revenues are written with ``format_revenue`` (``repr`` of the float), so
``TreeParser`` reads back exactly the value that was stored.

Usage
-----
::

    from revtree.codec import dumps, parse

    text = dumps(root)
    assert parse(text) == root
"""
from __future__ import annotations

from revtree.codec.parser import GAME_PREFIX, GROUP_PREFIX, INDENT_UNIT
from revtree.model.nodes import Game, Group, Node, format_revenue


class TreeWriter:
    """Produces the persisted line format from a node and its descendants."""

    def lines(self, node: Node, depth: int = 0) -> list[str]:
        """Return the serialized lines for ``node`` in pre-order.

        Parameters
        ----------
        node:
            The subtree root to serialize.
        depth:
            Indentation level of ``node`` itself.
        """
        if isinstance(node, Game):
            return [self._format_game(node, depth)]
        if isinstance(node, Group):
            return [
                self._format_game(item, level)
                if isinstance(item, Game)
                else self._format_group(item, level)
                for level, item in node.walk(depth)
            ]
        raise TypeError(f"Unknown node type: {type(node)}")

    def dumps(self, node: Node) -> str:
        """Render ``node`` as text, always ending with a newline."""
        return "\n".join(self.lines(node)) + "\n"

    @staticmethod
    def _format_group(group: Group, depth: int) -> str:
        return f"{INDENT_UNIT * depth}{GROUP_PREFIX}{group.name}"

    @staticmethod
    def _format_game(game: Game, depth: int) -> str:
        return f"{INDENT_UNIT * depth}{GAME_PREFIX}{game.name} {format_revenue(game.revenue)}"


def dump_lines(node: Node, depth: int = 0) -> list[str]:
    """Convenience function: serialize ``node`` to a list of lines."""
    return TreeWriter().lines(node, depth)


def dumps(node: Node) -> str:
    """Convenience function: serialize ``node`` to text.

    Parameters
    ----------
    node:
        The tree root to serialize.

    Returns
    -------
    str
        Indented tree text ending with a newline.
    """
    return TreeWriter().dumps(node)
