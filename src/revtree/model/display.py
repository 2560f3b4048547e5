"""Human-readable rendering of a revenue tree.

``display`` returns text lines only; writing them to a console is left to
the caller (the CLI prints them through ``rich``).

Layout, with 2-space indentation per level::

    ----- Casino -----
      ----- Table Games -----
        Blackjack | Revenue: 100.0
        Roulette | Revenue: 50.5
      Total: 150.5
    Total: 150.5
"""
from __future__ import annotations

from revtree.model.nodes import Game, Group, Node, format_revenue, get_revenue

_INDENT = "  "  # 2 spaces per level


class TreeDisplay:
    """Renders a node and its descendants as indented report lines."""

    def render(self, node: Node, indent: int = 0) -> list[str]:
        """Return one line per game, plus a header and total line per group.

        Parameters
        ----------
        node:
            The subtree root to render.
        indent:
            Nesting level of ``node`` itself.
        """
        lines: list[str] = []
        self._render_node(node, indent, lines)
        return lines

    def _render_node(self, node: Node, indent: int, lines: list[str]) -> None:
        prefix = _INDENT * indent
        if isinstance(node, Game):
            lines.append(f"{prefix}{node.name} | Revenue: {format_revenue(node.revenue)}")
            return
        if isinstance(node, Group):
            lines.append(f"{prefix}----- {node.name} -----")
            for child in node.children:
                self._render_node(child, indent + 1, lines)
            lines.append(f"{prefix}Total: {format_revenue(get_revenue(node))}")
            return
        raise TypeError(f"Unknown node type: {type(node)}")


def display(node: Node, indent: int = 0) -> list[str]:
    """Convenience function: render ``node`` with ``TreeDisplay``."""
    return TreeDisplay().render(node, indent)
