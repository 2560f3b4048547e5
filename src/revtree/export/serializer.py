"""Structured export of revenue trees to and from JSON and YAML.

The indented text format is the persistence format; this module offers a
plain dict/list form for tools that prefer structured data.  Every node
dict carries a ``"kind"`` discriminator so that deserialization is
unambiguous, and group dicts include a read-only ``"total"`` for
convenience (ignored on the way back in).

Usage
-----
::

    from revtree.export import TreeSerializer

    serializer = TreeSerializer()
    json_text = serializer.to_json(root)
    root2 = serializer.from_json(json_text)
    assert root == root2
"""
from __future__ import annotations

import json

import yaml

from revtree.model.nodes import Game, Group, Node, get_revenue


class TreeSerializer:
    """Converts between revenue trees and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (tree → dict)
    # ------------------------------------------------------------------

    def to_dict(self, node: Node) -> dict[str, object]:
        """Serialize a node and its subtree to a JSON-compatible dict."""
        if isinstance(node, Game):
            return {"kind": "Game", "name": node.name, "revenue": node.revenue}
        if isinstance(node, Group):
            return {
                "kind": "Group",
                "name": node.name,
                "total": get_revenue(node),
                "children": [self.to_dict(child) for child in node.children],
            }
        raise TypeError(f"Unknown node type: {type(node)}")

    # ------------------------------------------------------------------
    # Deserialization (dict → tree)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Node:
        """Deserialize a node from a plain dict."""
        kind = data.get("kind")
        if kind == "Game":
            return Game(name=str(data["name"]), revenue=float(data.get("revenue", 0.0)))
        if kind == "Group":
            group = Group(name=str(data["name"]))
            for child in data.get("children", []):
                group.add(self.from_dict(child))
            return group
        raise ValueError(f"Unknown node kind: {kind!r}")

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, node: Node, indent: int = 2) -> str:
        """Serialize a node to a JSON string."""
        return json.dumps(self.to_dict(node), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Node:
        """Deserialize a node from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, node: Node) -> str:
        """Serialize a node to a YAML string."""
        return yaml.dump(
            self.to_dict(node), default_flow_style=False, allow_unicode=True, sort_keys=False
        )

    def from_yaml(self, text: str) -> Node:
        """Deserialize a node from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
