"""Unit tests for revtree.export.serializer — TreeSerializer."""
from __future__ import annotations

import json

import pytest
import yaml

from revtree.export.serializer import TreeSerializer
from revtree.model.nodes import Game, Group


@pytest.fixture()
def serializer() -> TreeSerializer:
    return TreeSerializer()


class TestToDict:
    def test_game(self, serializer: TreeSerializer) -> None:
        assert serializer.to_dict(Game("Keno", 2.5)) == {
            "kind": "Game",
            "name": "Keno",
            "revenue": 2.5,
        }

    def test_group_includes_total(self, serializer: TreeSerializer, casino: Group) -> None:
        data = serializer.to_dict(casino)
        assert data["kind"] == "Group"
        assert data["total"] == 150.5
        assert [c["name"] for c in data["children"]] == ["Table Games", "Slot Games"]

    def test_unknown_type(self, serializer: TreeSerializer) -> None:
        with pytest.raises(TypeError):
            serializer.to_dict(3.0)  # type: ignore[arg-type]


class TestFromDict:
    def test_total_is_ignored(self, serializer: TreeSerializer) -> None:
        data = {
            "kind": "Group",
            "name": "Root",
            "total": 999,
            "children": [{"kind": "Game", "name": "a", "revenue": 1}],
        }
        root = serializer.from_dict(data)
        assert root == Group("Root", [Game("a", 1.0)])
        assert root.total_revenue() == 1.0

    def test_missing_children(self, serializer: TreeSerializer) -> None:
        assert serializer.from_dict({"kind": "Group", "name": "Empty"}) == Group("Empty")

    def test_unknown_kind(self, serializer: TreeSerializer) -> None:
        with pytest.raises(ValueError, match="Unknown node kind"):
            serializer.from_dict({"kind": "Table", "name": "x"})


class TestJsonYaml:
    def test_json_round_trip(self, serializer: TreeSerializer, casino: Group) -> None:
        assert serializer.from_json(serializer.to_json(casino)) == casino

    def test_json_is_valid(self, serializer: TreeSerializer, casino: Group) -> None:
        assert json.loads(serializer.to_json(casino))["name"] == "Casino"

    def test_yaml_round_trip(self, serializer: TreeSerializer, casino: Group) -> None:
        assert serializer.from_yaml(serializer.to_yaml(casino)) == casino

    def test_yaml_keeps_key_order(self, serializer: TreeSerializer, casino: Group) -> None:
        data = yaml.safe_load(serializer.to_yaml(casino))
        assert list(data) == ["kind", "name", "total", "children"]

    def test_unicode_names(self, serializer: TreeSerializer) -> None:
        root = Group("Casinò", [Game("Glücksrad", 1.0)])
        assert "Glücksrad" in serializer.to_json(root)
        assert serializer.from_yaml(serializer.to_yaml(root)) == root
