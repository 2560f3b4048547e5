"""Catalog module: menu-facing queries and the starter catalog."""
from __future__ import annotations

from revtree.catalog.queries import (
    SelectionError,
    add_game_to_group,
    add_revenue_to_game,
    list_all_games,
    list_direct_groups,
    render_tree,
    select_game,
    select_group,
)
from revtree.catalog.sample import sample_catalog

__all__ = [
    "SelectionError",
    "add_game_to_group",
    "add_revenue_to_game",
    "list_all_games",
    "list_direct_groups",
    "render_tree",
    "sample_catalog",
    "select_game",
    "select_group",
]
