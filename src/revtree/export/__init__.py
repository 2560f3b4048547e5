"""Export module.

Exports ``TreeSerializer`` for JSON and YAML round-trips.
"""
from __future__ import annotations

from revtree.export.serializer import TreeSerializer

__all__ = ["TreeSerializer"]
