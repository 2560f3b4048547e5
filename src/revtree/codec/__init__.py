"""Text codec for revenue trees.

Exports the ``TreeParser`` and ``TreeWriter`` classes, their convenience
functions, and the parse error and policy types.
"""
from __future__ import annotations

from revtree.codec.errors import (
    EmptyTreeError,
    InvalidRevenueError,
    IssueKind,
    ParseIssue,
    ParsePolicy,
    RevtreeError,
    TreeParseError,
)
from revtree.codec.parser import ParseResult, TreeParser, parse, parse_lines
from revtree.codec.writer import TreeWriter, dump_lines, dumps

__all__ = [
    "TreeParser",
    "TreeWriter",
    "ParseResult",
    "parse",
    "parse_lines",
    "dumps",
    "dump_lines",
    "ParsePolicy",
    "ParseIssue",
    "IssueKind",
    "RevtreeError",
    "TreeParseError",
    "EmptyTreeError",
    "InvalidRevenueError",
]
