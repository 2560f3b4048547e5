"""Recursive-descent parser for the indented revenue tree format.

Input is split into lines up front and consumed through a cursor owned by
a ``TreeParser`` instance.  Each line holds one record::

    GROUP Casino
      GROUP Table Games
        GAME Blackjack 100.0

Indentation
-----------
The depth of a line is the number of complete two-space pairs at its
start.  An odd trailing space is not counted and stays part of the
record text, which then fails prefix classification.

Structure
---------
A group owns every following line whose depth is exactly one more than
its own, until a line at its own depth or shallower appears.  Lines that
are indented by two or more levels past the group, with no intervening
child to claim them, are orphans and are dropped.

Blank lines are skipped before any depth inspection and never affect
the tree shape.

Error recovery
--------------
Unrecognized records, orphan lines, degenerate game records and
malformed revenue tokens are all dropped and recorded as ``ParseIssue``
objects.  Under ``ParsePolicy.STRICT`` the collected issues are raised
as a single ``TreeParseError`` once the pass is complete.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final

from revtree.codec.errors import (
    EmptyTreeError,
    InvalidRevenueError,
    IssueKind,
    ParseIssue,
    ParsePolicy,
    TreeParseError,
)
from revtree.model.nodes import Game, Group, Node

logger = logging.getLogger(__name__)

GROUP_PREFIX: Final[str] = "GROUP "
GAME_PREFIX: Final[str] = "GAME "
INDENT_UNIT: Final[str] = "  "


# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------


def line_depth(line: str) -> int:
    """Return the number of complete two-space pairs at the start of ``line``."""
    depth = 0
    pos = 0
    while line.startswith(INDENT_UNIT, pos):
        depth += 1
        pos += len(INDENT_UNIT)
    return depth


def strip_indent(line: str) -> str:
    """Remove the leading two-space pairs counted by ``line_depth``."""
    return line[line_depth(line) * len(INDENT_UNIT):]


def is_blank(line: str) -> bool:
    """Return True for empty or whitespace-only lines."""
    return not line.strip()


def parse_game_record(body: str) -> Game | None:
    """Parse the text following ``GAME `` into a ``Game``.

    The last whitespace-separated token is the revenue; the tokens before
    it, joined by single spaces, form the name.

    Returns
    -------
    Game | None
        ``None`` when fewer than two tokens are present.

    Raises
    ------
    InvalidRevenueError
        If ``float()`` cannot read the last token.  ``inf`` and ``nan``
        are valid revenues.
    """
    parts = body.split()
    if len(parts) < 2:
        return None
    token = parts[-1]
    try:
        revenue = float(token)
    except ValueError as exc:
        raise InvalidRevenueError(token) from exc
    return Game(name=" ".join(parts[:-1]), revenue=revenue)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


@dataclass
class ParseResult:
    """Outcome of a parse run.

    Parameters
    ----------
    root:
        The root group.
    issues:
        Records dropped along the way, in source order.
    """

    root: Group
    issues: list[ParseIssue] = field(default_factory=list)


class TreeParser:
    """Recursive-descent parser producing a ``Group`` from indented lines.

    Parameters
    ----------
    lines:
        Source lines without line terminators.  A trailing ``"\\r"`` is
        tolerated.
    policy:
        Recovery policy applied once the pass completes.
    """

    def __init__(self, lines: list[str], policy: ParsePolicy = ParsePolicy.LENIENT) -> None:
        self._lines: list[str] = [line.rstrip("\r") for line in lines]
        self._pos: int = 0
        self._policy = policy
        self._issues: list[ParseIssue] = []

    @property
    def issues(self) -> list[ParseIssue]:
        """Issues recorded so far, in source order."""
        return list(self._issues)

    # ------------------------------------------------------------------
    # Navigation helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def _skip_blank(self) -> None:
        while not self._at_end() and is_blank(self._lines[self._pos]):
            self._pos += 1

    def _record_issue(self, kind: IssueKind, message: str) -> None:
        issue = ParseIssue(
            kind=kind,
            line=self._pos + 1,
            text=self._lines[self._pos],
            message=message,
        )
        self._issues.append(issue)
        logger.debug("Dropped record: %s", issue)

    # ------------------------------------------------------------------
    # Top-level parse
    # ------------------------------------------------------------------

    def parse(self) -> ParseResult:
        """Parse the root node and return it with the recorded issues.

        Raises
        ------
        EmptyTreeError
            If no root group could be read.
        TreeParseError
            Under ``ParsePolicy.STRICT``, if any issue was recorded.
        """
        node = self.parse_node()

        self._skip_blank()
        if node is not None and not self._at_end():
            self._record_issue(
                IssueKind.TRAILING_CONTENT,
                "Content after the root group is not part of the tree",
            )

        if node is None:
            raise EmptyTreeError("No tree could be read from the source", self.issues)
        if not isinstance(node, Group):
            raise EmptyTreeError(
                f"Root record must be a group, found game {node.name!r}", self.issues
            )
        if self._policy is ParsePolicy.STRICT and self._issues:
            raise TreeParseError("Malformed revenue tree", self.issues)
        return ParseResult(root=node, issues=self.issues)

    def parse_node(self) -> Node | None:
        """Parse one record at the cursor, including its whole subtree.

        The cursor always advances past at least one line unless input is
        exhausted.  Returns ``None`` when the record was dropped.
        """
        self._skip_blank()
        if self._at_end():
            return None

        text = strip_indent(self._lines[self._pos])
        if text.startswith(GROUP_PREFIX):
            return self._parse_group(text[len(GROUP_PREFIX):])
        if text.startswith(GAME_PREFIX):
            return self._parse_game(text[len(GAME_PREFIX):])

        self._record_issue(IssueKind.UNRECOGNIZED_RECORD, "Unrecognized record")
        self._pos += 1
        return None

    def _parse_group(self, name: str) -> Group:
        """Parse a group header and every child indented one level below it."""
        depth = line_depth(self._lines[self._pos])
        group = Group(name=name)
        self._pos += 1

        while True:
            self._skip_blank()
            if self._at_end():
                break
            child_depth = line_depth(self._lines[self._pos])
            if child_depth <= depth:
                break
            if child_depth == depth + 1:
                child = self.parse_node()
                if child is not None:
                    group.add(child)
            else:
                self._record_issue(
                    IssueKind.ORPHAN_LINE,
                    f"Indented {child_depth - depth} levels below group {name!r}",
                )
                self._pos += 1
        return group

    def _parse_game(self, body: str) -> Game | None:
        try:
            game = parse_game_record(body)
        except InvalidRevenueError as exc:
            self._record_issue(IssueKind.INVALID_REVENUE, str(exc))
            game = None
        else:
            if game is None:
                self._record_issue(
                    IssueKind.DEGENERATE_GAME,
                    "Game record needs a name and a revenue",
                )
        self._pos += 1
        return game


# ---------------------------------------------------------------------------
# Convenience functions
# ---------------------------------------------------------------------------


def parse_lines(lines: list[str], policy: ParsePolicy = ParsePolicy.LENIENT) -> ParseResult:
    """Parse pre-split ``lines`` and return the root with its issues."""
    return TreeParser(lines, policy=policy).parse()


def parse(text: str, policy: ParsePolicy = ParsePolicy.LENIENT) -> Group:
    """Parse indented tree text and return the root group.

    Parameters
    ----------
    text:
        Complete serialized tree.
    policy:
        ``LENIENT`` drops malformed records; ``STRICT`` raises on them.

    Raises
    ------
    EmptyTreeError
        If no root group could be read.
    TreeParseError
        Under ``ParsePolicy.STRICT``, if any record was malformed.
    """
    return parse_lines(text.splitlines(), policy=policy).root
