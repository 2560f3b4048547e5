"""Error and issue types for the revenue tree text codec.

The parser never aborts on a malformed record.  Each anomaly is recorded
as a ``ParseIssue`` carrying its 1-based line number; the active
``ParsePolicy`` then decides whether the collected issues are tolerated
or raised together as a ``TreeParseError``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class RevtreeError(Exception):
    """Base class for every error raised by revtree."""


class ParsePolicy(Enum):
    """How the parser treats records it cannot place in the tree.

    LENIENT
        Skip the record, remember the issue and keep going.  This is the
        default and matches the historical behavior of the text format.
    STRICT
        Keep going so that every issue is collected, then raise
        ``TreeParseError`` if any were recorded.
    """

    LENIENT = auto()
    STRICT = auto()


class IssueKind(Enum):
    """Categories of records the parser drops."""

    UNRECOGNIZED_RECORD = auto()
    ORPHAN_LINE = auto()
    DEGENERATE_GAME = auto()
    INVALID_REVENUE = auto()
    TRAILING_CONTENT = auto()


@dataclass(frozen=True)
class ParseIssue:
    """A single dropped record.

    Parameters
    ----------
    kind:
        Why the record was dropped.
    line:
        1-based line number of the record.
    text:
        The raw line as read from the source.
    message:
        Human-readable description.
    """

    kind: IssueKind
    line: int
    text: str
    message: str

    def __str__(self) -> str:
        return f"line {self.line}: {self.message} ({self.kind.name}) {self.text!r}"


class InvalidRevenueError(ValueError):
    """Raised when the revenue token of a game record is not a number."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid revenue value {token!r}")
        self.token = token


@dataclass
class TreeParseError(RevtreeError):
    """Raised when text cannot be turned into a tree.

    Parameters
    ----------
    message:
        Summary of the failure.
    issues:
        Every issue recorded during the parse run, in source order.
    """

    message: str
    issues: list[ParseIssue] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.args = (str(self),)

    def __str__(self) -> str:
        if not self.issues:
            return self.message
        lines = [f"{self.message} ({len(self.issues)} issue(s)):"]
        for issue in self.issues:
            lines.append(f"  {issue}")
        return "\n".join(lines)


class EmptyTreeError(TreeParseError):
    """Raised when parsing produces no root group."""
