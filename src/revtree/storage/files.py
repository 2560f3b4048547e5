"""File persistence for revenue trees.

``load_tree`` reads a whole file and hands its lines to the parser.
``save_tree`` serializes a root group and replaces the destination in a
single ``os.replace`` call, so a failed save leaves the previous file
content intact.

Neither function touches any tree the caller already holds: a failed
load raises before anything is returned.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from revtree.codec.errors import ParsePolicy, RevtreeError
from revtree.codec.parser import parse_lines
from revtree.codec.writer import dumps
from revtree.model.nodes import Group

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "casino.txt"


class StorageError(RevtreeError):
    """Base class for file access failures.

    Parameters
    ----------
    path:
        The file that could not be accessed.
    message:
        Human-readable description.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class TreeNotFoundError(StorageError):
    """Raised when the source file for a load does not exist."""


class TreeReadError(StorageError):
    """Raised when the source file exists but cannot be read."""


class TreeWriteError(StorageError):
    """Raised when the destination file cannot be written."""


def load_tree(path: str | os.PathLike[str], policy: ParsePolicy = ParsePolicy.LENIENT) -> Group:
    """Read a serialized tree from ``path``.

    Parameters
    ----------
    path:
        File to read.
    policy:
        Recovery policy handed to the parser.

    Returns
    -------
    Group
        The root group.

    Raises
    ------
    TreeNotFoundError
        If ``path`` does not exist.
    TreeReadError
        If ``path`` cannot be opened or decoded.
    revtree.codec.TreeParseError
        If no tree could be read, or under ``STRICT`` if any record was
        malformed.
    """
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise TreeNotFoundError(source, "Tree file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TreeReadError(source, f"Cannot read tree file ({exc})") from exc

    result = parse_lines(text.splitlines(), policy=policy)
    if result.issues:
        logger.warning("Dropped %d malformed record(s) from %s", len(result.issues), source)
    logger.info("Loaded tree %r from %s", result.root.name, source)
    return result.root


def save_tree(root: Group, path: str | os.PathLike[str]) -> Path:
    """Write ``root`` to ``path``, replacing any existing content.

    Returns
    -------
    Path
        The destination path.

    Raises
    ------
    TreeWriteError
        If the destination or its temporary sibling cannot be written.
    """
    destination = Path(path)
    text = dumps(root)
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp_name, destination)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise TreeWriteError(destination, f"Cannot write tree file ({exc})") from exc

    logger.info("Saved tree %r to %s", root.name, destination)
    return destination
