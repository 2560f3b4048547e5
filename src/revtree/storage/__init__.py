"""Storage module.

Exports ``load_tree``, ``save_tree`` and the file error types.
"""
from __future__ import annotations

from revtree.storage.files import (
    DEFAULT_FILENAME,
    StorageError,
    TreeNotFoundError,
    TreeReadError,
    TreeWriteError,
    load_tree,
    save_tree,
)

__all__ = [
    "DEFAULT_FILENAME",
    "load_tree",
    "save_tree",
    "StorageError",
    "TreeNotFoundError",
    "TreeReadError",
    "TreeWriteError",
]
