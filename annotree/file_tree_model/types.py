"""Domain datatypes for collected filesystem tree entries."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Coarse node type as observed via ``lstat``."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


def entry_kind_for_mode(mode: int) -> EntryKind:
    """Map an ``st_mode`` value to an :class:`EntryKind`."""
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


@dataclass(frozen=True)
class TreeEntry:
    """One visited filesystem node plus the metadata shown next to it.

    ``size`` and ``mtime`` describe the node itself (symbolic links are not
    followed). ``link_target`` is only set for symbolic links whose target
    could be read.
    """

    path: Path
    depth: int
    name: str
    kind: EntryKind
    size: int = 0
    mtime: float = 0.0
    link_target: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK


__all__ = [
    "EntryKind",
    "TreeEntry",
    "entry_kind_for_mode",
]
