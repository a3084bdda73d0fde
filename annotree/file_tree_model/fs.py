"""Filesystem walking that turns a root path into pre-ordered tree entries.

Unreadable children are skipped rather than aborting the walk, so a live tree
with permission holes or concurrent deletions still yields partial results.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .types import EntryKind, TreeEntry, entry_kind_for_mode

logger = logging.getLogger(__name__)


def is_hidden(name: str) -> bool:
    """Return whether ``name`` follows the dot-file hidden convention."""
    return name.startswith(".")


def root_display_name(root: Path) -> str:
    """Label for the root row: its final component, or the path as typed."""
    return root.name or str(root)


def read_link_target(path: Path) -> str | None:
    """Return raw symlink text for ``path`` or ``None`` when it cannot be read."""
    try:
        return os.readlink(path)
    except OSError as exc:
        logger.debug("cannot read link target of %s: %s", path, exc)
        return None


def stat_entry(path: Path, name: str, depth: int) -> TreeEntry | None:
    """Build a :class:`TreeEntry` from ``lstat``; ``None`` when stat fails."""
    try:
        st = os.lstat(path)
    except OSError as exc:
        logger.debug("skipping %s: %s", path, exc)
        return None

    kind = entry_kind_for_mode(st.st_mode)
    return TreeEntry(
        path=path,
        depth=depth,
        name=name,
        kind=kind,
        size=int(st.st_size),
        mtime=float(st.st_mtime),
        link_target=read_link_target(path) if kind is EntryKind.SYMLINK else None,
    )


def _is_dir_no_follow(child: os.DirEntry) -> bool:
    try:
        return child.is_dir(follow_symlinks=False)
    except OSError:
        return False


def list_directory_children(
    directory: Path,
    show_hidden: bool,
    dirs_first: bool = False,
) -> list[os.DirEntry]:
    """Return visible children of ``directory`` in display order.

    Children are ordered by name; with ``dirs_first`` directories come before
    everything else and names compare case-insensitively. A directory that
    cannot be listed yields no children.
    """
    try:
        with os.scandir(directory) as entries:
            children = [child for child in entries if show_hidden or not is_hidden(child.name)]
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return []

    if dirs_first:
        children.sort(key=lambda child: (not _is_dir_no_follow(child), child.name.lower()))
    else:
        children.sort(key=lambda child: child.name)
    return children


def _should_descend_into_root(root_entry: TreeEntry) -> bool:
    if root_entry.is_dir:
        return True
    # A symlinked root is followed once; links below the root never are.
    return root_entry.is_symlink and root_entry.path.is_dir()


def walk_entries(
    root: Path | str,
    show_hidden: bool = False,
    max_depth: int | None = None,
    dirs_first: bool = False,
) -> Iterator[TreeEntry]:
    """Yield entries under ``root`` depth-first in pre-order.

    The root itself is always yielded first at depth 0, whatever its name.
    Hidden children (and their subtrees) are pruned unless ``show_hidden``.
    When ``max_depth`` is set nothing deeper than it is visited. A root that
    cannot be stat-ed yields nothing.
    """
    root = Path(root)
    root_entry = stat_entry(root, root_display_name(root), 0)
    if root_entry is None:
        return
    yield root_entry
    if not _should_descend_into_root(root_entry):
        return

    def walk(directory: Path, depth: int) -> Iterator[TreeEntry]:
        if max_depth is not None and depth > max_depth:
            return
        for child in list_directory_children(directory, show_hidden, dirs_first):
            entry = stat_entry(Path(child.path), child.name, depth)
            if entry is None:
                continue
            yield entry
            if entry.is_dir:
                yield from walk(entry.path, depth + 1)

    yield from walk(root, 1)


def collect_entries(
    root: Path | str,
    show_hidden: bool = False,
    max_depth: int | None = None,
    dirs_first: bool = False,
) -> list[TreeEntry]:
    """Materialize :func:`walk_entries` so rendering can look one entry ahead."""
    return list(
        walk_entries(
            root,
            show_hidden=show_hidden,
            max_depth=max_depth,
            dirs_first=dirs_first,
        )
    )


__all__ = [
    "collect_entries",
    "is_hidden",
    "list_directory_children",
    "read_link_target",
    "root_display_name",
    "stat_entry",
    "walk_entries",
]
