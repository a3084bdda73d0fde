"""Domain model for collected filesystem trees.

This package contains the non-rendering half of the pipeline:
- entry datatypes describing one visited node
- the pre-order filesystem walker with hidden/depth filtering
"""

from __future__ import annotations

from .types import EntryKind, TreeEntry, entry_kind_for_mode
from .fs import (
    collect_entries,
    is_hidden,
    list_directory_children,
    read_link_target,
    root_display_name,
    stat_entry,
    walk_entries,
)

__all__ = [
    "EntryKind",
    "TreeEntry",
    "entry_kind_for_mode",
    "collect_entries",
    "is_hidden",
    "list_directory_children",
    "read_link_target",
    "root_display_name",
    "stat_entry",
    "walk_entries",
]
