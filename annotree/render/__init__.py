"""Tree rendering facade.

Re-exports the row-building API and the name palettes so callers can import
everything rendering-related from ``annotree.render``.
"""

from __future__ import annotations

from .style import COLOR_PALETTE, PLAIN_PALETTE, TreePalette, palette_for
from .tree import (
    BLANK_BLOCK,
    BRANCH_CORNER,
    BRANCH_TEE,
    PIPE_BLOCK,
    UNKNOWN_TIMESTAMP,
    UNRESOLVED_TARGET,
    RenderState,
    RootStyle,
    branch_connector,
    format_entry_line,
    format_timestamp,
    is_last_sibling,
    last_sibling_flags,
    render_tree_lines,
    write_tree,
)

__all__ = [
    "BLANK_BLOCK",
    "BRANCH_CORNER",
    "BRANCH_TEE",
    "COLOR_PALETTE",
    "PIPE_BLOCK",
    "PLAIN_PALETTE",
    "UNKNOWN_TIMESTAMP",
    "UNRESOLVED_TARGET",
    "RenderState",
    "RootStyle",
    "TreePalette",
    "branch_connector",
    "format_entry_line",
    "format_timestamp",
    "is_last_sibling",
    "last_sibling_flags",
    "palette_for",
    "render_tree_lines",
    "write_tree",
]
