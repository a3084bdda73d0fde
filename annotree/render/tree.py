"""Box-drawing tree rendering for pre-ordered entry sequences.

The renderer never sees the directory structure itself, only a flat list of
entries in depth-first pre-order. Whether an entry closes its branch is
inferred from the next entry alone: if the walk recedes to a shallower depth
(or ends), nothing else will hang below the entry's parent. Those per-depth
flags are remembered in :class:`RenderState` and turned into the vertical
continuation bars of deeper rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Protocol

from ..file_tree_model import TreeEntry
from .style import PLAIN_PALETTE, TreePalette

BRANCH_TEE = "├── "
BRANCH_CORNER = "└── "
PIPE_BLOCK = "│   "
BLANK_BLOCK = "    "
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
UNRESOLVED_TARGET = "[unresolved]"
UNKNOWN_TIMESTAMP = "????-??-?? ??:??:??"


class RootStyle(Enum):
    """How the depth-0 row is drawn.

    ``BARE`` prints the root flush left and indents children from depth 1.
    ``CONNECTOR`` gives the root a connector like any other row, so every
    depth, the root's included, contributes a prefix block.
    """

    BARE = "bare"
    CONNECTOR = "connector"


class LineSink(Protocol):
    def write_line(self, text: str) -> None: ...


@dataclass
class RenderState:
    """Per-pass record of whether the latest row at each depth was last."""

    last_at_depth: list[bool] = field(default_factory=list)

    def record(self, depth: int, is_last: bool) -> None:
        """Store ``is_last`` for ``depth``, growing the record when needed."""
        if depth >= len(self.last_at_depth):
            self.last_at_depth.extend([False] * (depth + 1 - len(self.last_at_depth)))
        self.last_at_depth[depth] = is_last

    def is_last_at(self, depth: int) -> bool:
        # Depths never recorded (a jump of more than one level) keep their bar.
        return depth < len(self.last_at_depth) and self.last_at_depth[depth]

    def prefix(self, depth: int, root_style: RootStyle = RootStyle.BARE) -> str:
        """Return ancestor continuation blocks for a row at ``depth``."""
        first = 1 if root_style is RootStyle.BARE else 0
        return "".join(
            BLANK_BLOCK if self.is_last_at(ancestor) else PIPE_BLOCK
            for ancestor in range(first, depth)
        )


def is_last_sibling(depths: Sequence[int], index: int) -> bool:
    """Lookahead-of-one rule: last when at the end or the next row is shallower."""
    next_index = index + 1
    if next_index >= len(depths):
        return True
    return depths[next_index] < depths[index]


def last_sibling_flags(depths: Sequence[int]) -> list[bool]:
    """Return :func:`is_last_sibling` for every position of ``depths``."""
    return [is_last_sibling(depths, index) for index in range(len(depths))]


def branch_connector(depth: int, is_last: bool, root_style: RootStyle = RootStyle.BARE) -> str:
    """Return the connector glyph for a row; the bare root gets none."""
    if depth == 0 and root_style is RootStyle.BARE:
        return ""
    return BRANCH_CORNER if is_last else BRANCH_TEE


def format_timestamp(mtime: float) -> str:
    """Format an epoch timestamp in local time.

    Timestamps outside the range the platform can convert render as
    ``UNKNOWN_TIMESTAMP`` instead of failing the row.
    """
    try:
        return datetime.fromtimestamp(mtime).strftime(TIMESTAMP_FORMAT)
    except (ValueError, OverflowError, OSError):
        return UNKNOWN_TIMESTAMP


def format_metadata_suffix(entry: TreeEntry) -> str:
    return f" ({entry.size} bytes, modified: {format_timestamp(entry.mtime)})"


def format_display_name(entry: TreeEntry, palette: TreePalette = PLAIN_PALETTE) -> str:
    """Styled name, with ``-> target`` appended for symbolic links."""
    styled = palette.style_name(entry.name, entry.kind)
    if not entry.is_symlink:
        return styled
    target = entry.link_target if entry.link_target is not None else UNRESOLVED_TARGET
    return f"{styled} -> {target}"


def format_entry_line(entry: TreeEntry, prefix: str, palette: TreePalette = PLAIN_PALETTE) -> str:
    """Compose one output row (without newline) from a precomputed prefix."""
    return f"{prefix}{format_display_name(entry, palette)}{format_metadata_suffix(entry)}"


def render_tree_lines(
    entries: Sequence[TreeEntry],
    palette: TreePalette = PLAIN_PALETTE,
    root_style: RootStyle = RootStyle.BARE,
) -> Iterator[str]:
    """Yield one formatted row per entry, in input order.

    ``entries`` must already be in depth-first pre-order; it is never sorted
    here. Each pass owns a fresh :class:`RenderState`.
    """
    state = RenderState()
    flags = last_sibling_flags([entry.depth for entry in entries])
    for entry, is_last in zip(entries, flags):
        state.record(entry.depth, is_last)
        prefix = state.prefix(entry.depth, root_style) + branch_connector(entry.depth, is_last, root_style)
        yield format_entry_line(entry, prefix, palette)


def write_lines(lines: Iterable[str], sink: LineSink) -> int:
    """Write every line to ``sink`` and return how many were written.

    Write failures propagate from the first failing line.
    """
    count = 0
    for line in lines:
        sink.write_line(line)
        count += 1
    return count


def write_tree(
    entries: Sequence[TreeEntry],
    sink: LineSink,
    palette: TreePalette = PLAIN_PALETTE,
    root_style: RootStyle = RootStyle.BARE,
) -> int:
    """Render ``entries`` straight into ``sink``; returns the row count."""
    return write_lines(render_tree_lines(entries, palette, root_style), sink)


__all__ = [
    "BLANK_BLOCK",
    "BRANCH_CORNER",
    "BRANCH_TEE",
    "PIPE_BLOCK",
    "TIMESTAMP_FORMAT",
    "UNKNOWN_TIMESTAMP",
    "UNRESOLVED_TARGET",
    "LineSink",
    "RenderState",
    "RootStyle",
    "branch_connector",
    "format_display_name",
    "format_entry_line",
    "format_metadata_suffix",
    "format_timestamp",
    "is_last_sibling",
    "last_sibling_flags",
    "render_tree_lines",
    "write_lines",
    "write_tree",
]
