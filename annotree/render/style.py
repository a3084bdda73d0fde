"""Name styling palettes for tree rows.

Palettes only decorate the display name of an entry. Prefix glyphs, link
targets, and metadata suffixes are never styled, so switching palettes cannot
change the structure of the output.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat

from ..file_tree_model import EntryKind


@dataclass(frozen=True)
class TreePalette:
    """Semantic name styles, expressed as Pygments console attributes.

    ``None`` leaves names of that kind unstyled. Attribute strings follow
    :func:`pygments.console.ansiformat` syntax, e.g. ``"*blue*"`` for bold blue.
    """

    name: str
    directory: str | None = None
    symlink: str | None = None
    file: str | None = None

    def attr_for(self, kind: EntryKind) -> str | None:
        if kind is EntryKind.DIRECTORY:
            return self.directory
        if kind is EntryKind.SYMLINK:
            return self.symlink
        if kind is EntryKind.FILE:
            return self.file
        return None

    def style_name(self, name: str, kind: EntryKind) -> str:
        attr = self.attr_for(kind)
        if attr is None:
            return name
        return ansiformat(attr, name)


PLAIN_PALETTE = TreePalette(name="plain")

COLOR_PALETTE = TreePalette(
    name="color",
    directory="*blue*",
    symlink="green",
)


def palette_for(color: bool) -> TreePalette:
    """Return the colored palette when ``color`` is true, else the plain one."""
    return COLOR_PALETTE if color else PLAIN_PALETTE


__all__ = [
    "COLOR_PALETTE",
    "PLAIN_PALETTE",
    "TreePalette",
    "palette_for",
]
