"""Run options and environment-driven defaults.

Nothing is persisted: options come from command-line flags, with the usual
``NO_COLOR`` / ``CLICOLOR_FORCE`` environment conventions deciding styling
when no flag says otherwise.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .render import RootStyle, TreePalette, palette_for


def _env_flag_set(value: str | None) -> bool:
    return value is not None and value not in {"", "0"}


def color_enabled(no_color: bool, environ: Mapping[str, str] | None = None) -> bool:
    """Decide whether names get ANSI styling.

    ``--no-color`` always wins. Otherwise a non-empty ``CLICOLOR_FORCE``
    (other than ``0``) forces color on, and a non-empty ``NO_COLOR`` turns it
    off. Color is on by default.
    """
    if no_color:
        return False
    env = os.environ if environ is None else environ
    if _env_flag_set(env.get("CLICOLOR_FORCE")):
        return True
    if env.get("NO_COLOR"):
        return False
    return True


@dataclass(frozen=True)
class TreeOptions:
    """Everything one run needs, resolved from CLI arguments."""

    root: Path = Path(".")
    max_depth: int | None = None
    show_hidden: bool = False
    color: bool = True
    output: Path | None = None
    root_style: RootStyle = RootStyle.BARE
    dirs_first: bool = False

    @property
    def palette(self) -> TreePalette:
        return palette_for(self.color)


__all__ = [
    "TreeOptions",
    "color_enabled",
]
