"""ANSI escape helpers for styled tree lines.

Rendering keeps structure and styling separate; these helpers recover the
plain text of a styled line.
"""

from __future__ import annotations

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def has_ansi(text: str) -> bool:
    """Return whether ``text`` carries any escape sequence."""
    return ANSI_ESCAPE_RE.search(text) is not None


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)
