"""Run-level failures.

Per-entry traversal problems never become exceptions; only conditions that
end a run are modeled here.
"""

from __future__ import annotations


class AnnotreeError(Exception):
    """Base class for errors that abort a tree run."""


class RootPathError(AnnotreeError):
    """The root path does not exist or cannot be read."""


class OutputSinkError(AnnotreeError):
    """The output destination could not be opened or written."""
