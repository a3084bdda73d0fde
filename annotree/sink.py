"""Byte-stream output destinations for rendered rows.

Rows are encoded as UTF-8 with ``surrogateescape`` so names that were not
valid UTF-8 on disk are written back as their original bytes.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from .errors import OutputSinkError

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


class TreeSink:
    """Line writer over a binary stream.

    Every ``OSError`` raised by the stream is re-raised as
    :class:`~annotree.errors.OutputSinkError` naming the destination.
    """

    def __init__(self, stream: BinaryIO, label: str, owns_stream: bool) -> None:
        self._stream = stream
        self.label = label
        self._owns_stream = owns_stream
        self.closed = False

    def write_line(self, text: str) -> None:
        data = text.encode(ENCODING, ENCODING_ERRORS) + b"\n"
        try:
            self._stream.write(data)
        except OSError as exc:
            raise OutputSinkError(f"{self.label}: {_describe(exc)}") from exc

    def close(self) -> None:
        """Flush, and close the stream when this sink opened it."""
        if self.closed:
            return
        self.closed = True
        try:
            self._stream.flush()
            if self._owns_stream:
                self._stream.close()
        except OSError as exc:
            raise OutputSinkError(f"{self.label}: {_describe(exc)}") from exc


def _console_stream() -> BinaryIO:
    # Anything already written through the text layer must land first.
    sys.stdout.flush()
    return sys.stdout.buffer


@contextmanager
def open_output(path: Path | str | None = None) -> Iterator[TreeSink]:
    """Open ``path`` for writing (truncating it), or the console when ``None``.

    The sink is flushed on exit and closed when it owns a file.
    """
    if path is None:
        sink = TreeSink(_console_stream(), "<stdout>", owns_stream=False)
    else:
        target = Path(path)
        try:
            stream = open(target, "wb")
        except OSError as exc:
            raise OutputSinkError(f"{target}: {_describe(exc)}") from exc
        sink = TreeSink(stream, str(target), owns_stream=True)

    try:
        yield sink
    finally:
        sink.close()


__all__ = [
    "TreeSink",
    "open_output",
]
