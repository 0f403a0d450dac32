"""
Output sinks.

A sink is anything with ``write(data: bytes)`` that raises on failure. It
is expected to be connected to a terminal, but nothing is ever read back
from it.
"""
from __future__ import annotations

import io
import logging
import sys
from typing import BinaryIO, Protocol, runtime_checkable

from .config import get_write_log_path

logger = logging.getLogger(__name__)


@runtime_checkable
class Sink(Protocol):
    def write(self, data: bytes) -> object:
        ...


class SinkWriteError(OSError):
    """An underlying write (or flush) to the sink failed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StreamSink:
    """
    Binary sink over a writable stream.

    If a write log path is configured (``TERMTRAILER_WRITE_LOG``), every
    byte written is also appended to that file.
    """

    def __init__(self, stream: BinaryIO, write_log_path: str | None = None) -> None:
        self._stream = stream
        self._write_log_path = write_log_path if write_log_path is not None else get_write_log_path()

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    def write(self, data: bytes) -> int:
        # Raw streams may accept only part of the data; keep going until done.
        # Writers that return nothing are taken to have written everything.
        remaining = data
        while remaining:
            n = self._stream.write(remaining)
            if not isinstance(n, int) or n >= len(remaining):
                break
            remaining = remaining[n:]
        if self._write_log_path:
            try:
                with open(self._write_log_path, "ab") as f:
                    f.write(data)
            except OSError as exc:
                logger.debug("Could not append to write log %s: %s", self._write_log_path, exc)
        return len(data)

    def flush(self) -> None:
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def isatty(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        try:
            return bool(isatty()) if isatty is not None else False
        except ValueError:
            return False


def as_sink(target: object | None = None) -> StreamSink:
    """
    Wrap ``target`` as a sink.

    Accepts a binary writer, a text stream exposing ``.buffer`` (such as
    ``sys.stdout``), an existing ``StreamSink``, or ``None`` for the current
    ``sys.stdout``.
    """
    if target is None:
        target = sys.stdout
    if isinstance(target, StreamSink):
        return target
    buffer = getattr(target, "buffer", None)
    if buffer is not None:
        # Anything already queued on the text layer must land before our bytes.
        target.flush()  # type: ignore[attr-defined]
        return StreamSink(buffer)
    if isinstance(target, io.TextIOBase):
        raise TypeError(f"Cannot use text stream {type(target).__name__} as an output sink (no binary buffer)")
    if isinstance(target, Sink):
        return StreamSink(target)  # type: ignore[arg-type]
    raise TypeError(f"Cannot use {type(target).__name__} as an output sink (no write method)")
