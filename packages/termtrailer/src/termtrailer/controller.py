"""
Controller: scrollback with a trailer pinned below it.

Provides:
- Controller: the render controller (binary, file-like)
- ScrollbackText: text-mode adapter for print() and logging handlers

Every public operation builds one frame and hands it to the sink in a single
write:

    CSI J                   clear the old trailer block
    <committed scrollback>  (write only)
    <partial line> \\n       if a partial line is pending
    CSI m                   styles from scrollback never leak below
    <trailer line> \\n ...
    <cursor restore>        back to the top of the block

so the cursor is always parked at the top of the trailer block between
calls.
"""
from __future__ import annotations

import logging
import threading
from typing import Iterable, Sequence

from .ansi import CLEAR_TO_END, LINE_BREAK, RESET_STYLE
from .cursor import CursorStrategy, cursor_strategy_from_name
from .shape import MixedBreak, NoBreak, TrailingBreak, classify
from .sink import SinkWriteError, StreamSink, as_sink

logger = logging.getLogger(__name__)

TrailerLine = bytes | bytearray | memoryview | str

# ─────────────────────────────────────────────────────────────────────────────
# Controller
# ─────────────────────────────────────────────────────────────────────────────


class Controller:
    """
    Treats a byte sink as a terminal and keeps a trailer below its output.

    Write to it like a binary stream to append scrollback; call
    ``set_trailer`` to replace the trailer. The sink must not be written to
    by anyone else while the controller is in use. Output that bypasses the
    controller and ends with a line break simply becomes scrollback on the
    next repaint; output that does not end with one is painted over.

    All operations are serialized on one lock. If the sink fails, the
    resulting ``SinkWriteError`` leaves the screen in an unknown state and
    the controller should be discarded.
    """

    def __init__(
        self,
        sink: object | None = None,
        cursor: CursorStrategy | str | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self._sink: StreamSink = as_sink(sink)
        if isinstance(cursor, CursorStrategy):
            self._cursor = cursor
        else:
            self._cursor = cursor_strategy_from_name(cursor)
        self.encoding = encoding

        self._lock = threading.Lock()
        self._partial = bytearray()
        self._trailer: tuple[bytes, ...] = ()

        checkpoint = self._cursor.save()
        if checkpoint:
            with self._lock:
                self._emit(checkpoint)
        logger.debug("Controller bound to %r using %s cursor", self._sink.stream, self._cursor.name)

    # ── introspection ────────────────────────────────────────────────────────

    @property
    def sink(self) -> StreamSink:
        return self._sink

    @property
    def cursor(self) -> CursorStrategy:
        return self._cursor

    @property
    def partial(self) -> bytes:
        """The pending scrollback line (never contains a line break)."""
        with self._lock:
            return bytes(self._partial)

    @property
    def trailer(self) -> tuple[bytes, ...]:
        with self._lock:
            return self._trailer

    @property
    def trailer_height(self) -> int:
        """Lines painted below the checkpoint: trailer lines plus the partial line."""
        with self._lock:
            return self._height()

    # ── public operations ────────────────────────────────────────────────────

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Append ``data`` to scrollback and repaint. Returns ``len(data)``."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"write() argument must be a bytes-like object, not {type(data).__name__}")
        data = bytes(data)

        with self._lock:
            frame = bytearray(CLEAR_TO_END)
            shape = classify(data)
            if isinstance(shape, NoBreak):
                self._partial += data
            else:
                frame += self._partial
                self._partial.clear()
                if isinstance(shape, TrailingBreak):
                    frame += data
                    frame += self._cursor.save()
                elif isinstance(shape, MixedBreak):
                    frame += data[: shape.split_index]
                    frame += self._cursor.save()
                    self._partial += data[shape.split_index :]
            logger.debug(
                "write %d bytes (%s); partial now %d bytes",
                len(data), type(shape).__name__, len(self._partial),
            )
            self._paint_trailer(frame)
            self._emit(frame)
        return len(data)

    def set_trailer(self, lines: Sequence[TrailerLine] | None) -> None:
        """
        Replace the trailer. ``None`` or an empty sequence removes it.

        Lines are painted top to bottom and must not contain line breaks.
        ``str`` lines are encoded with the controller's encoding.
        """
        trailer = tuple(self._encode_line(line) for line in lines or ())
        with self._lock:
            self._trailer = trailer
            frame = bytearray(CLEAR_TO_END)
            self._paint_trailer(frame)
            self._emit(frame)

    # ── file-like surface ────────────────────────────────────────────────────

    def writelines(self, lines: Iterable[bytes | bytearray | memoryview]) -> None:
        self.write(b"".join(lines))

    def flush(self) -> None:
        with self._lock:
            self._flush_sink()

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        return self._sink.isatty()

    def text(self, encoding: str | None = None, errors: str = "replace") -> "ScrollbackText":
        """Return a text-mode view of the scrollback."""
        return ScrollbackText(self, encoding or self.encoding, errors)

    # ── internals ────────────────────────────────────────────────────────────

    def _height(self) -> int:
        h = len(self._trailer)
        if self._partial:
            return h + 1
        return h

    def _paint_trailer(self, frame: bytearray) -> None:
        # Cursor is at the checkpoint, the region below it is cleared, and
        # any committed scrollback is already in the frame.
        if self._partial:
            frame += self._partial
            frame += LINE_BREAK
        frame += RESET_STYLE
        for line in self._trailer:
            frame += line
            frame += LINE_BREAK
        frame += self._cursor.restore(self._height())

    def _emit(self, frame: bytes | bytearray) -> None:
        try:
            self._sink.write(bytes(frame))
        except Exception as exc:
            logger.warning("Sink write failed after %d buffered bytes: %s", len(frame), exc)
            raise SinkWriteError(f"sink write failed: {exc}", exc) from exc
        self._flush_sink()

    def _flush_sink(self) -> None:
        try:
            self._sink.flush()
        except Exception as exc:
            logger.warning("Sink flush failed: %s", exc)
            raise SinkWriteError(f"sink flush failed: {exc}", exc) from exc

    def _encode_line(self, line: TrailerLine) -> bytes:
        if isinstance(line, str):
            return line.encode(self.encoding)
        return bytes(line)


# ─────────────────────────────────────────────────────────────────────────────
# ScrollbackText
# ─────────────────────────────────────────────────────────────────────────────


class ScrollbackText:
    """
    Text stream that appends to a controller's scrollback.

    Usable as ``print(..., file=...)`` target or as the stream of a
    ``logging.StreamHandler``. Do not attach the ``termtrailer`` loggers
    themselves to it: the controller logs while writing.
    """

    def __init__(self, controller: Controller, encoding: str = "utf-8", errors: str = "replace") -> None:
        self._controller = controller
        self.encoding = encoding
        self.errors = errors

    @property
    def controller(self) -> Controller:
        return self._controller

    def write(self, s: str) -> int:
        if s:
            self._controller.write(s.encode(self.encoding, self.errors))
        return len(s)

    def flush(self) -> None:
        self._controller.flush()

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        return self._controller.isatty()
