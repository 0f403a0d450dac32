"""
termtrailer: scrolling terminal output with a status trailer pinned below it.

Uses only ``CSI J``, ``CSI m`` and relative "\\r + cursor up" moves; no
full-screen terminal handling.
"""
from .ansi import CLEAR_TO_END, RESET_STYLE, cursor_up_to_line_start
from .controller import Controller, ScrollbackText
from .cursor import (
    CursorStrategy,
    RelativeCursor,
    SaveRestoreCursor,
    cursor_strategy_from_name,
    cursor_strategy_names,
)
from .shape import MixedBreak, NoBreak, TrailingBreak, WriteShape, classify
from .sink import Sink, SinkWriteError, StreamSink, as_sink

__all__ = [
    # ansi
    "CLEAR_TO_END",
    "RESET_STYLE",
    "cursor_up_to_line_start",
    # controller
    "Controller",
    "ScrollbackText",
    # cursor
    "CursorStrategy",
    "RelativeCursor",
    "SaveRestoreCursor",
    "cursor_strategy_from_name",
    "cursor_strategy_names",
    # shape
    "MixedBreak",
    "NoBreak",
    "TrailingBreak",
    "WriteShape",
    "classify",
    # sink
    "Sink",
    "SinkWriteError",
    "StreamSink",
    "as_sink",
]
