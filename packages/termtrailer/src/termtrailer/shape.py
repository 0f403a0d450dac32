"""Classification of a scrollback write by where its last line break falls."""
from __future__ import annotations

from dataclasses import dataclass

from .ansi import LINE_BREAK


@dataclass(frozen=True)
class NoBreak:
    """No line break at all: the whole chunk extends the partial line."""


@dataclass(frozen=True)
class TrailingBreak:
    """The final byte is a line break: the whole chunk is committed."""


@dataclass(frozen=True)
class MixedBreak:
    """Line break before the final byte.

    ``split_index`` points just past the last line break, so
    ``data[:split_index]`` is committed and ``data[split_index:]`` becomes
    the new partial line.
    """

    split_index: int


WriteShape = NoBreak | TrailingBreak | MixedBreak


def classify(data: bytes) -> WriteShape:
    idx = data.rfind(LINE_BREAK)
    if idx == -1:
        return NoBreak()
    if idx == len(data) - 1:
        return TrailingBreak()
    return MixedBreak(idx + 1)
