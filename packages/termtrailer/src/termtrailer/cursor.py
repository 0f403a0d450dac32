"""
Cursor tracking strategies.

A strategy decides how the controller gets back to its checkpoint (the top
of the trailer block) after a repaint. It never writes to the sink itself;
it returns the bytes to append to the frame being built.

Provides:
- CursorStrategy: abstract base class (interface)
- RelativeCursor: "\\r + move up N" derived from what was painted (default)
- SaveRestoreCursor: terminal-side save/restore (opt-in)
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from .ansi import RESTORE_CURSOR, SAVE_CURSOR, cursor_up_to_line_start
from .config import get_cursor_name

# ─────────────────────────────────────────────────────────────────────────────
# CursorStrategy ABC
# ─────────────────────────────────────────────────────────────────────────────

class CursorStrategy(ABC):
    """Records and returns to the checkpoint above the trailer block."""

    name: str = ""

    @abstractmethod
    def save(self) -> bytes:
        """
        Bytes that capture the checkpoint.

        Called once when the controller is created and again every time
        scrollback is committed, with the cursor at the start of the line
        after the committed content.
        """

    @abstractmethod
    def restore(self, height: int) -> bytes:
        """Bytes that return the cursor from below a painted block of ``height`` lines."""


# ─────────────────────────────────────────────────────────────────────────────
# Implementations
# ─────────────────────────────────────────────────────────────────────────────

class RelativeCursor(CursorStrategy):
    """
    Moves back up by the number of lines the controller itself painted.

    Nothing is stored on the terminal side, so the checkpoint survives the
    terminal scrolling under it and lines wrapping above it.
    """

    name = "relative"

    def save(self) -> bytes:
        return b""

    def restore(self, height: int) -> bytes:
        return cursor_up_to_line_start(height)


class SaveRestoreCursor(CursorStrategy):
    """
    Uses ``CSI s`` / ``CSI u``.

    Restores land on the right column but often not the right row once the
    painted block wraps or scrolls the screen, because the saved position is
    screen-absolute. Kept for terminals and experiments where that holds.
    """

    name = "save-restore"

    def save(self) -> bytes:
        return SAVE_CURSOR

    def restore(self, height: int) -> bytes:
        return RESTORE_CURSOR


_STRATEGIES: dict[str, type[CursorStrategy]] = {
    RelativeCursor.name: RelativeCursor,
    SaveRestoreCursor.name: SaveRestoreCursor,
}


def cursor_strategy_names() -> list[str]:
    return sorted(_STRATEGIES)


def cursor_strategy_from_name(name: str | None = None) -> CursorStrategy:
    """Build a strategy by name; ``None`` falls back to the environment."""
    key = (name or get_cursor_name()).strip().lower()
    cls = _STRATEGIES.get(key)
    if cls is None:
        raise ValueError(
            f"Unknown cursor strategy {key!r} (expected one of: {', '.join(cursor_strategy_names())})"
        )
    return cls()
