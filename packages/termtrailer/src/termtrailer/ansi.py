"""
ANSI control sequences emitted by the controller.

Only a small, widely supported subset is used:

- ``CSI J``   clear from the cursor to the end of the screen
- ``CSI m``   reset all style attributes
- ``\\r`` + ``CSI <n> A``   back to column 0, then up ``n`` lines
- ``CSI s`` / ``CSI u``   terminal-side save/restore (opt-in strategy only)
"""
from __future__ import annotations

CSI = b"\x1b["

CLEAR_TO_END = CSI + b"J"
RESET_STYLE = CSI + b"m"
SAVE_CURSOR = CSI + b"s"
RESTORE_CURSOR = CSI + b"u"

CARRIAGE_RETURN = b"\r"
LINE_BREAK = b"\n"


def cursor_up_to_line_start(lines: int) -> bytes:
    """Return ``\\r CSI <n> A``, or nothing when ``lines`` is zero.

    Terminals read ``CSI 0 A`` the same as ``CSI 1 A``, so a zero move must
    not be emitted at all.
    """
    if lines <= 0:
        return b""
    return CARRIAGE_RETURN + CSI + str(lines).encode("ascii") + b"A"
