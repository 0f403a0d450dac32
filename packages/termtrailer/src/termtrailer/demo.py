"""
Demonstration driver for the trailer controller.

    termtrailer-demo script     replay a fixed sequence of writes and trailers
    termtrailer-demo progress   spinner + progress bar trailer under live logs
"""
from __future__ import annotations

import logging
import sys
import threading
import time
from typing import Optional

import typer

from .config import get_debug_log_path
from .controller import Controller
from .cursor import cursor_strategy_names

app = typer.Typer(name="termtrailer-demo", help="Show a status trailer pinned below scrolling output")

_CURSOR_HELP = f"Cursor strategy ({' | '.join(cursor_strategy_names())}); default from TERMTRAILER_CURSOR"

# (action, payload, pause afterwards)
_SCRIPT: list[tuple[str, object, bool]] = [
    ("write", b"controlled output begins\n", True),
    ("trailer", [b"^^^^^^^^", b" -> trailer line 2"], True),
    ("write", b"this is a whole line\n", True),
    ("write", b"all at once\n", True),
    ("write", b"this line takes", True),
    ("write", b"... \x1b[32msome time", True),
    ("write", b".", True),
    ("write", b".", True),
    ("write", b".\n", True),
    ("write", b"plain scrollback\n", True),
    ("trailer", [b"^^^^^^^^", b" -> trailer line 2", b" -> trailer line longer", b" -> and line 3"], False),
    ("write", b"more plain scrollback\n", True),
    ("write", b"even more plain scrollback\n", True),
    ("trailer", [b"^^^^^^^^", b" -> trailer shorter now"], False),
    ("write", b"yet more plain scrollback\n", True),
    ("write", b"here's two\n lines in one write\n", True),
    ("write", b"here's one line and\n a partial... ", True),
    ("write", b"... done\nwith another full, too.\n", True),
    ("write", b"edge case test: several breaks in a row\n\nsurvived?", True),
    ("write", b"...hope so.\n\nshould work regardless of if the last line was partial, too.\n", True),
    ("write", b"next i'm gonna remove the trailer entirely\n", True),
    ("trailer", None, True),
    ("write", b"signing off\n", True),
]

_FRAMES = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]


def _setup_debug_log() -> None:
    path = get_debug_log_path()
    if not path:
        return
    handler = logging.FileHandler(path)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    lib_logger = logging.getLogger("termtrailer")
    lib_logger.addHandler(handler)
    lib_logger.setLevel(logging.DEBUG)


def _make_controller(cursor: Optional[str]) -> Controller:
    try:
        return Controller(sys.stdout, cursor=cursor)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--cursor") from exc


def progress_bar(done: int, total: int, width: int = 30) -> str:
    """Render ``[#####.....]  50%`` for ``done`` out of ``total``."""
    if total <= 0:
        return f"[{'#' * width}] 100%"
    done = max(0, min(done, total))
    filled = width * done // total
    pct = 100 * done // total
    return f"[{'#' * filled}{'.' * (width - filled)}] {pct:3d}%"


class ProgressTicker:
    """
    Repaints a spinner and progress bar trailer every ``interval`` seconds
    from a timer thread.
    """

    def __init__(self, controller: Controller, total: int, message: str = "working", interval: float = 0.08) -> None:
        self._controller = controller
        self._total = total
        self._message = message
        self._interval = interval
        self._frame = 0
        self._done = 0
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._stopped = False

    def start(self) -> None:
        with self._lock:
            self._render()
        self._schedule()

    def advance(self, n: int = 1) -> None:
        with self._lock:
            self._done += n
            self._render()

    def stop(self) -> None:
        with self._lock:
            self._stopped = True
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
            if timer is not threading.current_thread():
                timer.join()

    def lines(self) -> list[str]:
        with self._lock:
            return self._lines()

    def _schedule(self) -> None:
        with self._lock:
            if self._stopped:
                return
            self._timer = threading.Timer(self._interval, self._tick)
            self._timer.daemon = True
            self._timer.start()

    def _tick(self) -> None:
        with self._lock:
            self._frame += 1
            self._render()
        self._schedule()

    # Caller holds _lock.
    def _lines(self) -> list[str]:
        spinner = _FRAMES[self._frame % len(_FRAMES)]
        return [
            f"\x1b[36m{spinner}\x1b[m {self._message} {self._done}/{self._total}",
            progress_bar(self._done, self._total),
        ]

    def _render(self) -> None:
        self._controller.set_trailer(self._lines())


@app.command("script")
def script_cmd(
    pause: float = typer.Option(1.0, "--pause", help="Seconds to wait between steps"),
    cursor: Optional[str] = typer.Option(None, "--cursor", help=_CURSOR_HELP),
) -> None:
    """Replay a fixed sequence of scrollback writes and trailer changes."""
    _setup_debug_log()
    sys.stdout.write("output before controller\n")
    term = _make_controller(cursor)
    for action, payload, wait in _SCRIPT:
        if action == "write":
            term.write(payload)  # type: ignore[arg-type]
        else:
            term.set_trailer(payload)  # type: ignore[arg-type]
        if wait and pause > 0:
            time.sleep(pause)


@app.command("progress")
def progress_cmd(
    steps: int = typer.Option(40, "--steps", min=1, help="Number of work items"),
    interval: float = typer.Option(0.1, "--interval", help="Seconds per work item"),
    cursor: Optional[str] = typer.Option(None, "--cursor", help=_CURSOR_HELP),
) -> None:
    """Log lines into scrollback while a timer thread animates the trailer."""
    _setup_debug_log()
    term = _make_controller(cursor)

    handler = logging.StreamHandler(term.text())
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-5s %(message)s", "%H:%M:%S"))
    log = logging.getLogger("termtrailer.demo.progress")
    log.addHandler(handler)
    log.setLevel(logging.INFO)
    log.propagate = False

    ticker = ProgressTicker(term, steps)
    ticker.start()
    try:
        for i in range(steps):
            if interval > 0:
                time.sleep(interval)
            if i % 5 == 0:
                log.info("processed item %d", i)
            ticker.advance()
        log.info("all %d items done", steps)
    finally:
        ticker.stop()
        log.removeHandler(handler)
        term.set_trailer(None)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
