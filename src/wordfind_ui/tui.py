# src/wordfind_ui/tui.py
# Curses front end: query box on top, ranked matches below, live update per keystroke.
# - Ranking runs on a LiveSearch worker; stale generations never reach the screen.
# - Enter returns the highlighted word; Esc / Ctrl-C / Ctrl-D / Ctrl-Z quit.

from __future__ import annotations
import curses
import curses.textpad
import logging
import os
from typing import Optional, Union

from wordfind import config as CFG
from wordfind.session import LiveSearch

from . import picker as P

log = logging.getLogger(__name__)

_SPECIAL = {
    curses.KEY_UP: P.UP,
    curses.KEY_DOWN: P.DOWN,
    curses.KEY_ENTER: P.ENTER,
    curses.KEY_BACKSPACE: P.BACKSPACE,
    curses.KEY_RESIZE: P.RESIZE,
}

_CONTROL = {
    "\x1b": P.ESCAPE,
    "\n": P.ENTER,
    "\r": P.ENTER,
    "\x7f": P.BACKSPACE,
    "\x08": P.BACKSPACE,
    "\x03": P.CTRL_C,
    "\x04": P.CTRL_D,
    "\x1a": P.CTRL_Z,
    "\x10": P.CTRL_P,
    "\x0e": P.CTRL_N,
}

# rows used by the query box (3) and the matches box border (2)
_CHROME_ROWS = 5


def translate_key(ch: Union[str, int]) -> Optional[str]:
    """Map a curses get_wch() value to a picker key name (or a printable char)."""
    if isinstance(ch, int):
        return _SPECIAL.get(ch)
    if ch in _CONTROL:
        return _CONTROL[ch]
    return ch if ch.isprintable() else None


class WordFinderTUI:
    """Dark, minimal curses picker around a LiveSearch."""

    def __init__(self, stdscr, engine, *, poll_ms: int = CFG.POLL_INTERVAL_MS) -> None:
        self.stdscr = stdscr
        self.picker = P.Picker()
        self.live = LiveSearch(engine)
        self.poll_ms = poll_ms
        self._shown_generation = 0

    def visible_rows(self) -> int:
        h, _ = self.stdscr.getmaxyx()
        return max(0, h - _CHROME_ROWS)

    # ---- loop ----
    def run(self) -> Optional[str]:
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal without cursor visibility control
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.timeout(self.poll_ms)
        try:
            while True:
                self._pull_results()
                self.draw()
                key = self._read_key()
                if key is None:
                    continue
                if key == P.ENTER:
                    # never pick from rows of a query that has since changed
                    if self.live.pending():
                        continue
                    self._pull_results()
                action = self.picker.handle_key(key)
                if action is P.Action.QUIT:
                    return None
                if action is P.Action.SELECT:
                    return self.picker.selection()
                if action is P.Action.QUERY_CHANGED or key == P.RESIZE:
                    self.live.submit(self.picker.query, self.visible_rows())
        except KeyboardInterrupt:
            return None
        finally:
            self.live.close()

    def _read_key(self) -> Optional[str]:
        try:
            ch = self.stdscr.get_wch()
        except curses.error:
            return None  # poll timeout
        return translate_key(ch)

    def _pull_results(self) -> None:
        snap = self.live.latest()
        if snap is None or snap.generation == self._shown_generation:
            return
        self._shown_generation = snap.generation
        self.picker.set_results(snap.results)

    # ---- drawing ----
    def draw(self) -> None:
        scr = self.stdscr
        scr.erase()
        h, w = scr.getmaxyx()
        if h <= _CHROME_ROWS or w < 12:
            scr.addnstr(0, 0, "terminal too small", max(0, w - 1))
            scr.refresh()
            return

        curses.textpad.rectangle(scr, 0, 0, 2, w - 2)
        scr.addnstr(1, 2, "Query: ", w - 4)
        scr.addnstr(1, 9, self.picker.query, max(0, w - 12), curses.A_BOLD)

        curses.textpad.rectangle(scr, 3, 0, h - 1, w - 2)
        scr.addnstr(3, 2, " Matches ", w - 4)
        for i, m in enumerate(self.picker.results[: self.visible_rows()]):
            if i == self.picker.selected:
                scr.addnstr(4 + i, 2, f"> {m.word}", w - 5, curses.A_BOLD)
            else:
                scr.addnstr(4 + i, 2, f"  {m.word}", w - 5)
        scr.refresh()


def run(engine) -> Optional[str]:
    """Run the picker full-screen; returns the chosen word or None. Terminal is restored on exit."""
    os.environ.setdefault("ESCDELAY", "25")
    return curses.wrapper(lambda stdscr: WordFinderTUI(stdscr, engine).run())
