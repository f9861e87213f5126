from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from wordfind.models import ScoredMatch

# Named keys the terminal layer translates raw input into
UP, DOWN, ENTER, BACKSPACE, ESCAPE, RESIZE = "up", "down", "enter", "backspace", "escape", "resize"
CTRL_C, CTRL_D, CTRL_Z, CTRL_P, CTRL_N = "ctrl-c", "ctrl-d", "ctrl-z", "ctrl-p", "ctrl-n"

_QUIT_KEYS = {ESCAPE, CTRL_C, CTRL_D, CTRL_Z}


class Action(Enum):
    NONE = "none"
    QUERY_CHANGED = "query"
    MOVED = "moved"
    SELECT = "select"
    QUIT = "quit"


@dataclass
class Picker:
    """
    Terminal-independent state of the interactive picker: the query being
    typed, the rows currently shown and the highlighted row.
    The curses layer feeds keys in and draws whatever this holds.
    """
    query: str = ""
    results: List[ScoredMatch] = field(default_factory=list)
    selected: int = 0

    def set_results(self, results: List[ScoredMatch]) -> None:
        self.results = list(results)
        self._clamp()

    def selection(self) -> Optional[str]:
        if not self.results:
            return None
        return self.results[self.selected].word

    def handle_key(self, key: str) -> Action:
        if key in _QUIT_KEYS:
            return Action.QUIT
        if key in (UP, CTRL_P):
            if self.selected > 0:
                self.selected -= 1
                return Action.MOVED
            return Action.NONE
        if key in (DOWN, CTRL_N):
            if self.selected < len(self.results) - 1:
                self.selected += 1
                return Action.MOVED
            return Action.NONE
        if key == ENTER:
            return Action.SELECT if self.results else Action.NONE
        if key == BACKSPACE:
            if not self.query:
                return Action.NONE
            self.query = self.query[:-1]
            self._clamp()
            return Action.QUERY_CHANGED
        if len(key) == 1 and key.isprintable():
            self.query += key
            self._clamp()
            return Action.QUERY_CHANGED
        return Action.NONE

    def _clamp(self) -> None:
        self.selected = max(0, min(self.selected, len(self.results) - 1))
