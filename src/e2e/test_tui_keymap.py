# src/e2e/test_tui_keymap.py

import pytest

curses = pytest.importorskip("curses")

from wordfind_ui import picker as P
from wordfind_ui.tui import translate_key


@pytest.mark.parametrize("raw,name", [
    (curses.KEY_UP, P.UP),
    (curses.KEY_DOWN, P.DOWN),
    (curses.KEY_BACKSPACE, P.BACKSPACE),
    (curses.KEY_ENTER, P.ENTER),
    ("\n", P.ENTER),
    ("\r", P.ENTER),
    ("\x7f", P.BACKSPACE),
    ("\x1b", P.ESCAPE),
    ("\x03", P.CTRL_C),
    ("\x04", P.CTRL_D),
    ("\x1a", P.CTRL_Z),
    ("\x10", P.CTRL_P),
    ("\x0e", P.CTRL_N),
    ("x", "x"),
    ("é", "é"),
])
def test_translate_key(raw, name):
    assert translate_key(raw) == name


def test_unknown_keys_translate_to_none():
    assert translate_key(curses.KEY_F5) is None
    assert translate_key("\x07") is None
