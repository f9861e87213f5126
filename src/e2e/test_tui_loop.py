# src/e2e/test_tui_loop.py

import threading

import pytest

curses = pytest.importorskip("curses")
import curses.textpad  # noqa: E402

from wordfind import Engine  # noqa: E402
from wordfind.loader import load  # noqa: E402
from wordfind_ui.tui import WordFinderTUI  # noqa: E402


class FakeScreen:
    """
    Just enough of a curses window for WordFinderTUI.run().
    get_wch() replays `script`: strings and ints are keys, a callable is
    run and then reported as a poll timeout (curses.error).
    """

    def __init__(self, script, size=(12, 40)):
        self.script = list(script)
        self.size = size
        self.rows = {}
        self.frames = []
        self.timeout_ms = None

    def getmaxyx(self):
        return self.size

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeout_ms = ms

    def erase(self):
        self.rows = {}

    def addnstr(self, y, x, text, n, *attr):
        self.rows[y] = text[:n]

    def refresh(self):
        self.frames.append(dict(self.rows))

    def get_wch(self):
        if not self.script:
            raise AssertionError("key script exhausted")
        step = self.script.pop(0)
        if callable(step):
            step()
            raise curses.error("no input")
        return step


@pytest.fixture(autouse=True)
def no_terminal(monkeypatch):
    monkeypatch.setattr(curses, "curs_set", lambda v: None)
    monkeypatch.setattr(curses, "raw", lambda: None)
    monkeypatch.setattr(curses.textpad, "rectangle", lambda *a: None)


@pytest.fixture
def engine():
    eng = Engine(workers=1)
    eng.attach(load(["cat", "bat", "hat", "dog"]))
    yield eng
    eng.shutdown()


def _tui(script, engine):
    scr = FakeScreen(script)
    return scr, WordFinderTUI(scr, engine, poll_ms=10)


@pytest.mark.e2e
def test_query_changes_resubmit_with_visible_rows(engine):
    submits = []
    script = ["c", "e", "t", lambda: tui.live.wait(timeout=5), "\n"]
    scr, tui = _tui(script, engine)
    real_submit = tui.live.submit
    tui.live.submit = lambda q, limit: submits.append((q, limit)) or real_submit(q, limit)

    assert tui.run() == "cat"
    assert tui.visible_rows() == 7
    assert submits == [("c", 7), ("ce", 7), ("cet", 7)]
    assert scr.timeout_ms == 10


@pytest.mark.e2e
def test_results_are_drawn_after_a_poll_timeout(engine):
    marks = []

    def settle():
        tui.live.wait(timeout=5)
        marks.append(len(scr.frames))

    scr, tui = _tui(["c", "e", "t", settle, "\x1b"], engine)
    assert tui.run() is None

    # first frame drawn after the timeout, with no key pressed in between
    frame = scr.frames[marks[0]]
    assert frame[1] == "cet"
    assert frame[4] == "> cat"
    assert frame[5] == "  bat"
    assert frame[6] == "  hat"


@pytest.mark.e2e
def test_enter_returns_the_highlighted_word(engine):
    script = ["c", "e", "t", lambda: tui.live.wait(timeout=5), curses.KEY_DOWN, "\n"]
    scr, tui = _tui(script, engine)
    assert tui.run() == "bat"


@pytest.mark.e2e
@pytest.mark.parametrize("quit_key", ["\x1b", "\x03", "\x04", "\x1a"])
def test_quit_keys_return_none_and_close_the_search(engine, quit_key):
    script = ["d", lambda: tui.live.wait(timeout=5), quit_key]
    scr, tui = _tui(script, engine)
    assert tui.run() is None
    with pytest.raises(RuntimeError):
        tui.live.submit("x", 1)


@pytest.mark.e2e
def test_keyboard_interrupt_returns_none(engine):
    def interrupt():
        raise KeyboardInterrupt

    scr, tui = _tui(["c", interrupt], engine)
    assert tui.run() is None


@pytest.mark.e2e
def test_enter_with_no_results_does_nothing(engine):
    scr, tui = _tui(["\n", "\x1b"], engine)
    assert tui.run() is None


class HeldEngine:
    """Engine double that holds rank() for one query until released."""

    def __init__(self, inner, hold):
        self.inner = inner
        self.hold = hold
        self.release = threading.Event()

    def rank(self, query, limit, *, cancel=None):
        if query == self.hold:
            self.release.wait(5)
        return self.inner.rank(query, limit, cancel=cancel)


@pytest.mark.e2e
def test_enter_is_ignored_until_the_new_query_publishes(engine):
    held = HeldEngine(engine, hold="b")

    def publish_b():
        held.release.set()
        tui.live.wait(timeout=5)

    # "d" publishes dog first; after "b" is typed, Enter must not pick dog
    script = ["d", lambda: tui.live.wait(timeout=5),
              "\x7f", "b", "\n",
              publish_b, "\n"]
    scr, tui = _tui(script, held)
    assert tui.run() == "bat"
    assert not scr.script
