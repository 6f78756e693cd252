import pytest

from quweid.engine import QuweiEngine
from quweid.host import Host
from quweid.keys import classify


class FakeWindow:
    """A one-line text field that receives every key, like the focused app."""

    def __init__(self, text=""):
        self.text = text
        self.caret = len(text)

    def insert(self, s):
        self.text = self.text[:self.caret] + s + self.text[self.caret:]
        self.caret += len(s)

    def key(self, name):
        if name == "backspace" and self.caret:
            self.text = self.text[:self.caret - 1] + self.text[self.caret:]
            self.caret -= 1
        elif name == "left":
            self.caret = max(0, self.caret - 1)
        elif name == "right":
            self.caret = min(len(self.text), self.caret + 1)
        elif name == "space":
            self.insert(" ")

    # output side, driven by the host
    def type_text(self, text):
        self.insert(text)

    def tap_key(self, name):
        self.key(name)


@pytest.fixture
def engine():
    return QuweiEngine()


@pytest.fixture
def window():
    return FakeWindow("ab")


@pytest.fixture
def panels():
    return []


@pytest.fixture
def host(engine, window, panels):
    return Host(engine, window, panels.append)


def press(host, window, *keys):
    """Each key reaches the window first, then the daemon reacts to it."""
    result = None
    for key in keys:
        if len(key) == 1:
            window.insert(key)
            action = classify(None, key)
            name = None
        else:
            window.key(key)
            action = classify(key, None)
            name = key
        if action is None:
            host.passthrough(name)
        else:
            result = host.handle(action)
    return result


def test_select_replaces_echoed_digits(host, window):
    press(host, window, "1", "6", "0", "2")
    assert window.text == "ab阿"
    assert host.echoed == ""


def test_caret_key_abandons_composition(host, window, engine, panels):
    press(host, window, "1", "6", "0", "left", "2")
    # the user's own text is untouched and nothing is erased at the moved caret
    assert window.text == "ab1620"
    assert engine.state_for(host.context).buffer.user_input() == "2"
    assert not panels[-2].visible


def test_escape_after_abandon_erases_only_new_echo(host, window):
    press(host, window, "1", "6", "0", "left", "2", "esc")
    assert window.text == "ab160"


def test_arrow_keys_are_not_bound(host, window):
    press(host, window, "1", "6", "0", "right")
    assert window.text == "ab160"
    assert host.echoed == ""


def test_highlight_and_pick_with_characters(host, window):
    press(host, window, "1", "6", "0", "]", "space")
    assert window.text == "ab阿"


def test_next_page_with_character(host, window, engine):
    press(host, window, "1", "6", "0", "=", "1")
    assert window.text == "ab" + engine.mapper.map(1611)


def test_enter_keeps_raw_digits(host, window):
    result = press(host, window, "4", "2", "enter")
    assert result.commits == ["42"]
    assert window.text == "ab42"


def test_backspace_during_composition(host, window):
    press(host, window, "1", "6", "backspace", "6", "0", "1")
    assert window.text == "ab啊"


def test_empty_slot_erases_echo(host, window):
    # sub-code 1695 has trail byte 0xFF, which never decodes
    press(host, window, "1", "6", "9", "5")
    assert window.text == "ab"


def test_punctuation_replaces_key(host, window):
    press(host, window, ",")
    assert window.text == "ab，"


def test_paired_punctuation_leaves_caret_inside(host, window):
    press(host, window, "(")
    assert window.text == "ab（）"
    assert window.caret == 3


def test_bound_character_is_punctuation_when_idle(host, window):
    press(host, window, "[")
    assert window.text == "ab【】"


def test_letters_pass_through(host, window):
    result = press(host, window, "h", "i")
    assert not result.handled
    assert window.text == "abhi"
