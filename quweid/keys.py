"""
quweid.keys
===========
Classified key actions and the name/char → action classifier.

The classifier knows nothing about any keyboard library; the app translates
pynput keys into ``(name, char)`` first, which keeps this module importable
(and testable) without a display.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum


class Action(str, Enum):
    DIGIT = "digit"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    SELECT = "select"
    SELECT_CURRENT = "select_current"
    PAGE_PREV = "page_prev"
    PAGE_NEXT = "page_next"
    CURSOR_PREV = "cursor_prev"
    CURSOR_NEXT = "cursor_next"
    CHAR = "char"


@dataclass(frozen=True)
class KeyAction:
    """
    One classified key press.

    ``char`` is the text the key would normally type (``""`` for pure control
    keys).  ``index`` is only meaningful for :attr:`Action.SELECT`.
    """

    kind: Action
    char: str = ""
    index: int = -1
    keypad: bool = False

    @classmethod
    def digit(cls, d: str, keypad: bool = False) -> "KeyAction":
        return cls(Action.DIGIT, char=d, keypad=keypad)

    @classmethod
    def select(cls, index: int) -> "KeyAction":
        return cls(Action.SELECT, index=index)

    @classmethod
    def text(cls, ch: str, keypad: bool = False) -> "KeyAction":
        return cls(Action.CHAR, char=ch, keypad=keypad)


# Config key → action for the rebindable navigation keys
BINDABLE: dict[str, Action] = {
    "prev_page": Action.PAGE_PREV,
    "next_page": Action.PAGE_NEXT,
    "prev_candidate": Action.CURSOR_PREV,
    "next_candidate": Action.CURSOR_NEXT,
    "select_current": Action.SELECT_CURRENT,
}

# The window sees every key too, so navigation is bound to plain characters;
# the echoed character is erased along with the typed digits.
DEFAULT_BINDINGS: dict[str, list[str]] = {
    "prev_page": ["-"],
    "next_page": ["="],
    "prev_candidate": ["["],
    "next_candidate": ["]"],
    "select_current": ["space"],
}

# Keys that move the window's caret or focus; never bound
CARET_KEYS: frozenset[str] = frozenset({
    "left", "right", "up", "down", "home", "end",
    "page_up", "page_down", "tab",
})

FIXED: dict[str, Action] = {
    "backspace": Action.BACKSPACE,
    "enter": Action.ENTER,
    "esc": Action.ESCAPE,
}

# Named keys that still type something
NAMED_CHARS: dict[str, str] = {
    "space": " ",
}

# X11 keysyms XK_KP_0..XK_KP_9
_X11_KEYPAD_VKS = frozenset(range(0xFFB0, 0xFFBA))
# Windows VK_NUMPAD0..VK_NUMPAD9
_WIN32_KEYPAD_VKS = frozenset(range(96, 106))


def is_keypad(vk: int | None, platform: str | None = None) -> bool:
    """Whether a virtual key code belongs to the numeric keypad."""
    if vk is None:
        return False
    if platform is None:
        platform = sys.platform
    if platform == "win32":
        return vk in _WIN32_KEYPAD_VKS
    return vk in _X11_KEYPAD_VKS


def rejected_bindings(bindings: dict[str, list[str]] | None) -> list[str]:
    """Configured key names that :func:`build_keymap` will refuse."""
    if not bindings:
        return []
    return sorted(
        {name.lower() for names in bindings.values() for name in names} & CARET_KEYS
    )


def build_keymap(bindings: dict[str, list[str]] | None = None) -> dict[str, Action]:
    """
    Flatten ``{"prev_page": ["-"], ...}`` into ``{"-": PAGE_PREV}``.

    Entries are key names (``"space"``) or single characters (``"-"``).
    Caret-moving keys are dropped.
    """
    merged = dict(DEFAULT_BINDINGS)
    if bindings:
        merged.update({k: list(v) for k, v in bindings.items() if k in BINDABLE})
    keymap: dict[str, Action] = {}
    for binding, names in merged.items():
        for name in names:
            key = name if len(name) == 1 else name.lower()
            if key in CARET_KEYS:
                continue
            keymap[key] = BINDABLE[binding]
    keymap.update(FIXED)
    return keymap


def classify(
    name: str | None,
    char: str | None,
    *,
    keypad: bool = False,
    modifiers: bool = False,
    keymap: dict[str, Action] | None = None,
) -> KeyAction | None:
    """
    Turn a key press into a :class:`KeyAction`.

    ``name`` is a lower-case key name (``"backspace"``, ``"page_up"`` ...) for
    named keys, ``char`` the typed character for character keys.  Returns
    ``None`` for key presses the engine never looks at (modifier chords,
    unknown named keys), which must be passed through untouched.
    """
    if modifiers:
        return None
    if keymap is None:
        keymap = build_keymap()

    if char and len(char) == 1 and char in "0123456789":
        return KeyAction.digit(char, keypad=keypad)

    if name:
        kind = keymap.get(name.lower())
        if kind is None:
            return None
        return KeyAction(kind, char=NAMED_CHARS.get(name.lower(), ""), keypad=keypad)

    if char and len(char) == 1 and char.isprintable():
        kind = keymap.get(char)
        if kind is not None:
            return KeyAction(kind, char=char, keypad=keypad)
        return KeyAction.text(char, keypad=keypad)
    return None
