"""
quweid.host
===========
Applies engine results to a desktop window that sees every keystroke too.

The global listener cannot swallow keys, so the focused window has already
received whatever was typed during a composition.  :class:`Host` remembers
that echo and erases it before typing a commit.  A caret-moving key pressed
mid-composition abandons the composition and leaves the digits as typed.

``output`` is anything with ``type_text(text)`` and ``tap_key(name)``; the
app backs it with pynput's keyboard ``Controller``.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable

from .engine import Commit, KeyResult, MoveCursorLeft, QuweiEngine, UpdatePanel
from .keys import CARET_KEYS, Action, KeyAction

# The desktop daemon only ever has one input context: whatever has focus.
CONTEXT = "desktop"


class Host:
    def __init__(
        self,
        engine: QuweiEngine,
        output,
        show_panel: Callable[[UpdatePanel], None] | None = None,
        context: Hashable = CONTEXT,
    ) -> None:
        self.engine = engine
        self.output = output
        self.show_panel = show_panel
        self.context = context
        self.echoed = ""

    @property
    def composing(self) -> bool:
        return not self.engine.state_for(self.context).is_idle

    def handle(self, action: KeyAction) -> KeyResult:
        result = self.engine.process(self.context, action)
        if not result.handled:
            return result

        if action.kind is Action.BACKSPACE:
            # The window's own backspace already removed one echoed char
            self.echoed = self.echoed[:-1]
        elif action.char:
            self.echoed += action.char

        for event in result.events:
            if isinstance(event, Commit):
                self._commit(event.text)
            elif isinstance(event, MoveCursorLeft):
                for _ in range(event.count):
                    self.output.tap_key("left")
            elif isinstance(event, UpdatePanel):
                self._show(event)

        if not self.composing and self.echoed:
            # Escape, or a selection that committed nothing
            self._erase_echo()
        return result

    def passthrough(self, name: str | None) -> None:
        """A key the engine never sees reached the window."""
        if name in CARET_KEYS and self.composing:
            self.echoed = ""
            self._show(self.engine.reset(self.context))

    def _show(self, panel: UpdatePanel) -> None:
        if self.show_panel is not None:
            self.show_panel(panel)

    def _commit(self, text: str) -> None:
        if text and text == self.echoed:
            # Raw digits on Enter: the window already has them
            self.echoed = ""
            return
        self._erase_echo()
        self.output.type_text(text)

    def _erase_echo(self) -> None:
        for _ in range(len(self.echoed)):
            self.output.tap_key("backspace")
        self.echoed = ""
