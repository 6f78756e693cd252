"""
quweid.app
==========
Main application class: wires together the keyboard listener,
quwei engine, and overlay window.
"""

from __future__ import annotations

import tkinter as tk

try:
    from pynput import keyboard
    from pynput.keyboard import Key, KeyCode, Controller
except ImportError as exc:
    raise ImportError(
        "pynput is required.\n"
        "Install it with:  pip install pynput\n"
        "Or, from the repo:  pip install -e ."
    ) from exc

from .engine import QuweiEngine
from .host import CONTEXT, Host
from .keys import KeyAction, build_keymap, classify, is_keypad, rejected_bindings
from .overlay import OverlayWindow

_MODIFIERS = {
    Key.ctrl, Key.ctrl_l, Key.ctrl_r,
    Key.alt, Key.alt_l, Key.alt_r, Key.alt_gr,
    Key.cmd, Key.cmd_l, Key.cmd_r,
}


class QuweiApp:
    """
    Full application.  Instantiate then call :meth:`run`.

    Example::

        from quweid import load_config
        from quweid.app import QuweiApp
        app = QuweiApp(load_config())
        app.run()

    The listener does not swallow keys, so the focused window sees every
    keystroke too; :class:`~quweid.host.Host` cleans up after it.
    """

    def __init__(self, config: dict) -> None:
        self.config = config
        self.engine = QuweiEngine(config)
        rejected = rejected_bindings(config.get("keys"))
        if rejected:
            print(f"[quwei] Warning: ignoring caret-moving key bindings: {', '.join(rejected)}")
        self.keymap = build_keymap(config.get("keys"))
        self.kb = Controller()
        self._held: set = set()
        self._stop = False

        # ── Tkinter root (hidden — used only for after() scheduling) ──────────
        self.root = tk.Tk()
        self.root.withdraw()
        self.root.title("quweid")

        # ── Overlay ───────────────────────────────────────────────────────────
        self.overlay = OverlayWindow(self.root, config.get("overlay", {}))
        self.host = Host(self.engine, self, self.overlay.update)

        # ── Global keyboard listener ──────────────────────────────────────────
        self._listener = keyboard.Listener(
            on_press=self._on_press,
            on_release=self._on_release,
        )

    # ── Key dispatch (listener thread → Tk main thread) ──────────────────────

    def _on_press(self, key: Key | KeyCode | None) -> None:
        if key is None:
            return
        if key in _MODIFIERS:
            self._held.add(key)
            return
        action = self._key_to_action(key)
        if action:
            self.root.after(0, self.host.handle, action)
        elif isinstance(key, Key):
            self.root.after(0, self.host.passthrough, key.name)

    def _on_release(self, key: Key | KeyCode | None) -> None:
        self._held.discard(key)

    def _key_to_action(self, key: Key | KeyCode) -> KeyAction | None:
        """Map a pynput key event to a classified action."""
        modifiers = bool(self._held)
        if isinstance(key, Key):
            return classify(key.name, None, modifiers=modifiers, keymap=self.keymap)
        return classify(
            None,
            key.char,
            keypad=is_keypad(getattr(key, "vk", None)),
            modifiers=modifiers,
            keymap=self.keymap,
        )

    # ── Typing helpers (called by the host on the Tk main thread) ────────────

    def type_text(self, text: str) -> None:
        try:
            self.kb.type(text)
        except Exception as ex:
            print(f"[quwei] Type error: {ex}")

    def tap_key(self, name: str) -> None:
        try:
            self.kb.tap(Key[name])
        except Exception as ex:
            print(f"[quwei] Tap error: {ex}")

    # ── Run ───────────────────────────────────────────────────────────────────

    def _poll_signals(self) -> None:
        """
        Called every 200ms on the Tk main thread.
        Tkinter's mainloop() blocks Python-level signal delivery entirely,
        so Ctrl+C never fires without this periodic re-entry into Python.
        """
        if self._stop:
            self.root.destroy()
            return
        self.root.after(200, self._poll_signals)

    def stop(self) -> None:
        self._stop = True

    def run(self) -> None:
        """Start the keyboard listener and enter the Tk event loop."""
        import signal

        self._stop = False

        # Let Ctrl+C set the stop flag from any thread
        def _sigint_handler(sig, frame):
            self._stop = True

        signal.signal(signal.SIGINT, _sigint_handler)

        self._listener.start()
        self.root.after(200, self._poll_signals)   # kick off the signal poller
        self.root.mainloop()                        # blocks until root.destroy()
        self._listener.stop()
        self.engine.drop(CONTEXT)
        print("\n[quwei] Stopped.")
