"""
quweid.engine
=============
Quwei input engine — no UI, no keyboard hooks.
Can be imported and used standalone for testing or embedding.

Each input context (one per focused text field, or a single one for the
desktop daemon) gets its own :class:`QuweiState`.  The :class:`QuweiEngine`
owns the shared code mapper and creates/destroys states on demand.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from .buffer import InputBuffer
from .codemap import CodeMapper
from .keys import Action, KeyAction
from .paging import PAGE_SIZE, Paginator
from .punctuation import Punctuation

DEFAULT_LOCALE = "zh_CN"
DEFAULT_TRIGGER = ";"


# ─── Events ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Commit:
    text: str


@dataclass(frozen=True)
class MoveCursorLeft:
    count: int


@dataclass(frozen=True)
class UpdatePanel:
    """Preedit digits plus, once a page is open, its labelled candidates."""

    preedit: str
    candidates: tuple[tuple[str, str], ...] = ()
    cursor: int = 0
    page_code: int | None = None

    @property
    def visible(self) -> bool:
        return bool(self.preedit)


Event = Commit | MoveCursorLeft | UpdatePanel


@dataclass
class KeyResult:
    handled: bool
    events: list[Event] = field(default_factory=list)

    @property
    def commits(self) -> list[str]:
        return [e.text for e in self.events if isinstance(e, Commit)]


# ─── Per-context state ────────────────────────────────────────────────────────

class QuweiState:
    """
    Digit entry and paging for one input context.

    Usage::

        state = engine.state_for("default")
        state.process(KeyAction.digit("1"))
        state.process(KeyAction.digit("6"))
        state.process(KeyAction.digit("0"))       # page 160 is now open
        state.process(KeyAction.digit("1")).commits   # ['啊']
    """

    def __init__(self, engine: "QuweiEngine", context: Hashable) -> None:
        self.engine = engine
        self.context = context
        self.buffer = InputBuffer()
        self.paginator: Paginator | None = None

    # ── Inspection ────────────────────────────────────────────────────────────

    @property
    def is_idle(self) -> bool:
        return self.buffer.is_empty()

    @property
    def is_paged(self) -> bool:
        return self.paginator is not None

    def panel(self) -> UpdatePanel:
        if self.paginator is None:
            return UpdatePanel(self.buffer.user_input())
        return UpdatePanel(
            self.buffer.user_input(),
            tuple(self.paginator.page.labelled()),
            self.paginator.cursor,
            self.paginator.page_code,
        )

    # ── Mutation ──────────────────────────────────────────────────────────────

    def reset(self) -> UpdatePanel:
        self.buffer.clear()
        self.paginator = None
        return self.panel()

    def set_code(self, code: int) -> bool:
        """Jump straight to page ``code``; ignored outside 0-999."""
        if not self.buffer.set_from_integer(code):
            return False
        self._sync_page()
        return True

    def _sync_page(self) -> None:
        code = self.buffer.code()
        if code is None:
            self.paginator = None
        elif self.paginator is None:
            self.paginator = Paginator(self.engine.mapper, code)
        elif self.paginator.page_code != code:
            self.paginator = Paginator(self.engine.mapper, code, self.paginator.cursor)

    def _refresh(self) -> KeyResult:
        self._sync_page()
        return KeyResult(True, [self.panel()])

    def _select(self, paginator: Paginator, index: int | None) -> KeyResult:
        slot = paginator.current_candidate(index)
        events: list[Event] = []
        # An unmapped slot still ends the composition, it just commits nothing
        if slot is not None and slot.text:
            events.append(Commit(slot.text))
        events.append(self.reset())
        return KeyResult(True, events)

    def _flip(self, paginator: Paginator, forward: bool) -> KeyResult:
        moved = paginator.next() if forward else paginator.prev()
        if not moved:
            # Boundary: nothing to do, but the key is still consumed
            return KeyResult(True)
        self.buffer.set_from_integer(paginator.page_code)
        return KeyResult(True, [self.panel()])

    # ── Key dispatch ──────────────────────────────────────────────────────────

    def process(self, action: KeyAction) -> KeyResult:  # noqa: C901
        kind = action.kind
        pager = self.paginator

        if pager is not None:
            if kind is Action.DIGIT:
                # Number row doubles as selection keys: 1..9 → 0..8, 0 → 9
                return self._select(pager, (int(action.char) + PAGE_SIZE - 1) % PAGE_SIZE)
            if kind is Action.SELECT and 0 <= action.index < len(pager.page):
                return self._select(pager, action.index)
            if kind is Action.SELECT_CURRENT:
                return self._select(pager, None)
            if kind is Action.PAGE_PREV:
                return self._flip(pager, forward=False)
            if kind is Action.PAGE_NEXT:
                return self._flip(pager, forward=True)
            if kind is Action.CURSOR_PREV:
                pager.cursor_prev()
                return KeyResult(True, [self.panel()])
            if kind is Action.CURSOR_NEXT:
                pager.cursor_next()
                return KeyResult(True, [self.panel()])

        if self.buffer.is_empty():
            if kind is Action.DIGIT:
                self.buffer.type(action.char)
                return self._refresh()
            if action.char:
                # Navigation bound to a character is plain text while idle
                return self._punctuate(action)
            return KeyResult(False)

        if kind is Action.BACKSPACE:
            self.buffer.backspace()
            return self._refresh()
        if kind is Action.ENTER:
            text = self.buffer.user_input()
            return KeyResult(True, [Commit(text), self.reset()])
        if kind is Action.ESCAPE:
            return KeyResult(True, [self.reset()])
        if kind is Action.DIGIT:
            self.buffer.type(action.char)
            return self._refresh()
        # Anything else is swallowed while a code is being typed
        return KeyResult(True)

    def _punctuate(self, action: KeyAction) -> KeyResult:
        engine = self.engine
        key = action.char
        punc, after = "", ""
        if not action.keypad and engine.punctuation is not None:
            punc, after = engine.punctuation.push(engine.locale, key)

        if key == engine.quickphrase_trigger and engine.quickphrase is not None:
            # no punc: key → key;  punc: key → punc, return → key
            output = punc + after if punc else key
            alt_output = key if punc else ""
            engine.quickphrase.trigger(self.context, output, alt_output)
            return KeyResult(True)

        if not punc:
            return KeyResult(False)
        events: list[Event] = [Commit(punc + after)]
        if after:
            events.append(MoveCursorLeft(len(after)))
        return KeyResult(True, events)


# ─── Engine ───────────────────────────────────────────────────────────────────

class QuweiEngine:
    """
    Process-wide engine: one code mapper, one state per input context.

    ``quickphrase`` is any object with a
    ``trigger(context, output, alt_output)`` method; it takes over the context
    when the trigger key is typed with no code pending.

    Raises :class:`~quweid.codemap.ConverterError` if the character-set
    converter is unavailable.
    """

    def __init__(
        self,
        config: dict | None = None,
        *,
        mapper: CodeMapper | None = None,
        punctuation: Punctuation | None = None,
        quickphrase=None,
    ) -> None:
        self.config = config or {}
        self.mapper = mapper if mapper is not None else CodeMapper()
        self.locale: str = self.config.get("locale", DEFAULT_LOCALE)
        self.quickphrase_trigger: str = self.config.get(
            "quickphrase_trigger", DEFAULT_TRIGGER
        )
        if punctuation is None:
            punctuation = Punctuation(
                self.config.get("punctuation"),
                type_paired=self.config.get("type_paired_punctuation", True),
            )
        self.punctuation = punctuation
        self.quickphrase = quickphrase
        self._states: dict[Hashable, QuweiState] = {}

    @property
    def sessions(self) -> list[Hashable]:
        return list(self._states)

    def state_for(self, context: Hashable) -> QuweiState:
        state = self._states.get(context)
        if state is None:
            state = self._states[context] = QuweiState(self, context)
        return state

    def process(self, context: Hashable, action: KeyAction) -> KeyResult:
        return self.state_for(context).process(action)

    def reset(self, context: Hashable) -> UpdatePanel:
        return self.state_for(context).reset()

    def drop(self, context: Hashable) -> None:
        self._states.pop(context, None)
