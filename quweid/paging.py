"""
quweid.paging
=============
Candidate pages and page/cursor navigation.

A page code ``p`` (0-999) addresses the ten sub-codes ``p*10+1 .. p*10+10``.
Slot labels follow the number row: ``1 2 3 4 5 6 7 8 9 0``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .buffer import MAX_CODE
from .codemap import CodeMapper

PAGE_SIZE = 10
LABELS: tuple[str, ...] = tuple(str((i + 1) % 10) for i in range(PAGE_SIZE))


@dataclass(frozen=True)
class CandidateSlot:
    index: int
    label: str
    sub_code: int
    text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class CandidatePage:
    page_code: int
    slots: tuple[CandidateSlot, ...]

    @classmethod
    def build(cls, page_code: int, mapper: CodeMapper) -> "CandidatePage":
        """Map all ten sub-codes of ``page_code``.  Unmapped slots stay empty."""
        if not 0 <= page_code <= MAX_CODE:
            raise ValueError(f"page code must be in [0, {MAX_CODE}], got {page_code}")
        slots = []
        for i in range(PAGE_SIZE):
            sub_code = page_code * PAGE_SIZE + i + 1
            slots.append(
                CandidateSlot(
                    index=i,
                    label=LABELS[i],
                    sub_code=sub_code,
                    text=mapper.map(sub_code) or "",
                )
            )
        return cls(page_code=page_code, slots=tuple(slots))

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> CandidateSlot:
        return self.slots[index]

    def texts(self) -> list[str]:
        return [slot.text for slot in self.slots]

    def labelled(self) -> list[tuple[str, str]]:
        return [(slot.label, slot.text) for slot in self.slots]


class Paginator:
    """
    Current page plus a cyclic cursor over its ten slots.

    Flipping pages keeps the cursor on the same slot index.
    """

    def __init__(self, mapper: CodeMapper, page_code: int, cursor: int = 0) -> None:
        self._mapper = mapper
        self.page = CandidatePage.build(page_code, mapper)
        self.cursor = cursor % PAGE_SIZE

    @property
    def page_code(self) -> int:
        return self.page.page_code

    # ── Pages ─────────────────────────────────────────────────────────────────

    def has_prev(self) -> bool:
        return self.page_code > 0

    def has_next(self) -> bool:
        return self.page_code < MAX_CODE

    def prev(self) -> bool:
        if not self.has_prev():
            return False
        self.page = CandidatePage.build(self.page_code - 1, self._mapper)
        return True

    def next(self) -> bool:
        if not self.has_next():
            return False
        self.page = CandidatePage.build(self.page_code + 1, self._mapper)
        return True

    # ── Cursor ────────────────────────────────────────────────────────────────

    def cursor_prev(self) -> None:
        self.cursor = (self.cursor - 1) % PAGE_SIZE

    def cursor_next(self) -> None:
        self.cursor = (self.cursor + 1) % PAGE_SIZE

    def current_candidate(self, index: int | None = None) -> CandidateSlot | None:
        """The slot at ``index``, or at the cursor when no index is given."""
        if index is None:
            index = self.cursor
        if not 0 <= index < len(self.page):
            return None
        return self.page[index]
