"""
quweid.buffer
=============
Digit accumulator for a quwei page code.
"""

from __future__ import annotations

MAX_DIGITS = 3
MAX_CODE = 10 ** MAX_DIGITS - 1


class InputBuffer:
    """
    Holds at most three typed digits.

    Typing past the limit, or typing anything that is not a digit, is
    silently ignored.
    """

    def __init__(self) -> None:
        self._digits: list[str] = []

    def type(self, digit: str) -> bool:
        """Append ``digit``.  Returns ``True`` if the buffer changed."""
        if len(digit) != 1 or digit not in "0123456789":
            return False
        if len(self._digits) >= MAX_DIGITS:
            return False
        self._digits.append(digit)
        return True

    def backspace(self) -> bool:
        if not self._digits:
            return False
        self._digits.pop()
        return True

    def clear(self) -> None:
        self._digits = []

    def set_from_integer(self, code: int) -> bool:
        """Replace the contents with ``code`` zero-padded to three digits."""
        if not 0 <= code <= MAX_CODE:
            return False
        self._digits = list(f"{code:0{MAX_DIGITS}d}")
        return True

    def user_input(self) -> str:
        return "".join(self._digits)

    def size(self) -> int:
        return len(self._digits)

    def is_empty(self) -> bool:
        return not self._digits

    def is_full(self) -> bool:
        return len(self._digits) == MAX_DIGITS

    def code(self) -> int | None:
        """The page code, or ``None`` while fewer than three digits are typed."""
        if not self.is_full():
            return None
        return int(self.user_input())

    def __len__(self) -> int:
        return len(self._digits)

    def __repr__(self) -> str:
        return f"InputBuffer({self.user_input()!r})"
