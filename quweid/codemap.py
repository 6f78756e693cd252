"""
quweid.codemap
==============
Quwei sub-code → character translation.

A sub-code is ``qu * 100 + wei``.  The pair is turned into the two bytes of a
GB2312-style code point and decoded with the GB18030 codec, which is a
superset of GB2312/GBK.
"""

from __future__ import annotations

import codecs

SUB_CODE_MIN = 1
SUB_CODE_MAX = 10000   # page 999, slot "0"

# Rows 95 and above live in the GBK extension area (lead bytes 0xA8, 0xA9, ...)
EXTENDED_QU = 95


class ConverterError(RuntimeError):
    """The character-set converter could not be created."""


def quwei_pair(sub_code: int) -> tuple[int, int]:
    """Split a sub-code into ``(qu, wei)``."""
    return divmod(sub_code, 100)


def quwei_bytes(sub_code: int) -> bytes:
    """Return the two legacy bytes addressed by ``sub_code``."""
    if not SUB_CODE_MIN <= sub_code <= SUB_CODE_MAX:
        raise ValueError(
            f"sub-code must be in [{SUB_CODE_MIN}, {SUB_CODE_MAX}], got {sub_code}"
        )
    qu, wei = quwei_pair(sub_code)
    if qu >= EXTENDED_QU:
        lead = qu - EXTENDED_QU + 0xA8
        trail = wei + 0x40
        # 0xA87F and 0xA97F are not valid code points
        if trail == 0x7F:
            trail += 1
    else:
        lead = qu + 0xA0
        trail = wei + 0xA0
    # wei above 95 runs past 0xFF in the standard rows; the wrapped byte never decodes
    return bytes((lead & 0xFF, trail & 0xFF))


class CodeMapper:
    """
    Maps sub-codes to characters.

    The codec is resolved once on construction and shared read-only by every
    session afterwards.  Decoding is stateless, so concurrent callers need no
    locking.

    Usage::

        mapper = CodeMapper()
        mapper.map(1601)     # '啊'
        mapper.map(100)      # None  (no character at that position)
    """

    def __init__(self, encoding: str = "gb18030") -> None:
        try:
            self._codec = codecs.lookup(encoding)
        except LookupError as exc:
            raise ConverterError(
                f"Failed to create converter for {encoding!r}"
            ) from exc
        self.encoding = self._codec.name

    def map(self, sub_code: int) -> str | None:
        """Return the character for ``sub_code``, or ``None`` if unassigned."""
        raw = quwei_bytes(sub_code)
        try:
            text, _ = self._codec.decode(raw, "strict")
        except UnicodeDecodeError:
            return None
        return text or None
