"""
quweid.punctuation
==================
Table-driven punctuation for keys typed while no code is being entered.
"""

from __future__ import annotations

# A plain string replaces the key.  A two-item list is an open/close pair:
# the opening half is committed with the closing half trailing after it.
DEFAULT_TABLES: dict[str, dict[str, str | list[str]]] = {
    "zh_CN": {
        ",": "，",
        ".": "。",
        "?": "？",
        "!": "！",
        ":": "：",
        ";": "；",
        "\\": "、",
        "^": "……",
        "_": "——",
        "$": "￥",
        "(": ["（", "）"],
        "[": ["【", "】"],
        "<": ["《", "》"],
        '"': ["“", "”"],
        "'": ["‘", "’"],
    },
}


class Punctuation:
    """
    Looks up the replacement for a character in a per-locale table.

    Usage::

        punc = Punctuation()
        punc.push("zh_CN", ",")     # ('，', '')
        punc.push("zh_CN", "(")     # ('（', '）')  when pairs are enabled
    """

    def __init__(
        self,
        tables: dict[str, dict[str, str | list[str]]] | None = None,
        type_paired: bool = True,
    ) -> None:
        self.tables = tables if tables is not None else DEFAULT_TABLES
        self.type_paired = type_paired

    def push(self, locale: str, char: str) -> tuple[str, str]:
        """Return ``(punc, after)``; ``("", "")`` when ``char`` has no entry."""
        entry = self.tables.get(locale, {}).get(char)
        if not entry:
            return "", ""
        if isinstance(entry, str):
            return entry, ""
        if len(entry) == 1:
            return entry[0], ""
        return (entry[0], entry[1]) if self.type_paired else (entry[0], "")
