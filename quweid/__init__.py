"""
quweid
======
System-wide quwei (区位码) character input via the number keys.

Public API
----------
    from quweid import QuweiEngine, KeyAction, load_config

    engine = QuweiEngine(load_config())
    for d in "160":
        engine.process("ctx", KeyAction.digit(d))
    result = engine.process("ctx", KeyAction.digit("1"))
    print(result.commits)      # ['啊']
"""

from .buffer import InputBuffer
from .codemap import CodeMapper, ConverterError
from .config import load_config
from .engine import Commit, KeyResult, MoveCursorLeft, QuweiEngine, QuweiState, UpdatePanel
from .host import Host
from .keys import Action, KeyAction, classify
from .paging import CandidatePage, CandidateSlot, Paginator
from .punctuation import Punctuation

__all__ = [
    "Action",
    "CandidatePage",
    "CandidateSlot",
    "CodeMapper",
    "Commit",
    "ConverterError",
    "Host",
    "InputBuffer",
    "KeyAction",
    "KeyResult",
    "MoveCursorLeft",
    "Paginator",
    "Punctuation",
    "QuweiEngine",
    "QuweiState",
    "UpdatePanel",
    "classify",
    "load_config",
]
__version__ = "1.0.0"
