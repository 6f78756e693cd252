"""
quweid.config
=============
Loads and validates config.json.
Falls back to sane defaults if the file is missing or partially specified.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path

from .keys import DEFAULT_BINDINGS
from .punctuation import DEFAULT_TABLES

# The package ships a default config.json alongside this file.
_PACKAGE_DIR = Path(__file__).parent
_DEFAULT_CONFIG_PATH = _PACKAGE_DIR / "config.json"

ENV_VAR = "QUWEID_CONFIG"


DEFAULTS: dict = {
    "locale": "zh_CN",
    "quickphrase_trigger": ";",
    "type_paired_punctuation": True,
    "overlay": {
        "offset_x": 16,
        "offset_y": 24,
        "opacity": 0.93,
        "columns": 5,
    },
    "keys": DEFAULT_BINDINGS,
    "punctuation": DEFAULT_TABLES,
}

# Sub-dicts merged key by key instead of replaced wholesale
_MERGED = ("overlay", "keys", "punctuation")


def load_config(path: str | Path | None = None) -> dict:
    """
    Load configuration from a JSON file and merge with defaults.

    Resolution order (first found wins):
        1. Explicit ``path`` argument
        2. ``QUWEID_CONFIG`` environment variable
        3. ``config.json`` in the current working directory
        4. Packaged default ``quweid/config.json``

    Returns a fully-populated config dict.
    """
    cfg = copy.deepcopy(DEFAULTS)

    candidates: list[Path] = []
    if path:
        candidates.append(Path(path))
    env = os.environ.get(ENV_VAR)
    if env:
        candidates.append(Path(env))
    candidates.append(Path.cwd() / "config.json")
    candidates.append(_DEFAULT_CONFIG_PATH)

    for candidate in candidates:
        if candidate.exists():
            try:
                with open(candidate, "r", encoding="utf-8") as f:
                    user = json.load(f)
                # Strip comment keys (keys starting with _)
                user = {k: v for k, v in user.items() if not k.startswith("_")}
                for key in _MERGED:
                    if key in user:
                        cfg[key].update(user.pop(key))
                cfg.update(user)
            except Exception as e:
                print(f"[quwei] Warning: could not parse {candidate}: {e}")
            break   # stop at first found

    return cfg
