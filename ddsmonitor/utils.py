"""Small formatting helpers shared across the monitor."""

from __future__ import annotations

import math
import os
from datetime import datetime

_IS_WINDOWS = os.name == "nt"
_FILE_SCHEME = "file://"


def now(milliseconds: bool = True) -> str:
    """Return the local time as ``YYYY-MM-DD HH:MM:SS``, optionally with ``.mmm``."""
    current = datetime.now()
    text = current.strftime("%Y-%m-%d %X")
    if milliseconds:
        text += f".{current.microsecond // 1000:03d}"
    return text


def double_to_string(value: float) -> str:
    """Render a float in fixed notation without trailing zeros; NaN gives ``""``."""
    if math.isnan(value):
        return ""
    text = "%f" % value
    if "." in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text


def erase_file_substr(path: str) -> str:
    """Strip a leading ``file://`` scheme (and, on Windows, the following slash)."""
    if path.startswith(_FILE_SCHEME):
        return path[8:] if _IS_WINDOWS else path[len(_FILE_SCHEME):]
    return path