"""Canonicalize validator message text for display."""

from __future__ import annotations

import re
from typing import Any

_QUOTES = re.compile(r"['\"]")
_NOT = re.compile(r"NOT")


def normalize_message(prop: str | None, message: Any) -> str:
    """Normalize quotes and negation wording, optionally naming the property.

    ``'`` and ``"`` both become ``"``; the validator's ``NOT`` becomes
    ``not``. When ``prop`` is given the result reads
    ``"<prop>" property <message>``. Non-string messages become ``""``.
    """
    if not isinstance(message, str):
        return ""
    cleaned = _NOT.sub("not", _QUOTES.sub('"', message))
    if prop is None:
        return cleaned
    return f'"{prop}" property {cleaned}'
