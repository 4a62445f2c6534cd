"""Minimal RFC 6901 JSON Pointer resolution against an in-memory document.

Only fragment-form pointers rooted at the document (``#`` or ``#/a/b``)
are supported. Segments are keys into mappings, or canonical decimal
indices (``0``, never ``01`` or ``-1``) into sequences.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Final


class _NotFound:
    """Sentinel type for an unresolvable pointer."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = _NotFound()

_INDEX = re.compile(r"^(?:0|[1-9][0-9]*)$")


def unescape_segment(segment: str) -> str:
    """Unescape a single pointer segment (``~1`` -> ``/``, then ``~0`` -> ``~``)."""
    return segment.replace("~1", "/").replace("~0", "~")


def escape_segment(segment: str) -> str:
    """Escape a single pointer segment (``~`` -> ``~0``, then ``/`` -> ``~1``)."""
    return segment.replace("~", "~0").replace("/", "~1")


def parse_instance_path(instance_path: Any) -> list[str]:
    """Split a validator instance path (``/a/b``) into unescaped segments.

    The empty string denotes the document root and yields ``[]``.
    """
    if not isinstance(instance_path, str) or instance_path == "":
        return []
    return [unescape_segment(s) for s in instance_path[1:].split("/")]


def _step(current: Any, key: str) -> Any:
    if isinstance(current, Mapping):
        return current[key] if key in current else NOT_FOUND
    if (
        isinstance(current, Sequence)
        and not isinstance(current, (str, bytes))
        and _INDEX.match(key)
        and int(key) < len(current)
    ):
        return current[int(key)]
    return NOT_FOUND


def resolve(root: Any, pointer: Any) -> Any:
    """Resolve ``pointer`` against ``root``.

    Returns the referenced value, or ``NOT_FOUND`` when the pointer is
    malformed or any segment is missing. Never raises.
    """
    if pointer == "#" or pointer == "":
        return root
    if not isinstance(pointer, str) or not pointer.startswith("#/"):
        return NOT_FOUND

    current = root
    for key in (unescape_segment(s) for s in pointer[2:].split("/")):
        current = _step(current, key)
        if current is NOT_FOUND:
            return NOT_FOUND
    return current
