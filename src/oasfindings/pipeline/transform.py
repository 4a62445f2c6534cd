"""Reshape raw validator errors into user-facing findings.

Each raw error is filtered, its instance path is split into segments and
its message is rebuilt according to the violated keyword. Keywords the
pipeline has no special handling for fall through to the generic
normalized message.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from oasfindings.matching.suggest import best_match
from oasfindings.messages.normalize import normalize_message
from oasfindings.models.findings import Finding, RawValidationError
from oasfindings.pointer.resolver import parse_instance_path, resolve

logger = logging.getLogger(__name__)


class Keyword(str, Enum):
    """Validator keywords with dedicated message handling."""

    IF = "if"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    ENUM = "enum"
    ERROR_MESSAGE = "errorMessage"


# Keywords whose errors carry nothing actionable on their own
IGNORED_KEYWORDS: frozenset[str] = frozenset({Keyword.IF.value})


def is_relevant(error: RawValidationError | None) -> bool:
    """Whether an error should produce a finding at all."""
    return error is not None and error.keyword not in IGNORED_KEYWORDS


def _generic_message(
    document: Any, error: RawValidationError, path: list[str], prop: str | None
) -> str:
    return normalize_message(prop, error.message)


def _additional_properties_message(
    document: Any, error: RawValidationError, path: list[str], prop: str | None
) -> str:
    name = error.params.get("additionalProperty")
    if not isinstance(name, str):
        return _generic_message(document, error, path, prop)
    path.append(name)
    return f'Property "{name}" is not expected to be here'


def _render_value(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return json.dumps(str(value), ensure_ascii=False)


def _enum_message(
    document: Any, error: RawValidationError, path: list[str], prop: str | None
) -> str:
    allowed = error.params.get("allowedValues")
    if not isinstance(allowed, (list, tuple)):
        allowed = []
    printed = ", ".join(_render_value(v) for v in allowed)

    suggestion = ""
    value = resolve(document, "#" + error.instancePath)
    if isinstance(value, str):
        match = best_match(value, allowed)
        if match is not None:
            suggestion = f'. Did you mean "{match}"?'

    return f"{normalize_message(prop, error.message)}: {printed}{suggestion}"


def _error_message_message(
    document: Any, error: RawValidationError, path: list[str], prop: str | None
) -> str:
    # Author-supplied text, shown verbatim
    return str(error.message) if error.message else ""


MessageBuilder = Callable[[Any, RawValidationError, list[str], str | None], str]

MESSAGE_BUILDERS: dict[Keyword, MessageBuilder] = {
    Keyword.ADDITIONAL_PROPERTIES: _additional_properties_message,
    Keyword.ENUM: _enum_message,
    Keyword.ERROR_MESSAGE: _error_message_message,
}


def get_message_builder(keyword: str) -> MessageBuilder:
    """Look up the message builder for ``keyword``, defaulting to the generic one."""
    try:
        return MESSAGE_BUILDERS.get(Keyword(keyword), _generic_message)
    except ValueError:
        return _generic_message


def transform_error(document: Any, error: RawValidationError) -> Finding:
    """Build the finding for a single relevant error."""
    path = parse_instance_path(error.instancePath)
    prop = path[-1] if path else None
    builder = get_message_builder(error.keyword)
    message = builder(document, error, path, prop)
    return Finding(message=message, path=path)


def transform(
    document: Any, errors: Iterable[RawValidationError | None]
) -> list[Finding]:
    """Turn raw validator errors into findings, preserving their order.

    Irrelevant errors are dropped, so the result is never longer than the
    input. ``document`` is only read.
    """
    findings: list[Finding] = []
    dropped = 0
    for error in errors:
        if not is_relevant(error):
            dropped += 1
            continue
        findings.append(transform_error(document, error))

    if dropped:
        logger.debug("Dropped %d irrelevant validation error(s)", dropped)
    return findings
