"""Top-level entry point: detect the variant, validate, transform.

The validator registry is passed in by the caller, so the same document
and registry always produce the same findings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from oasfindings.detection.variant import SchemaVariant, detect_variant
from oasfindings.models.findings import Finding, RawValidationError
from oasfindings.pipeline.transform import transform
from oasfindings.validation.protocol import Validator

logger = logging.getLogger(__name__)


def collect_raw_errors(
    document: Any, validator: Validator
) -> list[RawValidationError]:
    """Run ``validator`` over ``document`` and coerce what it reports."""
    reported = validator(document)
    if not reported or not isinstance(reported, Iterable):
        return []

    raw_errors: list[RawValidationError] = []
    for entry in reported:
        if not isinstance(entry, (RawValidationError, Mapping)):
            logger.debug("Skipping malformed validator entry: %r", entry)
            continue
        try:
            raw_errors.append(RawValidationError.from_any(entry))
        except ValidationError as exc:
            logger.debug("Skipping unreadable validator entry: %s", exc)
    return raw_errors


def process(
    document: Any,
    validators: Mapping[SchemaVariant, Validator],
) -> list[Finding]:
    """Validate ``document`` with the validator for its variant and build findings.

    Args:
        document: The parsed API description document.
        validators: Validators keyed by schema variant.

    Returns:
        Findings in the order the validator reported them. Empty when the
        document is valid or no validator is registered for its variant.
    """
    variant = detect_variant(document)
    validator = validators.get(variant)
    if validator is None or not callable(validator):
        logger.debug("No validator registered for %s, skipping", variant.value)
        return []

    logger.debug("Validating document as %s", variant.value)
    raw_errors = collect_raw_errors(document, validator)
    return transform(document, raw_errors)
