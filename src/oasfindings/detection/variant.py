"""Schema variant definitions and detection from a document's version fields."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class SchemaVariant(str, Enum):
    """The API description schemas a document can be validated against."""

    OAS2_0 = "oas2_0"
    OAS3_0 = "oas3_0"
    OAS3_1 = "oas3_1"


# Version field and prefix that select each variant, in detection order
VARIANT_MARKERS: dict[SchemaVariant, tuple[str, str]] = {
    SchemaVariant.OAS2_0: ("swagger", "2.0"),
    SchemaVariant.OAS3_1: ("openapi", "3.1"),
    SchemaVariant.OAS3_0: ("openapi", "3.0"),
}

DEFAULT_VARIANT = SchemaVariant.OAS3_0


def detect_variant(document: Any) -> SchemaVariant:
    """Select the schema variant declared by ``document``.

    Looks at the ``swagger`` and ``openapi`` string fields. Anything that
    does not clearly declare a known version, including non-mapping input,
    falls back to OpenAPI 3.0.
    """
    if isinstance(document, Mapping):
        for variant, (field, prefix) in VARIANT_MARKERS.items():
            declared = document.get(field)
            if isinstance(declared, str) and declared.strip().startswith(prefix):
                return variant

    logger.debug("No recognised version field, defaulting to %s", DEFAULT_VARIANT.value)
    return DEFAULT_VARIANT
