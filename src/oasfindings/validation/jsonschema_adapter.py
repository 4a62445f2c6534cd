"""Run ``jsonschema`` and report its errors as raw validation errors.

``jsonschema`` reports one error per failed keyword with a prose message.
The pipeline expects structured ``params`` instead, so this adapter
rebuilds them from the error's schema and instance. Unexpected
additional properties are split into one raw error per property.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from typing import Any

import jsonschema
from jsonschema.exceptions import SchemaError
from jsonschema.exceptions import ValidationError as JsonSchemaError

from oasfindings.exceptions import SchemaLoadError
from oasfindings.models.findings import RawValidationError
from oasfindings.pointer.resolver import escape_segment

logger = logging.getLogger(__name__)

_REQUIRED_NAME = re.compile(r"^'(?P<name>.*)' is a required property$")

ADDITIONAL_PROPERTIES_MESSAGE = "must NOT have additional properties"
ENUM_MESSAGE = "must be equal to one of the allowed values"


def to_instance_path(parts: Any) -> str:
    """Build a ``/a/b`` instance path from a jsonschema path deque."""
    return "".join("/" + escape_segment(str(p)) for p in parts)


def to_schema_path(parts: Any) -> str:
    """Build a ``#/a/b`` fragment pointer from a jsonschema schema path."""
    return "#" + to_instance_path(parts)


def unexpected_properties(instance: Any, schema: Mapping[str, Any]) -> list[str]:
    """Instance keys allowed by neither ``properties`` nor ``patternProperties``."""
    if not isinstance(instance, Mapping):
        return []
    declared = schema.get("properties") or {}
    patterns = list((schema.get("patternProperties") or {}).keys())
    extras = []
    for key in instance:
        if key in declared:
            continue
        if any(re.search(p, key) for p in patterns):
            continue
        extras.append(key)
    return extras


def adapt_error(error: JsonSchemaError) -> list[RawValidationError]:
    """Translate a single jsonschema error into raw validation errors."""
    keyword = str(error.validator)
    base: dict[str, Any] = {
        "keyword": keyword,
        "instancePath": to_instance_path(error.absolute_path),
        "schemaPath": to_schema_path(error.absolute_schema_path),
        "message": error.message,
        "params": {},
    }

    if keyword == "additionalProperties" and isinstance(error.schema, Mapping):
        extras = unexpected_properties(error.instance, error.schema)
        if extras:
            return [
                RawValidationError(
                    **{
                        **base,
                        "message": ADDITIONAL_PROPERTIES_MESSAGE,
                        "params": {"additionalProperty": name},
                    }
                )
                for name in extras
            ]
    elif keyword == "enum":
        allowed = error.validator_value
        base["message"] = ENUM_MESSAGE
        base["params"] = {
            "allowedValues": list(allowed) if isinstance(allowed, (list, tuple)) else []
        }
    elif keyword == "required":
        match = _REQUIRED_NAME.match(error.message)
        if match:
            base["params"] = {"missingProperty": match.group("name")}
    elif keyword == "type":
        base["params"] = {"type": error.validator_value}

    return [RawValidationError(**base)]


class JsonSchemaValidator:
    """A compiled JSON Schema usable as a pipeline validator.

    The draft is picked from the schema's ``$schema`` keyword, falling back
    to the latest draft ``jsonschema`` supports.
    """

    def __init__(self, schema: Mapping[str, Any]) -> None:
        cls = jsonschema.validators.validator_for(schema)
        try:
            cls.check_schema(schema)
        except SchemaError as exc:
            raise SchemaLoadError(f"Invalid JSON Schema: {exc.message}") from exc
        self.schema = schema
        self._validator = cls(schema)

    def iter_raw_errors(self, document: Any) -> Iterator[RawValidationError]:
        """Yield raw errors for ``document``, ordered by instance location."""
        errors = sorted(
            self._validator.iter_errors(document),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
        for error in errors:
            yield from adapt_error(error)

    def __call__(self, document: Any) -> list[RawValidationError]:
        raw = list(self.iter_raw_errors(document))
        logger.debug("jsonschema reported %d raw error(s)", len(raw))
        return raw
