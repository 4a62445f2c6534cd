#!/usr/bin/env python3
"""Basic example: turn raw validation errors into findings programmatically.

This script demonstrates using the oasfindings API directly (without the CLI),
first with a stub validator and then with a real jsonschema-backed one.
"""

from typing import Any

from oasfindings.detection.variant import SchemaVariant, detect_variant
from oasfindings.pipeline.process import process
from oasfindings.validation.jsonschema_adapter import JsonSchemaValidator

DOCUMENT = {
    "openapi": "3.0.3",
    "paths": {
        "/pets": {
            "get": {
                "parameters": [{"name": "limit", "in": "qurey"}],
            },
        },
    },
    "extra": "x",
}

# A tiny stand-in for the OpenAPI 3.0 schema
SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "openapi": {"type": "string"},
        "paths": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "additionalProperties": {
                    "type": "object",
                    "properties": {
                        "parameters": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {
                                    "in": {"enum": ["query", "header", "path", "cookie"]},
                                },
                            },
                        },
                    },
                },
            },
        },
    },
}


def stub_validator(document: Any) -> list[dict[str, Any]]:
    """Pretend validator reporting a single unexpected root property."""
    return [{
        "keyword": "additionalProperties",
        "instancePath": "",
        "message": "must NOT have additional properties",
        "params": {"additionalProperty": "extra"},
    }]


def main() -> None:
    print(f"Detected variant: {detect_variant(DOCUMENT).value}")

    print("\nStub validator:")
    for finding in process(DOCUMENT, {SchemaVariant.OAS3_0: stub_validator}):
        print(f"  /{'/'.join(finding.path)}: {finding.message}")

    print("\njsonschema validator:")
    registry = {SchemaVariant.OAS3_0: JsonSchemaValidator(SCHEMA)}
    for finding in process(DOCUMENT, registry):
        print(f"  /{'/'.join(finding.path)}: {finding.message}")


if __name__ == "__main__":
    main()
