"""Configuration for building a validator registry from schema files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from oasfindings.detection.variant import SchemaVariant
from oasfindings.exceptions import ConfigurationError
from oasfindings.validation.jsonschema_adapter import JsonSchemaValidator
from oasfindings.validation.schema_loader import load_schema


def parse_variant(name: str) -> SchemaVariant:
    """Look up a schema variant by its tag (e.g. ``oas3_1``)."""
    try:
        return SchemaVariant(name.strip())
    except ValueError:
        available = [v.value for v in SchemaVariant]
        raise ConfigurationError(
            f"Unknown schema variant '{name}'. Available: {available}"
        ) from None


def parse_schema_option(option: str) -> tuple[SchemaVariant, Path]:
    """Parse a ``VARIANT=PATH`` option into its parts."""
    variant_name, sep, raw_path = option.partition("=")
    if not sep or not raw_path.strip():
        raise ConfigurationError(
            f"Expected VARIANT=PATH for schema option, got '{option}'"
        )
    return parse_variant(variant_name), Path(raw_path.strip())


@dataclass
class LintConfig:
    """Which schema validates each variant, and how the CLI should exit."""

    schema_paths: dict[SchemaVariant, Path] = field(default_factory=dict)
    fail_on_findings: bool = True

    @classmethod
    def from_options(
        cls, schema_options: Iterable[str], fail_on_findings: bool = True
    ) -> LintConfig:
        """Build a config from repeated ``VARIANT=PATH`` options."""
        schema_paths: dict[SchemaVariant, Path] = {}
        for option in schema_options:
            variant, path = parse_schema_option(option)
            schema_paths[variant] = path
        return cls(schema_paths=schema_paths, fail_on_findings=fail_on_findings)

    def build_registry(self) -> dict[SchemaVariant, JsonSchemaValidator]:
        """Load and compile every configured schema."""
        return {
            variant: JsonSchemaValidator(load_schema(path))
            for variant, path in self.schema_paths.items()
        }
