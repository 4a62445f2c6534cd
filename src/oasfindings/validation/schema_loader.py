"""Load JSON Schema files from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from oasfindings.exceptions import SchemaLoadError

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_schema(path: Path) -> dict[str, Any]:
    """Load a JSON Schema from a ``.json`` or ``.yaml``/``.yml`` file."""
    if not path.is_file():
        raise SchemaLoadError(f"Schema file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                result = yaml.safe_load(f)
            else:
                result = json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaLoadError(f"Cannot read schema {path}: {exc}") from exc

    if not isinstance(result, dict):
        raise SchemaLoadError(f"Schema {path} must be a JSON object")
    return result
