"""Read API description documents from JSON or YAML."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from oasfindings.exceptions import DocumentLoadError

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def parse_document(text: str, suffix: str = "") -> Any:
    """Parse document text as JSON or YAML depending on ``suffix``.

    Unknown suffixes are tried as JSON first, then YAML.
    """
    suffix = suffix.lower()
    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentLoadError(f"Cannot parse document: {exc}") from exc


def load_document(path: Path) -> Any:
    """Load an API description document from a JSON or YAML file."""
    if not path.is_file():
        raise DocumentLoadError(f"File not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Cannot read {path}: {exc}") from exc
    return parse_document(text, path.suffix)
