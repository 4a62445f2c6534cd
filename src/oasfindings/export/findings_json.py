"""Serialize findings to JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from oasfindings.models.findings import Finding


def findings_to_list(findings: Iterable[Finding]) -> list[dict[str, Any]]:
    """Convert findings to plain dicts."""
    return [f.to_serializable() for f in findings]


def write_findings(findings: Iterable[Finding], path: Path) -> None:
    """Write findings to a JSON file."""
    data = findings_to_list(findings)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
