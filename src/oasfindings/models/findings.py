"""Pydantic models for raw validator errors and the findings built from them.

A raw error mirrors the error objects emitted by JSON Schema validators:
a ``keyword`` naming the violated constraint, an ``instancePath`` pointing
at the offending node, a human-readable ``message`` and a keyword-specific
``params`` mapping. A finding is the reshaped, user-facing result.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator


class RawValidationError(BaseModel):
    """A single diagnostic produced by a schema validator."""

    keyword: str
    instancePath: str = ""
    message: Any = None
    params: dict[str, Any] = Field(default_factory=dict)
    schemaPath: str = ""

    @field_validator("params", mode="before")
    @classmethod
    def _coerce_params(cls, value: Any) -> dict[str, Any]:
        if isinstance(value, Mapping):
            return dict(value)
        return {}

    @field_validator("instancePath", "schemaPath", mode="before")
    @classmethod
    def _coerce_pointer(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("keyword", mode="before")
    @classmethod
    def _coerce_keyword(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @classmethod
    def from_any(cls, obj: RawValidationError | Mapping[str, Any]) -> RawValidationError:
        """Build a raw error from a model instance or a loose mapping."""
        if isinstance(obj, RawValidationError):
            return obj
        data = dict(obj)
        data.setdefault("keyword", "")
        return cls.model_validate(data)


class Finding(BaseModel):
    """A user-facing diagnostic: a message and a path into the document."""

    message: str
    path: list[str] = Field(default_factory=list)

    def to_serializable(self) -> dict[str, Any]:
        """Convert to a plain dict for JSON output."""
        return self.model_dump(mode="json")
