"""The interface a schema validator must offer to the pipeline."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from oasfindings.models.findings import RawValidationError


@runtime_checkable
class Validator(Protocol):
    """Validates a whole document and reports its raw errors.

    Returning ``None`` or an empty iterable means the document is valid.
    Entries may be ``RawValidationError`` instances or plain mappings with
    the same keys.
    """

    def __call__(
        self, document: Any
    ) -> Iterable[RawValidationError | Mapping[str, Any]] | None: ...
