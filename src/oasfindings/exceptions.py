"""Exceptions raised at the I/O edge of oasfindings.

The transformation pipeline itself never raises; these cover loading
documents and schemas and parsing user configuration.
"""


class OasFindingsError(Exception):
    """Base exception for oasfindings errors."""


class DocumentLoadError(OasFindingsError):
    """Raised when an API description document cannot be read or parsed."""


class SchemaLoadError(OasFindingsError):
    """Raised when a JSON Schema file is missing, unparsable or invalid."""


class ConfigurationError(OasFindingsError):
    """Raised for invalid command-line or configuration input."""
