"""Domain errors: custom exceptions for Cite Formatter.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.

Missing metadata fields are never an error: renderers substitute fallback
text instead. Only structurally invalid input reaches these classes.
"""


class CiteFormatterError(Exception):
    """Base exception for all Cite Formatter errors."""


class MetadataValidationError(CiteFormatterError, ValueError):
    """Raised when a metadata record is structurally invalid (e.g. non-string fields)."""

    def __init__(self, message: str, errors: list[tuple[str, str]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConfigurationError(CiteFormatterError):
    """Raised when a settings or metadata file cannot be read."""


class ClipboardError(CiteFormatterError):
    """Raised when clipboard operations fail."""
