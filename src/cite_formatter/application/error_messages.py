"""User-friendly error messages for Pydantic validation errors.

Belongs to the Application layer: translates Pydantic machine errors into
messages the CLI can show next to the offending field.
"""

from __future__ import annotations

from typing import Any

# Field-specific messages win over the generic per-type ones
_FIELD_ERRORS: dict[tuple[str, str], str] = {
    ("includeAccessDate", "bool_type"): "includeAccessDate must be true or false.",
    ("include_access_date", "bool_type"): "include_access_date must be true or false.",
    ("key_format", "string_too_short"): "The key format cannot be empty.",
    ("citation_style", "enum"): "Unknown citation style. Use bibtex, apa, mla, chicago, harvard or ieee.",
    ("source_type", "enum"): "Unknown source type. Use webpage, article, journal, book or news.",
    ("output_format", "enum"): "Unknown output format. Use plain, markdown or html.",
}

_TYPE_ERRORS: dict[str, str] = {
    "string_type": "Field '{field}' must be text.",
    "bool_type": "Field '{field}' must be true or false.",
    "dict_type": "The metadata record must be a JSON object.",
    "model_type": "The metadata record must be a JSON object.",
}


def friendly_error(
    field: str,
    error_type: str,
    fallback: str | None = None,
) -> str:
    """Return a user-friendly error message.

    Args:
        field: The Pydantic field name (or alias) that failed validation.
        error_type: The Pydantic error type string (e.g., ``string_type``).
        fallback: Fallback message if no mapping exists.
    """
    message = _FIELD_ERRORS.get((field, error_type))
    if message:
        return message
    template = _TYPE_ERRORS.get(error_type)
    if template:
        return template.format(field=field)
    return fallback or f"Validation error on field '{field}'."


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.
    """
    result: list[str] = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", []))
        msg = friendly_error(field, err.get("type", ""), fallback=err.get("msg"))
        result.append(msg)
    return result


def describe_field_errors(errors: list[tuple[str, str]]) -> list[str]:
    """Messages for the ``(field, error_type)`` pairs a MetadataValidationError carries."""
    return [friendly_error(field, error_type) for field, error_type in errors]
