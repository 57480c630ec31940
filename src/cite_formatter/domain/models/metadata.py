"""Metadata record: the immutable input of both core components.

A record is assembled elsewhere (page scraping, manual edits, third-party
lookups) and handed to the key generator and the style renderers. It is a
frozen Pydantic model in strict mode: missing fields are fine and default
to empty strings, but a field of the wrong type is a structural error and
fails fast with :class:`MetadataValidationError`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from cite_formatter.domain.errors import MetadataValidationError
from cite_formatter.domain.models.enums import SourceBranch, SourceType
from cite_formatter.domain.rules.constants import DEFAULT_KEY_FORMAT, SOURCE_BRANCHES

_YEAR_RE = re.compile(r"(\d{4})")

TEXT_FIELDS: tuple[str, ...] = (
    "title",
    "author",
    "date",
    "year",
    "url",
    "publisher",
    "doi",
    "isbn",
    "journal",
    "volume",
    "issue",
    "pages",
)


class MetadataRecord(BaseModel):
    """Bibliographic metadata describing one cited source."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        extra="ignore",
    )

    title: str = ""
    author: str = Field("", description="Semicolon-separated authors ('Last, First' or 'First Last')")
    date: str = Field("", description="Free-form publication date, ideally ISO-ish")
    year: str = Field("", description="4-digit year; derived from ``date`` when absent")
    url: str = ""
    publisher: str = ""
    doi: str = ""
    isbn: str = ""
    journal: str = ""
    volume: str = ""
    issue: str = ""
    pages: str = ""

    source_type: str = Field("webpage", alias="sourceType")
    include_access_date: bool = Field(False, alias="includeAccessDate")
    key_format: str = Field(DEFAULT_KEY_FORMAT, alias="keyFormat")

    # -- validators ----------------------------------------------------------

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_if_missing(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("source_type", mode="before")
    @classmethod
    def _default_source_type(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return SourceType.WEBPAGE.value
        if isinstance(v, SourceType):
            return v.value
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("include_access_date", mode="before")
    @classmethod
    def _false_if_missing(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("key_format", mode="before")
    @classmethod
    def _default_key_format(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_KEY_FORMAT
        return v

    @model_validator(mode="before")
    @classmethod
    def _derive_year(cls, data: Any) -> Any:
        """Fill ``year`` from the first 4-digit run in ``date``."""
        if not isinstance(data, Mapping):
            return data
        year = data.get("year")
        date_value = data.get("date")
        if (year is None or year == "") and isinstance(date_value, str):
            match = _YEAR_RE.search(date_value)
            if match:
                return {**data, "year": match.group(1)}
        return data

    # -- derived views -------------------------------------------------------

    @property
    def source(self) -> SourceType:
        return SourceType.parse(self.source_type)

    @property
    def branch(self) -> SourceBranch:
        """Rendering branch used by the prose styles."""
        return SOURCE_BRANCHES[self.source]

    @property
    def wants_access_date(self) -> bool:
        """True when an access-date clause applies (opted in and online)."""
        return self.include_access_date and bool(self.url)

    @classmethod
    def from_data(cls, data: Union[MetadataRecord, Mapping[str, Any]]) -> MetadataRecord:
        """Build a record from a mapping, failing fast on structural errors.

        Raises:
            MetadataValidationError: If ``data`` is not a mapping or a field
                has the wrong type.
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise MetadataValidationError(
                f"Metadata record must be a mapping, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            details = [
                f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
                for err in exc.errors()
            ]
            raise MetadataValidationError(
                "Invalid metadata record: " + "; ".join(details),
                errors=[
                    (".".join(str(p) for p in err["loc"]), err["type"]) for err in exc.errors()
                ],
            ) from exc
