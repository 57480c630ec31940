"""Citation-key generator.

A key format is a small template such as ``auth.lower + shorttitle(3,3) + year``.
The template is scanned once against an ordered table of token rules; each
token is resolved against the metadata record and literal text between
tokens is copied through. Resolved values are never re-scanned, so a title
word that happens to spell ``year`` stays a title word.

After substitution every ``+`` (with any surrounding whitespace) becomes
``_``, underscore runs collapse and the key is trimmed. An empty key falls
back to ``citation``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any, NamedTuple, Optional, Union

from cite_formatter.domain.models.metadata import MetadataRecord
from cite_formatter.domain.rules.constants import (
    DEFAULT_KEY_FORMAT,
    KEY_FALLBACK,
    KEY_UNKNOWN_AUTHOR,
    KEY_UNTITLED,
    TITLE_FUNCTION_WORDS,
)
from cite_formatter.domain.services.authors import first_author_last_name

_NON_LOWER_RE = re.compile(r"[^a-z]")
_SEPARATOR_RE = re.compile(r"\s*\++\s*")
_UNDERSCORES_RE = re.compile(r"_+")


class KeyContext(NamedTuple):
    """Record values the tokens resolve against, defaults already applied."""

    last_name: str
    title: str
    year: str


class KeyRule(NamedTuple):
    name: str
    pattern: str
    resolve: Callable[[KeyContext, "re.Match[str]"], str]


# ---------------------------------------------------------------------------
# Token transforms
# ---------------------------------------------------------------------------


def _letters(text: str) -> str:
    return _NON_LOWER_RE.sub("", text.lower())


def short_title(title: str, words: int, chars: int) -> str:
    """First ``words`` title words, each cut to ``chars`` letters, ``_``-joined.

    Function words (articles, conjunctions, short prepositions) are skipped
    unless the title has nothing else. Words left empty after stripping
    non-letters are dropped, and the joined result stays within
    ``words * chars`` characters.
    """
    all_words = title.split()
    content = [w for w in all_words if _letters(w) not in TITLE_FUNCTION_WORDS] or all_words
    budget = words * chars
    picked: list[str] = []
    for word in content:
        if len(picked) >= words:
            break
        piece = _letters(word)[:chars]
        if not piece:
            continue
        if len("_".join([*picked, piece])) > budget:
            break
        picked.append(piece)
    return "_".join(picked)


def _first_title_word(title: str) -> str:
    words = title.split()
    return _letters(words[0]) if words else ""


def _short_title_token(ctx: KeyContext, match: "re.Match[str]") -> str:
    return short_title(ctx.title, int(match.group("words")), int(match.group("chars")))


# Longer tokens come first so ``shortyear`` is never read as ``short`` + ``year``.
KEY_RULES: tuple[KeyRule, ...] = (
    KeyRule("shorttitle", r"shorttitle\((?P<words>\d+),\s*(?P<chars>\d+)\)", _short_title_token),
    KeyRule("auth_lower", r"auth\.lower", lambda ctx, _: ctx.last_name.lower()),
    KeyRule("auth_upper", r"auth\.upper", lambda ctx, _: ctx.last_name.upper()),
    KeyRule("auth_cap", r"Auth", lambda ctx, _: ctx.last_name[:1].upper() + ctx.last_name[1:].lower()),
    KeyRule("shortyear", r"shortyear", lambda ctx, _: ctx.year[-2:]),
    KeyRule("year", r"year", lambda ctx, _: ctx.year),
    KeyRule("title_lower", r"title\.lower", lambda ctx, _: _first_title_word(ctx.title)),
)

_TOKEN_RE = re.compile("|".join(f"(?P<{rule.name}>{rule.pattern})" for rule in KEY_RULES))
_RULES_BY_NAME = {rule.name: rule for rule in KEY_RULES}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_context(metadata: MetadataRecord, today: Optional[date] = None) -> KeyContext:
    """Apply the documented defaults: ``unknown`` author, ``untitled``, current year."""
    year = metadata.year or str((today or date.today()).year)
    return KeyContext(
        last_name=first_author_last_name(metadata.author or KEY_UNKNOWN_AUTHOR),
        title=metadata.title or KEY_UNTITLED,
        year=year,
    )


def render_key_template(key_format: str, ctx: KeyContext) -> str:
    """Substitute tokens in one pass and normalize the separators."""

    def _substitute(match: "re.Match[str]") -> str:
        return _RULES_BY_NAME[match.lastgroup].resolve(ctx, match)

    key = _TOKEN_RE.sub(_substitute, key_format)
    key = _SEPARATOR_RE.sub("_", key)
    key = _UNDERSCORES_RE.sub("_", key)
    return key.strip("_") or KEY_FALLBACK


def generate_key(
    metadata: Union[MetadataRecord, Mapping[str, Any]],
    key_format: Optional[str] = None,
    today: Optional[date] = None,
) -> str:
    """Generate a citation key such as ``smith_mac_lea_2024``.

    Args:
        metadata: The record (or a mapping of record fields).
        key_format: Template to use; defaults to the record's ``key_format``.
        today: Reference date for the current-year fallback.

    Raises:
        MetadataValidationError: Only if ``metadata`` is structurally invalid.
    """
    record = MetadataRecord.from_data(metadata)
    template = key_format if key_format is not None else (record.key_format or DEFAULT_KEY_FORMAT)
    return render_key_template(template, build_context(record, today))
