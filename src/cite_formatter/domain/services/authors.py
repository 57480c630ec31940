"""Author-list splitting and per-style name rendering.

Authors arrive as one string, separated by ``;`` or a standalone ``and``.
Each entry is either ``"Last, First Middle"`` or ``"First Middle Last"``.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from cite_formatter.domain.rules.constants import (
    APA_LEADING_AUTHORS,
    APA_MAX_LISTED_AUTHORS,
    CHICAGO_MAX_LISTED_AUTHORS,
)

_SPLIT_RE = re.compile(r";|\sand\s")
_NON_ALPHA_RE = re.compile(r"[^a-zA-Z]")


class PersonName(NamedTuple):
    """A parsed personal name. ``given`` is empty for single-word names."""

    last: str
    given: str

    @property
    def initials(self) -> str:
        """Given names as ``F. M.``."""
        return " ".join(f"{part[0].upper()}." for part in self.given.split())


def split_authors(authors: str) -> list[str]:
    """Split an author string on ``;`` or a standalone ``and``."""
    if not authors:
        return []
    entries = (entry.strip() for entry in _SPLIT_RE.split(authors))
    return [entry for entry in entries if entry and entry.lower() != "and"]


def parse_name(author: str) -> PersonName:
    """Parse ``"Last, First"`` or ``"First Last"`` into a :class:`PersonName`."""
    author = author.strip()
    if "," in author:
        last, _, given = author.partition(",")
        return PersonName(last.strip(), " ".join(given.replace(",", " ").split()))
    words = author.split()
    if len(words) >= 2:
        return PersonName(words[-1], " ".join(words[:-1]))
    return PersonName(author, "")


def first_author_last_name(authors: str) -> str:
    """Last name of the first author, letters only (used for citation keys)."""
    first = authors.split(";")[0].strip()
    if "," in first:
        last = first.split(",")[0].strip()
    else:
        words = first.split()
        last = words[-1] if words else first
    return _NON_ALPHA_RE.sub("", last)


# ---------------------------------------------------------------------------
# Single names
# ---------------------------------------------------------------------------


def format_author_apa(author: str) -> str:
    """``Last, F. M.``"""
    name = parse_name(author)
    if not name.given:
        return name.last
    return f"{name.last}, {name.initials}"


def format_author_mla(author: str, invert_order: bool = False) -> str:
    """``Last, First`` or, with ``invert_order``, ``First Last``."""
    name = parse_name(author)
    if not name.given:
        return name.last
    if invert_order:
        return f"{name.given} {name.last}"
    return f"{name.last}, {name.given}"


def format_author_ieee(author: str) -> str:
    """``F. M. Last``"""
    name = parse_name(author)
    if not name.given:
        return name.last
    return f"{name.initials} {name.last}"


# ---------------------------------------------------------------------------
# Author lists
# ---------------------------------------------------------------------------


def format_authors_bibtex(authors: str) -> str:
    return " and ".join(split_authors(authors))


def format_authors_apa(authors: str) -> str:
    """Format an author list according to APA 7 rules.

    One author stands alone, two are joined by ``&``, up to twenty are
    comma-separated with ``, &`` before the last, and longer lists keep
    the first nineteen, an ellipsis, and the final author.
    """
    names = [format_author_apa(a) for a in split_authors(authors)]
    count = len(names)
    if count == 0:
        return ""
    if count == 1:
        return names[0]
    if count == 2:
        return f"{names[0]} & {names[1]}"
    if count <= APA_MAX_LISTED_AUTHORS:
        return ", ".join(names[:-1]) + f", & {names[-1]}"
    return ", ".join(names[:APA_LEADING_AUTHORS]) + f", ... {names[-1]}"


def format_authors_mla(authors: str) -> str:
    """MLA 9: ``A``, ``A, and B``, or ``A, et al.`` for three or more."""
    entries = split_authors(authors)
    if not entries:
        return ""
    if len(entries) == 1:
        return format_author_mla(entries[0])
    if len(entries) == 2:
        return f"{format_author_mla(entries[0])}, and {format_author_mla(entries[1], True)}"
    return f"{format_author_mla(entries[0])}, et al."


def format_authors_chicago(authors: str) -> str:
    """Chicago: first author inverted, up to three listed, ``et al.`` beyond."""
    entries = split_authors(authors)
    if not entries:
        return ""
    if len(entries) == 1:
        return format_author_mla(entries[0])
    if len(entries) <= CHICAGO_MAX_LISTED_AUTHORS:
        head = [format_author_mla(entries[0])]
        head += [format_author_mla(a, True) for a in entries[1:-1]]
        return ", ".join(head) + f", and {format_author_mla(entries[-1], True)}"
    return f"{format_author_mla(entries[0])} et al."


def format_authors_harvard(authors: str) -> str:
    return ", ".join(format_author_apa(a) for a in split_authors(authors))


def format_authors_ieee(authors: str) -> str:
    return ", ".join(format_author_ieee(a) for a in split_authors(authors))
