"""
Text canonicalization helpers.

Produces the lower-cased scan text used for keyword matching and the
normalized comparison key used for titles, so that user-typed titles and
catalog titles can be compared for equality.
"""
import re
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9 ]")
_WHITESPACE = re.compile(r"\s+")
_TYPE_WORDS = re.compile(r"movies?|shows?|series?")
_TRAILING_TYPE_WORDS = re.compile(r"(?:\s*\b(?:movies?|shows?|series|films?)\b)+[^a-z0-9]*$")


def to_scan_text(text: Optional[str]) -> str:
    """Lower-case a raw message for keyword scanning."""
    if not text:
        return ""
    return text.lower()


def normalize_title(title: Optional[str]) -> str:
    """
    Build the comparison key for a title.

    Lower-cases, drops everything outside ``[a-z0-9 ]``, collapses
    whitespace and trims. Empty input yields an empty key.
    """
    if not title:
        return ""
    key = _NON_ALNUM.sub("", title.lower())
    return _WHITESPACE.sub(" ", key).strip()


def strip_type_words(text: str) -> str:
    """Remove every movie/show/series mention, leaving the free-text residue."""
    return _TYPE_WORDS.sub("", text).strip()


def strip_trailing_type_words(phrase: str) -> str:
    """Remove trailing movie(s)/show(s)/series/film(s) from a captured title phrase."""
    return _TRAILING_TYPE_WORDS.sub("", phrase).strip()
