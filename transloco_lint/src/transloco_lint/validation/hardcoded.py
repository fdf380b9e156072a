"""
Classification of literal strings as user-facing text or technical noise.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

from ..overrides import HARD_STRING_TEXT_LIMIT
from ..overrides import NON_USER_FACING_NAMES
from ..overrides import RESERVED_WORDS
from ..overrides import TECHNICAL_PREFIXES
from ..safe_pattern import SafePattern
from .keys import is_ignored

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")

# Translation keys are dot or underscore separated lowercase segments.
_TRANSLATION_KEY_RE = re.compile(r"[a-z0-9]+(?:[._][a-z0-9]+)+")

DEFAULT_DENYLIST = SafePattern.of(NON_USER_FACING_NAMES, ignore_case=True)


class Exemption(Enum):
    """Why a string was not reported, in the order the checks run."""

    NOT_LEXICAL = "not-lexical"
    IGNORED_PREFIX = "ignored-prefix"
    IGNORE_PATTERN = "ignore-pattern"
    IDENTIFIER_LIKE = "identifier-like"
    EMAIL = "email"
    RESERVED_WORD = "reserved-word"
    TECHNICAL_PREFIX = "technical-prefix"
    TRANSLATION_KEY = "translation-key"


def has_alphabetic_chars(text: str) -> bool:
    """Letters in any script count (é, ö, च, 书 ...)."""
    return any(ch.isalpha() for ch in text)


def looks_like_translation_key(text: str) -> bool:
    return _TRANSLATION_KEY_RE.fullmatch(text) is not None


def exemption_for(
    text: str,
    *,
    ignore_pattern: SafePattern | None = None,
    ignored_prefixes: Iterable[str] = (),
) -> Exemption | None:
    """
    Return the first exemption that applies to `text`, or None when the
    string reads as user-facing prose and should be reported.
    """
    if not has_alphabetic_chars(text):
        return Exemption.NOT_LEXICAL
    trimmed = text.strip()
    if is_ignored(trimmed, ignored_prefixes):
        return Exemption.IGNORED_PREFIX
    if ignore_pattern is not None and ignore_pattern.matches(text):
        return Exemption.IGNORE_PATTERN
    if "_" in trimmed or "-" in trimmed:
        return Exemption.IDENTIFIER_LIKE
    if _EMAIL_RE.search(trimmed):
        return Exemption.EMAIL
    if trimmed.lower() in RESERVED_WORDS:
        return Exemption.RESERVED_WORD
    if trimmed.lower().startswith(TECHNICAL_PREFIXES):
        return Exemption.TECHNICAL_PREFIX
    if looks_like_translation_key(trimmed):
        return Exemption.TRANSLATION_KEY
    return None


def is_non_user_facing_name(name: str, denylist: SafePattern = DEFAULT_DENYLIST) -> bool:
    return denylist.matches(name)


def truncate(text: str) -> str:
    return text[:HARD_STRING_TEXT_LIMIT]
