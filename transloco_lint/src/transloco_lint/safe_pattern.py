"""
Validated name patterns from user configuration.

Options such as `nonUserFacingPattern` are written like regex alternations,
e.g. `(technical|internal|config)`. They are never compiled: after checking
the text against an allow-listed alphabet and a list of known
catastrophic-backtracking shapes, the pattern is split into its literal
alternatives and matched by substring comparison.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterable
from dataclasses import dataclass

MAX_PATTERN_LENGTH = 500

_ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + "_-|(),")

# Shapes that would match everything or nest groups. With quantifiers outside
# the alphabet these are the only ways left to write an unsafe alternation.
_UNSAFE_SHAPES: tuple[str, ...] = ("()", "||", "(|", "|)", "((", "))")

_SEPARATORS_RE = re.compile(r"[|(),]")


class UnsafePatternError(ValueError):
    """Raised when a configured pattern fails validation."""


def validate_pattern(text: str) -> None:
    if not text:
        raise UnsafePatternError("pattern is empty")
    if len(text) > MAX_PATTERN_LENGTH:
        raise UnsafePatternError(
            f"pattern is longer than {MAX_PATTERN_LENGTH} characters"
        )
    bad = sorted({ch for ch in text if ch not in _ALLOWED_CHARS})
    if bad:
        raise UnsafePatternError(
            f"pattern contains disallowed characters: {''.join(bad)!r}"
        )
    for shape in _UNSAFE_SHAPES:
        if shape in text:
            raise UnsafePatternError(f"pattern contains unsafe shape {shape!r}")
    if text.startswith("|") or text.endswith("|"):
        raise UnsafePatternError("pattern has an empty alternative")

    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                break
    if depth != 0:
        raise UnsafePatternError("pattern has unbalanced parentheses")


@dataclass(frozen=True)
class SafePattern:
    """A set of literal alternatives matched as substrings."""

    alternatives: tuple[str, ...]
    ignore_case: bool = False

    @classmethod
    def compile(cls, text: str, *, ignore_case: bool = False) -> SafePattern:
        validate_pattern(text)
        alternatives = tuple(a for a in _SEPARATORS_RE.split(text) if a)
        if not alternatives:
            raise UnsafePatternError("pattern has no alternatives")
        return cls(alternatives, ignore_case)

    @classmethod
    def of(cls, words: Iterable[str], *, ignore_case: bool = False) -> SafePattern:
        return cls(tuple(words), ignore_case)

    def extend(self, other: SafePattern | None) -> SafePattern:
        if other is None:
            return self
        return SafePattern(self.alternatives + other.alternatives, self.ignore_case)

    def matches(self, text: str) -> bool:
        if self.ignore_case:
            folded = text.casefold()
            return any(a.casefold() in folded for a in self.alternatives)
        return any(a in text for a in self.alternatives)
