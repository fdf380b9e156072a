"""
Interpolation scanning for template source text.

The host has already parsed the template; these helpers
only look inside the raw text of text nodes, bound values and inline
`template:` strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTERPOLATION_RE = re.compile(r"\{\{(.+?)\}\}", re.DOTALL)


@dataclass(frozen=True, slots=True)
class Interpolation:
    contents: str
    line: int


def iter_interpolations(text: str) -> list[Interpolation]:
    """Return the contents of every `{{ ... }}` in `text` with its line."""
    out: list[Interpolation] = []
    for match in _INTERPOLATION_RE.finditer(text):
        line = text.count("\n", 0, match.start()) + 1
        out.append(Interpolation(contents=match.group(1).strip(), line=line))
    return out


def expressions_in(source: str) -> list[str]:
    """
    Split a binding source into the expressions it holds.

    Bound text carries `{{ }}` delimiters, property bindings do not.
    """
    if "{{" in source:
        return [i.contents for i in iter_interpolations(source)]
    source = source.strip()
    return [source] if source else []
