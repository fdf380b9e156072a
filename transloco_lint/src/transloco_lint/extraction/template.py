"""
Translation-key candidates in template source text.

Only the operand of a pipe chain that reaches the transform pipe is scanned:
`{{ 'page.title' | transloco }}` yields `page.title`, while the arguments of
any pipe (`number:'1.0-0'`, `transloco: { n: 1 }`) are never candidates.
"""

from __future__ import annotations

import re

from ..overrides import TRANSFORM_PIPE
from ..template_syntax.interpolation import expressions_in
from ..template_syntax.interpolation import iter_interpolations
from ..template_syntax.pipe_syntax import parse_pipe_chain

# Quoted, dotted, no whitespace or quotes inside. Also matches malformed keys
# (e.g. leading digits); validation reports those.
_KEY_RE = re.compile(r"""['"]([^\s'".]+[\w.-]*\.[^\s'".]+)['"]""")

# `*transloco="let t; read: 'scope.name'"`
_READ_RE = re.compile(r"""\bread\s*:\s*['"]([^\s'".]+[\w.-]*\.[^\s'".]+)['"]""")


def keys_in_expression(expr: str, pipe: str = TRANSFORM_PIPE) -> list[str]:
    chain = parse_pipe_chain(expr)
    if not chain.uses(pipe):
        return []
    return _KEY_RE.findall(chain.operand)


def keys_in_source(source: str, pipe: str = TRANSFORM_PIPE) -> list[str]:
    """Candidates in a bound value or text node (with or without `{{ }}`)."""
    keys: list[str] = []
    for expr in expressions_in(source):
        keys.extend(keys_in_expression(expr, pipe))
    return keys


def structural_keys(value: str) -> list[str]:
    return _READ_RE.findall(value)


def keys_in_template(template: str, pipe: str = TRANSFORM_PIPE) -> list[str]:
    """Candidates in a whole template: interpolations, then `read:` scopes."""
    keys: list[str] = []
    for interpolation in iter_interpolations(template):
        keys.extend(keys_in_expression(interpolation.contents, pipe))
    keys.extend(structural_keys(template))
    return keys
