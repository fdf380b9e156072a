"""
Pipe-chain parsing for Angular template expressions.

This module is intentionally small and deterministic: it only understands
quotes, the `|` pipe delimiter (not the `||` operator) and `:` pipe
arguments, which is all key extraction needs.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

_PIPE_NAME_RE = re.compile(r"[A-Za-z_$][\w$]*")
_QUOTES = ("'", '"', "`")


@dataclass(frozen=True)
class PipeCall:
    name: str
    args: str | None = None


@dataclass(frozen=True)
class PipeChain:
    """`operand | pipe:arg | other` split into its operand and pipes."""

    operand: str
    pipes: tuple[PipeCall, ...] = ()

    def uses(self, pipe_name: str) -> bool:
        return any(p.name == pipe_name for p in self.pipes)


def _unquoted_indices(s: str) -> Iterator[int]:
    """Yield the index of every character outside a quoted string."""
    quote = ""
    for i, ch in enumerate(s):
        if quote:
            if ch == quote:
                quote = ""
        elif ch in _QUOTES:
            quote = ch
        else:
            yield i


def _split_pipes(s: str) -> list[str]:
    parts: list[str] = []
    start = 0
    skip = -1
    for i in _unquoted_indices(s):
        if s[i] != "|" or i == skip:
            continue
        if s[i + 1 : i + 2] == "|":
            # logical OR
            skip = i + 1
            continue
        parts.append(s[start:i])
        start = i + 1
    parts.append(s[start:])
    return parts


def _split_first_unquoted(s: str, sep: str) -> tuple[str, str | None]:
    for i in _unquoted_indices(s):
        if s[i] == sep:
            return s[:i], s[i + 1 :]
    return s, None


def parse_pipe_chain(expr: str) -> PipeChain:
    parts = _split_pipes(expr)
    pipes: list[PipeCall] = []
    for part in parts[1:]:
        part = part.strip()
        if not part:
            continue
        head, args = _split_first_unquoted(part, ":")
        match = _PIPE_NAME_RE.match(head.strip())
        if match:
            pipes.append(
                PipeCall(name=match.group(0), args=args.strip() if args else None)
            )
    return PipeChain(operand=parts[0].strip(), pipes=tuple(pipes))


def has_transform(source: str, pipe_name: str) -> bool:
    """
    True when `source` pipes something through `pipe_name`.

    Accepts both `x | transloco` and `x|transloco` spacing.
    """
    return parse_pipe_chain(source).uses(pipe_name)
