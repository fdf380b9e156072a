"""
Literal values reachable through local identifiers.

`const key = cond ? 'a.b' : 'a.c'; this.t.translate(key);` should validate
both `a.b` and `a.c` at the call site. Assignments only ever append: any
earlier value may still reach the call depending on control flow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..nodes import ConditionalExpression
from ..nodes import Literal
from ..nodes import Node
from ..nodes import TemplateLiteral

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StringCandidate:
    """A string value and the node it should be reported on."""

    value: str
    node: Node


def literals_in_expression(expr: Node | None) -> list[StringCandidate]:
    """
    Collect string literals from an expression.

    - string `Literal`: itself
    - `ConditionalExpression`: both branches, recursively
    - `TemplateLiteral`: each non-empty static chunk (interpolations skipped)
    """
    found: list[StringCandidate] = []

    def dive(node: Node | None) -> None:
        if node is None:
            return
        if isinstance(node, Literal):
            if node.is_string:
                found.append(StringCandidate(node.value, node))
        elif isinstance(node, ConditionalExpression):
            dive(node.consequent)
            dive(node.alternate)
        elif isinstance(node, TemplateLiteral):
            for quasi in node.quasis:
                if quasi.raw:
                    found.append(StringCandidate(quasi.raw, quasi))

    dive(expr)
    return found


class VariableTracker:
    """Identifier -> every literal assigned to it so far in this file."""

    def __init__(self) -> None:
        self._bindings: dict[str, list[StringCandidate]] = {}

    def track(self, name: str, expr: Node | None) -> None:
        literals = literals_in_expression(expr)
        if not literals:
            return
        self._bindings.setdefault(name, []).extend(literals)
        logger.debug("Tracked %d literal(s) for %r", len(literals), name)

    def resolve(self, name: str) -> list[StringCandidate]:
        return list(self._bindings.get(name, ()))

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)
