"""
Per-file analysis orchestration.

The host creates one `FileAnalysis` per file, feeds it every node in
document order, then calls `finish()`. All state (naming context, tracked
variables, diagnostics) lives on that object and is dropped afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any

from .nodes import Node
from .nodes import iter_nodes
from .registry import RULES
from .registry import get_rule
from .rules.base import RuleSession
from .types import Diagnostic

logger = logging.getLogger(__name__)


class FileAnalysis:
    """
    Analysis context for a single file.

    `rules` maps rule names to their raw options (None for defaults). When
    omitted, every registered rule runs with default options.
    """

    def __init__(self, filename: str, rules: Mapping[str, Any] | None = None):
        self.filename = filename
        self.diagnostics: list[Diagnostic] = []
        self.sessions: list[RuleSession] = []
        self._finished = False

        if rules is None:
            rules = dict.fromkeys(RULES)
        for name, raw_options in rules.items():
            rule = get_rule(name)
            options = rule.parse_options(raw_options)
            session = rule.create(filename, options, self.diagnostics)
            if session is not None:
                self.sessions.append(session)
        logger.debug(
            "Analyzing %s with %d active rule(s)", filename, len(self.sessions)
        )

    @property
    def inert(self) -> bool:
        """True when no rule applies to this file."""
        return not self.sessions

    def visit(self, node: Node) -> None:
        if self._finished:
            raise RuntimeError(f"Analysis of {self.filename} already finished")
        for session in self.sessions:
            session.dispatch(node)

    def finish(self) -> list[Diagnostic]:
        """Release per-file state and return the accumulated diagnostics."""
        self._finished = True
        self.sessions = []
        logger.debug("%s: %d diagnostic(s)", self.filename, len(self.diagnostics))
        return self.diagnostics


def lint_nodes(
    filename: str,
    nodes: Iterable[Node],
    rules: Mapping[str, Any] | None = None,
) -> list[Diagnostic]:
    """Run the rules over nodes already in document order."""
    analysis = FileAnalysis(filename, rules)
    if not analysis.inert:
        for node in nodes:
            analysis.visit(node)
    return analysis.finish()


def lint_tree(
    filename: str,
    root: Node,
    rules: Mapping[str, Any] | None = None,
) -> list[Diagnostic]:
    """Walk `root` in document order and run the rules over every node."""
    return lint_nodes(filename, iter_nodes(root), rules)
