"""
Transloco Lint - static i18n checks for Angular source trees.

Validates translation keys against the namespace derived from each file's
name, and reports user-facing strings that bypass translation. The host
parses sources; this library receives the parsed nodes.
"""

from __future__ import annotations

from .engine import FileAnalysis
from .engine import lint_nodes
from .engine import lint_tree
from .registry import CONFIGS
from .registry import RULES
from .types import Diagnostic
from .types import MessageId

__all__ = [
    "CONFIGS",
    "RULES",
    "Diagnostic",
    "FileAnalysis",
    "MessageId",
    "lint_nodes",
    "lint_tree",
]
