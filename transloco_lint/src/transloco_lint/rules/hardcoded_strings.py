"""
no-hardcoded-strings: user-facing text must go through translation.

Checked surfaces:
- HTML templates: text nodes, user-facing static attributes, and property
  bindings to plain string literals.
- TypeScript: string initializers of public, writable class properties.
"""

from __future__ import annotations

import logging

from ..file_context import resolve_file_context
from ..nodes import BoundAttribute
from ..nodes import Identifier
from ..nodes import Literal
from ..nodes import LiteralPrimitive
from ..nodes import Node
from ..nodes import PropertyDefinition
from ..nodes import Text
from ..nodes import TextAttribute
from ..options import HardcodedStringsOptions
from ..overrides import TEST_FILE_SUFFIXES
from ..overrides import TRANSFORM_PIPE
from ..overrides import USER_FACING_ATTRIBUTES
from ..safe_pattern import SafePattern
from ..safe_pattern import UnsafePatternError
from ..template_syntax.interpolation import expressions_in
from ..template_syntax.pipe_syntax import has_transform
from ..types import Diagnostic
from ..types import MessageId
from ..validation.hardcoded import DEFAULT_DENYLIST
from ..validation.hardcoded import exemption_for
from ..validation.hardcoded import has_alphabetic_chars
from ..validation.hardcoded import is_non_user_facing_name
from ..validation.hardcoded import truncate
from .base import Rule
from .base import RuleSession

logger = logging.getLogger(__name__)


def is_test_file(filename: str) -> bool:
    return filename.endswith(TEST_FILE_SUFFIXES)


class HardcodedStringsSession(RuleSession):
    def __init__(
        self,
        rule: Rule,
        filename: str,
        diagnostics: list[Diagnostic],
        options: HardcodedStringsOptions,
    ):
        super().__init__(rule, filename, diagnostics)
        self.is_template = filename.endswith(".html")
        self.is_script = filename.endswith(".ts") and not is_test_file(filename)
        self.ignored_prefixes = options.ignored_prefixes
        self.denylist = DEFAULT_DENYLIST.extend(
            self._compile_option(
                "nonUserFacingPattern", options.non_user_facing_pattern, True
            )
        )
        self.ignore_pattern = self._compile_option(
            "ignorePattern", options.ignore_pattern, False
        )

    def _compile_option(
        self, option: str, text: str | None, ignore_case: bool
    ) -> SafePattern | None:
        if text is None:
            return None
        try:
            return SafePattern.compile(text, ignore_case=ignore_case)
        except UnsafePatternError as e:
            logger.warning("%s: rejected %s (%s)", self.rule.name, option, e)
            self.report(
                MessageId.INVALID_OPTION, None, {"option": option, "reason": str(e)}
            )
            return None

    def check(self, text: str, node: Node) -> None:
        exemption = exemption_for(
            text,
            ignore_pattern=self.ignore_pattern,
            ignored_prefixes=self.ignored_prefixes,
        )
        if exemption is None:
            self.report(MessageId.NO_HARD_STRING, node, {"text": truncate(text)})

    # Template surface

    def text(self, node: Text) -> None:
        if not self.is_template:
            return
        text = node.value.strip()
        if text and has_alphabetic_chars(text):
            self.check(text, node)

    def text_attribute(self, node: TextAttribute) -> None:
        if not self.is_template or node.name not in USER_FACING_ATTRIBUTES:
            return
        if has_alphabetic_chars(node.value):
            self.check(node.value, node)

    def bound_attribute(self, node: BoundAttribute) -> None:
        if not self.is_template or node.value is None:
            return
        if is_non_user_facing_name(node.name, self.denylist):
            return
        source = node.value.source or ""
        if any(has_transform(expr, TRANSFORM_PIPE) for expr in expressions_in(source)):
            return
        ast = node.value.ast
        if isinstance(ast, LiteralPrimitive) and isinstance(ast.value, str):
            if has_alphabetic_chars(ast.value):
                self.check(ast.value, node)

    # Script surface

    def literal(self, node: Literal) -> None:
        if not self.is_script or not node.is_string:
            return
        if not has_alphabetic_chars(node.value):
            return
        parent = node.parent
        if not isinstance(parent, PropertyDefinition) or parent.value is not node:
            return
        if parent.accessibility == "private" or parent.readonly:
            return
        if isinstance(parent.key, Identifier) and is_non_user_facing_name(
            parent.key.name, self.denylist
        ):
            return
        self.check(node.value, node)


class HardcodedStringsRule(Rule):
    name = "no-hardcoded-strings"
    description = "Disallows hard-coded user-facing text."
    messages = {
        MessageId.NO_HARD_STRING: (
            'Hard-coded string "{{ text }}" should be replaced with a translation key.'
        ),
        MessageId.INVALID_OPTION: (
            "Invalid {{ option }}: {{ reason }}. Falling back to the built-in defaults."
        ),
    }
    options_model = HardcodedStringsOptions

    def create(
        self,
        filename: str,
        options: HardcodedStringsOptions,
        diagnostics: list[Diagnostic],
    ) -> HardcodedStringsSession | None:
        if resolve_file_context(filename) is None:
            logger.debug("%s: skipping %s (no naming context)", self.name, filename)
            return None
        return HardcodedStringsSession(self, filename, diagnostics, options)
