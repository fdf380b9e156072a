"""
i18n-key-naming-convention: translation keys must live under the namespace
derived from the file they are used in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..extraction.script import inline_template
from ..extraction.script import keys_from_call
from ..extraction.template import keys_in_source
from ..extraction.template import keys_in_template
from ..extraction.template import structural_keys
from ..extraction.tracking import VariableTracker
from ..file_context import resolve_file_context
from ..nodes import AssignmentExpression
from ..nodes import BoundAttribute
from ..nodes import BoundText
from ..nodes import CallExpression
from ..nodes import Identifier
from ..nodes import Node
from ..nodes import Property
from ..nodes import Text
from ..nodes import TextAttribute
from ..nodes import VariableDeclarator
from ..options import NamingConventionOptions
from ..overrides import STRUCTURAL_DIRECTIVES
from ..overrides import TRANSFORM_PIPE
from ..types import Diagnostic
from ..types import FileContext
from ..types import MessageId
from ..validation.keys import check_key
from .base import Rule
from .base import RuleSession

logger = logging.getLogger(__name__)


class NamingConventionSession(RuleSession):
    def __init__(
        self,
        rule: Rule,
        filename: str,
        diagnostics: list[Diagnostic],
        context: FileContext,
        options: NamingConventionOptions,
    ):
        super().__init__(rule, filename, diagnostics)
        self.context = context
        self.ignored_prefixes = options.ignored_prefixes
        self.tracker = VariableTracker()

    def check(self, key: str, node: Node) -> None:
        problem = check_key(key, self.context, self.ignored_prefixes)
        if problem is not None:
            self.report(problem.message_id, node, problem.data)

    def check_all(self, keys: Iterable[str], node: Node) -> None:
        for key in keys:
            self.check(key, node)

    # Script surface

    def variable_declarator(self, node: VariableDeclarator) -> None:
        if isinstance(node.id, Identifier) and node.init is not None:
            self.tracker.track(node.id.name, node.init)

    def assignment_expression(self, node: AssignmentExpression) -> None:
        if isinstance(node.left, Identifier):
            self.tracker.track(node.left.name, node.right)

    def object_property(self, node: Property) -> None:
        template = inline_template(node)
        if template is not None:
            self.check_all(keys_in_template(template), node.value)

    def call_expression(self, node: CallExpression) -> None:
        for candidate in keys_from_call(node, self.tracker):
            self.check(candidate.value, candidate.node)

    # Template surface

    def text(self, node: Text) -> None:
        if TRANSFORM_PIPE not in node.value:
            return
        self.check_all(keys_in_source(node.value), node)

    def text_attribute(self, node: TextAttribute) -> None:
        if node.name in STRUCTURAL_DIRECTIVES:
            self.check_all(structural_keys(node.value), node)
        elif TRANSFORM_PIPE in node.value:
            self.check_all(keys_in_source(node.value), node)

    def bound_attribute(self, node: BoundAttribute) -> None:
        if node.value is None or TRANSFORM_PIPE not in node.value.source:
            return
        self.check_all(keys_in_source(node.value.source), node)

    def bound_text(self, node: BoundText) -> None:
        if node.value is None or TRANSFORM_PIPE not in node.value.source:
            return
        self.check_all(keys_in_source(node.value.source), node)


class NamingConventionRule(Rule):
    name = "i18n-key-naming-convention"
    description = (
        "Enforce i18n key naming convention based on file type and name "
        "(TypeScript and HTML)"
    )
    messages = {
        MessageId.MISMATCHED_KEY: (
            "Key '{{ key }}' does not follow naming convention. "
            "Expected the i18n key to start with '{{ expectedPrefix }}.'"
        ),
        MessageId.TOO_MANY_PARTS: (
            "Key '{{ key }}' is too long. Max depth for a {{ type }} is "
            "{{ maxParts }}. For example, '{{ example }}'"
        ),
        MessageId.NOT_ENOUGH_PARTS: (
            "Key '{{ key }}' is too short. Min depth for a {{ type }} is "
            "{{ minParts }}. For example, '{{ example }}'"
        ),
    }
    options_model = NamingConventionOptions

    def create(
        self,
        filename: str,
        options: NamingConventionOptions,
        diagnostics: list[Diagnostic],
    ) -> NamingConventionSession | None:
        context = resolve_file_context(
            filename,
            strip_prefixes=options.strip_file_prefixes,
            page_files=options.page_files,
        )
        if context is None:
            logger.debug("%s: skipping %s (no naming context)", self.name, filename)
            return None
        return NamingConventionSession(self, filename, diagnostics, context, options)
