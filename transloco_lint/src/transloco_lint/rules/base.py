"""
Rule and per-file session base classes.

A `Rule` is configuration-free metadata plus a factory; `Rule.create()`
returns a `RuleSession` holding everything one file's analysis needs.
Sessions receive nodes through `dispatch()`, the single place that maps a
`NodeType` to a handler.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import ClassVar

from ..nodes import AssignmentExpression
from ..nodes import BoundAttribute
from ..nodes import BoundText
from ..nodes import CallExpression
from ..nodes import Literal
from ..nodes import Node
from ..nodes import NodeType
from ..nodes import Property
from ..nodes import PropertyDefinition
from ..nodes import TemplateLiteral
from ..nodes import Text
from ..nodes import TextAttribute
from ..nodes import VariableDeclarator
from ..options import RuleOptions
from ..types import FILE_START
from ..types import Diagnostic
from ..types import MessageId
from ..types import render_message


class RuleSession:
    """Per-file state of one rule. Handlers default to no-ops."""

    def __init__(self, rule: Rule, filename: str, diagnostics: list[Diagnostic]):
        self.rule = rule
        self.filename = filename
        self._diagnostics = diagnostics

    def report(
        self,
        message_id: MessageId,
        node: Node | None,
        data: dict[str, Any] | None = None,
    ) -> None:
        data = dict(data or {})
        self._diagnostics.append(
            Diagnostic(
                rule=self.rule.name,
                message_id=message_id,
                node=node,
                data=data,
                message=render_message(self.rule.messages[message_id], data),
                span=node.span if node is not None else FILE_START,
            )
        )

    def dispatch(self, node: Node) -> None:
        match node.type:
            case NodeType.VARIABLE_DECLARATOR:
                self.variable_declarator(node)
            case NodeType.ASSIGNMENT_EXPRESSION:
                self.assignment_expression(node)
            case NodeType.CALL_EXPRESSION:
                self.call_expression(node)
            case NodeType.PROPERTY:
                self.object_property(node)
            case NodeType.PROPERTY_DEFINITION:
                self.property_definition(node)
            case NodeType.LITERAL:
                self.literal(node)
            case NodeType.TEMPLATE_LITERAL:
                self.template_literal(node)
            case NodeType.TEXT:
                self.text(node)
            case NodeType.TEXT_ATTRIBUTE:
                self.text_attribute(node)
            case NodeType.BOUND_ATTRIBUTE:
                self.bound_attribute(node)
            case NodeType.BOUND_TEXT:
                self.bound_text(node)
            case _:
                pass

    # Script surface

    def variable_declarator(self, node: VariableDeclarator) -> None:
        pass

    def assignment_expression(self, node: AssignmentExpression) -> None:
        pass

    def call_expression(self, node: CallExpression) -> None:
        pass

    def object_property(self, node: Property) -> None:
        pass

    def property_definition(self, node: PropertyDefinition) -> None:
        pass

    def literal(self, node: Literal) -> None:
        pass

    def template_literal(self, node: TemplateLiteral) -> None:
        pass

    # Template surface

    def text(self, node: Text) -> None:
        pass

    def text_attribute(self, node: TextAttribute) -> None:
        pass

    def bound_attribute(self, node: BoundAttribute) -> None:
        pass

    def bound_text(self, node: BoundText) -> None:
        pass


class Rule(ABC):
    name: ClassVar[str]
    description: ClassVar[str]
    messages: ClassVar[dict[MessageId, str]]
    options_model: ClassVar[type[RuleOptions]]

    @classmethod
    def parse_options(cls, raw: Any = None) -> RuleOptions:
        return cls.options_model.parse(raw)

    @abstractmethod
    def create(
        self,
        filename: str,
        options: RuleOptions,
        diagnostics: list[Diagnostic],
    ) -> RuleSession | None:
        """Start analyzing `filename`; None when the rule is inert for it."""
