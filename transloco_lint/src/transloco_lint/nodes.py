"""
Syntax nodes handed to the engine by the host.

The host parses TypeScript (ESTree shape) and Angular templates (template AST
shape) and passes the resulting nodes in traversal order. Only the node kinds
the rules care about are modelled; everything the rules never inspect can be
left out of a tree entirely.

Every node class declares `_fields`, the attributes holding child nodes, so
`iter_nodes()` can walk a tree in document order without knowing its shape.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import ClassVar

from .types import FILE_START
from .types import SourceSpan


class NodeType(Enum):
    # Script surface
    PROGRAM = "Program"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    TEMPLATE_ELEMENT = "TemplateElement"
    TEMPLATE_LITERAL = "TemplateLiteral"
    MEMBER_EXPRESSION = "MemberExpression"
    CALL_EXPRESSION = "CallExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    PROPERTY = "Property"
    DECORATOR = "Decorator"
    CLASS_DECLARATION = "ClassDeclaration"
    PROPERTY_DEFINITION = "PropertyDefinition"
    # Template surface
    ELEMENT = "Element"
    TEXT = "Text"
    TEXT_ATTRIBUTE = "TextAttribute"
    BOUND_EXPRESSION = "BoundExpression"
    LITERAL_PRIMITIVE = "LiteralPrimitive"
    BOUND_ATTRIBUTE = "BoundAttribute"
    BOUND_TEXT = "BoundText"


@dataclass(kw_only=True)
class Node:
    type: ClassVar[NodeType]
    _fields: ClassVar[tuple[str, ...]] = ()

    span: SourceSpan = FILE_START
    parent: Node | None = field(default=None, repr=False, compare=False)

    def child_nodes(self) -> Iterator[Node]:
        for name in self._fields:
            value = getattr(self, name)
            if isinstance(value, Node):
                yield value
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, Node):
                        yield item


# ---------------------------------------------------------------------------
# Script surface
# ---------------------------------------------------------------------------


@dataclass
class Program(Node):
    type = NodeType.PROGRAM
    _fields = ("body",)

    body: list[Node] = field(default_factory=list)


@dataclass
class ExpressionStatement(Node):
    type = NodeType.EXPRESSION_STATEMENT
    _fields = ("expression",)

    expression: Node


@dataclass
class Identifier(Node):
    type = NodeType.IDENTIFIER

    name: str


@dataclass
class Literal(Node):
    type = NodeType.LITERAL

    value: Any

    @property
    def is_string(self) -> bool:
        return isinstance(self.value, str)


@dataclass
class TemplateElement(Node):
    """A static chunk (`quasi`) of a template literal."""

    type = NodeType.TEMPLATE_ELEMENT

    raw: str


@dataclass
class TemplateLiteral(Node):
    type = NodeType.TEMPLATE_LITERAL
    _fields = ("quasis", "expressions")

    quasis: list[TemplateElement] = field(default_factory=list)
    expressions: list[Node] = field(default_factory=list)

    @property
    def static_text(self) -> str:
        return "".join(q.raw for q in self.quasis)


@dataclass
class MemberExpression(Node):
    type = NodeType.MEMBER_EXPRESSION
    _fields = ("object", "property")

    object: Node
    property: Node


@dataclass
class CallExpression(Node):
    type = NodeType.CALL_EXPRESSION
    _fields = ("callee", "arguments")

    callee: Node
    arguments: list[Node] = field(default_factory=list)


@dataclass
class ConditionalExpression(Node):
    type = NodeType.CONDITIONAL_EXPRESSION
    _fields = ("test", "consequent", "alternate")

    test: Node
    consequent: Node
    alternate: Node


@dataclass
class VariableDeclarator(Node):
    type = NodeType.VARIABLE_DECLARATOR
    _fields = ("id", "init")

    id: Node
    init: Node | None = None


@dataclass
class AssignmentExpression(Node):
    type = NodeType.ASSIGNMENT_EXPRESSION
    _fields = ("left", "right")

    left: Node
    right: Node
    operator: str = "="


@dataclass
class Property(Node):
    """A key/value pair of an object literal (e.g. `@Component({...})`)."""

    type = NodeType.PROPERTY
    _fields = ("key", "value")

    key: Node
    value: Node


@dataclass
class ObjectExpression(Node):
    type = NodeType.OBJECT_EXPRESSION
    _fields = ("properties",)

    properties: list[Property] = field(default_factory=list)


@dataclass
class Decorator(Node):
    type = NodeType.DECORATOR
    _fields = ("expression",)

    expression: Node


@dataclass
class PropertyDefinition(Node):
    """A class-level field, optionally initialized."""

    type = NodeType.PROPERTY_DEFINITION
    _fields = ("key", "value")

    key: Node
    value: Node | None = None
    accessibility: str | None = None  # "private", "protected", "public"
    readonly: bool = False


@dataclass
class ClassDeclaration(Node):
    type = NodeType.CLASS_DECLARATION
    _fields = ("decorators", "body")

    name: str
    body: list[Node] = field(default_factory=list)
    decorators: list[Decorator] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Template surface
# ---------------------------------------------------------------------------


@dataclass
class LiteralPrimitive(Node):
    type = NodeType.LITERAL_PRIMITIVE

    value: Any


@dataclass
class BoundExpression(Node):
    """
    A parsed binding expression plus its original source text.

    `ast` is only populated with the shapes the rules inspect (a
    `LiteralPrimitive` for plain literals); anything else may be `None`.
    """

    type = NodeType.BOUND_EXPRESSION

    source: str
    ast: Node | None = None


@dataclass
class Text(Node):
    type = NodeType.TEXT

    value: str


@dataclass
class TextAttribute(Node):
    type = NodeType.TEXT_ATTRIBUTE

    name: str
    value: str


@dataclass
class BoundAttribute(Node):
    type = NodeType.BOUND_ATTRIBUTE
    _fields = ("value",)

    name: str
    value: BoundExpression | None = None


@dataclass
class BoundText(Node):
    type = NodeType.BOUND_TEXT
    _fields = ("value",)

    value: BoundExpression | None = None


@dataclass
class Element(Node):
    type = NodeType.ELEMENT
    _fields = ("attributes", "inputs", "children")

    name: str
    attributes: list[TextAttribute] = field(default_factory=list)
    inputs: list[BoundAttribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def iter_nodes(root: Node) -> Iterator[Node]:
    """
    Yield `root` and its descendants in document (pre-)order.

    Parent links are assigned on the way down, so handlers that inspect
    `node.parent` work for trees built without them.
    """
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        kids = list(node.child_nodes())
        for child in kids:
            child.parent = node
        stack.extend(reversed(kids))
