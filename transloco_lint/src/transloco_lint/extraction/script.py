"""
Translation-key candidates on the script surface.
"""

from __future__ import annotations

from ..nodes import CallExpression
from ..nodes import ConditionalExpression
from ..nodes import Identifier
from ..nodes import Literal
from ..nodes import MemberExpression
from ..nodes import Property
from ..nodes import TemplateLiteral
from ..overrides import TRANSLATE_METHODS
from .tracking import StringCandidate
from .tracking import VariableTracker
from .tracking import literals_in_expression


def is_translate_call(node: CallExpression) -> bool:
    """`<anything>.translate(...)` or `<anything>.instant(...)`."""
    callee = node.callee
    return (
        isinstance(callee, MemberExpression)
        and isinstance(callee.property, Identifier)
        and callee.property.name in TRANSLATE_METHODS
    )


def keys_from_call(
    node: CallExpression, tracker: VariableTracker
) -> list[StringCandidate]:
    """
    Candidate keys passed as the first argument of a translate call.

    Identifiers resolve through the tracker (one candidate per tracked
    literal); conditionals yield every branch literal.
    """
    if not is_translate_call(node) or not node.arguments:
        return []
    arg = node.arguments[0]
    if isinstance(arg, Literal):
        return [StringCandidate(arg.value, arg)] if arg.is_string else []
    if isinstance(arg, Identifier):
        return tracker.resolve(arg.name)
    if isinstance(arg, (ConditionalExpression, TemplateLiteral)):
        return literals_in_expression(arg)
    return []


def inline_template(node: Property) -> str | None:
    """Source of a `template:` property given as a string or template literal."""
    key = node.key
    if not (isinstance(key, Identifier) and key.name == "template"):
        return None
    value = node.value
    if isinstance(value, Literal) and value.is_string:
        return value.value
    if isinstance(value, TemplateLiteral):
        return value.static_text
    return None
