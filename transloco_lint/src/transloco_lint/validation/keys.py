"""
Translation-key validation against a file's naming context.

Keys are `<prefix>.<leaf>` for components and `<kind>s.<name>.<leaf>` for
services, pipes and directives: the top-level namespace equals the file
identity, so keys stay predictable and greppable per file.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from ..types import FileContext
from ..types import MessageId


@dataclass(frozen=True)
class KeyProblem:
    message_id: MessageId
    data: dict[str, Any] = field(default_factory=dict)


def is_ignored(value: str, ignored_prefixes: Iterable[str]) -> bool:
    return any(value.startswith(prefix) for prefix in ignored_prefixes)


def _length_problem(
    message_id: MessageId, key: str, context: FileContext
) -> KeyProblem:
    bound = "minParts" if message_id is MessageId.NOT_ENOUGH_PARTS else "maxParts"
    return KeyProblem(
        message_id,
        {
            "key": key,
            bound: context.max_parts,
            "type": context.kind.value,
            "example": context.example,
        },
    )


def check_key(
    key: str,
    context: FileContext,
    ignored_prefixes: Iterable[str] = (),
) -> KeyProblem | None:
    """
    Validate one candidate key. Returns the first problem found, if any.

    Order: ignored prefix (accept), empty segment, prefix mismatch, length.
    """
    if is_ignored(key, ignored_prefixes):
        return None

    parts = key.split(".")
    if any(not part for part in parts):
        return _length_problem(MessageId.NOT_ENOUGH_PARTS, key, context)

    prefix = context.prefix
    if not (key == prefix or key.startswith(prefix + ".")):
        return KeyProblem(
            MessageId.MISMATCHED_KEY, {"key": key, "expectedPrefix": prefix}
        )

    if len(parts) < context.max_parts:
        return _length_problem(MessageId.NOT_ENOUGH_PARTS, key, context)
    if len(parts) > context.max_parts:
        return _length_problem(MessageId.TOO_MANY_PARTS, key, context)
    return None
