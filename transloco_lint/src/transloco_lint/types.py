"""
Shared types for extraction and validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from .nodes import Node


class FileKind(Enum):
    """Classification of a source file by its Angular artifact suffix."""

    COMPONENT = "component"
    SERVICE = "service"
    PIPE = "pipe"
    DIRECTIVE = "directive"

    @property
    def namespace(self) -> str:
        """Pluralized namespace segment used by non-component keys."""
        return f"{self.value}s"


@dataclass(frozen=True, slots=True)
class FileContext:
    """
    Naming context derived from a file path.

    `prefix` is the namespace every translation key in the file must start
    with, e.g. `googleSignIn` or `services.employeeStatus`.
    """

    prefix: str
    kind: FileKind

    @property
    def max_parts(self) -> int:
        return 2 if self.kind is FileKind.COMPONENT else 3

    @property
    def example(self) -> str:
        return example_key(self.kind)


def example_key(kind: FileKind) -> str:
    if kind is FileKind.COMPONENT:
        return "signIn.warningAccountLockSoon"
    return "services.warningAccountLockSoon.example"


class MessageId(Enum):
    """Diagnostic kinds produced by the rules."""

    MISMATCHED_KEY = "mismatchedKey"
    TOO_MANY_PARTS = "tooManyParts"
    NOT_ENOUGH_PARTS = "notEnoughParts"
    NO_HARD_STRING = "noHardString"
    INVALID_OPTION = "invalidOption"


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """1-based line, 0-based column (host convention)."""

    line: int = 1
    column: int = 0


FILE_START = SourceSpan(line=1, column=0)


@dataclass
class Diagnostic:
    """A single report produced while analyzing a file."""

    rule: str
    message_id: MessageId
    node: Node | None
    data: dict[str, Any] = field(default_factory=dict)
    message: str = ""
    span: SourceSpan = FILE_START

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    def __str__(self) -> str:
        return f"{self.line}:{self.column} {self.rule} ({self.message_id.value}): {self.message}"


def render_message(template: str, data: dict[str, Any]) -> str:
    """
    Interpolate `{{ name }}` placeholders the way the host's message
    templates are written. Unknown placeholders are left untouched.
    """
    out = template
    for name, value in data.items():
        out = out.replace(f"{{{{ {name} }}}}", str(value))
        out = out.replace(f"{{{{{name}}}}}", str(value))
    return out
