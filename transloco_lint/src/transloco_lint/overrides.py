"""
Centralized vocabulary the rules match against.

Goal:
- Keep hard-coded names (pipes, methods, attributes, denylists) out of the
  extraction and validation logic.
- Make it obvious where to extend behavior when integrating this library into
  a project with different conventions.
"""

from __future__ import annotations

# Template pipe that turns a key into displayed text.
TRANSFORM_PIPE = "transloco"

# Structural directive attribute names carrying `read: 'scope'`.
STRUCTURAL_DIRECTIVES = frozenset({"transloco", "*transloco"})

# Member calls whose first argument is a translation key,
# e.g. `this.translocoService.translate(key)` / `.instant(key)`.
TRANSLATE_METHODS = frozenset({"translate", "instant"})

# Leading file-name fragments dropped before computing a component prefix.
DEFAULT_STRIP_FILE_PREFIXES: tuple[str, ...] = ("feature-", "ui-")

# Template attributes whose static value is shown to users.
USER_FACING_ATTRIBUTES = frozenset(
    {"placeholder", "title", "alt", "aria-label", "aria-description"}
)

# Exact (case-insensitive) words treated as file types rather than prose.
RESERVED_WORDS = frozenset({"xlsx", "xlx", "csv", "pdf", "png"})

# Property/binding name fragments that never hold user-facing prose.
# Matched as case-insensitive substrings of the name.
NON_USER_FACING_NAMES: tuple[str, ...] = (
    "class",
    "style",
    "type",
    "form",
    "loading",
    "template",
    "icon",
    "size",
    "src",
    "href",
    "router",
    "query",
    "fragment",
    "preserve",
    "skip",
    "replace",
    "state",
    "button",
    "default",
    "validate",
    "element",
    "prefix",
    "direction",
    "styleClasses",
    "tooltipShowEvent",
    "keys",
    "option",
    "position",
    "append",
    "source",
    "test",
    "field",
    "autocomplete",
    "Id",
    "image",
    "url",
    "height",
    "width",
    "target",
    "pSortableColumn",
    "name",
    "alignment",
    "mode",
    "accept",
    "responsiveLayout",
)

# Prefixes marking routes, anchors, URLs, status codes and DOM attribute names.
TECHNICAL_PREFIXES: tuple[str, ...] = (
    "/",
    "#",
    "http://",
    "https://",
    "access_denied",
    "error_",
    "success_",
    "warning_",
    "info_",
    "debug_",
    "data-",
    "aria-",
)

# Files whose script literals are never user-facing.
TEST_FILE_SUFFIXES: tuple[str, ...] = (".spec.ts", ".test.ts", ".spec.js", ".test.js")

HARD_STRING_TEXT_LIMIT = 50
