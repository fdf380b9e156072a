"""
Derive the translation-key namespace of a file from its path.

`feature-google-sign-in.component.ts` -> `googleSignIn` (component)
`employee-status.service.ts`          -> `services.employeeStatus` (service)
"""

from __future__ import annotations

import logging
import posixpath
import re
from collections.abc import Iterable
from functools import lru_cache

from .overrides import DEFAULT_STRIP_FILE_PREFIXES
from .types import FileContext
from .types import FileKind

logger = logging.getLogger(__name__)

_KEBAB_RE = re.compile(r"-([a-z])")

# (suffix, kind, is_page); `.component`/`.page` templates may be HTML too.
_SUFFIXES: tuple[tuple[str, FileKind, bool], ...] = (
    (".component.ts", FileKind.COMPONENT, False),
    (".component.html", FileKind.COMPONENT, False),
    (".page.ts", FileKind.COMPONENT, True),
    (".page.html", FileKind.COMPONENT, True),
    (".service.ts", FileKind.SERVICE, False),
    (".pipe.ts", FileKind.PIPE, False),
    (".directive.ts", FileKind.DIRECTIVE, False),
)


def kebab_to_camel(name: str) -> str:
    return _KEBAB_RE.sub(lambda m: m.group(1).upper(), name)


def strip_file_prefixes(name: str, prefixes: Iterable[str]) -> str:
    """
    Drop leading prefixes in order until none applies.

    `feature-ui-card` with (`feature-`, `ui-`) -> `card`.
    """
    prefixes = [p for p in prefixes if p]
    changed = True
    while changed:
        changed = False
        for prefix in prefixes:
            if name.startswith(prefix) and len(name) > len(prefix):
                name = name[len(prefix) :]
                changed = True
    return name


def resolve_file_context(
    filename: str,
    strip_prefixes: Iterable[str] = DEFAULT_STRIP_FILE_PREFIXES,
    page_files: bool = True,
) -> FileContext | None:
    """
    Resolve the naming context of `filename`, or None for unrecognized files.

    Pure and memoized: the same arguments always produce the same context.
    """
    return _resolve(filename, tuple(strip_prefixes), page_files)


@lru_cache(maxsize=1024)
def _resolve(
    filename: str, strip_prefixes: tuple[str, ...], page_files: bool
) -> FileContext | None:
    base = posixpath.basename(filename.replace("\\", "/"))
    for suffix, kind, is_page in _SUFFIXES:
        if is_page and not page_files:
            continue
        if not base.endswith(suffix) or len(base) == len(suffix):
            continue
        stem = strip_file_prefixes(base[: -len(suffix)], strip_prefixes)
        identifier = kebab_to_camel(stem)
        if kind is FileKind.COMPONENT:
            context = FileContext(prefix=identifier, kind=kind)
        else:
            context = FileContext(prefix=f"{kind.namespace}.{identifier}", kind=kind)
        logger.debug("Resolved %s -> %s", filename, context)
        return context
    logger.debug("No naming context for %s", filename)
    return None
