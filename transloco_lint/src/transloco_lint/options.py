"""
Rule option schemas.

Options arrive from the host in its own (camelCase) spelling and are
validated against a fixed schema; unknown keys are rejected.
"""

from __future__ import annotations

from typing import Any
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .overrides import DEFAULT_STRIP_FILE_PREFIXES

T = TypeVar("T", bound="RuleOptions")


class RuleOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    @classmethod
    def parse(cls: type[T], raw: Any = None) -> T:
        """
        Build options from host input.

        Accepts None, a mapping, an instance, or the host's list-of-one
        form (`[{"ignoredPrefixes": [...]}]`).
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, (list, tuple)):
            raw = raw[0] if raw else None
        return cls.model_validate(raw or {})


class NamingConventionOptions(RuleOptions):
    ignored_prefixes: tuple[str, ...] = Field(
        default=(),
        alias="ignoredPrefixes",
        description='Key prefixes to ignore (e.g. ["common.", "shared."])',
    )
    strip_file_prefixes: tuple[str, ...] = Field(
        default=DEFAULT_STRIP_FILE_PREFIXES,
        alias="stripFilePrefixes",
        description="File name prefixes dropped before computing the key prefix",
    )
    page_files: bool = Field(
        default=True,
        alias="pageFiles",
        description="Treat `*.page.ts` / `*.page.html` files as components",
    )


class HardcodedStringsOptions(RuleOptions):
    non_user_facing_pattern: str | None = Field(
        default=None,
        alias="nonUserFacingPattern",
        description="Extra property/binding names that never hold prose",
    )
    ignore_pattern: str | None = Field(
        default=None,
        alias="ignorePattern",
        description="Strings containing any of these alternatives are ignored",
    )
    ignored_prefixes: tuple[str, ...] = Field(
        default=(),
        alias="ignoredPrefixes",
        description="Strings starting with any of these prefixes are ignored",
    )
