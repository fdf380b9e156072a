"""
Rule registry and shareable presets.
"""

from __future__ import annotations

from typing import Any

from .rules.base import Rule
from .rules.hardcoded_strings import HardcodedStringsRule
from .rules.naming_convention import NamingConventionRule

RULES: dict[str, type[Rule]] = {
    NamingConventionRule.name: NamingConventionRule,
    HardcodedStringsRule.name: HardcodedStringsRule,
}

# Preset name -> rule name -> severity ("off", "warn", "error").
CONFIGS: dict[str, dict[str, str]] = {
    "recommended": {
        NamingConventionRule.name: "error",
    },
    "strict": {
        NamingConventionRule.name: "error",
        HardcodedStringsRule.name: "error",
    },
}


def get_rule(name: str) -> Rule:
    try:
        return RULES[name]()
    except KeyError:
        raise ValueError(f"Unknown rule {name!r}") from None


def rules_for_config(
    preset: str, options: dict[str, Any] | None = None
) -> dict[str, Any]:
    """
    Expand a preset into the `{rule name: options}` mapping `FileAnalysis`
    accepts, dropping rules the preset turns off.
    """
    if preset not in CONFIGS:
        raise ValueError(f"Unknown config {preset!r}")
    options = options or {}
    return {
        name: options.get(name)
        for name, severity in CONFIGS[preset].items()
        if severity != "off"
    }
