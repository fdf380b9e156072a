from __future__ import annotations

import pytest

from transloco_lint.extraction.template import keys_in_expression
from transloco_lint.extraction.template import keys_in_source
from transloco_lint.extraction.template import keys_in_template
from transloco_lint.extraction.template import structural_keys

TEMPLATE_CASES = [
    ('<h1>{{ "home.title" | transloco }}</h1>', ["home.title"], "double quotes"),
    ("<h1>{{ 'home.title' | transloco }}</h1>", ["home.title"], "single quotes"),
    ("<h1>{{'home.title'|transloco}}</h1>", ["home.title"], "no spacing"),
    (
        "<h1>{{ 'home.count' | transloco: { count: n } }}</h1>",
        ["home.count"],
        "transloco params",
    ),
    (
        '<h1>{{ (true ? "a.one" : "a.two") | transloco }}</h1>',
        ["a.one", "a.two"],
        "ternary operand",
    ),
    ("<h1>{{ 'plain' | transloco }}</h1>", [], "undotted key"),
    ("<h1>{{ 'home.title' }}</h1>", [], "no transform pipe"),
    ("<h1>{{ 'home.title' | uppercase }}</h1>", [], "other pipe"),
    (
        "<p>{{ amount | number:'1.0-0' }}</p>",
        [],
        "format specifier without transform",
    ),
    (
        "<p>{{ amount | number:'1.0-0' | transloco }}</p>",
        [],
        "format specifier before transform",
    ),
    (
        "<h1>{{ 'has space.key' | transloco }}</h1>",
        [],
        "whitespace disqualifies",
    ),
    (
        "<ng-container *transloco=\"let t; read: 'common.buttons'\"></ng-container>",
        ["common.buttons"],
        "structural read scope",
    ),
    (
        "<h1>{{ 'a.b' | transloco }}</h1><p>{{ 'c.d' | transloco }}</p>",
        ["a.b", "c.d"],
        "multiple interpolations",
    ),
    ("<h1>{{ '1abc.key' | transloco }}</h1>", ["1abc.key"], "digit start kept"),
]


@pytest.mark.parametrize("template,expected,description", TEMPLATE_CASES)
def test_keys_in_template(template: str, expected: list[str], description: str):
    assert keys_in_template(template) == expected, description


def test_keys_in_expression_only_scans_operand():
    assert keys_in_expression("'a.b' | transloco:'x.y'") == ["a.b"]


def test_keys_in_source_handles_both_binding_shapes():
    assert keys_in_source("{{ 'a.b' | transloco }}") == ["a.b"]
    assert keys_in_source("'a.b' | transloco") == ["a.b"]


def test_structural_keys_require_a_dot():
    assert structural_keys("let t; read: 'common'") == []
    assert structural_keys("let t; read:'common.save'") == ["common.save"]
