from __future__ import annotations

import logging

import pytest

from transloco_lint import CONFIGS
from transloco_lint import RULES
from transloco_lint.engine import FileAnalysis
from transloco_lint.engine import lint_nodes
from transloco_lint.engine import lint_tree
from transloco_lint.logging import LogConfig
from transloco_lint.logging import configure_logging
from transloco_lint.nodes import Element
from transloco_lint.nodes import NodeType
from transloco_lint.nodes import Text
from transloco_lint.nodes import TextAttribute
from transloco_lint.nodes import iter_nodes
from transloco_lint.registry import get_rule
from transloco_lint.registry import rules_for_config
from transloco_lint.types import MessageId
from transloco_lint.types import render_message

from _builders import GOOGLE_SIGN_IN_FILE
from _builders import const
from _builders import field
from _builders import ident
from _builders import klass
from _builders import lit
from _builders import program
from _builders import translate


def mixed_program():
    return program(
        klass(field("title", lit("my app"))),
        translate(lit("wrong.key")),
    )


class TestFileAnalysis:
    def test_default_runs_every_rule(self):
        diagnostics = lint_tree(GOOGLE_SIGN_IN_FILE, mixed_program())
        assert sorted(d.rule for d in diagnostics) == [
            "i18n-key-naming-convention",
            "no-hardcoded-strings",
        ]

    def test_selected_rules_only(self):
        diagnostics = lint_tree(
            GOOGLE_SIGN_IN_FILE, mixed_program(), {"no-hardcoded-strings": None}
        )
        assert [d.message_id for d in diagnostics] == [MessageId.NO_HARD_STRING]

    def test_unknown_rule(self):
        with pytest.raises(ValueError, match="Unknown rule"):
            FileAnalysis(GOOGLE_SIGN_IN_FILE, {"no-such-rule": None})

    def test_inert_for_unrecognized_files(self):
        analysis = FileAnalysis("src/app/utils.ts")
        assert analysis.inert
        assert lint_tree("src/app/utils.ts", mixed_program()) == []

    def test_visit_after_finish(self):
        analysis = FileAnalysis(GOOGLE_SIGN_IN_FILE)
        analysis.finish()
        with pytest.raises(RuntimeError):
            analysis.visit(lit("x"))

    def test_incremental_visits(self):
        analysis = FileAnalysis(GOOGLE_SIGN_IN_FILE, {"i18n-key-naming-convention": None})
        for node in iter_nodes(program(const("key", lit("bad.key")))):
            analysis.visit(node)
        for node in iter_nodes(translate(ident("key"))):
            analysis.visit(node)
        diagnostics = analysis.finish()
        assert [d.data["key"] for d in diagnostics] == ["bad.key"]
        assert analysis.sessions == []

    def test_lint_nodes_uses_given_order(self):
        declaration = const("key", lit("bad.key"))
        call = translate(ident("key"))
        nodes = [*iter_nodes(call), *iter_nodes(declaration)]
        assert lint_nodes(GOOGLE_SIGN_IN_FILE, nodes) == []

    def test_diagnostic_str(self):
        [diagnostic] = lint_tree(
            GOOGLE_SIGN_IN_FILE,
            program(translate(lit("wrong.key"))),
            {"i18n-key-naming-convention": None},
        )
        assert str(diagnostic).startswith("1:0 i18n-key-naming-convention (mismatchedKey): ")


class TestRegistry:
    def test_rules(self):
        assert set(RULES) == {"i18n-key-naming-convention", "no-hardcoded-strings"}
        assert get_rule("no-hardcoded-strings").name == "no-hardcoded-strings"

    def test_presets(self):
        assert CONFIGS["recommended"] == {"i18n-key-naming-convention": "error"}
        assert set(CONFIGS["strict"]) == set(RULES)

    def test_rules_for_config(self):
        options = {"i18n-key-naming-convention": [{"ignoredPrefixes": ["common."]}]}
        assert rules_for_config("recommended", options) == options
        assert rules_for_config("strict") == dict.fromkeys(RULES)

    def test_unknown_config(self):
        with pytest.raises(ValueError, match="Unknown config"):
            rules_for_config("lenient")

    def test_every_rule_has_messages_for_its_reports(self):
        naming = RULES["i18n-key-naming-convention"]
        assert set(naming.messages) == {
            MessageId.MISMATCHED_KEY,
            MessageId.TOO_MANY_PARTS,
            MessageId.NOT_ENOUGH_PARTS,
        }
        hardcoded = RULES["no-hardcoded-strings"]
        assert set(hardcoded.messages) == {
            MessageId.NO_HARD_STRING,
            MessageId.INVALID_OPTION,
        }


class TestNodes:
    def test_iter_nodes_document_order_and_parents(self):
        root = program(const("a", lit("x")), const("b", lit("y")))
        nodes = list(iter_nodes(root))
        assert [n.type for n in nodes] == [
            NodeType.PROGRAM,
            NodeType.VARIABLE_DECLARATOR,
            NodeType.IDENTIFIER,
            NodeType.LITERAL,
            NodeType.VARIABLE_DECLARATOR,
            NodeType.IDENTIFIER,
            NodeType.LITERAL,
        ]
        assert nodes[3].parent is nodes[1]
        assert nodes[1].parent is root

    def test_iter_nodes_walks_element_children(self):
        inner = Text("Welcome back")
        root = Element(
            "div",
            attributes=[TextAttribute("title", "Greeting")],
            children=[Element("p", children=[inner])],
        )
        nodes = list(iter_nodes(root))
        assert [n.type for n in nodes] == [
            NodeType.ELEMENT,
            NodeType.TEXT_ATTRIBUTE,
            NodeType.ELEMENT,
            NodeType.TEXT,
        ]
        assert inner.parent is root.children[0]

    def test_lint_tree_over_a_template(self):
        root = Element("div", children=[Text("Welcome back")])
        diagnostics = lint_tree(
            "src/app/a.component.html", root, {"no-hardcoded-strings": None}
        )
        assert [d.data for d in diagnostics] == [{"text": "Welcome back"}]


def test_render_message():
    assert render_message("Key '{{ key }}' / {{key}}", {"key": "a.b"}) == (
        "Key 'a.b' / a.b"
    )
    assert render_message("{{ missing }}", {}) == "{{ missing }}"


def test_configure_logging(tmp_path):
    log_file = tmp_path / "lint.log"
    logger = configure_logging(LogConfig(log_file=log_file, log_level=logging.DEBUG))
    try:
        assert logger.name == "transloco_lint"
        assert len(logger.handlers) == 2
        FileAnalysis(GOOGLE_SIGN_IN_FILE)
        for handler in logger.handlers:
            handler.flush()
        assert "active rule(s)" in log_file.read_text()
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
