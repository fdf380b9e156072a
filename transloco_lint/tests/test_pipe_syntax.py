"""Unit tests for pipe-chain parsing and interpolation scanning."""

from __future__ import annotations

from transloco_lint.template_syntax.interpolation import expressions_in
from transloco_lint.template_syntax.interpolation import iter_interpolations
from transloco_lint.template_syntax.pipe_syntax import PipeCall
from transloco_lint.template_syntax.pipe_syntax import _split_first_unquoted
from transloco_lint.template_syntax.pipe_syntax import _split_pipes
from transloco_lint.template_syntax.pipe_syntax import _unquoted_indices
from transloco_lint.template_syntax.pipe_syntax import has_transform
from transloco_lint.template_syntax.pipe_syntax import parse_pipe_chain


class TestUnquotedIndices:
    def test_skips_quoted_characters(self):
        assert list(_unquoted_indices("a'b'c")) == [0, 4]

    def test_other_quote_kinds_do_not_close(self):
        assert list(_unquoted_indices("`a'b`c")) == [5]

    def test_unterminated_quote_runs_to_the_end(self):
        assert list(_unquoted_indices("x'yz")) == [0]


class TestSplitPipes:
    """Tests for _split_pipes - splits on `|` outside quotes, keeps `||`."""

    def test_simple_split(self):
        assert _split_pipes("a | b | c") == ["a ", " b ", " c"]

    def test_no_separator(self):
        assert _split_pipes("abc") == ["abc"]

    def test_preserves_quoted_separator(self):
        assert _split_pipes("'a|b' | c") == ["'a|b' ", " c"]

    def test_logical_or_is_not_a_pipe(self):
        assert _split_pipes("a || b | c") == ["a || b ", " c"]

    def test_backtick_quotes(self):
        assert _split_pipes("`a|b` | c") == ["`a|b` ", " c"]

    def test_pipe_after_logical_or(self):
        assert _split_pipes("a ||| b") == ["a ||", " b"]


class TestSplitFirstUnquoted:
    def test_simple_split(self):
        assert _split_first_unquoted("number:'1.0-0'", ":") == ("number", "'1.0-0'")

    def test_no_separator(self):
        assert _split_first_unquoted("transloco", ":") == ("transloco", None)

    def test_preserves_quoted_separator(self):
        assert _split_first_unquoted("'a:b':c", ":") == ("'a:b'", "c")

    def test_backtick_quotes(self):
        assert _split_first_unquoted("`a:b`:c", ":") == ("`a:b`", "c")


class TestParsePipeChain:
    def test_operand_and_pipes(self):
        chain = parse_pipe_chain("'home.title' | transloco")
        assert chain.operand == "'home.title'"
        assert chain.pipes == (PipeCall("transloco"),)

    def test_pipe_arguments(self):
        chain = parse_pipe_chain("amount | number:'1.0-0' | transloco: { n: 1 }")
        assert chain.operand == "amount"
        assert [p.name for p in chain.pipes] == ["number", "transloco"]
        assert chain.pipes[0].args == "'1.0-0'"
        assert chain.pipes[1].args == "{ n: 1 }"

    def test_no_pipes(self):
        chain = parse_pipe_chain("a || b")
        assert chain.operand == "a || b"
        assert chain.pipes == ()

    def test_pipe_name_inside_parentheses(self):
        chain = parse_pipe_chain("('a.b' | transloco) + '!'")
        assert chain.uses("transloco")


class TestHasTransform:
    def test_spacing_variants(self):
        assert has_transform("'a.b' | transloco", "transloco")
        assert has_transform("'a.b'|transloco", "transloco")

    def test_other_pipes(self):
        assert not has_transform("value | date", "transloco")

    def test_quoted_pipe_text_is_not_a_transform(self):
        assert not has_transform("'x | transloco'", "transloco")


class TestInterpolations:
    def test_iter_interpolations_reports_lines(self):
        found = iter_interpolations("<h1>{{ a }}</h1>\n<p>{{ b | c }}</p>")
        assert [(i.contents, i.line) for i in found] == [("a", 1), ("b | c", 2)]

    def test_expressions_in_bound_text(self):
        assert expressions_in("Hi {{ name }}, {{ 'x.y' | transloco }}") == [
            "name",
            "'x.y' | transloco",
        ]

    def test_expressions_in_property_binding(self):
        assert expressions_in("  'x.y' | transloco ") == ["'x.y' | transloco"]
        assert expressions_in("   ") == []
