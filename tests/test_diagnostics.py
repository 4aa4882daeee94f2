"""Tests for vdsparser.diagnostics module."""

import pytest

from vdsparser.diagnostics import check_syntax, validate_syntax
from vdsparser.errors import GrammarError


class TestCheckSyntax:
    def test_clean(self):
        assert check_syntax("auto | <length [0,∞]>{1,4}") == []

    def test_unclosed_group(self):
        assert check_syntax("[a | b") == ["unclosed '['"]

    def test_unexpected_close(self):
        assert check_syntax("a]") == ["unexpected ']'"]

    def test_unterminated_quote(self):
        assert check_syntax('"abc') == ["unterminated quote"]

    def test_unknown_type(self):
        assert check_syntax("<nope> | a") == ["unknown data type <nope>"]

    def test_custom_registry(self):
        assert check_syntax("<nope>", {"<nope>": "a"}) == []
        assert check_syntax("<color>", {}) == ["unknown data type <color>"]

    def test_primitive_without_registry(self):
        assert check_syntax("<length>", {}) == []

    def test_reversed_multiplier(self):
        assert check_syntax("a{3,1}") == ["invalid multiplier {3,1}"]

    def test_open_multiplier(self):
        assert check_syntax("a{2,}") == ["invalid multiplier {2,}"]

    def test_empty_range(self):
        assert check_syntax("<length [5,1]>") == ["empty range [5,1] on <length>"]

    def test_bad_range_bound(self):
        problems = check_syntax("<length [x,1]>")
        assert len(problems) == 1
        assert "invalid range bound" in problems[0]

    def test_dangling(self):
        assert check_syntax("a ||") == ["dangling combinator"]
        assert check_syntax("| a") == ["dangling combinator"]

    def test_operand_missing_in_group(self):
        assert check_syntax("[|a]") == ["combinator without operand inside group"]

    def test_empty_group(self):
        assert check_syntax("a []") == ["empty group []"]


class TestValidateSyntax:
    def test_returns_syntax(self):
        assert validate_syntax("a | b") == "a | b"

    def test_raises_with_all_problems(self):
        with pytest.raises(GrammarError, match=r"unclosed '\['.*unknown data type <nope>"):
            validate_syntax("[<nope>")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_syntax("a{3,1}")
