"""Tests for the expression tokenizer."""

import pytest

from calculator_errors import InvalidToken
from tokenizer import MAX_LITERAL_DIGITS, Number, OperatorSymbol, Tokenizer, tokenize


def _values(expression, tokenizer=None):
    tokens = (tokenizer or Tokenizer()).tokenize(expression)
    return [t.value if isinstance(t, Number) else t.symbol for t in tokens]


class TestTokenizerBasic:
    """Test splitting expressions into numbers and symbols."""

    def test_numbers_and_operators(self):
        assert _values("12+3*45") == [12, "+", 3, "*", 45]

    def test_whitespace_is_skipped(self):
        assert _values("  7 \t/\n 2 ") == [7, "/", 2]

    def test_maximal_digit_runs(self):
        assert _values("007") == [7]
        assert _values("1 2") == [1, 2]

    def test_every_delimiter_is_a_single_token(self):
        assert _values("()^^") == ["(", ")", "^", "^"]

    def test_positions_are_recorded(self):
        tokens = list(tokenize("10 + 2"))
        assert tokens == [
            Number(10, 0),
            OperatorSymbol("+", 3),
            Number(2, 5),
        ]

    def test_display_glyphs_are_aliases(self):
        assert _values("6÷2×3−1") == [6, "/", 2, "*", 3, "-", 1]

    def test_empty_input_yields_nothing(self):
        assert _values("") == []
        assert _values("   ") == []


class TestTokenizerErrors:
    """Test rejection of text that is neither number nor delimiter."""

    def test_invalid_character(self):
        with pytest.raises(InvalidToken) as info:
            _values("1@2")
        assert info.value.position == 1
        assert info.value.kind == "invalid_token"

    def test_invalid_run_is_reported_whole(self):
        with pytest.raises(InvalidToken, match="abc"):
            _values("1+abc")

    def test_decimal_point_is_invalid(self):
        with pytest.raises(InvalidToken):
            _values("1.5")

    def test_tokenizing_is_lazy(self):
        tokens = tokenize("1+@")
        assert next(tokens) == Number(1, 0)
        assert next(tokens) == OperatorSymbol("+", 1)
        with pytest.raises(InvalidToken):
            next(tokens)


class TestTokenizerDelimiters:
    """Test custom delimiter sets."""

    def test_custom_delimiters(self):
        tokenizer = Tokenizer("+[]")
        assert _values("[1+2]", tokenizer) == ["[", 1, "+", 2, "]"]
        with pytest.raises(InvalidToken):
            _values("1*2", tokenizer)

    @pytest.mark.parametrize("delimiters", ["", "+1", "+ "])
    def test_rejects_bad_delimiter_sets(self, delimiters):
        with pytest.raises(ValueError):
            Tokenizer(delimiters)


class TestTokenizerLimits:
    """Test literal size limits and glyph aliases on custom sets."""

    def test_longest_literal_is_accepted(self):
        assert _values("9" * MAX_LITERAL_DIGITS) == [int("9" * MAX_LITERAL_DIGITS)]

    def test_oversized_literal(self):
        with pytest.raises(InvalidToken) as info:
            _values("1+" + "1" * 5000)
        assert info.value.position == 2

    def test_aliases_follow_the_delimiter_set(self):
        with pytest.raises(InvalidToken, match="×"):
            _values("1×2", Tokenizer("+[]"))

    def test_alias_kept_when_target_is_a_delimiter(self):
        assert _values("1×2", Tokenizer("*")) == [1, "*", 2]
