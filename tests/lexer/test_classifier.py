"""Tests for the pure character classifier."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cifras.lexer import CharClass, classify
from cifras.lexer.classifier import DIGITS, OPERATOR_TYPES, OPERATORS, is_digit
from cifras.tokens import TokenType


class TestDigits:
    @pytest.mark.parametrize("digit", range(10))
    def test_ascii_digit_carries_its_value(self, digit: int) -> None:
        result = classify(str(digit))

        assert result == CharClass(TokenType.INTEGER, digit)

    @pytest.mark.parametrize("char", ["٣", "３", "²", "Ⅻ"])
    def test_non_ascii_digits_unrecognized(self, char: str) -> None:
        """Unicode digit classes are not part of the alphabet."""
        assert classify(char).type == TokenType.UNRECOGNIZED

    def test_is_digit(self) -> None:
        assert all(is_digit(ch) for ch in DIGITS)
        assert not is_digit("+")
        assert not is_digit(None)


class TestOperatorsAndSpace:
    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("+", TokenType.ADD),
            ("-", TokenType.SUBTRACT),
            ("*", TokenType.MULTIPLY),
            ("/", TokenType.DIVIDE),
        ],
    )
    def test_operators(self, char: str, expected: TokenType) -> None:
        result = classify(char)

        assert result.type == expected
        assert result.digit is None

    def test_operator_table_matches_types(self) -> None:
        assert frozenset(OPERATORS.values()) == OPERATOR_TYPES
        assert len(OPERATOR_TYPES) == 4

    def test_space(self) -> None:
        assert classify(" ").type == TokenType.WHITESPACE

    @pytest.mark.parametrize("char", ["\t", "\n", "\r", "\u00a0"])
    def test_other_whitespace_unrecognized(self, char: str) -> None:
        assert classify(char).type == TokenType.UNRECOGNIZED


class TestEndOfInput:
    def test_none_is_eof(self) -> None:
        assert classify(None).type == TokenType.EOF

    def test_empty_string_is_eof(self) -> None:
        assert classify("").type == TokenType.EOF


class TestUnrecognized:
    @pytest.mark.parametrize("char", ["~", "a", "(", ")", ".", "=", "é", "12", "+-"])
    def test_outside_alphabet(self, char: str) -> None:
        result = classify(char)

        assert result.type == TokenType.UNRECOGNIZED
        assert result.digit is None


class TestPurity:
    @given(st.one_of(st.none(), st.text(max_size=2)))
    def test_classification_is_idempotent(self, char: str | None) -> None:
        """Classifying the same character always yields the same result."""
        assert classify(char) == classify(char)

    @given(st.characters())
    def test_never_raises(self, char: str) -> None:
        assert isinstance(classify(char), CharClass)
