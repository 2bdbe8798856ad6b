"""Character classification for the scanner.

classify() is a pure function: it labels a single character and never
raises. All character sets are frozensets for O(1) membership and
module-level caching.

Usage:
    >>> classify("7")
    CharClass(type=<TokenType.INTEGER: 1>, digit=7)
    >>> classify(None).type
    <TokenType.EOF: 8>
"""

from __future__ import annotations

from dataclasses import dataclass

from cifras.tokens import TokenType

# ASCII only; str.isdigit() would also accept other Unicode digit classes
DIGITS: frozenset[str] = frozenset("0123456789")

OPERATORS: dict[str, TokenType] = {
    "+": TokenType.ADD,
    "-": TokenType.SUBTRACT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
}

OPERATOR_TYPES: frozenset[TokenType] = frozenset(OPERATORS.values())

WHITESPACE: frozenset[str] = frozenset(" ")


@dataclass(frozen=True, slots=True)
class CharClass:
    """Classification of one character.

    Attributes:
        type: The token kind the character belongs to
        digit: Value of the digit for INTEGER, None otherwise. Only
            describes this one character, never a whole number.

    """

    type: TokenType
    digit: int | None = None


_DIGIT_CLASSES: dict[str, CharClass] = {
    ch: CharClass(TokenType.INTEGER, int(ch)) for ch in sorted(DIGITS)
}
_OPERATOR_CLASSES: dict[str, CharClass] = {
    ch: CharClass(token_type) for ch, token_type in OPERATORS.items()
}
_WHITESPACE_CLASS = CharClass(TokenType.WHITESPACE)
_EOF_CLASS = CharClass(TokenType.EOF)
_UNRECOGNIZED_CLASS = CharClass(TokenType.UNRECOGNIZED)


def classify(char: str | None) -> CharClass:
    """Classify a character.

    Args:
        char: A single character, or None / "" for end of input.

    Returns:
        The CharClass for the character. Anything outside the expression
        alphabet, including multi-character strings, is UNRECOGNIZED.
    """
    if not char:
        return _EOF_CLASS
    if char in WHITESPACE:
        return _WHITESPACE_CLASS
    cls = _DIGIT_CLASSES.get(char) or _OPERATOR_CLASSES.get(char)
    if cls is not None:
        return cls
    return _UNRECOGNIZED_CLASS


def is_digit(char: str | None) -> bool:
    """Check if char is an ASCII digit."""
    return classify(char).type is TokenType.INTEGER
