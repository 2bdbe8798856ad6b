"""
cifras: scanner for arithmetic expressions

Turns a flat expression of non-negative integers, + - * / and spaces into
an ordered token list for a downstream parser. Single forward pass,
maximal munch for integers, zero runtime dependencies.

Quick Start:
    >>> from cifras import tokenize
    >>> [t.value for t in tokenize("1500+89 / 6 -9*45  ")]
    ['1500', '+', '89', '/', '6', '-', '9', '*', '45']

    >>> # Or drive the scanner directly
    >>> from cifras import Scanner
    >>> scanner = Scanner("42")
    >>> scanner.tokenize()
    [Token(INTEGER, '42', 0)]
    >>> scanner.kinds
    [<TokenType.INTEGER: 1>]

Errors:
    >>> tokenize("3~4")
    Traceback (most recent call last):
    ...
    cifras.errors.UnrecognizedCharacterError: 2 The character '~' is not recognized
"""

from cifras.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from cifras.errors import CifrasError, ScanError, UnrecognizedCharacterError
from cifras.lexer import CharClass, Scanner, ScannerState, classify
from cifras.location import SourceLocation
from cifras.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from cifras.serialization import from_dict, from_json, to_dict, to_json
from cifras.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Scan an expression into tokens.

    Args:
        source: Expression source text
        source_file: Optional source file name for error messages
        config: Scan configuration for this call (uses the active
            context config if None)

    Returns:
        Tokens in source order

    Raises:
        UnrecognizedCharacterError: On the first character outside the
            expression alphabet.

    Example:
        >>> tokenize("1 + 2", config=ScanConfig(emit_eof=True))[-1]
        Token(EOF, '', 5)
    """
    if config is None:
        return Scanner(source, source_file=source_file).tokenize()
    with scan_config_context(config):
        return Scanner(source, source_file=source_file).tokenize()


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    # Scanner components
    "CharClass",
    "Scanner",
    "ScannerState",
    "classify",
    # Tokens
    "Token",
    "TokenType",
    # Location
    "SourceLocation",
    # Errors
    "CifrasError",
    "ScanError",
    "UnrecognizedCharacterError",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "profiled_scan",
    "get_scan_accumulator",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
