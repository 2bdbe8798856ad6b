"""Scanner for arithmetic expressions.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScannerState, classify
├── core.py              # Scanner class (dispatch loop + cursor)
├── classifier.py        # classify(), CharClass, character sets
├── scanners.py          # NumberScannerMixin (maximal munch)
└── states.py            # ScannerState enum

Usage:
    >>> from cifras.lexer import Scanner
    >>> scanner = Scanner("12 * 3")
    >>> [t.value for t in scanner.tokenize()]
    ['12', '*', '3']
    >>> scanner.kinds
    [<TokenType.INTEGER: 1>, <TokenType.MULTIPLY: 4>, <TokenType.INTEGER: 1>]

"""

from cifras.lexer.classifier import CharClass, classify
from cifras.lexer.core import Scanner
from cifras.lexer.states import ScannerState

__all__ = ["CharClass", "Scanner", "ScannerState", "classify"]
