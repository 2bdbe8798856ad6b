"""Single-pass scanner for arithmetic expressions.

Scans non-negative integers, the operators + - * / and spaces into an
ordered token list. One forward pass, no backtracking, O(n) in the
length of the source.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from cifras.config import get_scan_config
from cifras.errors import UnrecognizedCharacterError
from cifras.lexer.classifier import OPERATOR_TYPES, classify
from cifras.lexer.scanners import NumberScannerMixin
from cifras.lexer.states import ScannerState
from cifras.profiling import get_scan_accumulator
from cifras.tokens import Token, TokenType
from cifras.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(NumberScannerMixin):
    """Single-pass scanner with maximal munch for integers.

    Usage:
            >>> scanner = Scanner("1500+89 / 6")
            >>> scanner.tokenize()
        [Token(INTEGER, '1500', 0), Token(ADD, '+', 4), Token(INTEGER, '89', 5), ...]
            >>> scanner.lexemes
        ['1500', '+', '89', '/', '6']

    Calling tokenize() again on a finished scanner does not rescan: after a
    successful scan it returns a new list with the same tokens, after a
    failed scan it raises the same UnrecognizedCharacterError again.

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_source_file",
        "_pos",
        "_state",
        "_tokens",
        "_error",
        "_emit_eof",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: Expression source text
            source_file: Optional source file name for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._state = ScannerState.SCANNING
        self._tokens: list[Token] = []
        self._error: UnrecognizedCharacterError | None = None
        self._emit_eof = get_scan_config().emit_eof

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Current cursor position."""
        return self._pos

    @property
    def state(self) -> ScannerState:
        return self._state

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Tokens produced so far."""
        return tuple(self._tokens)

    @property
    def lexemes(self) -> list[str]:
        """Lexeme of each token, in source order."""
        return [token.value for token in self._tokens]

    @property
    def kinds(self) -> list[TokenType]:
        """Type of each token, parallel to lexemes."""
        return [token.type for token in self._tokens]

    def tokenize(self) -> list[Token]:
        """Scan the whole source.

        Returns:
            Tokens in source order.

        Raises:
            UnrecognizedCharacterError: On the first character outside the
                expression alphabet. Tokens scanned before it are available
                on the error's ``tokens`` attribute.
        """
        if self._state is ScannerState.FAILED:
            assert self._error is not None
            raise self._error
        if self._state is ScannerState.DONE:
            return list(self._tokens)

        acc = get_scan_accumulator()
        try:
            while self._pos < self._source_len:
                self._step()
        except UnrecognizedCharacterError as e:
            self._state = ScannerState.FAILED
            self._error = e
            logger.debug("Scan failed on %r at offset %d", e.char, e.offset)
            if acc is not None:
                acc.record_failure()
            raise

        if self._emit_eof:
            self._produce_token(TokenType.EOF, self._pos, self._pos)

        self._state = ScannerState.DONE
        logger.debug(
            "Scanned %d tokens from %d characters", len(self._tokens), self._source_len
        )
        if acc is not None:
            acc.record_scan(source_length=self._source_len, token_count=len(self._tokens))
        return list(self._tokens)

    def _step(self) -> None:
        """Classify the character at the cursor and consume it.

        Always advances the cursor or raises.
        """
        start = self._pos
        char = self._char_at(start)
        token_type = classify(char).type

        if token_type in OPERATOR_TYPES:
            self._produce_token(token_type, start, start + 1)
        elif token_type is TokenType.INTEGER:
            self._produce_token(token_type, start, self._scan_number(start))
        elif token_type is TokenType.WHITESPACE:
            self._pos += 1
        elif token_type is TokenType.UNRECOGNIZED:
            assert char is not None
            raise UnrecognizedCharacterError(
                char,
                start,
                tokens=tuple(self._tokens),
                source_file=self._source_file,
            )
        # EOF is unreachable here: tokenize() only steps while _pos < _source_len

    def _char_at(self, position: int) -> str | None:
        """Character at position, or None past the end of the source."""
        if position >= self._source_len:
            return None
        return self._source[position]

    def _produce_token(self, token_type: TokenType, start: int, end: int) -> None:
        """Append a token spanning [start, end) and move the cursor to end."""
        self._tokens.append(
            Token(
                type=token_type,
                value=self._source[start:end],
                _start_offset=start,
                _end_offset=end,
                _source_file=self._source_file,
            )
        )
        self._pos = end
