"""Multi-character token scanner mixins."""

from __future__ import annotations

from cifras.lexer.classifier import is_digit


class NumberScannerMixin:
    """Mixin providing maximal-munch scanning of integer literals."""

    # These will be set by the Scanner class
    _source: str
    _source_len: int

    def _char_at(self, position: int) -> str | None:
        """Character at position, or None past the end. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_number(self, start: int) -> int:
        """Find the end of the digit run starting at start.

        Classifies one character at a time and stops at the first
        non-digit or at end of input.

        Args:
            start: Position of the first digit

        Returns:
            Position just past the last digit of the run.
        """
        end = start
        while is_digit(self._char_at(end)):
            end += 1
        return end
