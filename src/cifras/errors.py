"""Exception classes for cifras.

Provides standardized exceptions for error handling throughout cifras.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cifras.tokens import Token


class CifrasError(Exception):
    """Base exception for all cifras errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(CifrasError):
    """Error during scanning.

    Raised when the scanner encounters input it cannot tokenize.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            offset: Offset in source where error occurred (0-indexed)
            source_file: Source file name (optional)
        """
        self.message = message
        self.offset = offset
        self.source_file = source_file

        # Build formatted message; columns are reported 1-indexed
        location = ""
        if source_file:
            location = f"{source_file}:"
        if offset is not None:
            location += f"{offset + 1}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnrecognizedCharacterError(ScanError):
    """A character outside the expression alphabet was encountered.

    Attributes:
        char: The offending character
        offset: Its offset in the source (0-indexed)
        tokens: Tokens scanned before the failure, in source order
    """

    def __init__(
        self,
        char: str,
        offset: int,
        *,
        tokens: tuple[Token, ...] = (),
        source_file: str | None = None,
    ) -> None:
        self.char = char
        self.tokens = tokens
        super().__init__(
            f"The character {char!r} is not recognized",
            offset=offset,
            source_file=source_file,
        )
