"""Token and TokenType definitions for the cifras scanner.

The scanner produces an ordered list of Token objects for a downstream
parser. Each Token has a type, the lexeme it was scanned from, and a
source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw offsets and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cifras.location import SourceLocation


class TokenType(Enum):
    """Token kinds produced by the character classifier and scanner.

    WHITESPACE, UNRECOGNIZED and EOF are classification results; only
    EOF is ever emitted as a token, and only when ScanConfig.emit_eof
    is set.

    """

    # Literals
    INTEGER = auto()  # 0-9, maximal run

    # Operators
    ADD = auto()  # +
    SUBTRACT = auto()  # -
    MULTIPLY = auto()  # *
    DIVIDE = auto()  # /

    # Classification only
    WHITESPACE = auto()  # " "
    UNRECOGNIZED = auto()  # e.g. "~"

    # End of input
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        value: The lexeme, i.e. the exact substring of the source
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _source_file: Optional source file name

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy location cache uses an idempotent write.

    """

    type: TokenType
    value: str
    _start_offset: int
    _end_offset: int
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from cifras.location import SourceLocation

        loc = SourceLocation(
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def offset(self) -> int:
        """Start offset (convenience accessor)."""
        return self._start_offset

    @property
    def end_offset(self) -> int:
        """End offset, exclusive (convenience accessor)."""
        return self._end_offset

    @property
    def int_value(self) -> int | None:
        """Numeric value of an INTEGER token, parsed from the lexeme.

        Returns:
            The full integer for INTEGER tokens, None for every other type.
        """
        if self.type is not TokenType.INTEGER:
            return None
        return int(self.value)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._start_offset})"
