"""Source location tracking for error messages and debugging.

Expressions are single-line, so a location is an offset span plus an
optional source file name. Columns are derived (1-indexed).

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Attributes:
        offset: Absolute start offset in source (0-indexed)
        end_offset: Absolute end offset in source (exclusive)
        source_file: Source file name (optional)

    Examples:
            >>> loc = SourceLocation(offset=4, end_offset=5)
            >>> loc.col_offset
            5
            >>> str(SourceLocation(0, 4, "expr.txt"))
            'expr.txt:1'

    """

    offset: int
    end_offset: int
    source_file: str | None = None

    @property
    def col_offset(self) -> int:
        """1-indexed column of the first character."""
        return self.offset + 1

    def __len__(self) -> int:
        return self.end_offset - self.offset

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "expr.txt:5" or "5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.col_offset}"
        return str(self.col_offset)

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end.

        Args:
            end: Ending location

        Returns:
            New SourceLocation with this start and end's end offset
        """
        return SourceLocation(
            offset=self.offset,
            end_offset=end.end_offset,
            source_file=self.source_file,
        )
