"""Scanner lifecycle states.

SCANNING is the only non-terminal state. A scan moves to DONE when the
cursor reaches the end of the source, or to FAILED on the first
unrecognized character. No transition leaves DONE or FAILED.
"""

from __future__ import annotations

from enum import Enum, auto


class ScannerState(Enum):
    """Scanner lifecycle states."""

    SCANNING = auto()
    DONE = auto()
    FAILED = auto()
