"""
Location Index - Map character offsets in source text to line/column pairs.

Usage:
    index = LocationIndex("<html>\\n<body>")
    index.location_of(8)   # SourceLocation(line=2, column=2)
"""

from bisect import bisect_right
from typing import Optional, Tuple

from ..contracts.problems import SourceLocation


class LocationIndex:
    """
    Immutable table of line-start offsets for one source text.

    Built once per document; rebuild it whenever the text changes.
    """

    def __init__(self, text: str):
        """
        Record the offset of every line start.

        Args:
            text: Raw source text
        """
        starts = [0]
        position = text.find("\n")
        while position != -1:
            starts.append(position + 1)
            position = text.find("\n", position + 1)
        self._line_starts: Tuple[int, ...] = tuple(starts)
        self._length = len(text)

    @property
    def line_starts(self) -> Tuple[int, ...]:
        """Offsets at which each line begins (index 0 is line 1)."""
        return self._line_starts

    def offset_of(self, line: int, column: int) -> Optional[int]:
        """
        Convert a 1-based line and 0-based column back into an offset.

        Returns:
            Offset into the text, or None if the line does not exist
        """
        if line < 1 or line > len(self._line_starts):
            return None
        return self._line_starts[line - 1] + column

    def location_of(self, offset: int) -> Optional[SourceLocation]:
        """
        Find the line and column of a character offset.

        Args:
            offset: Zero-based offset into the text

        Returns:
            1-based SourceLocation, or None if the offset is out of range
        """
        if offset < 0 or offset > self._length:
            return None
        line_index = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line_index]
        return SourceLocation(line=line_index + 1, column=offset - line_start + 1)

    def __repr__(self) -> str:
        return f"LocationIndex({len(self._line_starts)} lines)"
