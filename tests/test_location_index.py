"""
Tests for LocationIndex.
"""

from bootlint.analyzers import LocationIndex
from bootlint.contracts import SourceLocation


class TestLocationIndex:
    """Tests for offset to line/column mapping."""

    def setup_method(self):
        """Set up test fixtures."""
        # offsets: a=0 b=1 \n=2 c=3 d=4 \n=5 \n=6 e=7 f=8
        self.index = LocationIndex("ab\ncd\n\nef")

    def test_line_starts(self):
        assert self.index.line_starts == (0, 3, 6, 7)

    def test_first_character(self):
        assert self.index.location_of(0) == SourceLocation(line=1, column=1)

    def test_middle_of_line(self):
        assert self.index.location_of(4) == SourceLocation(line=2, column=2)

    def test_empty_line(self):
        assert self.index.location_of(6) == SourceLocation(line=3, column=1)

    def test_newline_belongs_to_its_line(self):
        assert self.index.location_of(2) == SourceLocation(line=1, column=3)

    def test_end_of_text(self):
        assert self.index.location_of(9) == SourceLocation(line=4, column=3)

    def test_out_of_range(self):
        assert self.index.location_of(10) is None
        assert self.index.location_of(-1) is None

    def test_offset_of(self):
        assert self.index.offset_of(2, 1) == 4
        assert self.index.offset_of(1, 0) == 0
        assert self.index.offset_of(5, 0) is None
        assert self.index.offset_of(0, 0) is None

    def test_empty_text(self):
        index = LocationIndex("")
        assert len(index.line_starts) == 1
        assert index.location_of(0) == SourceLocation(line=1, column=1)
        assert index.location_of(1) is None

    def test_location_str(self):
        assert str(SourceLocation(line=3, column=14)) == "3:14"
