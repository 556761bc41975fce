"""
Analyzers - DOM, grid class and source location tools.

This module provides tools for analyzing HTML documents:
- DOMParser: Parse and query HTML structure
- LocationIndex: Map offsets in the raw text to line/column pairs
- grid_classes: Parse, sort and simplify grid column classes
- versions: Detect library versions in linked resource URLs

Usage:
    from bootlint.analyzers import DOMParser, simplify_column_classes

    parser = DOMParser(html)
    for column in parser.select('[class*="col"]'):
        print(simplify_column_classes(parser.get_class_string(column)))
"""

from .dom_parser import DOMParser
from .location_index import LocationIndex
from .grid_classes import (
    COLUMN_CLASS_NAMES,
    Breakpoint,
    GridColumnClass,
    find_redundant_runs,
    group_widths_by_breakpoint,
    is_column,
    parse_column_classes,
    simplify_column_classes,
    sort_column_classes,
)
from .versions import (
    filename_from_url,
    is_older_than,
    version_in_url,
)

__all__ = [
    # DOM Parser
    "DOMParser",
    # Locations
    "LocationIndex",
    # Grid classes
    "COLUMN_CLASS_NAMES",
    "Breakpoint",
    "GridColumnClass",
    "find_redundant_runs",
    "group_widths_by_breakpoint",
    "is_column",
    "parse_column_classes",
    "simplify_column_classes",
    "sort_column_classes",
    # Versions
    "filename_from_url",
    "is_older_than",
    "version_in_url",
]
