"""
Grid Classes - Parse, sort and simplify Bootstrap grid column classes.

Bootstrap's column classes cascade upwards: `col-md-6` applies to md, lg
and xl screens unless a class for a larger breakpoint overrides it. That
makes a declaration redundant when the same width is already declared at
the immediately preceding breakpoint.

Usage:
    from bootlint.analyzers.grid_classes import simplify_column_classes

    simplify_column_classes("col-5 col-sm-5")   # "col-5"
    simplify_column_classes("col-5 col-md-5")   # None (sm breaks the run)
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Set, Tuple

from bs4 import Tag


NUM_COLS = 12


class Breakpoint(IntEnum):
    """Responsive tiers in ascending screen-width order."""

    NONE = 0
    SM = 1
    MD = 2
    LG = 3
    XL = 4

    @property
    def infix(self) -> str:
        """Infix used in class names ("" for the base tier)."""
        return "" if self is Breakpoint.NONE else self.name.lower()

    @classmethod
    def from_infix(cls, infix: Optional[str]) -> "Breakpoint":
        if not infix:
            return cls.NONE
        return cls[infix.upper()]


# col, col-sm, col-6, col-md-auto, ... (widths limited to 1..12)
COLUMN_CLASS_PATTERN = re.compile(
    r"^col(?:-(sm|md|lg|xl))?(?:-(auto|[1-9]|1[0-2]))?$"
)


@dataclass(frozen=True)
class GridColumnClass:
    """One grid column class token, e.g. `col-md-6`."""

    token: str
    breakpoint: Breakpoint
    width: Optional[str] = None
    """"1".."12", "auto", or None for a bare `col`/`col-md`."""

    @property
    def rank(self) -> int:
        return int(self.breakpoint)

    @classmethod
    def parse(cls, token: str) -> Optional["GridColumnClass"]:
        """Parse a single class token, returning None if it is not a column class."""
        match = COLUMN_CLASS_PATTERN.match(token)
        if not match:
            return None
        return cls(
            token=token,
            breakpoint=Breakpoint.from_infix(match.group(1)),
            width=match.group(2),
        )


def _build_column_class_names() -> Tuple[str, ...]:
    names = []
    for breakpoint in Breakpoint:
        base = "col" + (f"-{breakpoint.infix}" if breakpoint.infix else "")
        names.append(base)
        names.append(f"{base}-auto")
        names.extend(f"{base}-{n}" for n in range(1, NUM_COLS + 1))
    return tuple(names)


COLUMN_CLASS_NAMES: Tuple[str, ...] = _build_column_class_names()
"""Every valid grid column class name, grouped by ascending breakpoint."""

_COLUMN_CLASS_SET = frozenset(COLUMN_CLASS_NAMES)


# =========================================================================
# TOKEN HELPERS
# =========================================================================


def split_classes(classes: Optional[str]) -> List[str]:
    """Split a class attribute value into its tokens."""
    return classes.split() if classes else []


def is_column_class(token: str) -> bool:
    """Check if a single class token is a grid column class."""
    return token in _COLUMN_CLASS_SET


def has_column_class(tokens: Iterable[str]) -> bool:
    """Check if any of the given class tokens is a grid column class."""
    return any(token in _COLUMN_CLASS_SET for token in tokens)


def is_column(element: Tag) -> bool:
    """
    Check if an element carries at least one grid column class.

    Args:
        element: BeautifulSoup Tag

    Returns:
        True if the element is a grid column
    """
    classes = element.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return has_column_class(classes)


# =========================================================================
# PARSING AND SORTING
# =========================================================================


def parse_column_classes(classes: Optional[str]) -> List[GridColumnClass]:
    """
    Extract the grid column classes of a class attribute value, left to right.

    Args:
        classes: Value of a "class" attribute

    Returns:
        Parsed column classes in their original order
    """
    parsed = []
    for token in split_classes(classes):
        column = GridColumnClass.parse(token)
        if column is not None:
            parsed.append(column)
    return parsed


def sort_column_classes(classes: Optional[str]) -> str:
    """
    Move the grid column classes to the end, sorted by ascending breakpoint.

    Non-grid classes keep their relative order. Duplicate grid classes are
    emitted once.

    Args:
        classes: Value of a "class" attribute

    Returns:
        The rewritten class attribute value
    """
    others = []
    columns = []
    seen: Set[str] = set()
    for token in split_classes(classes):
        column = GridColumnClass.parse(token)
        if column is None:
            others.append(token)
        elif token not in seen:
            seen.add(token)
            columns.append(column)

    columns.sort(key=lambda col: col.rank)
    return " ".join(others + [col.token for col in columns])


# =========================================================================
# REDUNDANCY DETECTION
# =========================================================================


def group_widths_by_breakpoint(classes: Optional[str]) -> Dict[str, List[int]]:
    """
    Map each declared width to the sorted breakpoint ranks declaring it.

    A bare `col`/`col-md` (no width) is grouped under "", `col-*-auto`
    under "auto".

    Args:
        classes: Value of a "class" attribute

    Returns:
        Dict of width -> ascending list of Breakpoint ranks
    """
    groups: Dict[str, List[int]] = {}
    for column in parse_column_classes(classes):
        groups.setdefault(column.width or "", []).append(column.rank)
    for ranks in groups.values():
        ranks.sort()
    return groups


def find_redundant_runs(ranks: List[int]) -> List[Tuple[int, int]]:
    """
    Find the maximal runs of consecutive integers in a sorted list.

    Examples:
        [0, 2, 3, 5]                -> [(2, 3)]
        [0, 2, 3, 4, 6, 8, 9, 11]   -> [(2, 4), (8, 9)]
        [0, 2, 4]                   -> []

    Args:
        ranks: Sorted list of integers

    Returns:
        (start, end) pairs of every run of length >= 2
    """
    runs = []
    start = None
    prev = None
    for current in ranks:
        if start is None:
            start = current
        elif current != prev + 1:
            if start != prev:
                runs.append((start, prev))
            start = current
        prev = current
    if start is not None and start != prev:
        runs.append((start, prev))
    return runs


def simplify_column_classes(classes: Optional[str]) -> Optional[str]:
    """
    Drop grid column classes already implied by a smaller breakpoint.

    For every width, every run of consecutive breakpoints keeps only its
    first class. The remaining classes are re-sorted with the grid classes
    last.

    Args:
        classes: Value of a "class" attribute

    Returns:
        Simplified class attribute value, or None if nothing is redundant
    """
    redundant: Set[Tuple[int, str]] = set()
    for width, ranks in group_widths_by_breakpoint(classes).items():
        for start, end in find_redundant_runs(ranks):
            for rank in range(start + 1, end + 1):
                redundant.add((rank, width))

    if not redundant:
        return None

    kept = []
    for token in split_classes(classes):
        column = GridColumnClass.parse(token)
        if column is not None and (column.rank, column.width or "") in redundant:
            continue
        kept.append(token)

    return sort_column_classes(" ".join(kept))
