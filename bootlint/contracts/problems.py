"""
Problems - Data structures for lint results.

A LintProblem is one reported finding. It carries the id of the rule that
produced it, the severity implied by that id, a human-readable message, a
link to the rule's documentation and the elements it refers to.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from bs4 import Tag

from .errors import InvalidRuleIdError


RULE_ID_PATTERN = re.compile(r"^[EW]\d{3,}$")


class Severity(Enum):
    """Severity of a lint problem, fixed by the first letter of its rule id."""

    ERROR = "error"
    """Markup that is broken with respect to Bootstrap's conventions."""

    WARNING = "warning"
    """Markup that is likely, but not certainly, a mistake."""

    @classmethod
    def from_rule_id(cls, rule_id: str) -> "Severity":
        """
        Resolve the severity encoded in a rule id.

        Args:
            rule_id: Rule id such as "E001" or "W901"

        Returns:
            Severity.ERROR for "E..." ids, Severity.WARNING for "W..." ids

        Raises:
            InvalidRuleIdError: If the id is not of the form [EW]###
        """
        if not isinstance(rule_id, str) or not RULE_ID_PATTERN.match(rule_id):
            raise InvalidRuleIdError(rule_id)
        return cls.ERROR if rule_id[0] == "E" else cls.WARNING


@dataclass(frozen=True)
class SourceLocation:
    """1-based line and column of an element in the original text."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, eq=False)
class ElementRef:
    """
    Reference to an element of the parsed document.

    The element itself is owned by the tree; the reference only points at it.
    """

    element: Tag
    """The referenced BeautifulSoup tag."""

    location: Optional[SourceLocation] = None
    """Where the element starts in the raw text, when known."""

    @property
    def name(self) -> str:
        """Tag name of the referenced element."""
        return self.element.name

    def with_location(self, location: Optional[SourceLocation]) -> "ElementRef":
        """Return a copy annotated with the given location."""
        return replace(self, location=location)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementRef):
            return NotImplemented
        return self.element is other.element

    def __hash__(self) -> int:
        return id(self.element)


@dataclass(frozen=True)
class LintProblem:
    """
    A single lint finding.

    Immutable once constructed. The orchestrator derives an annotated copy
    when it attaches source locations.
    """

    id: str
    """Stable rule id, e.g. "E029"."""

    severity: Severity
    """Error or warning, derived from the id prefix."""

    message: str
    """Human-readable description of the problem."""

    url: str
    """Documentation URL for the rule."""

    elements: Tuple[ElementRef, ...] = ()
    """Elements pointing at every problem location, in document order."""

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def locations(self) -> Tuple[Optional[SourceLocation], ...]:
        """Locations of the referenced elements (None where unknown)."""
        return tuple(ref.location for ref in self.elements)

    def with_elements(self, elements: Tuple[ElementRef, ...]) -> "LintProblem":
        """Return a copy referencing the given elements."""
        return replace(self, elements=tuple(elements))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "severity": self.severity.value,
            "message": self.message,
            "url": self.url,
            "elements": [
                {
                    "tag": ref.name,
                    "line": ref.location.line if ref.location else None,
                    "column": ref.location.column if ref.location else None,
                }
                for ref in self.elements
            ],
        }

    def describe(self) -> str:
        """Generate a one-line human-readable description."""
        where = ", ".join(str(loc) for loc in self.locations if loc is not None)
        prefix = f"{self.id} ({where})" if where else self.id
        return f"{prefix} {self.message} Documentation: {self.url}"
