"""
LintRule - Abstract base class for lint rules.

Each rule owns one stable id and inspects a parsed document, reporting zero
or more problems through the callback it is given. Rules never mutate the
document.

Usage:
    class MyRule(LintRule):
        @property
        def rule_id(self) -> str:
            return "E999"

        def check(self, document: DOMParser, report: Report) -> None:
            offenders = document.select(".foo.bar")
            self.report_if_any(report, "Don't mix `.foo` and `.bar`", offenders)
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from bs4 import Tag

from ..analyzers.dom_parser import DOMParser
from ..core.config import Settings, settings as default_settings


Report = Callable[..., None]
"""report(message, elements=()) - bound to a rule's id by the registry."""


class LintRule(ABC):
    """
    Abstract base class for lint rules.

    Subclasses must implement:
    - rule_id: Stable id of the form E### (error) or W### (warning)
    - check(): Inspect the document and report problems

    Aggregate rules report one problem per distinct message listing every
    offending element; rules whose message depends on the element report
    once per element.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the rule.

        Args:
            settings: Settings the rule reads thresholds from (global if not provided)
        """
        self.settings = settings or default_settings

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """
        Stable id of this rule.

        Returns:
            Id string such as "E001" or "W901"
        """
        pass

    @property
    def name(self) -> str:
        """
        Rule name for logging and debugging.

        Returns:
            Class name by default
        """
        return self.__class__.__name__

    @abstractmethod
    def check(self, document: DOMParser, report: Report) -> None:
        """
        Inspect the document and report problems.

        Args:
            document: Parsed document to inspect (read-only)
            report: Callback taking a message and the offending elements
        """
        pass

    @staticmethod
    def report_if_any(report: Report, message: str, elements: Sequence[Tag]) -> None:
        """Report one aggregate problem if any offending elements were found."""
        if elements:
            report(message, elements)

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.name}(id={self.rule_id})"

    def __eq__(self, other: object) -> bool:
        """Equality check based on class type."""
        if not isinstance(other, LintRule):
            return False
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        """Hash based on class name."""
        return hash(self.__class__.__name__)
