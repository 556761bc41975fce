"""
Linter - Runs the rule registry over a document and forwards the problems.

Parses the HTML, runs every enabled rule in ascending id order and, when the
raw text is available, resolves each referenced element to a line/column
before handing the problem to the caller.

Usage:
    from bootlint import Linter

    linter = Linter()
    for problem in linter.collect(html, disabled_ids=["W003"]):
        print(problem.describe())

    # Or stream problems as they are found
    linter.lint_html(html, problems.append)
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from bs4 import BeautifulSoup

from .analyzers.dom_parser import DOMParser
from .contracts.problems import LintProblem
from .core.config import Settings, settings as default_settings
from .rules.registry import ProblemReporter, RuleRegistry, create_default_registry


logger = logging.getLogger(__name__)


class Linter:
    """
    Lint orchestrator.

    Holds a registry and settings only; every lint pass builds its own
    document and location index, so one Linter may be reused freely.
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the linter.

        Args:
            registry: RuleRegistry to run (built-in catalogue if not provided)
            settings: Settings instance (global settings if not provided)
        """
        self._registry = registry
        self._settings = settings or default_settings

    def _get_registry(self) -> RuleRegistry:
        """Get or create the rule registry."""
        if self._registry is None:
            self._registry = create_default_registry(self._settings)
        return self._registry

    @property
    def registry(self) -> RuleRegistry:
        return self._get_registry()

    def lint_html(
        self,
        html: str,
        reporter: ProblemReporter,
        disabled_ids: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Lint raw HTML.

        Args:
            html: Document text
            reporter: Called with each LintProblem, in report order
            disabled_ids: Rule ids to skip (settings.DISABLED_IDS if None)
        """
        document = DOMParser(html, features=self._settings.HTML_PARSER)
        self.lint_document(document, reporter, disabled_ids)

    def lint_document(
        self,
        document: Union[DOMParser, BeautifulSoup],
        reporter: ProblemReporter,
        disabled_ids: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Lint an already parsed document.

        Element locations are attached only when the document was parsed
        from raw text; a bare soup yields problems without locations.

        Args:
            document: DOMParser or BeautifulSoup tree
            reporter: Called with each LintProblem, in report order
            disabled_ids: Rule ids to skip (settings.DISABLED_IDS if None)
        """
        if isinstance(document, BeautifulSoup):
            document = DOMParser.from_soup(document)
        if disabled_ids is None:
            disabled_ids = self._settings.DISABLED_IDS

        count = 0

        def forward(problem: LintProblem) -> None:
            nonlocal count
            count += 1
            if document.has_source:
                problem = self._with_locations(document, problem)
            reporter(problem)

        self._get_registry().run_all(document, forward, disabled_ids)
        logger.info(f"Lint pass complete: {count} problem(s)")

    def collect(
        self,
        html: str,
        disabled_ids: Optional[Iterable[str]] = None,
    ) -> List[LintProblem]:
        """
        Lint raw HTML and gather the problems.

        Returns:
            Problems in report order
        """
        problems: List[LintProblem] = []
        self.lint_html(html, problems.append, disabled_ids)
        return problems

    def lint_file(
        self,
        path: Union[str, Path],
        reporter: ProblemReporter,
        disabled_ids: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Lint an HTML file read as UTF-8.

        Raises:
            OSError: If the file cannot be read
        """
        path = Path(path)
        logger.debug(f"Linting {path}")
        self.lint_html(path.read_text(encoding="utf-8"), reporter, disabled_ids)

    @staticmethod
    def _with_locations(document: DOMParser, problem: LintProblem) -> LintProblem:
        if not problem.elements:
            return problem
        return problem.with_elements(tuple(
            ref.with_location(document.location_of(ref.element))
            for ref in problem.elements
        ))


def lint_html(
    html: str,
    reporter: ProblemReporter,
    disabled_ids: Optional[Iterable[str]] = None,
) -> None:
    """Lint raw HTML with the built-in rules."""
    Linter().lint_html(html, reporter, disabled_ids)


def lint_document(
    document: Union[DOMParser, BeautifulSoup],
    reporter: ProblemReporter,
    disabled_ids: Optional[Iterable[str]] = None,
) -> None:
    """Lint a parsed document with the built-in rules."""
    Linter().lint_document(document, reporter, disabled_ids)
