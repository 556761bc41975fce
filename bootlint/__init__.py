"""
Bootlint - HTML linter for Bootstrap projects.

Checks a document against a fixed catalogue of rules covering Bootstrap's
markup conventions (grid, forms, components, linked library versions) and
reports each finding as a LintProblem.

Usage:
    from bootlint import lint_html

    problems = []
    lint_html(html, problems.append, disabled_ids=["W003"])
"""

from .analyzers import DOMParser, LocationIndex
from .contracts import (
    BootlintError,
    DuplicateRuleError,
    ElementRef,
    InvalidRuleIdError,
    LintProblem,
    RuleSetupError,
    Severity,
    SourceLocation,
)
from .core import Settings, settings
from .linter import Linter, lint_document, lint_html
from .rules import LintRule, RuleRegistry, RuleRegistryBuilder, create_default_registry

__version__ = "0.1.0"

__all__ = [
    "DOMParser",
    "LocationIndex",
    "BootlintError",
    "DuplicateRuleError",
    "ElementRef",
    "InvalidRuleIdError",
    "LintProblem",
    "RuleSetupError",
    "Severity",
    "SourceLocation",
    "Settings",
    "settings",
    "Linter",
    "lint_document",
    "lint_html",
    "LintRule",
    "RuleRegistry",
    "RuleRegistryBuilder",
    "create_default_registry",
]
