"""
Contracts - Data structures shared by the lint engine.

Provides:
- Severity: Error/warning classification of rule ids
- SourceLocation, ElementRef: Element handles with optional positions
- LintProblem: One reported finding
- Exceptions raised while building the rule registry
"""

from .errors import (
    BootlintError,
    RuleSetupError,
    DuplicateRuleError,
    InvalidRuleIdError,
)
from .problems import (
    RULE_ID_PATTERN,
    Severity,
    SourceLocation,
    ElementRef,
    LintProblem,
)

__all__ = [
    "BootlintError",
    "RuleSetupError",
    "DuplicateRuleError",
    "InvalidRuleIdError",
    "RULE_ID_PATTERN",
    "Severity",
    "SourceLocation",
    "ElementRef",
    "LintProblem",
]
