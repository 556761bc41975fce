"""
Rules - The lint rule catalogue and its registry.

Rules are grouped by the part of Bootstrap they check:
- document_rules: Doctype, head metadata, linked library versions
- grid_rules: Containers, rows and columns
- form_rules: Form groups, input groups and form controls
- button_rules: Buttons and the buttons plugin
- component_rules: Cards, modals, carousels, navbars, tooltips
- deprecation_rules: Bootstrap 3 only classes
"""

from .base_rule import LintRule, Report
from .registry import (
    ProblemReporter,
    RegisteredRule,
    RuleRegistry,
    RuleRegistryBuilder,
    create_default_registry,
    default_rules,
)

__all__ = [
    "LintRule",
    "Report",
    "ProblemReporter",
    "RegisteredRule",
    "RuleRegistry",
    "RuleRegistryBuilder",
    "create_default_registry",
    "default_rules",
]
