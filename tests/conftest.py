"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Page builders (a well-formed Bootstrap 4 page around a body fragment)
- Single-rule lint helpers
- Parsed documents
"""

from typing import Callable, List, Type

import pytest

from bootlint.analyzers import DOMParser
from bootlint.contracts import LintProblem
from bootlint.linter import Linter
from bootlint.rules import LintRule, RuleRegistryBuilder


# ---------------------------------------------------------------------------
# PAGE TEMPLATES
# ---------------------------------------------------------------------------
# A page that passes every built-in rule when its body is empty.

JQUERY_SCRIPT = (
    '<script src="https://ajax.googleapis.com/ajax/libs/jquery/3.2.1/jquery.min.js"></script>'
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Test</title>
</head>
<body>
{body}
{scripts}
</body>
</html>
"""


def build_page(body: str = "", scripts: str = JQUERY_SCRIPT) -> str:
    return PAGE_TEMPLATE.replace("{body}", body).replace("{scripts}", scripts)


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def page() -> Callable[..., str]:
    """
    Build a complete, valid page around a body fragment.

    Usage:
        html = page('<div class="row"></div>')
        html = page(body, scripts="")
    """
    return build_page


@pytest.fixture
def lint_with() -> Callable[[Type[LintRule], str], List[LintProblem]]:
    """
    Run one rule class over an HTML string and return its problems.

    Usage:
        problems = lint_with(DoctypeRule, html)
    """

    def run(rule_class: Type[LintRule], html: str) -> List[LintProblem]:
        builder = RuleRegistryBuilder()
        builder.register(rule_class())
        return Linter(registry=builder.build()).collect(html, disabled_ids=())

    return run


@pytest.fixture
def parse() -> Callable[[str], DOMParser]:
    """Parse an HTML string into a DOMParser."""
    return DOMParser
