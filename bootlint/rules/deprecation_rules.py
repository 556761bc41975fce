"""
Deprecation rules - Usage of classes that only exist in Bootstrap 3.

Rules:
- W901 Bootstrap3ClassesRule
"""

from typing import FrozenSet

from ..analyzers.dom_parser import DOMParser
from .base_rule import LintRule, Report


def _bs3_grid_classes() -> FrozenSet[str]:
    names = set()
    for screen in ("xs", "sm", "md", "lg"):
        for modifier in ("offset", "pull", "push"):
            names.update(f"col-{screen}-{modifier}-{width}" for width in range(13))
    names.update(f"col-xs-{width}" for width in range(1, 13))
    return frozenset(names)


def _bs3_responsive_classes() -> FrozenSet[str]:
    names = {"hidden-lg", "hidden-md", "hidden-print", "hidden-sm", "hidden-xs"}
    for target in ("lg", "md", "print", "sm", "xs"):
        names.add(f"visible-{target}")
        names.update(f"visible-{target}-{display}" for display in ("block", "inline", "inline-block"))
    return frozenset(names)


# Generic words such as `in`, `info`, `item`, `left`, `next`, `open`, `prev`,
# `previous`, `right`, `top` are left out: Bootstrap 4 still uses them.
BOOTSTRAP3_CLASSES = frozenset({
    "affix",
    "alert-dismissable",
    "blockquote-reverse",
    "bottom",
    "bottom-left",
    "bottom-right",
    "btn-default",
    "btn-group-justified",
    "btn-group-xs",
    "btn-xs",
    "caption",
    "caret",
    "carousel-control",
    "center-block",
    "checkbox",
    "checkbox-inline",
    "control-label",
    "danger",
    "divider",
    "dl-horizontal",
    "dropdown-backdrop",
    "dropdown-menu-left",
    "form-control-static",
    "form-group-lg",
    "form-group-sm",
    "form-horizontal",
    "gradient",
    "has-error",
    "has-success",
    "has-warning",
    "help-block",
    "hidden",
    "hide",
    "icon-bar",
    "icon-next",
    "icon-prev",
    "img-circle",
    "img-responsive",
    "img-rounded",
    "input-lg",
    "input-sm",
    "label",
    "label-danger",
    "label-default",
    "label-info",
    "label-primary",
    "label-success",
    "label-warning",
    "list-group-item-heading",
    "list-group-item-text",
    "media-bottom",
    "media-heading",
    "media-left",
    "media-list",
    "media-middle",
    "media-object",
    "media-right",
    "navbar-btn",
    "navbar-default",
    "navbar-fixed-bottom",
    "navbar-fixed-top",
    "navbar-form",
    "navbar-header",
    "navbar-inverse",
    "navbar-left",
    "navbar-link",
    "navbar-right",
    "navbar-static-top",
    "navbar-toggle",
    "nav-divider",
    "nav-stacked",
    "nav-tabs-justified",
    "page-header",
    "pager",
    "panel",
    "panel-body",
    "panel-collapse",
    "panel-danger",
    "panel-default",
    "panel-footer",
    "panel-group",
    "panel-heading",
    "panel-info",
    "panel-primary",
    "panel-success",
    "panel-title",
    "panel-warning",
    "popover-content",
    "popover-title",
    "progress-bar-danger",
    "progress-bar-info",
    "progress-bar-success",
    "progress-bar-warning",
    "progress-striped",
    "pull-left",
    "pull-right",
    "radio",
    "radio-inline",
    "row-no-gutters",
    "success",
    "table-condensed",
    "thumbnail",
    "tooltip-arrow",
    "warning",
    "well",
    "well-lg",
    "well-sm",
}) | _bs3_grid_classes() | _bs3_responsive_classes()


class Bootstrap3ClassesRule(LintRule):
    """Flag every element carrying at least one Bootstrap 3 only class."""

    @property
    def rule_id(self) -> str:
        return "W901"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            element for element in document.select("[class]")
            if not BOOTSTRAP3_CLASSES.isdisjoint(document.get_classes(element))
        ]
        self.report_if_any(report, "Found usage of CSS classes specific to Bootstrap 3.", offenders)


DEPRECATION_RULES = (
    Bootstrap3ClassesRule,
)
