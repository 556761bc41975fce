"""
Grid rules - Checks on containers, rows and columns.

Rules:
- E003 RowsOutsideContainersRule
- E005 RowAndColumnOnSameElementRule
- E012 InputGroupOnColumnRule
- E013 RowChildrenAreColumnsRule
- E014 ColumnParentsAreRowsRule
- E029 RedundantColumnClassesRule (one problem per element)
- E037 ZeroWidthColumnsRule
- E051 FloatedColumnsRule
- E052 FloatedRowsRule
- W009 EmptySpacerColumnsRule (one problem per element)
"""

import re
from typing import List

from bs4 import Tag

from ..analyzers.dom_parser import DOMParser
from ..analyzers.grid_classes import Breakpoint, is_column, simplify_column_classes
from .base_rule import LintRule, Report


FLOAT_STYLE_PATTERN = re.compile(r"float\s*:\s*[a-z]+", re.IGNORECASE)

ZERO_WIDTH_COLUMNS = ",".join(
    ".col" + (f"-{bp.infix}" if bp.infix else "") + "-0" for bp in Breakpoint
)

REDUNDANT_COLUMNS_MESSAGE = (
    "Since grid classes apply to devices with screen widths greater than or equal to the "
    "breakpoint sizes (unless overridden by grid classes targeting larger screens), "
    "{old} is redundant and can be simplified to {new}"
)


def select_columns(document: DOMParser) -> List[Tag]:
    """Get every element carrying a grid column class, in document order."""
    return [element for element in document.select("[class]") if is_column(element)]


def has_float_style(document: DOMParser, element: Tag) -> bool:
    """Check if an inline style sets `float`."""
    return bool(FLOAT_STYLE_PATTERN.search(document.get_attribute(element, "style") or ""))


class RowsOutsideContainersRule(LintRule):
    """
    A `.row` must be a child of a column or a descendant of a container.
    """

    CONTAINERS = ("container", "container-fluid")

    @property
    def rule_id(self) -> str:
        return "E003"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = []
        for row in document.select(".row"):
            parent = document.parent(row)
            if parent is None or is_column(parent):
                continue
            if not any(self._is_container(document, ancestor)
                       for ancestor in document.get_parent_chain(row)):
                offenders.append(row)
        self.report_if_any(
            report,
            "Found one or more `.row`s that were not children of a grid column "
            "or descendants of a `.container` or `.container-fluid`",
            offenders,
        )

    def _is_container(self, document: DOMParser, element: Tag) -> bool:
        return any(document.has_class(element, name) for name in self.CONTAINERS)


class RowAndColumnOnSameElementRule(LintRule):
    """`.row` and `.col*` must not be used on the same element."""

    @property
    def rule_id(self) -> str:
        return "E005"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [row for row in document.select(".row") if is_column(row)]
        self.report_if_any(
            report, "Found both `.row` and `.col*` used on the same element", offenders
        )


class InputGroupOnColumnRule(LintRule):
    """`.input-group` and `.col*` must not be used on the same element."""

    @property
    def rule_id(self) -> str:
        return "E012"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [group for group in document.select(".input-group") if is_column(group)]
        self.report_if_any(
            report,
            "`.input-group` and `.col*` cannot be used directly on the same element. "
            "Instead, nest the `.input-group` within the `.col*`",
            offenders,
        )


class RowChildrenAreColumnsRule(LintRule):
    """Only columns, `<script>`s and `.clearfix` may be children of rows."""

    @property
    def rule_id(self) -> str:
        return "E013"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            child for child in document.select(".row > *, .form-row > *")
            if not self._is_allowed_child(document, child)
        ]
        self.report_if_any(
            report,
            "Only columns (`.col*`) or `.clearfix` may be children of `.row`s or `.form-row`s.",
            offenders,
        )

    @staticmethod
    def _is_allowed_child(document: DOMParser, child: Tag) -> bool:
        return (
            is_column(child)
            or child.name == "script"
            or document.has_class(child, "clearfix")
        )


class ColumnParentsAreRowsRule(LintRule):
    """
    Columns must be children of `.row` or `.form-row`.

    Table `<col>`, `<th>` and `<td>` elements are exempt.
    """

    EXEMPT_TAGS = frozenset({"col", "th", "td"})

    @property
    def rule_id(self) -> str:
        return "E014"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = []
        for column in select_columns(document):
            if column.name in self.EXEMPT_TAGS:
                continue
            parent = document.parent(column)
            if parent is None:
                continue
            if not (document.has_class(parent, "row") or document.has_class(parent, "form-row")):
                offenders.append(column)
        self.report_if_any(
            report,
            "Columns (`.col*`) can only be children of `.row`s or `.form-row`s",
            offenders,
        )


class RedundantColumnClassesRule(LintRule):
    """
    Column classes already implied by a smaller breakpoint are redundant.

    The message quotes the element's class attribute as written, so each
    redundant element gets its own problem.
    """

    @property
    def rule_id(self) -> str:
        return "E029"

    def check(self, document: DOMParser, report: Report) -> None:
        for column in select_columns(document):
            classes = document.get_raw_attribute(column, "class") or ""
            simplified = simplify_column_classes(classes)
            if simplified is None:
                continue
            report(
                REDUNDANT_COLUMNS_MESSAGE.format(
                    old=f'`class="{classes}"`',
                    new=f'`class="{simplified}"`',
                ),
                [column],
            )


class ZeroWidthColumnsRule(LintRule):
    """`.col*-0` classes do not exist."""

    @property
    def rule_id(self) -> str:
        return "E037"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Column widths must be positive integers (and <= 12 by default). "
            "Found usage(s) of invalid nonexistent `.col*-0` classes.",
            document.select(ZERO_WIDTH_COLUMNS),
        )


class FloatedColumnsRule(LintRule):
    """Columns must not be floated, by utility class or inline style."""

    @property
    def rule_id(self) -> str:
        return "E051"

    def check(self, document: DOMParser, report: Report) -> None:
        columns = select_columns(document)

        pulled = [
            column for column in columns
            if document.has_class(column, "float-left") or document.has_class(column, "float-right")
        ]
        self.report_if_any(
            report, "`.float-right` and `.float-left` must not be used on `.col*` elements", pulled
        )

        styled = [column for column in columns if has_float_style(document, column)]
        self.report_if_any(
            report, "Manually added `float` styles must not be added on `.col*` elements", styled
        )


class FloatedRowsRule(LintRule):
    """Rows must not be floated, by utility class or inline style."""

    @property
    def rule_id(self) -> str:
        return "E052"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.float-right` and `.float-left` must not be used on `.row` elements",
            document.select(".row.float-right, .row.float-left"),
        )

        styled = [row for row in document.select(".row[style]") if has_float_style(document, row)]
        self.report_if_any(
            report, "Manually added `float` styles must not be added on `.row` elements", styled
        )


class EmptySpacerColumnsRule(LintRule):
    """
    Empty columns used only as spacers are unnecessary.

    A column counts as an empty spacer when it is not the last child, is not
    a void element, and has neither child elements nor non-whitespace text.
    """

    @property
    def rule_id(self) -> str:
        return "W009"

    def check(self, document: DOMParser, report: Report) -> None:
        for column in select_columns(document):
            if document.matches(column, ":last-child"):
                continue
            if column.can_be_empty_element:
                continue
            if document.get_children(column) or document.get_text_content(column):
                continue
            report("Using empty spacer columns isn't necessary with Bootstrap's grid.", [column])


GRID_RULES = (
    RowsOutsideContainersRule,
    RowAndColumnOnSameElementRule,
    InputGroupOnColumnRule,
    RowChildrenAreColumnsRule,
    ColumnParentsAreRowsRule,
    RedundantColumnClassesRule,
    ZeroWidthColumnsRule,
    FloatedColumnsRule,
    FloatedRowsRule,
    EmptySpacerColumnsRule,
)
