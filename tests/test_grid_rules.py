"""
Tests for grid rules (containers, rows and columns).
"""

from bootlint.contracts import SourceLocation
from bootlint.rules.grid_rules import (
    ColumnParentsAreRowsRule,
    EmptySpacerColumnsRule,
    FloatedColumnsRule,
    FloatedRowsRule,
    InputGroupOnColumnRule,
    RedundantColumnClassesRule,
    RowAndColumnOnSameElementRule,
    RowChildrenAreColumnsRule,
    RowsOutsideContainersRule,
    ZeroWidthColumnsRule,
)


def element_classes(problem):
    return [ref.element.get("class") for ref in problem.elements]


class TestRowsOutsideContainersRule:
    """Tests for RowsOutsideContainersRule (E003)."""

    def test_row_without_container(self, page, lint_with):
        problems = lint_with(RowsOutsideContainersRule, page('<div class="row"></div>'))
        assert len(problems) == 1
        assert problems[0].message.startswith("Found one or more `.row`s")

    def test_row_in_container(self, page, lint_with):
        html = page('<div class="container-fluid"><section><div class="row"></div></section></div>')
        assert lint_with(RowsOutsideContainersRule, html) == []

    def test_nested_row_in_column(self, page, lint_with):
        html = page('<div class="col-md-6"><div class="row"></div></div>')
        assert lint_with(RowsOutsideContainersRule, html) == []


class TestSameElementRules:
    """Tests for E005 and E012."""

    def test_row_and_column(self, page, lint_with):
        problems = lint_with(RowAndColumnOnSameElementRule, page('<div class="row col-6"></div>'))
        assert [p.message for p in problems] == [
            "Found both `.row` and `.col*` used on the same element"
        ]

    def test_row_with_legacy_column_class(self, page, lint_with):
        assert lint_with(RowAndColumnOnSameElementRule, page('<div class="row col-xs-6"></div>')) == []

    def test_input_group_and_column(self, page, lint_with):
        html = page('<div class="input-group col-sm-4"></div>')
        assert len(lint_with(InputGroupOnColumnRule, html)) == 1


class TestRowChildrenAreColumnsRule:
    """Tests for RowChildrenAreColumnsRule (E013)."""

    def test_non_column_child(self, page, lint_with):
        html = page(
            '<div class="container"><div class="row">'
            '<div class="col-6"></div><p class="lead">x</p>'
            '<script></script><div class="clearfix"></div>'
            "</div></div>"
        )
        problems = lint_with(RowChildrenAreColumnsRule, html)
        assert len(problems) == 1
        assert [ref.name for ref in problems[0].elements] == ["p"]

    def test_form_row_children(self, page, lint_with):
        html = page('<form><div class="form-row"><span></span></div></form>')
        assert len(lint_with(RowChildrenAreColumnsRule, html)) == 1

    def test_document_order(self, page, lint_with):
        html = page(
            '<div class="row">'
            '<div class="col"><div class="row"><b></b></div></div>'
            "<i></i>"
            "</div>"
        )
        problems = lint_with(RowChildrenAreColumnsRule, html)
        assert [ref.name for ref in problems[0].elements] == ["b", "i"]


class TestColumnParentsAreRowsRule:
    """Tests for ColumnParentsAreRowsRule (E014)."""

    def test_column_outside_row(self, page, lint_with):
        html = page('<div class="container"><div class="col-6"></div></div>')
        problems = lint_with(ColumnParentsAreRowsRule, html)
        assert problems[0].message == (
            "Columns (`.col*`) can only be children of `.row`s or `.form-row`s"
        )

    def test_column_in_row(self, page, lint_with):
        html = page('<div class="row"><div class="col-6"></div></div>')
        assert lint_with(ColumnParentsAreRowsRule, html) == []

    def test_table_cells_are_exempt(self, page, lint_with):
        html = page('<table><tr><td class="col-6"></td><th class="col-6"></th></tr></table>')
        assert lint_with(ColumnParentsAreRowsRule, html) == []


class TestRedundantColumnClassesRule:
    """Tests for RedundantColumnClassesRule (E029)."""

    def test_redundant_classes(self, page, lint_with):
        html = page('<div class="row"><div class="col-6 col-sm-6 col-md-6 col-lg-6 col-xl-6"></div></div>')
        problems = lint_with(RedundantColumnClassesRule, html)
        assert [p.message for p in problems] == [
            "Since grid classes apply to devices with screen widths greater than or equal to "
            "the breakpoint sizes (unless overridden by grid classes targeting larger screens), "
            '`class="col-6 col-sm-6 col-md-6 col-lg-6 col-xl-6"` is redundant and can be '
            'simplified to `class="col-6"`'
        ]

    def test_one_problem_per_element(self, page, lint_with):
        html = page(
            '<div class="row">'
            '<div class="col-5 col-sm-5"></div>'
            '<div class="col-5 col-md-5"></div>'
            '<div class="foo col-lg-2 col-xl-2"></div>'
            "</div>"
        )
        problems = lint_with(RedundantColumnClassesRule, html)
        assert len(problems) == 2
        assert problems[0].message.endswith('`class="col-5"`')
        assert problems[1].message.endswith('`class="foo col-lg-2"`')

    def test_quotes_class_attribute_as_written(self, page, lint_with):
        html = page('<div class="row"><div class="col-5  col-sm-5 "></div></div>')
        problems = lint_with(RedundantColumnClassesRule, html)
        assert len(problems) == 1
        assert '`class="col-5  col-sm-5 "` is redundant' in problems[0].message
        assert problems[0].message.endswith('`class="col-5"`')

    def test_location_is_attached(self, lint_with):
        html = '<div class="row">\n  <div class="col-5 col-sm-5"></div>\n</div>'
        problems = lint_with(RedundantColumnClassesRule, html)
        assert problems[0].locations == (SourceLocation(line=2, column=3),)


class TestZeroWidthColumnsRule:
    """Tests for ZeroWidthColumnsRule (E037)."""

    def test_zero_width(self, page, lint_with):
        html = page('<div class="row"><div class="col-sm-0"></div><div class="col-0"></div></div>')
        problems = lint_with(ZeroWidthColumnsRule, html)
        assert len(problems) == 1
        assert len(problems[0].elements) == 2

    def test_positive_width(self, page, lint_with):
        assert lint_with(ZeroWidthColumnsRule, page('<div class="col-10"></div>')) == []


class TestFloatRules:
    """Tests for FloatedColumnsRule (E051) and FloatedRowsRule (E052)."""

    def test_floated_column_class(self, page, lint_with):
        html = page('<div class="row"><div class="col-6 float-left"></div></div>')
        problems = lint_with(FloatedColumnsRule, html)
        assert [p.message for p in problems] == [
            "`.float-right` and `.float-left` must not be used on `.col*` elements"
        ]

    def test_floated_column_style(self, page, lint_with):
        html = page('<div class="row"><div class="col-6" style="color: red; FLOAT : right"></div></div>')
        problems = lint_with(FloatedColumnsRule, html)
        assert [p.message for p in problems] == [
            "Manually added `float` styles must not be added on `.col*` elements"
        ]

    def test_floated_column_both_ways(self, page, lint_with):
        html = page('<div class="row"><div class="col-6 float-right" style="float:left"></div></div>')
        assert len(lint_with(FloatedColumnsRule, html)) == 2

    def test_floated_rows(self, page, lint_with):
        html = page(
            '<div class="container">'
            '<div class="row float-right"></div>'
            '<div class="row" style="float: none"></div>'
            '<div class="row" style="display: flex"></div>'
            "</div>"
        )
        problems = lint_with(FloatedRowsRule, html)
        assert [len(p.elements) for p in problems] == [1, 1]


class TestEmptySpacerColumnsRule:
    """Tests for EmptySpacerColumnsRule (W009)."""

    def test_empty_spacer(self, page, lint_with):
        html = page('<div class="row"><div class="col-3"> </div><div class="col-9">x</div></div>')
        problems = lint_with(EmptySpacerColumnsRule, html)
        assert [p.message for p in problems] == [
            "Using empty spacer columns isn't necessary with Bootstrap's grid."
        ]

    def test_each_spacer_reported_separately(self, page, lint_with):
        html = page(
            '<div class="row"><div class="col-1"></div><div class="col-2"></div>'
            '<div class="col-9">x</div></div>'
        )
        assert len(lint_with(EmptySpacerColumnsRule, html)) == 2

    def test_last_child_is_not_a_spacer(self, page, lint_with):
        html = page('<div class="row"><div class="col-9">x</div><div class="col-3"></div></div>')
        assert lint_with(EmptySpacerColumnsRule, html) == []

    def test_column_with_children(self, page, lint_with):
        html = page('<div class="row"><div class="col-3"><img src="a.png"></div><div class="col-9">x</div></div>')
        assert lint_with(EmptySpacerColumnsRule, html) == []
