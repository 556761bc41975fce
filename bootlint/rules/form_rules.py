"""
Form rules - Checks on form groups, input groups and form controls.

Rules:
- E006 InputGroupControlTypesRule
- E009 InputGroupSizingRule
- E010 MultipleFormControlsRule
- E011 InputGroupMixedWithFormGroupRule
- E017 BlockCheckboxesRule
- E018 BlockRadiosRule
- E019 InlineCheckboxesRule
- E020 InlineRadiosRule
- E028 FeedbackWithoutHasFeedbackRule
- E035 FormGroupWithFormInlineRule
- E042 FormControlOnWrongControlRule
- E044 InputGroupAddonChildrenRule
- E050 NestedFormGroupsRule
- W017 InputsMissingTypeRule
"""

from ..analyzers.dom_parser import DOMParser
from .base_rule import LintRule, Report


TEXTUAL_INPUT_TYPES = (
    "color",
    "email",
    "number",
    "password",
    "search",
    "tel",
    "text",
    "url",
    "date",
    "month",
    "week",
    "time",
)


class InputGroupControlTypesRule(LintRule):
    """Only text-based `<input>`s belong in an `.input-group`."""

    @property
    def rule_id(self) -> str:
        return "E006"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.input-group` contains a `<select>`; "
            "only text-based `<input>`s are permitted in an `.input-group`",
            document.select(".input-group select"),
        )
        self.report_if_any(
            report,
            "`.input-group` contains a `<textarea>`; "
            "only text-based `<input>`s are permitted in an `.input-group`",
            document.select(".input-group textarea"),
        )


class InputGroupSizingRule(LintRule):
    """Size input groups with `.input-group-lg`/`.input-group-sm`, not their buttons."""

    @property
    def rule_id(self) -> str:
        return "E009"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Button and input sizing within `.input-group`s can cause issues. "
            "Instead, use input group sizing classes `.input-group-lg` or `.input-group-sm`",
            document.select(
                ".input-group:not(.input-group-lg) .btn-lg, "
                ".input-group:not(.input-group-sm) .btn-sm"
            ),
        )


class MultipleFormControlsRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E010"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            group for group in document.select(".input-group")
            if len(document.select(".form-control", root=group)) > 1
        ]
        self.report_if_any(report, "Input groups cannot contain multiple `.form-control`s", offenders)


class InputGroupMixedWithFormGroupRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E011"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.input-group` and `.form-group`/`.row`/`.form-row` cannot be used directly on "
            "the same element. Instead, nest the `.input-group` within the "
            "`.form-group`/`.row`/`.form-row`",
            document.select(".input-group.form-group, .input-group.row, .input-group.form-row"),
        )


class BlockCheckboxesRule(LintRule):
    """`.checkbox` must wrap `label > input[type="checkbox"]`."""

    @property
    def rule_id(self) -> str:
        return "E017"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            element for element in document.select(".checkbox")
            if not document.matches(element, ':has(> label > input[type="checkbox"])')
        ]
        self.report_if_any(
            report,
            "Incorrect markup used with the `.checkbox` class. "
            'The correct markup structure is `.checkbox>label>input[type="checkbox"]`',
            offenders,
        )


class BlockRadiosRule(LintRule):
    """`.radio` must wrap `label > input[type="radio"]`."""

    @property
    def rule_id(self) -> str:
        return "E018"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            element for element in document.select(".radio")
            if not document.matches(element, ':has(> label > input[type="radio"])')
        ]
        self.report_if_any(
            report,
            "Incorrect markup used with the `.radio` class. "
            'The correct markup structure is `.radio>label>input[type="radio"]`',
            offenders,
        )


class InlineCheckboxesRule(LintRule):
    """`.checkbox-inline` must be a `<label>` directly wrapping a checkbox."""

    @property
    def rule_id(self) -> str:
        return "E019"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.checkbox-inline` should only be used on `<label>` elements",
            document.select(".checkbox-inline:not(label)"),
        )
        offenders = [
            label for label in document.select(".checkbox-inline")
            if not document.get_children(label, 'input[type="checkbox"]')
        ]
        self.report_if_any(
            report,
            "Incorrect markup used with the `.checkbox-inline` class. "
            'The correct markup structure is `label.checkbox-inline>input[type="checkbox"]`',
            offenders,
        )


class InlineRadiosRule(LintRule):
    """`.radio-inline` must be a `<label>` directly wrapping a radio button."""

    @property
    def rule_id(self) -> str:
        return "E020"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.radio-inline` should only be used on `<label>` elements",
            document.select(".radio-inline:not(label)"),
        )
        offenders = [
            label for label in document.select(".radio-inline")
            if not document.get_children(label, 'input[type="radio"]')
        ]
        self.report_if_any(
            report,
            "Incorrect markup used with the `.radio-inline` class. "
            'The correct markup structure is `label.radio-inline>input[type="radio"]`',
            offenders,
        )


class FeedbackWithoutHasFeedbackRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E028"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            element for element in document.select(".form-control-feedback")
            if document.closest(element, ".form-group.has-feedback") is None
        ]
        self.report_if_any(
            report,
            "`.form-control-feedback` must have `.form-group.has-feedback` or have it as an ancestor",
            offenders,
        )


class FormGroupWithFormInlineRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E035"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Neither `.form-inline` should be used directly on a `.form-group`. "
            "Instead, nest the `.form-group` within the `.form-inline`.",
            document.select(".form-group.form-inline"),
        )


class FormControlOnWrongControlRule(LintRule):
    """
    `.form-control` belongs on `<input>`, `<textarea>` and `<select>`, and on
    `<input>`s only when their type is textual.
    """

    @property
    def rule_id(self) -> str:
        return "E042"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.form-control` should only be used on `<input>`s, `<textarea>`s, and `<select>`s.",
            document.select(".form-control:not(input, textarea, select)"),
        )

        textual = ", ".join(f'[type="{input_type}"]' for input_type in TEXTUAL_INPUT_TYPES)
        self.report_if_any(
            report,
            "`.form-control` cannot be used on non-textual `<input>`s, such as those whose "
            "`type` is: `file`, `checkbox`, `radio`, `range`, `button`",
            document.select(f"input.form-control:not({textual})"),
        )


class InputGroupAddonChildrenRule(LintRule):
    """An `.input-group` needs a `.form-control` child and a prepend/append child."""

    @property
    def rule_id(self) -> str:
        return "E044"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            group for group in document.select(".input-group")
            if not document.get_children(group, ".form-control")
            or not document.get_children(group, ".input-group-prepend, .input-group-append")
        ]
        self.report_if_any(
            report,
            "`.input-group` must have a `.form-control` and either an "
            "`.input-group-prepend` or `.input-group-append`.",
            offenders,
        )


class NestedFormGroupsRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E050"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.form-group`s should not be nested.",
            document.select(".form-group > .form-group"),
        )


class InputsMissingTypeRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "W017"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Found one or more `<input>`s missing a `type` attribute.",
            document.select("input:not([type])"),
        )


FORM_RULES = (
    InputGroupControlTypesRule,
    InputGroupSizingRule,
    MultipleFormControlsRule,
    InputGroupMixedWithFormGroupRule,
    BlockCheckboxesRule,
    BlockRadiosRule,
    InlineCheckboxesRule,
    InlineRadiosRule,
    FeedbackWithoutHasFeedbackRule,
    FormGroupWithFormInlineRule,
    FormControlOnWrongControlRule,
    InputGroupAddonChildrenRule,
    NestedFormGroupsRule,
    InputsMissingTypeRule,
)
