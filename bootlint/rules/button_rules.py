"""
Button rules - Checks on `.btn` usage and the buttons plugin.

Rules:
- E016 DropdownToggleLastRule
- E021 ButtonsCheckedActiveRule
- E047 BtnElementsRule
- W007 ButtonTypeRule
- W016 DisabledClassOnButtonRule
"""

from ..analyzers.dom_parser import DOMParser
from .base_rule import LintRule, Report


MISMATCHED_BUTTON_INPUTS = ",".join([
    '[data-toggle="buttons"]>label:not(.active)>input[type="checkbox"][checked]',
    '[data-toggle="buttons"]>label.active>input[type="checkbox"]:not([checked])',
    '[data-toggle="buttons"]>label:not(.active)>input[type="radio"][checked]',
    '[data-toggle="buttons"]>label.active>input[type="radio"]:not([checked])',
])


class DropdownToggleLastRule(LintRule):
    """`.btn.dropdown-toggle` must be the last button in its group."""

    @property
    def rule_id(self) -> str:
        return "E016"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.btn.dropdown-toggle` must be the last button in a button group.",
            document.select(".btn.dropdown-toggle ~ .btn"),
        )


class ButtonsCheckedActiveRule(LintRule):
    """
    In a `data-toggle="buttons"` group, `label.active` and the `checked`
    attribute of the wrapped input must agree.
    """

    @property
    def rule_id(self) -> str:
        return "E021"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.active` class used without the `checked` attribute (or vice-versa) "
            "in a button group using the button.js plugin",
            document.select(MISMATCHED_BUTTON_INPUTS),
        )


class BtnElementsRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E047"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.btn` should only be used on `<a>`, `<button>`, `<input>`, or `<label>` elements.",
            document.select(".btn:not(a, button, input, label)"),
        )


class ButtonTypeRule(LintRule):
    """`<button>`s should declare an explicit, valid `type`."""

    @property
    def rule_id(self) -> str:
        return "W007"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Found one or more `<button>`s missing a `type` attribute.",
            document.select('button:not([type="submit"], [type="reset"], [type="button"])'),
        )


class DisabledClassOnButtonRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "W016"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Using the `.disabled` class on a `<button>` or `<input>` only changes the "
            "appearance of the element. It doesn't prevent the user from interacting with "
            "the element (for example, clicking on it or focusing it). If you want to truly "
            "disable the element, use the `disabled` attribute instead.",
            document.select("button.btn.disabled, input.btn.disabled"),
        )


BUTTON_RULES = (
    DropdownToggleLastRule,
    ButtonsCheckedActiveRule,
    BtnElementsRule,
    ButtonTypeRule,
    DisabledClassOnButtonRule,
)
