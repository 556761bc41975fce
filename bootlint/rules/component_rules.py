"""
Component rules - Checks on cards, modals, alerts, carousels, navbars,
media objects and the tooltip/popover plugins.

Rules:
- E022 ModalsWithinOtherComponentsRule
- E023 CardBodyWithoutCardRule
- E024 CardHeaderWithoutCardRule
- E025 CardFooterWithoutCardRule
- E026 CardTitleWithoutCardRule
- E032 ModalStructureRule
- E033 AlertMissingDismissibleRule
- E038 MediaPullsRule
- E039 NavbarPullsRule
- E041 CarouselStructureRule
- E043 NavbarNavAnchorButtonsRule
- E045 ImgFluidOnNonImgsRule
- E046 ModalTabIndexRule
- E048 ModalRoleRule
- E049 ModalDialogRoleRule
- W004 RemoteModalsRule
- W006 TooltipsOnDisabledElementsRule
- W008 TooltipsInButtonGroupsRule
- W014 CarouselControlsRule (one problem per control)
"""

import logging
from typing import List, Optional

from bs4 import Tag
from soupsieve import SelectorSyntaxError

from ..analyzers.dom_parser import DOMParser
from .base_rule import LintRule, Report


logger = logging.getLogger(__name__)


# (child selector, required parent selector, message)
MODAL_STRUCTURE = (
    (".modal-dialog", ".modal", "`.modal-dialog` must be a child of `.modal`"),
    (".modal-content", ".modal-dialog", "`.modal-content` must be a child of `.modal-dialog`"),
    (".modal-header", ".modal-content", "`.modal-header` must be a child of `.modal-content`"),
    (".modal-body", ".modal-content", "`.modal-body` must be a child of `.modal-content`"),
    (".modal-footer", ".modal-content", "`.modal-footer` must be a child of `.modal-content`"),
    (".modal-title", ".modal-header", "`.modal-title` must be a child of `.modal-header`"),
)

DISABLED_WITH_TOOLTIPS = ",".join([
    '[disabled][data-toggle="tooltip"]',
    '.disabled[data-toggle="tooltip"]',
    '[disabled][data-toggle="popover"]',
    '.disabled[data-toggle="popover"]',
])


class ModalsWithinOtherComponentsRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E022"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Modal markup should not be placed within other components, so as to avoid the "
            "component's styles interfering with the modal's appearance or functionality",
            document.select(".table .modal, .navbar .modal"),
        )


class CardPartRule(LintRule):
    """
    Base for card sub-part rules.

    A sub-part must have exactly one `.card` among itself and its ancestors:
    none means it is unattached, more than one means the nesting is ambiguous.
    """

    part_selector: str = ""
    message: str = ""

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            part for part in document.select(self.part_selector)
            if document.count_matching_ancestors(part, ".card", include_self=True) != 1
        ]
        self.report_if_any(report, self.message, offenders)


class CardBodyWithoutCardRule(CardPartRule):
    part_selector = ".card-body"
    message = "`.card-body` must have `.card` or have it as an ancestor."

    @property
    def rule_id(self) -> str:
        return "E023"


class CardHeaderWithoutCardRule(CardPartRule):
    part_selector = ".card-header"
    message = "`.card-header` must have one `.card` ancestor."

    @property
    def rule_id(self) -> str:
        return "E024"


class CardFooterWithoutCardRule(CardPartRule):
    part_selector = ".card-footer"
    message = "`.card-footer` must have one `.card` ancestor."

    @property
    def rule_id(self) -> str:
        return "E025"


class CardTitleWithoutCardRule(CardPartRule):
    part_selector = ".card-title"
    message = "`.card-title` must have one `.card` ancestor."

    @property
    def rule_id(self) -> str:
        return "E026"


class ModalStructureRule(LintRule):
    """
    Modal parts must be nested in the fixed modal hierarchy.

    The problem references the misplaced part's parent, once per parent.
    """

    @property
    def rule_id(self) -> str:
        return "E032"

    def check(self, document: DOMParser, report: Report) -> None:
        for child_selector, parent_selector, message in MODAL_STRUCTURE:
            parents: List[Tag] = []
            for child in document.select(child_selector):
                parent = document.parent(child)
                if parent is None or document.matches(parent, parent_selector):
                    continue
                if not any(parent is seen for seen in parents):
                    parents.append(parent)
            self.report_if_any(report, message, parents)


class AlertMissingDismissibleRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E033"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.alert` with dismiss button must have class `.alert-dismissible`",
            document.select('.alert:not(.alert-dismissible):has([data-dismiss="alert"])'),
        )


class MediaPullsRule(LintRule):
    """`.media-left`/`.media-right` must sit inside a `.media` object."""

    @property
    def rule_id(self) -> str:
        return "E038"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            element for element in document.select(".media-left, .media-right")
            if not _parent_within(document, element, ".media")
        ]
        self.report_if_any(
            report,
            "`.media-left` and `.media-right` should not be used outside of `.media` objects.",
            offenders,
        )


class NavbarPullsRule(LintRule):
    """`.navbar-left`/`.navbar-right` must sit inside a `.navbar`."""

    @property
    def rule_id(self) -> str:
        return "E039"

    def check(self, document: DOMParser, report: Report) -> None:
        offenders = [
            element for element in document.select(".navbar-left, .navbar-right")
            if not _parent_within(document, element, ".navbar")
        ]
        self.report_if_any(
            report,
            "`.navbar-left` and `.navbar-right` should not be used outside of navbars.",
            offenders,
        )


def _parent_within(document: DOMParser, element: Tag, selector: str) -> bool:
    """Check if the element's parent, or one of its ancestors, matches a selector."""
    parent = document.parent(element)
    return parent is not None and document.closest(parent, selector) is not None


class CarouselStructureRule(LintRule):
    """
    A `.carousel` needs exactly one `.carousel-inner`, which in turn needs
    exactly one active item.
    """

    @property
    def rule_id(self) -> str:
        return "E041"

    def check(self, document: DOMParser, report: Report) -> None:
        wrong_inners = [
            carousel for carousel in document.select(".carousel")
            if len(document.get_children(carousel, ".carousel-inner")) != 1
        ]
        self.report_if_any(
            report, "`.carousel` must have exactly one `.carousel-inner` child.", wrong_inners
        )

        wrong_active_items = [
            inner for inner in document.select(".carousel-inner")
            if len(document.get_children(inner, ".item.active")) != 1
        ]
        self.report_if_any(
            report,
            "`.carousel-inner` must have exactly one `.item.active` child.",
            wrong_active_items,
        )


class NavbarNavAnchorButtonsRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E043"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Button classes (`.btn`, `.btn-*`, `.navbar-btn`) cannot be used on `<a>`s "
            "within `.navbar-nav`s.",
            document.select(".navbar-nav a.btn, .navbar-nav a.navbar-btn"),
        )


class ImgFluidOnNonImgsRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E045"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.img-fluid` should only be used on `<img>`s",
            document.select(".img-fluid:not(img)"),
        )


class ModalTabIndexRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E046"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "`.modal` elements must have a `tabindex` attribute.",
            document.select(".modal:not([tabindex])"),
        )


class ModalRoleRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E048"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            '`.modal` must have a `role="dialog"` attribute.',
            document.select('.modal:not([role="dialog"])'),
        )


class ModalDialogRoleRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "E049"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            '`.modal-dialog` must have a `role="document"` attribute.',
            document.select('.modal-dialog:not([role="document"])'),
        )


class RemoteModalsRule(LintRule):
    """The modal `remote` option was removed."""

    @property
    def rule_id(self) -> str:
        return "W004"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Found one or more modals using the removed `remote` option",
            document.select('[data-toggle="modal"][data-remote]'),
        )


class TooltipsOnDisabledElementsRule(LintRule):
    """Tooltips and popovers on disabled elements never trigger."""

    @property
    def rule_id(self) -> str:
        return "W006"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Tooltips and popovers on disabled elements cannot be triggered by user "
            "interaction unless the element becomes enabled. To have tooltips and popovers "
            "be triggerable by the user even when their associated element is disabled, put "
            "the disabled element inside a wrapper `<div>` and apply the tooltip or popover "
            "to the wrapper `<div>` instead.",
            document.select(DISABLED_WITH_TOOLTIPS),
        )


class TooltipsInButtonGroupsRule(LintRule):
    @property
    def rule_id(self) -> str:
        return "W008"

    def check(self, document: DOMParser, report: Report) -> None:
        self.report_if_any(
            report,
            "Tooltips and popovers within button groups should have their `container` set to "
            "`'body'`. Found tooltips/popovers that might lack this setting.",
            document.select(
                '.btn-group [data-toggle="tooltip"]:not([data-container="body"]), '
                '.btn-group [data-toggle="popover"]:not([data-container="body"])'
            ),
        )


class CarouselControlsRule(LintRule):
    """
    Carousel controls and indicators must target a `.carousel`.

    The target is the control's `href`, falling back to `data-target`, used
    as a selector. A target that is not a valid selector references nothing.
    """

    @property
    def rule_id(self) -> str:
        return "W014"

    def check(self, document: DOMParser, report: Report) -> None:
        for control in document.select(".carousel-indicators > li, .carousel-control"):
            target = (
                document.get_attribute(control, "href")
                or document.get_attribute(control, "data-target")
            )
            carousels = self._resolve_target(document, target)
            if not carousels or not all(document.has_class(c, "carousel") for c in carousels):
                report(
                    "Carousel controls and indicators should use `href` or `data-target` to "
                    "reference an element with class `.carousel`.",
                    [control],
                )

    @staticmethod
    def _resolve_target(document: DOMParser, target: Optional[str]) -> List[Tag]:
        if not target:
            return []
        try:
            return document.select(target)
        except SelectorSyntaxError:
            logger.debug(f"Carousel control target {target!r} is not a selector")
            return []


COMPONENT_RULES = (
    ModalsWithinOtherComponentsRule,
    CardBodyWithoutCardRule,
    CardHeaderWithoutCardRule,
    CardFooterWithoutCardRule,
    CardTitleWithoutCardRule,
    ModalStructureRule,
    AlertMissingDismissibleRule,
    MediaPullsRule,
    NavbarPullsRule,
    CarouselStructureRule,
    NavbarNavAnchorButtonsRule,
    ImgFluidOnNonImgsRule,
    ModalTabIndexRule,
    ModalRoleRule,
    ModalDialogRoleRule,
    RemoteModalsRule,
    TooltipsOnDisabledElementsRule,
    TooltipsInButtonGroupsRule,
    CarouselControlsRule,
)
