"""
Tests for component rules (cards, modals, alerts, carousels, navbars,
media objects, tooltips and popovers).
"""

import pytest

from bootlint.rules.component_rules import (
    AlertMissingDismissibleRule,
    CardBodyWithoutCardRule,
    CardFooterWithoutCardRule,
    CardHeaderWithoutCardRule,
    CardTitleWithoutCardRule,
    CarouselControlsRule,
    CarouselStructureRule,
    ImgFluidOnNonImgsRule,
    MediaPullsRule,
    ModalDialogRoleRule,
    ModalRoleRule,
    ModalStructureRule,
    ModalTabIndexRule,
    ModalsWithinOtherComponentsRule,
    NavbarNavAnchorButtonsRule,
    NavbarPullsRule,
    RemoteModalsRule,
    TooltipsInButtonGroupsRule,
    TooltipsOnDisabledElementsRule,
)


VALID_MODAL = (
    '<div class="modal" tabindex="-1" role="dialog">'
    '<div class="modal-dialog" role="document">'
    '<div class="modal-content">'
    '<div class="modal-header"><h5 class="modal-title">T</h5></div>'
    '<div class="modal-body"></div>'
    '<div class="modal-footer"></div>'
    "</div></div></div>"
)

MODAL_RULES = (
    ModalStructureRule,
    ModalTabIndexRule,
    ModalRoleRule,
    ModalDialogRoleRule,
    ModalsWithinOtherComponentsRule,
)


# =============================================================================
# Cards
# =============================================================================


class TestCardRules:
    """Tests for E023-E026: exactly one `.card` among the element and its ancestors."""

    CARD_CASES = [
        (CardBodyWithoutCardRule, "card-body"),
        (CardHeaderWithoutCardRule, "card-header"),
        (CardFooterWithoutCardRule, "card-footer"),
        (CardTitleWithoutCardRule, "card-title"),
    ]

    @pytest.mark.parametrize("rule,part", CARD_CASES)
    def test_inside_card(self, page, lint_with, rule, part):
        html = page(f'<div class="card"><div><div class="{part}"></div></div></div>')
        assert lint_with(rule, html) == []

    @pytest.mark.parametrize("rule,part", CARD_CASES)
    def test_outside_card(self, page, lint_with, rule, part):
        problems = lint_with(rule, page(f'<div class="{part}"></div>'))
        assert len(problems) == 1
        assert problems[0].message.startswith(f"`.{part}` must have")

    @pytest.mark.parametrize("rule,part", CARD_CASES)
    def test_nested_cards_are_ambiguous(self, page, lint_with, rule, part):
        html = page(f'<div class="card"><div class="card"><div class="{part}"></div></div></div>')
        assert len(lint_with(rule, html)) == 1

    def test_card_body_on_card_itself(self, page, lint_with):
        assert lint_with(CardBodyWithoutCardRule, page('<div class="card card-body"></div>')) == []

    def test_title_problem_references_titles(self, page, lint_with):
        html = page('<h5 class="card-title" id="t1"></h5><h5 class="card-title" id="t2"></h5>')
        problems = lint_with(CardTitleWithoutCardRule, html)
        assert [ref.element.get("id") for ref in problems[0].elements] == ["t1", "t2"]


# =============================================================================
# Modals
# =============================================================================


class TestModalRules:
    """Tests for E022, E032, E046, E048 and E049."""

    def test_valid_modal(self, page, lint_with):
        for rule in MODAL_RULES:
            assert lint_with(rule, page(VALID_MODAL)) == [], rule.__name__

    def test_content_outside_dialog(self, page, lint_with):
        html = page(
            '<div class="modal" id="m" tabindex="-1" role="dialog">'
            '<div class="modal-content"></div></div>'
        )
        problems = lint_with(ModalStructureRule, html)
        assert [p.message for p in problems] == ["`.modal-content` must be a child of `.modal-dialog`"]
        assert [ref.element.get("id") for ref in problems[0].elements] == ["m"]

    def test_shared_parent_reported_once(self, page, lint_with):
        html = page(
            '<div class="modal-dialog" role="document" id="d">'
            '<div class="modal-header"></div><div class="modal-header"></div>'
            '<div class="modal-body"></div>'
            "</div>"
        )
        problems = lint_with(ModalStructureRule, html)
        messages = [p.message for p in problems]
        assert messages == [
            "`.modal-dialog` must be a child of `.modal`",
            "`.modal-header` must be a child of `.modal-content`",
            "`.modal-body` must be a child of `.modal-content`",
        ]
        assert [ref.name for ref in problems[0].elements] == ["body"]
        assert [ref.element.get("id") for ref in problems[1].elements] == ["d"]

    def test_missing_attributes(self, page, lint_with):
        html = page('<div class="modal"><div class="modal-dialog"></div></div>')
        assert len(lint_with(ModalTabIndexRule, html)) == 1
        assert lint_with(ModalRoleRule, html)[0].message == '`.modal` must have a `role="dialog"` attribute.'
        assert len(lint_with(ModalDialogRoleRule, html)) == 1

    def test_modal_inside_navbar(self, page, lint_with):
        html = page(f'<nav class="navbar">{VALID_MODAL}</nav>')
        problems = lint_with(ModalsWithinOtherComponentsRule, html)
        assert [ref.element.get("class") for ref in problems[0].elements] == [["modal"]]

    def test_remote_modal(self, page, lint_with):
        html = page('<a data-toggle="modal" data-remote="/x" href="#m">x</a>')
        problems = lint_with(RemoteModalsRule, html)
        assert [p.message for p in problems] == [
            "Found one or more modals using the removed `remote` option"
        ]


# =============================================================================
# Alerts, navbars, media, images
# =============================================================================


class TestMiscComponentRules:
    """Tests for E033, E038, E039, E043 and E045."""

    def test_dismissible_alert(self, page, lint_with):
        valid = page(
            '<div class="alert alert-dismissible"><button type="button" data-dismiss="alert"></button></div>'
        )
        invalid = page('<div class="alert"><button type="button" data-dismiss="alert"></button></div>')
        assert lint_with(AlertMissingDismissibleRule, valid) == []
        assert len(lint_with(AlertMissingDismissibleRule, invalid)) == 1

    def test_media_pulls(self, page, lint_with):
        html = page(
            '<div class="media"><div><div class="media-left" id="ok"></div></div></div>'
            '<div class="media-right" id="bad"></div>'
            '<div class="media media-left" id="self"></div>'
        )
        problems = lint_with(MediaPullsRule, html)
        assert [ref.element.get("id") for ref in problems[0].elements] == ["bad", "self"]

    def test_navbar_pulls(self, page, lint_with):
        html = page('<ul class="nav navbar-right"></ul>')
        problems = lint_with(NavbarPullsRule, html)
        assert problems[0].message == (
            "`.navbar-left` and `.navbar-right` should not be used outside of navbars."
        )

    def test_anchor_buttons_in_navbar_nav(self, page, lint_with):
        html = page(
            '<ul class="navbar-nav"><li><a class="btn" href="#">a</a></li>'
            '<li><button type="button" class="btn">b</button></li></ul>'
        )
        problems = lint_with(NavbarNavAnchorButtonsRule, html)
        assert [ref.name for ref in problems[0].elements] == ["a"]

    def test_img_fluid(self, page, lint_with):
        html = page('<img class="img-fluid" src="a.png" alt=""><div class="img-fluid"></div>')
        problems = lint_with(ImgFluidOnNonImgsRule, html)
        assert [ref.name for ref in problems[0].elements] == ["div"]


# =============================================================================
# Carousels
# =============================================================================


class TestCarouselRules:
    """Tests for E041 and W014."""

    def test_valid_structure(self, page, lint_with):
        html = page(
            '<div class="carousel" id="c"><div class="carousel-inner">'
            '<div class="item active"></div><div class="item"></div>'
            "</div></div>"
        )
        assert lint_with(CarouselStructureRule, html) == []

    def test_missing_inner(self, page, lint_with):
        problems = lint_with(CarouselStructureRule, page('<div class="carousel"></div>'))
        assert [p.message for p in problems] == [
            "`.carousel` must have exactly one `.carousel-inner` child."
        ]

    def test_wrong_active_items(self, page, lint_with):
        html = page(
            '<div class="carousel"><div class="carousel-inner">'
            '<div class="item active"></div><div class="item active"></div>'
            "</div></div>"
        )
        problems = lint_with(CarouselStructureRule, html)
        assert [p.message for p in problems] == [
            "`.carousel-inner` must have exactly one `.item.active` child."
        ]

    def test_controls_target_carousel(self, page, lint_with):
        html = page(
            '<div class="carousel slide" id="myCarousel">'
            '<ol class="carousel-indicators"><li data-target="#myCarousel" data-slide-to="0"></li></ol>'
            '<a class="carousel-control" href="#myCarousel" data-slide="prev"></a>'
            "</div>"
        )
        assert lint_with(CarouselControlsRule, html) == []

    def test_controls_with_bad_targets(self, page, lint_with):
        html = page(
            '<div id="notCarousel"></div>'
            '<ol class="carousel-indicators">'
            '<li data-target="#missing"></li>'
            '<li data-target="#notCarousel"></li>'
            "<li></li>"
            '<li data-target="!!!"></li>'
            "</ol>"
        )
        problems = lint_with(CarouselControlsRule, html)
        assert len(problems) == 4
        assert all(len(p.elements) == 1 for p in problems)
        assert problems[0].message == (
            "Carousel controls and indicators should use `href` or `data-target` to "
            "reference an element with class `.carousel`."
        )


# =============================================================================
# Tooltips and popovers
# =============================================================================


class TestTooltipRules:
    """Tests for W006 and W008."""

    def test_tooltip_on_disabled_element(self, page, lint_with):
        html = page(
            '<button type="button" disabled data-toggle="tooltip" title="t"></button>'
            '<a class="disabled" data-toggle="popover" href="#">x</a>'
            '<button type="button" data-toggle="tooltip" title="t"></button>'
        )
        problems = lint_with(TooltipsOnDisabledElementsRule, html)
        assert len(problems[0].elements) == 2

    def test_tooltip_in_button_group(self, page, lint_with):
        html = page(
            '<div class="btn-group">'
            '<button type="button" class="btn" data-toggle="tooltip" id="a"></button>'
            '<button type="button" class="btn" data-toggle="tooltip" data-container="body"></button>'
            "</div>"
        )
        problems = lint_with(TooltipsInButtonGroupsRule, html)
        assert [ref.element.get("id") for ref in problems[0].elements] == ["a"]
