"""Tests for the Client-First rules."""

import pytest

from flowlint.grammar import CLIENT_FIRST_GRAMMAR
from flowlint.model.element import ElementRole
from flowlint.model.result import QuickFix, Severity
from flowlint.model.rule import ElementClass, ElementContext, NamingContext, PropertyContext
from flowlint.model.style import StyleInfo
from flowlint.rules.client_first import (
    create_class_format_rule,
    create_combo_not_alone_rule,
    create_containers_clean_rule,
    create_nav_outside_main_rule,
    create_no_padding_on_inner_rule,
    create_no_utilities_on_root_rule,
    create_padding_section_requires_global_rule,
    create_prefer_rem_rule,
    create_utility_no_underscore_rule,
    create_variant_is_prefix_rule,
)
from flowlint.rules.client_first.property import px_to_rem
from flowlint.styles.index import PropertyIndex


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _element(*names: str, role: ElementRole = ElementRole.UNKNOWN, styles=()) -> ElementContext:
    property_context = None
    if styles:
        property_context = PropertyContext(all_styles=tuple(styles), index=PropertyIndex(styles))
    return ElementContext(
        element_id="e1",
        classes=tuple(
            ElementClass(name=n, order=i, kind=CLIENT_FIRST_GRAMMAR.classify(n))
            for i, n in enumerate(names)
        ),
        property_context=property_context,
        get_role_for_element=lambda eid: role,
    )


def _empty_property_context() -> PropertyContext:
    return PropertyContext(all_styles=(), index=PropertyIndex([]))


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------

class TestClassFormat:
    def setup_method(self):
        self.rule = create_class_format_rule()

    @pytest.mark.parametrize(
        "name", ["hero-header_content", "footer_link-list", "button", "padding-global"]
    )
    def test_valid(self, name):
        assert self.rule.test(name)

    def test_too_many_underscores(self):
        result = self.rule.evaluate("hero_header_content", NamingContext())
        assert "more than one underscore" in result.message
        assert result.fix == QuickFix.rename("hero_header_content", "hero_header-content")

    def test_not_kebab_case(self):
        assert not self.rule.test("HeroHeader")
        result = self.rule.evaluate("HeroHeader", NamingContext())
        assert "kebab-case" in result.message
        assert result.fix.to_name == "heroheader"


class TestVariantIsPrefix:
    def test_valid(self):
        assert create_variant_is_prefix_rule().test("is-brand")

    def test_uppercase_variant(self):
        rule = create_variant_is_prefix_rule()
        assert rule.severity is Severity.WARNING
        result = rule.evaluate("is-Brand", NamingContext())
        assert result.is_combo
        assert result.fix.to_name == "is-brand"


class TestUtilityNoUnderscore:
    def test_global_rename(self):
        rule = create_utility_no_underscore_rule()
        assert not rule.test("u-text_large")
        result = rule.evaluate("u-text_large", NamingContext())
        assert result.fix == QuickFix.rename("u-text_large", "u-text-large", scope="global")

    def test_valid(self):
        assert create_utility_no_underscore_rule().test("u-text-large")


# ---------------------------------------------------------------------------
# Property
# ---------------------------------------------------------------------------

class TestPreferRem:
    def test_px_to_rem(self):
        assert px_to_rem(16) == "1rem"
        assert px_to_rem(20) == "1.25rem"
        assert px_to_rem(10) == "0.625rem"

    def test_flags_px_sizing(self):
        rule = create_prefer_rem_rule()
        results = rule.analyze(
            "hero_content",
            {"font-size": "20px", "border-width": "1px", "color": "red", "padding": "1rem"},
            _empty_property_context(),
        )
        assert len(results) == 1
        assert results[0].metadata["property"] == "font-size"
        assert results[0].metadata["suggestedValue"] == "1.25rem"

    def test_non_sizing_px_ignored(self):
        rule = create_prefer_rem_rule()
        assert rule.analyze("x", {"box-shadow": "0 4px 8px red"}, _empty_property_context()) == []


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------

class TestComboNotAlone:
    def test_combo_alone(self):
        (result,) = create_combo_not_alone_rule().analyze_element(_element("is-brand"))
        assert result.class_name == "is-brand"
        assert '"button is-brand"' in result.message

    def test_with_base(self):
        assert create_combo_not_alone_rule().analyze_element(_element("button", "is-brand")) == []

    def test_component_is_not_a_base(self):
        results = create_combo_not_alone_rule().analyze_element(_element("c-card", "is-brand"))
        assert len(results) == 1


class TestNoUtilitiesOnRoot:
    def test_root_with_utilities(self):
        ctx = _element("hero_wrapper", "u-padding-small", role=ElementRole.COMPONENT_ROOT)
        (result,) = create_no_utilities_on_root_rule().analyze_element(ctx)
        assert result.class_name == "u-padding-small"

    def test_other_roles_ignored(self):
        ctx = _element("hero_content", "u-padding-small", role=ElementRole.CONTENT)
        assert create_no_utilities_on_root_rule().analyze_element(ctx) == []


class TestNoPaddingOnInner:
    def test_padding_utility_on_child_group(self):
        styles = [
            StyleInfo(id="1", name="u-padding-small", properties={"padding-top": "1rem"}),
            StyleInfo(id="2", name="u-hide", properties={"display": "none"}),
        ]
        ctx = _element(
            "card_content-wrapper", "u-padding-small", "u-hide",
            role=ElementRole.CHILD_GROUP, styles=styles,
        )
        (result,) = create_no_padding_on_inner_rule().analyze_element(ctx)
        assert result.class_name == "u-padding-small"

    def test_without_property_context(self):
        ctx = _element("card_content-wrapper", "u-padding-small", role=ElementRole.CHILD_GROUP)
        assert create_no_padding_on_inner_rule().analyze_element(ctx) == []


class TestContainersClean:
    STYLES = [
        StyleInfo(id="1", name="u-padding-medium", properties={"padding-top": "2rem"}),
        StyleInfo(id="2", name="u-gap", properties={"row-gap": "1rem"}),
        StyleInfo(id="3", name="u-hide", properties={"display": "none"}),
    ]

    def test_spacing_utilities_on_container(self):
        ctx = _element(
            "container-large", "u-padding-medium", "u-gap", "u-hide",
            role=ElementRole.CONTAINER, styles=self.STYLES,
        )
        results = create_containers_clean_rule().analyze_element(ctx)
        assert [r.class_name for r in results] == ["u-padding-medium", "u-gap"]

    def test_component_root(self):
        ctx = _element(
            "hero_wrapper", "u-padding-medium", role=ElementRole.COMPONENT_ROOT, styles=self.STYLES
        )
        assert len(create_containers_clean_rule().analyze_element(ctx)) == 1

    def test_inner_elements_ignored(self):
        ctx = _element(
            "hero_content", "u-padding-medium", role=ElementRole.CONTENT, styles=self.STYLES
        )
        assert create_containers_clean_rule().analyze_element(ctx) == []


class TestNavOutsideMain:
    def _context(self, *names, tag=None, ancestor_roles=(), ancestor_classes=()):
        ancestors = [f"a{i}" for i in range(max(len(ancestor_roles), len(ancestor_classes)))]
        roles = dict(zip(ancestors, ancestor_roles))
        classes = dict(zip(ancestors, ancestor_classes))
        return ElementContext(
            element_id="n1",
            classes=tuple(
                ElementClass(name=n, order=i, kind=CLIENT_FIRST_GRAMMAR.classify(n))
                for i, n in enumerate(names)
            ),
            get_role_for_element=lambda eid: roles.get(eid, ElementRole.UNKNOWN),
            get_ancestor_ids=lambda eid: list(ancestors),
            get_tag_name=lambda eid: tag,
            get_class_names_for_element=lambda eid: list(classes.get(eid, [])),
        )

    def test_nav_tag_inside_main(self):
        ctx = self._context(
            "navbar_component", tag="nav",
            ancestor_roles=(ElementRole.SECTION, ElementRole.MAIN),
        )
        (result,) = create_nav_outside_main_rule().analyze_element(ctx)
        assert '"<nav>"' in result.message
        assert result.metadata["detectedBy"] == "tag"
        assert result.element_id == "n1"

    def test_nav_class_under_main_wrapper_class(self):
        ctx = self._context("navbar_component", ancestor_classes=(["main-wrapper"],))
        (result,) = create_nav_outside_main_rule().analyze_element(ctx)
        assert result.class_name == "navbar_component"
        assert result.metadata["detectedBy"] == "class"

    def test_nav_outside_main(self):
        ctx = self._context("navbar_component", tag="nav", ancestor_roles=(ElementRole.UNKNOWN,))
        assert create_nav_outside_main_rule().analyze_element(ctx) == []

    def test_not_a_nav(self):
        ctx = self._context("hero_content", tag="div", ancestor_roles=(ElementRole.MAIN,))
        assert create_nav_outside_main_rule().analyze_element(ctx) == []


class TestPaddingSectionRequiresGlobal:
    def test_missing_padding_global(self):
        (result,) = create_padding_section_requires_global_rule().analyze_element(
            _element("padding-section-medium")
        )
        assert result.class_name == "padding-section-medium"
        assert result.fix == QuickFix.add("padding-global")
        assert result.to_dict()["fix"] == {
            "kind": "add-class",
            "scope": "element",
            "className": "padding-global",
        }

    def test_with_padding_global(self):
        ctx = _element("padding-global", "padding-section-medium")
        assert create_padding_section_requires_global_rule().analyze_element(ctx) == []

    def test_no_padding_section(self):
        rule = create_padding_section_requires_global_rule()
        assert rule.analyze_element(_element("button")) == []
