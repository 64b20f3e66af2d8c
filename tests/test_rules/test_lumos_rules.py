"""Tests for the Lumos naming, composition and property rules."""

from flowlint.grammar import LUMOS_GRAMMAR
from flowlint.model.result import QuickFix, Severity
from flowlint.model.rule import ElementClass, ElementContext, NamingContext, PropertyContext
from flowlint.model.style import StyleInfo
from flowlint.rules.lumos import (
    create_class_format_rule,
    create_class_order_rule,
    create_combo_class_format_rule,
    create_combo_limit_rule,
    create_exact_duplicate_rule,
    create_utility_duplicate_properties_rule,
    create_variant_requires_base_rule,
)
from flowlint.styles.index import PropertyIndex


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _element(*names: str, rule=None, **config) -> ElementContext:
    settings = rule.default_settings() if rule is not None else {}
    settings.update(config)
    return ElementContext(
        element_id="e1",
        classes=tuple(
            ElementClass(name=n, order=i, kind=LUMOS_GRAMMAR.classify(n))
            for i, n in enumerate(names)
        ),
        config=settings,
    )


def _property_context(*styles: StyleInfo) -> PropertyContext:
    return PropertyContext(all_styles=tuple(styles), index=PropertyIndex(styles))


def _style(name: str, **properties) -> StyleInfo:
    return StyleInfo(id=name, name=name, properties=properties)


# ---------------------------------------------------------------------------
# lumos:naming:class-format
# ---------------------------------------------------------------------------

class TestClassFormat:
    def setup_method(self):
        self.rule = create_class_format_rule()

    def test_valid_names_pass(self):
        for name in ["hero_wrap", "footer_link_wrap", "hero_secondary_content_wrap"]:
            assert self.rule.test(name)
            assert self.rule.evaluate(name, NamingContext()) is None

    def test_single_segment(self):
        assert not self.rule.test("foo")
        result = self.rule.evaluate("foo", NamingContext())
        assert result.severity is Severity.ERROR
        assert "at least 2 segments" in result.message
        assert result.class_name == "foo"

    def test_invalid_characters_offer_rename(self):
        result = self.rule.evaluate("Hero-Wrap", NamingContext())
        assert result.severity is Severity.ERROR
        assert "invalid characters" in result.message
        assert result.fix == QuickFix.rename("Hero-Wrap", "hero_wrap")

    def test_empty_segment(self):
        result = self.rule.evaluate("hero__wrap", NamingContext())
        assert "empty segments" in result.message
        assert result.fix.to_name == "hero_wrap"

    def test_unrecognized_element_is_suggestion(self):
        result = self.rule.evaluate("hero_flag", NamingContext())
        assert result.severity is Severity.SUGGESTION
        assert result.metadata == {"unrecognizedElement": "flag"}

    def test_project_defined_element(self):
        result = self.rule.evaluate(
            "hero_flag", NamingContext(config={"projectDefinedElements": ["flag"]})
        )
        assert result.severity is Severity.SUGGESTION
        assert "project-defined" in result.message

    def test_schema_default(self):
        assert self.rule.default_settings() == {"projectDefinedElements": []}


# ---------------------------------------------------------------------------
# lumos:naming:combo-class-format
# ---------------------------------------------------------------------------

class TestComboClassFormat:
    def setup_method(self):
        self.rule = create_combo_class_format_rule()

    def test_valid(self):
        for name in ["is-active", "is-large-2", "u-hidden"]:
            assert self.rule.test(name)

    def test_underscore_variant_renamed(self):
        assert not self.rule.test("is_active")
        result = self.rule.evaluate("is_active", NamingContext())
        assert result.fix == QuickFix.rename("is_active", "is-active")
        assert result.is_combo

    def test_camel_case_variant_renamed(self):
        result = self.rule.evaluate("isActive", NamingContext())
        assert result.fix.to_name == "is-active"

    def test_component_is_not_a_combo(self):
        result = self.rule.evaluate("c-card", NamingContext())
        assert "Component base classes" in result.message
        assert result.fix is None

    def test_malformed_utility(self):
        result = self.rule.evaluate("u-Hidden", NamingContext())
        assert result.fix.to_name == "u-hidden"


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

class TestClassOrder:
    def setup_method(self):
        self.rule = create_class_order_rule()

    def test_correct_order(self):
        assert self.rule.analyze_element(_element("hero_wrap", "is-active", "u-hidden")) == []

    def test_base_after_utility(self):
        (result,) = self.rule.analyze_element(_element("u-hidden", "hero_wrap"))
        assert result.class_name == "hero_wrap"
        assert "after a utility" in result.message
        assert result.fix == QuickFix.reorder(["hero_wrap", "u-hidden"])

    def test_variant_after_utility(self):
        (result,) = self.rule.analyze_element(_element("hero_wrap", "u-hidden", "is-active"))
        assert result.class_name == "is-active"
        assert result.metadata["desiredOrder"] == ["hero_wrap", "is-active", "u-hidden"]
        assert result.metadata["currentOrder"] == ["hero_wrap", "u-hidden", "is-active"]

    def test_reports_only_first_problem(self):
        results = self.rule.analyze_element(_element("u-a", "is-b", "hero_wrap"))
        assert len(results) == 1


class TestVariantRequiresBase:
    def setup_method(self):
        self.rule = create_variant_requires_base_rule()

    def test_variant_alone(self):
        (result,) = self.rule.analyze_element(_element("is-active", rule=self.rule))
        assert result.class_name == "is-active"
        assert result.metadata["variants"] == ["is-active"]

    def test_custom_base(self):
        assert self.rule.analyze_element(_element("hero_wrap", "is-active", rule=self.rule)) == []

    def test_component_base(self):
        assert self.rule.analyze_element(_element("c-card", "is-active", rule=self.rule)) == []

    def test_utility_is_not_a_base(self):
        results = self.rule.analyze_element(_element("u-hidden", "is-active", rule=self.rule))
        assert len(results) == 1

    def test_no_variants(self):
        assert self.rule.analyze_element(_element("u-hidden", rule=self.rule)) == []


class TestComboLimit:
    def setup_method(self):
        self.rule = create_combo_limit_rule()

    def test_within_limit(self):
        ctx = _element("hero_wrap", "is-a", "u-b", rule=self.rule)
        assert self.rule.analyze_element(ctx) == []

    def test_over_limit(self):
        ctx = _element("hero_wrap", "is-a", "is-b", "u-c", rule=self.rule)
        (result,) = self.rule.analyze_element(ctx)
        assert result.class_name == "u-c"
        assert 'Extra: "u-c"' in result.message
        assert result.metadata["countAfterBase"] == 3
        assert result.metadata["baseIndex"] == 0

    def test_utilities_not_counted(self):
        ctx = _element("hero_wrap", "is-a", "is-b", "u-c", rule=self.rule, countUtilities=False)
        assert self.rule.analyze_element(ctx) == []

    def test_configured_limit(self):
        ctx = _element("hero_wrap", "is-a", "is-b", rule=self.rule, maxCombos=1)
        (result,) = self.rule.analyze_element(ctx)
        assert result.class_name == "is-b"


# ---------------------------------------------------------------------------
# Property rules
# ---------------------------------------------------------------------------

class TestExactDuplicate:
    def test_identical_property_sets(self):
        rule = create_exact_duplicate_rule()
        context = _property_context(
            _style("hero_wrap", display="flex", gap="1rem"),
            _style("card_wrap", display="flex", gap="1rem"),
            _style("list_wrap", display="flex"),
        )
        (result,) = rule.analyze("hero_wrap", {"display": "flex", "gap": "1rem"}, context)
        assert result.metadata["duplicates"] == ["card_wrap"]
        assert '"card_wrap"' in result.message

    def test_unique_class(self):
        rule = create_exact_duplicate_rule()
        context = _property_context(_style("list_wrap", display="flex"))
        assert rule.analyze("list_wrap", {"display": "flex"}, context) == []


class TestUtilityDuplicateProperties:
    def test_disabled_by_default(self):
        rule = create_utility_duplicate_properties_rule()
        assert rule.enabled is False
        assert rule.severity is Severity.SUGGESTION

    def test_single_property_message(self):
        rule = create_utility_duplicate_properties_rule()
        context = _property_context(
            _style("u-mt-1", **{"margin-top": "1rem"}),
            _style("u-space", **{"margin-top": "1rem"}),
        )
        (result,) = rule.analyze("u-mt-1", {"margin-top": "1rem"}, context)
        assert result.message.startswith('"margin-top: 1rem" is also defined by u-space')
        assert result.metadata["isExactMatch"] is True
