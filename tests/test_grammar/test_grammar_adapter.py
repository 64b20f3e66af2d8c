"""Tests for the grammar adapters: classification and tokenization."""

import pytest

from flowlint.grammar import CLIENT_FIRST_GRAMMAR, LUMOS_GRAMMAR
from flowlint.model.parsed_class import ClassKind


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

class TestLumosClassify:
    @pytest.mark.parametrize(
        "name, kind",
        [
            ("u-margin-top", ClassKind.UTILITY),
            ("c-button", ClassKind.COMPONENT),
            ("is-active", ClassKind.COMBO),
            ("is_active", ClassKind.COMBO),
            ("isActive", ClassKind.COMBO),
            ("hero_wrap", ClassKind.CUSTOM),
            ("isolated_text", ClassKind.CUSTOM),
            ("foo", ClassKind.CUSTOM),
        ],
    )
    def test_kind(self, name, kind):
        assert LUMOS_GRAMMAR.classify(name) is kind

    def test_parse_non_custom_has_no_tokens(self):
        parsed = LUMOS_GRAMMAR.parse("u-hidden")
        assert parsed.kind is ClassKind.UTILITY
        assert parsed.tokens == ()
        assert parsed.type is None


class TestClientFirstClassify:
    def test_only_strict_is_prefix_is_combo(self):
        assert CLIENT_FIRST_GRAMMAR.classify("is-active") is ClassKind.COMBO
        assert CLIENT_FIRST_GRAMMAR.classify("is_active") is ClassKind.CUSTOM
        assert CLIENT_FIRST_GRAMMAR.classify("isActive") is ClassKind.CUSTOM


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------

class TestLumosParse:
    def test_two_tokens(self):
        parsed = LUMOS_GRAMMAR.parse("hero_wrap")
        assert parsed.tokens == ("hero", "wrap")
        assert parsed.type == "hero"
        assert parsed.variation is None
        assert parsed.element_token == "wrap"
        assert parsed.is_wrapper
        assert parsed.component_key == "hero"

    def test_variation_joins_middle_tokens(self):
        parsed = LUMOS_GRAMMAR.parse("hero_primary_cta_wrap")
        assert parsed.variation == "primary_cta"
        assert parsed.element_token == "wrap"
        assert parsed.component_key == "hero_primary"

    def test_root_and_child_group_share_key(self):
        root = LUMOS_GRAMMAR.parse("hero_primary_wrap")
        child = LUMOS_GRAMMAR.parse("hero_primary_cta_wrap")
        assert root.component_key == child.component_key

    def test_single_token(self):
        parsed = LUMOS_GRAMMAR.parse("foo")
        assert parsed.kind is ClassKind.CUSTOM
        assert parsed.tokens == ("foo",)
        assert parsed.type == "foo"
        assert parsed.element_token is None
        assert not parsed.is_wrapper

    def test_empty_segments_are_dropped(self):
        parsed = LUMOS_GRAMMAR.parse("hero__wrap")
        assert parsed.tokens == ("hero", "wrap")

    def test_hyphen_is_not_a_lumos_separator(self):
        parsed = LUMOS_GRAMMAR.parse("hero-section_wrap")
        assert parsed.tokens == ("hero-section", "wrap")

    def test_parse_never_raises(self):
        for raw in ["", "_", "___", "  ", "ü_wrap", "-", "is-"]:
            LUMOS_GRAMMAR.parse(raw)


class TestClientFirstParse:
    def test_hyphen_and_underscore_both_split(self):
        parsed = CLIENT_FIRST_GRAMMAR.parse("hero-header_content-wrapper")
        assert parsed.tokens == ("hero", "header", "content", "wrapper")
        assert parsed.type == "hero"
        assert parsed.element_token == "wrapper"
        assert parsed.is_wrapper

    def test_padding_global_tokens(self):
        parsed = CLIENT_FIRST_GRAMMAR.parse("padding-global")
        assert parsed.tokens == ("padding", "global")
        assert parsed.element_token == "global"
