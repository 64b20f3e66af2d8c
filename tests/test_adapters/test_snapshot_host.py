"""Tests for the JSON snapshot host."""

import pytest

from flowlint.adapters.snapshot import SnapshotHost
from flowlint.errors import HostError


def _snapshot(**overrides) -> dict:
    data = {
        "elements": [
            {"id": "main", "tag": "main", "classes": ["page_main"]},
            {"id": "e1", "parent": "main", "classes": ["hero_wrap", "u-mt"]},
        ],
        "styles": [
            {"id": "s1", "name": "hero_wrap", "properties": {"display": "flex"}},
            {"id": "s2", "name": "u-mt", "properties": {"margin-top": "1rem"}, "combo": False},
        ],
    }
    data.update(overrides)
    return data


class TestStyles:
    @pytest.mark.asyncio
    async def test_declared_styles_loaded(self):
        host = SnapshotHost(_snapshot())
        styles = await host.get_all_styles()
        assert [s.name for s in styles] == ["hero_wrap", "u-mt", "page_main"]
        assert await styles[0].get_properties() == {"display": "flex"}

    @pytest.mark.asyncio
    async def test_elements_share_declared_styles(self):
        host = SnapshotHost(_snapshot())
        (wrap, utility) = await host.element("e1").get_styles()
        assert wrap.id == "s1"
        assert await utility.get_name() == "u-mt"
        assert await utility.get_properties() == {"margin-top": "1rem"}

    @pytest.mark.asyncio
    async def test_combo_flag_only_when_declared(self):
        host = SnapshotHost(_snapshot())
        wrap, utility = await host.element("e1").get_styles()
        assert not hasattr(wrap, "is_combo_class")
        assert await utility.is_combo_class() is False

    @pytest.mark.asyncio
    async def test_implicit_style_has_no_properties(self):
        host = SnapshotHost(_snapshot())
        (style,) = await host.element("main").get_styles()
        assert style.id == "implicit-page_main"
        assert await style.get_properties() == {}


class TestMalformed:
    def test_style_without_name(self):
        with pytest.raises(HostError, match="Malformed snapshot"):
            SnapshotHost(_snapshot(styles=[{"id": "s1"}]))

    def test_unknown_parent(self):
        with pytest.raises(HostError):
            SnapshotHost(_snapshot(elements=[{"id": "e1", "parent": "ghost"}]))

    def test_duplicate_element_id(self):
        with pytest.raises(HostError):
            SnapshotHost(_snapshot(elements=[{"id": "e1"}, {"id": "e1"}]))

    def test_root_must_be_object(self):
        with pytest.raises(HostError):
            SnapshotHost([])

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(HostError):
            SnapshotHost.from_file(tmp_path / "missing.json")
