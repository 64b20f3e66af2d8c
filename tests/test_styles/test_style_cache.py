"""Tests for StyleCache single-flight behaviour and StyleService reads."""

import asyncio

import pytest

from flowlint.adapters.snapshot import SnapshotHost, SnapshotStyle
from flowlint.events.bus import EventBus
from flowlint.events.types import StyleCacheInvalidated
from flowlint.styles import StyleCache, StyleService


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _CountingHost:
    """Host whose style catalogue fetch yields to the loop and counts calls."""

    def __init__(self, styles, fail_first: bool = False) -> None:
        self.styles = styles
        self.calls = 0
        self.fail_first = fail_first

    async def get_all_elements(self):
        return []

    async def get_all_styles(self):
        self.calls += 1
        await asyncio.sleep(0)
        if self.fail_first and self.calls == 1:
            raise RuntimeError("host unavailable")
        return list(self.styles)

    def subscribe_selection(self, callback):
        return lambda: None


class _BrokenNameStyle:
    id = "broken"

    async def get_name(self):
        raise RuntimeError("no name")

    async def get_properties(self, options=None):
        return {}


def _styles():
    return [
        SnapshotStyle("s1", "hero_wrap", {"display": "flex"}),
        SnapshotStyle("s2", ""),
        SnapshotStyle("s3", "is-active", combo=True),
        SnapshotStyle("s4", "u-hidden", {"display": "none"}),
    ]


# ---------------------------------------------------------------------------
# Single flight
# ---------------------------------------------------------------------------

class TestSingleFlight:
    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_fetch(self):
        host = _CountingHost(_styles())
        service = StyleService()
        first, second = await asyncio.gather(
            service.fetch_all_styles(host), service.fetch_all_styles(host)
        )
        assert host.calls == 1
        assert first == second

    @pytest.mark.asyncio
    async def test_same_task_handed_out(self):
        host = _CountingHost(_styles())
        service = StyleService()
        service.cache.get_or_fetch(lambda: service._load_all(host))
        task = service.cache.get()
        assert service.cache.get_or_fetch(lambda: service._load_all(host)) is task
        await task

    @pytest.mark.asyncio
    async def test_reset_forces_refetch(self):
        host = _CountingHost(_styles())
        service = StyleService()
        await service.fetch_all_styles(host)
        await service.fetch_all_styles(host)
        assert host.calls == 1
        service.cache.reset("test")
        await service.fetch_all_styles(host)
        assert host.calls == 2

    @pytest.mark.asyncio
    async def test_failed_fetch_is_not_cached(self):
        host = _CountingHost(_styles(), fail_first=True)
        service = StyleService()
        with pytest.raises(RuntimeError):
            await service.fetch_all_styles(host)
        assert service.cache.get() is None
        styles = await service.fetch_all_styles(host)
        assert host.calls == 2
        assert [s.name for s in styles] == ["hero_wrap", "is-active", "u-hidden"]


class TestReset:
    def test_emits_invalidation_event(self):
        bus = EventBus()
        seen = []
        bus.subscribe(StyleCacheInvalidated, seen.append)
        StyleCache(bus).reset("preset-change")
        assert seen == [StyleCacheInvalidated(reason="preset-change", had_value=False)]


# ---------------------------------------------------------------------------
# Style reads
# ---------------------------------------------------------------------------

class TestStyleService:
    @pytest.mark.asyncio
    async def test_unnamed_styles_dropped_and_reordered(self):
        styles = await StyleService()._load_all(_CountingHost(_styles()))
        assert [(s.name, s.order) for s in styles] == [
            ("hero_wrap", 0),
            ("is-active", 1),
            ("u-hidden", 2),
        ]

    @pytest.mark.asyncio
    async def test_combo_flag_sources(self):
        styles = await StyleService()._load_all(_CountingHost(_styles()))
        by_name = {s.name: s for s in styles}
        assert by_name["is-active"].is_combo
        assert by_name["is-active"].detection_source == "api"
        assert not by_name["hero_wrap"].is_combo
        assert by_name["hero_wrap"].detection_source == "heuristic"

    @pytest.mark.asyncio
    async def test_failing_style_degrades(self):
        host = _CountingHost([_BrokenNameStyle(), SnapshotStyle("ok", "u-hidden")])
        styles = await StyleService()._load_all(host)
        assert [s.name for s in styles] == ["u-hidden"]

    @pytest.mark.asyncio
    async def test_applied_styles_dedupes_by_id(self):
        host = SnapshotHost(
            {
                "elements": [{"id": "e1", "classes": ["hero_wrap", "is-active", "hero_wrap"]}],
                "styles": [{"id": "s1", "name": "hero_wrap"}, {"id": "s2", "name": "is-active"}],
            }
        )
        styles = await StyleService().applied_styles(host.element("e1"))
        assert [(s.name, s.order) for s in styles] == [("hero_wrap", 0), ("is-active", 1)]
