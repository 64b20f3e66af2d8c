"""Tests for the synchronous EventBus."""

from flowlint.events import EventBus, PresetChanged, ScanStarted


class TestEventBus:
    def test_typed_listener_only_sees_its_type(self):
        bus = EventBus()
        seen = []
        bus.subscribe(PresetChanged, seen.append)
        bus.emit(ScanStarted(scope="page", preset_id="lumos"))
        bus.emit(PresetChanged(previous_id="lumos", preset_id="client-first"))
        assert seen == [PresetChanged(previous_id="lumos", preset_id="client-first")]

    def test_global_listeners_run_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(ScanStarted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("global"))
        bus.emit(ScanStarted(scope="page", preset_id="lumos"))
        assert order == ["global", "typed"]

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        unsubscribe = bus.subscribe(ScanStarted, seen.append)
        unsubscribe_all = bus.on_all(seen.append)
        unsubscribe()
        unsubscribe_all()
        unsubscribe()
        bus.emit(ScanStarted(scope="page", preset_id="lumos"))
        assert seen == []
