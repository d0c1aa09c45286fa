"""Tests for the pure Python Signal and ObservableProperty classes.

These tests run without Qt - validating the MVVM signal foundation.
"""

import pytest
from iGallery.gui.viewmodels.signal import Signal, ObservableProperty


# ---------------------------------------------------------------------------
# Signal tests
# ---------------------------------------------------------------------------

class TestSignal:
    def test_connect_and_emit(self):
        sig = Signal()
        received = []
        sig.connect(lambda v: received.append(v))

        sig.emit(42)

        assert received == [42]

    def test_connect_returns_handler(self):
        sig = Signal()

        @sig.connect
        def handler(value):
            pass

        assert callable(handler)
        assert sig.handler_count == 1

    def test_disconnect_missing_raises(self):
        sig = Signal()
        with pytest.raises(ValueError):
            sig.disconnect(lambda: None)

    def test_disconnect_all(self):
        sig = Signal()
        sig.connect(lambda: None)
        sig.connect(lambda: None)

        sig.disconnect_all()

        assert sig.handler_count == 0

    def test_duplicate_connect_ignored(self):
        sig = Signal()
        handler = lambda: None
        sig.connect(handler)
        sig.connect(handler)
        assert sig.handler_count == 1

    def test_handler_exception_does_not_break_others(self):
        sig = Signal()
        received = []

        def bad_handler(v):
            raise RuntimeError("boom")

        sig.connect(bad_handler)
        sig.connect(lambda v: received.append(v))

        sig.emit(1)

        assert received == [1]

    def test_blocked_suppresses_emission(self):
        sig = Signal()
        received = []
        sig.connect(lambda v: received.append(v))

        with sig.blocked():
            sig.emit(1)
        sig.emit(2)

        assert received == [2]

    def test_handler_connected_during_emit_runs_next_time(self):
        sig = Signal()
        late = []

        def first(value):
            sig.connect(lambda v: late.append(v))

        sig.connect(first)
        sig.emit(1)
        sig.emit(2)

        assert late == [2]


# ---------------------------------------------------------------------------
# ObservableProperty tests
# ---------------------------------------------------------------------------

class TestObservableProperty:
    def test_initial_value(self):
        prop = ObservableProperty(10)
        assert prop.value == 10

    def test_changed_emits_on_new_value(self):
        prop = ObservableProperty(0)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = 5

        assert changes == [(5, 0)]

    def test_no_emit_when_equal_value(self):
        prop = ObservableProperty("hello")
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = "hello"

        assert changes == []

    def test_reset_restores_initial(self):
        prop = ObservableProperty("idle")
        prop.value = "loading"
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.reset()

        assert prop.value == "idle"
        assert changes == [("idle", "loading")]
