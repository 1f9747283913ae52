"""Tests for ReadOnlyView — shared read access and aliasing checks."""

from dataclasses import dataclass

import pytest

from datatracker import DataTracker, AliasingViolation, TrackerDisposedError


@dataclass
class MyData:
    a: int


class TestReads:
    def test_attribute_and_item_reads(self):
        view = DataTracker(MyData(1)).as_ref()
        assert view.a == 1
        items = DataTracker({"k": [1, 2]}).as_ref()
        assert items["k"] == [1, 2]
        assert "k" in items
        assert len(items) == 1
        assert list(items) == ["k"]

    def test_dict_get_reaches_wrapped_value(self):
        view = DataTracker({"a": 1}).as_ref()
        assert view.get("a") == 1
        assert view.get("missing") is None
        assert view.get_value() == {"a": 1}

    def test_equality(self):
        tracker = DataTracker(MyData(1))
        assert tracker.as_ref() == MyData(1)
        assert tracker.as_ref() != MyData(2)
        assert tracker.as_ref() == tracker.as_ref()

    def test_sees_committed_changes(self):
        tracker = DataTracker(MyData(1))
        view = tracker.as_ref()
        tracker.mutate(lambda m: setattr(m, "a", 2))
        assert view.a == 2

    def test_repr(self):
        assert repr(DataTracker([1]).as_ref()) == "ReadOnlyView([1])"


class TestWrites:
    def test_setattr_refused(self):
        tracker = DataTracker(MyData(1))
        view = tracker.as_ref()
        with pytest.raises(TypeError):
            view.a = 2
        with pytest.raises(TypeError):
            del view.a
        assert tracker.as_ref().a == 1

    def test_setitem_refused(self):
        view = DataTracker({"a": 1}).as_ref()
        with pytest.raises(TypeError):
            view["a"] = 2
        with pytest.raises(TypeError):
            del view["a"]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(DataTracker(1).as_ref())


class TestAliasing:
    def test_as_ref_refused_while_borrowed(self):
        tracker = DataTracker(0)
        with tracker.as_tracked_mut():
            with pytest.raises(AliasingViolation):
                tracker.as_ref()

    def test_existing_view_refuses_reads_while_borrowed(self):
        tracker = DataTracker(MyData(1))
        view = tracker.as_ref()
        with tracker.as_tracked_mut():
            with pytest.raises(AliasingViolation):
                view.a
            with pytest.raises(AliasingViolation):
                view.get_value()
        assert view.a == 1

    def test_open_view_blocks_guard(self):
        tracker = DataTracker(0)
        with tracker.as_ref() as view:
            with tracker.as_ref():
                with pytest.raises(AliasingViolation):
                    tracker.as_tracked_mut()
            with pytest.raises(AliasingViolation):
                tracker.as_tracked_mut()
            assert view.get_value() == 0
        with tracker.as_tracked_mut() as m:
            m.replace(1)

    def test_open_view_released_on_error(self):
        tracker = DataTracker(0)
        with pytest.raises(RuntimeError):
            with tracker.as_ref():
                raise RuntimeError("oops")
        tracker.mutate(lambda m: m.replace(1))
        assert tracker.as_ref().get_value() == 1

    def test_disposed_tracker(self):
        tracker = DataTracker(0)
        view = tracker.as_ref()
        tracker.dispose()
        with pytest.raises(TrackerDisposedError):
            view.get_value()
