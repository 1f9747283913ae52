"""Tests for ListenerRegistry."""

from datatracker import ListenerRegistry


class TestListenerRegistry:
    def test_insert_and_notify(self):
        reg = ListenerRegistry()
        log = []
        reg.insert("a", lambda old, new: log.append(("a", old, new)))
        reg.insert("b", lambda old, new: log.append(("b", old, new)))
        reg.notify_all(1, 2)
        assert log == [("a", 1, 2), ("b", 1, 2)]

    def test_insert_overwrites(self):
        reg = ListenerRegistry()
        first = lambda old, new: None
        second = lambda old, new: None
        assert reg.insert(0, first) is None
        assert reg.insert(0, second) is first
        assert len(reg) == 1

    def test_remove_missing_is_noop(self):
        reg = ListenerRegistry()
        assert reg.remove("nope") is None
        reg.insert("x", lambda old, new: None)
        reg.remove("x")
        reg.remove("x")
        assert "x" not in reg

    def test_notify_iterates_over_copy(self):
        reg = ListenerRegistry()
        log = []

        def self_removing(old, new):
            log.append("first")
            reg.remove("first")
            reg.insert("late", lambda o, n: log.append("late"))

        reg.insert("first", self_removing)
        reg.insert("second", lambda old, new: log.append("second"))
        reg.notify_all(0, 1)
        assert log == ["first", "second"]
        assert list(reg) == ["second", "late"]

    def test_clear(self):
        reg = ListenerRegistry()
        reg.insert(1, lambda old, new: None)
        reg.clear()
        assert len(reg) == 0
        assert repr(reg) == "ListenerRegistry([])"
