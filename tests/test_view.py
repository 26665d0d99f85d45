"""Tests for the view contract: CallbackRegistry and BaseView."""

from typing import Callable, TypedDict

import pytest

from mvc import BaseView, CallbackRegistry, HandlerTableError, View


class TestCallbackRegistry:
    """Test CallbackRegistry lookup semantics."""

    def test_unregistered_emit_is_noop(self):
        """Emitting an unregistered event does nothing and returns None."""
        registry = CallbackRegistry()
        assert registry.emit("missing", 1, "two") is None

    def test_unregistered_lookup_returns_callable(self):
        """lookup() always yields something callable."""
        registry = CallbackRegistry()
        callback = registry.lookup("missing")
        assert callable(callback)
        assert callback() is None
        assert callback(1, 2, key="value") is None

    def test_emit_returns_callback_result(self):
        registry = CallbackRegistry()
        registry.register("double", lambda x: x * 2)
        assert registry.emit("double", 21) == 42

    def test_register_overwrites(self):
        """The latest registration wins."""
        registry = CallbackRegistry()
        calls = []
        registry.register("save", lambda: calls.append("first"))
        registry.register("save", lambda: calls.append("second"))
        registry.emit("save")
        assert calls == ["second"]

    def test_relay_resolves_at_call_time(self):
        """A relay created before registration still reaches the callback."""
        registry = CallbackRegistry()
        relay = registry.relay("save")
        assert relay() is None  # nothing registered yet
        registry.register("save", lambda: "saved")
        assert relay() == "saved"
        registry.register("save", lambda: "saved again")
        assert relay() == "saved again"

    def test_relay_name(self):
        assert CallbackRegistry().relay("save").__name__ == "relay_save"

    def test_registered(self):
        registry = CallbackRegistry()
        assert not registry.registered("save")
        registry.register("save", print)
        assert registry.registered("save")


class TestBaseView:
    """Test BaseView with the counter view."""

    def test_rendered_node_uses_latest_callback(self, counter_view):
        """Callbacks registered after render are the ones that run."""
        calls = []
        counter_view.on_event("increment", lambda by: calls.append(("stale", by)))
        node = counter_view.render(0)
        counter_view.on_event("increment", lambda by: calls.append(("fresh", by)))

        node.click(3)

        assert calls == [("fresh", 3)]

    def test_rendered_node_before_any_registration(self, counter_view):
        """Interaction before wiring is a no-op, and wiring later takes effect."""
        node = counter_view.render(0)
        assert node.click(1) is None

        calls = []
        counter_view.on_event("increment", calls.append)
        node.click(2)
        assert calls == [2]

    def test_callback_lookup(self, counter_view):
        """callback() returns the registered function or a no-op."""
        assert counter_view.callback("reset")() is None

        def reset() -> str:
            return "reset"

        counter_view.on_event("reset", reset)
        assert counter_view.callback("reset") is reset

    def test_emit(self, counter_view):
        counter_view.on_event("increment", lambda by: by + 1)
        assert counter_view.emit("increment", 1) == 2
        assert counter_view.emit("unknown") is None

    def test_render_is_pure(self, counter_view):
        """Same data renders to equivalent nodes without touching callbacks."""
        first = counter_view.render(7)
        second = counter_view.render(7)
        assert first.text == second.text == "count=7"
        assert not counter_view.registered("increment")

    def test_satisfies_view_protocol(self, counter_view):
        assert isinstance(counter_view, View)


class TestViewEventMap:
    """Test callback registration against a declared event map."""

    def test_undeclared_event_rejected(self, counter_view):
        with pytest.raises(HandlerTableError, match="undeclared event 'decrement'"):
            counter_view.on_event("decrement", lambda by: None)
        assert not counter_view.registered("decrement")

    def test_wrong_arity_rejected(self, counter_view):
        with pytest.raises(HandlerTableError, match="'reset' does not accept 0"):
            counter_view.on_event("reset", lambda by: None)
        with pytest.raises(HandlerTableError, match="'increment' does not accept 1"):
            counter_view.on_event("increment", lambda: None)
        assert not counter_view.registered("reset")
        assert not counter_view.registered("increment")

    def test_non_callable_rejected(self, counter_view):
        with pytest.raises(HandlerTableError, match="not callable"):
            counter_view.on_event("increment", 3)

    def test_varargs_callback_accepted(self, counter_view):
        """Forwarders taking ``*params`` fit any declared arity."""
        counter_view.on_event("reset", lambda *params: params)
        assert counter_view.emit("reset") == ()

    def test_undeclared_emit_still_noop(self, counter_view):
        """Only registration is checked; lookups never fail."""
        assert counter_view.emit("decrement", 1) is None
        assert counter_view.callback("decrement")() is None

    def test_view_without_event_map_accepts_any_name(self):
        class LooseEvents(TypedDict):
            anything: Callable[[], None]

        class LooseView(BaseView[int, str, LooseEvents]):
            def render(self, data: int) -> str:
                return str(data)

        view = LooseView()
        view.on_event("whatever", lambda a, b: a + b)
        assert view.emit("whatever", 1, 2) == 3
