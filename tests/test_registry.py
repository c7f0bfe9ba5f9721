from __future__ import annotations

from receiver.core.models import ScreenName
from receiver.core.registry import ScreenRegistry
from receiver.core.surfaces import build_surfaces


def test_starts_on_connecting() -> None:
    registry = ScreenRegistry(build_surfaces())
    assert registry.current_screen is ScreenName.CONNECTING
    assert registry.surfaces[ScreenName.CONNECTING].active
    assert registry.is_showing("connecting")


def test_exactly_one_surface_active() -> None:
    registry = ScreenRegistry(build_surfaces())
    for name in (ScreenName.LOBBY, ScreenName.ANSWERING, ScreenName.ANSWERING, ScreenName.END):
        registry.activate(name)
        active = [n for n, s in registry.surfaces.items() if s.active]
        assert active == [name]
        assert registry.current == name.value


def test_leave_hooks_run_only_when_leaving() -> None:
    registry = ScreenRegistry(build_surfaces())
    calls = []
    registry.on_leave_screen(ScreenName.TUTORIAL, lambda: calls.append("left"))

    registry.activate(ScreenName.TUTORIAL)
    registry.activate(ScreenName.TUTORIAL)
    assert calls == []

    registry.activate(ScreenName.LOADING)
    assert calls == ["left"]

    registry.activate(ScreenName.END)
    assert calls == ["left"]


def test_current_is_observable() -> None:
    registry = ScreenRegistry(build_surfaces())
    seen = []
    registry.bind(current=lambda inst, value: seen.append(value))
    registry.activate("lobby")
    assert seen == ["lobby"]
