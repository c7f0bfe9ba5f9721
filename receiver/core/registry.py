"""The set of mutually exclusive screens and which one is showing."""

from kivy.event import EventDispatcher
from kivy.logger import Logger
from kivy.properties import StringProperty

from receiver.core.models import ScreenName


class ScreenRegistry(EventDispatcher):
    """Tracks the current screen and flips surface ``active`` flags.

    The Kivy ``ScreenManager`` follows ``current``. Hooks registered with
    ``on_leave_screen`` run before the switch whenever the display moves
    away from that screen.
    """

    current = StringProperty(ScreenName.CONNECTING.value)

    def __init__(self, surfaces, **kwargs):
        super().__init__(**kwargs)
        self.surfaces = surfaces
        self._leave_hooks = {}
        self.surfaces[ScreenName.CONNECTING].active = True

    @property
    def current_screen(self):
        return ScreenName(self.current)

    def is_showing(self, name):
        return self.current == ScreenName(name).value

    def on_leave_screen(self, name, callback):
        self._leave_hooks.setdefault(ScreenName(name), []).append(callback)

    def activate(self, name):
        name = ScreenName(name)
        previous = self.current_screen
        if previous is not name:
            for callback in self._leave_hooks.get(previous, []):
                callback()

        for screen, surface in self.surfaces.items():
            if screen is not name:
                surface.active = False
        self.surfaces[name].active = True
        self.current = name.value
        Logger.info(f"Registry: showing screen {name.value}")
