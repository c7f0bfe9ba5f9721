from kivy.properties import StringProperty

from receiver.screens.surface_screen import SurfaceScreen


class MessageScreen(SurfaceScreen):
    """Full-screen title card for the connecting, voting and end states."""

    title = StringProperty("")
    subtitle = StringProperty("")
