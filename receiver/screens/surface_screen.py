from kivy.properties import ObjectProperty
from kivy.uix.screenmanager import Screen


class SurfaceScreen(Screen):
    """A screen whose KV rules read everything from ``root.surface``.

    The surface must be passed to the constructor so the rules can bind to
    it while they are applied.
    """

    surface = ObjectProperty(None, rebind=True)
