from kivy.animation import Animation
from kivy.properties import NumericProperty

from receiver.screens.surface_screen import SurfaceScreen


class LoadingScreen(SurfaceScreen):
    # Spinner arc start angle, driven by a looping animation while shown
    spinner_angle = NumericProperty(0)

    def on_enter(self, *args):
        self.spinner_angle = 0
        spin = Animation(spinner_angle=360, d=1.0)
        spin += Animation(spinner_angle=0, d=0)
        spin.repeat = True
        spin.start(self)

    def on_leave(self, *args):
        Animation.cancel_all(self, "spinner_angle")
