"""Tutorial screen.

Seven step panels stacked on top of each other. Which one shows, and every
element inside them, follows the ``TutorialSurface``; this module only turns
those flags into fades, floats and the "remember" shake.
"""

from kivy.animation import Animation
from kivy.metrics import dp
from kivy.properties import NumericProperty

from receiver.config.constants import TUTORIAL_FADE_MS, TUTORIAL_STEP_COUNT
from receiver.screens.surface_screen import SurfaceScreen

FADE_S = TUTORIAL_FADE_MS / 1000.0
FLOAT_S = 0.6


class TutorialScreen(SurfaceScreen):
    # "+1" callouts: vertical offset and opacity
    plus_one_offset = NumericProperty(0)
    plus_one_opacity = NumericProperty(0)
    bonus_offset = NumericProperty(0)
    bonus_opacity = NumericProperty(0)
    # Horizontal jitter of the "remember" line
    shake_x = NumericProperty(0)

    def on_kv_post(self, base_widget):
        self.surface.bind(
            fading_out=self._on_fading_out,
            visible_step=self._on_visible_step,
            plus_one_state=lambda inst, v: self._float("plus_one", v),
            plus_one_bonus_state=lambda inst, v: self._float("bonus", v),
            remember_shaking=self._on_shaking,
        )

    def steps(self):
        return [self.ids[f"step{n}"] for n in range(1, TUTORIAL_STEP_COUNT + 1)]

    def on_pre_enter(self, *args):
        self._snap_to_surface()

    def on_leave(self, *args):
        for step in self.steps():
            Animation.cancel_all(step, "opacity")
        Animation.cancel_all(self)
        self.shake_x = 0

    def _snap_to_surface(self):
        for n, step in enumerate(self.steps(), start=1):
            Animation.cancel_all(step, "opacity")
            step.opacity = 1 if n == self.surface.visible_step else 0
        Animation.cancel_all(self)
        self.plus_one_offset = self.bonus_offset = 0
        self.plus_one_opacity = self.bonus_opacity = 0
        self.shake_x = 0

    def _on_fading_out(self, surface, fading_out):
        if not fading_out:
            return
        current = self.ids[f"step{surface.visible_step}"]
        Animation.cancel_all(current, "opacity")
        Animation(opacity=0, d=FADE_S).start(current)

    def _on_visible_step(self, surface, visible_step):
        for n, step in enumerate(self.steps(), start=1):
            Animation.cancel_all(step, "opacity")
            if n == visible_step:
                step.opacity = 0
                Animation(opacity=1, d=FADE_S).start(step)
            else:
                step.opacity = 0

    def _float(self, prefix, state):
        offset = f"{prefix}_offset"
        opacity = f"{prefix}_opacity"
        Animation.cancel_all(self, offset, opacity)
        if state == "hidden":
            setattr(self, offset, 0)
            setattr(self, opacity, 0)
        elif state == "float_in":
            setattr(self, offset, -dp(30))
            Animation(**{offset: 0, opacity: 1}, d=FLOAT_S, t="out_back").start(self)
        else:
            Animation(**{offset: dp(40), opacity: 0}, d=FLOAT_S, t="in_quad").start(self)

    def _on_shaking(self, surface, shaking):
        Animation.cancel_all(self, "shake_x")
        self.shake_x = 0
        if not shaking:
            return
        shake = (
            Animation(shake_x=dp(6), d=0.05)
            + Animation(shake_x=-dp(6), d=0.1)
            + Animation(shake_x=0, d=0.05)
            + Animation(d=0.6)
        )
        shake.repeat = True
        shake.start(self)
