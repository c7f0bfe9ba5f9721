from kivy.graphics import Color, Ellipse, Line
from kivy.metrics import dp
from kivy.properties import OptionProperty, StringProperty
from kivy.uix.label import Label
from kivy.uix.floatlayout import FloatLayout

from receiver.config.constants import DARK_BG, TEXT_PRIMARY, TIMER_COLORS
from receiver.core.surfaces import TIMER_URGENCY


class TimerCircle(FloatLayout):
    """Round countdown badge whose ring colour follows the timer urgency."""

    seconds = StringProperty("")
    urgency = OptionProperty("neutral", options=TIMER_URGENCY)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        with self.canvas.before:
            Color(*DARK_BG)
            self.disc = Ellipse(pos=self.pos, size=self.size)
            self.ring_color = Color(*TIMER_COLORS[self.urgency])
            self.ring = Line(circle=(self.center_x, self.center_y, 1), width=dp(4))

        self.label = Label(
            text=self.seconds,
            color=TEXT_PRIMARY,
            bold=True,
            font_size="48sp",
            pos_hint={"center_x": 0.5, "center_y": 0.5},
        )
        self.add_widget(self.label)

        self.bind(pos=self._update_graphics, size=self._update_graphics)
        self.bind(seconds=lambda inst, val: setattr(self.label, "text", val))
        self.bind(urgency=self._update_urgency)

    def _update_graphics(self, *args):
        side = min(self.width, self.height)
        self.disc.size = (side, side)
        self.disc.pos = (self.center_x - side / 2, self.center_y - side / 2)
        self.ring.circle = (self.center_x, self.center_y, max(side / 2 - dp(2), 1))

    def _update_urgency(self, *args):
        self.ring_color.rgba = TIMER_COLORS[self.urgency]
