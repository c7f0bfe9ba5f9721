"""Leaderboard rows for the round and game results screens.

``LeaderboardRow`` follows a ``LeaderboardEntry`` model: it slides by the
entry's displacement, recolours its rank badge and crossfades the "+N"
round score into the running total.
"""

from kivy.animation import Animation
from kivy.graphics import Color, Line, PopMatrix, PushMatrix, RoundedRectangle, Translate
from kivy.metrics import dp
from kivy.properties import NumericProperty
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.floatlayout import FloatLayout
from kivy.uix.image import Image
from kivy.uix.label import Label

from receiver.config.constants import (
    DARK_BG,
    DEFAULT_RANK_COLOR,
    PINK,
    RANK_COLORS,
    REORDER_MOTION_MS,
    TEXT_PRIMARY,
)
from receiver.config.paths import LOSER_BADGE, WINNER_BADGE
from receiver.widgets.player_icon import PlayerIcon

CROSSFADE_S = 0.4


def rank_color(rank):
    return RANK_COLORS.get(int(rank), DEFAULT_RANK_COLOR)


def _fit_label(label):
    label.bind(size=lambda inst, val: setattr(inst, "text_size", inst.size))
    return label


class _RowBase(BoxLayout):
    def __init__(self, name, icon_id, rank, compact=False, **kwargs):
        super().__init__(
            orientation="horizontal",
            size_hint_y=None,
            height=dp(52) if compact else dp(68),
            padding=(dp(16), dp(6)),
            spacing=dp(14),
            **kwargs,
        )

        with self.canvas.before:
            PushMatrix()
            self.translate = Translate(0, 0)
            Color(*DARK_BG)
            self.bg = RoundedRectangle(radius=[dp(12)], pos=self.pos, size=self.size)
            self.border_color = Color(*rank_color(rank))
            self.border = Line(
                rounded_rectangle=(self.x, self.y, self.width, self.height, dp(12)),
                width=1.5,
            )
        with self.canvas.after:
            PopMatrix()

        self.bind(pos=self._update_graphics, size=self._update_graphics)

        self.rank_label = Label(
            text=f"#{int(rank)}",
            color=rank_color(rank),
            bold=True,
            font_size="22sp",
            size_hint_x=None,
            width=dp(52),
        )
        self.add_widget(self.rank_label)

        icon_side = dp(40) if compact else dp(52)
        self.add_widget(PlayerIcon(
            icon_id=icon_id,
            size_hint=(None, None),
            size=(icon_side, icon_side),
            pos_hint={"center_y": 0.5},
        ))

        self.info = BoxLayout(orientation="horizontal", spacing=dp(8))
        self.name_label = _fit_label(Label(
            text=name,
            color=TEXT_PRIMARY,
            bold=True,
            font_size="20sp",
            halign="left",
            valign="middle",
            shorten=True,
        ))
        self.info.add_widget(self.name_label)
        self.add_widget(self.info)

    def _update_graphics(self, *args):
        self.bg.pos = self.pos
        self.bg.size = self.size
        self.border.rounded_rectangle = (self.x, self.y, self.width, self.height, dp(12))

    def set_rank(self, rank):
        self.rank_label.text = f"#{int(rank)}"
        self.rank_label.color = rank_color(rank)
        self.border_color.rgba = rank_color(rank)


class LeaderboardRow(_RowBase):
    # Current visual offset in pixels, positive is down
    shift = NumericProperty(0)

    def __init__(self, entry, compact=False, **kwargs):
        super().__init__(entry.name, entry.icon_id, entry.rank, compact=compact, **kwargs)
        self.entry = entry

        scores = FloatLayout(size_hint_x=None, width=dp(130))
        self.round_label = Label(
            text=entry.round_score_text,
            color=PINK,
            bold=True,
            font_size="30sp",
            pos_hint={"center_x": 0.5, "center_y": 0.5},
        )
        self.total_label = Label(
            text=entry.total_score_text,
            color=TEXT_PRIMARY,
            bold=True,
            font_size="24sp",
            opacity=0,
            pos_hint={"center_x": 0.5, "center_y": 0.5},
        )
        scores.add_widget(self.round_label)
        scores.add_widget(self.total_label)
        self.add_widget(scores)

        self.bind(shift=lambda inst, val: setattr(self.translate, "y", -val))
        entry.bind(
            rank=self._on_rank,
            show_total=self._on_show_total,
            displacement=self._on_displacement,
        )

    def release(self):
        """Stop following the entry model."""
        Animation.cancel_all(self)
        self.entry.unbind(
            rank=self._on_rank,
            show_total=self._on_show_total,
            displacement=self._on_displacement,
        )

    def _on_rank(self, entry, rank):
        self.set_rank(rank)

    def _on_show_total(self, entry, show_total):
        Animation.cancel_all(self.round_label, "opacity")
        Animation.cancel_all(self.total_label, "opacity")
        Animation(opacity=0 if show_total else 1, d=CROSSFADE_S).start(self.round_label)
        Animation(opacity=1 if show_total else 0, d=CROSSFADE_S).start(self.total_label)

    def _on_displacement(self, entry, displacement):
        Animation.cancel_all(self, "shift")
        if displacement == 0:
            self.shift = 0
            return
        Animation(
            shift=displacement,
            d=REORDER_MOTION_MS / 1000.0,
            t="in_out_quad",
        ).start(self)


class GameResultRow(_RowBase):
    def __init__(self, result, compact=False, **kwargs):
        player = result.player
        super().__init__(player.name, player.icon_id, player.rank, compact=compact, **kwargs)
        self.result = result

        badge = None
        if result.is_winner:
            badge = (WINNER_BADGE, "Winner")
        elif result.is_last_place:
            badge = (LOSER_BADGE, "Half-Wit")
        if badge is not None:
            self.info.add_widget(self._badge(*badge))

        self.add_widget(Label(
            text=result.total_score_text,
            color=TEXT_PRIMARY,
            bold=True,
            font_size="24sp",
            size_hint_x=None,
            width=dp(130),
        ))

    def _badge(self, path, alt_text):
        if path.exists():
            return Image(
                source=str(path),
                fit_mode="contain",
                size_hint=(None, 1),
                width=dp(90),
            )
        # Badge art missing: show the caption instead
        return Label(
            text=alt_text,
            color=PINK,
            bold=True,
            font_size="16sp",
            size_hint_x=None,
            width=dp(90),
        )
