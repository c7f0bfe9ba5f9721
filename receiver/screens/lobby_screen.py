from kivy.graphics import Color, RoundedRectangle
from kivy.metrics import dp
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.label import Label

from receiver.config.constants import DARK_BG, PURPLE, TEXT_HINT, TEXT_PRIMARY
from receiver.screens.surface_screen import SurfaceScreen
from receiver.widgets.player_icon import PlayerIcon


class PlayerCard(BoxLayout):
    """Icon, name and an optional host tag for one joined player."""

    def __init__(self, player, **kwargs):
        super().__init__(
            orientation="vertical",
            size_hint=(None, None),
            size=(dp(130), dp(150)),
            padding=dp(8),
            spacing=dp(4),
            **kwargs,
        )

        with self.canvas.before:
            Color(*DARK_BG)
            self.bg = RoundedRectangle(radius=[dp(14)], pos=self.pos, size=self.size)
        self.bind(
            pos=lambda inst, v: setattr(inst.bg, "pos", inst.pos),
            size=lambda inst, v: setattr(inst.bg, "size", inst.size),
        )

        self.add_widget(PlayerIcon(
            icon_id=player.icon_id,
            size_hint=(None, None),
            size=(dp(72), dp(72)),
            pos_hint={"center_x": 0.5},
        ))
        self.add_widget(Label(
            text=player.name,
            color=TEXT_PRIMARY,
            bold=True,
            font_size="16sp",
            shorten=True,
            size_hint_y=None,
            height=dp(26),
        ))
        self.add_widget(Label(
            text="HOST" if player.is_host else "",
            color=PURPLE if player.is_host else TEXT_HINT,
            bold=True,
            font_size="12sp",
            size_hint_y=None,
            height=dp(18),
        ))


class LobbyScreen(SurfaceScreen):
    def on_kv_post(self, base_widget):
        self.surface.bind(players=self.refresh_players)
        self.refresh_players()

    def refresh_players(self, *args):
        grid = self.ids.players_grid
        grid.clear_widgets()
        for player in self.surface.players:
            grid.add_widget(PlayerCard(player))
