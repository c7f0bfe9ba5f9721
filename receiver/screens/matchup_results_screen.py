from kivy.metrics import dp
from kivy.uix.boxlayout import BoxLayout

from receiver.screens.surface_screen import SurfaceScreen
from receiver.widgets.player_icon import PlayerIcon


class VoterStrip(BoxLayout):
    """A row of small voter icons."""

    def __init__(self, **kwargs):
        kwargs.setdefault("size_hint_y", None)
        kwargs.setdefault("height", dp(36))
        super().__init__(orientation="horizontal", spacing=dp(6), **kwargs)

    def set_voters(self, icon_ids):
        self.clear_widgets()
        for icon_id in icon_ids:
            self.add_widget(PlayerIcon(
                icon_id=icon_id,
                size_hint=(None, None),
                size=(dp(32), dp(32)),
            ))


class MatchupResultsScreen(SurfaceScreen):
    def on_kv_post(self, base_widget):
        surface = self.surface
        surface.result1.bind(voters=lambda inst, v: self.ids.voters1.set_voters(v))
        surface.result2.bind(voters=lambda inst, v: self.ids.voters2.set_voters(v))
        surface.bind(abstain_voters=lambda inst, v: self.ids.abstain_voters.set_voters(v))
        self.ids.voters1.set_voters(surface.result1.voters)
        self.ids.voters2.set_voters(surface.result2.voters)
        self.ids.abstain_voters.set_voters(surface.abstain_voters)
