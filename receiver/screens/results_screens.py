"""Round and game results screens.

``RoundResultsScreen`` keeps one ``LeaderboardRow`` per leaderboard entry
for as long as the entry lives, so the rows can animate in place, and it
measures the laid out rows for the reorder animator.
"""

from kivy.animation import Animation

from receiver.screens.surface_screen import SurfaceScreen
from receiver.widgets.leaderboard_row import CROSSFADE_S, GameResultRow, LeaderboardRow


class RoundResultsScreen(SurfaceScreen):
    def __init__(self, **kwargs):
        self.rows = {}
        super().__init__(**kwargs)

    def on_kv_post(self, base_widget):
        self.surface.bind(
            entries=self.sync_rows,
            header_transitioned=self._crossfade_header,
        )
        self.sync_rows()

    def sync_rows(self, *args):
        box = self.ids.entries_box
        rows = {}
        for entry in self.surface.entries:
            row = self.rows.pop(id(entry), None)
            if row is None:
                row = LeaderboardRow(entry, compact=self.surface.compact)
            rows[id(entry)] = row
        for stale in self.rows.values():
            stale.release()
        self.rows = rows

        box.clear_widgets()
        for entry in self.surface.entries:
            box.add_widget(rows[id(entry)])

    def _laid_out_rows(self):
        # children are stored last-added first; sort top to bottom
        return sorted(self.ids.entries_box.children, key=lambda w: -w.top)

    def entry_spacing(self):
        rows = self._laid_out_rows()
        if len(rows) < 2:
            return None
        spacing = rows[0].y - rows[1].y
        return spacing if spacing > 0 else None

    def entry_height(self):
        rows = self._laid_out_rows()
        if not rows or rows[0].height <= 0:
            return None
        return rows[0].height

    def _crossfade_header(self, surface, transitioned):
        round_header = self.ids.round_header
        total_header = self.ids.total_header
        Animation.cancel_all(round_header, "opacity")
        Animation.cancel_all(total_header, "opacity")
        Animation(opacity=0 if transitioned else 1, d=CROSSFADE_S).start(round_header)
        Animation(opacity=1 if transitioned else 0, d=CROSSFADE_S).start(total_header)


class GameResultsScreen(SurfaceScreen):
    def on_kv_post(self, base_widget):
        self.surface.bind(entries=self.refresh_rows)
        self.refresh_rows()

    def refresh_rows(self, *args):
        box = self.ids.entries_box
        box.clear_widgets()
        for result in self.surface.entries:
            box.add_widget(GameResultRow(result, compact=self.surface.compact))
