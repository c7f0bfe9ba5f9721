"""Screen content models.

Each screen of the display is backed by a surface: a plain
``EventDispatcher`` holding the values the screen shows. Render functions
and animators write to surfaces; the Kivy screens bind to them. Surfaces
never create widgets, so they work without a window.
"""

from kivy.event import EventDispatcher
from kivy.properties import (
    BooleanProperty,
    ListProperty,
    NumericProperty,
    ObjectProperty,
    OptionProperty,
    StringProperty,
)

from receiver.core.models import ScreenName

TIMER_URGENCY = ("neutral", "warning", "critical")


def points_label(total_score):
    """Return "1 Pt" or "N Pts"."""
    return f"{total_score} {'Pt' if total_score == 1 else 'Pts'}"


class Surface(EventDispatcher):
    active = BooleanProperty(False)

    def __init__(self, name, **kwargs):
        super().__init__(**kwargs)
        self.name = ScreenName(name)


class LobbySurface(Surface):
    game_name = StringProperty("")
    host_name = StringProperty("")
    player_count = StringProperty("")
    round_count = StringProperty("")
    players = ListProperty([])


class LoadingSurface(Surface):
    status = StringProperty("Loading...")


class CountdownSurface(Surface):
    round_number = StringProperty("")
    countdown = StringProperty("")
    total_rounds = StringProperty("")


class AnsweringSurface(Surface):
    round_number = StringProperty("")
    seconds = StringProperty("")
    answers_received = StringProperty("")
    total_players = StringProperty("")
    timer_urgency = OptionProperty("neutral", options=TIMER_URGENCY)


class MatchupVotingSurface(Surface):
    prompt_text = StringProperty("")
    answer1 = StringProperty("")
    answer2 = StringProperty("")
    seconds = StringProperty("")
    votes_received = StringProperty("")
    eligible_voters = StringProperty("")
    matchup_number = StringProperty("")
    total_matchups = StringProperty("")
    timer_urgency = OptionProperty("neutral", options=TIMER_URGENCY)


class MatchupResultCard(EventDispatcher):
    """One side of a finished matchup."""

    player_name = StringProperty("")
    answer = StringProperty("")
    points = StringProperty("")
    votes = StringProperty("")
    voters = ListProperty([])
    bonus_visible = BooleanProperty(False)
    winner = BooleanProperty(False)


class MatchupResultsSurface(Surface):
    prompt_text = StringProperty("")
    result1 = ObjectProperty(None, rebind=True)
    result2 = ObjectProperty(None, rebind=True)
    abstain_voters = ListProperty([])
    abstain_visible = BooleanProperty(False)
    abstain_winner = BooleanProperty(False)

    def __init__(self, name, **kwargs):
        super().__init__(name, **kwargs)
        self.result1 = MatchupResultCard()
        self.result2 = MatchupResultCard()


class LeaderboardEntry(EventDispatcher):
    """One animated row of the round results leaderboard."""

    player_id = StringProperty("")
    name = StringProperty("")
    icon_id = StringProperty("")
    rank = NumericProperty(1)
    round_score = NumericProperty(0)
    total_score = NumericProperty(0)
    initial_index = NumericProperty(0)
    final_index = NumericProperty(0)
    final_rank = NumericProperty(1)
    # False: "+N" round score label, True: "N Pts" total label
    show_total = BooleanProperty(False)
    # Vertical travel in pixels toward the final slot, positive is down
    displacement = NumericProperty(0)

    @property
    def round_score_text(self):
        return f"+{self.round_score}"

    @property
    def total_score_text(self):
        return points_label(self.total_score)


class RoundResultsSurface(Surface):
    round_number = StringProperty("")
    entries = ListProperty([])
    compact = BooleanProperty(False)
    # Scores header crossfade: "Round Scores" -> "Total Scores"
    header_transitioned = BooleanProperty(False)

    def entry(self, player_id):
        for entry in self.entries:
            if entry.player_id == player_id:
                return entry
        raise KeyError(player_id)


class GameResultsSurface(Surface):
    entries = ListProperty([])
    compact = BooleanProperty(False)


class TutorialSurface(Surface):
    """Every element the tutorial timeline toggles."""

    visible_step = NumericProperty(1)
    fading_out = BooleanProperty(False)

    rounds_number = StringProperty("")
    time_label = StringProperty("")

    prompt1_visible = BooleanProperty(False)
    prompt2_visible = BooleanProperty(False)
    prompt1_label = StringProperty("")
    prompt2_label = StringProperty("")
    answer1_has_text = BooleanProperty(False)
    answer2_has_text = BooleanProperty(False)
    answer1_text = StringProperty("")
    answer2_text = StringProperty("")
    submit_state = OptionProperty(
        "hidden", options=("hidden", "visible", "enabled", "submitted"))
    submitted_text_visible = BooleanProperty(False)

    vs_pink_visible = BooleanProperty(False)
    vs_text_visible = BooleanProperty(False)
    vs_green_visible = BooleanProperty(False)

    plus_one_state = OptionProperty(
        "hidden", options=("hidden", "float_in", "float_out"))
    bonus_text_visible = BooleanProperty(False)
    plus_one_bonus_state = OptionProperty(
        "hidden", options=("hidden", "float_in", "float_out"))
    remember_visible = BooleanProperty(False)
    remember_shaking = BooleanProperty(False)

    def reset(self, rounds_number, time_label):
        self.visible_step = 1
        self.fading_out = False
        self.rounds_number = str(rounds_number)
        self.time_label = time_label
        self.prompt1_visible = self.prompt2_visible = False
        self.prompt1_label = self.prompt2_label = ""
        self.answer1_has_text = self.answer2_has_text = False
        self.answer1_text = self.answer2_text = ""
        self.submit_state = "hidden"
        self.submitted_text_visible = False
        self.vs_pink_visible = self.vs_text_visible = self.vs_green_visible = False
        self.plus_one_state = "hidden"
        self.bonus_text_visible = False
        self.plus_one_bonus_state = "hidden"
        self.remember_visible = self.remember_shaking = False


SURFACE_TYPES = {
    ScreenName.CONNECTING: Surface,
    ScreenName.LOBBY: LobbySurface,
    ScreenName.TUTORIAL: TutorialSurface,
    ScreenName.LOADING: LoadingSurface,
    ScreenName.COUNTDOWN: CountdownSurface,
    ScreenName.ANSWERING: AnsweringSurface,
    ScreenName.VOTING_TRANSITION: Surface,
    ScreenName.MATCHUP_VOTING: MatchupVotingSurface,
    ScreenName.MATCHUP_RESULTS: MatchupResultsSurface,
    ScreenName.ROUND_RESULTS: RoundResultsSurface,
    ScreenName.GAME_RESULTS: GameResultsSurface,
    ScreenName.END: Surface,
}


def build_surfaces():
    """Create one fresh surface per screen."""
    return {name: surface_type(name) for name, surface_type in SURFACE_TYPES.items()}
