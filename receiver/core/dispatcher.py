"""Routes each inbound sender message to a render and a screen switch."""

from kivy.logger import Logger

from receiver.core import render
from receiver.core.errors import ReceiverError, UnknownEventType
from receiver.core.models import (
    AnsweringEvent,
    CountdownEvent,
    GameResultsEvent,
    LoadingRoundEvent,
    LobbyEvent,
    MatchupResultsEvent,
    MatchupVotingEvent,
    RoundResultsEvent,
    ScreenName,
    TutorialEvent,
)
from receiver.core.protocol import decode_event


class Dispatcher:
    """Top-level message handler.

    Each message is decoded and validated before any surface is touched.
    Malformed messages, unknown types and incomplete payloads are logged
    and dropped; the screen on display stays as it is.
    """

    def __init__(self, surfaces, registry, reorder, tutorial):
        self.surfaces = surfaces
        self.registry = registry
        self.reorder = reorder
        self.tutorial = tutorial
        self._handlers = {
            "lobby": self.on_lobby,
            "tutorial": self.on_tutorial,
            "skip_tutorial": self.on_skip_tutorial,
            "loading": self.on_loading,
            "loading_round": self.on_loading_round,
            "round_countdown": self.on_round_countdown,
            "answering": self.on_answering,
            "voting_transition": self.on_voting_transition,
            "matchup_voting": self.on_matchup_voting,
            "matchup_results": self.on_matchup_results,
            "round_results": self.on_round_results,
            "game_results": self.on_game_results,
            "end": self.on_end,
        }

    def handle(self, raw_message):
        try:
            data = decode_event(raw_message)
            msg_type = data.get("type")
            handler = self._handlers.get(msg_type) if isinstance(msg_type, str) else None
            if handler is None:
                raise UnknownEventType(msg_type)
            Logger.debug(f"Dispatcher: received {msg_type}")
            handler(data)
        except ReceiverError as exc:
            Logger.warning(f"Dispatcher: dropped message: {exc}")

    def _show(self, name):
        self.registry.activate(name)

    def on_lobby(self, data):
        event = LobbyEvent.from_payload(data)
        render.render_lobby(event, self.surfaces[ScreenName.LOBBY])
        self._show(ScreenName.LOBBY)

    def on_tutorial(self, data):
        self.tutorial.start(TutorialEvent.from_payload(data))

    def on_skip_tutorial(self, data):
        Logger.info("Dispatcher: skip_tutorial received, clearing tutorial")
        self.tutorial.cancel_all()
        render.render_loading(
            self.surfaces[ScreenName.LOADING], render.round_loading_status(1))
        self._show(ScreenName.LOADING)

    def on_loading(self, data):
        render.render_loading(self.surfaces[ScreenName.LOADING])
        self._show(ScreenName.LOADING)

    def on_loading_round(self, data):
        # Loading rebroadcasts must not interrupt the walkthrough
        if self.tutorial.is_showing():
            Logger.info("Dispatcher: tutorial running, ignoring loading_round")
            return
        event = LoadingRoundEvent.from_payload(data)
        render.render_loading(
            self.surfaces[ScreenName.LOADING], render.round_loading_status(event.round_number))
        self._show(ScreenName.LOADING)

    def on_round_countdown(self, data):
        event = CountdownEvent.from_payload(data)
        render.render_countdown(event, self.surfaces[ScreenName.COUNTDOWN])
        self._show(ScreenName.COUNTDOWN)

    def on_answering(self, data):
        event = AnsweringEvent.from_payload(data)
        render.render_answering(event, self.surfaces[ScreenName.ANSWERING])
        self._show(ScreenName.ANSWERING)

    def on_voting_transition(self, data):
        self._show(ScreenName.VOTING_TRANSITION)

    def on_matchup_voting(self, data):
        event = MatchupVotingEvent.from_payload(data)
        render.render_matchup_voting(event, self.surfaces[ScreenName.MATCHUP_VOTING])
        self._show(ScreenName.MATCHUP_VOTING)

    def on_matchup_results(self, data):
        event = MatchupResultsEvent.from_payload(data)
        render.render_matchup_results(event, self.surfaces[ScreenName.MATCHUP_RESULTS])
        self._show(ScreenName.MATCHUP_RESULTS)

    def on_round_results(self, data):
        event = RoundResultsEvent.from_payload(data)
        self.reorder.start(event)
        self._show(ScreenName.ROUND_RESULTS)

    def on_game_results(self, data):
        event = GameResultsEvent.from_payload(data)
        render.render_game_results(event, self.surfaces[ScreenName.GAME_RESULTS])
        self._show(ScreenName.GAME_RESULTS)

    def on_end(self, data):
        self._show(ScreenName.END)
