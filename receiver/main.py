"""Receiver application entry point for the Half-Wit display.

This module initializes the Kivy application, registers one screen per
display state, and starts the sender listener and the presence broadcast.
"""

import sys
from pathlib import Path

# Allow running as `python main.py` inside the receiver folder.
if __package__ in (None, ""):
    ROOT = Path(__file__).resolve().parent.parent
    if str(ROOT) not in sys.path:
        sys.path.insert(0, str(ROOT))
    __package__ = "receiver"

from kivy.app import App
from kivy.clock import Clock
from kivy.lang import Builder
from kivy.logger import LOG_LEVELS, Logger
from kivy.resources import resource_add_path
from kivy.uix.screenmanager import NoTransition, ScreenManager

from receiver.config import (
    DISCOVERY_ENABLED,
    DISCOVERY_INTERVAL,
    DISCOVERY_PORT_AUTO_FALLBACK,
    FULLSCREEN,
    LOG_LEVEL,
    PREFERRED_DISCOVERY_PORT,
    find_available_discovery_port,
)
from receiver.core import KivyScheduler, ReceiverSession, ScreenName
from receiver.core.discovery import PresenceBroadcaster
from receiver.core.listener import SenderListener
from receiver.screens.loading_screen import LoadingScreen
from receiver.screens.lobby_screen import LobbyScreen
from receiver.screens.matchup_results_screen import MatchupResultsScreen
from receiver.screens.message_screen import MessageScreen
from receiver.screens.results_screens import GameResultsScreen, RoundResultsScreen
from receiver.screens.round_screens import AnsweringScreen, CountdownScreen, MatchupVotingScreen
from receiver.screens.tutorial_screen import TutorialScreen
from receiver.ui.kv_layout import KV
from receiver.widgets.timer_circle import TimerCircle

MESSAGE_SCREENS = {
    ScreenName.CONNECTING: ("Half-Wit", "Waiting for the host to connect..."),
    ScreenName.VOTING_TRANSITION: ("Time to Vote!", "Pick your favourite answer on your phone"),
    ScreenName.END: ("Thanks for Playing!", "The host has disconnected"),
}

SCREEN_TYPES = {
    ScreenName.LOBBY: LobbyScreen,
    ScreenName.TUTORIAL: TutorialScreen,
    ScreenName.LOADING: LoadingScreen,
    ScreenName.COUNTDOWN: CountdownScreen,
    ScreenName.ANSWERING: AnsweringScreen,
    ScreenName.MATCHUP_VOTING: MatchupVotingScreen,
    ScreenName.MATCHUP_RESULTS: MatchupResultsScreen,
    ScreenName.ROUND_RESULTS: RoundResultsScreen,
    ScreenName.GAME_RESULTS: GameResultsScreen,
}


def on_display_thread(callback):
    """Wrap a network-thread callback so it runs on the Kivy main thread."""
    def schedule(*args):
        Clock.schedule_once(lambda dt: callback(*args), 0)
    return schedule


class ReceiverApp(App):
    def build(self):
        """Build the screen manager and start listening for senders."""
        self.title = "Half-Wit"
        Logger.setLevel(LOG_LEVELS.get(LOG_LEVEL, LOG_LEVELS["info"]))

        resource_add_path(str(Path(__file__).parent / "assets"))
        Builder.load_string(KV)

        if FULLSCREEN:
            from kivy.core.window import Window
            Window.fullscreen = "auto"

        self.session = ReceiverSession(KivyScheduler())
        surfaces = self.session.surfaces

        sm = ScreenManager(transition=NoTransition())
        for name in ScreenName:
            if name in MESSAGE_SCREENS:
                title, subtitle = MESSAGE_SCREENS[name]
                screen = MessageScreen(
                    name=name.value, surface=surfaces[name], title=title, subtitle=subtitle)
            else:
                screen = SCREEN_TYPES[name](name=name.value, surface=surfaces[name])
            sm.add_widget(screen)
        sm.current = self.session.registry.current

        # The reorder animator measures the rendered leaderboard
        self.session.reorder.metrics = sm.get_screen(ScreenName.ROUND_RESULTS.value)
        self.session.registry.bind(current=lambda inst, value: setattr(sm, "current", value))

        self.listener = SenderListener(
            on_message=on_display_thread(self.session.handle_message),
            on_attached=on_display_thread(self.session.sender_attached),
            on_all_detached=on_display_thread(self.session.senders_detached),
        )
        port = self.listener.start()

        self.broadcaster = None
        if port is not None and DISCOVERY_ENABLED:
            discovery_port = find_available_discovery_port(
                PREFERRED_DISCOVERY_PORT, allow_fallback=DISCOVERY_PORT_AUTO_FALLBACK)
            if discovery_port is None:
                Logger.warning("Discovery: no UDP port available, presence broadcast disabled")
            else:
                self.broadcaster = PresenceBroadcaster(port, discovery_port, DISCOVERY_INTERVAL)
                self.broadcaster.start()

        return sm

    def on_stop(self):
        if self.broadcaster is not None:
            self.broadcaster.stop()
        self.listener.stop()


def main():
    """Run the Half-Wit receiver display."""
    ReceiverApp().run()


if __name__ == "__main__":
    main()
