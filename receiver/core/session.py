"""One display's worth of screen state.

A session owns the surfaces, the screen registry, both animators and the
dispatcher. Nothing here is module-global, so several sessions can live
side by side (the tests rely on that).
"""

from kivy.logger import Logger

from receiver.core.dispatcher import Dispatcher
from receiver.core.leaderboard import ReorderAnimator
from receiver.core.models import ScreenName
from receiver.core.registry import ScreenRegistry
from receiver.core.surfaces import build_surfaces
from receiver.core.tutorial import TutorialScheduler


class ReceiverSession:
    def __init__(self, scheduler, metrics=None):
        self.surfaces = build_surfaces()
        self.registry = ScreenRegistry(self.surfaces)
        self.reorder = ReorderAnimator(
            self.surfaces[ScreenName.ROUND_RESULTS], scheduler, metrics)
        self.tutorial = TutorialScheduler(
            self.surfaces[ScreenName.TUTORIAL],
            self.registry,
            self.surfaces[ScreenName.LOADING],
            scheduler,
        )
        self.registry.on_leave_screen(ScreenName.TUTORIAL, self.tutorial.cancel_all)
        self.dispatcher = Dispatcher(
            self.surfaces, self.registry, self.reorder, self.tutorial)

    @property
    def current_screen(self):
        return self.registry.current_screen

    def handle_message(self, raw_message):
        self.dispatcher.handle(raw_message)

    def sender_attached(self, sender_id):
        Logger.info(f"Session: sender {sender_id} connected")

    def senders_detached(self):
        """The last sender left: nothing will drive the display any more."""
        Logger.info("Session: no senders left, showing end screen")
        self.registry.activate(ScreenName.END)
