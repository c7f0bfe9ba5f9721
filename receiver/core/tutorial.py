"""Scripted "how to play" walkthrough shown before the first round.

The walkthrough is one linear timeline of ``(offset_ms, action)`` pairs,
built fresh for every run and submitted to a single ``TimerGroup``. Any
nested timers (step fades, typewriter characters) join the same group, so
cancelling the group stops the whole run.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from kivy.logger import Logger

from receiver.config.constants import TUTORIAL_FADE_MS
from receiver.core.models import ScreenName, TutorialEvent
from receiver.core.render import round_loading_status
from receiver.core.scheduler import Scheduler, TimerGroup

PROMPT_LABELS = ("Prompt 1", "Prompt 2")
DEMO_ANSWERS = ("A clever answer!", "A witty response!")
LABEL_MS_PER_CHAR = 60
ANSWER_MS_PER_CHAR = 55


class TutorialState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


def time_label(answer_time_seconds: int) -> str:
    if answer_time_seconds == 60:
        return "1 Minute"
    return f"{answer_time_seconds} Second"


def typewriter_duration(text: str, ms_per_char: int) -> int:
    """Time from the first character until the reveal reports completion."""
    return len(text) * ms_per_char


def type_text(timers: TimerGroup, text: str, ms_per_char: int,
              append: Callable[[str], None], on_done: Callable[[], None] | None = None) -> None:
    """Reveal ``text`` one character at a time.

    The first character appears immediately, each next one ``ms_per_char``
    later. ``on_done`` runs one interval after the last character, never
    earlier, so chained reveals cannot overlap.
    """
    index = 0

    def type_next():
        nonlocal index
        if index < len(text):
            append(text[index])
            index += 1
            timers.schedule(type_next, ms_per_char)
        elif on_done is not None:
            on_done()

    type_next()


class Timeline:
    """Accumulates actions at a moving cursor."""

    def __init__(self) -> None:
        self.t = 0
        self.steps: list[tuple[int, Callable[[], None]]] = []

    def at(self, action: Callable[[], None]) -> None:
        self.steps.append((self.t, action))

    def wait(self, ms: int) -> None:
        self.t += ms


class TutorialScheduler:
    """Runs the walkthrough on the tutorial surface.

    ``IDLE -> RUNNING -> IDLE``. Leaving the tutorial screen cancels the run
    (wired up by the session through the registry).
    """

    def __init__(self, surface, registry, loading_surface, scheduler: Scheduler) -> None:
        self.surface = surface
        self.registry = registry
        self.loading_surface = loading_surface
        self.timers = TimerGroup(scheduler)
        self.state = TutorialState.IDLE
        self.duration_ms = 0

    @property
    def running(self) -> bool:
        return self.state is TutorialState.RUNNING

    @property
    def pending(self) -> int:
        return self.timers.pending

    def is_showing(self) -> bool:
        """True while a run is in progress on the visible tutorial screen."""
        return self.running and self.registry.is_showing(ScreenName.TUTORIAL)

    def cancel_all(self) -> None:
        self.timers.cancel_all()
        self.state = TutorialState.IDLE

    def start(self, event: TutorialEvent) -> bool:
        """Begin a fresh run. Returns False when a run is already on screen."""
        if self.is_showing():
            Logger.info("Tutorial: already running, ignoring duplicate")
            return False

        self.cancel_all()
        self.state = TutorialState.RUNNING
        self.surface.reset(event.total_rounds, time_label(event.answer_time_seconds))
        self.registry.activate(ScreenName.TUTORIAL)

        timeline = self.build_timeline(event)
        for offset, action in timeline.steps:
            self.timers.schedule(action, offset)
        self.duration_ms = timeline.t
        Logger.info(f"Tutorial: started, total duration {timeline.t}ms")
        return True

    def show_step(self, step: int) -> None:
        """Fade the current step out, then show ``step`` after the fade."""
        self.surface.fading_out = True

        def reveal():
            self.surface.visible_step = step
            self.surface.fading_out = False

        self.timers.schedule(reveal, TUTORIAL_FADE_MS)

    def build_timeline(self, event: TutorialEvent) -> Timeline:
        s = self.surface
        tl = Timeline()

        def step(n):
            return lambda: self.show_step(n)

        def setter(**values):
            def apply():
                for key, value in values.items():
                    setattr(s, key, value)
            return apply

        # Step 1: welcome is visible from the start
        tl.wait(1750)
        # Step 2: here's how it works
        tl.at(step(2))
        tl.wait(1750)
        # Step 3: N rounds
        tl.at(step(3))
        tl.wait(2000)

        # Step 4: prompts and the answering demo
        tl.at(step(4))
        tl.wait(2000)
        tl.at(setter(prompt1_visible=True))
        tl.wait(200)
        tl.at(setter(prompt2_visible=True))
        tl.wait(500)
        tl.at(setter(submit_state="visible"))
        tl.at(self._typing_chain())
        tl.wait(self.typing_chain_duration())
        tl.at(setter(submit_state="enabled"))
        tl.wait(500)
        tl.at(setter(submit_state="submitted"))
        tl.wait(500)
        tl.at(setter(submitted_text_visible=True))
        tl.wait(700 + 400)

        # Step 5: matched up
        tl.at(step(5))
        tl.wait(1000 + TUTORIAL_FADE_MS)
        tl.at(setter(vs_pink_visible=True))
        tl.wait(600)
        tl.at(setter(vs_text_visible=True))
        tl.wait(500)
        tl.at(setter(vs_green_visible=True))
        tl.wait(2600)

        # Step 6: earn points, optional bonus, remember
        tl.at(step(6))
        tl.wait(750)
        tl.at(setter(plus_one_state="float_in"))
        tl.wait(1000)
        tl.at(setter(plus_one_state="float_out"))
        tl.wait(500)
        if event.teach_bonus:
            tl.at(setter(bonus_text_visible=True))
            tl.wait(750)
            tl.at(setter(plus_one_bonus_state="float_in"))
            tl.wait(1000)
            tl.at(setter(plus_one_bonus_state="float_out"))
            tl.wait(500)
        tl.at(setter(remember_visible=True, remember_shaking=True))
        tl.wait(3750)

        # Step 7: get ready
        tl.at(step(7))
        tl.wait(3000)
        tl.at(self._finish)
        return tl

    def typing_chain_duration(self) -> int:
        total = 0
        for text, ms, gap in self._typing_script():
            total += typewriter_duration(text, ms) + gap
        return total

    def _typing_script(self):
        return (
            (PROMPT_LABELS[0], LABEL_MS_PER_CHAR, 150),
            (PROMPT_LABELS[1], LABEL_MS_PER_CHAR, 150),
            (DEMO_ANSWERS[0], ANSWER_MS_PER_CHAR, 150),
            (DEMO_ANSWERS[1], ANSWER_MS_PER_CHAR, 200),
        )

    def _typing_chain(self) -> Callable[[], None]:
        """Build the sequenced reveal: each label starts after the last ends."""
        s = self.surface

        def appender(prop):
            def append(ch):
                setattr(s, prop, getattr(s, prop) + ch)
            return append

        def answer_field(n):
            def mark():
                setattr(s, f"answer{n}_has_text", True)
            return mark

        targets = (
            (appender("prompt1_label"), None),
            (appender("prompt2_label"), None),
            (appender("answer1_text"), answer_field(1)),
            (appender("answer2_text"), answer_field(2)),
        )
        script = self._typing_script()

        def run(i):
            if i >= len(script):
                return
            text, ms, gap = script[i]
            append, before = targets[i]
            if before is not None:
                before()
            type_text(
                self.timers, text, ms, append,
                on_done=lambda: self.timers.schedule(lambda: run(i + 1), gap),
            )

        return lambda: run(0)

    def _finish(self) -> None:
        self.state = TutorialState.IDLE
        Logger.info("Tutorial: animation complete")
        self.loading_surface.status = round_loading_status(1)
        self.registry.activate(ScreenName.LOADING)
        self.timers.cancel_all()
