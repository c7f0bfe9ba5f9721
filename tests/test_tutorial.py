from __future__ import annotations

import json

from receiver.config.constants import TUTORIAL_FADE_MS
from receiver.core.models import ScreenName, TutorialEvent
from receiver.core.tutorial import (
    DEMO_ANSWERS,
    PROMPT_LABELS,
    TutorialState,
    time_label,
    typewriter_duration,
)

TYPING_START_MS = 8200


def _start(session, **fields) -> None:
    session.handle_message(json.dumps({"type": "tutorial", **fields}))


def test_time_label() -> None:
    assert time_label(60) == "1 Minute"
    assert time_label(30) == "30 Second"
    assert time_label(90) == "90 Second"


def test_start_resets_and_shows_step_one(session) -> None:
    _start(session, totalRounds=4, answerTimeSeconds=45)
    tutorial = session.tutorial
    surface = tutorial.surface

    assert session.current_screen is ScreenName.TUTORIAL
    assert tutorial.state is TutorialState.RUNNING
    assert tutorial.pending > 0
    assert surface.visible_step == 1
    assert surface.rounds_number == "4"
    assert surface.time_label == "45 Second"
    assert surface.submit_state == "hidden"


def test_step_changes_fade_out_first(session, scheduler) -> None:
    _start(session)
    surface = session.tutorial.surface

    scheduler.advance(1750)
    assert surface.fading_out is True
    assert surface.visible_step == 1

    scheduler.advance(TUTORIAL_FADE_MS)
    assert surface.fading_out is False
    assert surface.visible_step == 2

    scheduler.advance(3500 - 1750)
    assert surface.visible_step == 3


def test_typewriter_reveals_run_one_after_another(session, scheduler) -> None:
    _start(session)
    surface = session.tutorial.surface

    scheduler.advance(TYPING_START_MS)
    assert surface.prompt1_visible and surface.prompt2_visible
    assert surface.submit_state == "visible"
    assert surface.prompt1_label == "P"

    first = typewriter_duration(PROMPT_LABELS[0], 60)
    scheduler.advance(first)
    assert surface.prompt1_label == PROMPT_LABELS[0]
    assert surface.prompt2_label == ""

    scheduler.advance(150)
    assert surface.prompt2_label == "P"
    assert not surface.answer1_has_text

    scheduler.advance(session.tutorial.typing_chain_duration() - first - 150)
    assert surface.prompt2_label == PROMPT_LABELS[1]
    assert surface.answer1_has_text and surface.answer2_has_text
    assert surface.answer1_text == DEMO_ANSWERS[0]
    assert surface.answer2_text == DEMO_ANSWERS[1]
    assert surface.submit_state == "enabled"


def test_full_run_ends_on_round_one_loading(session, scheduler) -> None:
    _start(session)
    tutorial = session.tutorial
    surface = tutorial.surface
    seen_bonus = []
    surface.bind(bonus_text_visible=lambda inst, value: seen_bonus.append(value))

    scheduler.advance(tutorial.duration_ms - 3000 + TUTORIAL_FADE_MS)
    assert surface.visible_step == 7
    assert surface.remember_visible and surface.remember_shaking
    assert seen_bonus == [True]

    scheduler.advance(3000 - TUTORIAL_FADE_MS)
    assert session.current_screen is ScreenName.LOADING
    assert session.surfaces[ScreenName.LOADING].status == "Loading Round 1..."
    assert tutorial.state is TutorialState.IDLE
    assert tutorial.pending == 0
    assert scheduler.pending == 0


def test_bonus_lesson_can_be_left_out(session, scheduler) -> None:
    tutorial = session.tutorial
    with_bonus = tutorial.build_timeline(TutorialEvent(3, 60, True)).t
    without_bonus = tutorial.build_timeline(TutorialEvent(3, 60, False)).t
    assert with_bonus - without_bonus == 2250

    _start(session, teachBonus=False)
    assert tutorial.duration_ms == without_bonus
    surface = tutorial.surface
    seen_bonus = []
    surface.bind(bonus_text_visible=lambda inst, value: seen_bonus.append(value))
    scheduler.advance(without_bonus)
    assert seen_bonus == []
    assert session.current_screen is ScreenName.LOADING


def test_duplicate_start_is_ignored(session, scheduler) -> None:
    _start(session, totalRounds=5)
    scheduler.advance(4000)
    surface = session.tutorial.surface
    step = surface.visible_step

    assert session.tutorial.start(TutorialEvent(3, 60, True)) is False
    _start(session, totalRounds=2)
    assert surface.visible_step == step
    assert surface.rounds_number == "5"


def test_cancel_all_is_safe_when_idle(session) -> None:
    session.tutorial.cancel_all()
    assert session.tutorial.pending == 0
    assert session.tutorial.state is TutorialState.IDLE


def test_leaving_the_screen_cancels_the_run(session, scheduler) -> None:
    _start(session)
    scheduler.advance(TYPING_START_MS + 100)

    session.handle_message(json.dumps({"type": "end"}))
    assert session.current_screen is ScreenName.END
    assert session.tutorial.pending == 0
    assert session.tutorial.state is TutorialState.IDLE

    scheduler.advance(60000)
    assert session.current_screen is ScreenName.END


def test_restart_after_leaving_begins_from_step_one(session, scheduler) -> None:
    _start(session)
    scheduler.advance(6000)
    session.handle_message(json.dumps({"type": "loading"}))

    _start(session)
    surface = session.tutorial.surface
    assert session.current_screen is ScreenName.TUTORIAL
    assert surface.visible_step == 1
    assert surface.prompt1_label == ""
