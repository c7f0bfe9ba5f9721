from __future__ import annotations

import json

import pytest

from receiver.core.models import ScreenName
from receiver.core.session import ReceiverSession
from tests.fakes import FakeScheduler

ROUND_RESULTS = {
    "type": "round_results",
    "roundNumber": 1,
    "players": [
        {"name": "A", "iconId": "snail", "roundScore": 3, "totalScore": 10, "rank": 2},
        {"name": "B", "iconId": "ufo", "roundScore": 3, "totalScore": 7, "rank": 3},
        {"name": "C", "iconId": "cactus", "roundScore": 1, "totalScore": 12, "rank": 1},
    ],
}

MESSAGES = [
    ({"type": "lobby", "gameName": "G", "hostName": "H", "players": [], "maxPlayers": 8, "totalRounds": 3},
     ScreenName.LOBBY),
    ({"type": "tutorial"}, ScreenName.TUTORIAL),
    ({"type": "skip_tutorial"}, ScreenName.LOADING),
    ({"type": "loading"}, ScreenName.LOADING),
    ({"type": "loading_round", "roundNumber": 2}, ScreenName.LOADING),
    ({"type": "round_countdown", "roundNumber": 1, "secondsRemaining": 3, "totalRounds": 3},
     ScreenName.COUNTDOWN),
    ({"type": "answering", "roundNumber": 1, "secondsRemaining": 42, "answersReceived": 1, "totalPlayers": 4},
     ScreenName.ANSWERING),
    ({"type": "voting_transition"}, ScreenName.VOTING_TRANSITION),
    ({"type": "matchup_voting", "promptText": "P", "answer1": "a", "answer2": "b", "secondsRemaining": 9,
      "votesReceived": 0, "eligibleVoters": 2, "matchupNumber": 1, "totalMatchups": 4},
     ScreenName.MATCHUP_VOTING),
    ({"type": "matchup_results", "promptText": "P",
      "player1Name": "A", "answer1": "a", "player1Votes": 1, "player1Voters": ["ufo"], "player1GetsBonus": False,
      "player2Name": "B", "answer2": "b", "player2Votes": 0, "player2Voters": [], "player2GetsBonus": False,
      "abstainVoters": []},
     ScreenName.MATCHUP_RESULTS),
    (ROUND_RESULTS, ScreenName.ROUND_RESULTS),
    ({"type": "game_results", "players": [{"name": "A", "iconId": "snail", "totalScore": 5, "rank": 1}]},
     ScreenName.GAME_RESULTS),
    ({"type": "end"}, ScreenName.END),
]


def _send(session, payload: dict) -> None:
    session.handle_message(json.dumps(payload))


@pytest.mark.parametrize("payload, screen", MESSAGES, ids=[m[0]["type"] for m in MESSAGES])
def test_every_message_type_shows_its_screen(session, payload: dict, screen: ScreenName) -> None:
    _send(session, payload)
    assert session.current_screen is screen
    assert session.surfaces[screen].active
    assert sum(s.active for s in session.surfaces.values()) == 1


@pytest.mark.parametrize(
    "raw",
    ["{not json", "[]", '{"type": "dance"}', '{"no_type": 1}', "",
     '{"type": []}', '{"type": {}}', '{"type": {"a": 1}}', '{"type": 7}'],
)
def test_bad_messages_leave_the_screen_alone(session, raw: str) -> None:
    _send(session, {"type": "loading"})
    session.handle_message(raw)
    assert session.current_screen is ScreenName.LOADING


def test_incomplete_payload_touches_nothing(session) -> None:
    _send(session, {"type": "round_countdown", "roundNumber": 1, "secondsRemaining": 3, "totalRounds": 3})
    _send(session, {"type": "answering", "roundNumber": 2, "secondsRemaining": 30})

    assert session.current_screen is ScreenName.COUNTDOWN
    assert session.surfaces[ScreenName.ANSWERING].round_number == ""


def test_loading_messages_set_status(session) -> None:
    loading = session.surfaces[ScreenName.LOADING]
    _send(session, {"type": "loading"})
    assert loading.status == "Loading Game..."
    _send(session, {"type": "loading_round", "roundNumber": 3})
    assert loading.status == "Loading Round 3..."


def test_answering_sets_urgency(session) -> None:
    surface = session.surfaces[ScreenName.ANSWERING]
    for seconds, urgency in [(30, "neutral"), (10, "warning"), (5, "critical")]:
        _send(session, {"type": "answering", "roundNumber": 1, "secondsRemaining": seconds,
                        "answersReceived": 2, "totalPlayers": 4})
        assert surface.seconds == str(seconds)
        assert surface.timer_urgency == urgency
    assert surface.answers_received == "2"
    assert surface.total_players == "4"


def test_skip_tutorial_mid_run(session, scheduler) -> None:
    _send(session, {"type": "tutorial", "totalRounds": 3})
    scheduler.advance(9000)
    assert session.tutorial.pending > 0

    _send(session, {"type": "skip_tutorial"})
    assert session.tutorial.pending == 0
    assert session.current_screen is ScreenName.LOADING
    assert session.surfaces[ScreenName.LOADING].status == "Loading Round 1..."

    scheduler.advance(60000)
    assert session.current_screen is ScreenName.LOADING


def test_loading_round_waits_for_the_tutorial(session, scheduler) -> None:
    loading = session.surfaces[ScreenName.LOADING]
    _send(session, {"type": "tutorial"})
    scheduler.advance(2000)

    _send(session, {"type": "loading_round", "roundNumber": 1})
    assert session.current_screen is ScreenName.TUTORIAL
    assert loading.status == "Loading..."

    scheduler.advance(session.tutorial.duration_ms)
    _send(session, {"type": "loading_round", "roundNumber": 1})
    assert session.current_screen is ScreenName.LOADING
    assert loading.status == "Loading Round 1..."


def test_round_results_start_the_reorder(session, scheduler) -> None:
    _send(session, ROUND_RESULTS)
    surface = session.surfaces[ScreenName.ROUND_RESULTS]
    assert [e.name for e in surface.entries] == ["A", "B", "C"]

    scheduler.advance(5000)
    assert [e.name for e in surface.entries] == ["C", "A", "B"]
    assert surface.entry("C").rank == 1


def test_last_sender_leaving_ends_the_show(session) -> None:
    _send(session, {"type": "loading"})
    session.sender_attached("sender-1")
    assert session.current_screen is ScreenName.LOADING

    session.senders_detached()
    assert session.current_screen is ScreenName.END


def test_sessions_do_not_share_state() -> None:
    first = ReceiverSession(FakeScheduler())
    second = ReceiverSession(FakeScheduler())
    first.handle_message(json.dumps({"type": "end"}))
    assert first.current_screen is ScreenName.END
    assert second.current_screen is ScreenName.CONNECTING


def test_matchup_voting_timer_turns_critical(session) -> None:
    _send(session, {"type": "matchup_voting", "promptText": "P", "answer1": "a", "answer2": "b",
                    "secondsRemaining": 4, "votesReceived": 1, "eligibleVoters": 3,
                    "matchupNumber": 2, "totalMatchups": 4})
    surface = session.surfaces[ScreenName.MATCHUP_VOTING]
    assert surface.timer_urgency == "critical"
    assert (surface.matchup_number, surface.total_matchups) == ("2", "4")
    assert (surface.votes_received, surface.eligible_voters) == ("1", "3")


@pytest.mark.parametrize(
    "raw",
    [
        '{"type": "answering", "roundNumber": NaN, "secondsRemaining": 30, "answersReceived": 0, "totalPlayers": 2}',
        '{"type": "loading_round", "roundNumber": Infinity}',
        '{"type": "round_countdown", "roundNumber": 1, "secondsRemaining": -Infinity, "totalRounds": 3}',
    ],
)
def test_non_finite_numbers_are_dropped(session, raw: str) -> None:
    _send(session, {"type": "loading"})
    session.handle_message(raw)
    assert session.current_screen is ScreenName.LOADING
    assert session.surfaces[ScreenName.LOADING].status == "Loading Game..."


def test_game_results_without_ranks_are_dropped(session) -> None:
    _send(session, {"type": "loading"})
    _send(session, {"type": "game_results", "players": [
        {"name": "A", "iconId": "snail", "totalScore": 5, "rank": 1},
        {"name": "B", "iconId": "ufo", "totalScore": 3},
    ]})
    assert session.current_screen is ScreenName.LOADING
    assert session.surfaces[ScreenName.GAME_RESULTS].entries == []
