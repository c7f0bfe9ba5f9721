"""Render functions: one per message type.

Each function copies an event into its screen's surface. They keep no
state between calls and schedule nothing; the dispatcher decides which
screen to show afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from receiver.config.constants import (
    COMPACT_LEADERBOARD_PLAYERS,
    TIMER_CRITICAL_SECONDS,
    TIMER_WARNING_SECONDS,
)
from receiver.core.models import (
    AnsweringEvent,
    CountdownEvent,
    GameResultsEvent,
    LobbyEvent,
    MatchupResultsEvent,
    MatchupSide,
    MatchupVotingEvent,
    Player,
)
from receiver.core.surfaces import points_label

GAME_LOADING_STATUS = "Loading Game..."


def timer_urgency(seconds_remaining: int) -> str:
    """Classify a countdown: "critical" <= 5s, "warning" <= 10s, else "neutral"."""
    if seconds_remaining <= TIMER_CRITICAL_SECONDS:
        return "critical"
    if seconds_remaining <= TIMER_WARNING_SECONDS:
        return "warning"
    return "neutral"


def round_loading_status(round_number) -> str:
    return f"Loading Round {round_number}..."


def is_compact(players) -> bool:
    return len(players) >= COMPACT_LEADERBOARD_PLAYERS


def render_lobby(event: LobbyEvent, surface) -> None:
    surface.game_name = event.game_name
    surface.host_name = event.host_name
    surface.player_count = f"{len(event.players)}/{event.max_players} players"
    surface.round_count = f"{event.total_rounds} rounds"
    surface.players = list(event.players)


def render_loading(surface, status: str = GAME_LOADING_STATUS) -> None:
    surface.status = status


def render_countdown(event: CountdownEvent, surface) -> None:
    surface.round_number = str(event.round_number)
    surface.countdown = str(event.seconds_remaining)
    surface.total_rounds = str(event.total_rounds)


def render_answering(event: AnsweringEvent, surface) -> None:
    surface.round_number = str(event.round_number)
    surface.seconds = str(event.seconds_remaining)
    surface.answers_received = str(event.answers_received)
    surface.total_players = str(event.total_players)
    surface.timer_urgency = timer_urgency(event.seconds_remaining)


def render_matchup_voting(event: MatchupVotingEvent, surface) -> None:
    surface.prompt_text = event.prompt_text
    surface.answer1 = event.answer1
    surface.answer2 = event.answer2
    surface.seconds = str(event.seconds_remaining)
    surface.votes_received = str(event.votes_received)
    surface.eligible_voters = str(event.eligible_voters)
    surface.matchup_number = str(event.matchup_number)
    surface.total_matchups = str(event.total_matchups)
    surface.timer_urgency = timer_urgency(event.seconds_remaining)


@dataclass(frozen=True, slots=True)
class MatchupWinners:
    side1: bool
    side2: bool
    abstain: bool


def matchup_winners(votes1: int, votes2: int, abstain_count: int) -> MatchupWinners:
    """Every bucket holding the most votes wins, abstentions included.

    With no abstentions the abstain bucket is hidden and cannot win, but it
    still takes part in the maximum (as zero).
    """
    max_votes = max(votes1, votes2, abstain_count)
    return MatchupWinners(
        side1=votes1 == max_votes,
        side2=votes2 == max_votes,
        abstain=abstain_count > 0 and abstain_count == max_votes,
    )


def _fill_result_card(card, side: MatchupSide, winner: bool) -> None:
    card.player_name = side.player_name
    card.answer = side.answer
    card.points = str(side.points)
    card.votes = str(side.votes)
    card.bonus_visible = side.gets_bonus
    card.voters = list(side.voters)
    card.winner = winner


def render_matchup_results(event: MatchupResultsEvent, surface) -> None:
    winners = matchup_winners(
        event.side1.votes, event.side2.votes, len(event.abstain_voters))

    surface.prompt_text = event.prompt_text
    _fill_result_card(surface.result1, event.side1, winners.side1)
    _fill_result_card(surface.result2, event.side2, winners.side2)

    surface.abstain_voters = list(event.abstain_voters)
    surface.abstain_visible = len(event.abstain_voters) > 0
    surface.abstain_winner = winners.abstain


@dataclass(frozen=True, slots=True)
class GameResultEntry:
    player: Player
    is_winner: bool
    is_last_place: bool

    @property
    def total_score_text(self) -> str:
        return points_label(self.player.total_score)


def game_result_entries(players) -> list[GameResultEntry]:
    """Badge the lowest rank value as winner and the highest as last place."""
    if not players:
        return []
    top_rank = min(p.rank for p in players)
    bottom_rank = max(p.rank for p in players)
    return [
        GameResultEntry(
            player=p,
            is_winner=p.rank == top_rank,
            is_last_place=p.rank == bottom_rank,
        )
        for p in players
    ]


def render_game_results(event: GameResultsEvent, surface) -> None:
    surface.compact = is_compact(event.players)
    surface.entries = game_result_entries(event.players)
