"""Round results: rank by round score, then animate into total-score order.

The screen first lists players by the points they won this round. After a
dwell every row slides to its slot in the overall standings while its
"+N" label crossfades to the running total, and finally the rows are
physically re-sorted so later layout passes match what the viewer sees.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol, Sequence

from kivy.logger import Logger

from receiver.config.constants import (
    DEFAULT_ENTRY_SPACING,
    ENTRY_GAP_ESTIMATE,
    REORDER_DWELL_MS,
    REORDER_SETTLE_MS,
)
from receiver.core.models import Player, RoundResultsEvent
from receiver.core.render import is_compact
from receiver.core.scheduler import Scheduler, TimerGroup
from receiver.core.surfaces import LeaderboardEntry


class ReorderState(str, Enum):
    IDLE = "idle"
    SHOWING_BY_ROUND = "showing_by_round"
    REORDERING = "reordering"
    SHOWING_BY_TOTAL = "showing_by_total"


class LeaderboardMetrics(Protocol):
    """Layout measurements supplied by whatever draws the leaderboard."""

    def entry_spacing(self) -> float | None:
        """Distance between two adjacent rendered rows, or None with < 2 rows."""

    def entry_height(self) -> float | None:
        """Height of one rendered row, or None when nothing is laid out."""


def competition_ranks(ordered: Sequence, key: Callable) -> list[int]:
    """Rank an already sorted sequence: ties share a rank, then skip.

    ``[5, 5, 3]`` ranks as ``[1, 1, 3]``.
    """
    ranks = []
    rank = 1
    for index, item in enumerate(ordered):
        if index > 0 and key(ordered[index - 1]) != key(item):
            rank = index + 1
        ranks.append(rank)
    return ranks


def round_order(players: Sequence[Player]) -> list[Player]:
    # sorted() is stable: exact ties keep their payload order
    return sorted(players, key=lambda p: -(p.round_score or 0))


def total_order(players: Sequence[Player]) -> list[Player]:
    return sorted(
        players,
        key=lambda p: (-p.total_score, -(p.round_score or 0), p.name),
    )


@dataclass(frozen=True, slots=True)
class ReorderPlan:
    """Where each player starts and ends up, in round-score order."""

    players: tuple[Player, ...]
    display_ranks: tuple[int, ...]
    final_indexes: tuple[int, ...]
    final_ranks: tuple[int, ...]

    @classmethod
    def build(cls, players: Sequence[Player]) -> "ReorderPlan":
        by_round = round_order(players)
        by_total = total_order(players)
        display_ranks = competition_ranks(
            by_round, key=lambda p: p.round_score or 0)
        total_ranks = competition_ranks(by_total, key=lambda p: p.total_score)

        final_slot = {
            p.player_id: (index, total_ranks[index])
            for index, p in enumerate(by_total)
        }
        return cls(
            players=tuple(by_round),
            display_ranks=tuple(display_ranks),
            final_indexes=tuple(final_slot[p.player_id][0] for p in by_round),
            final_ranks=tuple(final_slot[p.player_id][1] for p in by_round),
        )

    def displacements(self, spacing: float) -> list[float]:
        return [
            (final - initial) * spacing
            for initial, final in enumerate(self.final_indexes)
        ]


class ReorderAnimator:
    """Drives the round results surface through its timed reorder.

    ``IDLE -> SHOWING_BY_ROUND -> REORDERING -> SHOWING_BY_TOTAL``. A new
    ``start`` cancels whatever is still pending from the previous round.
    """

    def __init__(self, surface, scheduler: Scheduler, metrics: LeaderboardMetrics | None = None) -> None:
        self.surface = surface
        self.metrics = metrics
        self.state = ReorderState.IDLE
        self.timers = TimerGroup(scheduler)
        self.plan: ReorderPlan | None = None

    def start(self, event: RoundResultsEvent) -> None:
        self.timers.cancel_all()

        plan = ReorderPlan.build(event.players)
        self.plan = plan

        surface = self.surface
        surface.round_number = str(event.round_number)
        surface.compact = is_compact(event.players)
        surface.header_transitioned = False
        surface.entries = [
            LeaderboardEntry(
                player_id=player.player_id,
                name=player.name,
                icon_id=player.icon_id,
                rank=plan.display_ranks[index],
                round_score=player.round_score or 0,
                total_score=player.total_score,
                initial_index=index,
                final_index=plan.final_indexes[index],
                final_rank=plan.final_ranks[index],
            )
            for index, player in enumerate(plan.players)
        ]

        self.state = ReorderState.SHOWING_BY_ROUND
        Logger.info(
            f"Leaderboard: round {event.round_number} shown by round score, "
            f"reordering in {REORDER_DWELL_MS}ms")
        self.timers.schedule(self._begin_reorder, REORDER_DWELL_MS)

    def cancel(self) -> None:
        self.timers.cancel_all()

    def measure_spacing(self) -> float:
        entries = self.surface.entries
        spacing = None
        height = None
        if self.metrics is not None:
            if len(entries) >= 2:
                spacing = self.metrics.entry_spacing()
            height = self.metrics.entry_height()
        if spacing:
            return spacing
        if entries and height:
            return height + ENTRY_GAP_ESTIMATE
        return DEFAULT_ENTRY_SPACING

    def _begin_reorder(self) -> None:
        self.surface.header_transitioned = True
        entries = list(self.surface.entries)
        if not entries:
            Logger.info("Leaderboard: no entries to reorder")
            self.state = ReorderState.SHOWING_BY_TOTAL
            return

        self.state = ReorderState.REORDERING
        spacing = self.measure_spacing()
        Logger.debug(f"Leaderboard: entry spacing {spacing}")
        for entry in entries:
            entry.rank = entry.final_rank
            entry.show_total = True
            entry.displacement = (entry.final_index - entry.initial_index) * spacing

        self.timers.schedule(self._settle, REORDER_SETTLE_MS)

    def _settle(self) -> None:
        entries = sorted(self.surface.entries, key=lambda e: e.final_index)
        for entry in entries:
            entry.displacement = 0
        self.surface.entries = entries
        self.state = ReorderState.SHOWING_BY_TOTAL
        Logger.info("Leaderboard: reorder complete")
