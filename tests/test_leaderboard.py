from __future__ import annotations

from dataclasses import dataclass

from receiver.config.constants import DEFAULT_ENTRY_SPACING, REORDER_DWELL_MS, REORDER_SETTLE_MS
from receiver.core.leaderboard import (
    ReorderAnimator,
    ReorderPlan,
    ReorderState,
    competition_ranks,
)
from receiver.core.models import Player, RoundResultsEvent
from receiver.core.surfaces import RoundResultsSurface


@dataclass
class FakeMetrics:
    spacing: float | None = None
    height: float | None = None

    def entry_spacing(self) -> float | None:
        return self.spacing

    def entry_height(self) -> float | None:
        return self.height


def _event(round_number: int = 1, *players: tuple[str, int, int]) -> RoundResultsEvent:
    return RoundResultsEvent.from_payload({
        "roundNumber": round_number,
        "players": [
            {"name": name, "iconId": "snail", "roundScore": round_score, "totalScore": total}
            for name, round_score, total in players
        ],
    })


ABC = (("A", 3, 10), ("B", 3, 7), ("C", 1, 12))


def _animator(scheduler, metrics=None) -> ReorderAnimator:
    return ReorderAnimator(RoundResultsSurface("round_results"), scheduler, metrics)


def test_competition_ranks_share_and_skip() -> None:
    assert competition_ranks([5, 5, 3], key=lambda v: v) == [1, 1, 3]
    assert competition_ranks([9, 7, 7, 7, 1], key=lambda v: v) == [1, 2, 2, 2, 5]
    assert competition_ranks([], key=lambda v: v) == []


def test_plan_for_tied_round_scores() -> None:
    plan = ReorderPlan.build(_event(1, *ABC).players)
    assert [p.name for p in plan.players] == ["A", "B", "C"]
    assert plan.display_ranks == (1, 1, 3)
    assert plan.final_indexes == (1, 2, 0)
    assert plan.final_ranks == (2, 3, 1)
    assert plan.displacements(75) == [75, 75, -150]


def test_exact_round_ties_keep_payload_order() -> None:
    plan = ReorderPlan.build(_event(1, ("Zed", 2, 1), ("Amy", 2, 1)).players)
    assert [p.name for p in plan.players] == ["Zed", "Amy"]
    # Equal totals and round scores: names decide the final order
    assert plan.final_indexes == (1, 0)
    assert plan.final_ranks == (1, 1)
    assert plan.display_ranks == (1, 1)


def test_equal_totals_are_ordered_by_round_score() -> None:
    plan = ReorderPlan.build(_event(1, ("Ann", 1, 10), ("Bob", 4, 10), ("Cy", 2, 3)).players)
    assert [p.name for p in plan.players] == ["Bob", "Cy", "Ann"]
    assert plan.final_indexes == (0, 2, 1)
    assert plan.final_ranks == (1, 3, 1)


def test_reorder_runs_from_round_order_to_total_order(scheduler) -> None:
    animator = _animator(scheduler)
    surface = animator.surface
    animator.start(_event(2, *ABC))

    assert animator.state is ReorderState.SHOWING_BY_ROUND
    assert surface.round_number == "2"
    assert [e.name for e in surface.entries] == ["A", "B", "C"]
    assert [e.rank for e in surface.entries] == [1, 1, 3]
    assert [e.round_score_text for e in surface.entries] == ["+3", "+3", "+1"]
    assert not surface.header_transitioned

    scheduler.advance(REORDER_DWELL_MS - 1)
    assert animator.state is ReorderState.SHOWING_BY_ROUND

    scheduler.advance(1)
    assert animator.state is ReorderState.REORDERING
    assert surface.header_transitioned
    assert all(e.show_total for e in surface.entries)
    assert [e.rank for e in surface.entries] == [2, 3, 1]
    assert [e.displacement for e in surface.entries] == [
        DEFAULT_ENTRY_SPACING, DEFAULT_ENTRY_SPACING, -2 * DEFAULT_ENTRY_SPACING]

    scheduler.advance(REORDER_SETTLE_MS)
    assert animator.state is ReorderState.SHOWING_BY_TOTAL
    assert [e.name for e in surface.entries] == ["C", "A", "B"]
    assert [e.rank for e in surface.entries] == [1, 2, 3]
    assert [e.total_score_text for e in surface.entries] == ["12 Pts", "10 Pts", "7 Pts"]
    assert all(e.displacement == 0 for e in surface.entries)
    assert animator.timers.pending == 0


def test_measured_spacing_wins_over_estimates(scheduler) -> None:
    animator = _animator(scheduler, FakeMetrics(spacing=90, height=60))
    animator.start(_event(1, *ABC))
    assert animator.measure_spacing() == 90

    animator.metrics = FakeMetrics(spacing=None, height=60)
    assert animator.measure_spacing() == 75

    animator.metrics = FakeMetrics()
    assert animator.measure_spacing() == DEFAULT_ENTRY_SPACING


def test_single_entry_uses_height_estimate(scheduler) -> None:
    animator = _animator(scheduler, FakeMetrics(spacing=90, height=50))
    animator.start(_event(1, ("Solo", 4, 4)))
    assert animator.measure_spacing() == 65

    scheduler.advance(REORDER_DWELL_MS + REORDER_SETTLE_MS)
    assert animator.state is ReorderState.SHOWING_BY_TOTAL
    assert animator.surface.entries[0].rank == 1
    assert animator.surface.entries[0].displacement == 0


def test_no_players_goes_straight_to_totals(scheduler) -> None:
    animator = _animator(scheduler)
    animator.start(_event(3))
    assert animator.surface.entries == []

    scheduler.advance(REORDER_DWELL_MS)
    assert animator.state is ReorderState.SHOWING_BY_TOTAL
    assert animator.surface.header_transitioned
    assert animator.timers.pending == 0


def test_restart_during_dwell_drops_old_timers(scheduler) -> None:
    animator = _animator(scheduler)
    animator.start(_event(1, *ABC))
    scheduler.advance(2000)

    animator.start(_event(2, ("X", 5, 5), ("Y", 1, 9)))
    assert animator.timers.pending == 1

    # The first round's reorder would have fired here
    scheduler.advance(1000)
    assert animator.state is ReorderState.SHOWING_BY_ROUND
    assert [e.name for e in animator.surface.entries] == ["X", "Y"]

    scheduler.advance(2000)
    assert animator.state is ReorderState.REORDERING
    scheduler.advance(REORDER_SETTLE_MS)
    assert [e.name for e in animator.surface.entries] == ["Y", "X"]


def test_restart_mid_reorder_starts_clean(scheduler) -> None:
    animator = _animator(scheduler)
    animator.start(_event(1, *ABC))
    scheduler.advance(REORDER_DWELL_MS + 100)
    assert animator.state is ReorderState.REORDERING

    animator.start(_event(2, *ABC))
    assert animator.state is ReorderState.SHOWING_BY_ROUND
    assert not animator.surface.header_transitioned
    assert all(not e.show_total and e.displacement == 0 for e in animator.surface.entries)

    scheduler.advance(REORDER_SETTLE_MS)
    assert [e.name for e in animator.surface.entries] == ["A", "B", "C"]
