"""
Season-to-date position totals and the median-based trade signal.

Totals are accumulated from each week's raw matchups: every player on a
roster's full player list contributes his actual points for that week to
the roster's running total at his position. Accumulation is plain
summation, so weeks may be fetched in any order, but they are folded in
week order to keep roster encounter order (and therefore tie order)
deterministic.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from sleeperboard.schemas.analysis import PositionTotal, SurplusEntry, Weakness
from sleeperboard.schemas.league import OwnerInfo
from sleeperboard.schemas.sleeper import PlayerDirectory, SleeperMatchup

logger = logging.getLogger(__name__)

# roster_id -> position -> points
RosterPositionTotals = Dict[int, Dict[str, float]]


def accumulate_position_totals(
    weekly_matchups: Iterable[Iterable[Dict[str, Any]]],
    directory: PlayerDirectory,
    owners: Dict[int, OwnerInfo],
) -> RosterPositionTotals:
    """
    Sum actual points per roster per position across the given weeks.

    Every known roster that appears in a matchup gets an entry, even if it
    never rostered a given position. A position key exists for a roster
    only once a player at that position has been seen on it. Rosters
    missing from ``owners`` and players missing from the directory (or
    without any position) are skipped.
    """
    totals: RosterPositionTotals = {}
    for week_matchups in weekly_matchups:
        for raw in week_matchups or []:
            matchup = SleeperMatchup.model_validate(raw)
            if matchup.roster_id not in owners:
                logger.debug(f"Skipping matchup for unknown roster {matchup.roster_id}")
                continue
            roster_totals = totals.setdefault(matchup.roster_id, {})
            for pid in matchup.players or []:
                if pid is None:
                    continue
                player = directory.get(pid)
                if player is None:
                    continue
                position = player.resolved_position.upper()
                if not position:
                    continue
                roster_totals[position] = roster_totals.get(position, 0.0) + matchup.points_for(pid)
    return totals


def position_totals(
    totals: RosterPositionTotals,
    position: str,
    owners: Dict[int, OwnerInfo],
) -> List[PositionTotal]:
    """One position's totals for every roster, highest first. Ties keep encounter order."""
    position = position.upper()
    rows = []
    for roster_id, by_position in totals.items():
        owner = owners.get(roster_id, OwnerInfo())
        rows.append(PositionTotal(
            roster_id=roster_id,
            team_name=owner.team_name,
            display_name=owner.display_name,
            points=by_position.get(position, 0.0),
        ))
    # sorted() is stable
    return sorted(rows, key=lambda row: row.points, reverse=True)


def position_median(values: Iterable[float]) -> Optional[float]:
    """
    Element at index n // 2 of the values sorted highest first.

    For an even count this is the lower of the two middle values, not
    their average. Returns None for an empty distribution.
    """
    ordered = sorted(values, reverse=True)
    if not ordered:
        return None
    return ordered[len(ordered) // 2]


def league_medians(totals: RosterPositionTotals) -> Dict[str, float]:
    """Median per position over the rosters that have an entry at that position."""
    distributions: Dict[str, List[float]] = {}
    for by_position in totals.values():
        for position, points in by_position.items():
            distributions.setdefault(position, []).append(points)

    medians = {}
    for position, values in distributions.items():
        median = position_median(values)
        if median is not None:
            medians[position] = median
    return medians


def find_weaknesses(
    totals: RosterPositionTotals,
    roster_id: int,
    medians: Dict[str, float],
) -> List[Weakness]:
    """Positions where the roster sits strictly below the league median (absent counts as 0)."""
    own = totals.get(roster_id, {})
    weaknesses = []
    for position, median in medians.items():
        value = own.get(position, 0.0)
        if value < median:
            weaknesses.append(Weakness(position=position, team_value=value, median_value=median))
    return weaknesses


def find_surpluses(
    totals: RosterPositionTotals,
    roster_id: int,
    medians: Dict[str, float],
    owners: Dict[int, OwnerInfo],
) -> Dict[str, List[SurplusEntry]]:
    """Other rosters' positions that sit strictly above the league median."""
    surpluses: Dict[str, List[SurplusEntry]] = {}
    for other_id, by_position in totals.items():
        if other_id == roster_id:
            continue
        for position, value in by_position.items():
            median = medians.get(position)
            if median is None or value <= median:
                continue
            surpluses.setdefault(position, []).append(SurplusEntry(
                team_id=other_id,
                owner=owners.get(other_id, OwnerInfo()),
                total=value,
            ))
    return surpluses


@dataclass
class TradeSignal:
    roster_id: int
    medians: Dict[str, float] = field(default_factory=dict)
    weaknesses: List[Weakness] = field(default_factory=list)
    surpluses: Dict[str, List[SurplusEntry]] = field(default_factory=dict)

    @property
    def has_weaknesses(self) -> bool:
        return bool(self.weaknesses)


def compute_trade_signal(
    totals: RosterPositionTotals,
    roster_id: int,
    owners: Dict[int, OwnerInfo],
) -> TradeSignal:
    """Weaknesses for ``roster_id`` and surpluses elsewhere. Surpluses are only
    computed when there is at least one weakness to address."""
    medians = league_medians(totals)
    signal = TradeSignal(
        roster_id=roster_id,
        medians=medians,
        weaknesses=find_weaknesses(totals, roster_id, medians),
    )
    if signal.has_weaknesses:
        signal.surpluses = find_surpluses(totals, roster_id, medians, owners)
    return signal
