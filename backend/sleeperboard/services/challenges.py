"""
Weekly side challenges.

Each week maps to a Challenge whose rule is a pure function over that
week's enriched matchups. Weeks without a rule still report their name
and description with no winner; weeks outside the calendar fall back to
UNKNOWN_CHALLENGE. Ties always go to the first candidate encountered
(``min``/``max`` keep the first extreme).
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from sleeperboard.schemas.matchup import ChallengeResponse, ChallengeWinner, EnrichedMatchup, ResolvedPlayer
from sleeperboard.schemas.sleeper import TEAM_NAME_PLACEHOLDER

ChallengeRule = Callable[[List[EnrichedMatchup]], Optional[ChallengeWinner]]


@dataclass(frozen=True)
class Challenge:
    name: str
    description: str
    rule: Optional[ChallengeRule] = None


@dataclass(frozen=True)
class MatchupResult:
    winner: EnrichedMatchup
    margin: float
    losers: Tuple[EnrichedMatchup, ...]


def _winner(matchup: EnrichedMatchup, points: Optional[float], detail: Optional[str] = None) -> ChallengeWinner:
    name = matchup.team_name if matchup.team_name != TEAM_NAME_PLACEHOLDER else matchup.display_name
    return ChallengeWinner(
        name=name,
        team=matchup.team_name,
        manager=matchup.display_name,
        roster_id=matchup.roster_id,
        points=points,
        detail=detail,
    )


def _scored(matchups: List[EnrichedMatchup]) -> List[EnrichedMatchup]:
    return [m for m in matchups if m.points is not None]


def matchup_results(matchups: List[EnrichedMatchup]) -> List[MatchupResult]:
    """Decided head-to-head (or group) results. Ties at the top and byes are dropped."""
    groups: Dict[int, List[EnrichedMatchup]] = {}
    for m in _scored(matchups):
        if m.matchup_id is not None:
            groups.setdefault(m.matchup_id, []).append(m)

    results = []
    for group in groups.values():
        if len(group) < 2:
            continue
        ranked = sorted(group, key=lambda m: m.points, reverse=True)
        top, runner_up = ranked[0], ranked[1]
        if top.points == runner_up.points:
            continue
        results.append(MatchupResult(
            winner=top,
            margin=top.points - runner_up.points,
            losers=tuple(ranked[1:]),
        ))
    return results


def _starter_lines(matchups: List[EnrichedMatchup]) -> List[Tuple[EnrichedMatchup, ResolvedPlayer]]:
    return [(m, p) for m in matchups for p in m.starters]


# --- Rules ---------------------------------------------------------------

def highest_total_points(matchups: List[EnrichedMatchup]) -> Optional[ChallengeWinner]:
    best = max(_scored(matchups), key=lambda m: m.points, default=None)
    return _winner(best, best.points) if best is not None else None


def closest_to_21_without_going_over(matchups: List[EnrichedMatchup]) -> Optional[ChallengeWinner]:
    lines = [(m, p) for m, p in _starter_lines(matchups) if p.actual <= 21]
    best = max(lines, key=lambda line: line[1].actual, default=None)
    if best is None:
        return None
    m, p = best
    return _winner(m, p.actual, detail=f"{p.name} scored {p.actual:g}")


def most_points_in_a_loss(matchups: List[EnrichedMatchup]) -> Optional[ChallengeWinner]:
    losers = [loser for result in matchup_results(matchups) for loser in result.losers]
    best = max(losers, key=lambda m: m.points, default=None)
    return _winner(best, best.points) if best is not None else None


def biggest_margin_of_victory(matchups: List[EnrichedMatchup]) -> Optional[ChallengeWinner]:
    best = max(matchup_results(matchups), key=lambda r: r.margin, default=None)
    if best is None:
        return None
    return _winner(best.winner, best.winner.points, detail=f"won by {best.margin:.2f}")


def smallest_margin_of_victory(matchups: List[EnrichedMatchup]) -> Optional[ChallengeWinner]:
    best = min(matchup_results(matchups), key=lambda r: r.margin, default=None)
    if best is None:
        return None
    return _winner(best.winner, best.winner.points, detail=f"won by {best.margin:.2f}")


def closest_to_projection(matchups: List[EnrichedMatchup]) -> Optional[ChallengeWinner]:
    candidates = []
    for m in _scored(matchups):
        projections = [p.proj for p in m.starters if p.proj is not None]
        if not projections:
            continue
        projected = sum(projections)
        candidates.append((m, projected, abs(m.points - projected)))
    best = min(candidates, key=lambda c: c[2], default=None)
    if best is None:
        return None
    m, projected, _ = best
    return _winner(m, m.points, detail=f"projected {projected:.2f}")


def lowest_starter_in_a_win(matchups: List[EnrichedMatchup]) -> Optional[ChallengeWinner]:
    winners = [result.winner for result in matchup_results(matchups)]
    best = min(_starter_lines(winners), key=lambda line: line[1].actual, default=None)
    if best is None:
        return None
    m, p = best
    return _winner(m, m.points, detail=f"{p.name} scored {p.actual:g}")


def closest_to_30(matchups: List[EnrichedMatchup]) -> Optional[ChallengeWinner]:
    best = min(_starter_lines(matchups), key=lambda line: abs(line[1].actual - 30), default=None)
    if best is None:
        return None
    m, p = best
    return _winner(m, p.actual, detail=f"{p.name} scored {p.actual:g}")


# Weeks 2, 3, 7, 10 and 12 need per-stat lines (touchdowns, receptions,
# yardage, lineup slots) that matchups do not carry.
CHALLENGES: Dict[int, Challenge] = {
    1: Challenge("Hot Start", "The team that scores the most points wins.", highest_total_points),
    2: Challenge("Endzone Celebration", "The team that scores the most offensive touchdowns wins."),
    3: Challenge("Deadliest Catch", "The team with the most WR receptions wins."),
    4: Challenge(
        "Blackjack!",
        "The team with a player who scores the closest to 21 points without going over wins.",
        closest_to_21_without_going_over,
    ),
    5: Challenge(
        "Biggest Loser",
        "The team that scores the most points in a losing matchup wins.",
        most_points_in_a_loss,
    ),
    6: Challenge(
        "Like a Boss",
        "The team that wins its matchup by the biggest margin of victory wins.",
        biggest_margin_of_victory,
    ),
    7: Challenge("Rushing Attack", "The team with the most RB rushing yards wins."),
    8: Challenge(
        "Nailed It",
        "The team that scores closest to its projected point total (over or under) wins.",
        closest_to_projection,
    ),
    9: Challenge(
        "Dead Weight",
        "The team that wins its matchup with the week's lowest scoring starting player wins.",
        lowest_starter_in_a_win,
    ),
    10: Challenge("Hot Flex", "The team with the highest-scoring FLEX position wins."),
    11: Challenge(
        "Dirty Thirty",
        "The team with any player who scores the closest to 30 points (over or under) wins.",
        closest_to_30,
    ),
    12: Challenge("The Longest Yard", "The team with the longest QB passing play wins."),
    13: Challenge(
        "Lucky Stars",
        "The team that defeats its opponent by the smallest margin of victory wins.",
        smallest_margin_of_victory,
    ),
}

UNKNOWN_CHALLENGE = Challenge("Unknown Challenge", "No challenge defined for this week.")


def get_challenge(week: int) -> Challenge:
    return CHALLENGES.get(week, UNKNOWN_CHALLENGE)


def evaluate_challenge(week: int, matchups: List[EnrichedMatchup]) -> ChallengeResponse:
    challenge = get_challenge(week)
    winner = challenge.rule(matchups) if challenge.rule else None
    return ChallengeResponse(
        week=week,
        challenge=challenge.name,
        description=challenge.description,
        winner=winner,
    )
