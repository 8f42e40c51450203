"""Prompt text sent to the text-generation provider."""
from typing import Any, Dict, List

from sleeperboard.schemas.analysis import SurplusEntry, Weakness
from sleeperboard.schemas.league import OwnerInfo
from sleeperboard.schemas.matchup import EnrichedMatchup

NO_WEAKNESS_MESSAGE = "This team has no glaring weaknesses below the league median."

TRADE_PROMPT = """You are a fantasy football trade advisor.
The team "{display_name}" ({team_name}) is weak at these positions:
{weaknesses}

Other teams have surpluses:
{surpluses}

Available free agents:
{free_agents}

Suggest specific trade targets (by player name) and free agent pickups.
Explain how each move helps address their weaknesses.
Keep it practical, concise, and written in a fantasy football manager tone."""

RECAP_PROMPT = """You are a fantasy football recap writer.
Summarize these Week {week} matchups in a {style} style.
Here are the results:

{results}"""


def summarize_weaknesses(weaknesses: List[Weakness]) -> str:
    return "\n".join(
        f"{w.position}: {w.team_value:.1f} vs league median {w.median_value:.1f}"
        for w in weaknesses
    )


def summarize_surpluses(surpluses: Dict[str, List[SurplusEntry]]) -> str:
    lines = []
    for position, entries in surpluses.items():
        names = ", ".join(f"{e.owner.display_name} ({e.owner.team_name})" for e in entries)
        lines.append(f"{position}: {names}")
    return "\n".join(lines)


def summarize_free_agents(free_agents: List[Dict[str, Any]]) -> str:
    return ", ".join(
        f"{fa.get('full_name')} ({fa.get('position')}, {fa.get('team') or 'FA'})"
        for fa in free_agents
    )


def build_trade_prompt(
    owner: OwnerInfo,
    weaknesses: List[Weakness],
    surpluses: Dict[str, List[SurplusEntry]],
    free_agents: List[Dict[str, Any]],
) -> str:
    return TRADE_PROMPT.format(
        display_name=owner.display_name,
        team_name=owner.team_name,
        weaknesses=summarize_weaknesses(weaknesses),
        surpluses=summarize_surpluses(surpluses) or "None",
        free_agents=summarize_free_agents(free_agents) or "None",
    )


def summarize_results(matchups: List[EnrichedMatchup]) -> str:
    return "\n".join(
        f"{m.display_name or m.team_name} scored {(m.points or 0):.1f} points."
        for m in matchups
    )


def build_recap_prompt(week: int, style: str, matchups: List[EnrichedMatchup]) -> str:
    return RECAP_PROMPT.format(week=week, style=style, results=summarize_results(matchups))
