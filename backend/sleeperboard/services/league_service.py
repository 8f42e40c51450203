import asyncio
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from sleeperboard.config import settings
from sleeperboard.models import Recap
from sleeperboard.schemas.analysis import PositionTotalsResponse, TradeRecommendationResponse
from sleeperboard.schemas.league import OwnerInfo, StandingResponse
from sleeperboard.schemas.matchup import ChallengeResponse, EnrichedMatchup
from sleeperboard.services.aggregation import (
    RosterPositionTotals,
    accumulate_position_totals,
    compute_trade_signal,
    position_totals,
)
from sleeperboard.services.challenges import evaluate_challenge
from sleeperboard.services.enrichment import enrich_matchups
from sleeperboard.services.exceptions import UpstreamError
from sleeperboard.services.owners import build_standings, resolve_owners
from sleeperboard.services.player_cache import PlayerCacheService
from sleeperboard.services.prompts import NO_WEAKNESS_MESSAGE, build_recap_prompt, build_trade_prompt
from sleeperboard.services.recap_service import RecapStore
from sleeperboard.services.sleeper_client import SleeperClient
from sleeperboard.services.text_generator import TextGenerator

logger = logging.getLogger(__name__)


def select_free_agents(league_players: Any, limit: int) -> List[Dict[str, Any]]:
    """Unrostered players with a position and a name, in payload order."""
    if isinstance(league_players, dict):
        candidates = league_players.values()
    else:
        candidates = league_players or []

    free_agents = []
    for player in candidates:
        if not isinstance(player, dict):
            continue
        if player.get("status") == "FA" and player.get("position") and player.get("full_name"):
            free_agents.append(player)
            if len(free_agents) >= limit:
                break
    return free_agents


class LeagueService:
    """
    Per-request orchestration of Sleeper fetches, enrichment, aggregation
    and text generation for one league.

    Independent fetches are fanned out with asyncio.gather, which raises
    the first failure; every load-bearing fetch fails the whole request.
    Only HTTP fetches go into a fan-out: the player cache reads through the
    request's DB session, which must be idle by the time the handler exits.
    """

    def __init__(
        self,
        db: AsyncSession,
        client: SleeperClient,
        generator: TextGenerator,
        player_cache: Optional[PlayerCacheService] = None,
        sport: Optional[str] = None,
    ):
        self.db = db
        self.client = client
        self.generator = generator
        self.player_cache = player_cache or PlayerCacheService(client)
        self.sport = sport or settings.sport
        self.recaps = RecapStore(db)

    # --- Passthrough -------------------------------------------------------

    async def get_league(self, league_id: str) -> Dict[str, Any]:
        return await self.client.get_league(league_id)

    async def get_state(self) -> Dict[str, Any]:
        return await self.client.get_state(self.sport)

    async def current_week(self) -> int:
        state = await self.get_state()
        return int(state.get("week") or 0)

    async def get_players(self):
        return await self.player_cache.get_players(self.db, self.sport)

    # --- Standings / owners ---------------------------------------------------

    async def get_owners(self, league_id: str) -> Dict[int, OwnerInfo]:
        users, rosters = await asyncio.gather(
            self.client.get_users(league_id),
            self.client.get_rosters(league_id),
        )
        return resolve_owners(users, rosters)

    async def get_standings(self, league_id: str) -> List[StandingResponse]:
        users, rosters = await asyncio.gather(
            self.client.get_users(league_id),
            self.client.get_rosters(league_id),
        )
        return build_standings(users, rosters)

    # --- Matchups / challenges ---------------------------------------------

    async def get_enriched_matchups(self, league_id: str, week: int) -> List[EnrichedMatchup]:
        state = await self.get_state()
        season = state.get("season")
        directory = await self.get_players()

        raw_matchups, users, rosters, projections = await asyncio.gather(
            self.client.get_matchups(league_id, week),
            self.client.get_users(league_id),
            self.client.get_rosters(league_id),
            self.client.get_projections(self.sport, season, week),
        )
        owners = resolve_owners(users, rosters)
        return enrich_matchups(raw_matchups, directory, owners, projections)

    async def get_challenge(self, league_id: str, week: int) -> ChallengeResponse:
        matchups = await self.get_enriched_matchups(league_id, week)
        return evaluate_challenge(week, matchups)

    # --- Season aggregation ---------------------------------------------------

    async def fetch_season_matchups(self, league_id: str, through_week: int) -> List[List[Dict[str, Any]]]:
        """Raw matchups for weeks 1..through_week inclusive, in week order."""
        if through_week < 1:
            return []
        weeks = await asyncio.gather(*(
            self.client.get_matchups(league_id, week)
            for week in range(1, through_week + 1)
        ))
        return list(weeks)

    async def _season_totals(self, league_id: str) -> tuple[Dict[int, OwnerInfo], RosterPositionTotals]:
        through_week = await self.current_week()
        directory = await self.get_players()
        users, rosters = await asyncio.gather(
            self.client.get_users(league_id),
            self.client.get_rosters(league_id),
        )
        owners = resolve_owners(users, rosters)
        weekly = await self.fetch_season_matchups(league_id, through_week)
        return owners, accumulate_position_totals(weekly, directory, owners)

    async def get_position_totals(self, league_id: str, position: str) -> PositionTotalsResponse:
        owners, totals = await self._season_totals(league_id)
        return PositionTotalsResponse(
            position=position.upper(),
            totals=position_totals(totals, position, owners),
        )

    # --- Trade advice ---------------------------------------------------------

    async def get_free_agents(self, league_id: str) -> List[Dict[str, Any]]:
        """Free agents are supplementary: a failed fetch degrades to an empty list."""
        try:
            league_players = await self.client.get_league_players(league_id)
        except UpstreamError as e:
            logger.warning(f"Could not fetch free agents for league {league_id}: {e}")
            return []
        return select_free_agents(league_players, settings.free_agent_prompt_limit)

    async def get_trade_recommendations(self, league_id: str, roster_id: int) -> TradeRecommendationResponse:
        owners, totals = await self._season_totals(league_id)
        signal = compute_trade_signal(totals, roster_id, owners)

        if not signal.has_weaknesses:
            return TradeRecommendationResponse(recommendations=NO_WEAKNESS_MESSAGE)

        free_agents = await self.get_free_agents(league_id)
        prompt = build_trade_prompt(
            owners.get(roster_id, OwnerInfo()),
            signal.weaknesses,
            signal.surpluses,
            free_agents,
        )
        text = await self.generator.generate(prompt, temperature=settings.trade_temperature)

        return TradeRecommendationResponse(
            recommendations=text,
            weaknesses=signal.weaknesses,
            surpluses=signal.surpluses,
            free_agents=free_agents[:settings.free_agent_response_limit],
        )

    # --- Recaps ---------------------------------------------------------------

    async def get_recap(self, league_id: str, week: int) -> Optional[Recap]:
        return await self.recaps.get(league_id, week)

    async def generate_recap(
        self,
        league_id: str,
        week: int,
        style: Optional[str] = None,
        force: bool = False,
    ) -> Recap:
        """Return the stored recap unless ``force``; otherwise generate and overwrite it."""
        existing = await self.recaps.get(league_id, week)
        if existing is not None and not force:
            return existing

        style = style or settings.default_recap_style
        matchups = await self.get_enriched_matchups(league_id, week)
        prompt = build_recap_prompt(week, style, matchups)
        text = await self.generator.generate(prompt, temperature=settings.recap_temperature)
        return await self.recaps.save(league_id, week, style, text)
