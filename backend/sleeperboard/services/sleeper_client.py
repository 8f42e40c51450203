import logging
from typing import Any, Dict, List, Optional

import httpx

from sleeperboard.config import settings
from sleeperboard.services.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class SleeperClient:
    """
    Read-only client for the Sleeper fantasy API.

    Every failure (non-2xx, timeout, transport error, bad JSON) becomes an
    UpstreamError. There are no retries: callers surface the failure.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.sleeper_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_upstream
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": f"{settings.app_name}/1.0", "Accept": "application/json"},
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.info("SleeperClient HTTP client closed")

    async def fetch_json(self, path: str) -> Any:
        """GET ``base_url + path`` and decode the JSON body."""
        url = f"{self.base_url}{path}"
        client = await self._get_client()
        try:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Sleeper API error: {e.response.status_code} for {url}")
            raise UpstreamError(
                f"Request failed with status code {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"Sleeper API timeout after {self.timeout}s for {url}")
            raise UpstreamError(f"Timeout of {self.timeout:g}s exceeded") from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach Sleeper API at {url}: {e}")
            raise UpstreamError(str(e) or e.__class__.__name__) from e
        except ValueError as e:
            logger.error(f"Sleeper API returned invalid JSON for {url}")
            raise UpstreamError(f"Invalid JSON from {url}") from e

    # --- Endpoints -------------------------------------------------------

    async def get_state(self, sport: str = "nfl") -> Dict[str, Any]:
        return await self.fetch_json(f"/state/{sport}")

    async def get_league(self, league_id: str) -> Dict[str, Any]:
        return await self.fetch_json(f"/league/{league_id}")

    async def get_users(self, league_id: str) -> List[Dict[str, Any]]:
        return await self.fetch_json(f"/league/{league_id}/users") or []

    async def get_rosters(self, league_id: str) -> List[Dict[str, Any]]:
        return await self.fetch_json(f"/league/{league_id}/rosters") or []

    async def get_matchups(self, league_id: str, week: int) -> List[Dict[str, Any]]:
        return await self.fetch_json(f"/league/{league_id}/matchups/{week}") or []

    async def get_league_players(self, league_id: str) -> Any:
        """League-scoped player pool, including unrostered (free agent) players."""
        return await self.fetch_json(f"/league/{league_id}/players")

    async def get_players(self, sport: str = "nfl") -> Dict[str, Any]:
        """The full player directory. Large; go through PlayerCacheService instead."""
        return await self.fetch_json(f"/players/{sport}")

    async def get_projections(self, sport: str, season: str, week: int) -> Any:
        return await self.fetch_json(f"/projections/{sport}/{season}/{week}")
