"""Typed views over the raw records returned by the Sleeper API.

Sleeper records carry many more fields than the dashboard needs; unknown
fields are ignored and every field used here is optional, with the
fallback order spelled out on the properties below.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

TEAM_NAME_PLACEHOLDER = "—"
DISPLAY_NAME_PLACEHOLDER = "Unknown"


class SleeperUserMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore")

    team_name: Optional[str] = None


class SleeperUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user_id: str
    display_name: Optional[str] = None
    metadata: Optional[SleeperUserMetadata] = None

    @property
    def resolved_team_name(self) -> str:
        """metadata.team_name, else the placeholder."""
        if self.metadata and self.metadata.team_name:
            return self.metadata.team_name
        return TEAM_NAME_PLACEHOLDER

    @property
    def resolved_display_name(self) -> str:
        return self.display_name or DISPLAY_NAME_PLACEHOLDER


class SleeperRosterSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    wins: int = 0
    losses: int = 0
    ties: int = 0
    fpts: float = 0
    fpts_against: float = 0


class SleeperRoster(BaseModel):
    model_config = ConfigDict(extra="ignore")

    roster_id: int
    owner_id: Optional[str] = None
    settings: Optional[SleeperRosterSettings] = None

    @property
    def record(self) -> SleeperRosterSettings:
        return self.settings or SleeperRosterSettings()


class SleeperPlayer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    position: Optional[str] = None
    fantasy_positions: Optional[List[str]] = None
    team: Optional[str] = None
    status: Optional[str] = None

    @property
    def resolved_position(self) -> str:
        """position, else the first entry of fantasy_positions, else ""."""
        if self.position:
            return self.position
        if self.fantasy_positions:
            return self.fantasy_positions[0] or ""
        return ""

    def display_name(self, fallback: str) -> str:
        """"first last", else full_name, else ``fallback``."""
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.full_name or fallback


class SleeperMatchup(BaseModel):
    model_config = ConfigDict(extra="ignore")

    roster_id: int
    matchup_id: Optional[int] = None
    points: Optional[float] = None
    starters: Optional[List[Optional[str]]] = None
    players: Optional[List[Optional[str]]] = None
    players_points: Optional[Dict[str, Optional[float]]] = None

    def points_for(self, player_id: str) -> float:
        """Actual points for one player; unrecorded points count as zero."""
        if not self.players_points:
            return 0.0
        return self.players_points.get(player_id) or 0.0


class PlayerDirectory:
    """Read-only view over the cached player blob (player_id -> raw record).

    Records are validated on lookup rather than up front, since the blob
    holds thousands of players and a request touches a few hundred.
    """

    def __init__(self, blob: Optional[Dict[str, Any]]):
        self._blob = blob or {}
        self._resolved: Dict[str, Optional[SleeperPlayer]] = {}

    def __len__(self) -> int:
        return len(self._blob)

    def __contains__(self, player_id: str) -> bool:
        return player_id in self._blob

    def get(self, player_id: str) -> Optional[SleeperPlayer]:
        if player_id not in self._resolved:
            raw = self._blob.get(player_id)
            self._resolved[player_id] = SleeperPlayer.model_validate(raw) if isinstance(raw, dict) else None
        return self._resolved[player_id]
