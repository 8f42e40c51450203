from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # App settings
    app_name: str = "Sleeper League Dashboard"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./sleeperboard.db"

    # Sleeper API
    sleeper_base_url: str = "https://api.sleeper.app/v1"
    sport: str = "nfl"
    league_id: Optional[str] = None  # Default league shown by the client

    # Player directory cache
    player_cache_ttl_hours: int = 22

    # HTTP timeouts (seconds)
    http_timeout_upstream: float = 15.0
    http_timeout_llm: float = 60.0

    # Text generation (OpenAI)
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    llm_max_tokens: int = 800
    recap_temperature: float = 0.7
    trade_temperature: float = 0.8

    # Projection field drilled out of each player's stats block
    projection_stat_key: str = "pts_ppr"

    # Trade advice
    free_agent_prompt_limit: int = 30
    free_agent_response_limit: int = 10

    # Recaps
    default_recap_style: str = "fun"

    # Frontend
    client_dist_dir: str = "client/dist"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
