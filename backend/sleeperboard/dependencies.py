"""
FastAPI Dependency Injection Container

Holds the process-wide upstream clients (one pooled HTTP client for
Sleeper, one OpenAI client). They are created lazily on first access and
closed by ``ServiceContainer.shutdown()`` from the application lifespan.
"""
from typing import Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sleeperboard.database import get_db
from sleeperboard.services.league_service import LeagueService
from sleeperboard.services.sleeper_client import SleeperClient
from sleeperboard.services.text_generator import TextGenerator


class ServiceContainer:
    """
    Container for singleton service instances.
    Services are lazily initialized on first access.
    """

    _sleeper_client: Optional[SleeperClient] = None
    _text_generator: Optional[TextGenerator] = None

    @classmethod
    def get_sleeper_client(cls) -> SleeperClient:
        """Get or create the SleeperClient singleton."""
        if cls._sleeper_client is None:
            cls._sleeper_client = SleeperClient()
        return cls._sleeper_client

    @classmethod
    def get_text_generator(cls) -> TextGenerator:
        """Get or create the TextGenerator singleton."""
        if cls._text_generator is None:
            cls._text_generator = TextGenerator()
        return cls._text_generator

    @classmethod
    async def shutdown(cls) -> None:
        """Close upstream clients and drop the singletons."""
        if cls._sleeper_client is not None:
            await cls._sleeper_client.close()
        if cls._text_generator is not None:
            await cls._text_generator.close()
        cls.reset()

    @classmethod
    def reset(cls) -> None:
        """Reset all singleton instances. Useful for testing."""
        cls._sleeper_client = None
        cls._text_generator = None


# FastAPI dependency functions
def get_sleeper_client() -> SleeperClient:
    return ServiceContainer.get_sleeper_client()


def get_text_generator() -> TextGenerator:
    return ServiceContainer.get_text_generator()


def get_league_service(
    db: AsyncSession = Depends(get_db),
    client: SleeperClient = Depends(get_sleeper_client),
    generator: TextGenerator = Depends(get_text_generator),
) -> LeagueService:
    """
    Per-request LeagueService bound to the request's DB session.

    Usage:
        @router.get("/{league_id}/standings")
        async def standings(service: LeagueService = Depends(get_league_service)):
            ...
    """
    return LeagueService(db=db, client=client, generator=generator)
