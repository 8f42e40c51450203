import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from sleeperboard.config import settings
from sleeperboard.services.exceptions import ProviderError

logger = logging.getLogger(__name__)


class TextGenerator:
    """Single-prompt chat completions against OpenAI. Output is returned verbatim."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise ProviderError("Text generation provider is not configured (OPENAI_API_KEY)")
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=settings.http_timeout_llm)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def generate(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> str:
        client = self._get_client()
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens or settings.llm_max_tokens,
                temperature=temperature,
            )
        except OpenAIError as e:
            logger.error(f"Text generation failed: {e}")
            raise ProviderError(str(e)) from e

        if not completion.choices:
            raise ProviderError("Text generation returned no choices")
        return completion.choices[0].message.content or ""
