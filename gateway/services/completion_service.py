"""
Completion Service - OpenAI chat completions
Sends a single user turn to a fixed model and returns the first choice
"""
import logging
from typing import Optional

from openai import AsyncOpenAI

from gateway.config import Settings

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response"


class CompletionService:
    """
    Thin wrapper around the OpenAI async client.
    Provider errors (openai.OpenAIError) propagate to the caller.
    """

    def __init__(self, api_key: str, model: str, base_url: Optional[str] = None):
        self.model = model
        # No retries: every upstream failure surfaces on the first attempt.
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionService":
        return cls(
            api_key=settings.completion_api_key,
            model=settings.completion_model,
            base_url=settings.completion_base_url,
        )

    async def complete(self, message: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": message}],
        )

        if not response.choices:
            logger.warning(f"Completion provider returned no choices for model {self.model}")
            return NO_RESPONSE

        return response.choices[0].message.content or ""

    async def close(self) -> None:
        await self.client.close()
