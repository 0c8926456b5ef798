import logging

from openai import AsyncOpenAI, OpenAIError

from app.core.errors import ProviderError
from app.interfaces.ai_provider import AIProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(AIProvider):
    def __init__(self, api_key: str | None, model: str, base_url: str | None = None):
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY not configured")

        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model = model

    async def generate_response(self, prompt: str) -> str:
        messages = [
            {
                "role": "user",
                "content": prompt,
            },
        ]

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
            )
        except OpenAIError as exc:
            raise ProviderError(f"Failed to get response from OpenAI: {exc}") from exc

        if not response.choices:
            raise ProviderError("OpenAI returned no choices")
        content = response.choices[0].message.content or ""
        logger.debug("OpenAI reply received (%d chars)", len(content))
        return content
