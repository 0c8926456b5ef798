"""Interface contract for AI providers."""

from abc import ABC, abstractmethod


class AIProvider(ABC):
    """Defines LLM summarization behavior."""

    @abstractmethod
    async def generate_response(self, prompt: str) -> str:
        """Return the model's reply to a single user prompt."""
        raise NotImplementedError
