"""Mock AI provider implementation."""

from app.interfaces.ai_provider import AIProvider


class MockAIProvider(AIProvider):
    """Canned summarizer used for local runs and tests."""

    def __init__(self, reply: str = "AI summary generated locally.") -> None:
        self.reply = reply
        self.prompts: list[str] = []

    async def generate_response(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply
