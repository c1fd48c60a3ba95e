"""Stand-in for a generation service that has no credentials."""

from ...domain.repositories import LLMRepository
from ...exceptions import LLMNotConfiguredError


class UnconfiguredLLMClient(LLMRepository):
    """LLMRepository used when the selected provider is missing its configuration."""

    def __init__(self, provider: str, reason: str = "API key not configured"):
        self.provider = provider
        self.reason = reason

    def is_available(self) -> bool:
        return False

    def generate_answer(self, prompt: str, **kwargs) -> str:
        raise LLMNotConfiguredError(
            message=f"{self.provider} {self.reason}",
            details={"provider": self.provider}
        )
