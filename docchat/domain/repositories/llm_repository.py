"""Abstract LLM repository interface."""

from abc import ABC, abstractmethod


class LLMRepository(ABC):
    """Abstract interface for the generation service."""

    @abstractmethod
    def generate_answer(self, prompt: str, **kwargs) -> str:
        """Return a completion for ``prompt``; raise LLMError on failure."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the LLM is configured and reachable."""
        pass
