"""OpenAI LLM implementation."""

from typing import Optional
from openai import OpenAI

from ...domain.repositories import LLMRepository
from ...config import OPENAI_API_KEY, OPENAI_MODEL, OPENAI_MAX_TOKENS, OPENAI_TEMPERATURE
from ...exceptions import LLMError, LLMNotConfiguredError
from ...error_handler import handle_errors
from ...logging_config import get_logger

logger = get_logger(__name__)


class OpenAILLMClient(LLMRepository):
    """OpenAI implementation of LLMRepository."""

    def __init__(self,
                 api_key: Optional[str] = OPENAI_API_KEY,
                 model: str = OPENAI_MODEL,
                 max_tokens: int = OPENAI_MAX_TOKENS,
                 temperature: float = OPENAI_TEMPERATURE,
                 client: Optional[OpenAI] = None):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client
        if self._client is None and self.api_key:
            self._client = OpenAI(api_key=self.api_key)

    def is_available(self) -> bool:
        """Check if OpenAI LLM is configured."""
        return self._client is not None

    @handle_errors(exception_type=LLMError, reraise=True)
    def generate_answer(self, prompt: str, **kwargs) -> str:
        """Generate an answer using OpenAI chat completions."""
        if not self.is_available():
            raise LLMNotConfiguredError(message="OpenAI API key not configured")

        logger.info(f"Generating OpenAI response with model: {self.model}")
        response = self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=kwargs.get('max_tokens', self.max_tokens),
            temperature=kwargs.get('temperature', self.temperature)
        )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise LLMError(message="OpenAI returned an empty completion", details={"model": self.model})
        return content.strip()
