"""Gemini LLM implementation over the Generative Language REST API."""

from typing import Any, Dict, Optional
import requests

from ...domain.repositories import LLMRepository
from ...config import GEMINI_API_KEY, GEMINI_MODEL, GEMINI_TIMEOUT, GEMINI_BASE_URL
from ...exceptions import LLMError, LLMNotConfiguredError
from ...error_handler import handle_errors
from ...logging_config import get_logger

logger = get_logger(__name__)


class GeminiLLMClient(LLMRepository):
    """Gemini implementation of LLMRepository."""

    def __init__(self,
                 api_key: Optional[str] = GEMINI_API_KEY,
                 model_name: str = GEMINI_MODEL,
                 timeout: int = GEMINI_TIMEOUT,
                 base_url: str = GEMINI_BASE_URL,
                 session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout
        self.base_url = base_url.rstrip('/')
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model_name}:generateContent"

    def is_available(self) -> bool:
        return bool(self.api_key)

    @staticmethod
    def _extract_text(payload: Dict[str, Any]) -> str:
        """Join the text parts of the first candidate."""
        candidates = payload.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts if isinstance(part, dict))

    @handle_errors(exception_type=LLMError, reraise=True)
    def generate_answer(self, prompt: str, **kwargs) -> str:
        """Generate a completion for ``prompt``."""
        if not self.is_available():
            raise LLMNotConfiguredError(message="Gemini API key not configured")

        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }
        body: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        generation_config = {}
        if "temperature" in kwargs:
            generation_config["temperature"] = kwargs["temperature"]
        if "max_tokens" in kwargs:
            generation_config["maxOutputTokens"] = kwargs["max_tokens"]
        if generation_config:
            body["generationConfig"] = generation_config

        logger.info(f"Generating Gemini response with model: {self.model_name}")

        try:
            response = self._session.post(self.endpoint, headers=headers, json=body, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise LLMError(
                message=f"Network error connecting to Gemini: {str(e)}",
                details={"error": str(e), "model": self.model_name}
            ) from e

        if response.status_code != 200:
            raise LLMError(
                message=f"Gemini API error: {response.status_code}",
                details={"status_code": response.status_code, "response": response.text[:2000]}
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise LLMError(
                message=f"Invalid JSON response from Gemini: {str(e)}",
                details={"error": str(e)}
            ) from e

        text = self._extract_text(payload).strip()
        if not text:
            raise LLMError(
                message="Gemini returned an empty completion",
                details={"model": self.model_name, "prompt_feedback": payload.get("promptFeedback")}
            )
        return text
