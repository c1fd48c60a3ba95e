"""Ollama LLM implementation."""

from typing import Optional
import requests

from ...domain.repositories import LLMRepository
from ...config import OLLAMA_HOST, OLLAMA_PORT, OLLAMA_MODEL
from ...exceptions import LLMError
from ...error_handler import handle_errors
from ...logging_config import get_logger

logger = get_logger(__name__)


class OllamaLLMClient(LLMRepository):
    """Ollama implementation of LLMRepository."""

    def __init__(self,
                 base_url: str = f"http://{OLLAMA_HOST}:{OLLAMA_PORT}",
                 model_name: str = OLLAMA_MODEL,
                 timeout: int = 120):
        self.base_url = base_url.rstrip('/')
        self.model_name = model_name
        self.timeout = timeout
        self.api_url = f"{self.base_url}/api/generate"

    def _check_connection(self) -> bool:
        """Check if Ollama server is available."""
        try:
            response = requests.get(f"{self.base_url}/api/tags", timeout=5)
            return response.status_code == 200
        except requests.exceptions.RequestException:
            return False

    def is_available(self) -> bool:
        return self._check_connection()

    @handle_errors(exception_type=LLMError, reraise=True)
    def generate_answer(self,
                        prompt: str,
                        temperature: float = 0.3,
                        max_tokens: Optional[int] = None,
                        **kwargs) -> str:
        """Generate response using Ollama."""
        payload = {
            "model": self.model_name,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": temperature
            }
        }
        if max_tokens:
            payload["options"]["num_predict"] = max_tokens

        logger.info(f"Generating Ollama response with model: {self.model_name}")

        try:
            response = requests.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise LLMError(
                message=f"Network error connecting to Ollama: {str(e)}",
                details={"error": str(e), "server_url": self.base_url}
            ) from e

        if response.status_code != 200:
            raise LLMError(
                message=f"Ollama API error: {response.status_code}",
                details={"status_code": response.status_code, "response": response.text[:500]}
            )

        try:
            result = response.json()
        except ValueError as e:
            raise LLMError(
                message=f"Invalid JSON response from Ollama: {str(e)}",
                details={"error": str(e)}
            ) from e

        if "error" in result:
            raise LLMError(message=f"Ollama error: {result['error']}", details=result)

        text = result.get("response", "").strip()
        if not text:
            raise LLMError(message="Ollama returned an empty completion", details={"model": self.model_name})
        return text
