"""LLM infrastructure module."""

from .gemini_client import GeminiLLMClient
from .openai_client import OpenAILLMClient
from .ollama_client import OllamaLLMClient
from .unconfigured_client import UnconfiguredLLMClient

__all__ = ['GeminiLLMClient', 'OpenAILLMClient', 'OllamaLLMClient', 'UnconfiguredLLMClient']
