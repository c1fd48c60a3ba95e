"""Test cases for dependency injection container."""

import pytest

from docchat import container as container_module
from docchat.container import Container, build_llm_client
from docchat.domain.services import RetrievalService, AnswerService
from docchat.application.use_cases import ChatUseCase, IngestUseCase
from docchat.infrastructure.storage import InMemoryDocumentRepository
from docchat.infrastructure.extraction import FileTextExtractor
from docchat.infrastructure.llm import (
    GeminiLLMClient, OpenAILLMClient, OllamaLLMClient, UnconfiguredLLMClient
)
from docchat.exceptions import ConfigurationError


class TestContainer:
    """Test dependency injection container."""

    def test_container_creation(self):
        container = Container()

        assert container._document_repository is None
        assert container._llm_repository is None

    def test_singleton_behavior(self):
        container = Container()

        assert container.document_repository() is container.document_repository()
        assert isinstance(container.document_repository(), InMemoryDocumentRepository)
        assert isinstance(container.text_extractor(), FileTextExtractor)

    def test_use_cases_share_document_repository(self, mock_llm_repository):
        container = Container()
        container._llm_repository = mock_llm_repository

        chat = container.chat_use_case()
        ingest = container.ingest_use_case()

        assert isinstance(chat, ChatUseCase)
        assert isinstance(ingest, IngestUseCase)
        assert isinstance(container.retrieval_service(), RetrievalService)
        assert isinstance(container.answer_service(), AnswerService)
        assert ingest._document_repo is container.retrieval_service()._document_repo

    def test_reset(self):
        container = Container()
        repo = container.document_repository()

        container.reset()

        assert container._document_repository is None
        assert container.document_repository() is not repo


class TestBuildLLMClient:
    """Test provider selection."""

    def test_gemini_with_key(self, monkeypatch):
        monkeypatch.setattr(container_module, "GEMINI_API_KEY", "key")
        assert isinstance(build_llm_client("gemini"), GeminiLLMClient)

    def test_gemini_without_key_is_unconfigured(self, monkeypatch):
        monkeypatch.setattr(container_module, "GEMINI_API_KEY", None)
        client = build_llm_client("gemini")

        assert isinstance(client, UnconfiguredLLMClient)
        assert client.provider == "gemini"

    def test_openai_with_key(self, monkeypatch):
        monkeypatch.setattr(container_module, "OPENAI_API_KEY", "sk-test")
        client = build_llm_client("openai")

        assert isinstance(client, OpenAILLMClient)
        assert client.is_available()

    def test_openai_without_key_is_unconfigured(self, monkeypatch):
        monkeypatch.setattr(container_module, "OPENAI_API_KEY", "")
        assert isinstance(build_llm_client("openai"), UnconfiguredLLMClient)

    def test_ollama_needs_no_key(self):
        assert isinstance(build_llm_client("ollama"), OllamaLLMClient)

    def test_unknown_provider(self):
        with pytest.raises(ConfigurationError):
            build_llm_client("nope")

    def test_container_uses_provider(self):
        assert isinstance(Container(llm_provider="ollama").llm_repository(), OllamaLLMClient)
