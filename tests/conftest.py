"""Test configuration and fixtures."""

import os

os.environ.setdefault("LOG_TO_FILE", "false")

import io
import pytest

from docchat.domain.repositories import LLMRepository, TextExtractor
from docchat.domain.entities import Document
from docchat.infrastructure.storage import InMemoryDocumentRepository
from docchat.container import Container
from docchat.exceptions import LLMError


class MockLLMRepository(LLMRepository):
    """Mock implementation of LLMRepository for testing."""

    def __init__(self, mock_response: str = "Mock LLM response", error: Exception = None):
        self.mock_response = mock_response
        self.error = error
        self.call_count = 0
        self.last_prompt = None

    def generate_answer(self, prompt: str, **kwargs) -> str:
        self.call_count += 1
        self.last_prompt = prompt
        if self.error is not None:
            raise self.error
        return self.mock_response

    def is_available(self) -> bool:
        return self.error is None


class MockTextExtractor(TextExtractor):
    """Decodes every upload as UTF-8 text."""

    def __init__(self):
        self.calls = []

    def extract(self, filename, data, content_type=None):
        self.calls.append((filename, content_type))
        return data.decode("utf-8")


@pytest.fixture
def mock_llm_repository():
    """Provide mock LLM repository."""
    return MockLLMRepository()


@pytest.fixture
def failing_llm_repository():
    return MockLLMRepository(error=LLMError("Gemini API error: 503", details={"status_code": 503}))


@pytest.fixture
def mock_text_extractor():
    return MockTextExtractor()


@pytest.fixture
def document_repository():
    return InMemoryDocumentRepository()


@pytest.fixture
def notes_document():
    """The two-chunk notes.txt document."""
    return Document(
        id="notes_1",
        name="notes.txt",
        raw_text="the cat sat on the matdogs are loyal animals",
        chunks=["the cat sat on the mat", "dogs are loyal animals"],
        file_type="text/plain",
        size=44
    )


@pytest.fixture
def sample_documents(notes_document):
    pets = Document(
        id="pets_1",
        name="pets.txt",
        raw_text="",
        chunks=[
            "Cats are independent. A cat will groom itself.",
            "Hamsters store food in their cheeks.",
            "A cat and a dog can live together if the cat is introduced slowly.",
        ],
    )
    return [notes_document, pets]


@pytest.fixture
def test_container(mock_llm_repository, mock_text_extractor, document_repository):
    """Provide container with mocked dependencies."""
    container = Container()

    # Override with mocks
    container._llm_repository = mock_llm_repository
    container._text_extractor = mock_text_extractor
    container._document_repository = document_repository

    return container


@pytest.fixture
def docx_bytes():
    """A real DOCX payload built with python-docx."""
    import docx

    d = docx.Document()
    d.add_paragraph("Quarterly report")
    d.add_paragraph("Revenue grew in the third quarter.")
    buf = io.BytesIO()
    d.save(buf)
    return buf.getvalue()
