"""
Pytest Configuration and Shared Fixtures

This file is automatically loaded by pytest and provides:
- The FakeProvider registered with the factory
- Shared request/response fixtures
- Environment variable overrides for test configuration

Run tests:
    pytest promptkit/tests/ -v
"""

import os
import pytest
from typing import Iterator, List

# Set test environment before importing promptkit modules
os.environ["PROMPTKIT_PROVIDERS__DEFAULT"] = "fake"
os.environ["PROMPTKIT_LOGGING__LEVEL"] = "DEBUG"

from promptkit.adapters.factory import ProviderFactory
from promptkit.config.settings import reset_settings
from promptkit.core.interfaces import (
    ClientRetry,
    Embedding,
    EmbeddingRequest,
    EmbeddingResponse,
    EmbeddingsUsage,
    FinishReason,
    GeneratedImage,
    ImageRequest,
    ImageResponse,
    Message,
    MessageRole,
    Meta,
    StructuredRequest,
    StructuredResponse,
    TextRequest,
    TextResponse,
    Usage,
)
from promptkit.tests.fakes import FakeProvider


# =============================================================================
# ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def _isolate_global_state() -> Iterator[None]:
    """Reset the settings singleton and the factory registry."""
    reset_settings()
    registered = dict(ProviderFactory._providers)
    yield
    ProviderFactory._providers.clear()
    ProviderFactory._providers.update(registered)
    reset_settings()


# =============================================================================
# PROVIDERS
# =============================================================================

@pytest.fixture
def fake_provider() -> FakeProvider:
    """Create an empty FakeProvider."""
    return FakeProvider()


@pytest.fixture
def registered_fake() -> type[FakeProvider]:
    """Register FakeProvider with the factory under 'fake'."""
    ProviderFactory.register("fake", FakeProvider)
    return FakeProvider


# =============================================================================
# REQUESTS
# =============================================================================

@pytest.fixture
def sample_messages() -> List[Message]:
    """Create sample messages for testing."""
    return [
        Message(role=MessageRole.SYSTEM, content="You are a helpful assistant."),
        Message(role=MessageRole.USER, content="Hello, how are you?"),
    ]


@pytest.fixture
def text_request(sample_messages: List[Message]) -> TextRequest:
    """Create a text request with client options attached."""
    return TextRequest(
        model="fake-model",
        prompt="Who are you?",
        messages=sample_messages,
        max_tokens=100,
        client_options={"timeout": 30},
        client_retry=ClientRetry(times=3, sleep_ms=100),
    )


@pytest.fixture
def structured_request() -> StructuredRequest:
    """Create a structured request with a small JSON schema."""
    return StructuredRequest(
        model="fake-model",
        prompt="Describe a cat",
        schema={
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
        },
    )


@pytest.fixture
def embedding_request() -> EmbeddingRequest:
    """Create an embeddings request."""
    return EmbeddingRequest(model="fake-embedding", inputs=["Hello world", "Test text"])


@pytest.fixture
def image_request() -> ImageRequest:
    """Create an image request."""
    return ImageRequest(model="fake-image", prompt="A lighthouse at dusk")


# =============================================================================
# RESPONSES
# =============================================================================

def make_text_response(text: str) -> TextResponse:
    """Build a TextResponse with fixed metadata."""
    return TextResponse(
        text=text,
        finish_reason=FinishReason.STOP,
        usage=Usage(prompt_tokens=5, completion_tokens=len(text.split())),
        meta=Meta(id=f"resp-{text[:8]}", model="fake-model"),
    )


@pytest.fixture
def text_responses() -> List[TextResponse]:
    """Two distinct text responses."""
    return [make_text_response("First answer"), make_text_response("Second answer")]


@pytest.fixture
def structured_response() -> StructuredResponse:
    """A structured response matching the structured_request schema."""
    return StructuredResponse(
        text='{"name": "Nyx"}',
        structured={"name": "Nyx"},
        finish_reason=FinishReason.STOP,
        usage=Usage(12, 4),
        meta=Meta(id="struct-1", model="fake-model"),
    )


@pytest.fixture
def embedding_response() -> EmbeddingResponse:
    """An embeddings response with two vectors."""
    return EmbeddingResponse(
        embeddings=[Embedding([0.1, 0.2, 0.3]), Embedding([0.4, 0.5, 0.6])],
        usage=EmbeddingsUsage(tokens=4),
        meta=Meta(id="emb-1", model="fake-embedding"),
    )


@pytest.fixture
def image_response() -> ImageResponse:
    """An image response carrying base64 data."""
    return ImageResponse(
        images=[GeneratedImage(base64="aGVsbG8=", mime_type="image/png", revised_prompt="A lighthouse")],
        usage=Usage(0, 0),
        meta=Meta(id="img-1", model="fake-image"),
    )
