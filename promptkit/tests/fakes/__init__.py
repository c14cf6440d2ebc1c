"""
Fake Provider Implementations for Testing

These providers simulate real backends without external dependencies,
enabling fast, isolated, and deterministic tests.

Usage:
    from promptkit.tests.fakes import FakeProvider

    provider = FakeProvider().enqueue_response_chain([first, second])
    provider.text(request)       # -> first
    provider.text(request)       # -> second
    provider.text(request)       # -> built-in default
    assert provider.call_count == 3
"""

from promptkit.tests.fakes.provider import (
    DEFAULT_CHAT_MODEL,
    DEFAULT_EMBEDDING_MODEL,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_IMAGE_URL,
    DEFAULT_META_ID,
    DEFAULT_TEXT,
    FakeProvider,
)

__all__ = [
    "FakeProvider",
    "DEFAULT_TEXT",
    "DEFAULT_META_ID",
    "DEFAULT_CHAT_MODEL",
    "DEFAULT_EMBEDDING_MODEL",
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_IMAGE_URL",
]
