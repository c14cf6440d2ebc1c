"""
Provider Requests

One request type per capability. Providers receive these fully built; the
union `ProviderRequest` covers every variant a provider can be handed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from promptkit.core.interfaces.values import ClientRetry, Message


class StructuredMode(str, Enum):
    """How a provider should coerce output into the requested schema."""
    AUTO = "auto"
    STRUCTURED = "structured"
    JSON = "json"


class ProviderOptionsMixin:
    """Dotted-path lookup into a request's provider_options."""

    provider_options: dict[str, Any]

    def provider_option(self, path: str, default: Any = None) -> Any:
        """
        Read a provider-specific option.

        Example:
            request.provider_option("thinking.budget", 1024)
        """
        value: Any = self.provider_options
        for key in path.split("."):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value


@dataclass
class TextRequest(ProviderOptionsMixin):
    """Input for plain text generation."""
    model: str
    prompt: Optional[str] = None
    system_prompts: list[str] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    max_steps: int = 1
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    tools: list[dict[str, Any]] = field(default_factory=list)
    client_options: dict[str, Any] = field(default_factory=dict)
    client_retry: Optional[ClientRetry] = None
    provider_options: dict[str, Any] = field(default_factory=dict)


@dataclass
class StructuredRequest(ProviderOptionsMixin):
    """Input for schema-constrained generation."""
    model: str
    schema: dict[str, Any] = field(default_factory=dict)
    prompt: Optional[str] = None
    system_prompts: list[str] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    mode: StructuredMode = StructuredMode.AUTO
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    client_options: dict[str, Any] = field(default_factory=dict)
    client_retry: Optional[ClientRetry] = None
    provider_options: dict[str, Any] = field(default_factory=dict)


@dataclass
class EmbeddingRequest(ProviderOptionsMixin):
    """Input for an embeddings call."""
    model: str
    inputs: list[str] = field(default_factory=list)
    client_options: dict[str, Any] = field(default_factory=dict)
    client_retry: Optional[ClientRetry] = None
    provider_options: dict[str, Any] = field(default_factory=dict)


@dataclass
class ImageRequest(ProviderOptionsMixin):
    """Input for image generation."""
    model: str
    prompt: str = ""
    client_options: dict[str, Any] = field(default_factory=dict)
    client_retry: Optional[ClientRetry] = None
    provider_options: dict[str, Any] = field(default_factory=dict)


ProviderRequest = Union[TextRequest, StructuredRequest, EmbeddingRequest, ImageRequest]
