"""
Provider Value Objects

Small immutable-by-convention records shared by requests and responses:
messages, usage metrics, provider metadata, and generated artifacts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class FinishReason(str, Enum):
    """Why a provider stopped generating."""
    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"
    ERROR = "error"
    OTHER = "other"
    UNKNOWN = "unknown"


class MessageRole(str, Enum):
    """Message roles for chat-style prompts."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass
class Message:
    """A single message in a conversation."""
    role: MessageRole
    content: str
    name: Optional[str] = None
    tool_call_id: Optional[str] = None
    tool_calls: Optional[list[dict[str, Any]]] = None


@dataclass
class Usage:
    """Token usage statistics for a generation."""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    cache_write_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None
    thought_tokens: Optional[int] = None

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


@dataclass
class EmbeddingsUsage:
    """Token usage for an embeddings call."""
    tokens: Optional[int] = None


@dataclass
class Meta:
    """Provider metadata attached to every response."""
    id: str
    model: str
    rate_limits: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class Embedding:
    """One embedding vector."""
    embedding: list[float] = field(default_factory=list)


@dataclass
class GeneratedImage:
    """An image returned by an image generation call."""
    url: Optional[str] = None
    base64: Optional[str] = None
    revised_prompt: Optional[str] = None
    mime_type: Optional[str] = None

    def has_url(self) -> bool:
        return self.url is not None

    def has_base64(self) -> bool:
        return self.base64 is not None


@dataclass
class ToolCall:
    """A tool/function call requested by the model."""
    id: str
    name: str
    arguments: str  # JSON string


@dataclass
class ToolResult:
    """The outcome of running a tool call."""
    tool_call_id: str
    tool_name: str
    args: dict[str, Any] = field(default_factory=dict)
    result: Any = None


@dataclass
class ClientRetry:
    """Retry policy a caller attaches to a request for the HTTP client."""
    times: int = 0
    sleep_ms: int = 0
    throw: bool = True
