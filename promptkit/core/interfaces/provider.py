"""
Provider Interface

Defines the capability contract for every provider (hosted APIs, local
models, test doubles). Each capability raises UnsupportedProviderActionError
until a concrete provider overrides it, so a provider only implements what
its backend can actually do.
"""

from typing import Iterator, NoReturn

from promptkit.core.exceptions import ErrorContext, UnsupportedProviderActionError
from promptkit.core.interfaces.requests import (
    EmbeddingRequest,
    ImageRequest,
    StructuredRequest,
    TextRequest,
)
from promptkit.core.interfaces.responses import (
    EmbeddingResponse,
    ImageResponse,
    StructuredResponse,
    TextResponse,
)
from promptkit.observability import get_logger

logger = get_logger(__name__)


class Provider:
    """
    Base class for providers.

    Example:
        ```python
        class EchoProvider(Provider):
            def text(self, request: TextRequest) -> TextResponse:
                return TextResponse(
                    text=request.prompt or "",
                    finish_reason=FinishReason.STOP,
                    usage=Usage(),
                    meta=Meta(id="echo", model=request.model),
                )

        EchoProvider().text(TextRequest(model="echo", prompt="hi")).text  # "hi"
        EchoProvider().images(ImageRequest(model="x"))  # raises
        ```
    """

    @property
    def provider_name(self) -> str:
        """Return the name used in errors and logs."""
        return type(self).__name__

    def text(self, request: TextRequest) -> TextResponse:
        """Generate text for the request."""
        self._unsupported("text")

    def structured(self, request: StructuredRequest) -> StructuredResponse:
        """Generate output conforming to the request schema."""
        self._unsupported("structured")

    def embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        """Embed the request inputs."""
        self._unsupported("embeddings")

    def images(self, request: ImageRequest) -> ImageResponse:
        """Generate images for the request prompt."""
        self._unsupported("images")

    def stream(self, request: TextRequest) -> Iterator[str]:
        """Stream text chunks for the request."""
        self._unsupported("stream")

    def _unsupported(self, action: str) -> NoReturn:
        method = f"{type(self).__name__}.{action}"
        logger.debug("Unsupported provider action", provider=self.provider_name, action=action)
        raise UnsupportedProviderActionError(
            method=method,
            provider=self.provider_name,
            context=ErrorContext(provider=self.provider_name, operation=action),
        )
