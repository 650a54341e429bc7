"""OpenAI client for the pizzaiolo assistant."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from openai import (
    AsyncOpenAI,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
)

from pizzeo.domain.errors import AssistantAuthorizationError
from pizzeo.services.assistant import AssistantClient

T = TypeVar("T")

_AUTH_ERRORS = (AuthenticationError, PermissionDeniedError, NotFoundError)


@dataclass
class OpenAIAssistantClient(AssistantClient):
    """Assistant client backed by the OpenAI Responses and Images APIs."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIAssistantClient":
        """Create an OpenAI assistant client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate_text(
        self, *, model: str, instructions: str, prompt: str
    ) -> str:
        """Call the Responses API and return the output text."""

        async def call() -> str:
            response = await self.client.responses.create(
                model=model,
                instructions=instructions,
                input=prompt,
            )
            return response.output_text or ""

        return await _with_authorization_check(call)

    async def generate_image(self, *, model: str, prompt: str) -> str | None:
        """Call the Images API and return base64 PNG data."""

        async def call() -> str | None:
            response = await self.client.images.generate(
                model=model,
                prompt=prompt,
                size="1024x1024",
                n=1,
            )
            if not response.data:
                return None
            return response.data[0].b64_json

        return await _with_authorization_check(call)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()


async def _with_authorization_check(call: Callable[[], Awaitable[T]]) -> T:
    """Translate provider credential errors into a domain error."""
    try:
        return await call()
    except _AUTH_ERRORS as exc:
        raise AssistantAuthorizationError(
            "API_KEY_REJECTED", status_code=exc.status_code
        ) from exc
