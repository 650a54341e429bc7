"""Conversational pizzaiolo assistant."""

import logging
from dataclasses import dataclass
from typing import Protocol

DEFAULT_INSTRUCTIONS = (
    "You are Pizzeo, an expert pizzaiolo. Help with dough calculations, "
    "fermentation and baking. Be concise and technical."
)
FALLBACK_ANSWER = "Sorry, I can't answer that."
IMAGE_PROMPT_PREFIX = "A professional ultra-high quality pizza photo: "

_logger = logging.getLogger(__name__)


class AssistantClient(Protocol):
    """Interface for the generative-language provider."""

    async def generate_text(
        self, *, model: str, instructions: str, prompt: str
    ) -> str:
        """Return the model's text answer (possibly empty)."""

    async def generate_image(self, *, model: str, prompt: str) -> str | None:
        """Return base64-encoded PNG data, if the model produced an image."""


@dataclass
class AssistantService:
    """Service that sends free-text questions to the assistant model."""

    client: AssistantClient
    model: str
    image_model: str
    instructions: str = DEFAULT_INSTRUCTIONS

    async def ask(self, prompt: str) -> str:
        """Return the assistant's answer for a question."""
        question = prompt.strip()
        if not question:
            raise ValueError("prompt must not be blank")
        answer = await self.client.generate_text(
            model=self.model, instructions=self.instructions, prompt=question
        )
        if not answer:
            _logger.warning("Assistant returned an empty answer")
            return FALLBACK_ANSWER
        return answer

    async def generate_image(self, prompt: str) -> str | None:
        """Return a data URL for a generated pizza photo, or None."""
        description = prompt.strip()
        if not description:
            raise ValueError("prompt must not be blank")
        encoded = await self.client.generate_image(
            model=self.image_model, prompt=f"{IMAGE_PROMPT_PREFIX}{description}"
        )
        if not encoded:
            return None
        return f"data:image/png;base64,{encoded}"
