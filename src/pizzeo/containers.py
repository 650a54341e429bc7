"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from pizzeo.adapters.openai_assistant_client import OpenAIAssistantClient
from pizzeo.adapters.supabase_recipe_state_repository import (
    SupabaseRecipeStateRepository,
)
from pizzeo.config import Settings
from pizzeo.services.assistant import AssistantService
from pizzeo.services.presets import PresetService
from pizzeo.services.recipe_state import RecipeStateService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_state_service: RecipeStateService
    preset_service: PresetService
    assistant_service: AssistantService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    recipe_state_service = RecipeStateService(
        repository=SupabaseRecipeStateRepository(supabase_client),
        namespace=resolved_settings.state_namespace,
    )
    openai_client = OpenAIAssistantClient.create(resolved_settings.openai_api_key)
    assistant_service = AssistantService(
        client=openai_client,
        model=resolved_settings.openai_model,
        image_model=resolved_settings.openai_image_model,
        instructions=resolved_settings.assistant_instructions,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_state_service=recipe_state_service,
        preset_service=PresetService(),
        assistant_service=assistant_service,
        close_resources=close_resources,
    )
