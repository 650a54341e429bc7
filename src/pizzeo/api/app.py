"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from pizzeo.api.models import (
    AssistantAnswer,
    AssistantQuestion,
    CalculateRequest,
    CalculationResponse,
    ImageResponse,
    ProductionScaleModel,
    RecipePresetModel,
)
from pizzeo.app_logging import configure_logging
from pizzeo.containers import AppContainer
from pizzeo.domain.errors import AssistantAuthorizationError, InvalidConfiguration
from pizzeo.domain.recipe import RecipeConfiguration
from pizzeo.domain.state import RecipeState
from pizzeo.services.formulation import compute, toggle_yeast_kind
from pizzeo.services.presets import UnknownPresetError
from pizzeo.services.sharing import format_recipe_text


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InvalidConfiguration)
    async def invalid_configuration_handler(
        request: Request, exc: InvalidConfiguration
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=exc.as_dict()
        )

    @app.exception_handler(AssistantAuthorizationError)
    async def assistant_authorization_handler(
        request: Request, exc: AssistantAuthorizationError
    ) -> JSONResponse:
        logger.warning("Assistant rejected credentials: %s", exc.details)
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={**exc.as_dict(), "message": "Select a valid API key."},
        )

    @app.exception_handler(UnknownPresetError)
    async def unknown_preset_handler(
        request: Request, exc: UnknownPresetError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"code": "UNKNOWN_PRESET", "details": {"id": exc.args[0]}},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/presets")
    async def list_presets(request: Request) -> dict[str, list[RecipePresetModel]]:
        """Return the recipe style presets."""
        state_container: AppContainer = request.app.state.container
        return {
            "presets": [
                RecipePresetModel.from_preset(preset)
                for preset in state_container.preset_service.presets
            ]
        }

    @app.get("/scales")
    async def list_scales(request: Request) -> dict[str, list[ProductionScaleModel]]:
        """Return the production scale presets."""
        state_container: AppContainer = request.app.state.container
        return {
            "scales": [
                ProductionScaleModel.from_scale(scale)
                for scale in state_container.preset_service.scales
            ]
        }

    @app.post("/calculate")
    async def calculate(payload: CalculateRequest) -> CalculationResponse:
        """Evaluate a recipe configuration without touching stored state."""
        result = compute(
            payload.state.to_configuration(), serving_date=payload.serving_date
        )
        return CalculationResponse.from_result(result)

    @app.get("/state")
    async def get_state(request: Request) -> RecipeState:
        """Return the stored recipe configuration."""
        state_container: AppContainer = request.app.state.container
        config = state_container.recipe_state_service.load()
        return RecipeState.from_configuration(config)

    @app.put("/state")
    async def put_state(state: RecipeState, request: Request) -> RecipeState:
        """Replace the stored recipe configuration."""
        state_container: AppContainer = request.app.state.container
        state_container.recipe_state_service.save(state.to_configuration())
        return state

    @app.delete("/state")
    async def reset_state(request: Request) -> RecipeState:
        """Restore the default recipe configuration."""
        state_container: AppContainer = request.app.state.container
        config = state_container.recipe_state_service.reset()
        return RecipeState.from_configuration(config)

    @app.post("/state/presets/{key}")
    async def apply_preset(key: str, request: Request) -> RecipeState:
        """Merge a recipe preset into the stored configuration."""
        state_container: AppContainer = request.app.state.container
        config = state_container.preset_service.apply_preset(
            state_container.recipe_state_service.load(), key
        )
        return _save(state_container, config)

    @app.post("/state/scales/{scale_id}")
    async def apply_scale(scale_id: str, request: Request) -> RecipeState:
        """Merge a production scale into the stored configuration."""
        state_container: AppContainer = request.app.state.container
        config = state_container.preset_service.apply_scale(
            state_container.recipe_state_service.load(), scale_id
        )
        return _save(state_container, config)

    @app.post("/state/toggle-yeast")
    async def toggle_yeast(request: Request) -> RecipeState:
        """Switch the stored configuration between dry and fresh yeast."""
        state_container: AppContainer = request.app.state.container
        config = toggle_yeast_kind(state_container.recipe_state_service.load())
        return _save(state_container, config)

    @app.get("/state/calculation")
    async def state_calculation(
        request: Request, serving_date: date | None = None
    ) -> CalculationResponse:
        """Evaluate the stored recipe configuration."""
        state_container: AppContainer = request.app.state.container
        config = state_container.recipe_state_service.load()
        return CalculationResponse.from_result(
            compute(config, serving_date=serving_date)
        )

    @app.get("/state/recipe-text")
    async def state_recipe_text(
        request: Request, serving_date: date | None = None
    ) -> dict[str, str]:
        """Return a shareable text version of the stored recipe."""
        state_container: AppContainer = request.app.state.container
        config = state_container.recipe_state_service.load()
        result = compute(config, serving_date=serving_date)
        preset = state_container.preset_service.match_preset(config)
        return {"text": format_recipe_text(config, result, preset)}

    @app.post("/assistant/ask")
    async def assistant_ask(
        question: AssistantQuestion, request: Request
    ) -> AssistantAnswer:
        """Forward a question to the pizzaiolo assistant."""
        state_container: AppContainer = request.app.state.container
        try:
            answer = await state_container.assistant_service.ask(question.prompt)
        except AssistantAuthorizationError:
            raise
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        except Exception as exc:
            logger.exception("Assistant request failed")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=_format_error(state_container, exc, "Technical error."),
            ) from exc
        return AssistantAnswer(answer=answer)

    @app.post("/assistant/image")
    async def assistant_image(
        question: AssistantQuestion, request: Request
    ) -> ImageResponse:
        """Generate a pizza photo from a description."""
        state_container: AppContainer = request.app.state.container
        try:
            image = await state_container.assistant_service.generate_image(
                question.prompt
            )
        except AssistantAuthorizationError:
            raise
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        except Exception as exc:
            logger.exception("Image generation failed")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=_format_error(state_container, exc, "Technical error."),
            ) from exc
        return ImageResponse(image=image)

    return app


def _save(state_container: AppContainer, config: RecipeConfiguration) -> RecipeState:
    """Persist a configuration and return its wire form."""
    state_container.recipe_state_service.save(config)
    return RecipeState.from_configuration(config)


def _format_error(state_container: AppContainer, exc: Exception, fallback: str) -> str:
    """Return a user-facing error message with local debug info."""
    if state_container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
