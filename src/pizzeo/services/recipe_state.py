"""Persistence of the active recipe configuration."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from pizzeo.domain.errors import InvalidConfiguration
from pizzeo.domain.recipe import RecipeConfiguration
from pizzeo.domain.state import DEFAULT_CONFIGURATION, RecipeState
from pizzeo.services.formulation import validate_configuration

DEFAULT_NAMESPACE = "pizzeo_v2_state"

_logger = logging.getLogger(__name__)


class RecipeStateRepository(Protocol):
    """Key-value persistence interface for recipe state."""

    def load_state(self, namespace: str) -> dict[str, object] | None:
        """Return the raw stored state for a namespace, if any."""

    def save_state(self, namespace: str, state: dict[str, object]) -> None:
        """Store the raw state under a namespace."""


@dataclass
class RecipeStateService:
    """Loads and saves recipe configurations, falling back to defaults."""

    repository: RecipeStateRepository
    namespace: str = DEFAULT_NAMESPACE
    default: RecipeConfiguration = DEFAULT_CONFIGURATION

    def load(self) -> RecipeConfiguration:
        """Return the stored configuration merged over the defaults."""
        try:
            stored = self.repository.load_state(self.namespace)
        except Exception:
            _logger.exception(
                "Failed to load recipe state", extra={"namespace": self.namespace}
            )
            return self.default
        if not stored:
            return self.default
        if not isinstance(stored, dict):
            _logger.warning(
                "Ignoring non-object recipe state for namespace %s", self.namespace
            )
            return self.default

        merged = {**self.default_state().model_dump(mode="json"), **stored}
        try:
            config = RecipeState.model_validate(merged).to_configuration()
        except ValidationError as exc:
            _logger.warning(
                "Stored recipe state does not match schema, using defaults: %s",
                exc.error_count(),
            )
            return self.default
        try:
            validate_configuration(config)
        except InvalidConfiguration as exc:
            _logger.warning(
                "Stored recipe state cannot be evaluated, using defaults: %s",
                exc.code,
            )
            return self.default
        return config

    def save(self, config: RecipeConfiguration) -> None:
        """Persist the configuration.

        Raises ``InvalidConfiguration`` without writing when the recipe cannot
        be evaluated.
        """
        validate_configuration(config)
        payload = RecipeState.from_configuration(config).model_dump(mode="json")
        self.repository.save_state(self.namespace, payload)

    def reset(self) -> RecipeConfiguration:
        """Persist and return the default configuration."""
        self.save(self.default)
        return self.default

    def default_state(self) -> RecipeState:
        """Return the default configuration in its wire form."""
        return RecipeState.from_configuration(self.default)
