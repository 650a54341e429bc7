"""Preset catalog and merging into recipe configurations."""

import math
from dataclasses import dataclass, field, replace

from pizzeo.domain.presets import (
    ProductionScale,
    RecipePreset,
    production_scales,
    recipe_presets,
)
from pizzeo.domain.recipe import RecipeConfiguration, YeastKind


class UnknownPresetError(KeyError):
    """Raised when a preset or scale identifier is not in the catalog."""


@dataclass
class PresetService:
    """Service exposing recipe presets and production scales."""

    presets: list[RecipePreset] = field(default_factory=recipe_presets)
    scales: list[ProductionScale] = field(default_factory=production_scales)

    def get_preset(self, key: str) -> RecipePreset:
        """Return the preset with the given key."""
        for preset in self.presets:
            if preset.key == key:
                return preset
        raise UnknownPresetError(key)

    def get_scale(self, scale_id: str) -> ProductionScale:
        """Return the production scale with the given id."""
        for scale in self.scales:
            if scale.id == scale_id:
                return scale
        raise UnknownPresetError(scale_id)

    def apply_preset(
        self, config: RecipeConfiguration, key: str
    ) -> RecipeConfiguration:
        """Merge a preset's percentages into the configuration.

        Preset yeast values are dry-yeast percentages, so the yeast kind is
        reset to dry.
        """
        preset = self.get_preset(key)
        return replace(
            config,
            hydration_pct=preset.hydration_pct,
            salt_pct=preset.salt_pct,
            yeast_pct=preset.yeast_pct,
            yeast_kind=YeastKind.DRY,
            oil_pct=preset.oil_pct,
            sugar_pct=preset.sugar_pct,
        )

    def apply_scale(
        self, config: RecipeConfiguration, scale_id: str
    ) -> RecipeConfiguration:
        """Merge a production scale's batch size into the configuration."""
        scale = self.get_scale(scale_id)
        return replace(
            config,
            pizza_count=scale.pizza_count,
            ball_weight_grams=scale.ball_weight_grams,
        )

    def match_preset(self, config: RecipeConfiguration) -> RecipePreset | None:
        """Return the preset whose percentages the configuration carries."""
        if config.yeast_kind is not YeastKind.DRY:
            return None
        for preset in self.presets:
            if all(
                math.isclose(getattr(config, name), getattr(preset, name))
                for name in (
                    "hydration_pct",
                    "salt_pct",
                    "yeast_pct",
                    "oil_pct",
                    "sugar_pct",
                )
            ):
                return preset
        return None
