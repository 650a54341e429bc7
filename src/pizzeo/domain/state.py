"""Serializable recipe state shared by storage and the HTTP API."""

import math
from datetime import time

from pydantic import BaseModel, ConfigDict, field_validator

from pizzeo.domain.recipe import RecipeConfiguration, YeastKind


class RecipeState(BaseModel):
    """Wire representation of a recipe configuration."""

    model_config = ConfigDict(extra="ignore")

    pizza_count: int
    ball_weight_grams: float
    hydration_pct: float
    salt_pct: float
    yeast_pct: float
    yeast_kind: YeastKind
    oil_pct: float
    sugar_pct: float
    include_process_loss: bool
    ambient_temp_c: float
    flour_temp_c: float
    target_mix_water_base_temp_c: float
    target_serving_time: time
    total_fermentation_hours: float

    @field_validator(
        "ball_weight_grams",
        "hydration_pct",
        "salt_pct",
        "yeast_pct",
        "oil_pct",
        "sugar_pct",
        "ambient_temp_c",
        "flour_temp_c",
        "target_mix_water_base_temp_c",
        "total_fermentation_hours",
    )
    @classmethod
    def _require_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("value must be finite")
        return value

    def to_configuration(self) -> RecipeConfiguration:
        """Convert to the immutable domain configuration."""
        return RecipeConfiguration(**self.model_dump())

    @classmethod
    def from_configuration(cls, config: RecipeConfiguration) -> "RecipeState":
        """Build the wire representation from a domain configuration."""
        return cls(
            pizza_count=config.pizza_count,
            ball_weight_grams=config.ball_weight_grams,
            hydration_pct=config.hydration_pct,
            salt_pct=config.salt_pct,
            yeast_pct=config.yeast_pct,
            yeast_kind=config.yeast_kind,
            oil_pct=config.oil_pct,
            sugar_pct=config.sugar_pct,
            include_process_loss=config.include_process_loss,
            ambient_temp_c=config.ambient_temp_c,
            flour_temp_c=config.flour_temp_c,
            target_mix_water_base_temp_c=config.target_mix_water_base_temp_c,
            target_serving_time=config.target_serving_time,
            total_fermentation_hours=config.total_fermentation_hours,
        )


DEFAULT_CONFIGURATION = RecipeConfiguration(
    pizza_count=4,
    ball_weight_grams=250,
    hydration_pct=60,
    salt_pct=3,
    yeast_pct=0.1,
    yeast_kind=YeastKind.DRY,
    oil_pct=0,
    sugar_pct=0,
    include_process_loss=True,
    ambient_temp_c=22,
    flour_temp_c=21,
    target_mix_water_base_temp_c=60,
    target_serving_time=time(20, 0),
    total_fermentation_hours=24,
)
