"""Domain models for dough formulation."""

from dataclasses import dataclass
from datetime import datetime, time
from enum import Enum


class YeastKind(str, Enum):
    """Yeast variety the recipe percentage refers to."""

    DRY = "dry"
    FRESH = "fresh"


@dataclass(frozen=True)
class RecipeConfiguration:
    """Immutable input to a single formulation evaluation."""

    pizza_count: int
    ball_weight_grams: float
    hydration_pct: float
    salt_pct: float
    yeast_pct: float
    oil_pct: float
    sugar_pct: float
    yeast_kind: YeastKind
    include_process_loss: bool
    ambient_temp_c: float
    flour_temp_c: float
    target_mix_water_base_temp_c: float
    target_serving_time: time
    total_fermentation_hours: float


@dataclass(frozen=True)
class YeastMasses:
    """Dry and fresh yeast masses derived from the same fraction."""

    dry: float
    fresh: float

    def for_kind(self, kind: YeastKind) -> float:
        """Return the mass matching the given yeast kind."""
        return self.dry if kind is YeastKind.DRY else self.fresh


@dataclass(frozen=True)
class IngredientRow:
    """Single line of the ingredient table."""

    name: str
    mass: float
    percentage: float
    note: str


@dataclass(frozen=True)
class CalculationResult:
    """Derived quantities for a recipe configuration."""

    total_dough_mass: float
    total_percentage: float
    ideal_mix_water_temp_c: float
    scale_factor: float
    flour_mass: float
    water_mass: float
    water_volume_ml: float
    salt_mass: float
    oil_mass: float
    sugar_mass: float
    yeast: YeastMasses
    selected_yeast_mass: float
    use_kilograms: bool
    production_note: str
    serving_time: datetime
    dough_start_time: datetime
    cold_retrieval_time: datetime
    ingredient_table: tuple[IngredientRow, ...]

    @property
    def dry_yeast_mass(self) -> float:
        """Dry yeast mass."""
        return self.yeast.dry

    @property
    def fresh_yeast_mass(self) -> float:
        """Fresh yeast mass."""
        return self.yeast.fresh
