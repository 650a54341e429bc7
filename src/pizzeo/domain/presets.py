"""Recipe style and production scale presets."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RecipePreset:
    """Baker's percentages for a dough style (yeast as dry yeast)."""

    key: str
    name: str
    hydration_pct: float
    salt_pct: float
    yeast_pct: float
    oil_pct: float
    sugar_pct: float


@dataclass(frozen=True)
class ProductionScale:
    """Batch size bundle: number of balls and weight per ball."""

    id: str
    name: str
    pizza_count: int
    ball_weight_grams: float
    description: str
    notes: str


class RecipeStyle(Enum):
    """Built-in dough styles."""

    AVPN = RecipePreset("avpn", "Neapolitan (AVPN)", 60, 3, 0.1, 0, 0)
    CONTEMPORARY = RecipePreset(
        "contemporary", "Contemporary Neapolitan", 70, 2.8, 0.2, 0, 0
    )
    ROMAN = RecipePreset("roman", "Roman", 56, 2.5, 0.2, 3, 0)
    NEW_YORK = RecipePreset("new-york", "New York Style", 62, 2, 0.4, 2, 2)
    DETROIT = RecipePreset("detroit", "Detroit/Chicago", 70, 2.5, 0.5, 4, 0)


class ProductionSize(Enum):
    """Built-in production scales."""

    ARTISANAL = ProductionScale(
        "artisanal",
        "Artisanal",
        4,
        250,
        "Small batch",
        "Test and refine your recipe",
    )
    UNIT_A = ProductionScale(
        "unit-a",
        "Unit A",
        45,
        250,
        "Medium scale (~45 units)",
        "Check the mixer capacity",
    )
    UNIT_B = ProductionScale(
        "unit-b",
        "Unit B",
        300,
        250,
        "Large scale (~300 units)",
        "Check the silo and mixer capacity",
    )


def recipe_presets() -> list[RecipePreset]:
    """Return all recipe presets in display order."""
    return [entry.value for entry in RecipeStyle]


def production_scales() -> list[ProductionScale]:
    """Return all production scales in display order."""
    return [entry.value for entry in ProductionSize]
