"""Pydantic models for API payloads."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from pizzeo.domain.presets import ProductionScale, RecipePreset
from pizzeo.domain.recipe import CalculationResult, IngredientRow
from pizzeo.domain.state import RecipeState


class CalculateRequest(BaseModel):
    """Recipe state plus an optional serving date."""

    state: RecipeState
    serving_date: date | None = None


class IngredientRowModel(BaseModel):
    """Ingredient table row."""

    name: str
    mass: float
    percentage: float
    note: str

    @classmethod
    def from_row(cls, row: IngredientRow) -> "IngredientRowModel":
        """Build the model from a domain ingredient row."""
        return cls(
            name=row.name, mass=row.mass, percentage=row.percentage, note=row.note
        )


class CalculationResponse(BaseModel):
    """Serialized calculation result."""

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
    dry_yeast_mass: float
    fresh_yeast_mass: float
    selected_yeast_mass: float
    use_kilograms: bool
    production_note: str
    serving_time: datetime
    dough_start_time: datetime
    cold_retrieval_time: datetime
    ingredient_table: list[IngredientRowModel]

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculationResponse":
        """Build the response from a domain result."""
        return cls(
            total_dough_mass=result.total_dough_mass,
            total_percentage=result.total_percentage,
            ideal_mix_water_temp_c=result.ideal_mix_water_temp_c,
            scale_factor=result.scale_factor,
            flour_mass=result.flour_mass,
            water_mass=result.water_mass,
            water_volume_ml=result.water_volume_ml,
            salt_mass=result.salt_mass,
            oil_mass=result.oil_mass,
            sugar_mass=result.sugar_mass,
            dry_yeast_mass=result.dry_yeast_mass,
            fresh_yeast_mass=result.fresh_yeast_mass,
            selected_yeast_mass=result.selected_yeast_mass,
            use_kilograms=result.use_kilograms,
            production_note=result.production_note,
            serving_time=result.serving_time,
            dough_start_time=result.dough_start_time,
            cold_retrieval_time=result.cold_retrieval_time,
            ingredient_table=[
                IngredientRowModel.from_row(row) for row in result.ingredient_table
            ],
        )


class RecipePresetModel(BaseModel):
    """Recipe style preset."""

    key: str
    name: str
    hydration_pct: float
    salt_pct: float
    yeast_pct: float
    oil_pct: float
    sugar_pct: float

    @classmethod
    def from_preset(cls, preset: RecipePreset) -> "RecipePresetModel":
        """Build the model from a catalog preset."""
        return cls(
            key=preset.key,
            name=preset.name,
            hydration_pct=preset.hydration_pct,
            salt_pct=preset.salt_pct,
            yeast_pct=preset.yeast_pct,
            oil_pct=preset.oil_pct,
            sugar_pct=preset.sugar_pct,
        )


class ProductionScaleModel(BaseModel):
    """Production scale preset."""

    id: str
    name: str
    pizza_count: int
    ball_weight_grams: float
    description: str
    notes: str

    @classmethod
    def from_scale(cls, scale: ProductionScale) -> "ProductionScaleModel":
        """Build the model from a catalog production scale."""
        return cls(
            id=scale.id,
            name=scale.name,
            pizza_count=scale.pizza_count,
            ball_weight_grams=scale.ball_weight_grams,
            description=scale.description,
            notes=scale.notes,
        )


class AssistantQuestion(BaseModel):
    """Free-text question for the assistant."""

    prompt: str = Field(min_length=1)


class AssistantAnswer(BaseModel):
    """Assistant answer text."""

    answer: str


class ImageResponse(BaseModel):
    """Generated image as a data URL, when available."""

    image: str | None
