"""Baker's-percentage dough formulation and fermentation schedule."""

import math
from dataclasses import replace
from datetime import date, datetime, timedelta

from pizzeo.domain.errors import InvalidConfiguration
from pizzeo.domain.recipe import (
    CalculationResult,
    IngredientRow,
    RecipeConfiguration,
    YeastKind,
    YeastMasses,
)

PROCESS_LOSS_FACTOR = 1.03
FRESH_TO_DRY_RATIO = 3.0
COLD_RETRIEVAL_OFFSET = timedelta(hours=3)
HIGH_HYDRATION_THRESHOLD_PCT = 75
KILOGRAM_DISPLAY_THRESHOLD_G = 1000

YEAST_LABELS = {YeastKind.DRY: "Dry yeast", YeastKind.FRESH: "Fresh yeast"}

_PERCENT_FIELDS = ("hydration_pct", "salt_pct", "yeast_pct", "oil_pct", "sugar_pct")
_NUMERIC_FIELDS = (
    "ball_weight_grams",
    *_PERCENT_FIELDS,
    "ambient_temp_c",
    "flour_temp_c",
    "target_mix_water_base_temp_c",
    "total_fermentation_hours",
)


def compute(
    config: RecipeConfiguration, *, serving_date: date | None = None
) -> CalculationResult:
    """Derive ingredient masses, water temperature and schedule for a recipe.

    ``serving_date`` anchors the serving time to a calendar day; it defaults to
    the calling date. Raises ``InvalidConfiguration`` for inputs that cannot
    produce finite masses.
    """
    _validate_inputs(config)

    total_dough_mass = config.pizza_count * config.ball_weight_grams
    if config.include_process_loss:
        total_dough_mass *= PROCESS_LOSS_FACTOR

    ideal_water_temp = config.target_mix_water_base_temp_c - (
        config.flour_temp_c + config.ambient_temp_c
    )

    hydration = config.hydration_pct / 100
    salt = config.salt_pct / 100
    yeast = config.yeast_pct / 100
    oil = config.oil_pct / 100
    sugar = config.sugar_pct / 100

    scale_factor = 1 + hydration + salt + yeast + oil + sugar
    if scale_factor <= 0:
        raise InvalidConfiguration(
            "NON_POSITIVE_SCALE_FACTOR", scale_factor=scale_factor
        )
    _reject_negative_percentages(config)

    flour_mass = total_dough_mass / scale_factor
    water_mass = flour_mass * hydration
    salt_mass = flour_mass * salt
    oil_mass = flour_mass * oil
    sugar_mass = flour_mass * sugar
    yeast_masses = yeast_masses_for(flour_mass * yeast, config.yeast_kind)

    serving_time = datetime.combine(
        serving_date or date.today(), config.target_serving_time
    )
    try:
        start_time = serving_time - timedelta(hours=config.total_fermentation_hours)
        cold_retrieval_time = serving_time - COLD_RETRIEVAL_OFFSET
    except (OverflowError, ValueError) as exc:
        raise InvalidConfiguration(
            "SCHEDULE_OUT_OF_RANGE",
            total_fermentation_hours=config.total_fermentation_hours,
        ) from exc

    rows = [
        IngredientRow("Flour", flour_mass, 100, "Base"),
        IngredientRow(
            "Water", water_mass, config.hydration_pct, _pct_note(config.hydration_pct)
        ),
        IngredientRow("Salt", salt_mass, config.salt_pct, _pct_note(config.salt_pct)),
        IngredientRow(
            YEAST_LABELS[config.yeast_kind],
            yeast_masses.for_kind(config.yeast_kind),
            config.yeast_pct,
            config.yeast_kind.value.upper(),
        ),
    ]
    if oil > 0:
        rows.append(
            IngredientRow("Oil", oil_mass, config.oil_pct, _pct_note(config.oil_pct))
        )
    if sugar > 0:
        rows.append(
            IngredientRow(
                "Sugar", sugar_mass, config.sugar_pct, _pct_note(config.sugar_pct)
            )
        )

    return CalculationResult(
        total_dough_mass=total_dough_mass,
        total_percentage=100
        + config.hydration_pct
        + config.salt_pct
        + config.yeast_pct
        + config.oil_pct
        + config.sugar_pct,
        ideal_mix_water_temp_c=ideal_water_temp,
        scale_factor=scale_factor,
        flour_mass=flour_mass,
        water_mass=water_mass,
        water_volume_ml=water_mass,
        salt_mass=salt_mass,
        oil_mass=oil_mass,
        sugar_mass=sugar_mass,
        yeast=yeast_masses,
        selected_yeast_mass=yeast_masses.for_kind(config.yeast_kind),
        use_kilograms=flour_mass >= KILOGRAM_DISPLAY_THRESHOLD_G,
        production_note=(
            "High hydration"
            if config.hydration_pct > HIGH_HYDRATION_THRESHOLD_PCT
            else ""
        ),
        serving_time=serving_time,
        dough_start_time=start_time,
        cold_retrieval_time=cold_retrieval_time,
        ingredient_table=tuple(rows),
    )


def yeast_masses_for(native_mass: float, kind: YeastKind) -> YeastMasses:
    """Return both yeast masses given the mass of the selected kind."""
    if kind is YeastKind.DRY:
        return YeastMasses(dry=native_mass, fresh=native_mass * FRESH_TO_DRY_RATIO)
    return YeastMasses(dry=native_mass / FRESH_TO_DRY_RATIO, fresh=native_mass)


def validate_configuration(config: RecipeConfiguration) -> None:
    """Raise ``InvalidConfiguration`` unless the recipe can be evaluated today."""
    compute(config)


def toggle_yeast_kind(config: RecipeConfiguration) -> RecipeConfiguration:
    """Switch between dry and fresh yeast, converting the yeast percentage.

    The stored percentage is never rounded, so toggling twice returns the
    original value.
    """
    if config.yeast_kind is YeastKind.DRY:
        return replace(
            config,
            yeast_kind=YeastKind.FRESH,
            yeast_pct=config.yeast_pct * FRESH_TO_DRY_RATIO,
        )
    return replace(
        config,
        yeast_kind=YeastKind.DRY,
        yeast_pct=config.yeast_pct / FRESH_TO_DRY_RATIO,
    )


def _validate_inputs(config: RecipeConfiguration) -> None:
    for name in _NUMERIC_FIELDS:
        value = getattr(config, name)
        if not math.isfinite(value):
            raise InvalidConfiguration(
                "NON_FINITE_VALUE", field=name, value=str(value)
            )
    if isinstance(config.pizza_count, bool) or not isinstance(
        config.pizza_count, int
    ):
        raise InvalidConfiguration("PIZZA_COUNT_NOT_INTEGER", value=config.pizza_count)
    if config.pizza_count <= 0:
        raise InvalidConfiguration("NON_POSITIVE_PIZZA_COUNT", value=config.pizza_count)
    if config.ball_weight_grams <= 0:
        raise InvalidConfiguration(
            "NON_POSITIVE_BALL_WEIGHT", value=config.ball_weight_grams
        )
    if config.total_fermentation_hours < 0:
        raise InvalidConfiguration(
            "NEGATIVE_FERMENTATION_HOURS", value=config.total_fermentation_hours
        )


def _reject_negative_percentages(config: RecipeConfiguration) -> None:
    for name in _PERCENT_FIELDS:
        value = getattr(config, name)
        if value < 0:
            raise InvalidConfiguration("NEGATIVE_PERCENTAGE", field=name, value=value)


def _pct_note(value: float) -> str:
    return f"{value:g}%"
