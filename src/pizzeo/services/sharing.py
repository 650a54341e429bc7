"""Shareable plain-text recipe summaries."""

from pizzeo.domain.presets import RecipePreset
from pizzeo.domain.recipe import CalculationResult, RecipeConfiguration
from pizzeo.services.formulation import YEAST_LABELS


def format_recipe_text(
    config: RecipeConfiguration,
    result: CalculationResult,
    preset: RecipePreset | None = None,
) -> str:
    """Format a recipe and its calculation for copying or sharing."""
    title = preset.name if preset else "Custom"
    start = result.dough_start_time
    lines = [
        f"Pizzeo - {title}",
        f"Units: {config.pizza_count} x {config.ball_weight_grams:g}g",
        f"Total: {result.total_dough_mass / 1000:.2f}kg",
        "",
        "Ingredients:",
        f"- Flour: {result.flour_mass:.0f}g",
        f"- Water: {result.water_mass:.0f}g",
        f"- Salt: {result.salt_mass:.1f}g",
        f"- {YEAST_LABELS[config.yeast_kind]}: {result.selected_yeast_mass:.2f}g",
    ]
    if result.oil_mass > 0:
        lines.append(f"- Oil: {result.oil_mass:.1f}g")
    if result.sugar_mass > 0:
        lines.append(f"- Sugar: {result.sugar_mass:.1f}g")
    lines.extend(
        [
            "",
            f"Ideal water temperature: {result.ideal_mix_water_temp_c:.1f}°C",
            f"Start: {start:%H:%M} ({start:%a})",
            f"Take out of the fridge: {result.cold_retrieval_time:%H:%M}",
        ]
    )
    return "\n".join(lines)
