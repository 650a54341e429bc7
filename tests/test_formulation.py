"""Tests for the dough formulation engine."""

from datetime import date, datetime, time

import pytest

from pizzeo.domain.errors import InvalidConfiguration
from pizzeo.domain.recipe import YeastKind
from pizzeo.services.formulation import compute, toggle_yeast_kind
from tests.conftest import make_config

SERVING_DATE = date(2026, 10, 19)


def test_neapolitan_reference_batch() -> None:
    result = compute(make_config(), serving_date=SERVING_DATE)

    assert result.total_dough_mass == pytest.approx(1030)
    assert result.scale_factor == pytest.approx(1.631)
    assert result.flour_mass == pytest.approx(1030 / 1.631)
    assert result.water_mass == pytest.approx(result.flour_mass * 0.6)
    assert result.salt_mass == pytest.approx(result.flour_mass * 0.03)
    assert result.dry_yeast_mass == pytest.approx(result.flour_mass * 0.001)
    assert result.fresh_yeast_mass == pytest.approx(result.flour_mass * 0.003)
    assert result.water_mass == pytest.approx(378.9, abs=0.1)
    assert result.salt_mass == pytest.approx(18.95, abs=0.01)


def test_masses_sum_to_total_dough_mass() -> None:
    for kind in YeastKind:
        config = make_config(oil_pct=3, sugar_pct=2, yeast_pct=0.7, yeast_kind=kind)
        result = compute(config, serving_date=SERVING_DATE)

        total = (
            result.flour_mass
            + result.water_mass
            + result.salt_mass
            + result.oil_mass
            + result.sugar_mass
            + result.selected_yeast_mass
        )
        assert total == pytest.approx(result.total_dough_mass)


def test_fresh_yeast_is_three_times_dry_for_both_kinds() -> None:
    for kind in YeastKind:
        result = compute(make_config(yeast_kind=kind), serving_date=SERVING_DATE)

        assert result.fresh_yeast_mass == pytest.approx(result.dry_yeast_mass * 3)


def test_fresh_kind_uses_percentage_as_fresh_mass() -> None:
    result = compute(
        make_config(yeast_pct=0.3, yeast_kind=YeastKind.FRESH),
        serving_date=SERVING_DATE,
    )

    assert result.fresh_yeast_mass == pytest.approx(result.flour_mass * 0.003)
    assert result.selected_yeast_mass == result.fresh_yeast_mass
    assert result.ingredient_table[3].name == "Fresh yeast"
    assert result.ingredient_table[3].note == "FRESH"


def test_process_loss_inflates_total_by_three_percent() -> None:
    with_loss = compute(
        make_config(include_process_loss=True), serving_date=SERVING_DATE
    )
    without_loss = compute(
        make_config(include_process_loss=False), serving_date=SERVING_DATE
    )

    assert without_loss.total_dough_mass == 1000
    assert with_loss.total_dough_mass == pytest.approx(
        without_loss.total_dough_mass * 1.03
    )


def test_ingredient_table_has_four_rows_without_oil_and_sugar() -> None:
    result = compute(make_config(), serving_date=SERVING_DATE)

    assert [row.name for row in result.ingredient_table] == [
        "Flour",
        "Water",
        "Salt",
        "Dry yeast",
    ]
    assert result.ingredient_table[0].percentage == 100
    assert result.ingredient_table[1].note == "60%"


def test_ingredient_table_has_six_rows_with_oil_and_sugar() -> None:
    result = compute(make_config(oil_pct=2, sugar_pct=2), serving_date=SERVING_DATE)

    names = [row.name for row in result.ingredient_table]
    assert names == ["Flour", "Water", "Salt", "Dry yeast", "Oil", "Sugar"]
    assert result.ingredient_table[4].note == "2%"


def test_only_oil_row_added_when_sugar_is_zero() -> None:
    result = compute(make_config(oil_pct=3), serving_date=SERVING_DATE)

    assert len(result.ingredient_table) == 5
    assert result.ingredient_table[-1].name == "Oil"


def test_ideal_water_temperature_is_not_clamped() -> None:
    result = compute(
        make_config(target_mix_water_base_temp_c=30), serving_date=SERVING_DATE
    )

    assert result.ideal_mix_water_temp_c == -13


def test_default_water_temperature() -> None:
    result = compute(make_config(), serving_date=SERVING_DATE)

    assert result.ideal_mix_water_temp_c == 17


def test_schedule_rolls_back_to_previous_day() -> None:
    result = compute(make_config(), serving_date=SERVING_DATE)

    assert result.serving_time == datetime(2026, 10, 19, 20, 0)
    assert result.dough_start_time == datetime(2026, 10, 18, 20, 0)
    assert result.cold_retrieval_time == datetime(2026, 10, 19, 17, 0)


def test_schedule_crosses_midnight_for_short_fermentation() -> None:
    config = make_config(target_serving_time=time(2, 30), total_fermentation_hours=6)

    result = compute(config, serving_date=SERVING_DATE)

    assert result.dough_start_time == datetime(2026, 10, 18, 20, 30)
    assert result.cold_retrieval_time == datetime(2026, 10, 18, 23, 30)


def test_schedule_defaults_to_today() -> None:
    result = compute(make_config(total_fermentation_hours=0))

    assert result.serving_time.date() == date.today()
    assert result.dough_start_time == result.serving_time


def test_zero_yeast_is_valid() -> None:
    result = compute(make_config(yeast_pct=0), serving_date=SERVING_DATE)

    assert result.dry_yeast_mass == 0
    assert result.fresh_yeast_mass == 0
    assert len(result.ingredient_table) == 4


def test_display_hints() -> None:
    small = compute(make_config(), serving_date=SERVING_DATE)
    large = compute(
        make_config(pizza_count=300, hydration_pct=80), serving_date=SERVING_DATE
    )

    assert small.use_kilograms is False
    assert small.production_note == ""
    assert small.total_percentage == pytest.approx(163.1)
    assert small.water_volume_ml == small.water_mass
    assert large.use_kilograms is True
    assert large.production_note == "High hydration"


def test_non_positive_scale_factor_is_rejected() -> None:
    with pytest.raises(InvalidConfiguration) as exc_info:
        compute(make_config(hydration_pct=-150), serving_date=SERVING_DATE)

    assert exc_info.value.code == "NON_POSITIVE_SCALE_FACTOR"


@pytest.mark.parametrize(
    ("overrides", "code"),
    [
        ({"pizza_count": 0}, "NON_POSITIVE_PIZZA_COUNT"),
        ({"pizza_count": -2}, "NON_POSITIVE_PIZZA_COUNT"),
        ({"pizza_count": 2.5}, "PIZZA_COUNT_NOT_INTEGER"),
        ({"ball_weight_grams": 0}, "NON_POSITIVE_BALL_WEIGHT"),
        ({"ball_weight_grams": -250}, "NON_POSITIVE_BALL_WEIGHT"),
        ({"salt_pct": -1}, "NEGATIVE_PERCENTAGE"),
        ({"total_fermentation_hours": -1}, "NEGATIVE_FERMENTATION_HOURS"),
        ({"total_fermentation_hours": 1e8}, "SCHEDULE_OUT_OF_RANGE"),
        ({"hydration_pct": float("nan")}, "NON_FINITE_VALUE"),
        ({"ball_weight_grams": float("inf")}, "NON_FINITE_VALUE"),
    ],
)
def test_invalid_configurations_fail_fast(
    overrides: dict[str, object], code: str
) -> None:
    with pytest.raises(InvalidConfiguration) as exc_info:
        compute(make_config(**overrides), serving_date=SERVING_DATE)

    assert exc_info.value.code == code
    assert exc_info.value.as_dict()["code"] == code


def test_toggle_yeast_kind_converts_percentage() -> None:
    fresh = toggle_yeast_kind(make_config(yeast_pct=0.1))

    assert fresh.yeast_kind is YeastKind.FRESH
    assert fresh.yeast_pct == pytest.approx(0.3)


def test_toggle_yeast_kind_twice_restores_percentage() -> None:
    original = make_config(yeast_pct=0.17)
    config = original
    for _ in range(10):
        config = toggle_yeast_kind(toggle_yeast_kind(config))

    assert config.yeast_kind is YeastKind.DRY
    assert config.yeast_pct == pytest.approx(original.yeast_pct, rel=1e-12)


def test_compute_does_not_mutate_configuration() -> None:
    config = make_config()

    first = compute(config, serving_date=SERVING_DATE)
    second = compute(config, serving_date=SERVING_DATE)

    assert first == second
    assert config == make_config()
