import pytest

from homehealth.scoring import (
    CATEGORY_WEIGHTS, OVERALL_WEIGHTS, ConfigurationError, MetricCatalog, MetricDefinition,
    ScoringConfig, TwoSidedIdeal, UnknownMetric, build_scoring_config,
)


def test_every_metric_belongs_to_one_category():
    catalog = MetricCatalog()
    assert len(catalog) == 12
    assert [d.key for d in catalog.metrics_for("air")] == ["CO2", "PM25", "PM10", "VOCs", "Humidity", "Temp"]
    assert [d.key for d in catalog.metrics_for("water")] == ["TDS", "Cl", "pH"]
    assert [d.key for d in catalog.metrics_for("ether")] == ["MagField", "ElectricField", "RF"]


def test_canonical_thresholds():
    catalog = MetricCatalog()
    co2 = catalog.get("CO2")
    assert (co2.good_max, co2.fair_max, co2.unit, co2.category) == (800, 1200, "ppm", "air")
    cl = catalog.get("Cl")
    assert (cl.good_max, cl.fair_max) == (0.8, 1.5)
    assert catalog.get("pH").curve == TwoSidedIdeal(6.5, 8.5)


def test_unknown_metric_raises():
    with pytest.raises(UnknownMetric) as exc_info:
        MetricCatalog().get("Radon")
    assert exc_info.value.key == "Radon"
    assert isinstance(exc_info.value, KeyError)


@pytest.mark.parametrize("raw, key", [
    ("PM2.5", "PM25"),
    (" temperature ", "Temp"),
    ("Free Chlorine", "Cl"),
    ("Mag Field", "MagField"),
    ("Electric Field", "ElectricField"),
    ("co2", "CO2"),
    ("RF", "RF"),
])
def test_resolve_aliases(raw, key):
    assert MetricCatalog().resolve(raw).key == key


def test_resolve_unknown_raises():
    with pytest.raises(UnknownMetric):
        MetricCatalog().resolve("Lead")


def test_definition_requires_good_below_fair():
    with pytest.raises(ConfigurationError):
        MetricDefinition("X", "air", "ppm", 10, 10)
    with pytest.raises(ConfigurationError):
        MetricDefinition("X", "air", "ppm", 12, 10)


def test_definition_rejects_unknown_category():
    with pytest.raises(ConfigurationError):
        MetricDefinition("X", "soil", "ppm", 1, 2)


def test_two_sided_band_must_fit_under_good_max():
    with pytest.raises(ConfigurationError):
        MetricDefinition("X", "water", "", 8.0, 9.0, curve=TwoSidedIdeal(6.5, 8.5))


def test_duplicate_keys_rejected():
    definition = MetricDefinition("X", "air", "ppm", 1, 2)
    with pytest.raises(ConfigurationError):
        MetricCatalog([definition, definition], aliases={})


@pytest.mark.parametrize("category", ["air", "water", "ether"])
def test_category_weights_sum_to_one(category):
    assert abs(sum(CATEGORY_WEIGHTS[category].values()) - 1.0) <= 1e-9


def test_overall_weights_sum_to_one():
    assert abs(sum(OVERALL_WEIGHTS.values()) - 1.0) <= 1e-9


def test_config_rejects_weights_not_summing_to_one():
    weights = {category: dict(w) for category, w in CATEGORY_WEIGHTS.items()}
    weights["water"]["TDS"] = 0.5
    with pytest.raises(ConfigurationError):
        ScoringConfig(category_weights=weights)


def test_config_rejects_metric_weighted_in_wrong_category():
    weights = {category: dict(w) for category, w in CATEGORY_WEIGHTS.items()}
    weights["water"] = {"TDS": 0.4, "Cl": 0.3, "RF": 0.3}
    with pytest.raises(ConfigurationError):
        ScoringConfig(category_weights=weights)


def test_config_is_read_only(config):
    with pytest.raises(TypeError):
        config.overall_weights["air"] = 1.0
    with pytest.raises(TypeError):
        config.category_weights["air"]["CO2"] = 1.0


def test_threshold_overrides_apply():
    config = build_scoring_config({"CO2": {"good_max": 700, "fair_max": 1000}})
    co2 = config.catalog.get("CO2")
    assert (co2.good_max, co2.fair_max) == (700, 1000)
    # aliases survive the override
    assert config.catalog.resolve("PM2.5").key == "PM25"
    # defaults untouched
    assert build_scoring_config().catalog.get("CO2").good_max == 800


@pytest.mark.parametrize("overrides", [
    {"CO2": {"good_max": 1300}},
    {"Radon": {"good_max": 1, "fair_max": 2}},
    {"CO2": {"poor_max": 3000}},
    {"pH": {"good_max": 8.0}},
])
def test_bad_overrides_are_configuration_errors(overrides):
    with pytest.raises(ConfigurationError):
        build_scoring_config(overrides)
