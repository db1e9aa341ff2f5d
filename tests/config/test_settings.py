"""Tests for the YAML-backed settings registry."""

from pathlib import Path

import pytest

from wrenchsizes.config.settings import SizeSettings, get_settings

_REAL_DATA = Path(__file__).resolve().parents[2] / "wrenchsizes" / "config" / "data"


@pytest.fixture()
def data_dir(tmp_path):
    """A writable copy of the shipped settings file."""
    text = (_REAL_DATA / "settings.yaml").read_text()
    (tmp_path / "settings.yaml").write_text(text)
    return tmp_path


def _edit(data_dir: Path, old: str, new: str) -> None:
    path = data_dir / "settings.yaml"
    text = path.read_text()
    assert old in text
    path.write_text(text.replace(old, new, 1))


class TestShippedSettings:
    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_metric_units_in_order(self):
        settings = get_settings()
        assert list(settings.metric_units) == ["0.1", "0.2", "0.5", "1", "2", "5", "10"]
        assert settings.steps_per_mm("0.1") == 10.0
        assert settings.steps_per_mm("10") == 0.1

    def test_sae_units_in_order(self):
        settings = get_settings()
        assert list(settings.sae_units) == [
            "1/256", "1/128", "1/64", "1/32", "1/16", "1/8", "1/4", "1/2",
        ]
        assert settings.steps_per_inch("1/16") == 16
        assert settings.steps_per_inch("1/2") == 2

    def test_limits(self):
        limits = get_settings().limits
        assert limits.metric_max_mm == 250.0
        assert limits.sae_max_inch == 10.0
        assert (limits.bias_min, limits.bias_max) == (-1.0, 1.0)

    def test_defaults(self):
        d = get_settings().defaults
        assert (d.metric_first, d.metric_last, d.metric_unit) == ("3", "32", "1")
        assert (d.sae_first, d.sae_last, d.sae_unit) == ("1/8", "1-1/4", "1/16")
        assert d.bias == "0.0"

    def test_tables_read_only(self):
        with pytest.raises(TypeError):
            get_settings().metric_units["0.3"] = 3.0  # type: ignore[index]

    def test_unknown_labels(self):
        with pytest.raises(KeyError, match="No metric unit"):
            get_settings().steps_per_mm("0.3")
        with pytest.raises(KeyError, match="No SAE unit"):
            get_settings().steps_per_inch("1/10")


class TestCustomDataDir:
    def test_loads_copy(self, data_dir):
        assert SizeSettings(data_dir).steps_per_inch("1/64") == 64

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Settings file not found"):
            SizeSettings(tmp_path)

    def test_invalid_yaml(self, data_dir):
        (data_dir / "settings.yaml").write_text("metric_units: [unclosed\n")
        with pytest.raises(ValueError, match="Failed to parse settings file"):
            SizeSettings(data_dir)

    def test_missing_section(self, data_dir):
        (data_dir / "settings.yaml").write_text("metric_units: []\n")
        with pytest.raises(ValueError, match="Malformed settings file"):
            SizeSettings(data_dir)

    def test_non_power_of_two_sae_unit(self, data_dir):
        _edit(data_dir, "steps_per_inch: 16", "steps_per_inch: 10")
        with pytest.raises(ValueError, match="power of two"):
            SizeSettings(data_dir)

    def test_non_positive_metric_unit(self, data_dir):
        _edit(data_dir, "steps_per_mm: 2.0", "steps_per_mm: 0.0")
        with pytest.raises(ValueError, match="steps_per_mm must be positive"):
            SizeSettings(data_dir)

    def test_unknown_default_unit(self, data_dir):
        _edit(data_dir, 'metric_unit: "1"', 'metric_unit: "3"')
        with pytest.raises(ValueError, match="defaults.metric_unit"):
            SizeSettings(data_dir)

    def test_bias_limits_beyond_one(self, data_dir):
        _edit(data_dir, "bias_max: 1.0", "bias_max: 2.0")
        with pytest.raises(ValueError, match="exceeds"):
            SizeSettings(data_dir)

    def test_metric_limit_beyond_hard_maximum(self, data_dir):
        _edit(data_dir, "metric_max_mm: 250.0", "metric_max_mm: 500.0")
        with pytest.raises(ValueError, match="limits.metric_max_mm 500.0 exceeds 250.0"):
            SizeSettings(data_dir)

    def test_sae_limit_beyond_hard_maximum(self, data_dir):
        _edit(data_dir, "sae_max_inch: 10.0", "sae_max_inch: 12.0")
        with pytest.raises(ValueError, match="limits.sae_max_inch 12.0 exceeds 10.0"):
            SizeSettings(data_dir)

    def test_tighter_limits_accepted(self, data_dir):
        _edit(data_dir, "metric_max_mm: 250.0", "metric_max_mm: 100.0")
        assert SizeSettings(data_dir).limits.metric_max_mm == 100.0

    def test_all_problems_reported_together(self, data_dir):
        _edit(data_dir, "steps_per_inch: 16", "steps_per_inch: 10")
        _edit(data_dir, 'sae_unit: "1/16"', 'sae_unit: "1/10"')
        with pytest.raises(ValueError) as exc_info:
            SizeSettings(data_dir)
        message = str(exc_info.value)
        assert "power of two" in message
        assert "defaults.sae_unit" in message
