"""Unit tests for marina.config — MarinaSettings and YAML loading."""
from __future__ import annotations

from pathlib import Path

import pytest

from marina.billing import DEFAULT_RATES
from marina.config import ConfigError, MarinaSettings, load_settings, settings_from_dict
from marina.model import PlacementKind


class TestMarinaSettings:
    def test_defaults(self) -> None:
        settings = MarinaSettings()
        assert settings.capacity == 120
        assert settings.rates[PlacementKind.TRAILER] == 25.00

    def test_with_capacity_overrides(self) -> None:
        assert MarinaSettings().with_capacity(5).capacity == 5

    def test_with_capacity_none_keeps_value(self) -> None:
        settings = MarinaSettings(capacity=7)
        assert settings.with_capacity(None) is settings

    def test_with_capacity_rejects_negative(self) -> None:
        with pytest.raises(ConfigError):
            MarinaSettings().with_capacity(-1)


class TestSettingsFromDict:
    def test_partial_rates_keep_defaults(self) -> None:
        settings = settings_from_dict({"rates": {"SLIP": 13}})
        assert settings.rates[PlacementKind.SLIP] == 13.0
        assert settings.rates[PlacementKind.LAND] == DEFAULT_RATES[PlacementKind.LAND]

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Unknown settings key"):
            settings_from_dict({"capacty": 10})

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Unknown placement kind"):
            settings_from_dict({"rates": {"dock": 1.0}})

    @pytest.mark.parametrize("value", ["ten", -1, True, 2.5])
    def test_bad_capacity_rejected(self, value: object) -> None:
        with pytest.raises(ConfigError):
            settings_from_dict({"capacity": value})

    def test_bad_rate_rejected(self) -> None:
        with pytest.raises(ConfigError):
            settings_from_dict({"rates": {"slip": "cheap"}})


class TestLoadSettings:
    def test_no_path_gives_defaults(self) -> None:
        assert load_settings(None) == MarinaSettings()

    def test_reads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "marina.yaml"
        path.write_text("capacity: 3\nrates:\n  storage: 10.5\n", encoding="utf-8")
        settings = load_settings(path)
        assert settings.capacity == 3
        assert settings.rates[PlacementKind.STORAGE] == 10.5

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "marina.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path).capacity == 120

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "marina.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(path)

    def test_invalid_yaml_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "marina.yaml"
        path.write_text("capacity: [1\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_settings(tmp_path / "nope.yaml")
