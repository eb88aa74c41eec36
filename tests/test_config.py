"""Tests du module config."""

from pathlib import Path

import pytest

from tournee.config import Config, ConfigError


def test_config_resolve_paths(tmp_path: Path) -> None:
    """Les chemins relatifs sont résolus par rapport au dossier du fichier config."""
    config_dir = tmp_path / "mon_projet"
    config_dir.mkdir()
    (config_dir / "data").mkdir()

    config = Config(
        address_file="data/addresses.txt",
        driver_file="data/drivers.txt",
    )
    config.resolve_paths(config_dir)

    assert Path(config.address_file).name == "addresses.txt"
    assert "data" in config.address_file
    assert Path(config.address_file).parent.parent == config_dir.resolve()


def test_config_load_resolves_paths(tmp_path: Path) -> None:
    """Config.load() résout automatiquement les chemins relatifs."""
    (tmp_path / "data").mkdir()
    config_path = tmp_path / "config.json"
    config_path.write_text(
        """
        {
            "address_file": "data/addresses.txt",
            "driver_file": "data/drivers.txt",
            "skip_unparsed": true
        }
    """,
        encoding="utf-8",
    )

    config = Config.load(config_path)
    assert Path(config.address_file).is_absolute()
    assert Path(config.driver_file).is_absolute()
    assert config.skip_unparsed is True
    assert config.vowel_multiplier == 1.5
    assert config.shared_factor_bonus == 1.5


def test_config_defaults() -> None:
    config = Config.from_dict({"address_file": "a.txt", "driver_file": "d.txt"})
    assert config.address_column is None
    assert config.encoding == "utf-8"
    assert config.compiled_pattern().match("1 Elm Street,") is not None


def test_config_validation_missing_files() -> None:
    with pytest.raises(ConfigError, match="address_file et driver_file requis"):
        Config.from_dict({"address_file": "a.txt"})


def test_config_validation_vowel_multiplier() -> None:
    with pytest.raises(ConfigError, match="vowel_multiplier doit être > 0"):
        Config.from_dict({"address_file": "a.txt", "driver_file": "d.txt", "vowel_multiplier": 0})


def test_config_validation_shared_factor_bonus() -> None:
    with pytest.raises(ConfigError, match="shared_factor_bonus"):
        Config.from_dict({"address_file": "a.txt", "driver_file": "d.txt", "shared_factor_bonus": 0.5})


def test_config_validation_bad_pattern() -> None:
    with pytest.raises(ConfigError, match="address_pattern invalide"):
        Config.from_dict({"address_file": "a.txt", "driver_file": "d.txt", "address_pattern": "(unclosed"})
