"""Tests des cas d'erreur."""

import sys
from pathlib import Path

import pytest

from tournee import TourneeError
from tournee.config import Config, ConfigError, ConfigFileError
from tournee.io_files import InputFileError
from tournee.matching.parsing import ParseError
from tournee.primes import InvalidArgumentError


def test_config_load_file_not_found(tmp_path: Path) -> None:
    """Config.load() lève ConfigFileError si le fichier n'existe pas."""
    missing = tmp_path / "inexistant.json"
    with pytest.raises(ConfigFileError, match="introuvable"):
        Config.load(missing)


def test_config_load_invalid_json(tmp_path: Path) -> None:
    """Config.load() lève ConfigFileError si le JSON est invalide."""
    bad_json = tmp_path / "config.json"
    bad_json.write_text("{ invalid json }", encoding="utf-8")
    with pytest.raises(ConfigFileError, match="JSON invalide"):
        Config.load(bad_json)


def test_config_load_not_dict(tmp_path: Path) -> None:
    """Config.load() lève ConfigFileError si le JSON n'est pas un objet."""
    bad_config = tmp_path / "config.json"
    bad_config.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ConfigFileError, match="objet JSON"):
        Config.load(bad_config)


def test_error_hierarchy() -> None:
    for exc in (ConfigError, ConfigFileError, InputFileError, ParseError, InvalidArgumentError):
        assert issubclass(exc, TourneeError)


def _run_main(argv: list[str]) -> int:
    from tournee.cli import main

    old_argv = sys.argv
    try:
        sys.argv = argv
        return main()
    finally:
        sys.argv = old_argv


def test_cli_config_error_exit_code(capsys: pytest.CaptureFixture) -> None:
    """La CLI retourne 1 et affiche un message en cas d'erreur."""
    exit_code = _run_main(["tournee", "run", "--config", "/chemin/inexistant.json"])
    assert exit_code == 1
    assert "Erreur:" in capsys.readouterr().err


def test_cli_missing_inputs_exit_code(capsys: pytest.CaptureFixture) -> None:
    exit_code = _run_main(["tournee", "run"])
    assert exit_code == 1
    assert "address_file et driver_file requis" in capsys.readouterr().err


def test_cli_unparsed_address_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    addresses = tmp_path / "addresses.txt"
    drivers = tmp_path / "drivers.txt"
    addresses.write_text("pas une adresse\n", encoding="utf-8")
    drivers.write_text("Ann\n", encoding="utf-8")
    exit_code = _run_main(["tournee", "run", "-a", str(addresses), "-d", str(drivers)])
    assert exit_code == 1
    assert "adresse non reconnue" in capsys.readouterr().err


def test_cli_factors_invalid_argument(capsys: pytest.CaptureFixture) -> None:
    exit_code = _run_main(["tournee", "factors", "0"])
    assert exit_code == 1
    assert ">= 1" in capsys.readouterr().err
