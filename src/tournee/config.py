"""Configuration et chargement du fichier config JSON."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Numéro, nom de rue, type de voie suivi d'une virgule : "123 Elm Street, Springfield"
DEFAULT_ADDRESS_PATTERN = r"^\w+\s([\w\s]+)\s\w+,"
DEFAULT_VOWEL_MULTIPLIER = 1.5
DEFAULT_SHARED_FACTOR_BONUS = 1.5


class TourneeError(Exception):
    """Exception de base pour Tournée."""


class ConfigError(TourneeError, ValueError):
    """Erreur de validation de la configuration."""


class ConfigFileError(TourneeError):
    """Erreur de chargement du fichier de configuration (fichier absent, JSON invalide)."""


def compile_address_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile le motif d'extraction du nom de rue (insensible à la casse).

    Raises:
        ConfigError: Si le motif est invalide ou sans groupe de capture.
    """
    try:
        compiled = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise ConfigError(f"address_pattern invalide: {pattern!r} ({e})") from e
    if compiled.groups < 1:
        raise ConfigError(f"address_pattern doit contenir un groupe de capture: {pattern!r}")
    return compiled


@dataclass
class Config:
    """Configuration principale de Tournée."""

    address_file: str = ""
    driver_file: str = ""
    address_column: str | None = None  # None = première colonne (CSV / xlsx)
    driver_column: str | None = None
    address_sheet: str | None = None  # None = première feuille
    driver_sheet: str | None = None
    encoding: str = "utf-8"

    address_pattern: str = DEFAULT_ADDRESS_PATTERN
    skip_unparsed: bool = False

    vowel_multiplier: float = DEFAULT_VOWEL_MULTIPLIER
    shared_factor_bonus: float = DEFAULT_SHARED_FACTOR_BONUS

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Config:
        address_file = d.get("address_file", "")
        driver_file = d.get("driver_file", "")
        address_pattern = d.get("address_pattern", DEFAULT_ADDRESS_PATTERN)
        vowel_multiplier = float(d.get("vowel_multiplier", DEFAULT_VOWEL_MULTIPLIER))
        shared_factor_bonus = float(d.get("shared_factor_bonus", DEFAULT_SHARED_FACTOR_BONUS))

        if not address_file or not driver_file:
            raise ConfigError("address_file et driver_file requis")
        if vowel_multiplier <= 0:
            raise ConfigError(f"vowel_multiplier doit être > 0 (got {vowel_multiplier})")
        if shared_factor_bonus < 1:
            raise ConfigError(f"shared_factor_bonus doit être >= 1 (got {shared_factor_bonus})")
        compile_address_pattern(address_pattern)

        return cls(
            address_file=address_file,
            driver_file=driver_file,
            address_column=d.get("address_column"),
            driver_column=d.get("driver_column"),
            address_sheet=d.get("address_sheet"),
            driver_sheet=d.get("driver_sheet"),
            encoding=d.get("encoding", "utf-8"),
            address_pattern=address_pattern,
            skip_unparsed=bool(d.get("skip_unparsed", False)),
            vowel_multiplier=vowel_multiplier,
            shared_factor_bonus=shared_factor_bonus,
        )

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """
        Charge la configuration depuis un fichier JSON.

        Raises:
            ConfigFileError: Si le fichier est absent ou le JSON invalide.
            ConfigError: Si la configuration est invalide.
        """
        path = Path(path).resolve()
        if not path.exists():
            raise ConfigFileError(f"Fichier de configuration introuvable: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                d = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigFileError(f"JSON invalide dans {path}: {e}") from e
        except OSError as e:
            raise ConfigFileError(f"Impossible de lire {path}: {e}") from e

        if not isinstance(d, dict):
            raise ConfigFileError(f"Fichier de configuration invalide: {path} doit contenir un objet JSON")

        config = cls.from_dict(d)
        config.resolve_paths(path.parent)
        return config

    def resolve_paths(self, base_dir: Path) -> None:
        """
        Résout les chemins relatifs par rapport au répertoire de base (ex. dossier du fichier config).

        Modifie address_file et driver_file en place.
        """
        base = Path(base_dir)
        if self.address_file and not Path(self.address_file).is_absolute():
            self.address_file = str((base / self.address_file).resolve())
        if self.driver_file and not Path(self.driver_file).is_absolute():
            self.driver_file = str((base / self.driver_file).resolve())

    def compiled_pattern(self) -> re.Pattern[str]:
        return compile_address_pattern(self.address_pattern)
