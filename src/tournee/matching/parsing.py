"""Construction des adresses et livreurs à partir des lignes lues."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from tournee.config import DEFAULT_ADDRESS_PATTERN, TourneeError, compile_address_pattern
from tournee.matching.schema import Address, Driver
from tournee.matching.scorers import length_factors
from tournee.normalize import clean_line, count_consonants, count_vowels, extract_street_name
from tournee.primes import PrimeCache

logger = logging.getLogger(__name__)


class ParseError(TourneeError, ValueError):
    """Ligne d'adresse non conforme au motif attendu."""


def parse_addresses(
    lines: Iterable[str],
    pattern: re.Pattern[str] | str = DEFAULT_ADDRESS_PATTERN,
    *,
    skip_unparsed: bool = False,
) -> list[Address]:
    """
    Extrait une adresse (nom de rue) par ligne non vide.

    Args:
        lines: Lignes du document d'adresses.
        pattern: Motif d'extraction (compilé ou texte).
        skip_unparsed: Ignorer (avec avertissement) les lignes non conformes
            au lieu de lever ParseError.

    Raises:
        ParseError: Ligne non conforme et skip_unparsed=False.
    """
    if isinstance(pattern, str):
        pattern = compile_address_pattern(pattern)

    addresses: list[Address] = []
    for line_no, raw in enumerate(lines, start=1):
        line = clean_line(raw)
        if not line:
            continue
        street = extract_street_name(line, pattern)
        if street is None:
            if skip_unparsed:
                logger.warning("Ligne %d ignorée (adresse non reconnue): %r", line_no, line)
                continue
            raise ParseError(f"Ligne {line_no}: adresse non reconnue: {line!r}")
        addresses.append(Address(name=street))
    return addresses


def parse_drivers(lines: Iterable[str], cache: PrimeCache | None = None) -> list[Driver]:
    """Un livreur par ligne non vide ; le nom complet est la ligne nettoyée."""
    if cache is None:
        cache = PrimeCache()

    drivers: list[Driver] = []
    for raw in lines:
        name = clean_line(raw)
        if not name:
            continue
        drivers.append(
            Driver(
                name=name,
                vowel_count=count_vowels(name),
                consonant_count=count_consonants(name),
                length_factors=length_factors(len(name), cache),
            )
        )
    return drivers
