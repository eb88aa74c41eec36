"""Calcul des scores de compatibilité adresse / livreur."""

from __future__ import annotations

from collections.abc import Sequence

from tournee.config import DEFAULT_SHARED_FACTOR_BONUS, DEFAULT_VOWEL_MULTIPLIER
from tournee.matching.schema import Address, Driver, ScoreEntry
from tournee.primes import PrimeCache, factors_of


def length_factors(length: int, cache: PrimeCache) -> frozenset[int]:
    """Facteurs premiers d'une longueur de nom ; une longueur nulle n'en a aucun."""
    if length < 1:
        return frozenset()
    return frozenset(factors_of(length, cache))


def score_pair(
    address_factors: frozenset[int],
    address_even: bool,
    driver: Driver,
    *,
    vowel_multiplier: float = DEFAULT_VOWEL_MULTIPLIER,
    shared_factor_bonus: float = DEFAULT_SHARED_FACTOR_BONUS,
) -> float:
    """
    Calcule le score d'un couple.

    La parité de la longueur de l'adresse choisit la base : voyelles du
    livreur x vowel_multiplier si paire, consonnes sinon. Un facteur premier
    commun aux deux longueurs multiplie la base une seule fois par
    shared_factor_bonus, quel que soit le nombre de facteurs partagés.

    Returns:
        Score >= 0.
    """
    if address_even:
        score = driver.vowel_count * vowel_multiplier
    else:
        score = float(driver.consonant_count)
    if not address_factors.isdisjoint(driver.length_factors):
        score = score * shared_factor_bonus
    return score


def build_scores(
    addresses: Sequence[Address],
    drivers: Sequence[Driver],
    cache: PrimeCache | None = None,
    *,
    vowel_multiplier: float = DEFAULT_VOWEL_MULTIPLIER,
    shared_factor_bonus: float = DEFAULT_SHARED_FACTOR_BONUS,
) -> list[ScoreEntry]:
    """
    Construit la matrice dense des scores, adresse par adresse puis livreur par livreur.

    Args:
        addresses: Adresses analysées.
        drivers: Livreurs analysés (length_factors déjà calculés).
        cache: Cache de nombres premiers partagé (nouveau si None).

    Returns:
        Liste de ScoreEntry, len(addresses) * len(drivers) éléments.
    """
    if cache is None:
        cache = PrimeCache()

    scores: list[ScoreEntry] = []
    for a_idx, address in enumerate(addresses):
        a_factors = length_factors(address.length, cache)
        even = address.length % 2 == 0
        for d_idx, driver in enumerate(drivers):
            score = score_pair(
                a_factors,
                even,
                driver,
                vowel_multiplier=vowel_multiplier,
                shared_factor_bonus=shared_factor_bonus,
            )
            scores.append(ScoreEntry(score=score, address_ref=a_idx, driver_ref=d_idx))
    return scores
