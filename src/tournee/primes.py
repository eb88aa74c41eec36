"""
Facteurs premiers et primalité avec mémoïsation.

Tout nombre premier supérieur à 3 s'écrit 6k - 1 ou 6k + 1. Cette condition
est nécessaire mais pas suffisante : chaque candidat de cette forme est donc
validé (une seule fois) avant d'être utilisé comme facteur. Les nombres
premiers confirmés sont conservés dans un PrimeCache, créé une fois par
exécution et passé explicitement aux fonctions.
"""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from tournee.config import TourneeError

logger = logging.getLogger(__name__)

# Le crible 6k ± 1 ne peut pas valider 2 et 3 lui-même
SEED_PRIMES = frozenset({2, 3})


class InvalidArgumentError(TourneeError, ValueError):
    """Argument hors du domaine de l'oracle (entier < 1)."""


@dataclass
class PrimeCache:
    """
    Connaissances mémoïsées sur les nombres premiers.

    known: nombres premiers confirmés (ne fait que croître).
    watermark: plus grande valeur dont la primalité est établie ; tout
        candidat 6k ± 1 inférieur ou égal a déjà été validé.
    """

    known: set[int] = field(default_factory=lambda: set(SEED_PRIMES))
    watermark: int = max(SEED_PRIMES)

    def __contains__(self, value: object) -> bool:
        return value in self.known

    def confirm(self, prime: int) -> None:
        """Enregistre un nombre premier et remonte le watermark jusqu'à lui."""
        self.known.add(prime)
        if prime > self.watermark:
            self.watermark = prime
        logger.debug("Nombre premier confirmé: %d", prime)

    def reset(self) -> None:
        """Revient à l'état initial (2 et 3 seulement)."""
        self.known = set(SEED_PRIMES)
        self.watermark = max(SEED_PRIMES)


def _require_positive(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"entier attendu (got {n!r})")
    if n < 1:
        raise InvalidArgumentError(f"n doit être >= 1 (got {n})")


def _wheel(start: int = 1) -> Iterator[tuple[int, int]]:
    """Paires de candidats (6k - 1, 6k + 1) pour k = start, start + 1, ..."""
    for k in itertools.count(max(start, 1)):
        pivot = 6 * k
        yield pivot - 1, pivot + 1


def is_prime(candidate: int, cache: PrimeCache) -> bool:
    """
    Indique si candidate est premier.

    Parcourt les candidats 6k ± 1 strictement inférieurs à candidate : ceux
    au-delà du watermark sont d'abord validés récursivement, et seul un
    candidat confirmé (présent dans cache) compte comme diviseur.

    Raises:
        InvalidArgumentError: Si candidate < 1.
    """
    _require_positive(candidate)
    if candidate == 1:
        return False
    if candidate in cache:
        return True
    if candidate % 2 == 0 or candidate % 3 == 0:
        return False
    if candidate <= cache.watermark:
        return False

    # Recherche d'un diviseur premier <= racine de candidate
    limit = math.isqrt(candidate)
    for low, high in _wheel():
        if low > limit:
            break
        for value in (low, high):
            if value > limit:
                break
            if value > cache.watermark:
                is_prime(value, cache)
            if candidate % value == 0 and value in cache:
                return False

    # Les candidats restants sous candidate doivent être établis avant de
    # remonter le watermark jusqu'à candidate
    for low, high in _wheel(cache.watermark // 6):
        if low >= candidate:
            break
        for value in (low, high):
            if cache.watermark < value < candidate:
                is_prime(value, cache)

    cache.confirm(candidate)
    return True


def factors_of(n: int, cache: PrimeCache) -> set[int]:
    """
    Facteurs premiers distincts de n.

    Chaque facteur n'apparaît qu'une fois : le produit de l'ensemble ne
    reconstruit pas n si un facteur est répété (12 -> {2, 3}).

    Args:
        n: Entier >= 1 (1 n'a aucun facteur premier).
        cache: Nombres premiers déjà connus, enrichi au passage.

    Returns:
        Ensemble des facteurs premiers de n.

    Raises:
        InvalidArgumentError: Si n < 1.
    """
    _require_positive(n)
    factors: set[int] = set()
    if n == 1:
        return factors

    if n % 2 == 0:
        factors.add(2)
    if n % 3 == 0:
        factors.add(3)

    if n > 4:
        for low, high in _wheel():
            for value in (low, high):
                if value > cache.watermark:
                    is_prime(value, cache)
                # Un candidat non confirmé n'est jamais retenu, même s'il divise n
                if n % value == 0 and value in cache:
                    factors.add(value)
            if high >= n:
                break

    return factors
