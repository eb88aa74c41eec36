"""Moteur de tournée : scores, résolution gloutonne, restes non affectés."""

from __future__ import annotations

from collections.abc import Sequence

from tournee.config import Config
from tournee.matching.parsing import parse_addresses, parse_drivers
from tournee.matching.resolver import resolve
from tournee.matching.schema import Address, DispatchResult, Driver
from tournee.matching.scorers import build_scores
from tournee.primes import PrimeCache


class Dispatcher:
    """Affecte les livreurs aux adresses selon la configuration."""

    def __init__(self, config: Config, cache: PrimeCache | None = None) -> None:
        self.config = config
        self.cache = cache if cache is not None else PrimeCache()
        self.vowel_multiplier = config.vowel_multiplier
        self.shared_factor_bonus = config.shared_factor_bonus

    def run(
        self,
        addresses: Sequence[Address],
        drivers: Sequence[Driver],
    ) -> DispatchResult:
        """
        Exécute la tournée complète.

        Les adresses et livreurs retenus passent à assigned=True.

        Returns:
            DispatchResult avec les affectations dans l'ordre de sélection.
        """
        scores = build_scores(
            addresses,
            drivers,
            self.cache,
            vowel_multiplier=self.vowel_multiplier,
            shared_factor_bonus=self.shared_factor_bonus,
        )
        assignments, total = resolve(scores, addresses, drivers)

        used_addresses = {a.address_ref for a in assignments}
        used_drivers = {a.driver_ref for a in assignments}
        return DispatchResult(
            assignments=assignments,
            total_score=total,
            unassigned_addresses=[i for i in range(len(addresses)) if i not in used_addresses],
            unassigned_drivers=[i for i in range(len(drivers)) if i not in used_drivers],
        )

    def run_lines(
        self,
        address_lines: Sequence[str],
        driver_lines: Sequence[str],
    ) -> tuple[list[Address], list[Driver], DispatchResult]:
        """Analyse les lignes brutes puis exécute la tournée."""
        addresses = parse_addresses(
            address_lines,
            self.config.compiled_pattern(),
            skip_unparsed=self.config.skip_unparsed,
        )
        drivers = parse_drivers(driver_lines, self.cache)
        return addresses, drivers, self.run(addresses, drivers)
