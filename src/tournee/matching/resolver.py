"""Affectation gloutonne des livreurs aux adresses."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tournee.matching.schema import Address, Assignment, Driver, ScoreEntry

logger = logging.getLogger(__name__)


def rank_scores(scores: Sequence[ScoreEntry]) -> list[ScoreEntry]:
    """Trie par score décroissant ; les ex aequo gardent l'ordre d'entrée."""
    return sorted(scores, key=lambda e: e.score, reverse=True)


def resolve(
    scores: Sequence[ScoreEntry],
    addresses: Sequence[Address] | None = None,
    drivers: Sequence[Driver] | None = None,
) -> tuple[list[Assignment], float]:
    """
    Sélectionne des couples uniques en parcourant les scores du plus haut au plus bas.

    Un couple est retenu si ni l'adresse ni le livreur ne sont déjà affectés.
    Le parcours va jusqu'au bout de la liste, sans retour arrière : c'est une
    heuristique, le total peut être inférieur à celui d'un couplage optimal.

    Args:
        scores: Matrice des scores (non modifiée).
        addresses: Si fourni, les adresses retenues passent à assigned=True.
        drivers: Si fourni, les livreurs retenus passent à assigned=True.

    Returns:
        (affectations dans l'ordre de sélection, score total)
    """
    assigned_addresses: set[int] = set()
    assigned_drivers: set[int] = set()
    assignments: list[Assignment] = []
    total = 0.0

    for entry in rank_scores(scores):
        if entry.address_ref in assigned_addresses or entry.driver_ref in assigned_drivers:
            continue

        assigned_addresses.add(entry.address_ref)
        assigned_drivers.add(entry.driver_ref)
        address_name = ""
        driver_name = ""
        if addresses is not None:
            address = addresses[entry.address_ref]
            address.assigned = True
            address_name = address.name
        if drivers is not None:
            driver = drivers[entry.driver_ref]
            driver.assigned = True
            driver_name = driver.name

        assignments.append(
            Assignment(
                address_ref=entry.address_ref,
                driver_ref=entry.driver_ref,
                score=entry.score,
                address_name=address_name,
                driver_name=driver_name,
            )
        )
        total += entry.score
        logger.debug(
            "Affectation %s -> %s : %g",
            driver_name or entry.driver_ref,
            address_name or entry.address_ref,
            entry.score,
        )

    return assignments, total
