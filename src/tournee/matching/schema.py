"""Schémas et types pour l'affectation."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Address:
    """Une adresse de livraison (nom de rue seul)."""

    name: str
    assigned: bool = False

    @property
    def length(self) -> int:
        return len(self.name)


@dataclass
class Driver:
    """Un livreur ; les compteurs et facteurs sont calculés à la création."""

    name: str
    vowel_count: int
    consonant_count: int
    length_factors: frozenset[int] = field(default_factory=frozenset)
    assigned: bool = False


@dataclass(frozen=True)
class ScoreEntry:
    """Score d'un couple (adresse, livreur), références par indice."""

    score: float
    address_ref: int
    driver_ref: int

    def __repr__(self) -> str:
        return f"ScoreEntry(address={self.address_ref}, driver={self.driver_ref}, score={self.score:g})"


@dataclass(frozen=True)
class Assignment:
    """Un couple retenu par le résolveur."""

    address_ref: int
    driver_ref: int
    score: float
    address_name: str = ""
    driver_name: str = ""


@dataclass
class DispatchResult:
    """Résultat complet d'une tournée."""

    assignments: list[Assignment]
    total_score: float
    unassigned_addresses: list[int] = field(default_factory=list)
    unassigned_drivers: list[int] = field(default_factory=list)
