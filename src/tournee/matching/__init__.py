"""Module de scoring et d'affectation."""

from tournee.matching.dispatcher import Dispatcher
from tournee.matching.resolver import resolve
from tournee.matching.schema import Address, Assignment, DispatchResult, Driver, ScoreEntry
from tournee.matching.scorers import build_scores

__all__ = [
    "Address",
    "Assignment",
    "DispatchResult",
    "Dispatcher",
    "Driver",
    "ScoreEntry",
    "build_scores",
    "resolve",
]
