"""Génération du rapport et onglet REPORT."""

from __future__ import annotations

from datetime import datetime

import pandas as pd

from tournee import __version__
from tournee.config import Config
from tournee.matching.schema import DispatchResult


def build_assignments_df(result: DispatchResult) -> pd.DataFrame:
    """Une ligne par affectation, dans l'ordre de sélection."""
    rows = [
        {
            "driver": a.driver_name,
            "address": a.address_name,
            "score": a.score,
        }
        for a in result.assignments
    ]
    return pd.DataFrame(rows, columns=["driver", "address", "score"])


def build_report_df(
    result: DispatchResult,
    config: Config,
) -> pd.DataFrame:
    """
    Construit le DataFrame pour l'onglet REPORT.

    Contient : nb adresses, nb livreurs, nb affectations, restes non affectés,
    score total, paramètres, horodatage, version.
    """
    n_assigned = len(result.assignments)
    n_addresses = n_assigned + len(result.unassigned_addresses)
    n_drivers = n_assigned + len(result.unassigned_drivers)

    rows = [
        ("Metric", "Value"),
        ("nb_addresses", n_addresses),
        ("nb_drivers", n_drivers),
        ("nb_assignments", n_assigned),
        ("nb_unassigned_addresses", len(result.unassigned_addresses)),
        ("nb_unassigned_drivers", len(result.unassigned_drivers)),
        ("total_score", result.total_score),
        ("", ""),
        ("Parameters", ""),
        ("vowel_multiplier", config.vowel_multiplier),
        ("shared_factor_bonus", config.shared_factor_bonus),
        ("address_pattern", config.address_pattern),
        ("skip_unparsed", config.skip_unparsed),
        ("", ""),
        ("timestamp", datetime.now().isoformat()),
        ("version", __version__),
    ]
    return pd.DataFrame(rows, columns=["Key", "Value"])


def build_assignments_csv(
    result: DispatchResult,
    output_path: str,
) -> None:
    """Génère un CSV driver, address, score."""
    df = build_assignments_df(result)
    df.to_csv(output_path, index=False, encoding="utf-8")


def print_report_console(result: DispatchResult) -> None:
    """Affiche les affectations et le score total en console."""
    for a in result.assignments:
        print(f"Affectation {a.driver_name} → {a.address_name} : {a.score:g}")

    print("\n=== Tournée Report ===")
    print(f"  Affectations:         {len(result.assignments)}")
    print(f"  Adresses restantes:   {len(result.unassigned_addresses)}")
    print(f"  Livreurs restants:    {len(result.unassigned_drivers)}")
    print(f"  Score total : {result.total_score:g}")
    print("======================\n")
