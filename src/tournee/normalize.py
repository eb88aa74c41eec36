"""Extraction du nom de rue et comptage des lettres."""

from __future__ import annotations

import re

VOWEL_RE = re.compile(r"[aeiou]", re.IGNORECASE)
# "y" est compté comme consonne
CONSONANT_RE = re.compile(r"[bcdfghjklmnpqrstvwxyz]", re.IGNORECASE)


def clean_line(line: str | None) -> str:
    """Retire fin de ligne et espaces de bord ; None devient une chaîne vide."""
    if line is None:
        return ""
    return str(line).strip()


def extract_street_name(line: str, pattern: re.Pattern[str]) -> str | None:
    """
    Extrait le nom de rue d'une ligne d'adresse formatée.

    Avec le motif par défaut, "123 Elm Street, Springfield" donne "Elm".

    Args:
        line: Ligne d'adresse complète.
        pattern: Motif compilé ; le premier groupe de capture est le nom de rue.

    Returns:
        Nom de rue, ou None si la ligne ne correspond pas au motif.
    """
    m = pattern.match(clean_line(line))
    if m is None:
        return None
    street = (m.group(1) or "").strip()
    return street or None


def count_vowels(name: str) -> int:
    """Nombre de voyelles (a, e, i, o, u) sans tenir compte de la casse."""
    return len(VOWEL_RE.findall(name))


def count_consonants(name: str) -> int:
    """Nombre de consonnes ASCII ; chiffres, espaces et ponctuation ne comptent pas."""
    return len(CONSONANT_RE.findall(name))
