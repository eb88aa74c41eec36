"""I/O : lecture des listes d'adresses et de livreurs, sauvegarde xlsx."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from tournee.config import Config, TourneeError

SUPPORTED_TABLE_EXTENSIONS = (".csv", ".xlsx")


class InputFileError(TourneeError):
    """Erreur de chargement d'un fichier (fichier absent, colonne ou feuille inexistante)."""


def _read_table(path: Path, sheet: str | None, encoding: str) -> pd.DataFrame:
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            return pd.read_csv(path, dtype=str, encoding=encoding, keep_default_na=False)
        xl = pd.ExcelFile(path, engine="openpyxl")
        try:
            if sheet is None:
                sheet = xl.sheet_names[0]  # type: ignore[assignment]
            elif sheet not in xl.sheet_names:
                raise InputFileError(f"Feuille '{sheet}' introuvable dans {path}. Feuilles: {xl.sheet_names}")
            return pd.read_excel(xl, sheet_name=sheet, dtype=str, keep_default_na=False)
        finally:
            xl.close()
    except InputFileError:
        raise
    except Exception as e:
        raise InputFileError(f"Impossible de lire {path}: {e}") from e


def load_names(
    filepath: str | Path,
    *,
    column: str | None = None,
    sheet: str | None = None,
    encoding: str = "utf-8",
) -> list[str]:
    """
    Charge une liste de lignes (une adresse ou un livreur par ligne).

    Fichier texte : une entrée par ligne. CSV / xlsx : une entrée par ligne de
    la colonne choisie (première colonne si column est None), cellules vides
    ignorées.

    Raises:
        InputFileError: Fichier absent, illisible, colonne ou feuille inexistante.
    """
    path = Path(filepath)
    if not path.exists():
        raise InputFileError(f"Fichier introuvable: {path}")

    if path.suffix.lower() not in SUPPORTED_TABLE_EXTENSIONS:
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputFileError(f"Impossible de lire {path}: {e}") from e
        return text.splitlines()

    df = _read_table(path, sheet, encoding)
    if df.columns.empty:
        return []
    if column is None:
        column = df.columns[0]
    elif column not in df.columns:
        raise InputFileError(f"Colonne '{column}' introuvable dans {path}. Colonnes: {list(df.columns)}")
    return [str(v) for v in df[column].tolist() if str(v).strip()]


def load_inputs(config: Config) -> tuple[list[str], list[str]]:
    """
    Charge les lignes d'adresses et de livreurs selon la configuration.

    Returns:
        (address_lines, driver_lines)
    """
    address_lines = load_names(
        config.address_file,
        column=config.address_column,
        sheet=config.address_sheet,
        encoding=config.encoding,
    )
    driver_lines = load_names(
        config.driver_file,
        column=config.driver_column,
        sheet=config.driver_sheet,
        encoding=config.encoding,
    )
    return address_lines, driver_lines


def save_xlsx(
    filepath: str | Path,
    dataframes: dict[str, pd.DataFrame],
    *,
    index: bool = False,
) -> None:
    """
    Sauvegarde plusieurs DataFrames dans un fichier xlsx (une feuille par DataFrame).

    Args:
        filepath: Chemin de sortie.
        dataframes: Dict {nom_feuille: DataFrame}.
    """
    with pd.ExcelWriter(filepath, engine="openpyxl") as writer:
        for sheet_name, df in dataframes.items():
            # Nettoyer le nom de feuille (Excel limite à 31 caractères)
            safe_name = str(sheet_name)[:31]
            df.to_excel(writer, sheet_name=safe_name, index=index)
