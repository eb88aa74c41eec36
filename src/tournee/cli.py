"""Interface en ligne de commande Tournée."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tournee import __version__
from tournee.config import Config, ConfigError, TourneeError
from tournee.io_files import load_inputs, save_xlsx
from tournee.matching.dispatcher import Dispatcher
from tournee.primes import PrimeCache, factors_of
from tournee.report import (
    build_assignments_csv,
    build_assignments_df,
    build_report_df,
    print_report_console,
)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool) -> None:
    """Journalisation DEBUG sur stderr avec --verbose ; sinon seuls les avertissements sortent."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )


def _build_config(
    config_path: str | None,
    address_file: str | None,
    driver_file: str | None,
) -> Config:
    """Config du fichier JSON, surchargée par les chemins passés en ligne de commande."""
    if config_path:
        config = Config.load(config_path)
    else:
        config = Config()
    if address_file:
        config.address_file = str(Path(address_file).resolve())
    if driver_file:
        config.driver_file = str(Path(driver_file).resolve())
    if not config.address_file or not config.driver_file:
        raise ConfigError("address_file et driver_file requis (--config ou --addresses/--drivers)")
    return config


def cmd_run(
    config_path: str | None,
    output_path: str | None,
    *,
    address_file: str | None = None,
    driver_file: str | None = None,
    mapping_path: str | None = None,
) -> int:
    """Exécute le pipeline Tournée."""
    config = _build_config(config_path, address_file, driver_file)
    address_lines, driver_lines = load_inputs(config)

    dispatcher = Dispatcher(config)
    _, _, result = dispatcher.run_lines(address_lines, driver_lines)

    print_report_console(result)

    if mapping_path:
        build_assignments_csv(result, mapping_path)
        print(f"Affectations écrites: {mapping_path}")

    if output_path:
        sheets = {
            "Assignments": build_assignments_df(result),
            "REPORT": build_report_df(result, config),
        }
        save_xlsx(output_path, sheets)
        print(f"Fichier de sortie: {output_path}")

    return 0


def cmd_factors(numbers: list[int]) -> int:
    """Affiche les facteurs premiers distincts de chaque nombre."""
    cache = PrimeCache()
    for n in numbers:
        factors = sorted(factors_of(n, cache))
        print(f"{n}: {', '.join(str(f) for f in factors) if factors else '-'}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="tournee",
        description="Affectation gloutonne de livreurs à des adresses",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Journalisation détaillée")

    subparsers = parser.add_subparsers(dest="command", help="Commandes")

    # run
    p_run = subparsers.add_parser("run", help="Calculer les affectations")
    p_run.add_argument("--config", "-c", help="Fichier config JSON")
    p_run.add_argument("--addresses", "-a", help="Fichier des adresses (txt, csv, xlsx)")
    p_run.add_argument("--drivers", "-d", help="Fichier des livreurs (txt, csv, xlsx)")
    p_run.add_argument("--output", "-o", help="Fichier xlsx de sortie")
    p_run.add_argument("--mapping", "-m", help="Chemin pour le CSV des affectations")

    # factors
    p_factors = subparsers.add_parser("factors", help="Facteurs premiers distincts")
    p_factors.add_argument("numbers", nargs="+", type=int, help="Entiers >= 1")

    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        if args.command == "run":
            return cmd_run(
                args.config,
                args.output,
                address_file=args.addresses,
                driver_file=args.drivers,
                mapping_path=args.mapping,
            )
        if args.command == "factors":
            return cmd_factors(args.numbers)
    except TourneeError as e:
        print(f"Erreur: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
