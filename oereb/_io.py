"""Wspólne wczytywanie wyciągu i konfiguracji dla komend CLI + konfiguracja logowania."""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler

from data_model.errors import OerebError
from data_model.extract import Extract
from engine.config import ExtractConfig, load_config
from normalizer import load_document, read_source

console = Console(width=200)


def setup_logging(verbose: bool) -> None:
    """Logi bibliotek → RichHandler na stderr (DEBUG z --verbose, inaczej WARNING)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=verbose)],
        force=True,
    )


def add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Wyciąg ÖREB: plik JSON lub XML.",
    )
    p.add_argument(
        "--config", "-c",
        metavar="PLIK",
        default=None,
        help="Plik konfiguracji JSON (domyślnie: $OEREB_CONFIG lub brak).",
    )
    p.add_argument(
        "--lang", "-l",
        metavar="JĘZYK",
        default=None,
        help="Język wyświetlania (domyślnie: $OEREB_LANG, konfiguracja lub 'de').",
    )


def load_config_or_exit(args: argparse.Namespace) -> ExtractConfig:
    try:
        return load_config(args.config, args.lang)
    except OerebError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)


def load_extract_or_exit(args: argparse.Namespace) -> tuple[Extract, ExtractConfig]:
    """Wczytuje konfigurację i wyciąg; przy błędzie komunikat i exit 1."""
    config = load_config_or_exit(args)
    try:
        extract = load_document(read_source(args.file), config.language)
    except OSError as e:
        console.print(f"[red]Nie można odczytać pliku:[/red] {e}")
        raise SystemExit(1)
    except OerebError as e:
        console.print(f"[red]Błąd parsowania:[/red] {e}")
        raise SystemExit(1)
    return extract, config


def fmt_number(value: float | None) -> str:
    """12.0 → '12', 12.345 → '12.35', None → '-'."""
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"
