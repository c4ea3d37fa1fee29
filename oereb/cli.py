"""
oereb — narzędzie CLI dla wyciągów ÖREB (ograniczenia prawa publicznego
dotyczące własności nieruchomości).

Użycie:
  oereb [--verbose] <komenda> [opcje]

Komendy:
  sections   Sekcje wyciągu i ich liczności.
  themes     Tematy dotknięte / niedotknięte / bez danych.
  theme      Legenda i dokumenty jednego tematu.
  layers     Warstwy WMS zbudowane dla tematu.
  info       Informacje ogólne wyciągu.
  convert    Wyciąg JSON/XML → znormalizowany JSON.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie i
# niemieckie znaki w tekstach wyciągu były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from oereb import __version__
from oereb._io import setup_logging
from oereb.commands import convert as cmd_convert
from oereb.commands import info as cmd_info
from oereb.commands import layers as cmd_layers
from oereb.commands import sections as cmd_sections
from oereb.commands import theme as cmd_theme
from oereb.commands import themes as cmd_themes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oereb",
        description="Przeglądarka wyciągów ÖREB — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"oereb {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logi diagnostyczne (DEBUG) na stderr.",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_sections.add_parser(subparsers)
    cmd_themes.add_parser(subparsers)
    cmd_theme.add_parser(subparsers)
    cmd_layers.add_parser(subparsers)
    cmd_info.add_parser(subparsers)
    cmd_convert.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
