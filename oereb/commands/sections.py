"""Komenda: oereb sections — przegląd sekcji wyciągu z licznościami."""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table

from engine.view_model import build_view_model
from oereb._io import add_common_arguments, console, load_extract_or_exit

# Tytuły sekcji w terminalu
SECTION_TITLES: dict[str, str] = {
    "concernedThemes":    "Tematy dotknięte",
    "notConcernedThemes": "Tematy niedotknięte",
    "themeWithoutData":   "Tematy bez danych",
    "generalInformation": "Informacje ogólne",
}


def run(args: argparse.Namespace) -> None:
    extract, config = load_extract_or_exit(args)
    view = build_view_model(extract, config)

    if not view.sections:
        console.print("[yellow]Wyciąg nie zawiera żadnej sekcji.[/yellow]")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("SEKCJA", style="cyan", no_wrap=True)
    table.add_column("NAZWA", style="dim", no_wrap=True)
    table.add_column("LICZBA", justify="right")
    for section in view.sections:
        table.add_row(SECTION_TITLES.get(section.name, section.name), section.name, str(section.count))

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "sections",
        help="Wyświetla sekcje wyciągu i ich liczności.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla sekcje najwyższego poziomu (tematy dotknięte, niedotknięte,
bez danych, informacje ogólne). Sekcje puste są pomijane.

Przykłady:
  oereb sections wyciag.xml
  oereb sections wyciag.json --lang fr
        """,
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
