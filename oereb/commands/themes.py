"""Komenda: oereb themes — lista tematów wyciągu (dotknięte / niedotknięte / bez danych)."""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table

from data_model.view import SectionName
from engine.view_model import build_view_model, section_contents
from oereb._io import add_common_arguments, console, load_extract_or_exit
from oereb.commands.sections import SECTION_TITLES

# Kolory per sekcja
SECTION_STYLE: dict[str, str] = {
    SectionName.CONCERNED_THEMES:     "green",
    SectionName.NOT_CONCERNED_THEMES: "dim white",
    SectionName.THEMES_WITHOUT_DATA:  "yellow",
}


def run(args: argparse.Namespace) -> None:
    extract, config = load_extract_or_exit(args)
    view = build_view_model(extract, config)

    names = [SectionName.CONCERNED_THEMES] if args.concerned else list(SECTION_STYLE)
    shown = 0

    for name in names:
        items = section_contents(view, name)
        if not items:
            continue
        shown += len(items)
        table = Table(
            title=f"{SECTION_TITLES[name]} ({len(items)})",
            title_justify="left",
            box=box.SIMPLE_HEAD,
            header_style="bold white",
            show_header=True,
        )
        table.add_column("TEMAT", style=SECTION_STYLE[name], no_wrap=True)
        table.add_column("TEKST", max_width=60)
        if name == SectionName.CONCERNED_THEMES:
            table.add_column("STATUS", style="dim")
        for item in items:
            row = [item.theme.theme_id, item.theme.text]
            if name == SectionName.CONCERNED_THEMES:
                row.append(item.law_status or "-")
            table.add_row(*row)
        console.print(table)

    if not shown:
        console.print("[yellow]Brak tematów.[/yellow]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "themes",
        help="Listuje tematy wyciągu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje tematy z sekcji: dotknięte (z statusem prawnym), niedotknięte,
bez danych. Identyfikator tematu ma postać CODE:SUBCODE.

Przykłady:
  oereb themes wyciag.xml
  oereb themes wyciag.json --concerned
        """,
    )
    add_common_arguments(p)
    p.add_argument(
        "--concerned",
        action="store_true",
        help="Tylko tematy dotknięte.",
    )
    p.set_defaults(func=run)
