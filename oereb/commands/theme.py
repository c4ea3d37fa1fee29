"""Komenda: oereb theme — zawartość tematu: legendy podtematów i dokumenty."""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table

from data_model.common import parse_theme_id
from data_model.documents import DocumentLink
from data_model.legend import SubthemeLegend
from engine.view_model import theme_contents
from oereb._io import add_common_arguments, console, fmt_number, load_extract_or_exit

# Etykiety wierszy udziałów: (pole, etykieta, jednostka)
_SHARE_ROWS: tuple[tuple[str, str, str], ...] = (
    ("nr_of_points", "punkty",      ""),
    ("length_share", "długość",     " m"),
    ("area_share",   "powierzchnia", " m²"),
)

# (atrybut ProvisionDocuments, nagłówek)
_DOCUMENT_LISTS: tuple[tuple[str, str], ...] = (
    ("regulations",         "Przepisy"),
    ("legal_bases",         "Podstawy prawne"),
    ("hints",               "Wskazówki"),
    ("responsible_offices", "Urzędy właściwe"),
)


def _legend_table(legend: SubthemeLegend, title: str | None) -> Table:
    table = Table(
        title=title,
        title_justify="left",
        box=box.SIMPLE_HEAD,
        header_style="bold white",
        show_header=True,
    )
    table.add_column("TYP", max_width=50)
    table.add_column("SYMBOL", style="dim", no_wrap=True)
    table.add_column("UDZIAŁ", justify="right")
    table.add_column("%", justify="right")

    for bucket in legend.buckets:
        rows = [
            (label, getattr(bucket, name), unit)
            for name, label, unit in _SHARE_ROWS
            if getattr(bucket, name) is not None
        ]
        if not rows:
            table.add_row(bucket.legend_text, bucket.symbol_ref, "-", "-")
            continue
        for i, (label, value, unit) in enumerate(rows):
            percent = "-"
            if label != "punkty" and bucket.part_in_percent is not None:
                percent = f"{bucket.part_in_percent:.1f}"
            table.add_row(
                bucket.legend_text if i == 0 else "",
                bucket.symbol_ref if i == 0 else "",
                f"{fmt_number(value)}{unit} ({label})",
                percent,
            )
    return table


def _print_documents(title: str, docs: list[DocumentLink]) -> None:
    if not docs:
        return
    console.print(f"[bold]{title}[/bold]")
    for doc in docs:
        console.print(f"  • {doc.label}  [dim]{doc.link}[/dim]", soft_wrap=True)


def run(args: argparse.Namespace) -> None:
    extract, config = load_extract_or_exit(args)
    code, subcode = parse_theme_id(args.theme)
    contents = theme_contents(extract, code, subcode, config)

    status = f"  [dim]({contents.law_status})[/dim]" if contents.law_status else ""
    console.print(f"\n[bold cyan]{contents.theme.text}[/bold cyan]{status}")

    if not contents.legends:
        console.print("[yellow]Brak ograniczeń dla tematu.[/yellow]")

    for legend in contents.legends:
        title = None
        if contents.show_subtheme_titles() and legend.subtheme:
            title = legend.subtheme
        if legend.is_placeholder:
            console.print(f"[bold]{legend.subtheme}[/bold]  [dim]brak wpisów[/dim]")
            continue
        console.print(_legend_table(legend, title))
        if legend.full_legend:
            console.print(f"  Pełna legenda: [dim]{legend.full_legend}[/dim]", soft_wrap=True)

    console.print()
    for attr, title in _DOCUMENT_LISTS:
        _print_documents(title, getattr(contents.documents, attr))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "theme",
        help="Pokazuje legendę i dokumenty jednego tematu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Rozwija temat: legendy podtematów (sumy udziałów per symbol) oraz listy
przepisów, podstaw prawnych, wskazówek i urzędów właściwych.
Temat podaje się jako CODE lub CODE:SUBCODE.

Przykłady:
  oereb theme wyciag.xml ch.Nutzungsplanung
  oereb theme wyciag.json ch.SO.Einzelschutz:ch.SO.Denkmalschutz --config oereb.json
        """,
    )
    add_common_arguments(p)
    p.add_argument(
        "theme",
        metavar="TEMAT",
        help="Identyfikator tematu CODE[:SUBCODE].",
    )
    p.set_defaults(func=run)
