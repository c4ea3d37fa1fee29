"""Komenda: oereb info — informacje ogólne wyciągu."""

from __future__ import annotations

import argparse

from data_model.extract import TextBlock
from engine.view_model import general_information
from oereb._io import add_common_arguments, console, load_extract_or_exit


def _print_blocks(title: str, blocks: list[TextBlock]) -> None:
    if not blocks:
        return
    console.print(f"\n[bold]{title}[/bold]")
    for block in blocks:
        console.print(f"  [cyan]{block.title}[/cyan]")
        console.print(f"  {block.content}", soft_wrap=True)


def run(args: argparse.Namespace) -> None:
    extract, config = load_extract_or_exit(args)
    info = general_information(extract, config)

    authority = info.authority
    if not authority.is_empty():
        console.print("[bold]Organ wydający[/bold]")
        console.print(f"  {authority.name}")
        address = f"{authority.street} {authority.number}".strip()
        if address:
            console.print(f"  {address}")
        city = f"{authority.postal_code} {authority.city}".strip()
        if city:
            console.print(f"  {city}")
        if authority.office_at_web:
            console.print(f"  [dim]{authority.office_at_web}[/dim]", soft_wrap=True)

    if info.cantonal_logo_ref:
        console.print(f"Herb: [dim]{info.cantonal_logo_ref}[/dim]", soft_wrap=True)
    if info.update_date is not None:
        console.print(f"Stan danych: {info.update_date.isoformat()}")
    if info.base_data:
        console.print(f"\n[bold]Dane bazowe[/bold]\n  {info.base_data}", soft_wrap=True)
    if info.general_information:
        console.print(f"\n[bold]Informacje ogólne[/bold]\n  {info.general_information}", soft_wrap=True)

    _print_blocks("Wyłączenia odpowiedzialności", info.exclusions_of_liability)
    _print_blocks("Zastrzeżenia", info.disclaimers)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "info",
        help="Pokazuje informacje ogólne wyciągu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wypisuje organ wydający, stan danych, dane bazowe, informacje ogólne,
wyłączenia odpowiedzialności i zastrzeżenia.

Przykłady:
  oereb info wyciag.xml
  oereb info wyciag.json --lang it
        """,
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
