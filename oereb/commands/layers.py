"""Komenda: oereb layers — warstwy WMS syntetyzowane przy rozwinięciu tematu."""

from __future__ import annotations

import argparse
import json

from rich import box
from rich.table import Table

from data_model.common import parse_theme_id
from engine.registry import InMemoryLayerRegistry
from engine.session import ExtractSession
from oereb._io import add_common_arguments, console, load_extract_or_exit


def run(args: argparse.Namespace) -> None:
    extract, config = load_extract_or_exit(args)
    code, subcode = parse_theme_id(args.theme)

    registry = InMemoryLayerRegistry()
    session = ExtractSession(extract, config, registry)
    layers = session.toggle_theme(code, subcode)

    if args.json:
        print(json.dumps([layer.as_layer_dict() for layer in layers], ensure_ascii=False, indent=2))
        return

    if not layers:
        console.print(f"[yellow]Brak warstw dla tematu {args.theme}.[/yellow]")
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("PODTEMAT")
    table.add_column("URL", style="dim", no_wrap=True)
    table.add_column("LAYERS", no_wrap=True)
    table.add_column("WERSJA", no_wrap=True)
    table.add_column("FORMAT", no_wrap=True)
    table.add_column("KRYCIE", justify="right")
    for layer in layers:
        table.add_row(
            layer.id,
            layer.subtheme or "-",
            layer.url,
            layer.params.get("LAYERS", ""),
            layer.version or "-",
            layer.format or "-",
            str(layer.opacity),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(layers)} warstw[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "layers",
        help="Listuje warstwy WMS tematu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Rozwija temat w sesji z rejestrem warstw w pamięci i wypisuje warstwy
nakładki (jedna na podtemat) zbudowane z Map.ReferenceWMS.

Przykłady:
  oereb layers wyciag.xml ch.Nutzungsplanung
  oereb layers wyciag.json ch.Nutzungsplanung --json
        """,
    )
    add_common_arguments(p)
    p.add_argument(
        "theme",
        metavar="TEMAT",
        help="Identyfikator tematu CODE[:SUBCODE].",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Wypisz deskryptory warstw jako JSON.",
    )
    p.set_defaults(func=run)
