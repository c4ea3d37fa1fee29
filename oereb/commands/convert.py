"""Komenda: oereb convert — normalizuje wyciąg (JSON lub XML) do postaci JSON."""

from __future__ import annotations

import argparse
import json
import pathlib
import sys

from data_model.errors import OerebError
from normalizer import normalize_document, read_source
from oereb._io import console


def run(args: argparse.Namespace) -> None:
    try:
        document = normalize_document(read_source(args.file))
    except OSError as e:
        console.print(f"[red]Nie można odczytać pliku:[/red] {e}")
        raise SystemExit(1)
    except OerebError as e:
        console.print(f"[red]Błąd parsowania:[/red] {e}")
        raise SystemExit(1)

    raw = json.dumps(document, ensure_ascii=False, indent=2)
    if args.out:
        out_path = pathlib.Path(args.out)
        out_path.write_text(raw, encoding="utf-8")
        print(f"Wynik zapisany do: {out_path}", file=sys.stderr)
    else:
        print(raw)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "convert",
        help="Zapisuje znormalizowany wyciąg jako JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje wyciąg w dowolnym kodowaniu (JSON lub XML) i wypisuje drzewo
po normalizacji: bez prefiksów przestrzeni nazw, z kluczem 'extract'.

Przykłady:
  oereb convert wyciag.xml
  oereb convert wyciag.xml --out wyciag.json
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Wyciąg ÖREB: plik JSON lub XML.",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        default=None,
        help="Zapisz wynik JSON do pliku (domyślnie: stdout).",
    )
    p.set_defaults(func=run)
