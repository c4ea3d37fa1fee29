"""
normalizer/document.py — sprowadzenie dwóch kodowań wyciągu do jednego kształtu.

Wejście to unia rozróżnialna rozstrzygana tylko tutaj:
  StructuredDocument — gotowy obiekt (JSON) → przepuszczany bez zmian
  MarkupDocument     — tekst XML → xml_parser + mostek wielkości liter

W XML węzeł wyciągu nazywa się "Extract", w JSON "extract"; po parsowaniu
XML kopiujemy "Extract" na "extract", którego oczekuje reszta silnika.
"""

from __future__ import annotations

import codecs
import json
import logging
import pathlib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from data_model.common import RESPONSE_KEY
from data_model.errors import DocumentParseError
from xml_parser import parse_extract_xml

from .accessors import field

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StructuredDocument:
    data: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class MarkupDocument:
    markup: str | bytes


type SourceDocument = StructuredDocument | MarkupDocument


def as_source(raw: Any) -> SourceDocument:
    """Opakowuje surowe wejście: Mapping → StructuredDocument, str/bytes → MarkupDocument."""
    if isinstance(raw, (StructuredDocument, MarkupDocument)):
        return raw
    if isinstance(raw, Mapping):
        return StructuredDocument(raw)
    if isinstance(raw, (str, bytes)):
        return MarkupDocument(raw)
    raise TypeError(f"Nieobsługiwany typ dokumentu: {type(raw).__name__}")


def _bridge_extract_case(doc: dict[str, Any]) -> None:
    response = doc.get(RESPONSE_KEY)
    if isinstance(response, dict) and "Extract" in response:
        response["extract"] = response["Extract"]


def normalize_document(source: SourceDocument | Mapping[str, Any] | str | bytes) -> Mapping[str, Any]:
    """
    Zwraca dokument w kształcie kanonicznym (obiektowym).

    Raises:
        DocumentParseError: wejście XML nie jest poprawnie sformowane.
    """
    match as_source(source):
        case StructuredDocument(data=data):
            return data
        case MarkupDocument(markup=markup):
            doc = parse_extract_xml(markup)
            _bridge_extract_case(doc)
            log.debug("Sparsowano dokument XML (korzeń: %s)", ", ".join(doc))
            return doc


def extract_node(doc: Mapping[str, Any]) -> Mapping[str, Any]:
    """Węzeł GetExtractByIdResponse.extract; pusty słownik gdy brak."""
    node = field(doc, RESPONSE_KEY, "extract")
    return node if isinstance(node, Mapping) else {}


def read_source(path: str | pathlib.Path) -> SourceDocument:
    """
    Wczytuje plik wyciągu. Zawartość zaczynająca się od '{' jest traktowana
    jako JSON, wszystko inne jako XML.

    Raises:
        DocumentParseError: plik wygląda na JSON, ale nie daje się zdekodować.
    """
    raw = pathlib.Path(path).read_bytes()
    head = raw.removeprefix(codecs.BOM_UTF8).lstrip()[:1]
    if head == b"{":
        try:
            return StructuredDocument(json.loads(raw.decode("utf-8-sig")))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DocumentParseError(f"Niepoprawny JSON: {e}") from e
    return MarkupDocument(raw)
