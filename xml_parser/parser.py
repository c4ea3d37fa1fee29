"""xml_parser/parser.py — parsowanie wyciągu XML do kształtu obiektowego (jak JSON)."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import unquote

from lxml import etree

from data_model.errors import DocumentParseError

# Klucze specjalne dla węzłów z atrybutami / tekstem mieszanym
ATTR_KEY = "$"
TEXT_KEY = "_"

# Deklaracja XML w stringu Pythona (lxml odrzuca str z deklaracją kodowania)
_XML_DECL_RE = re.compile(r"^\s*<\?xml[^>]*\?>")


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(tag: str) -> str:
    """Usuwa przestrzeń nazw: '{http://...}Extract' / 'data:Extract' → 'Extract'."""
    name = etree.QName(tag).localname
    return name.rpartition(":")[2]


def _decode(text: str) -> str:
    """Dekoduje sekwencje %XX w wartościach tekstowych."""
    return unquote(text)


def _own_text(el: etree._Element) -> str:
    """Tekst elementu bez tekstu dzieci (text + ogony dzieci)."""
    parts = [el.text or ""]
    parts.extend(child.tail or "" for child in el)
    return "".join(parts)


def _element_to_value(el: etree._Element) -> Any:
    """
    Element → wartość w kształcie dokumentu JSON.

    Reguły:
    - liść bez atrybutów: string (pusty / same białe znaki → "")
    - dziecko występujące raz: wartość; wielokrotnie: lista w kolejności dokumentu
    - atrybuty: słownik pod kluczem "$"
    - niepusty tekst obok dzieci/atrybutów: pod kluczem "_"
    """
    children = [c for c in el if isinstance(c.tag, str)]
    attrs = {_local_name(k): v for k, v in el.attrib.items()}
    text = _own_text(el)

    if not children and not attrs:
        return _decode(text) if text.strip() else ""

    node: dict[str, Any] = {}
    if attrs:
        node[ATTR_KEY] = attrs
    if text.strip():
        node[TEXT_KEY] = _decode(text)

    for child in children:
        name = _local_name(child.tag)
        value = _element_to_value(child)
        if name not in node:
            node[name] = value
        elif isinstance(node[name], list):
            node[name].append(value)
        else:
            node[name] = [node[name], value]
    return node


def parse_extract_xml(markup: str | bytes) -> dict[str, Any]:
    """
    Parsuje tekst XML i zwraca {nazwa_korzenia: wartość}.

    Raises:
        DocumentParseError: XML nie jest poprawnie sformowany (brak wyniku częściowego).
    """
    if isinstance(markup, str):
        markup = _XML_DECL_RE.sub("", markup, count=1).encode("utf-8")

    try:
        root = etree.fromstring(markup, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise DocumentParseError(
            f"Niepoprawny XML: {e.msg}",
            line=getattr(e, "lineno", None),
            column=getattr(e, "offset", None),
        ) from e
    except ValueError as e:
        raise DocumentParseError(f"Niepoprawny XML: {e}") from e

    if root is None:
        raise DocumentParseError("Niepoprawny XML: pusty dokument")

    return {_local_name(root.tag): _element_to_value(root)}
