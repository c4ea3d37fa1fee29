"""
engine/layers.py — synteza warstw nakładek WMS z Map.ReferenceWMS wpisów.

Publiczne API:
  parse_service_reference(url)               -> ServiceReference
  layer_opacity(fraction)                    -> int (0..255)
  synthesize_layers(code, subcode, entries)  -> list[OverlayLayerDescriptor]

Wpis bez Map lub bez URL jest pomijany po cichu (nie każde ograniczenie ma
mapę). URL bez schematu lub hosta → MalformedServiceReference, łapany tutaj:
wpis pominięty, ostrzeżenie w logu, reszta tematu bez zmian.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from urllib.parse import parse_qsl, urlsplit

from data_model.common import OPAQUE, theme_id
from data_model.errors import MalformedServiceReference
from data_model.extract import RestrictionEntry
from data_model.layers import OverlayLayerDescriptor

from .types import ServiceReference

log = logging.getLogger(__name__)

# Prefiks identyfikatorów warstw przejściowych
LAYER_ID_PREFIX = "oereb"


def parse_service_reference(url: str) -> ServiceReference:
    """
    Rozbija URL usługi na bazę (schemat://host[:port]/ścieżka) i parametry.

    Klucze parametrów są normalizowane do wielkich liter (WMS ignoruje
    wielkość liter), przy powtórzeniach wygrywa pierwsze wystąpienie.

    Raises:
        MalformedServiceReference: brak schematu lub hosta.
    """
    parts = urlsplit(url.strip())
    host = parts.netloc.rpartition("@")[2]
    if not parts.scheme or not host:
        raise MalformedServiceReference(url)

    params: dict[str, str] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        params.setdefault(key.upper(), value)

    return ServiceReference(base_url=f"{parts.scheme}://{host}{parts.path}", params=params)


def layer_opacity(fraction: float | None) -> int:
    """Ułamek [0, 1] → 0..255; brak lub wartość spoza zakresu → pełne krycie."""
    if fraction is None or not 0 <= fraction <= 1:
        return OPAQUE
    return round(fraction * OPAQUE)


def synthesize_layers(
    code: str,
    subcode: str,
    entries: Iterable[RestrictionEntry],
) -> list[OverlayLayerDescriptor]:
    """Co najwyżej jedna warstwa na podtemat, w kolejności wpisów."""
    tid = theme_id(code, subcode)
    layers: list[OverlayLayerDescriptor] = []
    seen_subthemes: set[str] = set()

    for entry in entries:
        if entry.map is None or not entry.map.reference_wms or entry.subtheme in seen_subthemes:
            continue
        try:
            ref = parse_service_reference(entry.map.reference_wms)
        except MalformedServiceReference as e:
            log.warning("Temat %s: pomijam warstwę — %s", tid, e)
            continue

        layers.append(OverlayLayerDescriptor(
            id=f"{LAYER_ID_PREFIX}:{tid}:{len(layers)}",
            name=tid,
            title=entry.theme.text,
            url=ref.base_url,
            version=ref.get("VERSION"),
            format=ref.get("FORMAT"),
            params={"LAYERS": ref.get("LAYERS")},
            bbox=ref.get("BBOX"),
            opacity=layer_opacity(entry.map.layer_opacity),
            highlight=True,
            subtheme=entry.subtheme,
        ))
        seen_subthemes.add(entry.subtheme)

    log.debug("Temat %s: %d warstw nakładek", tid, len(layers))
    return layers
