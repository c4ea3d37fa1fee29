"""
normalizer/accessors.py — totalne akcesory pól dokumentu.

Żaden komponent nie sięga do surowych pól dokumentu bez tych funkcji.
Brak pola nigdy nie jest błędem: wynikiem jest pusta lista, pusty string
albo 0.

Publiczne API:
  ensure_array(value)              -> list
  ensure_number(value)             -> float
  localized_text(node, language)   -> str
  field(node, *path)               -> Any | None
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from data_model.common import DEFAULT_LANGUAGE

# Wiodący prefiks liczbowy (semantyka parseFloat): "12.5 m2" → 12.5, "-Infinity" → -inf, "abc" → brak
_NUMBER_PREFIX_RE = re.compile(r"^\s*[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|Infinity)")


def ensure_array(value: Any) -> list[Any]:
    """None → [], lista → ta sama lista, krotka → lista, skalar → [skalar]."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def ensure_number(value: Any) -> float:
    """Liczba z wiodącego prefiksu; wszystko inne (w tym NaN i bool) → 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return 0.0 if math.isnan(number) else number
    if not isinstance(value, str):
        return 0.0
    m = _NUMBER_PREFIX_RE.match(value)
    if not m:
        return 0.0
    return float(m.group(0))


def field(node: Any, *path: str) -> Any:
    """Zagnieżdżony odczyt node[p0][p1]...; None przy dowolnym brakującym kroku."""
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def _is_empty(node: Any) -> bool:
    if node is None:
        return True
    if isinstance(node, (str, list, tuple, Mapping)):
        return len(node) == 0
    return False


def _entry_text(entry: Any) -> str:
    """Tekst pojedynczego wpisu {Language, Text} (albo gołego stringa)."""
    if isinstance(entry, Mapping):
        text = entry.get("Text")
        if text is None:
            text = entry.get("_")  # węzeł XML z atrybutami
        if isinstance(text, Mapping):
            text = text.get("_")
        return "" if text is None else str(text)
    if isinstance(entry, str):
        return entry
    if isinstance(entry, (int, float)) and not isinstance(entry, bool):
        return str(entry)
    return ""


def localized_text(node: Any, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Rozwiązuje tekst wielojęzyczny do jednego stringa.

    Kolejność:
      1. pusty / brak węzła           → ""
      2. opakowanie LocalisedText     → rozpakuj
      3. lista wpisów                 → wpis z Language == language,
                                        inaczej pierwszy wpis
      4. pojedynczy wpis / string     → jego tekst
    """
    if _is_empty(node):
        return ""
    if isinstance(node, Mapping) and node.get("LocalisedText"):
        node = node["LocalisedText"]
    if isinstance(node, (list, tuple)):
        if not node:
            return ""
        chosen = next(
            (e for e in node if isinstance(e, Mapping) and e.get("Language") == language),
            node[0],
        )
        return _entry_text(chosen)
    return _entry_text(node)
