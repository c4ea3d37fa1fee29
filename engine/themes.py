"""
engine/themes.py — wybór wpisów ograniczeń dla tematu (code, subcode).

Dopasowanie:
  1. dokładne (Theme.Code, Theme.SubCode) → kolejność podtematów z konfiguracji
     (domyślnie jeden kubełek ""), sortowanie stabilne po pozycji etykiety;
     etykiety spoza konfiguracji trafiają na koniec w kolejności dokumentu
  2. brak dopasowania → wpisy z SubTheme == code (temat zakodowany wyłącznie
     jako podtemat); wynik oznaczony is_subtheme_only
  3. nadal pusto → pusta selekcja (poprawny wynik, pusty temat)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from data_model.extract import RestrictionEntry

from .types import ThemeSelection

log = logging.getLogger(__name__)

# Kolejność gdy temat nie ma wpisu w konfiguracji
DEFAULT_SUBTHEMES: tuple[str, ...] = ("",)


def resolve_theme_entries(
    entries: Iterable[RestrictionEntry],
    code: str,
    subcode: str,
    subtheme_order: Mapping[str, Sequence[str]] | None = None,
) -> ThemeSelection:
    """Zwraca ThemeSelection dla tematu; nigdy nie zgłasza wyjątku."""
    entries = tuple(entries)
    subtheme_order = subtheme_order or {}

    matched = [e for e in entries if e.matches(code, subcode)]
    if matched:
        configured = code in subtheme_order
        ordered = tuple(subtheme_order[code]) if configured else DEFAULT_SUBTHEMES
        position = {label: i for i, label in reversed(list(enumerate(ordered)))}
        matched.sort(key=lambda e: position.get(e.subtheme, len(ordered)))
        return ThemeSelection(
            entries=tuple(matched),
            ordered_subthemes=ordered,
            is_subtheme_only=False,
            configured=configured,
        )

    by_subtheme = tuple(e for e in entries if e.subtheme == code)
    if by_subtheme:
        log.debug("Temat %s:%s dopasowany tylko po podtemacie (%d wpisów)", code, subcode, len(by_subtheme))
        return ThemeSelection(
            entries=by_subtheme,
            ordered_subthemes=(code,),
            is_subtheme_only=True,
        )

    return ThemeSelection(entries=(), ordered_subthemes=DEFAULT_SUBTHEMES)


def first_entry(entries: Iterable[RestrictionEntry], code: str, subcode: str) -> RestrictionEntry | None:
    """Pierwszy wpis dokładnie dopasowany do tematu (źródło Lawstatus)."""
    return next((e for e in entries if e.matches(code, subcode)), None)
