"""
engine/types.py — pośrednie typy danych silnika.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from data_model.extract import RestrictionEntry


@dataclass(frozen=True, slots=True)
class ThemeSelection:
    """Wpisy jednego tematu po rozstrzygnięciu i posortowaniu."""
    entries:           tuple[RestrictionEntry, ...] = ()
    ordered_subthemes: tuple[str, ...] = ("",)
    is_subtheme_only:  bool = False
    configured:        bool = False   # kolejność pochodzi z konfiguracji

    def __bool__(self) -> bool:
        return bool(self.entries)


@dataclass(frozen=True, slots=True)
class ServiceReference:
    """Referencja WMS rozbita na bazowy URL i parametry (klucze wielkimi literami)."""
    base_url: str
    params:   dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str:
        return self.params.get(name.upper(), "")
