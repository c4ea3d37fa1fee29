"""
data_model/legend.py — zagregowana legenda tematu.

LegendBucket: klucz (subtheme, symbol_ref), sumy czterech udziałów.
SubthemeLegend: wszystkie kubełki jednego podtematu w kolejności
pierwszego wystąpienia symbolu.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Nazwy pól udziałów w kolejności wyświetlania
SHARE_FIELDS: tuple[str, ...] = ("nr_of_points", "length_share", "area_share", "part_in_percent")


@dataclass(slots=True)
class LegendBucket:
    subtheme: str
    symbol_ref: str
    legend_text: str
    nr_of_points: float | None = None
    length_share: float | None = None
    area_share: float | None = None
    part_in_percent: float | None = None

    def has_shares(self) -> bool:
        return any(getattr(self, name) for name in SHARE_FIELDS)


@dataclass(slots=True)
class SubthemeLegend:
    """
    Legenda jednego podtematu.

    - subtheme:       etykieta ("" = brak podtematu)
    - full_legend:    LegendAtWeb pierwszego wpisu podtematu ("" gdy brak)
    - buckets:        kubełki w kolejności pierwszego wystąpienia symbolu
    - is_placeholder: podtemat skonfigurowany, ale bez wpisów w dokumencie
    """
    subtheme: str
    full_legend: str = ""
    buckets: list[LegendBucket] = field(default_factory=list)
    is_placeholder: bool = False
