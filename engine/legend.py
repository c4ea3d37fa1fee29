"""
engine/legend.py — agregacja legendy: podtemat → symbol → sumy udziałów.

aggregate_legend(selection) -> list[SubthemeLegend]

  - grupowanie po SubTheme ("" = brak podtematu), potem po SymbolRef
  - tekst legendy z pierwszego wpisu kubełka, pełna legenda (LegendAtWeb)
    z pierwszego wpisu podtematu
  - każdy z czterech udziałów sumowany osobno; udział nieobecny we
    wszystkich wpisach kubełka zostaje None
  - kolejność: podtematy wg konfiguracji, potem nieskonfigurowane w kolejności
    wpisów; podtemat skonfigurowany bez wpisów → pusty placeholder
"""

from __future__ import annotations

import math

from data_model.legend import SHARE_FIELDS, LegendBucket, SubthemeLegend

from .types import ThemeSelection


def aggregate_legend(selection: ThemeSelection) -> list[SubthemeLegend]:
    groups: dict[str, SubthemeLegend] = {}
    buckets: dict[tuple[str, str], LegendBucket] = {}
    # Wartości udziałów per kubełek, sumowane przez fsum po pętli
    shares: dict[tuple[str, str], dict[str, list[float]]] = {}

    for entry in selection.entries:
        legend = groups.get(entry.subtheme)
        if legend is None:
            legend = SubthemeLegend(
                subtheme=entry.subtheme,
                full_legend=entry.map.legend_at_web if entry.map else "",
            )
            groups[entry.subtheme] = legend

        key = (entry.subtheme, entry.symbol_ref)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = LegendBucket(
                subtheme=entry.subtheme,
                symbol_ref=entry.symbol_ref,
                legend_text=entry.legend_text,
            )
            buckets[key] = bucket
            shares[key] = {name: [] for name in SHARE_FIELDS}
            legend.buckets.append(bucket)

        for name in SHARE_FIELDS:
            value = getattr(entry, name)
            if value is not None:
                shares[key][name].append(value)

    for key, bucket in buckets.items():
        for name, values in shares[key].items():
            setattr(bucket, name, math.fsum(values) if values else None)

    result: list[SubthemeLegend] = []
    for label in dict.fromkeys(selection.ordered_subthemes):
        if label in groups:
            result.append(groups.pop(label))
        elif selection.configured:
            result.append(SubthemeLegend(subtheme=label, is_placeholder=True))
    result.extend(groups.values())
    return result
