"""
engine/session.py — sesja przeglądania wyciągu: stan rozwinięcia + warstwy.

ExtractSession łączy czyste przejścia (engine/state.py) z efektami na
rejestrze warstw hosta:
  - zmiana sekcji          → usunięcie wszystkich warstw highlight
  - rozwinięcie tematu     → usunięcie poprzednich, dodanie nowych warstw
  - zwinięcie tematu       → usunięcie wszystkich warstw highlight
  - przełącznik podtematu  → set_layer_property(id, "visibility", ...)

Użycie:
    session = ExtractSession(extract, config, InMemoryLayerRegistry())
    session.toggle_section("concernedThemes")
    layers = session.toggle_theme("ch.Nutzungsplanung", "")
    contents = session.expanded_theme_contents()
"""

from __future__ import annotations

import logging

from data_model.common import parse_theme_id, theme_id
from data_model.extract import Extract
from data_model.layers import OverlayLayerDescriptor
from data_model.view import ThemeContents, ViewModel

from . import state as st
from .config import ExtractConfig
from .layers import synthesize_layers
from .registry import InMemoryLayerRegistry, LayerRegistry
from .themes import resolve_theme_entries
from .view_model import build_view_model, theme_contents

log = logging.getLogger(__name__)


class ExtractSession:
    def __init__(
        self,
        extract: Extract,
        config: ExtractConfig | None = None,
        registry: LayerRegistry | None = None,
    ) -> None:
        self.extract = extract
        self.config = config or ExtractConfig()
        self.registry: LayerRegistry = registry if registry is not None else InMemoryLayerRegistry()
        self.state = st.ExpansionState()
        self.view_model: ViewModel = build_view_model(extract, self.config)

    # ------------------------------------------------------------------
    # Przejścia
    # ------------------------------------------------------------------

    def toggle_section(self, name: str) -> st.ExpansionState:
        self.state = st.toggle_section(self.state, name)
        self.remove_highlight_layers()
        return self.state

    def toggle_theme(self, code: str, subcode: str) -> list[OverlayLayerDescriptor]:
        """Przełącza temat; zwraca warstwy dodane do rejestru (puste przy zwinięciu)."""
        self.state = st.toggle_theme(self.state, theme_id(code, subcode))
        self.remove_highlight_layers()
        if self.state.theme is None:
            return []

        selection = resolve_theme_entries(
            self.extract.restrictions, code, subcode, self.config.subthemes,
        )
        layers = synthesize_layers(code, subcode, selection.entries)
        for layer in layers:
            self.registry.add_layer(layer)
        return layers

    def toggle_legend(self, subtheme: str) -> st.ExpansionState:
        self.state = st.toggle_legend(self.state, subtheme)
        return self.state

    # ------------------------------------------------------------------
    # Warstwy
    # ------------------------------------------------------------------

    def remove_highlight_layers(self) -> int:
        removed = 0
        for layer in self.registry.layers():
            if layer.highlight:
                self.registry.remove_layer(layer.id)
                removed += 1
        if removed:
            log.debug("Usunięto %d warstw highlight", removed)
        return removed

    def toggle_subtheme_layer(self, subtheme: str) -> bool | None:
        """
        Przełącza widoczność warstwy oznaczonej podtematem (warstwa trwała
        ma pierwszeństwo przed przejściową). Zwraca nową widoczność lub
        None, gdy takiej warstwy nie ma.
        """
        candidates = [layer for layer in self.registry.layers() if layer.subtheme == subtheme]
        if not candidates:
            return None
        layer = min(candidates, key=lambda c: c.highlight)
        visibility = not layer.visibility
        self.registry.set_layer_property(layer.id, "visibility", visibility)
        return visibility

    def close(self) -> None:
        self.remove_highlight_layers()

    # ------------------------------------------------------------------
    # Zapytania
    # ------------------------------------------------------------------

    def expanded_theme_contents(self) -> ThemeContents | None:
        if self.state.theme is None:
            return None
        code, subcode = parse_theme_id(self.state.theme)
        return theme_contents(self.extract, code, subcode, self.config)
