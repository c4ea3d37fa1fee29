"""
engine/registry.py — kontrakt rejestru warstw hosta.

Rejestr jest zewnętrznym współpracownikiem: silnik tylko dodaje, usuwa
i przełącza właściwości warstw. Usunięcie nieistniejącej warstwy jest no-op.

InMemoryLayerRegistry — implementacja dla CLI i testów.
"""

from __future__ import annotations

from typing import Any, Protocol

from data_model.layers import OverlayLayerDescriptor


class LayerRegistry(Protocol):
    def layers(self) -> list[OverlayLayerDescriptor]:
        ...

    def add_layer(self, layer: OverlayLayerDescriptor) -> None:
        ...

    def remove_layer(self, layer_id: str) -> None:
        ...

    def set_layer_property(self, layer_id: str, name: str, value: Any) -> None:
        ...


class InMemoryLayerRegistry:
    """Rejestr warstw w pamięci, w kolejności dodania."""

    def __init__(self) -> None:
        self._layers: dict[str, OverlayLayerDescriptor] = {}

    def layers(self) -> list[OverlayLayerDescriptor]:
        return list(self._layers.values())

    def add_layer(self, layer: OverlayLayerDescriptor) -> None:
        self._layers[layer.id] = layer

    def remove_layer(self, layer_id: str) -> None:
        self._layers.pop(layer_id, None)

    def set_layer_property(self, layer_id: str, name: str, value: Any) -> None:
        """Ustawia zadeklarowane pole deskryptora; nieznane warstwy i pola są pomijane."""
        layer = self._layers.get(layer_id)
        if layer is not None and hasattr(layer, name):
            setattr(layer, name, value)

    def get(self, layer_id: str) -> OverlayLayerDescriptor | None:
        return self._layers.get(layer_id)
