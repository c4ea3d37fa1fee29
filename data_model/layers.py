"""
data_model/layers.py — opis warstwy nakładki WMS dla rejestru warstw hosta.

OverlayLayerDescriptor jest efemeryczny: powstaje przy rozwinięciu tematu
(engine/layers.py) i znika przy jego zwinięciu. Flaga `highlight` pozwala
usunąć wszystkie takie warstwy naraz.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common import OPAQUE

USER_LAYER_ROLE = "userlayer"


@dataclass(slots=True)
class OverlayLayerDescriptor:
    """
    Warstwa WMS zsyntetyzowana z Map.ReferenceWMS wpisu.

    - id:        stabilna tożsamość "oereb:<code>:<subcode>:<n>"
    - name:      ThemeId tematu
    - title:     tekst tematu (wyświetlany w drzewie warstw)
    - url:       bazowy URL usługi (bez query)
    - params:    parametry usługi, obecnie tylko {"LAYERS": ...}
    - bbox:      BBOX z query ("" gdy brak)
    - opacity:   0..255
    - highlight: True — warstwa przejściowa, usuwana przy zmianie tematu
    - subtheme:  etykieta podtematu (grupowanie, przełącznik widoczności)
    """
    id: str
    name: str
    title: str
    url: str
    version: str
    format: str
    params: dict[str, str] = field(default_factory=dict)
    bbox: str = ""
    opacity: int = OPAQUE
    visibility: bool = True
    queryable: bool = False
    type: str = "wms"
    role: str = USER_LAYER_ROLE
    highlight: bool = True
    subtheme: str = ""

    @property
    def legend_url(self) -> str:
        return self.url

    @property
    def feature_info_url(self) -> str:
        return self.url

    def as_layer_dict(self) -> dict[str, Any]:
        """Postać słownikowa w konwencji kluczy rejestru warstw hosta."""
        return {
            "id": self.id,
            "role": self.role,
            "type": self.type,
            "name": self.name,
            "title": self.title,
            "url": self.url,
            "legendUrl": self.legend_url,
            "featureInfoUrl": self.feature_info_url,
            "version": self.version,
            "format": self.format,
            "params": dict(self.params),
            "bbox": self.bbox,
            "opacity": self.opacity,
            "visibility": self.visibility,
            "queryable": self.queryable,
            "__oereb_highlight": self.highlight,
            "__oereb_subtheme": self.subtheme,
        }
