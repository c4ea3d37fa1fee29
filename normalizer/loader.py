"""
normalizer/loader.py — budowa zamrożonego Extract z dokumentu kanonicznego.

Jedyne miejsce, które czyta surowe pola dokumentu. Każdy odczyt idzie przez
akcesory (field / ensure_array / ensure_number / localized_text), więc
komponenty silnika nie sprawdzają już, czy pole istniało.

Publiczne API:
  load_extract(doc, language)       -> Extract
  load_document(source, language)   -> Extract   (normalize_document + load_extract)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from data_model.common import DEFAULT_LANGUAGE, ProvisionKind
from data_model.extract import (
    Authority,
    Extract,
    LegalProvision,
    MapReference,
    ResponsibleOffice,
    RestrictionEntry,
    TextBlock,
    Theme,
)

from .accessors import ensure_array, ensure_number, field, localized_text
from .document import SourceDocument, extract_node, normalize_document

log = logging.getLogger(__name__)


def _mappings(value: Any) -> list[Mapping[str, Any]]:
    """ensure_array bez elementów niebędących węzłami (np. pusty <Element/>)."""
    return [v for v in ensure_array(value) if isinstance(v, Mapping)]


def _share(node: Mapping[str, Any], key: str) -> float | None:
    value = field(node, key)
    if value is None or value == "":
        return None
    return ensure_number(value)


class _Loader:
    """Wiąże język wyświetlania z akcesorami na czas jednego ładowania."""

    def __init__(self, language: str) -> None:
        self.language = language

    def text(self, node: Any, *path: str) -> str:
        return localized_text(field(node, *path), self.language)

    # ------------------------------------------------------------------
    # Węzły podrzędne
    # ------------------------------------------------------------------

    def theme(self, node: Any) -> Theme:
        return Theme(
            code=self.text(node, "Code"),
            subcode=self.text(node, "SubCode"),
            text=self.text(node, "Text"),
        )

    def office(self, node: Any) -> ResponsibleOffice:
        return ResponsibleOffice(
            name=self.text(node, "Name"),
            link=self.text(node, "OfficeAtWeb"),
        )

    def provision(
        self,
        node: Mapping[str, Any],
        kind: ProvisionKind | None = None,
    ) -> LegalProvision:
        type_code = self.text(node, "Type", "Code")
        if kind is None:
            # v1: brak Type, każdy przepis wpisu jest wykonawczy
            kind = ProvisionKind.from_code(type_code) if type_code else ProvisionKind.REGULATION
        return LegalProvision(
            kind=kind,
            type_code=type_code,
            title=self.text(node, "Title"),
            official_number=self.text(node, "OfficialNumber"),
            abbreviation=self.text(node, "Abbreviation"),
            link=self.text(node, "TextAtWeb"),
            index=ensure_number(field(node, "Index")),
            office=self.office(field(node, "ResponsibleOffice")),
        )

    def provisions(self, value: Any) -> tuple[LegalProvision, ...]:
        """LegalProvisions[] wpisu; zagnieżdżone Reference[] (v1) stają się podstawami ustawowymi."""
        result: list[LegalProvision] = []
        for node in _mappings(value):
            result.append(self.provision(node))
            result.extend(
                self.provision(ref, ProvisionKind.STATUTE)
                for ref in _mappings(field(node, "Reference"))
            )
        return tuple(result)

    def map_reference(self, node: Any) -> MapReference | None:
        if not isinstance(node, Mapping):
            return None
        opacity = field(node, "layerOpacity")
        return MapReference(
            reference_wms=self.text(node, "ReferenceWMS"),
            legend_at_web=self.text(node, "LegendAtWeb"),
            layer_opacity=None if opacity in (None, "") else ensure_number(opacity),
        )

    def restriction(self, node: Mapping[str, Any]) -> RestrictionEntry:
        return RestrictionEntry(
            theme=self.theme(field(node, "Theme")),
            subtheme=self.text(node, "SubTheme"),
            law_status=self.text(node, "Lawstatus", "Text"),
            provisions=self.provisions(field(node, "LegalProvisions")),
            symbol_ref=self.text(node, "SymbolRef"),
            legend_text=self.text(node, "LegendText") or self.text(node, "Information"),
            nr_of_points=_share(node, "NrOfPoints"),
            length_share=_share(node, "LengthShare"),
            area_share=_share(node, "AreaShare"),
            part_in_percent=_share(node, "PartInPercent"),
            map=self.map_reference(field(node, "Map")),
            office=self.office(field(node, "ResponsibleOffice")),
        )

    def text_blocks(self, value: Any) -> tuple[TextBlock, ...]:
        return tuple(
            TextBlock(title=self.text(b, "Title"), content=self.text(b, "Content"))
            for b in _mappings(value)
        )

    def authority(self, node: Any) -> Authority:
        return Authority(
            name=self.text(node, "Name"),
            street=self.text(node, "Street"),
            number=self.text(node, "Number"),
            postal_code=self.text(node, "PostalCode"),
            city=self.text(node, "City"),
            office_at_web=self.text(node, "OfficeAtWeb"),
        )

    # ------------------------------------------------------------------
    # Korzeń
    # ------------------------------------------------------------------

    def extract(self, node: Mapping[str, Any]) -> Extract:
        restrictions = tuple(
            self.restriction(r)
            for r in _mappings(field(node, "RealEstate", "RestrictionOnLandownership"))
        )
        return Extract(
            cantonal_logo_ref=self.text(node, "CantonalLogoRef"),
            authority=self.authority(field(node, "PLRCadastreAuthority")),
            general_information=self.text(node, "GeneralInformation"),
            base_data=self.text(node, "BaseData"),
            update_date_cs=self.text(node, "UpdateDateCS"),
            exclusions_of_liability=self.text_blocks(field(node, "ExclusionOfLiability")),
            disclaimers=self.text_blocks(field(node, "Disclaimer")),
            concerned_themes=tuple(self.theme(t) for t in _mappings(field(node, "ConcernedTheme"))),
            not_concerned_themes=tuple(self.theme(t) for t in _mappings(field(node, "NotConcernedTheme"))),
            themes_without_data=tuple(self.theme(t) for t in _mappings(field(node, "ThemeWithoutData"))),
            restrictions=restrictions,
        )


def load_extract(doc: Mapping[str, Any], language: str = DEFAULT_LANGUAGE) -> Extract:
    """Buduje Extract z dokumentu kanonicznego (wynik normalize_document)."""
    node = extract_node(doc)
    if not node:
        log.warning("Dokument nie zawiera węzła GetExtractByIdResponse.extract")
    extract = _Loader(language).extract(node)
    log.debug(
        "Załadowano wyciąg: %d wpisów ograniczeń, %d tematów dotkniętych",
        len(extract.restrictions), len(extract.concerned_themes),
    )
    return extract


def load_document(
    source: SourceDocument | Mapping[str, Any] | str | bytes,
    language: str = DEFAULT_LANGUAGE,
) -> Extract:
    """
    normalize_document + load_extract.

    Raises:
        DocumentParseError: wejście XML nie jest poprawnie sformowane.
    """
    return load_extract(normalize_document(source), language)
