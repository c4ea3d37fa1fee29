"""
data_model/extract.py — znormalizowany wyciąg ÖREB (tylko do odczytu).

Wszystkie struktury są zamrożone: po załadowaniu (normalizer/loader.py)
nikt w dół strumienia ich nie modyfikuje. Teksty wielojęzyczne są już
rozwiązane do jednego stringa, brakujące pola mają wartości puste.

Mapowanie na schemat:
  Extract.PLRCadastreAuthority          → Authority
  Extract.ConcernedTheme[] itd.         → Theme
  RealEstate.RestrictionOnLandownership → RestrictionEntry
  RestrictionEntry.LegalProvisions[]    → LegalProvision
  *.ResponsibleOffice                   → ResponsibleOffice
  RestrictionEntry.Map                  → MapReference
  ExclusionOfLiability[] / Disclaimer[] → TextBlock
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from .common import ProvisionKind, ThemeId, theme_id


@dataclass(frozen=True, slots=True)
class Theme:
    """Temat ograniczeń; tożsamość = (code, subcode)."""
    code: str
    subcode: str
    text: str

    @property
    def theme_id(self) -> ThemeId:
        return theme_id(self.code, self.subcode)


@dataclass(frozen=True, slots=True)
class ResponsibleOffice:
    """Urząd właściwy; tożsamość = link (OfficeAtWeb)."""
    name: str
    link: str


@dataclass(frozen=True, slots=True)
class LegalProvision:
    """
    Odwołanie prawne stojące za ograniczeniem.

    - kind:            sklasyfikowany rodzaj (ProvisionKind)
    - type_code:       surowy Type.Code z dokumentu
    - abbreviation:    tylko dla ustaw (STATUTE), inaczej ""
    - link:            TextAtWeb — klucz deduplikacji w obrębie rodzaju
    - index:           Index jako liczba (brak → 0)
    """
    kind: ProvisionKind
    type_code: str
    title: str
    official_number: str
    abbreviation: str
    link: str
    index: float
    office: ResponsibleOffice


@dataclass(frozen=True, slots=True)
class MapReference:
    reference_wms: str
    legend_at_web: str
    layer_opacity: float | None = None


@dataclass(frozen=True, slots=True)
class RestrictionEntry:
    """
    Jeden wpis RestrictionOnLandownership.

    Udziały (nr_of_points, length_share, area_share, part_in_percent):
    None = pole nieobecne w dokumencie, liczba = wartość po ensure_number.
    """
    theme: Theme
    subtheme: str
    law_status: str
    provisions: tuple[LegalProvision, ...]
    symbol_ref: str
    legend_text: str
    nr_of_points: float | None
    length_share: float | None
    area_share: float | None
    part_in_percent: float | None
    map: MapReference | None
    office: ResponsibleOffice

    def matches(self, code: str, subcode: str) -> bool:
        return self.theme.code == code and self.theme.subcode == subcode


@dataclass(frozen=True, slots=True)
class Authority:
    """Organ prowadzący kataster (PLRCadastreAuthority)."""
    name: str
    street: str
    number: str
    postal_code: str
    city: str
    office_at_web: str

    def is_empty(self) -> bool:
        return not any((self.name, self.street, self.number,
                        self.postal_code, self.city, self.office_at_web))


@dataclass(frozen=True, slots=True)
class TextBlock:
    title: str
    content: str


@dataclass(frozen=True, slots=True)
class Extract:
    """Korzeń dokumentu — dokładnie jeden na dokument."""
    cantonal_logo_ref: str
    authority: Authority
    general_information: str
    base_data: str
    update_date_cs: str
    exclusions_of_liability: tuple[TextBlock, ...]
    disclaimers: tuple[TextBlock, ...]
    concerned_themes: tuple[Theme, ...]
    not_concerned_themes: tuple[Theme, ...]
    themes_without_data: tuple[Theme, ...]
    restrictions: tuple[RestrictionEntry, ...]

    @property
    def update_date(self) -> date | None:
        """UpdateDateCS jako data; None gdy brak lub format nierozpoznany."""
        if not self.update_date_cs:
            return None
        try:
            return datetime.fromisoformat(self.update_date_cs).date()
        except ValueError:
            return None

    def find_theme(self, code: str, subcode: str) -> Theme | None:
        """Szuka tematu we wszystkich trzech listach tematów."""
        for themes in (self.concerned_themes, self.not_concerned_themes, self.themes_without_data):
            for theme in themes:
                if theme.code == code and theme.subcode == subcode:
                    return theme
        return None
