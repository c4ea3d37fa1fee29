"""
data_model/view.py — hierarchiczny model prezentacji wyciągu.

  ViewModel
    └─ Section (concernedThemes | notConcernedThemes | themeWithoutData
                | generalInformation)
         └─ ThemeItem / GeneralInformation
  ThemeContents — zawartość rozwiniętego tematu (legendy + dokumenty)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import Any

from .documents import ProvisionDocuments
from .extract import Authority, TextBlock, Theme
from .legend import SubthemeLegend


class SectionName(StrEnum):
    """Sekcje najwyższego poziomu w kolejności wyświetlania."""
    CONCERNED_THEMES     = "concernedThemes"
    NOT_CONCERNED_THEMES = "notConcernedThemes"
    THEMES_WITHOUT_DATA  = "themeWithoutData"
    GENERAL_INFORMATION  = "generalInformation"


@dataclass(slots=True)
class ThemeItem:
    theme: Theme
    law_status: str = ""   # Lawstatus.Text pierwszego wpisu tematu (tylko dotknięte)


@dataclass(slots=True)
class GeneralInformation:
    """
    Informacje ogólne: organ, podstawy, zastrzeżenia.

    cantonal_logo_ref jest "" gdy konfiguracja ma hide_logo.
    """
    cantonal_logo_ref: str
    authority: Authority
    base_data: str
    update_date: date | None
    general_information: str
    exclusions_of_liability: list[TextBlock] = field(default_factory=list)
    disclaimers: list[TextBlock] = field(default_factory=list)


@dataclass(slots=True)
class Section:
    name: SectionName
    items: list[Any]
    count: int


@dataclass(slots=True)
class ViewModel:
    sections: list[Section] = field(default_factory=list)

    def section(self, name: str) -> Section | None:
        return next((s for s in self.sections if s.name == name), None)


@dataclass(slots=True)
class ThemeContents:
    """
    Zawartość jednego tematu.

    - is_subtheme_only: temat dopasowany tylko po etykiecie podtematu —
                        nagłówki podtematów nie są wtedy wyświetlane
    """
    theme: Theme
    law_status: str
    is_subtheme_only: bool
    legends: list[SubthemeLegend] = field(default_factory=list)
    documents: ProvisionDocuments = field(default_factory=ProvisionDocuments)

    def show_subtheme_titles(self) -> bool:
        return not self.is_subtheme_only
