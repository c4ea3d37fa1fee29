"""
engine/view_model.py — składanie modelu prezentacji wyciągu.

Publiczne API:
  build_view_model(extract, config)              -> ViewModel
  theme_contents(extract, code, subcode, config) -> ThemeContents
  section_contents(view_model, name)             -> list
  general_information(extract, config)           -> GeneralInformation

Sekcja z pustą listą źródłową jest pomijana (nie renderujemy pustych sekcji).
"""

from __future__ import annotations

from typing import Any

from data_model.extract import Extract, Theme
from data_model.view import (
    GeneralInformation,
    Section,
    SectionName,
    ThemeContents,
    ThemeItem,
    ViewModel,
)

from .config import ExtractConfig
from .legend import aggregate_legend
from .provisions import classify_provisions
from .themes import first_entry, resolve_theme_entries


def _law_status(extract: Extract, theme: Theme) -> str:
    entry = first_entry(extract.restrictions, theme.code, theme.subcode)
    return entry.law_status if entry else ""


def general_information(extract: Extract, config: ExtractConfig | None = None) -> GeneralInformation:
    config = config or ExtractConfig()
    return GeneralInformation(
        cantonal_logo_ref="" if config.hide_logo else extract.cantonal_logo_ref,
        authority=extract.authority,
        base_data=extract.base_data,
        update_date=extract.update_date,
        general_information=extract.general_information,
        exclusions_of_liability=list(extract.exclusions_of_liability),
        disclaimers=list(extract.disclaimers),
    )


def _is_empty_info(info: GeneralInformation) -> bool:
    return (
        not info.cantonal_logo_ref
        and info.authority.is_empty()
        and not info.base_data
        and info.update_date is None
        and not info.general_information
        and not info.exclusions_of_liability
        and not info.disclaimers
    )


def build_view_model(extract: Extract, config: ExtractConfig | None = None) -> ViewModel:
    config = config or ExtractConfig()
    sections: list[Section] = []

    def add(name: SectionName, items: list[Any]) -> None:
        if items:
            sections.append(Section(name=name, items=items, count=len(items)))

    add(SectionName.CONCERNED_THEMES, [
        ThemeItem(theme=t, law_status=_law_status(extract, t)) for t in extract.concerned_themes
    ])
    add(SectionName.NOT_CONCERNED_THEMES, [ThemeItem(theme=t) for t in extract.not_concerned_themes])
    add(SectionName.THEMES_WITHOUT_DATA, [ThemeItem(theme=t) for t in extract.themes_without_data])

    info = general_information(extract, config)
    if not _is_empty_info(info):
        add(SectionName.GENERAL_INFORMATION, [info])

    return ViewModel(sections=sections)


def theme_contents(
    extract: Extract,
    code: str,
    subcode: str,
    config: ExtractConfig | None = None,
) -> ThemeContents:
    """Zawartość tematu: legendy podtematów + dokumenty + urzędy."""
    config = config or ExtractConfig()
    selection = resolve_theme_entries(extract.restrictions, code, subcode, config.subthemes)
    theme = extract.find_theme(code, subcode) or Theme(code=code, subcode=subcode, text=code)

    return ThemeContents(
        theme=theme,
        law_status=_law_status(extract, theme),
        is_subtheme_only=selection.is_subtheme_only,
        legends=aggregate_legend(selection),
        documents=classify_provisions(
            selection.entries,
            office_from_restriction=config.responsible_office_from_restriction,
        ),
    )


def section_contents(view_model: ViewModel, name: str) -> list[Any]:
    """Elementy sekcji; [] gdy sekcja pominięta."""
    section = view_model.section(name)
    return section.items if section else []
