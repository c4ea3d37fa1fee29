"""
engine/state.py — stan rozwinięcia widoku (sekcja → temat → pełna legenda).

Stan należy do warstwy prezentacji; tutaj tylko jego kształt i czyste
przejścia. Każde przejście zwraca NOWY stan.

Przejścia:
  toggle_section  przełącza sekcję, czyści temat i legendę
  toggle_theme    przełącza temat, czyści legendę
  toggle_legend   przełącza pełną legendę podtematu rozwiniętego tematu
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import StrEnum
from typing import Any

from data_model.common import ThemeId


class Phase(StrEnum):
    NONE    = "none"
    SECTION = "section"
    THEME   = "theme"
    LEGEND  = "legend"


def legend_id(theme: ThemeId, subtheme: str) -> str:
    return f"{theme}_{subtheme}"


@dataclass(frozen=True, slots=True)
class ExpansionState:
    section: str | None = None
    theme:   ThemeId | None = None
    legend:  str | None = None

    @property
    def phase(self) -> Phase:
        if self.legend is not None:
            return Phase.LEGEND
        if self.theme is not None:
            return Phase.THEME
        if self.section is not None:
            return Phase.SECTION
        return Phase.NONE

    def is_legend_expanded(self, subtheme: str) -> bool:
        return self.theme is not None and self.legend == legend_id(self.theme, subtheme)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExpansionState":
        return cls(
            section=data.get("section"),
            theme=data.get("theme"),
            legend=data.get("legend"),
        )


def toggle_section(state: ExpansionState, name: str) -> ExpansionState:
    return ExpansionState(section=None if state.section == name else name)


def toggle_theme(state: ExpansionState, theme: ThemeId) -> ExpansionState:
    return ExpansionState(
        section=state.section,
        theme=None if state.theme == theme else theme,
    )


def toggle_legend(state: ExpansionState, subtheme: str) -> ExpansionState:
    if state.theme is None:
        return state
    lid = legend_id(state.theme, subtheme)
    return replace(state, legend=None if state.legend == lid else lid)
