"""
data_model/documents.py — listy dokumentów tematu (przepisy, urzędy).

DocumentLink odpowiada jednej pozycji listy "Dokumente"; zbiór list
tworzy ProvisionDocuments — wynik klasyfikatora (engine/provisions.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class DocumentLink:
    label: str           # etykieta zbudowana wg rodzaju przepisu
    link: str            # TextAtWeb / OfficeAtWeb → klucz deduplikacji
    index: float = 0.0   # Index przepisu; urzędy zawsze 0


@dataclass(slots=True)
class ProvisionDocuments:
    """
    Posortowane listy dokumentów jednego tematu.

    - regulations:         przepisy wykonawcze (ProvisionKind.REGULATION)
    - legal_bases:         podstawy ustawowe (ProvisionKind.STATUTE)
    - hints:               wskazówki (ProvisionKind.HINT)
    - responsible_offices: urzędy właściwe, unikalne po linku
    """
    regulations: list[DocumentLink] = field(default_factory=list)
    legal_bases: list[DocumentLink] = field(default_factory=list)
    hints: list[DocumentLink] = field(default_factory=list)
    responsible_offices: list[DocumentLink] = field(default_factory=list)
