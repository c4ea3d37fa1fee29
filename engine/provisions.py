"""
engine/provisions.py — klasyfikacja i deduplikacja przepisów tematu.

classify_provisions(entries, office_from_restriction) -> ProvisionDocuments

Zasady:
  - rodzaj wg Type.Code: LegalProvision → regulations, Law → legal_bases,
    Hint → hints; nieznane kody nie trafiają do list, ale ich urząd tak
  - deduplikacja w obrębie rodzaju po linku (TextAtWeb), ostatni zapis wygrywa
  - urzędy: jedna mapa po OfficeAtWeb przez wszystkie przepisy; w trybie
    office_from_restriction mapa jest ZASTĘPOWANA urzędami z samych wpisów
  - sortowanie: rosnąco po Index, remisy wg etykiety (collation lokalna,
    małe litery przed wielkimi)
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable

from data_model.common import ProvisionKind
from data_model.documents import DocumentLink, ProvisionDocuments
from data_model.extract import LegalProvision, ResponsibleOffice, RestrictionEntry

# ---------------------------------------------------------------------------
# Etykiety
# ---------------------------------------------------------------------------

def _regulation_label(prov: LegalProvision) -> str:
    label = prov.title
    if prov.official_number:
        label += ", " + prov.official_number
    return label


def _statute_label(prov: LegalProvision) -> str:
    label = prov.title
    if prov.abbreviation:
        label += f" ({prov.abbreviation})"
    if prov.official_number:
        label += ", " + prov.official_number
    return label


def _hint_label(prov: LegalProvision) -> str:
    return prov.title


_LABELLERS: dict[ProvisionKind, Callable[[LegalProvision], str]] = {
    ProvisionKind.REGULATION: _regulation_label,
    ProvisionKind.STATUTE:    _statute_label,
    ProvisionKind.HINT:       _hint_label,
}


def provision_label(prov: LegalProvision) -> str:
    """Etykieta przepisu wg jego rodzaju ("" dla ProvisionKind.OTHER)."""
    labeller = _LABELLERS.get(prov.kind)
    return labeller(prov) if labeller else ""


# ---------------------------------------------------------------------------
# Sortowanie
# ---------------------------------------------------------------------------

def collation_key(label: str) -> tuple[str, str, str]:
    """
    Przybliżenie localeCompare: najpierw litery bazowe bez diakrytyków
    i bez wielkości liter, potem diakrytyki, potem małe przed wielkimi.
    """
    base = "".join(
        c for c in unicodedata.normalize("NFKD", label) if not unicodedata.combining(c)
    )
    return base.casefold(), label.casefold(), label.swapcase()


def sort_documents(documents: Iterable[DocumentLink]) -> list[DocumentLink]:
    return sorted(documents, key=lambda d: (d.index, collation_key(d.label)))


# ---------------------------------------------------------------------------
# Klasyfikacja
# ---------------------------------------------------------------------------

def _office_link(office: ResponsibleOffice) -> DocumentLink:
    return DocumentLink(label=office.name, link=office.link)


def _collect_office(offices: dict[str, DocumentLink], office: ResponsibleOffice) -> None:
    if office.name or office.link:
        offices[office.link] = _office_link(office)


def classify_provisions(
    entries: Iterable[RestrictionEntry],
    office_from_restriction: bool = False,
) -> ProvisionDocuments:
    """Buduje posortowane, zdeduplikowane listy dokumentów i urzędów."""
    entries = tuple(entries)
    buckets: dict[ProvisionKind, dict[str, DocumentLink]] = {kind: {} for kind in _LABELLERS}
    offices: dict[str, DocumentLink] = {}

    for entry in entries:
        for prov in entry.provisions:
            bucket = buckets.get(prov.kind)
            if bucket is not None:
                bucket[prov.link] = DocumentLink(
                    label=provision_label(prov),
                    link=prov.link,
                    index=prov.index,
                )
            _collect_office(offices, prov.office)

    if office_from_restriction:
        offices = {}
        for entry in entries:
            _collect_office(offices, entry.office)

    return ProvisionDocuments(
        regulations=sort_documents(buckets[ProvisionKind.REGULATION].values()),
        legal_bases=sort_documents(buckets[ProvisionKind.STATUTE].values()),
        hints=sort_documents(buckets[ProvisionKind.HINT].values()),
        responsible_offices=sort_documents(offices.values()),
    )
