"""
data_model/errors.py — wyjątki silnika wyciągów ÖREB.

Taksonomia:
  OerebError                 wspólna baza (łapana przez CLI)
  DocumentParseError         wejście XML nie jest poprawnie sformowane
                             (jedyny błąd przekraczający granicę rdzenia)
  MalformedServiceReference  referencja WMS bez użytecznego URL; tylko
                             wewnętrznie w syntezie warstw (wpis pomijany)
  ConfigError                plik konfiguracji narusza schemat

Brakujące pola dokumentu NIE są błędem — pochłaniają je akcesory
(normalizer/accessors.py).
"""

from __future__ import annotations


class OerebError(Exception):
    """Baza wszystkich błędów pakietu."""


class DocumentParseError(OerebError, ValueError):
    """
    Dokument XML nie daje się sparsować. Brak częściowego wyniku.

    - line:   numer linii błędu (1-based) lub None
    - column: numer kolumny błędu lub None
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        msg = super().__str__()
        if self.line is not None:
            return f"{msg} (linia {self.line}, kolumna {self.column or 0})"
        return msg


class MalformedServiceReference(OerebError, ValueError):
    """Referencja usługi mapowej obecna, ale bez schematu lub hosta."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Nieużyteczny URL usługi mapowej: {url!r}")
        self.url = url


class ConfigError(OerebError, ValueError):
    """Konfiguracja nie przeszła walidacji; `problems` to lista 'ścieżka: opis'."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("Niepoprawna konfiguracja:\n  " + "\n  ".join(problems))
        self.problems = problems
