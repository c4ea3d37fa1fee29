"""
Wspólne typy pierwotne używane przez extract, documents, legend i layers.

Mapowanie na schemat ÖREB (GetExtractByIdResponse):
  LegalProvisions[].Type.Code  → ProvisionKind
  Theme.Code + Theme.SubCode   → ThemeId ("code:subcode")
"""

from __future__ import annotations

from enum import StrEnum

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# Język wyświetlania używany gdy konfiguracja go nie nadpisuje
DEFAULT_LANGUAGE = "de"

# Klucz korzenia dokumentu (identyczny w JSON i XML)
RESPONSE_KEY = "GetExtractByIdResponse"

# Pełne krycie warstwy w skali silnika mapowego
OPAQUE = 255


# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Wzorzec: "<Code>:<SubCode>", np. "ch.Nutzungsplanung:" lub "201:0"
type ThemeId = str


def theme_id(code: str, subcode: str) -> ThemeId:
    return f"{code}:{subcode}"


def parse_theme_id(value: str) -> tuple[str, str]:
    """Odwrotność theme_id(); brak ':' oznacza pusty subcode."""
    code, _, subcode = value.partition(":")
    return code, subcode


# ---------------------------------------------------------------------------
# ProvisionKind
# ---------------------------------------------------------------------------

class ProvisionKind(StrEnum):
    """
    Rodzaj przepisu wg LegalProvisions[].Type.Code.

    - REGULATION: przepis wykonawczy ("LegalProvision")
    - STATUTE:    podstawa ustawowa ("Law")
    - HINT:       wskazówka informacyjna ("Hint")
    - OTHER:      nieznany kod — nie trafia do żadnej listy dokumentów,
                  ale jego urząd nadal jest zbierany
    """
    REGULATION = "LegalProvision"
    STATUTE    = "Law"
    HINT       = "Hint"
    OTHER      = "other"

    @classmethod
    def from_code(cls, code: str) -> "ProvisionKind":
        try:
            kind = cls(code)
        except ValueError:
            return cls.OTHER
        return kind
