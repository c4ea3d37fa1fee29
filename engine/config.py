"""
engine/config.py — konfiguracja silnika wyciągów.

Zmienne środowiskowe:
  OEREB_LANG     język wyświetlania (nadpisuje plik konfiguracji)
  OEREB_CONFIG   domyślna ścieżka pliku konfiguracji (JSON)

Opcjonalnie plik .env w katalogu głównym projektu; jego wartości nadpisują
zmienne powłoki:
  OEREB_LANG=fr

Format pliku (klucze jak w konfiguracji przeglądarki wyciągów)::

    {
        "subthemes": {"ch.Nutzungsplanung": ["Grundnutzung", "Überlagernde Festlegung"]},
        "responsibleOfficeFromRestriction": false,
        "hideLogo": false,
        "language": "de"
    }

Publiczne API:
  ExtractConfig                       zamrożona konfiguracja
  load_config(path, language)         -> ExtractConfig
"""

from __future__ import annotations

import json
import os
import pathlib
from dataclasses import dataclass, field, replace
from typing import Any

import jsonschema
from dotenv import load_dotenv

from data_model.common import DEFAULT_LANGUAGE
from data_model.errors import ConfigError

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env", override=True)

_ENV_LANG   = "OEREB_LANG"
_ENV_CONFIG = "OEREB_CONFIG"

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "subthemes": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string"},
            },
        },
        "responsibleOfficeFromRestriction": {"type": "boolean"},
        "hideLogo": {"type": "boolean"},
        "language": {"type": "string", "minLength": 2},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True, slots=True)
class ExtractConfig:
    """
    - subthemes:     kod tematu → kolejność priorytetu etykiet podtematów
    - responsible_office_from_restriction:
                     urzędy z wpisów ograniczeń zamiast z przepisów
    - hide_logo:     ukryj herb kantonu w informacjach ogólnych
    - language:      język wyświetlania tekstów wielojęzycznych
    """
    subthemes: dict[str, tuple[str, ...]] = field(default_factory=dict)
    responsible_office_from_restriction: bool = False
    hide_logo: bool = False
    language: str = DEFAULT_LANGUAGE

    def subtheme_order(self, code: str) -> tuple[str, ...] | None:
        """Skonfigurowana kolejność podtematów dla kodu lub None."""
        return self.subthemes.get(code)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractConfig":
        """
        Buduje konfigurację z już wczytanego słownika.

        Raises:
            ConfigError: naruszenia CONFIG_SCHEMA (wszystkie naraz).
        """
        validator = jsonschema.Draft202012Validator(CONFIG_SCHEMA)
        problems = [
            ("/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/")
            + f": {e.message}"
            for e in sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
        ]
        if problems:
            raise ConfigError(problems)

        return cls(
            subthemes={code: tuple(order) for code, order in data.get("subthemes", {}).items()},
            responsible_office_from_restriction=data.get("responsibleOfficeFromRestriction", False),
            hide_logo=data.get("hideLogo", False),
            language=data.get("language", DEFAULT_LANGUAGE),
        )


def load_config(
    path: str | pathlib.Path | None = None,
    language: str | None = None,
) -> ExtractConfig:
    """
    Wczytuje konfigurację.

    Kolejność źródeł języka: argument language > OEREB_LANG > plik > "de".
    OEREB_LANG z pliku .env (wczytanego przy imporcie z override=True)
    wygrywa z wartością wyeksportowaną w powłoce.
    Bez ścieżki (i bez OEREB_CONFIG) zwraca konfigurację domyślną.

    Raises:
        ConfigError: plik nie jest poprawnym JSON lub narusza schemat.
    """
    path = path or os.getenv(_ENV_CONFIG)
    data: dict[str, Any] = {}
    if path:
        try:
            data = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError([f"/: niepoprawny JSON ({e})"]) from e
        except OSError as e:
            raise ConfigError([f"/: nie można odczytać pliku {path} ({e.strerror})"]) from e

    config = ExtractConfig.from_dict(data)

    override = language or os.getenv(_ENV_LANG)
    if override:
        config = replace(config, language=override)
    return config
