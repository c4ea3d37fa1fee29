"""
conftest.py — wspólne fixtures testów silnika wyciągów ÖREB.

Dwa równoważne dokumenty: EXTRACT_JSON (kodowanie obiektowe) i EXTRACT_XML
(przestrzenie nazw, wartości percent-encoded, LocalisedText). Po
załadowaniu oba muszą dać identyczny Extract.

Zawartość (temat ch.Nutzungsplanung, bez SubCode):
  wpis 1  Grundnutzung,            symbol w2,  AreaShare 10, PartInPercent 2.5
  wpis 2  Grundnutzung,            symbol w2,  AreaShare 15, PartInPercent 3.5
  wpis 3  Überlagernde Festlegung, symbol obs, LengthShare 40
oraz temat ch.SO.Einzelschutz:ch.SO.Denkmalschutz (wpis 4, NrOfPoints 2,
bez mapy, przepis o nieznanym rodzaju).
"""

from __future__ import annotations

import copy
import os
import sys
from typing import Any

import pytest
from hypothesis import HealthCheck, settings

# ---------------------------------------------------------------------------
# Katalog główny projektu na sys.path przed importami pakietów.
# ---------------------------------------------------------------------------
_ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

settings.register_profile(
    "ci",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("ci")


# ---------------------------------------------------------------------------
# Dokument JSON
# ---------------------------------------------------------------------------

WMS_GRUNDNUTZUNG = (
    "https://wms.example.ch/wms?SERVICE=WMS&VERSION=1.3.0"
    "&LAYERS=np_grundnutzung&FORMAT=image/png&BBOX=1,2,3,4"
)
WMS_UEBERLAGERND = (
    "https://wms.example.ch/wms?SERVICE=WMS&VERSION=1.3.0"
    "&LAYERS=np_ueberlagernd&FORMAT=image/png&BBOX=1,2,3,4"
)


def lt(**texts: str) -> list[dict[str, str]]:
    """lt(de="Haus", fr="Maison") → [{"Language": "de", "Text": "Haus"}, ...]."""
    return [{"Language": lang, "Text": text} for lang, text in texts.items()]


def _office(name: str, link: str) -> dict[str, Any]:
    return {"Name": lt(de=name), "OfficeAtWeb": link}


_GEMEINDE = _office("Gemeinde Musterhausen", "https://musterhausen.example.ch")
_KANTON = _office("Kanton Solothurn", "https://so.example.ch")
_ARP = _office("Amt für Raumplanung", "https://arp.example.ch")
_ADA = _office("Amt für Denkmalpflege", "https://ada.example.ch")
_BAK = _office("Bundesamt für Kultur", "https://bak.example.ch")

_NUTZUNGSPLANUNG = {"Code": "ch.Nutzungsplanung", "Text": lt(de="Nutzungsplanung", fr="Plans d'affectation")}
_DENKMALSCHUTZ = {
    "Code": "ch.SO.Einzelschutz",
    "SubCode": "ch.SO.Denkmalschutz",
    "Text": lt(de="Denkmalschutz"),
}
_IN_KRAFT = {"Code": "inKraft", "Text": lt(de="in Kraft")}


def _build_json() -> dict[str, Any]:
    zonenreglement = {
        "Type": {"Code": "LegalProvision"},
        "Title": lt(de="Zonenreglement"),
        "OfficialNumber": "ZR-1",
        "TextAtWeb": "https://oereb.example.ch/docs/zr.pdf",
        "Index": 2,
        "ResponsibleOffice": _GEMEINDE,
    }
    pbg = {
        "Type": {"Code": "Law"},
        "Title": lt(de="Planungs- und Baugesetz"),
        "Abbreviation": lt(de="PBG"),
        "OfficialNumber": "BGS 711.1",
        "TextAtWeb": "https://oereb.example.ch/docs/pbg.pdf",
        "Index": 1,
        "ResponsibleOffice": _KANTON,
    }
    zonenreglement_2020 = dict(zonenreglement, Title=lt(de="Zonenreglement 2020"))
    merkblatt = {
        "Type": {"Code": "Hint"},
        "Title": lt(de="Merkblatt Ortsbild"),
        "TextAtWeb": "https://oereb.example.ch/docs/merkblatt.pdf",
        "Index": 1,
        "ResponsibleOffice": _GEMEINDE,
    }
    sonstiges = {
        "Type": {"Code": "Other"},
        "Title": lt(de="Sonstiges"),
        "TextAtWeb": "https://oereb.example.ch/docs/sonstiges.pdf",
        "Index": 0,
        "ResponsibleOffice": _BAK,
    }

    restrictions = [
        {
            "Theme": _NUTZUNGSPLANUNG,
            "SubTheme": "Grundnutzung",
            "Lawstatus": _IN_KRAFT,
            "LegendText": lt(de="Wohnzone W2"),
            "SymbolRef": "https://oereb.example.ch/symbol/w2.png",
            "AreaShare": 10,
            "PartInPercent": 2.5,
            "Map": {
                "ReferenceWMS": WMS_GRUNDNUTZUNG,
                "LegendAtWeb": "https://oereb.example.ch/legend/grundnutzung.png",
                "layerOpacity": 0.5,
            },
            "ResponsibleOffice": _ARP,
            "LegalProvisions": [zonenreglement, pbg],
        },
        {
            "Theme": _NUTZUNGSPLANUNG,
            "SubTheme": "Grundnutzung",
            "Lawstatus": _IN_KRAFT,
            "LegendText": lt(de="Wohnzone W2"),
            "SymbolRef": "https://oereb.example.ch/symbol/w2.png",
            "AreaShare": 15,
            "PartInPercent": 3.5,
            "Map": {
                "ReferenceWMS": WMS_GRUNDNUTZUNG,
                "LegendAtWeb": "https://oereb.example.ch/legend/grundnutzung.png",
                "layerOpacity": 0.5,
            },
            "ResponsibleOffice": _ARP,
            "LegalProvisions": [zonenreglement_2020],
        },
        {
            "Theme": _NUTZUNGSPLANUNG,
            "SubTheme": "Überlagernde Festlegung",
            "Lawstatus": _IN_KRAFT,
            "LegendText": lt(de="Ortsbildschutzzone"),
            "SymbolRef": "https://oereb.example.ch/symbol/obs.png",
            "LengthShare": 40,
            "Map": {
                "ReferenceWMS": WMS_UEBERLAGERND,
                "LegendAtWeb": "https://oereb.example.ch/legend/ueberlagernd.png",
            },
            "ResponsibleOffice": _ADA,
            "LegalProvisions": [merkblatt],
        },
        {
            "Theme": _DENKMALSCHUTZ,
            "Lawstatus": _IN_KRAFT,
            "LegendText": lt(de="Geschütztes Objekt"),
            "SymbolRef": "https://oereb.example.ch/symbol/denkmal.png",
            "NrOfPoints": 2,
            "ResponsibleOffice": _ADA,
            "LegalProvisions": [sonstiges],
        },
    ]

    return {
        "GetExtractByIdResponse": {
            "extract": {
                "CantonalLogoRef": "https://oereb.example.ch/logo/so.png",
                "UpdateDateCS": "2024-03-01T10:00:00",
                "GeneralInformation": lt(de="Der Auszug gibt Auskunft über ÖREB."),
                "PLRCadastreAuthority": {
                    "Name": lt(de="Amt für Geoinformation", fr="Service de géoinformation"),
                    "OfficeAtWeb": lt(de="https://agi.example.ch"),
                    "Street": "Werkhofstrasse",
                    "Number": "59",
                    "PostalCode": "4509",
                    "City": "Solothurn",
                },
                "ExclusionOfLiability": [
                    {"Title": lt(de="Haftungsausschluss"), "Content": lt(de="Keine Gewähr.")},
                ],
                "Disclaimer": [
                    {"Title": lt(de="Hinweis"), "Content": lt(de="Nur zur Information.")},
                ],
                "ConcernedTheme": [_NUTZUNGSPLANUNG, _DENKMALSCHUTZ],
                "NotConcernedTheme": [
                    {"Code": "ch.Laermempfindlichkeitsstufen", "Text": lt(de="Lärmempfindlichkeitsstufen")},
                ],
                "ThemeWithoutData": [
                    {"Code": "ch.Grundwasserschutzzonen", "Text": lt(de="Grundwasserschutzzonen")},
                ],
                "RealEstate": {"RestrictionOnLandownership": restrictions},
            }
        }
    }


# ---------------------------------------------------------------------------
# Ten sam dokument w XML
# ---------------------------------------------------------------------------

def _lt_xml(tag: str, **texts: str) -> str:
    inner = "".join(
        f"<data:LocalisedText><data:Language>{lang}</data:Language>"
        f"<data:Text>{text}</data:Text></data:LocalisedText>"
        for lang, text in texts.items()
    )
    return f"<data:{tag}>{inner}</data:{tag}>"


def _office_xml(tag: str, name: str, link: str) -> str:
    return f"<data:{tag}>{_lt_xml('Name', de=name)}<data:OfficeAtWeb>{link}</data:OfficeAtWeb></data:{tag}>"


_NUTZUNGSPLANUNG_XML = (
    "<data:Code>ch.Nutzungsplanung</data:Code>"
    + _lt_xml("Text", de="Nutzungsplanung", fr="Plans d'affectation")
)
_DENKMALSCHUTZ_XML = (
    "<data:Code>ch.SO.Einzelschutz</data:Code>"
    "<data:SubCode>ch.SO.Denkmalschutz</data:SubCode>"
    + _lt_xml("Text", de="Denkmalschutz")
)
_IN_KRAFT_XML = "<data:Lawstatus><data:Code>inKraft</data:Code>" + _lt_xml("Text", de="in Kraft") + "</data:Lawstatus>"

# & w URL jako &amp;, "/" w FORMAT i spacje/umlauty jako sekwencje %XX
_WMS_GRUNDNUTZUNG_XML = (
    "https://wms.example.ch/wms?SERVICE=WMS&amp;VERSION=1.3.0"
    "&amp;LAYERS=np_grundnutzung&amp;FORMAT=image%2Fpng&amp;BBOX=1,2,3,4"
)
_WMS_UEBERLAGERND_XML = (
    "https://wms.example.ch/wms?SERVICE=WMS&amp;VERSION=1.3.0"
    "&amp;LAYERS=np_ueberlagernd&amp;FORMAT=image%2Fpng&amp;BBOX=1,2,3,4"
)


def _provision_xml(type_code: str, title: str, link: str, index: str, office: tuple[str, str],
                   number: str = "", abbreviation: str = "") -> str:
    parts = [
        "<data:LegalProvisions>",
        f"<data:Type><data:Code>{type_code}</data:Code></data:Type>",
        _lt_xml("Title", de=title),
    ]
    if abbreviation:
        parts.append(_lt_xml("Abbreviation", de=abbreviation))
    if number:
        parts.append(f"<data:OfficialNumber>{number}</data:OfficialNumber>")
    parts += [
        f"<data:TextAtWeb>{link}</data:TextAtWeb>",
        f"<data:Index>{index}</data:Index>",
        _office_xml("ResponsibleOffice", *office),
        "</data:LegalProvisions>",
    ]
    return "".join(parts)


_GEMEINDE_XML = ("Gemeinde Musterhausen", "https://musterhausen.example.ch")

EXTRACT_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<GetExtractByIdResponse xmlns="http://schemas.geo.admin.ch/V_D/OeREB/2.0/Extract"
    xmlns:data="http://schemas.geo.admin.ch/V_D/OeREB/2.0/ExtractData">
  <Extract>
    <data:CantonalLogoRef>https://oereb.example.ch/logo/so.png</data:CantonalLogoRef>
    <data:UpdateDateCS>2024-03-01T10:00:00</data:UpdateDateCS>
    {_lt_xml("GeneralInformation", de="Der Auszug gibt Auskunft über ÖREB.")}
    <data:PLRCadastreAuthority>
      {_lt_xml("Name", de="Amt für Geoinformation", fr="Service de géoinformation")}
      {_lt_xml("OfficeAtWeb", de="https://agi.example.ch")}
      <data:Street>Werkhofstrasse</data:Street>
      <data:Number>59</data:Number>
      <data:PostalCode>4509</data:PostalCode>
      <data:City>Solothurn</data:City>
    </data:PLRCadastreAuthority>
    <data:ExclusionOfLiability>
      {_lt_xml("Title", de="Haftungsausschluss")}
      {_lt_xml("Content", de="Keine Gewähr.")}
    </data:ExclusionOfLiability>
    <data:Disclaimer>
      {_lt_xml("Title", de="Hinweis")}
      {_lt_xml("Content", de="Nur zur Information.")}
    </data:Disclaimer>
    <data:ConcernedTheme>{_NUTZUNGSPLANUNG_XML}</data:ConcernedTheme>
    <data:ConcernedTheme>{_DENKMALSCHUTZ_XML}</data:ConcernedTheme>
    <data:NotConcernedTheme>
      <data:Code>ch.Laermempfindlichkeitsstufen</data:Code>
      {_lt_xml("Text", de="Lärmempfindlichkeitsstufen")}
    </data:NotConcernedTheme>
    <data:ThemeWithoutData>
      <data:Code>ch.Grundwasserschutzzonen</data:Code>
      {_lt_xml("Text", de="Grundwasserschutzzonen")}
    </data:ThemeWithoutData>
    <data:RealEstate>
      <data:RestrictionOnLandownership>
        <data:Theme>{_NUTZUNGSPLANUNG_XML}</data:Theme>
        <data:SubTheme>Grundnutzung</data:SubTheme>
        {_IN_KRAFT_XML}
        {_lt_xml("LegendText", de="Wohnzone W2")}
        <data:SymbolRef>https://oereb.example.ch/symbol/w2.png</data:SymbolRef>
        <data:AreaShare>10</data:AreaShare>
        <data:PartInPercent>2.5</data:PartInPercent>
        <data:Map>
          <data:ReferenceWMS>{_WMS_GRUNDNUTZUNG_XML}</data:ReferenceWMS>
          <data:LegendAtWeb>https://oereb.example.ch/legend/grundnutzung.png</data:LegendAtWeb>
          <data:layerOpacity>0.5</data:layerOpacity>
        </data:Map>
        {_office_xml("ResponsibleOffice", "Amt für Raumplanung", "https://arp.example.ch")}
        {_provision_xml("LegalProvision", "Zonenreglement", "https://oereb.example.ch/docs/zr.pdf", "2",
                        _GEMEINDE_XML, number="ZR-1")}
        {_provision_xml("Law", "Planungs- und Baugesetz", "https://oereb.example.ch/docs/pbg.pdf", "1",
                        ("Kanton Solothurn", "https://so.example.ch"), number="BGS 711.1", abbreviation="PBG")}
      </data:RestrictionOnLandownership>
      <data:RestrictionOnLandownership>
        <data:Theme>{_NUTZUNGSPLANUNG_XML}</data:Theme>
        <data:SubTheme>Grundnutzung</data:SubTheme>
        {_IN_KRAFT_XML}
        {_lt_xml("LegendText", de="Wohnzone W2")}
        <data:SymbolRef>https://oereb.example.ch/symbol/w2.png</data:SymbolRef>
        <data:AreaShare>15</data:AreaShare>
        <data:PartInPercent>3.5</data:PartInPercent>
        <data:Map>
          <data:ReferenceWMS>{_WMS_GRUNDNUTZUNG_XML}</data:ReferenceWMS>
          <data:LegendAtWeb>https://oereb.example.ch/legend/grundnutzung.png</data:LegendAtWeb>
          <data:layerOpacity>0.5</data:layerOpacity>
        </data:Map>
        {_office_xml("ResponsibleOffice", "Amt für Raumplanung", "https://arp.example.ch")}
        {_provision_xml("LegalProvision", "Zonenreglement 2020", "https://oereb.example.ch/docs/zr.pdf", "2",
                        _GEMEINDE_XML, number="ZR-1")}
      </data:RestrictionOnLandownership>
      <data:RestrictionOnLandownership>
        <data:Theme>{_NUTZUNGSPLANUNG_XML}</data:Theme>
        <data:SubTheme>%C3%9Cberlagernde%20Festlegung</data:SubTheme>
        {_IN_KRAFT_XML}
        {_lt_xml("LegendText", de="Ortsbildschutzzone")}
        <data:SymbolRef>https://oereb.example.ch/symbol/obs.png</data:SymbolRef>
        <data:LengthShare>40</data:LengthShare>
        <data:Map>
          <data:ReferenceWMS>{_WMS_UEBERLAGERND_XML}</data:ReferenceWMS>
          <data:LegendAtWeb>https://oereb.example.ch/legend/ueberlagernd.png</data:LegendAtWeb>
        </data:Map>
        {_office_xml("ResponsibleOffice", "Amt für Denkmalpflege", "https://ada.example.ch")}
        {_provision_xml("Hint", "Merkblatt Ortsbild", "https://oereb.example.ch/docs/merkblatt.pdf", "1",
                        _GEMEINDE_XML)}
      </data:RestrictionOnLandownership>
      <data:RestrictionOnLandownership>
        <data:Theme>{_DENKMALSCHUTZ_XML}</data:Theme>
        {_IN_KRAFT_XML}
        {_lt_xml("LegendText", de="Geschütztes Objekt")}
        <data:SymbolRef>https://oereb.example.ch/symbol/denkmal.png</data:SymbolRef>
        <data:NrOfPoints>2</data:NrOfPoints>
        {_office_xml("ResponsibleOffice", "Amt für Denkmalpflege", "https://ada.example.ch")}
        {_provision_xml("Other", "Sonstiges", "https://oereb.example.ch/docs/sonstiges.pdf", "0",
                        ("Bundesamt für Kultur", "https://bak.example.ch"))}
      </data:RestrictionOnLandownership>
    </data:RealEstate>
  </Extract>
</GetExtractByIdResponse>
"""

# Konfiguracja przeglądarki z kolejnością podtematów i placeholderem
CONFIG_DATA: dict[str, Any] = {
    "subthemes": {
        "ch.Nutzungsplanung": ["Überlagernde Festlegung", "Grundnutzung", "Sondernutzung"],
    },
}


def _build_v1_json() -> dict[str, Any]:
    """Wyciąg w schemacie v1: Information zamiast LegendText, przepisy bez Type, Reference[]."""
    return {
        "GetExtractByIdResponse": {
            "extract": {
                "ConcernedTheme": [_NUTZUNGSPLANUNG],
                "RealEstate": {
                    "RestrictionOnLandownership": [
                        {
                            "Theme": _NUTZUNGSPLANUNG,
                            "SubTheme": "Grundnutzung",
                            "Lawstatus": _IN_KRAFT,
                            "SymbolRef": "A",
                            "Information": {"LocalisedText": {"Language": "de", "Text": "Wohnzone"}},
                            "AreaShare": 40,
                            "ResponsibleOffice": _ARP,
                            "LegalProvisions": [
                                {
                                    "Title": "Reglement",
                                    "TextAtWeb": "R",
                                    "ResponsibleOffice": _GEMEINDE,
                                    "Reference": [
                                        {"Title": "Gesetz", "Abbreviation": "G", "TextAtWeb": "G"},
                                    ],
                                },
                            ],
                        },
                    ],
                },
            },
        },
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Testy nie zależą od OEREB_* z otoczenia (ani z .env)."""
    monkeypatch.delenv("OEREB_LANG", raising=False)
    monkeypatch.delenv("OEREB_CONFIG", raising=False)


@pytest.fixture
def extract_json() -> dict[str, Any]:
    """Świeża kopia dokumentu JSON (test może go modyfikować)."""
    return copy.deepcopy(_build_json())


@pytest.fixture
def extract_v1_json() -> dict[str, Any]:
    return _build_v1_json()


@pytest.fixture
def extract_xml() -> str:
    return EXTRACT_XML


@pytest.fixture
def extract(extract_json):
    from normalizer import load_document
    return load_document(extract_json)


@pytest.fixture
def config():
    from engine.config import ExtractConfig
    return ExtractConfig.from_dict(CONFIG_DATA)


@pytest.fixture
def json_file(tmp_path, extract_json):
    import json
    path = tmp_path / "wyciag.json"
    path.write_text(json.dumps(extract_json, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def xml_file(tmp_path):
    path = tmp_path / "wyciag.xml"
    path.write_text(EXTRACT_XML, encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path):
    import json
    path = tmp_path / "oereb.json"
    path.write_text(json.dumps(CONFIG_DATA, ensure_ascii=False), encoding="utf-8")
    return path
