"""
xml_parser — parsowanie wyciągu ÖREB w postaci XML.

Publiczne API:
  parse_extract_xml(markup)   -> dict   (DocumentParseError przy błędzie)
"""

from .parser import ATTR_KEY, TEXT_KEY, parse_extract_xml

__all__ = [
    "ATTR_KEY",
    "TEXT_KEY",
    "parse_extract_xml",
]
