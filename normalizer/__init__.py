"""
normalizer — akcesory, normalizacja dokumentu i ładowanie Extract.

Publiczne API:
  ensure_array(value)                    -> list
  ensure_number(value)                   -> float
  localized_text(node, language)         -> str
  field(node, *path)                     -> Any | None
  normalize_document(source)             -> Mapping   (kształt kanoniczny)
  extract_node(doc)                      -> Mapping
  read_source(path)                      -> SourceDocument
  load_extract(doc, language)            -> Extract
  load_document(source, language)        -> Extract
  StructuredDocument, MarkupDocument     warianty wejścia
"""

from .accessors import ensure_array, ensure_number, field, localized_text
from .document import (
    MarkupDocument,
    SourceDocument,
    StructuredDocument,
    as_source,
    extract_node,
    normalize_document,
    read_source,
)
from .loader import load_document, load_extract

__all__ = [
    "ensure_array",
    "ensure_number",
    "field",
    "localized_text",
    "MarkupDocument",
    "SourceDocument",
    "StructuredDocument",
    "as_source",
    "extract_node",
    "normalize_document",
    "read_source",
    "load_document",
    "load_extract",
]
