"""
data_model — struktury danych wyciągu ÖREB i modelu prezentacji.

Użycie:
  from data_model import Extract, RestrictionEntry, LegendBucket, ...

Moduły:
  common    — ProvisionKind, ThemeId, stałe (DEFAULT_LANGUAGE, RESPONSE_KEY)
  errors    — OerebError, DocumentParseError, MalformedServiceReference, ConfigError
  extract   — Extract, Theme, RestrictionEntry, LegalProvision,
              ResponsibleOffice, MapReference, Authority, TextBlock
  documents — DocumentLink, ProvisionDocuments
  legend    — LegendBucket, SubthemeLegend
  layers    — OverlayLayerDescriptor
  view      — ViewModel, Section, SectionName, ThemeItem,
              GeneralInformation, ThemeContents
"""

from .common import (
    DEFAULT_LANGUAGE,
    OPAQUE,
    RESPONSE_KEY,
    ProvisionKind,
    ThemeId,
    parse_theme_id,
    theme_id,
)
from .errors import (
    ConfigError,
    DocumentParseError,
    MalformedServiceReference,
    OerebError,
)
from .extract import (
    Authority,
    Extract,
    LegalProvision,
    MapReference,
    ResponsibleOffice,
    RestrictionEntry,
    TextBlock,
    Theme,
)
from .documents import (
    DocumentLink,
    ProvisionDocuments,
)
from .legend import (
    SHARE_FIELDS,
    LegendBucket,
    SubthemeLegend,
)
from .layers import (
    OverlayLayerDescriptor,
)
from .view import (
    GeneralInformation,
    Section,
    SectionName,
    ThemeContents,
    ThemeItem,
    ViewModel,
)

__all__ = [
    # common
    "DEFAULT_LANGUAGE",
    "OPAQUE",
    "RESPONSE_KEY",
    "ProvisionKind",
    "ThemeId",
    "parse_theme_id",
    "theme_id",
    # errors
    "ConfigError",
    "DocumentParseError",
    "MalformedServiceReference",
    "OerebError",
    # extract
    "Authority",
    "Extract",
    "LegalProvision",
    "MapReference",
    "ResponsibleOffice",
    "RestrictionEntry",
    "TextBlock",
    "Theme",
    # documents
    "DocumentLink",
    "ProvisionDocuments",
    # legend
    "SHARE_FIELDS",
    "LegendBucket",
    "SubthemeLegend",
    # layers
    "OverlayLayerDescriptor",
    # view
    "GeneralInformation",
    "Section",
    "SectionName",
    "ThemeContents",
    "ThemeItem",
    "ViewModel",
]
