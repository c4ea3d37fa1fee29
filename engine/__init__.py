"""
engine — rozstrzyganie tematów, klasyfikacja przepisów, agregacja legendy,
synteza warstw i składanie modelu prezentacji.

Publiczne API:
  resolve_theme_entries(entries, code, subcode, order)  -> ThemeSelection
  classify_provisions(entries, office_from_restriction) -> ProvisionDocuments
  aggregate_legend(selection)                           -> list[SubthemeLegend]
  parse_service_reference(url)                          -> ServiceReference
  synthesize_layers(code, subcode, entries)             -> list[OverlayLayerDescriptor]
  build_view_model(extract, config)                     -> ViewModel
  theme_contents(extract, code, subcode, config)        -> ThemeContents
  section_contents(view_model, name)                    -> list
  ExtractConfig, load_config(path, language)            konfiguracja
  ExpansionState, toggle_section/theme/legend           stan rozwinięcia
  ExtractSession                                        stan + rejestr warstw
  LayerRegistry, InMemoryLayerRegistry                  kontrakt rejestru warstw
"""

from .config import ExtractConfig, load_config
from .layers import layer_opacity, parse_service_reference, synthesize_layers
from .legend import aggregate_legend
from .provisions import classify_provisions, provision_label
from .registry import InMemoryLayerRegistry, LayerRegistry
from .session import ExtractSession
from .state import ExpansionState, Phase, toggle_legend, toggle_section, toggle_theme
from .themes import resolve_theme_entries
from .types import ServiceReference, ThemeSelection
from .view_model import (
    build_view_model,
    general_information,
    section_contents,
    theme_contents,
)

__all__ = [
    "ExtractConfig",
    "load_config",
    "layer_opacity",
    "parse_service_reference",
    "synthesize_layers",
    "aggregate_legend",
    "classify_provisions",
    "provision_label",
    "InMemoryLayerRegistry",
    "LayerRegistry",
    "ExtractSession",
    "ExpansionState",
    "Phase",
    "toggle_legend",
    "toggle_section",
    "toggle_theme",
    "resolve_theme_entries",
    "ServiceReference",
    "ThemeSelection",
    "build_view_model",
    "general_information",
    "section_contents",
    "theme_contents",
]
