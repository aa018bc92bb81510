"""Public entrypoint for the colorscheme library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``colorscheme`` instead of individual
submodules.
"""

from .api import SchemeResult, generate_color_scheme, generate_color_scheme_from_colors
from .assembly import Scheme, assemble_scheme, scheme_key
from .color import Color
from .errors import InvalidColorCountError, MalformedHexError, SchemeError
from .export import (
    ExportFormat,
    export_scheme,
    export_scheme_to_json,
    generate_css_custom_properties,
    scheme_to_json,
)
from .harmony import ColorStrategy, calibrate_accent_hue
from .roles import FixedVariant, RoleVariant
from .seeds import SchemePolicy, SeedPalette
from .tables import DEFAULT_CONFIG, SchemeConfig
from .tonal import TonalPalette
from .variant import SchemeVariant

__all__ = [
    "Color",
    "TonalPalette",
    "Scheme",
    "SchemeResult",
    "SchemeConfig",
    "DEFAULT_CONFIG",
    "SchemePolicy",
    "SchemeVariant",
    "ColorStrategy",
    "SeedPalette",
    "RoleVariant",
    "FixedVariant",
    "SchemeError",
    "InvalidColorCountError",
    "MalformedHexError",
    "ExportFormat",
    "generate_color_scheme",
    "generate_color_scheme_from_colors",
    "generate_css_custom_properties",
    "scheme_to_json",
    "export_scheme",
    "export_scheme_to_json",
    "assemble_scheme",
    "scheme_key",
    "calibrate_accent_hue",
]
