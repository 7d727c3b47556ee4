"""Theme module consolidating tokens, variants, families, and the registry."""

from .appearance import Appearance
from .codec import from_document, parse, render, to_document
from .manager import (
    ThemeRegistry,
    available_themes,
    build_default_dark_variant,
    build_default_family,
    build_default_light_variant,
    load_theme,
    theme_registry,
)
from .models import (
    NormalizedColor,
    OverrideColor,
    StandardColor,
    ThemeFamily,
    ThemeVariant,
    decode_override,
)
from .tokens import SYSTEM_TOKENS, UIColor, UIColors, system_ui_colors

__all__ = [
    "Appearance",
    "NormalizedColor",
    "OverrideColor",
    "SYSTEM_TOKENS",
    "StandardColor",
    "ThemeFamily",
    "ThemeRegistry",
    "ThemeVariant",
    "UIColor",
    "UIColors",
    "available_themes",
    "build_default_dark_variant",
    "build_default_family",
    "build_default_light_variant",
    "decode_override",
    "from_document",
    "load_theme",
    "parse",
    "render",
    "system_ui_colors",
    "theme_registry",
    "to_document",
]
