"""hueforge: HSLA colors, twelve-step scales, semantic tokens, and theme variants."""

from .core import (
    BoundsError,
    ColorScale,
    ColorScaleSet,
    ColorScaleSets,
    Hsla,
    NotFoundError,
    ParseError,
    ScaleRole,
    ThemeError,
    hsla,
)
from .theme import (
    Appearance,
    NormalizedColor,
    StandardColor,
    ThemeFamily,
    ThemeRegistry,
    ThemeVariant,
    UIColor,
    UIColors,
    parse,
    render,
    system_ui_colors,
    theme_registry,
)

__all__ = [
    "Appearance",
    "BoundsError",
    "ColorScale",
    "ColorScaleSet",
    "ColorScaleSets",
    "Hsla",
    "NormalizedColor",
    "NotFoundError",
    "ParseError",
    "ScaleRole",
    "StandardColor",
    "ThemeError",
    "ThemeFamily",
    "ThemeRegistry",
    "ThemeVariant",
    "UIColor",
    "UIColors",
    "hsla",
    "parse",
    "render",
    "system_ui_colors",
    "theme_registry",
]

__version__ = "0.1.0"
