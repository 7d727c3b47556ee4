"""Core color types: the HSLA value, its codec, scales, and errors."""

from .color import Hsla, hsla, format_hex, parse_hex
from .errors import BoundsError, NotFoundError, ParseError, ThemeError
from .scales import (
    SCALE_STEPS,
    ColorScale,
    ColorScaleSet,
    ColorScaleSets,
    ScaleRole,
    default_color_scale_sets,
)

__all__ = [
    "SCALE_STEPS",
    "BoundsError",
    "ColorScale",
    "ColorScaleSet",
    "ColorScaleSets",
    "Hsla",
    "NotFoundError",
    "ParseError",
    "ScaleRole",
    "ThemeError",
    "default_color_scale_sets",
    "format_hex",
    "hsla",
    "parse_hex",
]
