"""HSLA color value type and its hex/RGBA codec."""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from numbers import Real
from typing import Any, Tuple

from .errors import ParseError

__all__ = ["Hsla", "RgbaTuple", "hsla", "parse_hex", "format_hex"]

RgbaTuple = Tuple[float, float, float, float]

_HEX_PATTERN = re.compile(r"#(?P<rgb>[0-9a-fA-F]{6})(?P<alpha>[0-9a-fA-F]{2})?")
# Float noise left over from the RGB <-> HSL round trip must not drop a byte.
_TRUNCATION_TOLERANCE = 1e-6


def _clamp_channel(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Color channels must be real numbers, received {value!r}")
    channel = float(value)
    if math.isnan(channel):
        return 0.0
    return min(1.0, max(0.0, channel))


def _to_byte(channel: float) -> int:
    return min(255, max(0, int(channel * 255.0 + _TRUNCATION_TOLERANCE)))


@dataclass(slots=True, frozen=True)
class Hsla:
    """A color in hue/saturation/lightness/alpha space, every channel in ``[0, 1]``.

    Channels are clamped on construction, so an ``Hsla`` can never hold an
    out-of-range value. Instances are immutable; derive new colors instead of
    editing existing ones.
    """

    h: float
    s: float
    l: float  # noqa: E741
    a: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", _clamp_channel(self.h))
        object.__setattr__(self, "s", _clamp_channel(self.s))
        object.__setattr__(self, "l", _clamp_channel(self.l))
        object.__setattr__(self, "a", _clamp_channel(self.a))

    @classmethod
    def from_hex(cls, text: str) -> "Hsla":
        """Decode ``#RRGGBB`` or ``#RRGGBBAA`` into a color."""

        return parse_hex(text)

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float = 1.0) -> "Hsla":
        """Build a color from RGBA channels expressed in ``[0, 1]``."""

        red, green, blue = (_clamp_channel(channel) for channel in (r, g, b))
        hue, lightness, saturation = colorsys.rgb_to_hls(red, green, blue)
        return cls(hue, saturation, lightness, a)

    def to_rgba(self) -> RgbaTuple:
        """Return the color as an ``(r, g, b, a)`` tuple in ``[0, 1]``."""

        red, green, blue = colorsys.hls_to_rgb(self.h, self.l, self.s)
        return (red, green, blue, self.a)

    def to_hex(self) -> str:
        """Encode as an uppercase ``#RRGGBBAA`` literal."""

        return format_hex(self)

    def to_list(self) -> list[float]:
        return [self.h, self.s, self.l, self.a]

    def with_alpha(self, alpha: float) -> "Hsla":
        return Hsla(self.h, self.s, self.l, alpha)


def hsla(h: float, s: float, l: float, a: float = 1.0) -> Hsla:  # noqa: E741
    """Shorthand constructor mirroring :class:`Hsla`."""

    return Hsla(h, s, l, a)


def parse_hex(text: str) -> Hsla:
    """Decode a hex literal, raising :class:`ParseError` when it is malformed.

    Hex digits are case-insensitive and a missing alpha pair means fully
    opaque. Each byte is normalized by 255 before the RGB triple is converted
    to HSL.
    """

    if not isinstance(text, str):
        raise ParseError(f"Hex colors must be strings, received {type(text).__name__}")
    match = _HEX_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"Invalid hex color {text!r}; expected #RRGGBB or #RRGGBBAA")
    rgb = match.group("rgb")
    alpha = match.group("alpha") or "FF"
    red, green, blue = (int(rgb[index : index + 2], 16) / 255.0 for index in range(0, 6, 2))
    return Hsla.from_rgba(red, green, blue, int(alpha, 16) / 255.0)


def format_hex(color: Hsla) -> str:
    """Encode ``color`` as ``#RRGGBBAA``, truncating each channel to 8 bits."""

    return "#" + "".join(f"{_to_byte(channel):02X}" for channel in color.to_rgba())
