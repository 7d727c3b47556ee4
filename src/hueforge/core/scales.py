"""Fixed twelve-step color scales and the scale sets built from them."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, overload

from .color import Hsla, parse_hex
from .errors import NotFoundError

__all__ = [
    "SCALE_STEPS",
    "ColorScale",
    "ColorScaleSet",
    "ColorScaleSets",
    "ScaleRole",
    "default_color_scale_sets",
]

LOGGER = logging.getLogger(__name__)

SCALE_STEPS = 12


class ColorScale(Sequence[Hsla]):
    """Immutable ordered gradient of exactly twelve colors.

    Step order encodes emphasis: step 1 is the subtlest background and step 12
    the highest-contrast text. The sequence is never re-sorted and exposes no
    operation that could change its length.
    """

    __slots__ = ("_colors",)

    def __init__(self, colors: Iterable[Hsla]) -> None:
        values = tuple(colors)
        if len(values) != SCALE_STEPS:
            raise ValueError(f"A color scale requires exactly {SCALE_STEPS} colors, received {len(values)}")
        for value in values:
            if not isinstance(value, Hsla):
                raise TypeError(f"Color scales hold Hsla values, received {value!r}")
        self._colors: tuple[Hsla, ...] = values

    @classmethod
    def from_hex(cls, values: Iterable[str]) -> "ColorScale":
        return cls(parse_hex(value) for value in values)

    @classmethod
    def uniform(cls, color: Hsla) -> "ColorScale":
        """Return a scale repeating ``color`` on every step."""

        return cls([color] * SCALE_STEPS)

    @overload
    def __getitem__(self, index: int) -> Hsla: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Hsla, ...]: ...

    def __getitem__(self, index: int | slice) -> Hsla | tuple[Hsla, ...]:
        return self._colors[index]

    def __len__(self) -> int:
        return SCALE_STEPS

    def __iter__(self) -> Iterator[Hsla]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorScale):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"ColorScale({[color.to_hex() for color in self._colors]!r})"

    def step(self, number: int) -> Hsla:
        """Return the color at 1-based ``number``."""

        if not 1 <= number <= SCALE_STEPS:
            raise NotFoundError("scale step", number)
        return self._colors[number - 1]

    def to_hex(self) -> List[str]:
        return [color.to_hex() for color in self._colors]


class ScaleRole(Enum):
    """The four scale roles carried by every :class:`ColorScaleSet`."""

    LIGHT = "light"
    DARK = "dark"
    LIGHT_ALPHA = "light_alpha"
    DARK_ALPHA = "dark_alpha"

    @classmethod
    def from_name(cls, name: str) -> "ScaleRole":
        key = name.strip().lower() if isinstance(name, str) else name
        for role in cls:
            if role.value == key:
                return role
        raise NotFoundError("scale role", name)


@dataclass(slots=True, frozen=True)
class ColorScaleSet:
    """Four related scales grouped under one name.

    ``light``/``dark`` hold solid colors; ``light_alpha``/``dark_alpha`` hold
    the translucent equivalents for layering over arbitrary backgrounds.
    """

    name: str
    light: ColorScale
    dark: ColorScale
    light_alpha: ColorScale
    dark_alpha: ColorScale

    def __post_init__(self) -> None:
        for role in ScaleRole:
            if not isinstance(getattr(self, role.value), ColorScale):
                raise TypeError(f"Scale set '{self.name}' requires a ColorScale for '{role.value}'")

    def scale(self, role: ScaleRole | str) -> ColorScale:
        resolved = role if isinstance(role, ScaleRole) else ScaleRole.from_name(role)
        return getattr(self, resolved.value)


class ColorScaleSets:
    """Name-keyed collection of scale sets; inserting a known name replaces it."""

    def __init__(self, sets: Iterable[ColorScaleSet] | None = None) -> None:
        self._sets: Dict[str, ColorScaleSet] = {}
        for scale_set in sets or ():
            self.add(scale_set)

    def add(self, scale_set: ColorScaleSet) -> None:
        if scale_set.name in self._sets:
            LOGGER.debug("Replacing color scale set '%s'", scale_set.name)
        self._sets[scale_set.name] = scale_set

    def get(self, name: str) -> ColorScaleSet | None:
        return self._sets.get(name)

    def require(self, name: str) -> ColorScaleSet:
        scale_set = self._sets.get(name)
        if scale_set is None:
            raise NotFoundError("color scale set", name)
        return scale_set

    def names(self) -> List[str]:
        return sorted(self._sets)

    def copy(self) -> "ColorScaleSets":
        return ColorScaleSets(self)

    def __iter__(self) -> Iterator[ColorScaleSet]:
        for name in sorted(self._sets):
            yield self._sets[name]

    def __len__(self) -> int:
        return len(self._sets)

    def __contains__(self, name: object) -> bool:
        return name in self._sets

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorScaleSets):
            return NotImplemented
        return self._sets == other._sets

    def __repr__(self) -> str:
        return f"ColorScaleSets({self.names()!r})"


_NEUTRAL_HEX: Dict[str, tuple[str, ...]] = {
    "light": (
        "#FCFCFC", "#F9F9F9", "#F0F0F0", "#E8E8E8", "#E0E0E0", "#D9D9D9",
        "#CECECE", "#BBBBBB", "#8D8D8D", "#838383", "#646464", "#202020",
    ),
    "dark": (
        "#111111", "#191919", "#222222", "#2A2A2A", "#313131", "#3A3A3A",
        "#484848", "#606060", "#6E6E6E", "#7B7B7B", "#B4B4B4", "#EEEEEE",
    ),
    "light_alpha": (
        "#00000003", "#00000006", "#0000000F", "#00000017", "#0000001F", "#00000026",
        "#00000031", "#00000044", "#00000072", "#0000007C", "#0000009B", "#000000DF",
    ),
    "dark_alpha": (
        "#00000000", "#FFFFFF09", "#FFFFFF12", "#FFFFFF1B", "#FFFFFF22", "#FFFFFF2C",
        "#FFFFFF3B", "#FFFFFF55", "#FFFFFF64", "#FFFFFF72", "#FFFFFFAF", "#FFFFFFED",
    ),
}

_ACCENT_HEX: Dict[str, tuple[str, ...]] = {
    "light": (
        "#FBFDFF", "#F4FAFF", "#E6F4FE", "#D5EFFF", "#C2E5FF", "#ACD8FC",
        "#8EC8F6", "#5EB1EF", "#0090FF", "#0588F0", "#0D74CE", "#113264",
    ),
    "dark": (
        "#0D1520", "#111927", "#0D2847", "#003362", "#004074", "#104D87",
        "#205D9E", "#2870BD", "#0090FF", "#3B9EFF", "#70B8FF", "#C2E6FF",
    ),
    "light_alpha": (
        "#0080FF04", "#008CFF0B", "#008FF519", "#009EFF2A", "#0093FF3D", "#0088F653",
        "#0083EB71", "#0084E6A1", "#0090FFFF", "#0086F0FA", "#006DCBF2", "#002359EE",
    ),
    "dark_alpha": (
        "#004DF211", "#1166FB18", "#0077FF3A", "#0075FF57", "#0081FD6B", "#0F89FD7F",
        "#2A91FE98", "#3094FEB9", "#0090FFFF", "#3B9EFFFF", "#70B8FFFF", "#C2E6FFFF",
    ),
}


def _build_scale_set(name: str, palette: Dict[str, tuple[str, ...]]) -> ColorScaleSet:
    return ColorScaleSet(
        name=name,
        light=ColorScale.from_hex(palette["light"]),
        dark=ColorScale.from_hex(palette["dark"]),
        light_alpha=ColorScale.from_hex(palette["light_alpha"]),
        dark_alpha=ColorScale.from_hex(palette["dark_alpha"]),
    )


def default_color_scale_sets() -> ColorScaleSets:
    """Return the built-in ``neutral`` and ``accent`` scale sets."""

    return ColorScaleSets(
        [
            _build_scale_set("neutral", _NEUTRAL_HEX),
            _build_scale_set("accent", _ACCENT_HEX),
        ]
    )
