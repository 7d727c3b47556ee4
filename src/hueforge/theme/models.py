"""Data structures describing theme variants, their overrides, and families."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping, Union

from ..core.color import Hsla
from ..core.errors import BoundsError, NotFoundError, ParseError
from ..core.scales import ColorScaleSet, ColorScaleSets
from .appearance import Appearance
from .tokens import UIColor, UIColors, system_ui_colors

LOGGER = logging.getLogger(__name__)

# field -> inclusive upper bound; every lower bound is 0
_STANDARD_DOMAINS: tuple[tuple[str, int], ...] = (("h", 360), ("s", 100), ("l", 100), ("a", 100))


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _normalized_channel(name: str, value: Any) -> float:
    if not _is_number(value):
        raise TypeError(f"Normalized channel '{name}' must be a real number, received {value!r}")
    return float(value)


def _check_standard_bounds(values: Sequence[int], token: str | None = None) -> None:
    for (name, upper), value in zip(_STANDARD_DOMAINS, values):
        if not _is_integer(value):
            raise ParseError(f"Standard channel '{name}' must be an integer, received {value!r}")
        if value < 0 or value > upper:
            raise BoundsError(name, value, 0, upper, token=token)


@dataclass(slots=True, frozen=True)
class StandardColor:
    """Override written as integers: ``h`` in degrees, ``s``/``l``/``a`` in percent."""

    h: int
    s: int
    l: int  # noqa: E741
    a: int

    def __post_init__(self) -> None:
        _check_standard_bounds(self.to_list())

    def to_hsla(self) -> Hsla:
        return Hsla(self.h / 360, self.s / 100, self.l / 100, self.a / 100)

    def to_list(self) -> list[int]:
        return [self.h, self.s, self.l, self.a]


@dataclass(slots=True, frozen=True)
class NormalizedColor:
    """Override written as floats that are expected to sit in ``[0, 1]``.

    Values are stored as written and only clamped when converted to
    :class:`Hsla`, so re-serializing an override never changes it.
    """

    h: float
    s: float
    l: float  # noqa: E741
    a: float

    def __post_init__(self) -> None:
        # Always floats, so rendering never produces the integer encoding.
        for name in ("h", "s", "l", "a"):
            object.__setattr__(self, name, _normalized_channel(name, getattr(self, name)))

    def to_hsla(self) -> Hsla:
        return Hsla(self.h, self.s, self.l, self.a)

    def to_list(self) -> list[float]:
        return [self.h, self.s, self.l, self.a]

    @classmethod
    def from_hsla(cls, color: Hsla) -> "NormalizedColor":
        return cls(color.h, color.s, color.l, color.a)


OverrideColor = Union[StandardColor, NormalizedColor]


def decode_override(token: str, value: Any) -> OverrideColor:
    """Decode one override value, probing the integer encoding first.

    Four integers select the standard encoding, whose bounds errors are final.
    Four numbers of any other mix select the normalized encoding. Anything
    else fails with the standard encoding's diagnostic.
    """

    if isinstance(value, (StandardColor, NormalizedColor)):
        return value
    if isinstance(value, Hsla):
        return NormalizedColor.from_hsla(value)
    integer_error = ParseError(
        f"Override '{token}' must be an array of four integers [h, s, l, a] "
        f"or four floats in [0, 1], received {value!r}"
    )
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 4:
        raise integer_error
    items = list(value)
    if all(_is_integer(item) for item in items):
        _check_standard_bounds(items, token)
        return StandardColor(*items)
    if all(_is_number(item) for item in items):
        return NormalizedColor(*items)
    raise integer_error


def _sorted_overrides(overrides: Mapping[str, Any] | None) -> Dict[str, OverrideColor]:
    decoded: Dict[str, OverrideColor] = {}
    for token, value in (overrides or {}).items():
        if not isinstance(token, str) or not token:
            raise ParseError(f"Override token names must be non-empty strings, received {token!r}")
        decoded[token] = decode_override(token, value)
    return {token: decoded[token] for token in sorted(decoded)}


@dataclass(slots=True)
class ThemeVariant:
    """A named light or dark theme that sparsely overrides the default tokens.

    ``overrides`` is kept sorted by token name so rendering an unmodified
    variant is byte-stable. Resolution never touches it.
    """

    name: str
    author: str
    appearance: Appearance
    overrides: Dict[str, OverrideColor] = field(default_factory=dict)
    id: str | None = None

    def __post_init__(self) -> None:
        self.appearance = Appearance.from_name(self.appearance)
        self.overrides = _sorted_overrides(self.overrides)

    @property
    def is_light(self) -> bool:
        return self.appearance is Appearance.LIGHT

    @property
    def is_dark(self) -> bool:
        return self.appearance is Appearance.DARK

    def resolve(self, defaults: UIColors | None = None) -> Dict[str, Hsla]:
        """Return the complete ``token -> Hsla`` mapping for this variant.

        Starts from ``defaults`` (the system tokens for this appearance when
        omitted) and replaces every overridden token. Each call builds a new
        dict sorted by token name.
        """

        return self.resolve_ui_colors(defaults).as_mapping()

    def resolve_ui_colors(self, defaults: UIColors | None = None) -> UIColors:
        """Like :meth:`resolve` but keeps each token's description."""

        base = defaults if defaults is not None else system_ui_colors(self.appearance)
        merged = base.copy()
        for token, override in self.overrides.items():
            previous = merged.get(token)
            description = previous.description if previous is not None else ""
            merged.add(UIColor(name=token, value=override.to_hsla(), description=description))
        LOGGER.debug(
            "Resolved theme '%s': %d tokens, %d overridden", self.name, len(merged), len(self.overrides)
        )
        return merged

    def color(self, token: str, defaults: UIColors | None = None) -> Hsla | None:
        override = self.overrides.get(token)
        if override is not None:
            return override.to_hsla()
        base = defaults if defaults is not None else system_ui_colors(self.appearance)
        entry = base.get(token)
        return entry.value if entry is not None else None

    def require_color(self, token: str, defaults: UIColors | None = None) -> Hsla:
        value = self.color(token, defaults)
        if value is None:
            raise NotFoundError("token", token)
        return value

    def set_override(self, token: str, value: Any) -> None:
        """Add or replace one override in place, keeping token order."""

        merged = dict(self.overrides)
        merged[token] = value
        self.overrides = _sorted_overrides(merged)

    def with_override(self, token: str, value: Any) -> "ThemeVariant":
        variant = self.copy()
        variant.set_override(token, value)
        return variant

    def copy(self) -> "ThemeVariant":
        return ThemeVariant(
            name=str(self.name),
            author=str(self.author),
            appearance=self.appearance,
            overrides=dict(self.overrides),
            id=str(self.id) if self.id is not None else None,
        )


@dataclass(slots=True)
class ThemeFamily:
    """Scale sets and theme variants published together under one name."""

    name: str
    author: str
    color_scale_sets: ColorScaleSets | None = None
    variants: List[ThemeVariant] = field(default_factory=list)

    def add_variant(self, variant: ThemeVariant) -> None:
        # Duplicate names are allowed: one display name per appearance is common.
        self.variants.append(variant)

    def add_variants(self, variants: Iterable[ThemeVariant]) -> None:
        for variant in variants:
            self.add_variant(variant)

    def add_color_scale_set(self, scale_set: ColorScaleSet) -> None:
        if self.color_scale_sets is None:
            self.color_scale_sets = ColorScaleSets()
        self.color_scale_sets.add(scale_set)

    def with_color_scale_sets(self, scale_sets: ColorScaleSets | Iterable[ColorScaleSet]) -> "ThemeFamily":
        self.color_scale_sets = ColorScaleSets(scale_sets)
        return self

    def get_color_scale_set(self, name: str) -> ColorScaleSet | None:
        if self.color_scale_sets is None:
            return None
        return self.color_scale_sets.get(name)

    def require_color_scale_set(self, name: str) -> ColorScaleSet:
        scale_set = self.get_color_scale_set(name)
        if scale_set is None:
            raise NotFoundError("color scale set", name)
        return scale_set

    def variant_at(self, index: int) -> ThemeVariant:
        if not 0 <= index < len(self.variants):
            raise NotFoundError("variant index", index)
        return self.variants[index]

    def find_variants(self, name: str) -> List[ThemeVariant]:
        return [variant for variant in self.variants if variant.name == name]

    def copy(self) -> "ThemeFamily":
        return ThemeFamily(
            name=str(self.name),
            author=str(self.author),
            color_scale_sets=self.color_scale_sets.copy() if self.color_scale_sets is not None else None,
            variants=[variant.copy() for variant in self.variants],
        )


__all__ = [
    "Appearance",
    "NormalizedColor",
    "OverrideColor",
    "StandardColor",
    "ThemeFamily",
    "ThemeVariant",
    "decode_override",
]
