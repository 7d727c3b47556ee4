"""Tests for theme variants, override encodings, and families."""

from __future__ import annotations

import pytest

from hueforge.core.color import Hsla, hsla
from hueforge.core.errors import BoundsError, NotFoundError, ParseError
from hueforge.core.scales import ColorScale, ColorScaleSet
from hueforge.theme.appearance import Appearance
from hueforge.theme.models import (
    NormalizedColor,
    StandardColor,
    ThemeFamily,
    ThemeVariant,
    decode_override,
)
from hueforge.theme.tokens import UIColor, UIColors, system_ui_colors


def _variant(name: str, appearance: Appearance, **overrides: object) -> ThemeVariant:
    return ThemeVariant(name=name, author="tests", appearance=appearance, overrides=dict(overrides))


def test_standard_encoding_maps_to_normalized_channels() -> None:
    assert StandardColor(360, 100, 100, 100).to_hsla() == Hsla(1.0, 1.0, 1.0, 1.0)
    assert StandardColor(0, 0, 0, 0).to_hsla() == Hsla(0.0, 0.0, 0.0, 0.0)
    assert StandardColor(180, 50, 25, 100).to_hsla() == Hsla(0.5, 0.5, 0.25, 1.0)


@pytest.mark.parametrize(
    "values, field",
    [
        ([361, 0, 0, 0], "h"),
        ([0, 101, 0, 0], "s"),
        ([0, 0, 101, 0], "l"),
        ([0, 0, 0, 101], "a"),
        ([-1, 0, 0, 0], "h"),
    ],
)
def test_standard_encoding_bounds(values: list[int], field: str) -> None:
    with pytest.raises(BoundsError) as excinfo:
        decode_override("background", values)

    assert excinfo.value.field == field
    assert excinfo.value.token == "background"
    assert field in str(excinfo.value)


def test_standard_encoding_accepts_upper_bounds() -> None:
    assert decode_override("background", [360, 0, 0, 0]) == StandardColor(360, 0, 0, 0)


def test_standard_color_constructor_validates_bounds() -> None:
    with pytest.raises(BoundsError):
        StandardColor(400, 0, 0, 0)


def test_decode_override_tries_integers_before_floats() -> None:
    assert isinstance(decode_override("text", [0, 0, 0, 1]), StandardColor)
    assert decode_override("text", [0.0, 0.0, 0.0, 1.0]) == NormalizedColor(0.0, 0.0, 0.0, 1.0)
    assert decode_override("text", [0, 0.5, 1, 1]) == NormalizedColor(0.0, 0.5, 1.0, 1.0)


def test_normalized_encoding_is_clamped_not_rejected() -> None:
    override = decode_override("text", [1.5, -0.5, 0.5, 0.5])

    assert override.to_list() == [1.5, -0.5, 0.5, 0.5]
    assert override.to_hsla() == Hsla(1.0, 0.0, 0.5, 0.5)


def test_normalized_color_stores_floats() -> None:
    color = NormalizedColor(0, 1, 0, 1)

    assert all(isinstance(channel, float) for channel in color.to_list())
    assert color == NormalizedColor(0.0, 1.0, 0.0, 1.0)


@pytest.mark.parametrize("value", [True, "0.5", None])
def test_normalized_color_rejects_non_numbers(value: object) -> None:
    with pytest.raises(TypeError):
        NormalizedColor(0.0, 0.0, 0.0, value)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value",
    [[0, 0, 0], [0, 0, 0, 0, 0], "#FFFFFF", {"h": 0}, [True, 0, 0, 0], ["0", 0, 0, 0], None],
)
def test_decode_override_rejects_other_shapes(value: object) -> None:
    with pytest.raises(ParseError) as excinfo:
        decode_override("text", value)

    assert "four integers" in str(excinfo.value)


def test_variant_overrides_are_sorted_by_token() -> None:
    variant = _variant("Ocean", Appearance.DARK, text=[0, 0, 90, 100], background=[0, 0, 0, 100])

    assert list(variant.overrides) == ["background", "text"]

    variant.set_override("accent_text", [0.1, 0.2, 0.3, 1.0])
    assert list(variant.overrides) == ["accent_text", "background", "text"]


def test_variant_accepts_appearance_names() -> None:
    assert _variant("Paper", "Light").appearance is Appearance.LIGHT  # type: ignore[arg-type]
    with pytest.raises(ParseError):
        _variant("Dusk", "auto")  # type: ignore[arg-type]


def test_resolve_replaces_only_overridden_tokens() -> None:
    variant = _variant("Ocean", Appearance.DARK, background=[0, 0, 0, 100])
    defaults = system_ui_colors(Appearance.DARK)

    resolved = variant.resolve()

    assert resolved["background"] == Hsla(0.0, 0.0, 0.0, 1.0)
    for token, color in defaults.as_mapping().items():
        if token != "background":
            assert resolved[token] == color
    assert list(resolved) == sorted(resolved)


def test_resolve_is_pure(ocean_variant: ThemeVariant) -> None:
    before = dict(ocean_variant.overrides)

    first = ocean_variant.resolve()
    second = ocean_variant.resolve()

    assert first == second
    assert first is not second
    assert ocean_variant.overrides == before


def test_resolve_uses_supplied_defaults_and_adds_new_tokens() -> None:
    defaults = UIColors([UIColor("background", hsla(0, 0, 1, 1), "bg")])
    variant = _variant("Ocean", Appearance.DARK, sidebar=[0.1, 0.1, 0.1, 1.0])

    merged = variant.resolve_ui_colors(defaults)

    assert merged.names() == ["background", "sidebar"]
    assert merged.require("background").description == "bg"
    assert merged.require("sidebar").value == Hsla(0.1, 0.1, 0.1, 1.0)
    assert defaults.names() == ["background"]


def test_variant_color_lookup_returns_absent_for_unknown_token(ocean_variant: ThemeVariant) -> None:
    assert ocean_variant.color("no_such_token") is None
    assert ocean_variant.color("text") == Hsla(0.55, 0.2, 0.9, 1.0)
    assert ocean_variant.color("border") == system_ui_colors(Appearance.DARK).require("border").value
    with pytest.raises(NotFoundError):
        ocean_variant.require_color("no_such_token")


def test_with_override_copies_before_mutating(ocean_variant: ThemeVariant) -> None:
    updated = ocean_variant.with_override("link", hsla(0.6, 1.0, 0.5, 1.0))

    assert "link" in updated.overrides
    assert "link" not in ocean_variant.overrides
    assert updated.overrides["link"] == NormalizedColor(0.6, 1.0, 0.5, 1.0)


def test_copy_is_independent(ocean_variant: ThemeVariant) -> None:
    clone = ocean_variant.copy()

    clone.set_override("border", [0, 0, 50, 100])
    clone.name = "Ocean Copy"

    assert clone != ocean_variant
    assert ocean_variant.name == "Ocean"
    assert "border" not in ocean_variant.overrides
    assert ocean_variant.copy() == ocean_variant


def test_variant_appearance_flags(ocean_variant: ThemeVariant) -> None:
    assert ocean_variant.is_dark
    assert not ocean_variant.is_light


def _scale_set(name: str, lightness: float) -> ColorScaleSet:
    scale = ColorScale.uniform(hsla(0.0, 0.0, lightness, 1.0))
    return ColorScaleSet(name, scale, scale, scale, scale)


def test_family_scale_sets_last_write_wins() -> None:
    family = ThemeFamily(name="Hue", author="tests")
    assert family.get_color_scale_set("neutral") is None

    family.add_color_scale_set(_scale_set("neutral", 0.2))
    family.add_color_scale_set(_scale_set("neutral", 0.8))

    assert family.color_scale_sets is not None
    assert len(family.color_scale_sets) == 1
    assert family.require_color_scale_set("neutral") == _scale_set("neutral", 0.8)
    with pytest.raises(NotFoundError):
        family.require_color_scale_set("accent")


def test_family_variants_allow_duplicate_names() -> None:
    family = ThemeFamily(name="Hue", author="tests")
    family.add_variant(_variant("Hue", Appearance.DARK))
    family.add_variant(_variant("Hue", Appearance.LIGHT))

    assert [variant.appearance for variant in family.find_variants("Hue")] == [
        Appearance.DARK,
        Appearance.LIGHT,
    ]
    assert family.variant_at(1).appearance is Appearance.LIGHT
    with pytest.raises(NotFoundError):
        family.variant_at(2)
    with pytest.raises(NotFoundError):
        family.variant_at(-1)


def test_family_copy_is_deep() -> None:
    family = ThemeFamily(name="Hue", author="tests").with_color_scale_sets([_scale_set("neutral", 0.5)])
    family.add_variant(_variant("Hue", Appearance.DARK))

    clone = family.copy()
    clone.add_variant(_variant("Other", Appearance.LIGHT))
    clone.add_color_scale_set(_scale_set("accent", 0.5))
    clone.variants[0].set_override("text", [0, 0, 0, 100])

    assert len(family.variants) == 1
    assert family.variants[0].overrides == {}
    assert family.color_scale_sets is not None
    assert family.color_scale_sets.names() == ["neutral"]
