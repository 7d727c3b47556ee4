"""Semantic UI color tokens and the system default token set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping

from ..core.color import Hsla
from ..core.errors import NotFoundError
from ..core.scales import ColorScaleSets, ScaleRole, default_color_scale_sets
from .appearance import Appearance


@dataclass(slots=True, frozen=True)
class UIColor:
    """A named color used by presentation code instead of a literal value."""

    name: str
    value: Hsla
    description: str = ""


class UIColors:
    """Token set keyed by name, iterated in lexicographic name order.

    Tokens are added or replaced by name; there is no deletion. Individual
    :class:`UIColor` values are immutable, only the set changes.
    """

    def __init__(self, colors: Iterable[UIColor] | None = None) -> None:
        self._colors: Dict[str, UIColor] = {}
        if colors:
            self.add_all(colors)

    def add(self, color: UIColor) -> None:
        self._colors[color.name] = color

    def add_all(self, colors: Iterable[UIColor]) -> None:
        for color in colors:
            self.add(color)

    def get(self, name: str) -> UIColor | None:
        return self._colors.get(name)

    def require(self, name: str) -> UIColor:
        color = self._colors.get(name)
        if color is None:
            raise NotFoundError("token", name)
        return color

    def names(self) -> List[str]:
        return sorted(self._colors)

    def as_mapping(self) -> Dict[str, Hsla]:
        """Return a fresh name-sorted ``token -> Hsla`` dict."""

        return {name: self._colors[name].value for name in sorted(self._colors)}

    def copy(self) -> "UIColors":
        return UIColors(self)

    def __iter__(self) -> Iterator[UIColor]:
        for name in sorted(self._colors):
            yield self._colors[name]

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UIColors):
            return NotImplemented
        return self._colors == other._colors

    def __repr__(self) -> str:
        return f"UIColors({self.names()!r})"


# token -> (scale set, alpha scale?, step, description)
SYSTEM_TOKENS: Mapping[str, tuple[str, bool, int, str]] = {
    "background": ("neutral", False, 1, "App background behind every other surface."),
    "surface": ("neutral", False, 2, "Panels, sidebars, and other raised areas."),
    "elevated_surface": ("neutral", False, 3, "Popovers, menus, and modal dialogs."),
    "border": ("neutral", False, 6, "Default border for separators and containers."),
    "border_variant": ("neutral", False, 5, "Subtle border used between related elements."),
    "border_focused": ("accent", False, 8, "Focus ring around the active control."),
    "element_background": ("neutral", False, 3, "Background of interactive elements at rest."),
    "element_hover": ("neutral", False, 4, "Background of interactive elements under the pointer."),
    "element_active": ("neutral", False, 5, "Background of interactive elements while pressed."),
    "element_selected": ("accent", False, 5, "Background of selected list rows and toggles."),
    "element_disabled": ("neutral", True, 3, "Background of elements that cannot be used."),
    "ghost_element_background": ("neutral", True, 1, "Transparent element background at rest."),
    "ghost_element_hover": ("neutral", True, 4, "Transparent element background under the pointer."),
    "filled_element_background": (
        "accent",
        False,
        9,
        "Used for the background of filled elements, like buttons and checkboxes.",
    ),
    "filled_element_hover": ("accent", False, 10, "Filled element background under the pointer."),
    "text": ("neutral", False, 12, "Primary text."),
    "text_muted": ("neutral", False, 11, "Secondary text and labels."),
    "text_placeholder": ("neutral", False, 10, "Placeholder text in empty inputs."),
    "text_accent": ("accent", False, 11, "Text that needs to stand out, such as headings."),
    "icon": ("neutral", False, 12, "Default icon color."),
    "icon_muted": ("neutral", False, 11, "Secondary icons."),
    "link": ("accent", False, 11, "Hyperlinks."),
    "selection": ("accent", True, 5, "Text selection highlight."),
    "scrollbar_thumb": ("neutral", True, 5, "Scrollbar handle."),
}


def system_ui_colors(
    appearance: Appearance | str = Appearance.DARK,
    *,
    scale_sets: ColorScaleSets | None = None,
) -> UIColors:
    """Return a fresh copy of the default token set for ``appearance``.

    Token values are drawn from the built-in scale sets unless ``scale_sets``
    supplies replacements with the same names.
    """

    resolved = Appearance.from_name(appearance) if isinstance(appearance, str) else appearance
    sets = scale_sets if scale_sets is not None else default_color_scale_sets()
    light = resolved is Appearance.LIGHT
    colors = UIColors()
    for name, (set_name, alpha, step, description) in SYSTEM_TOKENS.items():
        if alpha:
            role = ScaleRole.LIGHT_ALPHA if light else ScaleRole.DARK_ALPHA
        else:
            role = ScaleRole.LIGHT if light else ScaleRole.DARK
        value = sets.require(set_name).scale(role).step(step)
        colors.add(UIColor(name=name, value=value, description=description))
    return colors


__all__ = ["UIColor", "UIColors", "SYSTEM_TOKENS", "system_ui_colors"]
