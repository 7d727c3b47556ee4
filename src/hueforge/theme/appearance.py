"""Light/dark classification of theme variants."""

from __future__ import annotations

from enum import Enum

from ..core.errors import ParseError


class Appearance(Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_name(cls, name: str) -> "Appearance":
        """Convert ``"light"``/``"dark"`` (any case) or raise :class:`ParseError`."""

        if isinstance(name, Appearance):
            return name
        if not isinstance(name, str):
            raise ParseError(f"Appearance must be a string, received {name!r}")
        key = name.strip().lower()
        for appearance in cls:
            if appearance.value == key:
                return appearance
        raise ParseError(f"Unknown appearance {name!r}; expected 'light' or 'dark'")


__all__ = ["Appearance"]
