"""Theme registry, built-in themes, and the process-wide registry instance."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from ..core.errors import NotFoundError
from ..core.scales import default_color_scale_sets
from ..utils.locks import ReadWriteLock
from .appearance import Appearance
from .models import NormalizedColor, StandardColor, ThemeFamily, ThemeVariant

LOGGER = logging.getLogger(__name__)

_DEFAULT_AUTHOR = "Hueforge"


def build_default_dark_variant() -> ThemeVariant:
    return ThemeVariant(
        name="Hueforge Dark",
        author=_DEFAULT_AUTHOR,
        appearance=Appearance.DARK,
        overrides={
            "background": StandardColor(220, 13, 9, 100),
            "surface": StandardColor(220, 13, 12, 100),
            "text": StandardColor(220, 14, 90, 100),
        },
    )


def build_default_light_variant() -> ThemeVariant:
    return ThemeVariant(
        name="Hueforge Light",
        author=_DEFAULT_AUTHOR,
        appearance=Appearance.LIGHT,
        overrides={
            "background": StandardColor(0, 0, 100, 100),
            "selection": NormalizedColor(0.58, 1.0, 0.5, 0.25),
        },
    )


def build_default_family() -> ThemeFamily:
    family = ThemeFamily(name="Hueforge", author=_DEFAULT_AUTHOR)
    family.with_color_scale_sets(default_color_scale_sets())
    family.add_variant(build_default_dark_variant())
    family.add_variant(build_default_light_variant())
    return family


class ThemeRegistry:
    """Ordered collection of theme families shared across the process.

    The only mutation is :meth:`add_family`, which takes the write lock;
    queries take the read lock and return copies of the stored families and
    variants, so callers never see a partially updated family list and cannot
    edit registry state from outside.
    """

    def __init__(self, families: Iterable[ThemeFamily] | None = None) -> None:
        self._lock = ReadWriteLock()
        self._families: List[ThemeFamily] = []
        for family in families or ():
            self.add_family(family)

    def add_family(self, family: ThemeFamily) -> None:
        """Register a copy of ``family``, replacing any family with the same name."""

        entry = family.copy()
        with self._lock.write():
            for index, existing in enumerate(self._families):
                if existing.name == entry.name:
                    self._families[index] = entry
                    LOGGER.debug("Replaced theme family '%s'", entry.name)
                    return
            self._families.append(entry)
        LOGGER.debug("Registered theme family '%s' with %d variants", entry.name, len(entry.variants))

    def families(self) -> List[ThemeFamily]:
        with self._lock.read():
            return [family.copy() for family in self._families]

    def family_names(self) -> List[str]:
        with self._lock.read():
            return [family.name for family in self._families]

    def get_family(self, name: str) -> ThemeFamily | None:
        with self._lock.read():
            for family in self._families:
                if family.name == name:
                    return family.copy()
        return None

    def require_family(self, name: str) -> ThemeFamily:
        family = self.get_family(name)
        if family is None:
            raise NotFoundError("theme family", name)
        return family

    def all_themes(self) -> List[ThemeVariant]:
        """Every variant of every family, stable-sorted by name."""

        return self._collect(lambda variant: True)

    def all_light(self) -> List[ThemeVariant]:
        return self._collect(lambda variant: variant.appearance is Appearance.LIGHT)

    def all_dark(self) -> List[ThemeVariant]:
        return self._collect(lambda variant: variant.appearance is Appearance.DARK)

    def find_theme(self, name: str) -> ThemeVariant | None:
        for variant in self.all_themes():
            if variant.name == name:
                return variant
        return None

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._families)

    def _collect(self, predicate: Callable[[ThemeVariant], bool]) -> List[ThemeVariant]:
        with self._lock.read():
            variants = [
                variant.copy() for family in self._families for variant in family.variants if predicate(variant)
            ]
        variants.sort(key=lambda variant: variant.name)
        return variants


theme_registry = ThemeRegistry([build_default_family()])


def load_theme(name: str) -> ThemeVariant:
    variant = theme_registry.find_theme(name)
    if variant is None:
        raise NotFoundError("theme", name)
    return variant


def available_themes() -> List[str]:
    return [variant.name for variant in theme_registry.all_themes()]


__all__ = [
    "ThemeRegistry",
    "available_themes",
    "build_default_dark_variant",
    "build_default_family",
    "build_default_light_variant",
    "load_theme",
    "theme_registry",
]
