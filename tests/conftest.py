"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from hueforge.theme import Appearance, NormalizedColor, StandardColor, ThemeVariant


@pytest.fixture
def ocean_variant() -> ThemeVariant:
    return ThemeVariant(
        name="Ocean",
        author="Ada",
        appearance=Appearance.DARK,
        overrides={
            "text": NormalizedColor(0.55, 0.2, 0.9, 1.0),
            "background": StandardColor(210, 40, 12, 100),
        },
    )


@pytest.fixture
def ocean_document() -> str:
    return (
        "{\n"
        '  "name": "Ocean",\n'
        '  "author": "Ada",\n'
        '  "appearance": "dark",\n'
        '  "overrides": {\n'
        '    "background": [\n'
        "      0,\n"
        "      0,\n"
        "      0,\n"
        "      100\n"
        "    ]\n"
        "  }\n"
        "}\n"
    )
