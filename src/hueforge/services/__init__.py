"""Service layer: settings persistence and theme file loading."""

from .loader import detect_format, load_families, load_family, read_theme, write_theme
from .settings import Settings, SettingsStore

__all__ = [
    "Settings",
    "SettingsStore",
    "detect_format",
    "load_families",
    "load_family",
    "read_theme",
    "write_theme",
]
