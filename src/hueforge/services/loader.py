"""File-system collaborator that feeds theme documents to the codec."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..core.errors import ParseError, ThemeError
from ..theme.codec import parse, render
from ..theme.models import ThemeFamily, ThemeVariant

__all__ = [
    "THEME_EXTENSIONS",
    "detect_format",
    "iter_theme_files",
    "load_families",
    "load_family",
    "read_theme",
    "write_theme",
]

LOGGER = logging.getLogger(__name__)

THEME_EXTENSIONS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
}


def detect_format(path: Path | str) -> str:
    """Return the document format implied by the extension of ``path``."""

    suffix = Path(path).suffix.lower()
    kind = THEME_EXTENSIONS.get(suffix)
    if kind is None:
        raise ParseError(f"Unsupported theme file extension {suffix or '<none>'!r} for {path}")
    return kind


def read_theme(path: Path | str) -> ThemeVariant:
    """Read and parse one theme file.

    ``OSError`` from the file system propagates unchanged; theme errors are
    logged with the offending path and re-raised.
    """

    target = Path(path)
    kind = detect_format(target)
    text = target.read_text(encoding="utf-8")
    try:
        return parse(text, format=kind)
    except ThemeError as exc:
        LOGGER.warning("Rejected theme file %s: %s", target, exc)
        raise


def write_theme(variant: ThemeVariant, path: Path | str, *, format: str | None = None) -> Path:
    """Render ``variant`` to ``path`` atomically and return the path."""

    target = Path(path)
    kind = format or detect_format(target)
    body = render(variant, format=kind)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = target.with_suffix(target.suffix + ".tmp")
    tmp_path.write_text(body, encoding="utf-8")
    tmp_path.replace(target)
    LOGGER.debug("Wrote theme '%s' to %s", variant.name, target)
    return target


def iter_theme_files(directory: Path | str) -> List[Path]:
    root = Path(directory)
    return sorted(
        (entry for entry in root.iterdir() if entry.is_file() and entry.suffix.lower() in THEME_EXTENSIONS),
        key=lambda entry: entry.name,
    )


def load_family(
    directory: Path | str,
    *,
    name: str | None = None,
    author: str = "",
    strict: bool = True,
) -> ThemeFamily:
    """Load every theme file in ``directory`` into one family.

    Files are read in filename order. With ``strict`` any invalid file aborts
    the load; otherwise invalid files are skipped after being logged.
    """

    root = Path(directory)
    family = ThemeFamily(name=name or root.name, author=author)
    for path in iter_theme_files(root):
        try:
            variant = read_theme(path)
        except ThemeError:
            if strict:
                raise
            continue
        family.add_variant(variant)
    LOGGER.debug("Loaded %d theme(s) from %s", len(family.variants), root)
    return family


def load_families(directories: Iterable[Path | str], *, strict: bool = False) -> List[ThemeFamily]:
    """Load one family per existing directory, skipping missing directories."""

    families: List[ThemeFamily] = []
    for directory in directories:
        root = Path(directory).expanduser()
        if not root.is_dir():
            LOGGER.warning("Theme directory %s does not exist", root)
            continue
        families.append(load_family(root, strict=strict))
    return families
