"""CLI utility to list, inspect, validate, and re-render theme documents."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from hueforge.core.errors import ThemeError
from hueforge.services.loader import load_families, read_theme
from hueforge.services.settings import Settings, SettingsStore
from hueforge.theme.codec import DOCUMENT_FORMATS, render
from hueforge.theme.manager import ThemeRegistry, build_default_family
from hueforge.utils.logging import setup_logging

LOGGER = logging.getLogger(__name__)


def _build_registry(settings: Settings, extra_dirs: Sequence[Path]) -> ThemeRegistry:
    registry = ThemeRegistry([build_default_family()])
    directories = [*settings.theme_dirs, *extra_dirs]
    for family in load_families(directories):
        registry.add_family(family)
    return registry


def _cmd_list(args: argparse.Namespace, settings: Settings) -> int:
    registry = _build_registry(settings, args.theme_dir)
    if args.appearance == "light":
        variants = registry.all_light()
    elif args.appearance == "dark":
        variants = registry.all_dark()
    else:
        variants = registry.all_themes()
    for variant in variants:
        print(f"{variant.name}\t{variant.appearance.value}\t{variant.author}")
    return 0


def _cmd_show(args: argparse.Namespace, settings: Settings) -> int:
    registry = _build_registry(settings, args.theme_dir)
    name = args.name or settings.default_theme
    variant = registry.find_theme(name)
    if variant is None:
        print(f"error: unknown theme {name!r}", file=sys.stderr)
        return 1
    for token, color in variant.resolve().items():
        marker = "*" if token in variant.overrides else " "
        print(f"{marker} {token}: {color.to_hex()}")
    return 0


def _cmd_validate(args: argparse.Namespace, settings: Settings) -> int:
    failures = 0
    for path in args.paths:
        try:
            variant = read_theme(path)
        except (ThemeError, OSError) as exc:
            failures += 1
            print(f"error: {path}: {exc}", file=sys.stderr)
            continue
        print(f"ok: {path} ({variant.name}, {variant.appearance.value})")
    return 1 if failures else 0


def _cmd_render(args: argparse.Namespace, settings: Settings) -> int:
    variant = read_theme(args.path)
    sys.stdout.write(render(variant, format=args.format or settings.default_format))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hueforge-theme", description="Inspect and validate hueforge themes")
    parser.add_argument("--settings", type=Path, default=None, help="Path to settings.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List registered theme variants")
    list_parser.add_argument("--appearance", choices=("light", "dark"), default=None)
    list_parser.add_argument("--theme-dir", type=Path, action="append", default=[], help="Extra theme directory")
    list_parser.set_defaults(handler=_cmd_list)

    show_parser = subparsers.add_parser("show", help="Print the resolved tokens of a theme")
    show_parser.add_argument("name", nargs="?", default=None, help="Theme name (defaults to settings)")
    show_parser.add_argument("--theme-dir", type=Path, action="append", default=[], help="Extra theme directory")
    show_parser.set_defaults(handler=_cmd_show)

    validate_parser = subparsers.add_parser("validate", help="Parse theme files and report errors")
    validate_parser.add_argument("paths", type=Path, nargs="+")
    validate_parser.set_defaults(handler=_cmd_validate)

    render_parser = subparsers.add_parser("render", help="Re-render a theme file in canonical form")
    render_parser.add_argument("path", type=Path)
    render_parser.add_argument("--format", choices=DOCUMENT_FORMATS, default=None)
    render_parser.set_defaults(handler=_cmd_render)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {"debug_logging": True} if args.verbose else None
    settings = SettingsStore(args.settings).load(overrides=overrides)
    setup_logging(settings.effective_log_level)

    try:
        return args.handler(args, settings)
    except (ThemeError, OSError) as exc:
        LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
