"""Theme document parsing and rendering for JSON, YAML, and TOML text."""

from __future__ import annotations

import io
import json
import logging
import tomllib
from json import JSONDecodeError
from typing import Any, Callable, Dict, Iterable, Mapping

import jsonschema
import tomli_w
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..core.errors import ParseError
from .models import ThemeVariant

LOGGER = logging.getLogger(__name__)

DOCUMENT_FORMATS: tuple[str, ...] = ("json", "yaml", "toml")

THEME_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "author", "appearance"],
    "additionalProperties": False,
    "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"},
        "author": {"type": "string"},
        "appearance": {"enum": ["light", "dark"]},
        "overrides": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {"type": "number"},
                "minItems": 4,
                "maxItems": 4,
            },
        },
    },
}

_VALIDATOR = jsonschema.Draft202012Validator(THEME_DOCUMENT_SCHEMA)


def parse(text: str, *, format: str = "json") -> ThemeVariant:
    """Decode ``text`` into a :class:`ThemeVariant`.

    Raises :class:`ParseError` for malformed text or document shape and
    :class:`BoundsError` for out-of-domain standard channels. No partial
    variant is ever returned.
    """

    kind = _normalize_format(format)
    payload = _LOADERS[kind](text)
    variant = from_document(payload)
    LOGGER.debug("Parsed %s theme '%s' with %d overrides", kind, variant.name, len(variant.overrides))
    return variant


def render(variant: ThemeVariant, *, format: str = "json") -> str:
    """Serialize ``variant``; ``parse(render(v))`` reproduces ``v`` exactly."""

    kind = _normalize_format(format)
    document = to_document(variant)
    if kind == "yaml":
        return _dump_yaml(document)
    if kind == "toml":
        return tomli_w.dumps(document)
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def from_document(payload: Any) -> ThemeVariant:
    """Build a variant from an already decoded mapping."""

    if not isinstance(payload, Mapping):
        raise ParseError("Theme document root must be an object")
    errors = sorted(
        _VALIDATOR.iter_errors(dict(payload)),
        key=lambda issue: [str(segment) for segment in issue.absolute_path],
    )
    if errors:
        raise ParseError(_format_schema_error(errors[0]))
    return ThemeVariant(
        name=payload["name"],
        author=payload["author"],
        appearance=payload["appearance"],
        overrides=payload.get("overrides") or {},
        id=payload.get("id"),
    )


def to_document(variant: ThemeVariant) -> Dict[str, Any]:
    document: Dict[str, Any] = {}
    if variant.id is not None:
        document["id"] = variant.id
    document["name"] = variant.name
    document["author"] = variant.author
    document["appearance"] = variant.appearance.value
    document["overrides"] = {token: color.to_list() for token, color in variant.overrides.items()}
    return document


def _normalize_format(format: str) -> str:
    kind = (format or "").strip().lower()
    if kind == "yml":
        kind = "yaml"
    if kind not in DOCUMENT_FORMATS:
        raise ParseError(f"Unsupported theme format {format!r}; expected one of {', '.join(DOCUMENT_FORMATS)}")
    return kind


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------
def _reject_duplicate_keys(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ParseError(f"Duplicate key '{key}' found in JSON object.")
        result[key] = value
    return result


def _load_json(text: str) -> Any:
    try:
        return json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except JSONDecodeError as exc:
        raise ParseError(f"{exc.msg} (line {exc.lineno}, column {exc.colno})") from exc


# ---------------------------------------------------------------------------
# YAML helpers
# ---------------------------------------------------------------------------
def _create_yaml() -> YAML:
    yaml = YAML(typ="safe", pure=True)
    yaml.allow_duplicate_keys = False
    yaml.default_flow_style = False
    yaml.sort_base_mapping_type_on_output = False
    yaml.width = 4096
    return yaml


def _load_yaml(text: str) -> Any:
    try:
        return _create_yaml().load(text)
    except YAMLError as exc:
        raise ParseError(f"Invalid YAML theme document: {exc}") from exc


def _dump_yaml(document: Mapping[str, Any]) -> str:
    stream = io.StringIO()
    _create_yaml().dump(dict(document), stream)
    return stream.getvalue()


# ---------------------------------------------------------------------------
# TOML helpers
# ---------------------------------------------------------------------------
def _load_toml(text: str) -> Any:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ParseError(f"Invalid TOML theme document: {exc}") from exc


_LOADERS: Dict[str, Callable[[str], Any]] = {
    "json": _load_json,
    "yaml": _load_yaml,
    "toml": _load_toml,
}


def _format_schema_error(issue: jsonschema.ValidationError) -> str:
    path = ".".join(str(segment) for segment in issue.absolute_path)
    if path:
        return f"Invalid theme document at '{path}': {issue.message}"
    return f"Invalid theme document: {issue.message}"


__all__ = [
    "DOCUMENT_FORMATS",
    "THEME_DOCUMENT_SCHEMA",
    "from_document",
    "parse",
    "render",
    "to_document",
]
