"""Exception taxonomy shared by the color, token, and theme layers."""

from __future__ import annotations

from typing import Any

__all__ = ["ThemeError", "ParseError", "BoundsError", "NotFoundError"]


class ThemeError(Exception):
    """Base class for every error raised by hueforge."""


class ParseError(ThemeError, ValueError):
    """Raised when a hex literal or theme document is malformed."""


class BoundsError(ThemeError, ValueError):
    """Raised when a standard-encoded channel falls outside its domain."""

    def __init__(
        self,
        field: str,
        value: Any,
        minimum: int,
        maximum: int,
        *,
        token: str | None = None,
    ) -> None:
        location = f" in override '{token}'" if token else ""
        super().__init__(
            f"Channel '{field}'{location} must be between {minimum} and {maximum}, received {value!r}"
        )
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.token = token


class NotFoundError(ThemeError, LookupError):
    """Raised when a named token, scale set, family, or index does not exist."""

    def __init__(self, kind: str, key: Any) -> None:
        super().__init__(f"Unknown {kind} {key!r}")
        self.kind = kind
        self.key = key
