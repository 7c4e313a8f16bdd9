"""easy_envar.errors

Errors raised while loading declared environment variables.

Every error carries the variable name (or the dotfile path) so a build script
that lets it propagate fails with an actionable message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class EnvarError(Exception):
    """Base class for every error raised by easy_envar."""


class MissingVariableError(EnvarError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required environment variable: {name}")


class InvalidBoolValueError(EnvarError, ValueError):
    def __init__(self, name: str, raw: str) -> None:
        self.name = name
        self.raw = raw
        super().__init__(
            f"Environment variable {name} must be 'true' or 'false', got {raw!r}"
        )


class InvalidIntegerValueError(EnvarError, ValueError):
    def __init__(self, name: str, raw: str, bits: int) -> None:
        self.name = name
        self.raw = raw
        self.bits = bits
        super().__init__(
            f"Environment variable {name} must be an unsigned integer (u{bits}), got {raw!r}"
        )


class DotfileError(EnvarError):
    """The dotfile could not be found or parsed.

    `message` is the dotfile loader's own description of the failure.
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)
