"""easy_envar.envar

Typed environment variable declarations.

Typical build-script usage:

    from easy_envar.bootstrap import init
    from easy_envar.envar import Envar

    init()
    Envar.u16("PORT").load().export()   # prints: cargo:rustc-env=PORT=8080

An `Envar` only names a variable and its expected type. `Envar.load()` reads and
parses the current value into a `LoadedEnvar`, which can re-export it as a build
directive for the next compilation stage.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, TextIO, Union

from easy_envar.errors import (
    InvalidBoolValueError,
    InvalidIntegerValueError,
    MissingVariableError,
)

DIRECTIVE_PREFIX = "cargo:rustc-env="

# Optional '+', then ASCII digits only (no whitespace, underscores or minus).
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

Value = Union[bool, str, int]


class Kind(str, Enum):
    BOOL = "bool"
    STRING = "string"
    U16 = "u16"
    U32 = "u32"

    @property
    def bits(self) -> Optional[int]:
        """Integer width for U16/U32, None otherwise."""
        return _INT_BITS.get(self)


_INT_BITS = {Kind.U16: 16, Kind.U32: 32}


def _parse_bool(name: str, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise InvalidBoolValueError(name, raw)


def _parse_unsigned(name: str, raw: str, bits: int) -> int:
    if not _UNSIGNED_RE.fullmatch(raw):
        raise InvalidIntegerValueError(name, raw, bits)
    try:
        value = int(raw)
    except ValueError:
        # Digit strings longer than the interpreter's int conversion limit.
        raise InvalidIntegerValueError(name, raw, bits) from None
    if value > (1 << bits) - 1:
        raise InvalidIntegerValueError(name, raw, bits)
    return value


@dataclass(frozen=True)
class Envar:
    """An expected environment variable: its name and primitive type."""

    name: str
    kind: Kind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, Kind):
            raise TypeError(f"kind must be a Kind, got {self.kind!r}")

    @classmethod
    def boolean(cls, name: str) -> "Envar":
        return cls(name, Kind.BOOL)

    @classmethod
    def string(cls, name: str) -> "Envar":
        return cls(name, Kind.STRING)

    @classmethod
    def u16(cls, name: str) -> "Envar":
        return cls(name, Kind.U16)

    @classmethod
    def u32(cls, name: str) -> "Envar":
        return cls(name, Kind.U32)

    def load(self) -> "LoadedEnvar":
        """Read the variable from the process environment and parse it.

        Raises:
            MissingVariableError: the variable is not set.
            InvalidBoolValueError: a BOOL value is not exactly "true"/"false".
            InvalidIntegerValueError: a U16/U32 value is not a base-10 unsigned
                integer within range.
        """
        raw = os.environ.get(self.name)
        if raw is None:
            raise MissingVariableError(self.name)

        if self.kind is Kind.STRING:
            value: Value = raw
        elif self.kind is Kind.BOOL:
            value = _parse_bool(self.name, raw)
        else:
            value = _parse_unsigned(self.name, raw, self.kind.bits)

        return LoadedEnvar(self.name, self.kind, value)


@dataclass(frozen=True)
class LoadedEnvar:
    """A declared variable together with its parsed value.

    The value always matches the kind: `str` for STRING, `bool` for BOOL and an
    in-range `int` for U16/U32. Mismatches are rejected at construction.
    """

    name: str
    kind: Kind
    value: Value

    def __post_init__(self) -> None:
        if not isinstance(self.kind, Kind):
            raise TypeError(f"kind must be a Kind, got {self.kind!r}")

        if self.kind is Kind.STRING:
            if not isinstance(self.value, str):
                raise TypeError(f"{self.name}: STRING value must be str, got {type(self.value).__name__}")
        elif self.kind is Kind.BOOL:
            if not isinstance(self.value, bool):
                raise TypeError(f"{self.name}: BOOL value must be bool, got {type(self.value).__name__}")
        else:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError(f"{self.name}: {self.kind.name} value must be int, got {type(self.value).__name__}")
            upper = (1 << self.kind.bits) - 1
            if not 0 <= self.value <= upper:
                raise ValueError(f"{self.name}: {self.kind.name} value must be in [0, {upper}], got {self.value}")

    @classmethod
    def boolean(cls, name: str, value: bool) -> "LoadedEnvar":
        return cls(name, Kind.BOOL, value)

    @classmethod
    def string(cls, name: str, value: str) -> "LoadedEnvar":
        return cls(name, Kind.STRING, value)

    @classmethod
    def u16(cls, name: str, value: int) -> "LoadedEnvar":
        return cls(name, Kind.U16, value)

    @classmethod
    def u32(cls, name: str, value: int) -> "LoadedEnvar":
        return cls(name, Kind.U32, value)

    @property
    def text(self) -> str:
        """Canonical text of the value: the string itself, true/false, or decimal digits."""
        if self.kind is Kind.BOOL:
            return "true" if self.value else "false"
        return str(self.value)

    def directive(self) -> str:
        return f"{DIRECTIVE_PREFIX}{self.name}={self.text}"

    def export(self, stream: Optional[TextIO] = None) -> None:
        """Print the build directive that sets this variable for the next compile stage.

        Writes one line to stdout unless `stream` is given. Exporting the same
        value twice prints the same line twice.
        """
        print(self.directive(), file=stream)


def load_all(envars: Iterable[Envar]) -> List[LoadedEnvar]:
    """Load declarations in order; the first failure is raised."""
    return [envar.load() for envar in envars]


def export_all(loaded: Iterable[LoadedEnvar], stream: Optional[TextIO] = None) -> None:
    for item in loaded:
        item.export(stream)
