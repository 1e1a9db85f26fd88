"""Options controlling parse() and stringify()."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

from .errors import InvalidOptionError


class ArrayFormat(str, Enum):
    """How a key bound to a sequence appears in the string form."""

    NONE = "none"        # a=1&a=2
    BRACKET = "bracket"  # a[]=1&a[]=2
    INDEX = "index"      # a[0]=1&a[1]=2
    COMMA = "comma"      # a=1,2


def _coerce_format(raw: ArrayFormat | str) -> ArrayFormat:
    try:
        return ArrayFormat(raw)
    except ValueError:
        choices = ", ".join(f.value for f in ArrayFormat)
        raise InvalidOptionError(
            f"unknown array format {raw!r} (expected one of: {choices})"
        ) from None


# camelCase spellings accepted by from_mapping()
_ALIASES: dict[str, str] = {
    "arrayFormat": "array_format",
    "skipNull": "skip_null",
    "skipEmptyString": "skip_empty_string",
}


def _options_kwargs(cls: type, mapping: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(cls)}
    kwargs: dict[str, Any] = {}
    for key, value in mapping.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise InvalidOptionError(f"{cls.__name__} has no option {key!r}")
        kwargs[name] = value
    return kwargs


@dataclass(frozen=True)
class ParseOptions:
    decode: bool = True
    array_format: ArrayFormat = ArrayFormat.NONE

    def __post_init__(self) -> None:
        # Accept the plain string spelling ("bracket") as well as the enum
        object.__setattr__(self, "array_format", _coerce_format(self.array_format))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ParseOptions":
        """Build options from a config mapping (snake_case or camelCase keys)."""
        return cls(**_options_kwargs(cls, mapping))


@dataclass(frozen=True)
class StringifyOptions:
    encode: bool = True
    array_format: ArrayFormat = ArrayFormat.NONE
    skip_null: bool = True
    skip_empty_string: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "array_format", _coerce_format(self.array_format))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "StringifyOptions":
        """Build options from a config mapping (snake_case or camelCase keys)."""
        return cls(**_options_kwargs(cls, mapping))
