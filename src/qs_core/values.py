"""Value types for qs-core."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass
class QText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class QNumber:
    value: int | float

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, int):
            return str(v)
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "Infinity" if v > 0 else "-Infinity"
        # Integral floats drop the ".0" until repr switches to exponent form
        if v == int(v) and abs(v) < 1e16:
            return str(int(v))
        return repr(v)


@dataclass
class QBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class QList:
    items: list["Scalar | _Null"]

    def __post_init__(self) -> None:
        # Caller-built lists may hold plain values; None marks a hole
        self.items = [_to_item(v) for v in self.items]

    def __str__(self) -> str:
        return ",".join("" if isinstance(v, _Null) else str(v) for v in self.items)


class _Null:
    """Singleton for null / absent values."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _Null()

Scalar = Union[QText, QNumber, QBool]
Value = Union[QText, QNumber, QBool, QList, _Null]

_TAGGED = (QText, QNumber, QBool, QList, _Null)


# ---------------------------------------------------------------------------
# Conversion at the serialization boundary
# ---------------------------------------------------------------------------

def to_value(raw: object) -> Value:
    """Classify a plain Python value into the tagged variant.

    - Tagged values pass through unchanged
    - ``None`` → Null
    - ``bool`` → QBool (checked before numbers, bool is an int subclass)
    - ``int`` / ``float`` → QNumber
    - ``list`` / ``tuple`` → QList of scalars
    - anything else → QText of its ``str()``
    """
    if isinstance(raw, _TAGGED):
        return raw
    if isinstance(raw, (list, tuple)):
        return QList([_to_item(item) for item in raw])
    return _to_scalar(raw)


def _to_scalar(raw: object) -> "Scalar | _Null":
    if raw is None:
        return Null
    if isinstance(raw, bool):
        return QBool(raw)
    if isinstance(raw, (int, float)):
        return QNumber(raw)
    if isinstance(raw, str):
        return QText(raw)
    return QText(str(raw))


def _to_item(raw: object) -> "Scalar | _Null":
    # Sequences do not nest: an inner sequence collapses to its joined text.
    if isinstance(raw, (QText, QNumber, QBool, _Null)):
        return raw
    if isinstance(raw, (list, tuple, QList)):
        return QText(str(to_value(raw)))
    return _to_scalar(raw)


def to_python(value: Value):
    """Inverse of :func:`to_value`."""
    if isinstance(value, _Null):
        return None
    if isinstance(value, QList):
        return [to_python(v) for v in value.items]
    return value.value


# Plain Python shapes accepted by stringify() and produced by parse()
QueryScalar = Union[str, int, float, bool]
QueryValue = Union[QueryScalar, None, list[Union[QueryScalar, None]]]
QueryObject = dict[str, QueryValue]
