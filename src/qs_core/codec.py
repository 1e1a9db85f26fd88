"""Codec: query string ↔ query object."""

from __future__ import annotations

import re
from typing import Any, Callable, Iterator, Mapping
from urllib.parse import quote, unquote_plus

from .options import ArrayFormat, ParseOptions, StringifyOptions
from .values import QList, QText, QueryObject, _Null, to_value


# Characters encodeURIComponent leaves alone besides A-Z a-z 0-9 and "_.-~"
_COMPONENT_SAFE = "!~*'()"

# name[] / name[12], matched against the whole (decoded) key
_BRACKET_KEY_RE = re.compile(r"(.+)\[([0-9]*)\]")

# Highest position an indexed key may pad a sequence up to. Larger
# indices are appended in input order, so a[1002]=y&a[1001]=x keeps y
# before x.
MAX_ARRAY_INDEX = 1000


# ---------------------------------------------------------------------------
# Percent encoding
# ---------------------------------------------------------------------------

def encode_component(text: str) -> str:
    """Percent-encode *text* as a single URI component (UTF-8, space → %20)."""
    return quote(text, safe=_COMPONENT_SAFE, errors="surrogatepass")


def decode_component(text: str) -> str:
    """Percent-decode *text*, reading ``+`` as a space.

    Malformed escapes are kept literally and invalid UTF-8 becomes U+FFFD,
    so this never raises.
    """
    return unquote_plus(text)


def _identity(text: str) -> str:
    return text


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------

def split_pairs(text: str) -> Iterator[tuple[str, str]]:
    """Yield raw ``(key, value)`` pairs from ``a=1&b=2``.

    Empty segments are dropped; a segment without ``=`` has value ``""``.
    """
    for segment in text.split("&"):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        yield key, value


def parse(query: str, options: ParseOptions | None = None) -> QueryObject:
    """Parse a query string (with or without leading ``?``) into a dict.

    Repeated keys and ``name[]`` / ``name[i]`` keys collect into lists;
    with ``ArrayFormat.COMMA`` any value containing a comma is split.
    """
    opts = options or ParseOptions()
    text = query[1:] if query.startswith("?") else query
    if not text.strip():
        return {}

    result: QueryObject = {}
    for key, value in split_pairs(text):
        if opts.decode:
            key = decode_component(key)
            value = decode_component(value)
        _assign(result, key, value, opts.array_format)
    return result


def _assign(result: QueryObject, key: str, value: str, array_format: ArrayFormat) -> None:
    if array_format is ArrayFormat.COMMA and "," in value:
        result[key] = value.split(",")
        return

    match = _BRACKET_KEY_RE.fullmatch(key)
    if match:
        name, index = match.groups()
        items = _sequence_for(result, name)
        if index:
            _place(items, int(index), value)
        else:
            items.append(value)
        return

    if key not in result:
        result[key] = value
        return

    existing = result[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        result[key] = [existing, value]


def _sequence_for(result: QueryObject, name: str) -> list:
    """Return the list bound to *name*, creating or promoting it first."""
    existing = result.get(name)
    if isinstance(existing, list):
        return existing
    items = [] if existing is None or existing == "" else [existing]
    result[name] = items
    return items


def _place(items: list, index: int, value: str) -> None:
    if index > MAX_ARRAY_INDEX:
        items.append(value)
        return
    if index >= len(items):
        items.extend([None] * (index + 1 - len(items)))
    items[index] = value


# ---------------------------------------------------------------------------
# stringify
# ---------------------------------------------------------------------------

def stringify(obj: Mapping[str, Any], options: StringifyOptions | None = None) -> str:
    """Serialize a query object into ``key=value`` pairs joined by ``&``.

    Keys are emitted in the mapping's iteration order. Values may be plain
    Python values or tagged values from :mod:`qs_core.values`.
    """
    opts = options or StringifyOptions()
    escape = encode_component if opts.encode else _identity

    parts: list[str] = []
    for key, raw in obj.items():
        value = to_value(raw)
        if isinstance(value, _Null):
            if opts.skip_null:
                continue
        elif isinstance(value, QText) and value.value == "" and opts.skip_empty_string:
            continue

        name = escape(str(key))
        if isinstance(value, QList):
            parts.extend(_sequence_pairs(name, value, opts.array_format, escape))
        else:
            parts.append(f"{name}={escape(str(value))}")

    return "&".join(parts)


def _sequence_pairs(
    name: str,
    value: QList,
    array_format: ArrayFormat,
    escape: Callable[[str], str],
) -> list[str]:
    if array_format is ArrayFormat.COMMA:
        # Joined first, then encoded as one unit (commas become %2C)
        return [f"{name}={escape(str(value))}"]

    pairs: list[str] = []
    for i, item in enumerate(value.items):
        # Holes left by sparse indexed placement
        if isinstance(item, _Null):
            continue
        text = escape(str(item))
        if array_format is ArrayFormat.BRACKET:
            pairs.append(f"{name}[]={text}")
        elif array_format is ArrayFormat.INDEX:
            pairs.append(f"{name}[{i}]={text}")
        else:
            pairs.append(f"{name}={text}")
    return pairs
