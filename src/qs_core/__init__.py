"""qs-core — query string codec, URL helpers and address-bar bindings."""

from .bindings import QueryBinding
from .codec import decode_component, encode_component, parse, stringify
from .environment import AddressBar, AddressPort, Location
from .errors import HostUnavailableError, InvalidOptionError, QueryStringError
from .options import ArrayFormat, ParseOptions, StringifyOptions
from .url import ParsedUrl, parse_url, stringify_url
from .values import (
    Null,
    QBool,
    QList,
    QNumber,
    QText,
    QueryObject,
    QueryValue,
    Value,
    _Null,
    to_python,
    to_value,
)

__all__ = [
    "parse",
    "stringify",
    "encode_component",
    "decode_component",
    "parse_url",
    "stringify_url",
    "ParsedUrl",
    "ArrayFormat",
    "ParseOptions",
    "StringifyOptions",
    "QueryBinding",
    "AddressBar",
    "AddressPort",
    "Location",
    "Null",
    "QBool",
    "QList",
    "QNumber",
    "QText",
    "QueryObject",
    "QueryValue",
    "Value",
    "to_python",
    "to_value",
    "QueryStringError",
    "InvalidOptionError",
    "HostUnavailableError",
]
