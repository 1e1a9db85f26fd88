"""URL helpers: split a URL into base and query, and join them back."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .codec import parse, stringify
from .options import ParseOptions, StringifyOptions
from .values import QueryObject


@dataclass
class ParsedUrl:
    """A URL split at its first ``?``.

    ``url`` keeps everything before the ``?`` verbatim, a ``#fragment``
    included when the URL has no query.
    """

    url: str
    query: QueryObject = field(default_factory=dict)


def parse_url(url: str, options: ParseOptions | None = None) -> ParsedUrl:
    base, _, query = url.partition("?")
    return ParsedUrl(url=base, query=parse(query, options))


def stringify_url(
    parsed: ParsedUrl | Mapping[str, Any],
    options: StringifyOptions | None = None,
) -> str:
    """Join a base URL and a query object; a query that serializes empty is left off."""
    if isinstance(parsed, ParsedUrl):
        url, query = parsed.url, parsed.query
    else:
        url, query = parsed["url"], parsed.get("query") or {}

    query_string = stringify(query, options)
    return f"{url}?{query_string}" if query_string else url
