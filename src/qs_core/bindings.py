"""QueryBinding — read and rewrite the query of a host's current address."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from .codec import parse
from .environment import AddressPort
from .errors import HostUnavailableError
from .options import ParseOptions, StringifyOptions
from .url import stringify_url
from .values import QueryObject

logger = logging.getLogger(__name__)


def _require(port: AddressPort | None, operation: str, primitive: str) -> Callable:
    """Return the port's *primitive* method or raise HostUnavailableError."""
    method = getattr(port, primitive, None)
    if not callable(method):
        logger.debug("%s() without %s() on %r", operation, primitive, port)
        raise HostUnavailableError(operation, primitive)
    return method


class QueryBinding:
    """Query access bound to an address port.

    Usage::

        bar = AddressBar("https://x.test/list?page=2")
        qb = QueryBinding(bar)
        qb.get()                     # → {"page": "2"}
        qb.update({"sort": "name"})  # → https://x.test/list?page=2&sort=name
        qb.remove_keys(["page"])     # → https://x.test/list?sort=name
        qb.remove()                  # → https://x.test/list

    Writes go through ``port.replace()`` so the history never grows.
    """

    def __init__(self, port: AddressPort | None) -> None:
        self.port = port

    def get(self, options: ParseOptions | None = None) -> QueryObject:
        """Parse the query of the current address."""
        location = _require(self.port, "get", "location")
        return parse(location().search, options)

    def set(self, query: Mapping[str, Any], options: StringifyOptions | None = None) -> None:
        """Replace the address with origin + path + the serialized *query*.

        Any previous query and fragment are dropped.
        """
        location = _require(self.port, "set", "location")
        replace = _require(self.port, "set", "replace")
        url = stringify_url({"url": location().base, "query": query}, options)
        self._replace(replace, url)

    def update(self, updates: Mapping[str, Any], options: StringifyOptions | None = None) -> None:
        """Shallow-merge *updates* over the current query and write it back."""
        merged = {**self.get(), **updates}
        self.set(merged, options)

    def remove(self) -> None:
        """Clear the whole query (and fragment)."""
        location = _require(self.port, "remove", "location")
        replace = _require(self.port, "remove", "replace")
        self._replace(replace, location().base)

    def remove_keys(self, keys: Iterable[str], options: StringifyOptions | None = None) -> None:
        """Drop the named keys from the current query; unknown keys are ignored."""
        current = self.get()
        for key in keys:
            current.pop(key, None)
        self.set(current, options)

    def _replace(self, replace: Callable[[str], None], url: str) -> None:
        logger.debug("replacing address with %s", url)
        replace(url)
