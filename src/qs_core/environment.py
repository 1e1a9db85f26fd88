"""Address port: the host's current address and history replacement."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable
from urllib.parse import urljoin, urlsplit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """Snapshot of the host's current address."""

    origin: str    # scheme://host[:port]
    pathname: str
    search: str    # "" or "?..."

    @property
    def base(self) -> str:
        """The address without its query and fragment."""
        return self.origin + self.pathname


@runtime_checkable
class AddressPort(Protocol):
    """What the address bindings need from a browsing context."""

    def location(self) -> Location:
        ...

    def replace(self, url: str) -> None:
        """Change the current address without navigating or adding a history entry."""
        ...


def location_from_href(href: str) -> Location:
    parts = urlsplit(href)
    host = parts.netloc.rpartition("@")[2]  # origin never carries credentials
    origin = f"{parts.scheme}://{host}" if host else ""
    pathname = parts.path or ("/" if host else "")
    search = f"?{parts.query}" if parts.query else ""
    return Location(origin=origin, pathname=pathname, search=search)


@dataclass
class AddressBar:
    """In-memory address port.

    ``history`` holds one entry per navigation; :meth:`replace` rewrites
    the current (last) entry in place and records the new address in
    ``replacements``.
    """

    href: str
    history: list[str] = field(default_factory=list)
    replacements: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.history:
            self.history.append(self.href)

    def location(self) -> Location:
        return location_from_href(self.href)

    @property
    def history_length(self) -> int:
        return len(self.history)

    def replace(self, url: str) -> None:
        self.href = urljoin(self.href, url)
        self.history[-1] = self.href
        self.replacements.append(self.href)
        logger.debug("address replaced with %s", self.href)

    def navigate(self, url: str) -> None:
        """Move to *url*, adding a history entry."""
        self.href = urljoin(self.href, url)
        self.history.append(self.href)
