"""Exception hierarchy for qs-core."""

from __future__ import annotations


class QueryStringError(Exception):
    """Base class for every error raised by qs_core."""


class InvalidOptionError(QueryStringError, ValueError):
    """An option object was built with a value it does not understand."""


class HostUnavailableError(QueryStringError, RuntimeError):
    """The address port lacks a primitive the operation needs.

    Raised by the address bindings before anything is read or written.
    """

    def __init__(self, operation: str, primitive: str) -> None:
        self.operation = operation
        self.primitive = primitive
        super().__init__(
            f"{operation}() needs an address port providing {primitive}(); "
            "it can only be used with a browsing context attached."
        )
