"""
Webservice client port.

The query builder does not talk HTTP itself. It hands the finished option
mapping to a client exposing one method per query action. Any object with
``get``, ``add``, ``edit`` and ``delete`` methods taking the option mapping
satisfies the protocol.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Mapping, Protocol, runtime_checkable

from .runtime.grammar import OptionValue

QueryOptionsMapping = Mapping[str, OptionValue]


class QueryAction(str, Enum):
    """Webservice query actions, one per HTTP verb."""

    GET = "get"
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"


@runtime_checkable
class WebserviceClient(Protocol):
    """
    Webservice client consumed by the query builder.

    Implementations return the parsed response unchanged and signal
    transport or API failures by raising, typically ``WebserviceApiError``.
    """

    def get(self, options: QueryOptionsMapping) -> Any:
        """Retrieve a resource (HTTP GET)."""
        ...

    def add(self, options: QueryOptionsMapping) -> Any:
        """Create a resource (HTTP POST)."""
        ...

    def edit(self, options: QueryOptionsMapping) -> Any:
        """Update a resource (HTTP PUT)."""
        ...

    def delete(self, options: QueryOptionsMapping) -> Any:
        """Delete a resource (HTTP DELETE)."""
        ...


__all__ = [
    "QueryAction",
    "QueryOptionsMapping",
    "WebserviceClient",
]
