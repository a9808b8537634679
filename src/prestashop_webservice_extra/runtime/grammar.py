"""
Query parameter grammar for the PrestaShop webservice.

The platform parses these values literally, so every formatter here produces
the exact bracketed syntax it expects:

- filters: ``[v]``, ``[v1|v2]``, ``[min,max]``, ``[v]%``, ``%[v]``, ``%[v]%``
- display: ``[f1,f2]`` or ``full``
- sort: ``[field1_ASC,field2_DESC]``
- limit: ``n`` or ``offset,n``
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Iterable, List, Mapping, Tuple, Union

from .errors import EmptyInputError, InvalidSortOrderError

OptionValue = Union[str, int]

DISPLAY_FULL = "full"
DATE_FIELDS = ("date_add", "date_upd")


class SortOrder(str, Enum):
    """Sort directions accepted by the webservice."""

    ASC = "ASC"
    DESC = "DESC"


def filter_key(field: str) -> str:
    """Option key for a filter on ``field``."""
    return f"filter[{field}]"


def format_value(value: Any) -> str:
    return f"[{_wire(value)}]"


def format_values(values: Iterable[Any], argument: str = "Values array") -> str:
    """
    Format a disjunction of values.

    Args:
        values: Values to match, at least one
        argument: Name used in the error message

    Returns:
        ``[v1|v2|...]``

    Raises:
        EmptyInputError: If no value is given
        TypeError: If ``values`` is a string instead of a collection
    """
    items = _require_items(values, argument)
    return "[" + "|".join(str(_wire(item)) for item in items) + "]"


def format_interval(minimum: Any, maximum: Any) -> str:
    return f"[{_wire(minimum)},{_wire(maximum)}]"


def format_begins_by(value: Any) -> str:
    return f"[{_wire(value)}]%"


def format_ends_by(value: Any) -> str:
    return f"%[{_wire(value)}]"


def format_contains(value: Any) -> str:
    return f"%[{_wire(value)}]%"


def format_display(fields: Iterable[str]) -> str:
    """Format the list of fields to display as ``[f1,f2,...]``."""
    items = _require_items(fields, "Display values array")
    return "[" + ",".join(str(item) for item in items) + "]"


def format_sort(sort: Mapping[str, Union[str, SortOrder]]) -> Tuple[str, bool]:
    """
    Format the sort option.

    Entries are kept in the mapping's iteration order. Every order is
    validated before anything is returned.

    Args:
        sort: Mapping of field name to ``ASC`` or ``DESC`` (case-sensitive)

    Returns:
        Tuple of the ``[field_ORDER,...]`` value and whether a date field
        is part of the sort

    Raises:
        EmptyInputError: If the mapping is empty
        InvalidSortOrderError: If an order is not ASC or DESC
    """
    if not sort:
        raise EmptyInputError("Sort values array")

    parts: List[str] = []
    sorts_by_date = False
    for field, order in sort.items():
        resolved = _resolve_order(field, order)
        if field in DATE_FIELDS:
            sorts_by_date = True
        parts.append(f"{field}_{resolved.value}")

    return "[" + ",".join(parts) + "]", sorts_by_date


def format_limit(limit: int, offset: int = 0) -> OptionValue:
    """Return ``limit`` as is, or ``"offset,limit"`` when an offset is given."""
    if offset > 0:
        return f"{offset},{limit}"
    return limit


def _resolve_order(field: str, order: Any) -> SortOrder:
    if isinstance(order, SortOrder):
        return order
    if not isinstance(order, str):
        raise InvalidSortOrderError(field, order)
    try:
        return SortOrder(order)
    except ValueError:
        raise InvalidSortOrderError(field, order) from None


def _wire(value: Any) -> Any:
    # The webservice reads booleans as 1 and 0.
    if isinstance(value, bool):
        return int(value)
    return value


def _require_items(values: Iterable[Any], argument: str) -> List[Any]:
    if isinstance(values, (str, bytes)):
        raise TypeError(f"{argument} must be a collection, got {type(values).__name__}")
    items = list(values)
    if not items:
        raise EmptyInputError(argument)
    return items


__all__ = [
    "DATE_FIELDS",
    "DISPLAY_FULL",
    "OptionValue",
    "SortOrder",
    "filter_key",
    "format_begins_by",
    "format_contains",
    "format_display",
    "format_ends_by",
    "format_interval",
    "format_limit",
    "format_sort",
    "format_value",
    "format_values",
]
