"""Runtime helpers for PrestaShop Webservice Extra"""

from .errors import (
    ErrorCode,
    WebserviceExtraError,
    ConfigurationError,
    DuplicateActionError,
    OptionBeforeActionError,
    ForbiddenActionError,
    DuplicateOptionError,
    EmptyInputError,
    InvalidSortOrderError,
    WebserviceApiError,
)
from .grammar import SortOrder, OptionValue, DISPLAY_FULL, DATE_FIELDS

__all__ = [
    "ErrorCode",
    "WebserviceExtraError",
    "ConfigurationError",
    "DuplicateActionError",
    "OptionBeforeActionError",
    "ForbiddenActionError",
    "DuplicateOptionError",
    "EmptyInputError",
    "InvalidSortOrderError",
    "WebserviceApiError",
    "SortOrder",
    "OptionValue",
    "DISPLAY_FULL",
    "DATE_FIELDS",
]
