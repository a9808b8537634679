"""
PrestaShop Webservice Extra

Fluent query builder for the PrestaShop REST webservice. Builds the option
mapping of one request (resource or URL, filters, sort, pagination, language
scoping, XML payload) and dispatches it through a webservice client.
"""

from .builder import QueryBuilder, QuerySession
from .config import BuilderConfig
from .webservice import QueryAction, WebserviceClient
from .client_mock import RecordedQuery, RecordingWebservice
from .runtime.errors import (
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
from .runtime.grammar import SortOrder

__version__ = "1.0.0"
__all__ = [
    # Builder
    "QueryBuilder",
    "QuerySession",
    "BuilderConfig",

    # Webservice client port
    "QueryAction",
    "SortOrder",
    "WebserviceClient",
    "RecordedQuery",
    "RecordingWebservice",

    # Errors
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
]
