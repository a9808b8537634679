"""
PrestaShop Webservice Extra Error Model

This module provides the error handling framework for the query builder.
Every local validation failure has its own exception class and error code so
callers can tell a wrong action from a duplicate option or an empty input.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Iterable, List
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for query configuration and webservice failures."""

    # General errors (1-99)
    UNKNOWN = 1

    # Query configuration errors (100-199)
    CONFIGURATION_ERROR = 100
    DUPLICATE_ACTION = 101
    OPTION_BEFORE_ACTION = 102
    FORBIDDEN_ACTION = 103
    DUPLICATE_OPTION = 104
    EMPTY_INPUT = 105
    INVALID_SORT_ORDER = 106

    # Webservice errors (200-299)
    WEBSERVICE_ERROR = 200


class WebserviceExtraError(Exception):
    """
    Base class for all PrestaShop Webservice Extra errors.

    Provides structured error information: a message, an error code,
    optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ConfigurationError(WebserviceExtraError):
    """Query configuration errors raised while a query is being built."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CONFIGURATION_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class DuplicateActionError(ConfigurationError):
    """A second action was set on a session before it was cleared."""

    def __init__(self, current_action: str, requested_action: str):
        super().__init__(
            "You're trying to overwrite the webservice query action. "
            "Only one query action should be used.",
            ErrorCode.DUPLICATE_ACTION,
            {"current_action": current_action, "requested_action": requested_action},
        )
        self.current_action = current_action
        self.requested_action = requested_action


class OptionBeforeActionError(ConfigurationError):
    """A query option was set before any query action was defined."""

    def __init__(self, allowed_actions: Iterable[str]):
        self.allowed_actions: List[str] = list(allowed_actions)
        super().__init__(
            "You're trying to add a query option before defining the query action. "
            "The query action must always be defined before any query option.",
            ErrorCode.OPTION_BEFORE_ACTION,
            {"allowed_actions": self.allowed_actions},
        )


class ForbiddenActionError(ConfigurationError):
    """A query option was set for an action it does not support."""

    def __init__(self, action: str, allowed_actions: Iterable[str]):
        self.action = action
        self.allowed_actions: List[str] = list(allowed_actions)
        super().__init__(
            f"This query option can only be used with these actions: "
            f"{', '.join(self.allowed_actions)}. Current one ({action}) is forbidden.",
            ErrorCode.FORBIDDEN_ACTION,
            details={"action": action, "allowed_actions": self.allowed_actions},
        )


class DuplicateOptionError(ConfigurationError):
    """The same query option was set twice in one session."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(
            "You're trying to overwrite a webservice query option. "
            "Each query option should be defined only once.",
            ErrorCode.DUPLICATE_OPTION,
            {"option": option},
        )


class EmptyInputError(ConfigurationError):
    """An empty collection was passed where at least one element is required."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} shouldn't be empty.", ErrorCode.EMPTY_INPUT)


class InvalidSortOrderError(ConfigurationError):
    """A sort order other than ASC or DESC was requested."""

    def __init__(self, field: str, order: Any):
        self.field = field
        self.order = order
        super().__init__(
            "Please provide a valid order value (ASC or DESC).",
            ErrorCode.INVALID_SORT_ORDER,
            {"field": field, "order": order},
        )


class WebserviceApiError(WebserviceExtraError):
    """
    Transport or API failure reported by a webservice client.

    Raised by client implementations, never by the query builder itself.
    The builder propagates it to the caller unchanged.
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.WEBSERVICE_ERROR, details, cause)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"WebserviceApiError({self.status_code}): {self.message}"
        return f"WebserviceApiError: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.status_code is not None:
            result["status_code"] = self.status_code
        return result


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
]
