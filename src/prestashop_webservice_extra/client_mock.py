"""
Recording webservice client.

Implements the webservice client protocol without any transport: dispatched
queries are recorded and answered with canned responses or canned errors.
Useful for dry runs and for testing code that builds queries.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .webservice import QueryAction, QueryOptionsMapping
from .runtime.grammar import OptionValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedQuery:
    """One query received by the recording client."""

    action: QueryAction
    options: Dict[str, OptionValue] = field(default_factory=dict)


class RecordingWebservice:
    """
    Webservice client that records queries instead of sending them.

    Example:
        ```python
        webservice = RecordingWebservice()
        webservice.set_response("get", {"products": []})
        builder = QueryBuilder(webservice, "https://shop.example.com")
        builder.get("products").display_full().execute_query()
        webservice.last_call.options  # {"resource": "products", "display": "full"}
        ```
    """

    def __init__(self):
        self.calls: List[RecordedQuery] = []
        self.responses: Dict[QueryAction, Any] = {}
        self.errors: Dict[QueryAction, Exception] = {}

    def set_response(self, action: Union[str, QueryAction], response: Any) -> None:
        """Set the response returned for ``action``."""
        self.responses[QueryAction(action)] = response

    def set_error(self, action: Union[str, QueryAction], error: Optional[Exception]) -> None:
        """Raise ``error`` for every ``action`` call; None clears it."""
        resolved = QueryAction(action)
        if error is None:
            self.errors.pop(resolved, None)
        else:
            self.errors[resolved] = error

    @property
    def last_call(self) -> Optional[RecordedQuery]:
        return self.calls[-1] if self.calls else None

    def reset(self) -> None:
        """Forget recorded calls, responses and errors."""
        self.calls.clear()
        self.responses.clear()
        self.errors.clear()

    def _handle(self, action: QueryAction, options: QueryOptionsMapping) -> Any:
        self.calls.append(RecordedQuery(action, dict(options)))
        logger.debug(f"Recorded {action.value} query ({len(self.calls)} total)")
        error = self.errors.get(action)
        if error is not None:
            raise error
        return self.responses.get(action)

    def get(self, options: QueryOptionsMapping) -> Any:
        return self._handle(QueryAction.GET, options)

    def add(self, options: QueryOptionsMapping) -> Any:
        return self._handle(QueryAction.ADD, options)

    def edit(self, options: QueryOptionsMapping) -> Any:
        return self._handle(QueryAction.EDIT, options)

    def delete(self, options: QueryOptionsMapping) -> Any:
        return self._handle(QueryAction.DELETE, options)


__all__ = ["RecordedQuery", "RecordingWebservice"]
