"""
Fluent query builder for the PrestaShop webservice.

A query session starts with one of the query-initiating calls (``get``,
``add``, ``edit``, ``delete``, their ``*_url`` variants or
``get_blank_schema``), collects options through chained setters and is
dispatched with ``execute_query``.

Example:
    ```python
    builder = QueryBuilder(webservice, "https://shop.example.com")
    products = (
        builder.get("products")
        .display(["id", "name"])
        .add_interval_filter("price", 10, 100)
        .sort({"date_add": "DESC"})
        .limit(20, 40)
        .execute_query()
    )
    ```
"""

from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Union

from .config import BuilderConfig
from .runtime import grammar
from .runtime.errors import (
    DuplicateActionError,
    DuplicateOptionError,
    ForbiddenActionError,
    OptionBeforeActionError,
)
from .runtime.grammar import OptionValue, SortOrder
from .webservice import QueryAction, QueryOptionsMapping, WebserviceClient

logger = logging.getLogger(__name__)

GET_ONLY = (QueryAction.GET,)
GET_EDIT_DELETE = (QueryAction.GET, QueryAction.EDIT, QueryAction.DELETE)
ADD_EDIT = (QueryAction.ADD, QueryAction.EDIT)


class QuerySession:
    """
    State of the query being built: one action and its options.

    Each option key may be written once per session and the action may be
    set once; both rules raise instead of overwriting.
    """

    def __init__(self):
        self.action: Optional[QueryAction] = None
        self.options: Dict[str, OptionValue] = {}

    def set_action(self, action: QueryAction) -> None:
        if self.action is not None:
            raise DuplicateActionError(self.action.value, QueryAction(action).value)
        self.action = QueryAction(action)

    def add_option(self, name: str, value: Any) -> None:
        self.require_unset(name)
        self.options[name] = value

    def require_unset(self, *names: str) -> None:
        """Raise DuplicateOptionError if any of ``names`` is already set."""
        for name in names:
            if name in self.options:
                raise DuplicateOptionError(name)

    def require_action(self, allowed: Sequence[QueryAction]) -> QueryAction:
        """
        Check that the current action is one of ``allowed``.

        Returns:
            The current action

        Raises:
            OptionBeforeActionError: If no action is set yet
            ForbiddenActionError: If the current action is not allowed
        """
        allowed_names = [action.value for action in allowed]
        if self.action is None:
            raise OptionBeforeActionError(allowed_names)
        if self.action not in allowed:
            raise ForbiddenActionError(self.action.value, allowed_names)
        return self.action

    def clear(self) -> None:
        self.action = None
        self.options = {}

    @property
    def is_empty(self) -> bool:
        return self.action is None and not self.options

    def __repr__(self) -> str:
        action = self.action.value if self.action is not None else None
        return f"QuerySession(action={action!r}, options={list(self.options.keys())})"


class QueryBuilder:
    """
    Builds one webservice query at a time and dispatches it to a client.

    Not safe for concurrent use: one builder holds exactly one session.

    With ``debug=True`` the module logger is lowered to DEBUG for the whole
    process; the level is not restored when the builder goes away.
    """

    def __init__(self, webservice: WebserviceClient, config: Union[str, BuilderConfig]):
        """
        Initialize the query builder.

        Args:
            webservice: Client exposing get/add/edit/delete
            config: Either the shop base URL or a BuilderConfig object
        """
        if isinstance(config, str):
            self.config = BuilderConfig(url=config)
        else:
            self.config = config

        self.webservice = webservice
        self._session = QuerySession()

        self.logger = logger
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

    @property
    def url(self) -> str:
        """Shop base URL."""
        return self.config.url

    # =========================================================================
    # Session control
    # =========================================================================

    def reset(self) -> QueryBuilder:
        """
        Discard the current session, finished or not.

        Every query-initiating call starts with a reset.

        Returns:
            Self for chaining
        """
        if not self._session.is_empty:
            self.logger.debug(f"Discarding query session {self._session!r}")
        self._session.clear()
        return self

    def _begin_query(self, action: QueryAction, resource: Optional[str] = None,
                     url: Optional[str] = None) -> QueryBuilder:
        self.reset()
        self._session.set_action(action)
        if url is not None:
            self._session.add_option("url", url)
        else:
            self._session.add_option("resource", resource)
        self.logger.debug(f"Started {action.value} query on {url or resource}")
        return self

    def get(self, resource: str) -> QueryBuilder:
        return self._begin_query(QueryAction.GET, resource=resource)

    def get_url(self, url: str) -> QueryBuilder:
        return self._begin_query(QueryAction.GET, url=url)

    def get_blank_schema(self, resource: str) -> QueryBuilder:
        """Start a get query for the blank XML schema of ``resource``."""
        return self._begin_query(
            QueryAction.GET,
            url=f"{self.config.url}/api/{resource}?schema=blank",
        )

    def add(self, resource: str) -> QueryBuilder:
        return self._begin_query(QueryAction.ADD, resource=resource)

    def add_url(self, url: str) -> QueryBuilder:
        return self._begin_query(QueryAction.ADD, url=url)

    def edit(self, resource: str) -> QueryBuilder:
        return self._begin_query(QueryAction.EDIT, resource=resource)

    def edit_url(self, url: str) -> QueryBuilder:
        return self._begin_query(QueryAction.EDIT, url=url)

    def delete(self, resource: str) -> QueryBuilder:
        return self._begin_query(QueryAction.DELETE, resource=resource)

    def delete_url(self, url: str) -> QueryBuilder:
        return self._begin_query(QueryAction.DELETE, url=url)

    # =========================================================================
    # Option setters
    # =========================================================================

    def _set_option(self, name: str, value: OptionValue) -> QueryBuilder:
        self._session.add_option(name, value)
        self.logger.debug(f"Set query option {name}={value!r}")
        return self

    def id(self, resource_id: int) -> QueryBuilder:
        self._session.require_action(GET_EDIT_DELETE)
        return self._set_option("id", resource_id)

    def add_value_filter(self, field: str, value: Any) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option(grammar.filter_key(field), grammar.format_value(value))

    def add_values_filter(self, field: str, values: Iterable[Any]) -> QueryBuilder:
        """Match any of ``values`` on ``field``."""
        self._session.require_action(GET_ONLY)
        return self._set_option(grammar.filter_key(field), grammar.format_values(values))

    def add_interval_filter(self, field: str, minimum: int, maximum: int) -> QueryBuilder:
        """Match ``field`` between ``minimum`` and ``maximum``, bounds included."""
        self._session.require_action(GET_ONLY)
        return self._set_option(
            grammar.filter_key(field),
            grammar.format_interval(minimum, maximum),
        )

    def add_begins_by_filter(self, field: str, value: Any) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option(grammar.filter_key(field), grammar.format_begins_by(value))

    def add_ends_by_filter(self, field: str, value: Any) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option(grammar.filter_key(field), grammar.format_ends_by(value))

    def add_contains_filter(self, field: str, value: Any) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option(grammar.filter_key(field), grammar.format_contains(value))

    def display(self, fields: Iterable[str]) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option("display", grammar.format_display(fields))

    def display_full(self) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option("display", grammar.DISPLAY_FULL)

    def sort(self, sort: Mapping[str, Union[str, SortOrder]]) -> QueryBuilder:
        """
        Sort results by one or more fields.

        Sorting on ``date_add`` or ``date_upd`` also sets the ``date`` option,
        which the webservice requires for date sorting.

        Args:
            sort: Ordered mapping of field name to ``ASC`` or ``DESC``

        Returns:
            Self for chaining
        """
        self._session.require_action(GET_ONLY)
        value, sorts_by_date = grammar.format_sort(sort)
        # Nothing is written unless both options are free.
        self._session.require_unset(*(("date", "sort") if sorts_by_date else ("sort",)))
        if sorts_by_date:
            self._set_option("date", 1)
        return self._set_option("sort", value)

    def limit(self, limit: int, offset: int = 0) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option("limit", grammar.format_limit(limit, offset))

    # id_shop and id_group_shop apply to every action and may precede it.
    def id_shop(self, id_shop: int) -> QueryBuilder:
        return self._set_option("id_shop", id_shop)

    def id_group_shop(self, id_group_shop: int) -> QueryBuilder:
        return self._set_option("id_group_shop", id_group_shop)

    def schema(self, schema: str) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option("schema", schema)

    def language_filter(self, language_id: int) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option("language", language_id)

    def languages_filter(self, language_ids: Iterable[int]) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option(
            "language",
            grammar.format_values(language_ids, "Languages ids array"),
        )

    def language_interval_filter(self, min_language_id: int, max_language_id: int) -> QueryBuilder:
        self._session.require_action(GET_ONLY)
        return self._set_option(
            "language",
            grammar.format_interval(min_language_id, max_language_id),
        )

    def send_xml(self, xml: Any) -> QueryBuilder:
        """Attach the XML payload: ``postXml`` for add, ``putXml`` for edit."""
        action = self._session.require_action(ADD_EDIT)
        key = "postXml" if action is QueryAction.ADD else "putXml"
        return self._set_option(key, xml)

    # =========================================================================
    # Finalization
    # =========================================================================

    def execute_query(self) -> Any:
        """
        Dispatch the current query to the webservice client.

        The session is cleared afterwards, also when the client raises.
        Client errors propagate unchanged.

        Returns:
            The client's response, or None when no query action is set
        """
        action = self._session.action
        if action is None:
            return None

        options = dict(self._session.options)
        operation = self._operation_for(action)
        self.logger.debug(f"Executing {action.value} query with options {options}")
        try:
            return operation(options)
        finally:
            self._session.clear()

    def _operation_for(self, action: QueryAction) -> Callable[[QueryOptionsMapping], Any]:
        operations: Dict[QueryAction, Callable[[QueryOptionsMapping], Any]] = {
            QueryAction.GET: self.webservice.get,
            QueryAction.ADD: self.webservice.add,
            QueryAction.EDIT: self.webservice.edit,
            QueryAction.DELETE: self.webservice.delete,
        }
        return operations[action]

    # =========================================================================
    # Introspection
    # =========================================================================

    def get_query_action(self) -> Optional[QueryAction]:
        """Current query action, or None outside a session."""
        return self._session.action

    def get_query_options(self) -> Mapping[str, OptionValue]:
        """Read-only snapshot of the current query options."""
        return MappingProxyType(dict(self._session.options))

    def __repr__(self) -> str:
        return f"QueryBuilder(url='{self.config.url}', session={self._session!r})"


__all__ = [
    "QueryBuilder",
    "QuerySession",
]
