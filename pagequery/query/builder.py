"""
Fluent builder for nestjs-paginate query parameters.

Example:
    ```python
    from pagequery import create_paginate_params, eq, gte

    user = {"name": str, "email": str, "courses": [{"price": int}]}

    qs = (
        create_paginate_params(shape=user)
        .page(1)
        .limit(10)
        .sort_by("name", "ASC")
        .filter("courses.price", gte(100))
        .to_query_string()
    )
    # "?page=1&limit=10&sortBy=name%3AASC&filter.courses.price=%24gte%3A100"
    ```
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple, Union

from starlette.datastructures import QueryParams

from pagequery.errors import InvalidFilterTokenError, ValidationError
from pagequery.query.columns import ColumnPathValidator
from pagequery.query.serializer import (
    ParamMap,
    to_pairs,
    to_param_map,
    to_query_string,
    to_search_params,
)
from pagequery.query.sorting import SortDirection, SortField
from pagequery.query.state import PaginateState
from pagequery.schemas.params import PaginateParamsInput


def _positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(
            message=f"{name} must be a positive integer",
            fields=[{"field": name, "message": f"Expected a positive integer, got {value!r}"}],
        )
    return value


def _text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(
            message=f"{name} must be a string",
            fields=[{"field": name, "message": f"Expected a string, got {value!r}"}],
        )
    return value


class PaginateQueryBuilder:
    """
    Mutable accumulator for a paginate query.

    Every setter validates its column arguments, mutates the state and
    returns the builder itself. Only ``filter`` accumulates: repeated calls
    for the same column append tokens.

    Attributes:
        validator: Column path validator shared with clones
    """

    def __init__(
        self,
        shape: Any = None,
        *,
        validator: Optional[ColumnPathValidator] = None,
    ):
        """
        Initialize an empty builder.

        Args:
            shape: Optional entity shape used to validate column paths
            validator: Pre-built validator; takes precedence over shape
        """
        self.validator = validator or ColumnPathValidator(shape)
        self._state = PaginateState()

    def page(self, n: int) -> "PaginateQueryBuilder":
        """Set the page number (1-based)."""
        self._state.page = _positive_int("page", n)
        return self

    def limit(self, n: int) -> "PaginateQueryBuilder":
        """Set the number of records per page. The backend may cap it."""
        self._state.limit = _positive_int("limit", n)
        return self

    def sort_by(
        self, column: str, direction: Union[str, SortDirection] = SortDirection.ASC
    ) -> "PaginateQueryBuilder":
        """
        Add a sort rule. The order of calls defines sort priority.

        Args:
            column: Column path to sort by
            direction: ASC or DESC, case-insensitive

        Raises:
            InvalidColumnPathError: If the column is not allowed
            ValidationError: If the direction is invalid
        """
        column = self.validator.validate(column)
        try:
            direction = SortDirection.parse(direction)
        except ValueError as e:
            raise ValidationError(
                message=str(e), fields=[{"field": "sortBy", "message": str(e)}]
            ) from e
        self._state.sort_by.append(SortField(column, direction))
        return self

    def search(self, term: str) -> "PaginateQueryBuilder":
        """Set the search term. An empty term is not serialized."""
        self._state.search = _text("search", term)
        return self

    def search_by(self, columns: Iterable[str]) -> "PaginateQueryBuilder":
        """Replace the list of columns the search term applies to."""
        self._state.search_by = self.validator.validate_many(columns)
        return self

    def select(self, columns: Iterable[str]) -> "PaginateQueryBuilder":
        """Replace the list of selected columns (sparse fieldset)."""
        self._state.select = self.validator.validate_many(columns)
        return self

    def filter(self, column: str, token: Union[str, Iterable[str]]) -> "PaginateQueryBuilder":
        """
        Add one or more filter tokens on a column.

        Repeated calls for the same column append rather than overwrite.

        Args:
            column: Column path to filter on
            token: A token from the filter helpers, or a list of tokens

        Raises:
            InvalidColumnPathError: If the column is not allowed
            InvalidFilterTokenError: If a token is empty or not a string
        """
        column = self.validator.validate(column)
        if isinstance(token, str):
            tokens = [token]
        elif isinstance(token, (list, tuple)):
            tokens = list(token)
        else:
            raise InvalidFilterTokenError(f"Invalid filter token for {column!r}: {token!r}")
        for t in tokens:
            if not isinstance(t, str) or not t:
                raise InvalidFilterTokenError(f"Invalid filter token for {column!r}: {t!r}")
        if not tokens:
            return self

        self._state.filters.setdefault(column, []).extend(tokens)
        return self

    def cursor(self, value: str) -> "PaginateQueryBuilder":
        """Set the opaque cursor returned by the backend for cursor pagination."""
        self._state.cursor = _text("cursor", value)
        return self

    def with_deleted(self, value: bool = True) -> "PaginateQueryBuilder":
        """Include soft-deleted records. ``False`` clears the flag."""
        self._state.with_deleted = value is True
        return self

    @property
    def state(self) -> PaginateState:
        """A copy of the current state."""
        return self._state.copy()

    def clone(self) -> "PaginateQueryBuilder":
        """Create an independent copy. Only the immutable validator is shared."""
        copy = PaginateQueryBuilder(validator=self.validator)
        copy._state = self._state.copy()
        return copy

    def to_param_map(self) -> ParamMap:
        """
        Build a params dict for ``httpx``/``requests`` or a URL.

        Returns:
            Mapping of parameter names to a string or list of strings
        """
        return to_param_map(self._state)

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Ordered ``(key, value)`` pairs with repeated keys for lists."""
        return to_pairs(self.to_param_map())

    def to_search_params(self) -> QueryParams:
        """Ordered multi-map of the params."""
        return to_search_params(self.to_param_map())

    def to_query_string(self) -> str:
        """Query string with a leading ``?``, or an empty string."""
        return to_query_string(self.to_param_map())

    def __eq__(self, other) -> bool:
        if not isinstance(other, PaginateQueryBuilder):
            return NotImplemented
        return self.to_param_map() == other.to_param_map()

    def __repr__(self) -> str:
        return f"PaginateQueryBuilder({self.to_query_string()!r})"


def create_paginate_params(
    input: Union[PaginateParamsInput, Mapping, None] = None,
    shape: Any = None,
    *,
    validator: Optional[ColumnPathValidator] = None,
) -> PaginateQueryBuilder:
    """
    Create a builder, optionally pre-populated from an input object.

    Fields are applied through the regular setters in this order: page,
    limit, sortBy, search, searchBy, select, filter, cursor, withDeleted.

    Args:
        input: PaginateParamsInput or a mapping with the same fields
            (camelCase or snake_case)
        shape: Optional entity shape used to validate column paths
        validator: Pre-built validator; takes precedence over shape

    Returns:
        A new PaginateQueryBuilder

    Example:
        ```python
        create_paginate_params(
            {"page": 1, "sortBy": ("name", "ASC"), "filter": {"name": eq("John")}}
        ).to_query_string()
        ```
    """
    builder = PaginateQueryBuilder(shape, validator=validator)
    if input is None:
        return builder

    params = (
        input
        if isinstance(input, PaginateParamsInput)
        else PaginateParamsInput.model_validate(input)
    )

    if params.page is not None:
        builder.page(params.page)
    if params.limit is not None:
        builder.limit(params.limit)
    for column, direction in params.sort_rules():
        builder.sort_by(column, direction)
    if params.search is not None:
        builder.search(params.search)
    if params.search_by is not None:
        builder.search_by(params.search_by)
    if params.select is not None:
        builder.select(params.select)
    if params.filter is not None:
        for column, token in params.filter.items():
            builder.filter(column, token)
    if params.cursor is not None:
        builder.cursor(params.cursor)
    if params.with_deleted is not None:
        builder.with_deleted(params.with_deleted)
    return builder
