"""
Parsing of nestjs-paginate query strings back into a builder.

Parsing is tolerant: unknown keys, unparseable numbers, malformed sort
rules and columns rejected by the validator are skipped and logged at
debug level, so that query strings from newer or older clients degrade
gracefully instead of failing the whole parse.
"""

import re
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

from pagequery.config import get_settings
from pagequery.errors import AppError
from pagequery.logging import get_logger
from pagequery.query.builder import PaginateQueryBuilder
from pagequery.query.columns import ColumnPathValidator
from pagequery.query.serializer import FILTER_PREFIX, decode_component
from pagequery.query.sorting import SortDirection

logger = get_logger(__name__, get_settings())

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Longest digit run accepted for page and limit
_MAX_INT_DIGITS = 18


def _parse_int(value: str) -> Optional[int]:
    """
    Parse a leading integer the way JavaScript's parseInt does.

    Returns None when there is no leading integer or it is longer than
    ``_MAX_INT_DIGITS`` digits.
    """
    match = _LEADING_INT.match(value)
    if not match or len(match.group(1).lstrip("+-")) > _MAX_INT_DIGITS:
        return None
    return int(match.group(1))


def query_of(url: str) -> str:
    """
    Extract the query string from a URL, e.g. a ``links.next`` value.

    Returns:
        The query part without the leading ``?``; empty if there is none
    """
    return urlsplit(url).query


def _apply(key: str, value: Any, setter) -> None:
    try:
        setter(value)
    except AppError as e:
        logger.debug("Skipping %s=%r: %s", key, value, e.message)


def _valid_columns(builder: PaginateQueryBuilder, key: str, columns: List[str]) -> List[str]:
    valid = []
    for column in columns:
        if not column:
            continue
        try:
            valid.append(builder.validator.validate(column))
        except AppError as e:
            logger.debug("Skipping %s column %r: %s", key, column, e.message)
    return valid


def from_query_string(
    qs: str,
    shape: Any = None,
    *,
    validator: Optional[ColumnPathValidator] = None,
) -> PaginateQueryBuilder:
    """
    Parse a query string into a pre-populated builder.

    Supports ``page``, ``limit``, ``sortBy``, ``search``, ``searchBy``,
    ``select``, ``cursor``, ``withDeleted`` and ``filter.<column>``.

    Args:
        qs: Query string, with or without a leading ``?``
        shape: Optional entity shape used to validate column paths
        validator: Pre-built validator; takes precedence over shape

    Returns:
        A PaginateQueryBuilder that can be modified further

    Example:
        ```python
        builder = from_query_string("?page=2&filter.name=%24eq%3AJohn")
        builder.limit(10).to_query_string()
        ```
    """
    builder = PaginateQueryBuilder(shape, validator=validator)
    query = qs[1:] if qs.startswith("?") else qs
    if not query:
        return builder

    search_by: List[str] = []
    filters: Dict[str, List[str]] = {}

    for pair in query.split("&"):
        if not pair:
            continue
        key, sep, raw_value = pair.partition("=")
        if not sep:
            logger.debug("Skipping fragment without '=': %r", pair)
            continue
        key = decode_component(key)
        value = decode_component(raw_value)

        if key in ("page", "limit"):
            n = _parse_int(value)
            if n is None:
                logger.debug("Skipping %s=%r: not a number", key, value)
                continue
            _apply(key, n, getattr(builder, key))
        elif key == "sortBy":
            column, sep, direction = value.rpartition(":")
            if not sep:
                logger.debug("Skipping sortBy=%r: missing direction", value)
                continue
            try:
                direction = SortDirection.parse(direction)
            except ValueError:
                logger.debug("Skipping sortBy=%r: invalid direction", value)
                continue
            _apply(key, column, lambda c: builder.sort_by(c, direction))
        elif key == "search":
            builder.search(value)
        elif key == "searchBy":
            search_by.append(value)
        elif key == "select":
            columns = _valid_columns(builder, key, value.split(","))
            if columns:
                builder.select(columns)
        elif key == "cursor":
            builder.cursor(value)
        elif key == "withDeleted":
            builder.with_deleted(value == "true")
        elif key.startswith(FILTER_PREFIX):
            if not value:
                logger.debug("Skipping empty filter %r", key)
                continue
            filters.setdefault(key[len(FILTER_PREFIX):], []).append(value)
        else:
            logger.debug("Skipping unknown key %r", key)

    search_by = _valid_columns(builder, "searchBy", search_by)
    if search_by:
        builder.search_by(search_by)
    for column, tokens in filters.items():
        _apply(FILTER_PREFIX + column, tokens, lambda t: builder.filter(column, t))

    return builder
