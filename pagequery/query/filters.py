"""
Filter token utilities for nestjs-paginate style queries.

A filter token encodes one condition on a column:

    [comparator:][suffix:]operator[:value]

Examples: ``$eq:John``, ``$gte:18``, ``$not:$null``, ``$or:$in:a,b``,
``$btw:1,10``. Tokens are plain strings; the builder stores them as-is
under ``filter.<column>``.
"""

from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional

from pagequery.errors import InvalidFilterTokenError

SEP = ":"
LIST_SEP = ","

# Sentinel distinguishing "no value supplied" from an explicit value
MISSING = object()


class FilterOperator(str, Enum):
    """
    Filter operators understood by nestjs-paginate.

    Attributes:
        EQ: Equal to
        GT: Greater than
        GTE: Greater than or equal to
        IN: In a list of values
        NULL: Is NULL (takes no value)
        LT: Less than
        LTE: Less than or equal to
        BTW: Between two values (inclusive)
        ILIKE: Case-insensitive substring match
        SW: Starts with
        CONTAINS: Array column contains all values
    """

    EQ = "$eq"
    GT = "$gt"
    GTE = "$gte"
    IN = "$in"
    NULL = "$null"
    LT = "$lt"
    LTE = "$lte"
    BTW = "$btw"
    ILIKE = "$ilike"
    SW = "$sw"
    CONTAINS = "$contains"


class FilterSuffix(str, Enum):
    """Suffix negating a filter condition."""

    NOT = "$not"


class FilterComparator(str, Enum):
    """
    Logical comparator combining conditions on the same column.

    AND is the backend default and is never emitted by build_filter_token.
    """

    AND = "$and"
    OR = "$or"


def _stringify(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def build_filter_token(
    operator: FilterOperator,
    value: Any = MISSING,
    comparator: Optional[FilterComparator] = None,
    suffix: Optional[FilterSuffix] = None,
) -> str:
    """
    Build a single filter token string.

    Args:
        operator: The filter operator
        value: Operator value; a list or tuple is comma-joined, ignored for $null
        comparator: Optional comparator, only $or is emitted
        suffix: Optional suffix such as $not

    Returns:
        The filter token, e.g. ``$eq:5`` or ``$or:$not:$in:a,b``

    Raises:
        InvalidFilterTokenError: If a non-null operator has no value, or $btw
            does not receive exactly two values
    """
    operator = FilterOperator(operator)
    parts = []

    if comparator is not None and FilterComparator(comparator) != FilterComparator.AND:
        parts.append(FilterComparator(comparator).value)
    if suffix is not None:
        parts.append(FilterSuffix(suffix).value)
    parts.append(operator.value)

    if operator == FilterOperator.NULL:
        return SEP.join(parts)

    if value is MISSING or value is None:
        raise InvalidFilterTokenError(
            f"Operator {operator.value} requires a value", operator=operator.value
        )

    if _is_sequence(value):
        items = [_stringify(v) for v in value]
        if not items:
            raise InvalidFilterTokenError(
                f"Operator {operator.value} requires at least one value",
                operator=operator.value,
            )
        if operator == FilterOperator.BTW and len(items) != 2:
            raise InvalidFilterTokenError(
                f"Operator {operator.value} requires exactly two values, got {len(items)}",
                operator=operator.value,
            )
        parts.append(LIST_SEP.join(items))
    else:
        if operator == FilterOperator.BTW:
            raise InvalidFilterTokenError(
                f"Operator {operator.value} requires a (min, max) pair",
                operator=operator.value,
            )
        parts.append(_stringify(value))

    return SEP.join(parts)


def eq(value: Any) -> str:
    """Equals. Produces ``$eq:value``."""
    return build_filter_token(FilterOperator.EQ, value)


def gt(value: Any) -> str:
    """Greater than. Produces ``$gt:value``."""
    return build_filter_token(FilterOperator.GT, value)


def gte(value: Any) -> str:
    """Greater than or equal. Produces ``$gte:value``."""
    return build_filter_token(FilterOperator.GTE, value)


def lt(value: Any) -> str:
    """Less than. Produces ``$lt:value``."""
    return build_filter_token(FilterOperator.LT, value)


def lte(value: Any) -> str:
    """Less than or equal. Produces ``$lte:value``."""
    return build_filter_token(FilterOperator.LTE, value)


def in_list(values) -> str:
    """
    In list. Produces ``$in:a,b,c``.

    Args:
        values: Allowed values for the column
    """
    return build_filter_token(FilterOperator.IN, list(values))


def is_null() -> str:
    """Is null. Produces ``$null``."""
    return build_filter_token(FilterOperator.NULL)


def between(min_value: Any, max_value: Any) -> str:
    """Between, inclusive. Produces ``$btw:min,max``."""
    return build_filter_token(FilterOperator.BTW, (min_value, max_value))


def ilike(value: Any) -> str:
    """Case-insensitive like. Produces ``$ilike:value``."""
    return build_filter_token(FilterOperator.ILIKE, value)


def starts_with(value: Any) -> str:
    """Starts with. Produces ``$sw:value``."""
    return build_filter_token(FilterOperator.SW, value)


def array_contains(*values: Any) -> str:
    """
    Array contains. Produces ``$contains:a,b`` for array columns.

    Example:
        ```python
        array_contains("admin", "editor")  # "$contains:admin,editor"
        ```
    """
    return build_filter_token(FilterOperator.CONTAINS, list(values))


def negate(token: str) -> str:
    """Negate a token, e.g. ``negate(eq("x"))`` gives ``$not:$eq:x``."""
    return f"{FilterSuffix.NOT.value}{SEP}{token}"


def or_group(token: str) -> str:
    """Combine a token with OR, e.g. ``or_group(eq("a"))`` gives ``$or:$eq:a``."""
    return f"{FilterComparator.OR.value}{SEP}{token}"


def and_group(token: str) -> str:
    """Prefix a token with an explicit ``$and:`` comparator."""
    return f"{FilterComparator.AND.value}{SEP}{token}"
