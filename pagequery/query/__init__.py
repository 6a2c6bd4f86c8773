"""
Query building utilities.

This module provides the column path resolver, the filter token helpers,
the serializer and parser for nestjs-paginate query strings, and the
fluent builder tying them together.
"""

from pagequery.query.builder import PaginateQueryBuilder, create_paginate_params
from pagequery.query.columns import ColumnPathValidator, resolve_column_paths
from pagequery.query.filters import (
    FilterComparator,
    FilterOperator,
    FilterSuffix,
    and_group,
    array_contains,
    between,
    build_filter_token,
    eq,
    gt,
    gte,
    ilike,
    in_list,
    is_null,
    lt,
    lte,
    negate,
    or_group,
    starts_with,
)
from pagequery.query.parser import from_query_string, query_of
from pagequery.query.serializer import (
    ParamMap,
    decode_component,
    encode_component,
    to_pairs,
    to_param_map,
    to_query_string,
    to_search_params,
)
from pagequery.query.sorting import SortDirection, SortField
from pagequery.query.state import PaginateState

__all__ = [
    "PaginateQueryBuilder",
    "create_paginate_params",
    "ColumnPathValidator",
    "resolve_column_paths",
    "FilterComparator",
    "FilterOperator",
    "FilterSuffix",
    "build_filter_token",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "in_list",
    "is_null",
    "between",
    "ilike",
    "starts_with",
    "array_contains",
    "negate",
    "or_group",
    "and_group",
    "from_query_string",
    "query_of",
    "ParamMap",
    "encode_component",
    "decode_component",
    "to_pairs",
    "to_param_map",
    "to_query_string",
    "to_search_params",
    "SortDirection",
    "SortField",
    "PaginateState",
]
