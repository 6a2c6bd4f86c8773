"""
pagequery - Query-string builder for nestjs-paginate backends.

This package builds and parses the query strings understood by
nestjs-paginate: pagination, sorting, search, column selection,
soft-delete inclusion and filter tokens, with column paths validated
against a described entity shape.

Usage:
    from pagequery import create_paginate_params, eq, from_query_string

    qs = create_paginate_params({"page": 1}).filter("name", eq("John")).to_query_string()
    builder = from_query_string(qs)
"""

__version__ = "0.1.0"
__license__ = "MIT"
__min_python_version__ = "3.10"

__version_info__ = (0, 1, 0)

# Public API exports
from pagequery.config import BaseAppSettings, get_settings
from pagequery.errors import (
    AppError,
    InvalidColumnPathError,
    InvalidFilterTokenError,
    ValidationError,
)
from pagequery.logging import get_logger
from pagequery.query import (
    ColumnPathValidator,
    FilterComparator,
    FilterOperator,
    FilterSuffix,
    PaginateQueryBuilder,
    SortDirection,
    and_group,
    array_contains,
    between,
    build_filter_token,
    create_paginate_params,
    eq,
    from_query_string,
    gt,
    gte,
    ilike,
    in_list,
    is_null,
    lt,
    lte,
    negate,
    or_group,
    query_of,
    resolve_column_paths,
    starts_with,
    to_query_string,
)
from pagequery.schemas import (
    PaginatedLinks,
    PaginatedMeta,
    PaginatedResponse,
    PaginateParamsInput,
)
