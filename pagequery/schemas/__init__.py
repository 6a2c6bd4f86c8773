"""
Pydantic schemas for builder input and paginated responses.
"""

from pagequery.schemas.params import PaginateParamsInput
from pagequery.schemas.response import PaginatedLinks, PaginatedMeta, PaginatedResponse

__all__ = [
    "PaginateParamsInput",
    "PaginatedMeta",
    "PaginatedLinks",
    "PaginatedResponse",
]
