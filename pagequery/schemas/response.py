"""
Response schemas for nestjs-paginate endpoints.

These models document the ``{data, meta, links}`` envelope returned by a
paginated backend. Building queries does not depend on them; they are
provided so callers can validate responses with the same package.

Limitations:
- Only the documented envelope fields are modelled; extra keys are ignored.
"""

from typing import Dict, Generic, List, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginatedMeta(_CamelModel):
    """
    Metadata returned with a page of results.

    Attributes:
        items_per_page: Page size applied by the backend
        total_items: Number of matching records
        current_page: Page number returned
        total_pages: Number of pages available
        sort_by: Applied sort rules as ``(column, direction)`` pairs
        search_by: Columns searched
        search: Search term applied
        select: Selected columns
        filter: Applied filters by column
        cursor: Cursor for the next page in cursor pagination
    """

    items_per_page: Optional[int] = Field(default=None, description="Page size")
    total_items: Optional[int] = Field(default=None, description="Number of matching records")
    current_page: Optional[int] = Field(default=None, description="Current page number")
    total_pages: Optional[int] = Field(default=None, description="Number of pages")
    sort_by: List[Tuple[str, str]] = Field(default_factory=list, description="Applied sort rules")
    search_by: Optional[List[str]] = None
    search: Optional[str] = None
    select: Optional[List[str]] = None
    filter: Optional[Dict[str, Union[str, List[str]]]] = None
    cursor: Optional[str] = None


class PaginatedLinks(_CamelModel):
    """
    Navigation links returned with a page of results.

    Each link is a URL whose query string can be parsed back with
    ``from_query_string(query_of(link))``.
    """

    first: Optional[str] = None
    previous: Optional[str] = None
    current: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None


class PaginatedResponse(_CamelModel, Generic[T]):
    """
    Full paginated response envelope.

    Attributes:
        data: The records of the current page
        meta: Pagination metadata
        links: Navigation links
    """

    data: List[T] = Field(default_factory=list, description="List of items")
    meta: PaginatedMeta = Field(default_factory=PaginatedMeta)
    links: PaginatedLinks = Field(default_factory=PaginatedLinks)
