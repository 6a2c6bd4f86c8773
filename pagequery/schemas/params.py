"""
Input schema for pre-populating a paginate builder.
"""

from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

SortTuple = Tuple[str, str]


class PaginateParamsInput(BaseModel):
    """
    Plain input object mirroring every builder field.

    Field names follow the query contract (camelCase aliases); snake_case
    names are accepted as well. Column and direction values are validated
    by the builder, not here.

    Attributes:
        page: Page number to retrieve
        limit: Number of records per page
        sort_by: One ``(column, direction)`` tuple or a list of them
        search: Search term
        search_by: Columns the search term applies to
        select: Columns to return
        filter: Column path to a filter token or list of tokens
        cursor: Opaque cursor from the previous page
        with_deleted: Include soft-deleted records
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    page: Optional[int] = None
    limit: Optional[int] = None
    sort_by: Optional[Union[List[SortTuple], SortTuple]] = Field(default=None, alias="sortBy")
    search: Optional[str] = None
    search_by: Optional[List[str]] = Field(default=None, alias="searchBy")
    select: Optional[List[str]] = None
    filter: Optional[Dict[str, Union[str, List[str]]]] = None
    cursor: Optional[str] = None
    with_deleted: Optional[bool] = Field(default=None, alias="withDeleted")

    def sort_rules(self) -> List[SortTuple]:
        """Normalize sort_by to a list of ``(column, direction)`` tuples."""
        if self.sort_by is None:
            return []
        if isinstance(self.sort_by, tuple):
            return [self.sort_by]
        return list(self.sort_by)
