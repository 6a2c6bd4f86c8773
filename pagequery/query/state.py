"""
Abstract parameter set held by the builder.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pagequery.query.sorting import SortField


@dataclass
class PaginateState:
    """
    Complete logical state of a paginate query before serialization.

    Filters are always stored as an ordered list of tokens per column; the
    single-token compaction happens only in the serializer.
    """

    page: Optional[int] = None
    limit: Optional[int] = None
    sort_by: List[SortField] = field(default_factory=list)
    search: Optional[str] = None
    search_by: List[str] = field(default_factory=list)
    select: List[str] = field(default_factory=list)
    filters: Dict[str, List[str]] = field(default_factory=dict)
    cursor: Optional[str] = None
    with_deleted: bool = False

    def copy(self) -> "PaginateState":
        """Return an element-wise copy sharing no mutable containers."""
        return PaginateState(
            page=self.page,
            limit=self.limit,
            sort_by=[SortField(s.field, s.direction) for s in self.sort_by],
            search=self.search,
            search_by=list(self.search_by),
            select=list(self.select),
            filters={column: list(tokens) for column, tokens in self.filters.items()},
            cursor=self.cursor,
            with_deleted=self.with_deleted,
        )
