"""
FastAPI integration for forwarding paginate queries.

Services that sit in front of a nestjs-paginate backend can receive the
client's query string, adjust it with the builder, and forward it.

Example:
    ```python
    @app.get("/users")
    async def list_users(
        query: PaginateQueryBuilder = Depends(PaginateQuery(User)),
    ):
        query.limit(50).filter("isActive", eq(True))
        return await client.get("/users", params=query.to_pairs())
    ```
"""

from typing import Any, Optional

from fastapi import Request

from pagequery.query.builder import PaginateQueryBuilder
from pagequery.query.columns import ColumnPathValidator
from pagequery.query.parser import from_query_string


class PaginateQuery:
    """
    Dependency factory parsing the request query string into a builder.

    The column path validator is built once per dependency and shared by
    every request; each request gets its own builder.

    Attributes:
        validator: Column path validator applied while parsing
    """

    def __init__(
        self,
        shape: Any = None,
        max_depth: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        """
        Initialize the dependency.

        Args:
            shape: Optional entity shape used to validate column paths
            max_depth: Relation hops followed while resolving paths
            strict: Whether unknown paths raise; unknown paths are skipped
                while parsing either way
        """
        self.validator = ColumnPathValidator(shape, max_depth=max_depth, strict=strict)

    def __call__(self, request: Request) -> PaginateQueryBuilder:
        """
        Parse the raw query string of the incoming request.

        Args:
            request: The incoming request

        Returns:
            A builder pre-populated from the request query
        """
        return from_query_string(request.url.query, validator=self.validator)
