"""
API utilities for FastAPI applications.
"""

from pagequery.api.dependencies import PaginateQuery

__all__ = ["PaginateQuery"]
