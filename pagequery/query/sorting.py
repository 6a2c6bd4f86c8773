"""
Sorting primitives for paginate queries.

A sort rule is serialized as ``<column>:<ASC|DESC>``; repeated ``sortBy``
keys define sort priority in order.
"""

from enum import Enum
from typing import Tuple, Union


class SortDirection(str, Enum):
    """
    Sort direction enum.

    Attributes:
        ASC: Ascending order
        DESC: Descending order
    """

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: Union[str, "SortDirection"]) -> "SortDirection":
        """
        Parse a direction case-insensitively.

        Raises:
            ValueError: If the value is not ASC or DESC
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        valid = ", ".join(d.value for d in cls)
        raise ValueError(f"Invalid sort direction: {value!r}. Allowed directions are: {valid}")


class SortField:
    """
    Sort rule on a single column.

    Attributes:
        field: Column path to sort by
        direction: Sort direction
    """

    __slots__ = ("field", "direction")

    def __init__(self, field: str, direction: SortDirection = SortDirection.ASC):
        self.field = field
        self.direction = SortDirection.parse(direction)

    @classmethod
    def parse(cls, sort_string: str) -> "SortField":
        """
        Parse a string in format ``column:direction``.

        The string is split on the last colon, so the column part may not
        carry a direction of its own.

        Examples:
            >>> SortField.parse("role.name:DESC")
            SortField(field='role.name', direction=SortDirection.DESC)

        Raises:
            ValueError: If there is no colon or the direction is invalid
        """
        column, sep, direction = sort_string.rpartition(":")
        if not sep:
            raise ValueError(f"Invalid sort format: {sort_string!r}. Expected column:direction")
        return cls(column, direction)

    def as_tuple(self) -> Tuple[str, str]:
        return self.field, self.direction.value

    def __str__(self) -> str:
        return f"{self.field}:{self.direction.value}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, SortField):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return f"SortField(field='{self.field}', direction=SortDirection.{self.direction.name})"
