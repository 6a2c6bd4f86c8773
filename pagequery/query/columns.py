"""
Column path resolution for nested entity shapes.

This module computes the dotted column paths that may be used for sorting,
searching, selecting and filtering, and provides the validator consulted by
the builder on every method that accepts a column.

A shape is either a mapping of field name to field description, a pydantic
model class or a dataclass. A field description is a primitive type, a
nested shape, a one-element list holding a shape (an array relation), or a
typing annotation such as ``Optional[Role]`` or ``list[Course]``.

Example:
    ```python
    user = {
        "name": str,
        "role": {"name": str},
        "courses": [{"title": str, "price": int}],
    }
    resolve_column_paths(user)
    # frozenset({"name", "role", "role.name", "courses", "courses.title", "courses.price"})
    ```
"""

import dataclasses
import types
import typing
from collections.abc import Mapping
from typing import Any, FrozenSet, Iterable, Iterator, Optional, Tuple, Union

from pydantic import BaseModel

from pagequery.config import BaseAppSettings, get_settings
from pagequery.errors import InvalidColumnPathError
from pagequery.logging import Logger, get_logger

_logger = get_logger(__name__, get_settings())

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)

_UNION_ORIGINS = (Union, types.UnionType)


def _is_model(description: Any) -> bool:
    return isinstance(description, type) and issubclass(description, BaseModel)


def _is_dataclass_type(description: Any) -> bool:
    return isinstance(description, type) and dataclasses.is_dataclass(description)


def _nested_shape(description: Any) -> Optional[Any]:
    """Return the shape behind a field description, or None for a leaf field."""
    origin = typing.get_origin(description)
    if origin is typing.Annotated:
        return _nested_shape(typing.get_args(description)[0])
    if origin in _UNION_ORIGINS:
        members = [a for a in typing.get_args(description) if a is not type(None)]
        if len(members) == 1:
            return _nested_shape(members[0])
        return None
    if origin in _SEQUENCE_ORIGINS:
        args = [a for a in typing.get_args(description) if a is not Ellipsis]
        return _nested_shape(args[0]) if len(args) == 1 else None

    if isinstance(description, Mapping):
        return description
    if isinstance(description, (list, tuple)) and len(description) == 1:
        return _nested_shape(description[0])
    if _is_model(description) or _is_dataclass_type(description):
        return description
    return None


def _fields(shape: Any) -> Iterable[Tuple[str, Any]]:
    if isinstance(shape, Mapping):
        return shape.items()
    if _is_model(shape):
        if not getattr(shape, "__pydantic_complete__", True):
            shape.model_rebuild()
        return ((name, field.annotation) for name, field in shape.model_fields.items())
    if _is_dataclass_type(shape):
        hints = typing.get_type_hints(shape, include_extras=True)
        return ((f.name, hints.get(f.name, f.type)) for f in dataclasses.fields(shape))
    raise TypeError(
        f"Unsupported entity shape: {shape!r}. "
        "Expected a mapping, a pydantic model class or a dataclass"
    )


def _setting(value: Any, settings: Optional[BaseAppSettings], name: str) -> Any:
    """Explicit value, else the settings value, else the field default."""
    if value is not None:
        return value
    if settings is not None:
        return getattr(settings, name)
    return BaseAppSettings.model_fields[name].default


def _walk(shape: Any, depth: int) -> Iterator[str]:
    for name, description in _fields(shape):
        yield name
        nested = _nested_shape(description)
        if nested is not None and depth > 0:
            for path in _walk(nested, depth - 1):
                yield f"{name}.{path}"


def resolve_column_paths(shape: Any, max_depth: int = 2) -> FrozenSet[str]:
    """
    Compute every legal column path for an entity shape.

    Every field contributes its own key. Nested objects and arrays of
    objects also contribute ``key.<nested path>``, following at most
    ``max_depth`` relation hops, so the default depth allows ``a.b.c``.

    Args:
        shape: Mapping, pydantic model class or dataclass describing the entity
        max_depth: Number of relation hops to follow

    Returns:
        Frozen set of dotted column paths

    Raises:
        ValueError: If max_depth is negative
        TypeError: If the shape cannot be introspected
    """
    if max_depth < 0:
        raise ValueError("max_depth must be zero or greater")
    return frozenset(_walk(shape, max_depth))


class ColumnPathValidator:
    """
    Validator for column paths, built once per entity shape.

    Without a shape every non-empty string is accepted. With a shape, paths
    outside the resolved set raise InvalidColumnPathError in strict mode and
    are logged as warnings otherwise.

    Attributes:
        shape: The entity shape, or None for permissive validation
        max_depth: Relation hops followed while resolving paths
        strict: Whether unknown paths raise
        allowed: Resolved set of column paths
    """

    def __init__(
        self,
        shape: Any = None,
        max_depth: Optional[int] = None,
        strict: Optional[bool] = None,
        settings: Optional[BaseAppSettings] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the validator.

        Args:
            shape: Optional entity shape; None accepts every non-empty path
            max_depth: Relation hops followed while resolving paths
            strict: Whether unknown paths raise
            settings: Source of defaults for max_depth and strict; loaded
                only when a shape is given and one of them is missing
            logger: Logger for non-strict warnings; defaults to the module logger
        """
        if settings is None and shape is not None and (max_depth is None or strict is None):
            settings = get_settings()
        self.shape = shape
        self.max_depth = _setting(max_depth, settings, "COLUMN_MAX_DEPTH")
        self.strict = _setting(strict, settings, "STRICT_COLUMNS")
        self.allowed = (
            resolve_column_paths(shape, self.max_depth)
            if shape is not None
            else frozenset()
        )
        self.logger = logger or _logger

    @property
    def enabled(self) -> bool:
        """Whether paths are checked against a resolved shape."""
        return self.shape is not None

    def validate(self, path: Any) -> str:
        """
        Validate a single column path.

        Args:
            path: Column path to check

        Returns:
            The validated path

        Raises:
            InvalidColumnPathError: If the path is empty, not a string, or
                unknown in strict mode
        """
        if not isinstance(path, str) or not path:
            raise InvalidColumnPathError(path, self.allowed)

        if self.enabled and path not in self.allowed:
            if self.strict:
                raise InvalidColumnPathError(path, self.allowed)
            self.logger.warning("Unknown column path %r accepted in non-strict mode", path)

        return path

    def validate_many(self, paths: Iterable[Any]) -> list:
        """Validate every path, preserving order."""
        return [self.validate(path) for path in paths]

    def __contains__(self, path: Any) -> bool:
        if not isinstance(path, str) or not path:
            return False
        return not self.enabled or path in self.allowed

    def __repr__(self) -> str:
        return (
            f"ColumnPathValidator(paths={len(self.allowed)}, "
            f"max_depth={self.max_depth}, strict={self.strict})"
        )
