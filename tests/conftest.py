from typing import List, Optional

import pytest
from pydantic import BaseModel


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Settings are read from the environment; keep every test isolated
    for name in (
        "APP_ENV",
        "APP_NAME",
        "DEBUG",
        "LOG_LEVEL",
        "LOG_JSON_FORMAT",
        "COLUMN_MAX_DEPTH",
        "STRICT_COLUMNS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


USER_SHAPE = {
    "id": int,
    "name": str,
    "email": str,
    "isActive": bool,
    "role": {"name": str, "permissions": [{"code": str}]},
    "courses": [
        {
            "title": str,
            "price": int,
            "instructor": {"name": str, "school": {"name": str}},
        }
    ],
    "tags": [str],
}


class Role(BaseModel):
    name: str


class Course(BaseModel):
    title: str
    price: int


class User(BaseModel):
    id: int
    name: str
    email: str
    role: Optional[Role] = None
    courses: List[Course] = []


class Category(BaseModel):
    name: str
    parent: Optional["Category"] = None
    children: List["Category"] = []


@pytest.fixture
def user_shape():
    """Mapping description of a user with nested and array relations."""
    return USER_SHAPE


@pytest.fixture
def user_model():
    return User


@pytest.fixture
def category_model():
    """Self-referential model."""
    return Category
