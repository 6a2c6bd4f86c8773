"""
Tests for the fluent paginate query builder.
"""

import pydantic
import pytest
from starlette.datastructures import QueryParams

from pagequery.errors import InvalidColumnPathError, InvalidFilterTokenError, ValidationError
from pagequery.query.builder import PaginateQueryBuilder, create_paginate_params
from pagequery.query.columns import ColumnPathValidator
from pagequery.query.filters import eq, gte, in_list
from pagequery.query.parser import from_query_string
from pagequery.schemas import PaginateParamsInput


@pytest.fixture
def builder():
    return PaginateQueryBuilder()


@pytest.fixture
def user_builder(user_shape):
    return PaginateQueryBuilder(user_shape)


class TestSetters:
    """Tests for the individual setters."""

    def test_empty_builder(self, builder):
        assert builder.to_param_map() == {}
        assert builder.to_query_string() == ""

    def test_setters_are_chainable(self, builder):
        result = (
            builder.page(1)
            .limit(10)
            .sort_by("name")
            .search("john")
            .search_by(["name"])
            .select(["id"])
            .filter("age", gte(18))
            .cursor("abc")
            .with_deleted()
        )
        assert result is builder

    def test_page_and_limit(self, builder):
        builder.page(2).limit(5)
        assert builder.to_param_map() == {"page": "2", "limit": "5"}

    @pytest.mark.parametrize("value", [0, -1, 1.5, "2", True, None])
    def test_page_must_be_positive_int(self, builder, value):
        with pytest.raises(ValidationError) as exc_info:
            builder.page(value)
        assert exc_info.value.fields[0]["field"] == "page"

    def test_limit_must_be_positive_int(self, builder):
        with pytest.raises(ValidationError):
            builder.limit(0)

    def test_sort_order_is_priority(self, builder):
        builder.sort_by("name", "ASC").sort_by("email", "DESC")
        assert builder.to_param_map()["sortBy"] == ["name:ASC", "email:DESC"]

    def test_sort_defaults_to_ascending(self, builder):
        builder.sort_by("name")
        assert builder.to_param_map()["sortBy"] == ["name:ASC"]

    def test_sort_direction_is_case_insensitive(self, builder):
        builder.sort_by("name", "desc")
        assert builder.to_param_map()["sortBy"] == ["name:DESC"]

    def test_invalid_sort_direction(self, builder):
        with pytest.raises(ValidationError) as exc_info:
            builder.sort_by("name", "UP")
        assert exc_info.value.fields[0]["field"] == "sortBy"

    def test_empty_search_is_not_serialized(self, builder):
        builder.search("")
        assert builder.to_param_map() == {}

    @pytest.mark.parametrize("setter", ["search", "cursor"])
    @pytest.mark.parametrize("value", [123, None, ["john"], b"john"])
    def test_text_values_must_be_strings(self, builder, setter, value):
        with pytest.raises(ValidationError) as exc_info:
            getattr(builder, setter)(value)
        assert exc_info.value.fields[0]["field"] == setter
        assert builder.to_param_map() == {}

    def test_search_round_trips(self, builder):
        builder.search("123").cursor("456")
        parsed = from_query_string(builder.to_query_string())
        assert parsed.to_param_map() == builder.to_param_map() == {
            "search": "123",
            "cursor": "456",
        }

    def test_search_by_and_select_replace(self, builder):
        builder.search_by(["name"]).search_by(["email", "id"])
        builder.select(["id"]).select(["name", "email"])
        assert builder.to_param_map() == {
            "searchBy": ["email", "id"],
            "select": "name,email",
        }

    def test_filter_single_token(self, builder):
        builder.filter("courses.price", gte(100))
        assert builder.to_param_map() == {"filter.courses.price": "$gte:100"}

    def test_repeated_filters_accumulate(self, builder):
        builder.filter("name", eq("A")).filter("name", eq("B"))
        assert builder.to_param_map()["filter.name"] == ["$eq:A", "$eq:B"]

    def test_filter_token_list(self, builder):
        builder.filter("age", [gte(18), "$lte:65"])
        assert builder.to_param_map()["filter.age"] == ["$gte:18", "$lte:65"]

    def test_filter_columns_keep_first_seen_order(self, builder):
        builder.filter("b", eq(1)).filter("a", eq(2)).filter("b", eq(3))
        assert list(builder.to_param_map()) == ["filter.b", "filter.a"]

    def test_empty_token_list_is_noop(self, builder):
        builder.filter("age", [])
        assert builder.to_param_map() == {}

    @pytest.mark.parametrize("token", ["", None, 5, ["$eq:1", ""], {"$eq": 1}])
    def test_invalid_filter_tokens(self, builder, token):
        with pytest.raises(InvalidFilterTokenError):
            builder.filter("age", token)
        assert builder.to_param_map() == {}

    def test_with_deleted(self, builder):
        builder.with_deleted()
        assert builder.to_param_map() == {"withDeleted": "true"}
        builder.with_deleted(False)
        assert builder.to_param_map() == {}

    def test_cursor(self, builder):
        builder.cursor("eyJpZCI6MTB9")
        assert builder.to_param_map() == {"cursor": "eyJpZCI6MTB9"}


class TestColumnValidation:
    """Setters validate column paths against the shape."""

    def test_valid_columns(self, user_builder):
        user_builder.sort_by("role.name").filter("courses.instructor.name", eq("Ann"))
        assert "filter.courses.instructor.name" in user_builder.to_param_map()

    @pytest.mark.parametrize(
        "call",
        [
            lambda b: b.sort_by("password"),
            lambda b: b.search_by(["name", "password"]),
            lambda b: b.select(["password"]),
            lambda b: b.filter("password", eq("x")),
            lambda b: b.filter("courses.instructor.school.name", eq("x")),
        ],
    )
    def test_invalid_columns_raise(self, user_builder, call):
        with pytest.raises(InvalidColumnPathError):
            call(user_builder)
        assert user_builder.to_param_map() == {}

    def test_pre_built_validator(self, user_shape):
        validator = ColumnPathValidator(user_shape, max_depth=0)
        builder = PaginateQueryBuilder(validator=validator)
        with pytest.raises(InvalidColumnPathError):
            builder.sort_by("role.name")


class TestOutputs:
    """Tests for the serialized forms and builder identity."""

    def test_query_string(self, user_builder):
        qs = (
            user_builder.page(1)
            .limit(10)
            .sort_by("name", "ASC")
            .filter("courses.price", gte(100))
            .to_query_string()
        )
        assert qs == "?page=1&limit=10&sortBy=name%3AASC&filter.courses.price=%24gte%3A100"

    def test_serialization_is_idempotent(self, builder):
        builder.page(1).filter("id", in_list([1, 2]))
        assert builder.to_query_string() == builder.to_query_string()

    def test_pairs_and_search_params(self, builder):
        builder.sort_by("a").sort_by("b", "DESC")
        assert builder.to_pairs() == [("sortBy", "a:ASC"), ("sortBy", "b:DESC")]
        params = builder.to_search_params()
        assert isinstance(params, QueryParams)
        assert params.getlist("sortBy") == ["a:ASC", "b:DESC"]

    def test_state_is_a_copy(self, builder):
        builder.filter("name", eq("A"))
        state = builder.state
        state.filters["name"].append("$eq:B")
        state.page = 9
        assert builder.to_param_map() == {"filter.name": "$eq:A"}

    def test_clone_is_independent(self, user_builder):
        user_builder.page(1).sort_by("name").filter("name", eq("A"))
        before = user_builder.to_param_map()

        clone = user_builder.clone()
        clone.page(2).sort_by("email").filter("name", eq("B")).select(["id"])

        assert user_builder.to_param_map() == before
        assert clone.validator is user_builder.validator
        assert clone.to_param_map()["filter.name"] == ["$eq:A", "$eq:B"]

    def test_equality(self, builder):
        other = PaginateQueryBuilder()
        builder.page(2)
        other.page(2)
        assert builder == other
        assert builder != other.clone().limit(3)
        assert builder != "?page=2"

    def test_repr(self, builder):
        builder.page(2)
        assert repr(builder) == "PaginateQueryBuilder('?page=2')"


class TestCreatePaginateParams:
    """Tests for create_paginate_params."""

    def test_without_input(self):
        assert create_paginate_params().to_param_map() == {}

    def test_camel_case_mapping(self):
        builder = create_paginate_params(
            {
                "page": 1,
                "limit": 10,
                "sortBy": ("name", "ASC"),
                "search": "john",
                "searchBy": ["name"],
                "select": ["id", "name"],
                "filter": {"age": gte(18), "role.name": [eq("a"), eq("b")]},
                "cursor": "abc",
                "withDeleted": True,
            }
        )
        assert builder.to_param_map() == {
            "page": "1",
            "limit": "10",
            "sortBy": ["name:ASC"],
            "search": "john",
            "searchBy": ["name"],
            "select": "id,name",
            "cursor": "abc",
            "withDeleted": "true",
            "filter.age": "$gte:18",
            "filter.role.name": ["$eq:a", "$eq:b"],
        }

    def test_sort_rule_list(self):
        builder = create_paginate_params({"sortBy": [("name", "ASC"), ("id", "desc")]})
        assert builder.to_param_map()["sortBy"] == ["name:ASC", "id:DESC"]

    def test_snake_case_names(self):
        builder = create_paginate_params({"search_by": ["name"], "with_deleted": True})
        assert builder.to_param_map() == {"searchBy": ["name"], "withDeleted": "true"}

    def test_model_input(self):
        params = PaginateParamsInput(page=3, sort_by=("id", "DESC"))
        builder = create_paginate_params(params)
        assert builder.to_param_map() == {"page": "3", "sortBy": ["id:DESC"]}

    def test_unknown_field_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            create_paginate_params({"offset": 10})

    def test_invalid_column_raises(self, user_shape):
        with pytest.raises(InvalidColumnPathError):
            create_paginate_params({"select": ["password"]}, user_shape)

    def test_invalid_page_raises(self):
        with pytest.raises(ValidationError):
            create_paginate_params({"page": 0})

    def test_parsed_builder_matches(self):
        builder = create_paginate_params({"page": 2, "limit": 5})
        parsed = from_query_string("?page=2&limit=5")
        assert parsed.to_param_map() == {"page": "2", "limit": "5"}
        assert parsed == builder
