"""Tests for payload compaction and bracketed query serialization."""

from datetime import datetime, timezone

from contactform.api import compact, flatten_params, stringify


class TestCompact:
    def test_drops_none_values(self) -> None:
        assert compact({"name": "A", "email": None, "message": "hi"}) == {
            "name": "A",
            "message": "hi",
        }

    def test_keeps_falsy_non_none_values(self) -> None:
        assert compact({"a": 0, "b": "", "c": False, "d": []}) == {
            "a": 0,
            "b": "",
            "c": False,
            "d": [],
        }

    def test_recurses_into_mappings(self) -> None:
        assert compact({"data": {"name": "A", "email": None}}) == {"data": {"name": "A"}}

    def test_empty_input(self) -> None:
        assert compact(None) == {}
        assert compact({}) == {}

    def test_does_not_mutate_input(self) -> None:
        data = {"name": "A", "email": None}
        compact(data)
        assert data == {"name": "A", "email": None}


class TestFlattenParams:
    def test_nested_mapping(self) -> None:
        params = {"pagination": {"page": 1, "pageSize": 25}, "sort": "createdAt:desc"}

        assert flatten_params(params) == [
            ("pagination[page]", "1"),
            ("pagination[pageSize]", "25"),
            ("sort", "createdAt:desc"),
        ]

    def test_lists_use_indices(self) -> None:
        assert flatten_params({"sort": ["createdAt:desc", "name:asc"]}) == [
            ("sort[0]", "createdAt:desc"),
            ("sort[1]", "name:asc"),
        ]

    def test_deep_nesting_and_lists_of_mappings(self) -> None:
        params = {"filters": {"$or": [{"email": {"$eq": "a@x.com"}}]}}

        assert flatten_params(params) == [("filters[$or][0][email][$eq]", "a@x.com")]

    def test_scalars_rendering(self) -> None:
        moment = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

        assert flatten_params({"published": True, "draft": False, "after": moment, "skip": None}) == [
            ("published", "true"),
            ("draft", "false"),
            ("after", "2024-01-15T10:30:00+00:00"),
        ]


class TestStringify:
    def test_encodes_values_only(self) -> None:
        query = stringify({"pagination": {"page": 2}, "sort": "createdAt:desc"})

        assert query == "pagination[page]=2&sort=createdAt%3Adesc"

    def test_spaces_and_reserved_characters(self) -> None:
        assert stringify({"q": "jane doe&co"}) == "q=jane%20doe%26co"

    def test_empty(self) -> None:
        assert stringify({}) == ""
