"""Tests for provider payload normalization."""

import pytest

from category_api.schemas.category import Category
from category_api.services.normalizer import normalize, string_of


class TestStringOf:
    """Tests for type identifier coercion."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, "1"),
            (0, "0"),
            (-7, "-7"),
            (12345678901234567890, "12345678901234567890"),
            (3.0, "3"),
            (2.5, "2.5"),
            ("1", "1"),
            ("movie", "movie"),
            ("", ""),
            ("007", "007"),
        ],
    )
    def test_converts_identifier(self, value, expected) -> None:
        assert string_of(value) == expected

    @pytest.mark.parametrize("value", [1, 42, 3.0, 2.5, "abc", "007", -3])
    def test_idempotent(self, value) -> None:
        once = string_of(value)
        assert string_of(once) == once

    @pytest.mark.parametrize("value", [None, True, False, [1], {"id": 1}, float("nan"), float("inf")])
    def test_rejects_non_identifiers(self, value) -> None:
        assert string_of(value) is None


class TestNormalize:
    """Tests for normalize()."""

    def test_numeric_and_string_ids(self) -> None:
        raw = {
            "class": [
                {"type_id": 1, "type_name": "动作片"},
                {"type_id": "2", "type_name": "喜剧片"},
            ]
        }
        assert normalize(raw) == [
            Category(id="1", name="动作片"),
            Category(id="2", name="喜剧片"),
        ]

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"code": 1, "list": []},
            {"class": None},
            {"class": "动作片"},
            {"class": {"type_id": 1}},
            [],
            None,
            "not an object",
            42,
        ],
    )
    def test_payload_without_class_list_is_empty(self, raw) -> None:
        assert normalize(raw) == []

    def test_empty_class_list(self) -> None:
        assert normalize({"class": []}) == []

    def test_missing_name_becomes_empty_string(self) -> None:
        raw = {"class": [{"type_id": 5}, {"type_id": 6, "type_name": None}]}
        assert normalize(raw) == [Category(id="5", name=""), Category(id="6", name="")]

    def test_numeric_name_is_converted(self) -> None:
        assert normalize({"class": [{"type_id": 1, "type_name": 2024}]}) == [
            Category(id="1", name="2024")
        ]

    @pytest.mark.parametrize("name", [{"a": 1}, ["动作片"], True])
    def test_non_scalar_name_counts_as_missing(self, name) -> None:
        assert normalize({"class": [{"type_id": 1, "type_name": name}]}) == [
            Category(id="1", name="")
        ]

    def test_skips_malformed_entries(self) -> None:
        raw = {
            "class": [
                "junk",
                {"type_name": "无编号"},
                {"type_id": None, "type_name": "空编号"},
                {"type_id": True, "type_name": "布尔"},
                {"type_id": 3, "type_name": "纪录片"},
            ]
        }
        assert normalize(raw) == [Category(id="3", name="纪录片")]

    def test_preserves_provider_order_and_duplicates(self) -> None:
        raw = {
            "class": [
                {"type_id": 9, "type_name": "z"},
                {"type_id": 1, "type_name": "a"},
                {"type_id": 9, "type_name": "z"},
            ]
        }
        assert [c.id for c in normalize(raw)] == ["9", "1", "9"]

    def test_ignores_extra_fields(self) -> None:
        raw = {"class": [{"type_id": 1, "type_name": "电影", "type_pid": 0}], "list": [{}]}
        assert normalize(raw) == [Category(id="1", name="电影")]
