"""Tests for guarded raw record access."""

from __future__ import annotations

from market_activity.domain.raw_records import lookup


class TestLookup:
    """lookup() reports absence instead of raising."""

    def test_nested_path(self) -> None:
        record = {"messages": [{"value": {"caller": "g1x"}}]}

        assert lookup(record, "messages", 0, "value", "caller", expected=str) == "g1x"

    def test_missing_key(self) -> None:
        assert lookup({"a": 1}, "b") is None

    def test_index_out_of_range(self) -> None:
        assert lookup({"messages": []}, "messages", 0) is None

    def test_negative_index_is_absent(self) -> None:
        assert lookup({"messages": ["x"]}, "messages", -1) is None

    def test_string_is_not_indexed(self) -> None:
        assert lookup({"messages": "abc"}, "messages", 0) is None

    def test_key_into_list_is_absent(self) -> None:
        assert lookup([{"a": 1}], "a") is None

    def test_wrong_type(self) -> None:
        assert lookup({"hash": 5}, "hash", expected=str) is None

    def test_bool_is_not_numeric(self) -> None:
        assert lookup({"h": True}, "h", expected=(int, float)) is None

    def test_bool_when_requested(self) -> None:
        assert lookup({"ok": False}, "ok", expected=bool) is False

    def test_null_value(self) -> None:
        assert lookup({"hash": None}, "hash", expected=str) is None

    def test_no_expected_type(self) -> None:
        assert lookup({"a": {"b": [1, 2]}}, "a", "b") == [1, 2]
