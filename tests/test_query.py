"""Tests for urlquery.query — immutable ordered QueryMapping."""

import pytest

from urlquery._internal.multimap import MultiValueMapping
from urlquery.query import QueryMapping


class TestQueryMapping:
    def test_getitem_returns_first_value(self) -> None:
        q = QueryMapping({"x": ["first", "second"]})
        assert q["x"] == "first"

    def test_missing_key_raises(self) -> None:
        q = QueryMapping({"q": ["hello"]})
        with pytest.raises(KeyError):
            q["missing"]

    def test_contains(self) -> None:
        q = QueryMapping({"q": ["hello"]})
        assert "q" in q
        assert "missing" not in q

    def test_len_counts_distinct_keys(self) -> None:
        q = QueryMapping.from_pairs([("a", "1"), ("b", "2"), ("a", "3")])
        assert len(q) == 2

    def test_iter_keeps_first_appearance_order(self) -> None:
        q = QueryMapping.from_pairs([("b", "1"), ("a", "2"), ("b", "3")])
        assert list(q) == ["b", "a"]

    def test_get_with_default(self) -> None:
        q = QueryMapping({"q": ["hello"]})
        assert q.get("q") == "hello"
        assert q.get("missing") is None
        assert q.get("missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        q = QueryMapping.from_pairs([("tag", "python"), ("q", "hello"), ("tag", "rust")])
        assert q.get_list("tag") == ["python", "rust"]
        assert q.get_list("q") == ["hello"]
        assert q.get_list("missing") == []

    def test_get_list_is_a_copy(self) -> None:
        q = QueryMapping({"tag": ["python"]})
        values = q.get_list("tag")
        values.append("rust")
        assert q.get_list("tag") == ["python"]

    def test_empty_sequences_are_not_stored(self) -> None:
        q = QueryMapping({"a": [], "b": ["1"]})
        assert "a" not in q
        assert list(q) == ["b"]

    def test_empty(self) -> None:
        q = QueryMapping()
        assert len(q) == 0
        assert list(q) == []
        assert q.multi_items() == []

    def test_multi_items_keep_raw_order(self) -> None:
        pairs = [("a", "1"), ("b", "2"), ("a", "3")]
        q = QueryMapping.from_pairs(pairs)
        assert q.multi_items() == pairs

    def test_immutable(self) -> None:
        q = QueryMapping({"a": ["1"]})
        with pytest.raises(AttributeError):
            q._data = {}  # type: ignore[misc]

    def test_source_mutation_does_not_leak(self) -> None:
        source = {"a": ["1"]}
        q = QueryMapping(source)
        source["a"].append("2")
        assert q.get_list("a") == ["1"]

    def test_equality_includes_order(self) -> None:
        first = QueryMapping.from_pairs([("a", "1"), ("b", "2")])
        same = QueryMapping.from_pairs([("a", "1"), ("b", "2")])
        swapped = QueryMapping.from_pairs([("b", "2"), ("a", "1")])
        assert first == same
        assert hash(first) == hash(same)
        assert first != swapped

    def test_equality_includes_value_order(self) -> None:
        assert QueryMapping({"a": ["1", "2"]}) != QueryMapping({"a": ["2", "1"]})

    def test_satisfies_multivalue_mapping(self) -> None:
        q = QueryMapping({"a": ["1"]})
        assert isinstance(q, MultiValueMapping)

    def test_plain_dict_is_not_multivalue_mapping(self) -> None:
        assert not isinstance({"a": ["1"]}, MultiValueMapping)

    def test_empty_key_dropped_in_constructor(self) -> None:
        q = QueryMapping({"": ["x"], "a": ["1"]})
        assert "" not in q
        assert list(q) == ["a"]
        assert q.multi_items() == [("a", "1")]

    def test_empty_key_dropped_in_from_pairs(self) -> None:
        q = QueryMapping.from_pairs([("", "x"), ("a", "1"), ("", "y")])
        assert list(q) == ["a"]
        assert q.multi_items() == [("a", "1")]

    def test_repr_shows_all_values(self) -> None:
        q = QueryMapping({"q": ["hello", "again"]})
        assert "hello" in repr(q)
        assert "again" in repr(q)
