"""merge_tag_counts and sort_and_limit tests."""

import pytest

from gallery.application.dtos.tag import Tag
from gallery.application.services.tag_results import merge_tag_counts, sort_and_limit
from gallery.core.constants import MAX_RESULTS_UNBOUNDED
from gallery.domain.enums import TagSortProperty
from gallery.domain.exceptions import UnsupportedOperationException


def test_merge_sums_counts_for_same_value() -> None:
    merged = merge_tag_counts([Tag("beach", 3)], [Tag("beach", 2)])
    assert merged == [Tag("beach", 5)]


def test_merge_keeps_first_appearance_order() -> None:
    merged = merge_tag_counts(
        [Tag("dog", 1), Tag("beach", 2)], [Tag("cat", 4), Tag("dog", 1)]
    )
    assert merged == [Tag("dog", 2), Tag("beach", 2), Tag("cat", 4)]


def test_merge_is_case_sensitive() -> None:
    merged = merge_tag_counts([Tag("Beach", 1)], [Tag("beach", 1)])
    assert merged == [Tag("Beach", 1), Tag("beach", 1)]


def test_merge_without_media_object_tags_returns_album_tags() -> None:
    album_tags = [Tag("beach", 3)]
    assert merge_tag_counts(album_tags, []) is album_tags


def test_merge_produces_unique_values() -> None:
    merged = merge_tag_counts(
        [Tag("a", 1), Tag("b", 1)], [Tag("b", 1), Tag("a", 1), Tag("c", 1)]
    )
    values = [t.value for t in merged]
    assert len(values) == len(set(values))


def test_sort_by_count_descending() -> None:
    tags = [Tag("a", 1), Tag("b", 5), Tag("c", 3)]
    result = sort_and_limit(tags, TagSortProperty.COUNT, sort_ascending=False)
    assert [t.value for t in result] == ["b", "c", "a"]


def test_sort_by_value_ascending() -> None:
    tags = [Tag("cat", 1), Tag("apple", 5), Tag("bird", 3)]
    result = sort_and_limit(tags, TagSortProperty.VALUE, sort_ascending=True)
    assert [t.value for t in result] == ["apple", "bird", "cat"]


def test_sort_none_keeps_incoming_order() -> None:
    tags = [Tag("c", 1), Tag("a", 5), Tag("b", 3)]
    result = sort_and_limit(tags, TagSortProperty.NONE, sort_ascending=False)
    assert result == tags


def test_limit_truncates_after_sorting() -> None:
    tags = [Tag(v, c) for v, c in [("a", 1), ("b", 5), ("c", 3), ("d", 4), ("e", 2)]]
    result = sort_and_limit(tags, TagSortProperty.COUNT, False, max_results=2)
    assert result == [Tag("b", 5), Tag("d", 4)]


def test_equal_counts_break_ties_by_value() -> None:
    tags = [Tag("z", 1), Tag("y", 2), Tag("x", 2)]
    assert sort_and_limit(tags, TagSortProperty.COUNT, False, max_results=1) == [Tag("x", 2)]
    assert [t.value for t in sort_and_limit(tags, TagSortProperty.COUNT, True)] == [
        "z",
        "x",
        "y",
    ]


def test_unbounded_returns_everything() -> None:
    tags = [Tag("a", 1), Tag("b", 2)]
    assert len(sort_and_limit(tags, TagSortProperty.NONE, True, MAX_RESULTS_UNBOUNDED)) == 2


def test_max_results_zero_returns_empty() -> None:
    assert sort_and_limit([Tag("a", 1)], TagSortProperty.NONE, True, 0) == []


def test_unknown_sort_property_raises() -> None:
    with pytest.raises(UnsupportedOperationException):
        sort_and_limit([Tag("a", 1)], "shuffle", True)
