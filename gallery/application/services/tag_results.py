"""Merge, sort and truncate tag search results (pure functions)."""

from __future__ import annotations

from collections.abc import Iterable

from gallery.application.dtos.tag import Tag
from gallery.core.constants import MAX_RESULTS_UNBOUNDED
from gallery.domain.enums import TagSortProperty
from gallery.domain.exceptions import UnsupportedOperationException


def merge_tag_counts(album_tags: list[Tag], media_object_tags: list[Tag]) -> list[Tag]:
    """Combine album-level and media-object-level counts into one Tag per value.

    When there are no media-object tags the album tags are returned as is.
    Otherwise tags with the same value (exact match) are summed; order
    follows first appearance.
    """
    if not media_object_tags:
        return album_tags
    totals: dict[str, int] = {}
    for tag in [*album_tags, *media_object_tags]:
        totals[tag.value] = totals.get(tag.value, 0) + tag.count
    return [Tag(value=value, count=count) for value, count in totals.items()]


def sort_and_limit(
    tags: Iterable[Tag],
    sort_property: TagSortProperty,
    sort_ascending: bool,
    max_results: int = MAX_RESULTS_UNBOUNDED,
) -> list[Tag]:
    """Order tags by the requested property and keep the first max_results.

    TagSortProperty.NONE keeps the incoming (store-defined) order.
    """
    if sort_property == TagSortProperty.VALUE:
        ordered = sorted(tags, key=lambda t: t.value, reverse=not sort_ascending)
    elif sort_property == TagSortProperty.COUNT:
        # Equal counts fall back to value (ascending) so truncation is deterministic.
        sign = 1 if sort_ascending else -1
        ordered = sorted(tags, key=lambda t: (sign * t.count, t.value))
    elif sort_property == TagSortProperty.NONE:
        ordered = list(tags)
    else:
        raise UnsupportedOperationException("sort_and_limit", sort_property)

    if max_results < MAX_RESULTS_UNBOUNDED:
        return ordered[:max_results]
    return ordered
