"""DTOs for tag search (no dependency on ORM)."""

from dataclasses import dataclass

from gallery.core.constants import MAX_RESULTS_UNBOUNDED
from gallery.domain.enums import (
    AssociationKind,
    TagCategory,
    TagSearchType,
    TagSortProperty,
)


@dataclass(frozen=True)
class Tag:
    """Tag or person name with the number of associations that reference it."""

    value: str
    count: int


@dataclass(frozen=True, kw_only=True)
class TagSearchOptions:
    """Input for one tag search.

    roles may be None only for anonymous viewers; the searcher replaces it
    with an empty set. max_results == MAX_RESULTS_UNBOUNDED returns all tags.
    """

    search_type: TagSearchType = TagSearchType.NOT_SPECIFIED
    gallery_id: int
    search_term: str | None = None
    roles: frozenset[str] | None = None
    is_user_authenticated: bool = False
    sort_property: TagSortProperty = TagSortProperty.NONE
    sort_ascending: bool = True
    max_results: int = MAX_RESULTS_UNBOUNDED


@dataclass(frozen=True, kw_only=True)
class TagAssociationFilter:
    """Parameters of one aggregation pass over metadata_tag rows.

    kind None covers associations on albums and media objects alike.
    album_ids restricts to associations whose album (the owning album for
    media objects) is in the set; public_only drops private albums.
    """

    gallery_id: int
    category: TagCategory
    search_term: str | None = None
    kind: AssociationKind | None = None
    album_ids: frozenset[int] | None = None
    public_only: bool = False
