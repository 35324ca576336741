"""Tag and people search API (per gallery, optionally limited to what the viewer can see)."""

import time
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Path, Query

from gallery.api.v1.dependencies import (
    Viewer,
    get_album_access_resolver,
    get_album_repo,
    get_metadata_tag_repo,
    get_viewer,
)
from gallery.application.dtos.tag import TagSearchOptions
from gallery.application.use_cases.tag_search import TagSearcher
from gallery.core.config import get_settings
from gallery.core.constants import MAX_RESULTS_UNBOUNDED, MIN_GALLERY_ID
from gallery.domain.enums import TagCategory, TagSearchType, TagSortProperty
from gallery.infrastructure.persistence.repositories import (
    AlbumRepository,
    MetadataTagRepository,
)
from gallery.infrastructure.services import AlbumAccessResolver
from gallery.schemas.tag import TagResponse, TagSearchResponse

router = APIRouter()

Scope = Literal["viewable", "all"]

_SEARCH_TYPES: dict[tuple[TagCategory, str], TagSearchType] = {
    (TagCategory.TAGS, "viewable"): TagSearchType.TAGS_USER_CAN_VIEW,
    (TagCategory.TAGS, "all"): TagSearchType.ALL_TAGS_IN_GALLERY,
    (TagCategory.PEOPLE, "viewable"): TagSearchType.PEOPLE_USER_CAN_VIEW,
    (TagCategory.PEOPLE, "all"): TagSearchType.ALL_PEOPLE_IN_GALLERY,
}


def search_type_for(category: TagCategory, scope: str) -> TagSearchType:
    """Map URL category and scope query value to a TagSearchType."""
    return _SEARCH_TYPES.get((category, scope), TagSearchType.NOT_SPECIFIED)


async def _search(
    category: TagCategory,
    gallery_id: int,
    viewer: Viewer,
    tag_repo: MetadataTagRepository,
    album_repo: AlbumRepository,
    resolver: AlbumAccessResolver,
    scope: str,
    q: str | None,
    sort: str,
    ascending: bool,
    top: int | None,
) -> TagSearchResponse:
    settings = get_settings()
    if top is None:
        top = settings.tag_search_default_max_results
    options = TagSearchOptions(
        search_type=search_type_for(category, scope),
        gallery_id=gallery_id,
        search_term=q,
        roles=viewer.roles,
        is_user_authenticated=viewer.is_authenticated,
        sort_property=TagSortProperty(sort),
        sort_ascending=ascending,
        max_results=top if top is not None else MAX_RESULTS_UNBOUNDED,
    )
    searcher = TagSearcher(options, tag_repo, album_repo, resolver)
    deadline = time.monotonic() + settings.tag_search_timeout_seconds
    tags = await searcher.find(deadline=deadline)
    return TagSearchResponse(results=[TagResponse.model_validate(t) for t in tags])


@router.get("/{gallery_id}/tags", response_model=TagSearchResponse)
async def search_tags(
    viewer: Annotated[Viewer, Depends(get_viewer)],
    tag_repo: Annotated[MetadataTagRepository, Depends(get_metadata_tag_repo)],
    album_repo: Annotated[AlbumRepository, Depends(get_album_repo)],
    resolver: Annotated[AlbumAccessResolver, Depends(get_album_access_resolver)],
    gallery_id: int = Path(..., ge=MIN_GALLERY_ID),
    scope: Scope = Query("viewable", description="viewable | all"),
    q: str | None = Query(None, max_length=200, description="Substring to match"),
    sort: Literal["value", "count", "none"] = Query("count"),
    ascending: bool = Query(False),
    top: int | None = Query(None, ge=1, description="Maximum number of results"),
):
    """Descriptive tags in the gallery with association counts."""
    return await _search(
        TagCategory.TAGS, gallery_id, viewer, tag_repo, album_repo, resolver,
        scope, q, sort, ascending, top,
    )


@router.get("/{gallery_id}/people", response_model=TagSearchResponse)
async def search_people(
    viewer: Annotated[Viewer, Depends(get_viewer)],
    tag_repo: Annotated[MetadataTagRepository, Depends(get_metadata_tag_repo)],
    album_repo: Annotated[AlbumRepository, Depends(get_album_repo)],
    resolver: Annotated[AlbumAccessResolver, Depends(get_album_access_resolver)],
    gallery_id: int = Path(..., ge=MIN_GALLERY_ID),
    scope: Scope = Query("viewable", description="viewable | all"),
    q: str | None = Query(None, max_length=200, description="Substring to match"),
    sort: Literal["value", "count", "none"] = Query("count"),
    ascending: bool = Query(False),
    top: int | None = Query(None, ge=1, description="Maximum number of results"),
):
    """People tagged in the gallery with association counts."""
    return await _search(
        TagCategory.PEOPLE, gallery_id, viewer, tag_repo, album_repo, resolver,
        scope, q, sort, ascending, top,
    )
