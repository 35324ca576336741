"""Tag search use case: find the tags or people visible in a gallery.

One TagSearcher serves one search call. The searcher validates the
options, picks the unscoped or viewer-scoped path from the search type,
aggregates association counts through ITagAssociationRepository and hands
the merged counts to the sort/limit pipeline.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace

from gallery.application.dtos.tag import Tag, TagAssociationFilter, TagSearchOptions
from gallery.application.interfaces.repositories import (
    IAlbumRepository,
    ITagAssociationRepository,
)
from gallery.application.interfaces.services import IAlbumAccessResolver
from gallery.application.services.album_access import AlbumAccessEvaluator
from gallery.application.services.tag_results import merge_tag_counts, sort_and_limit
from gallery.core.constants import MIN_GALLERY_ID
from gallery.domain.enums import AssociationKind, TagCategory, TagSearchType
from gallery.domain.exceptions import (
    InvalidArgumentException,
    SearchDeadlineExceededException,
    UnsupportedOperationException,
)
from gallery.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

_UNSCOPED_SEARCH_TYPES = frozenset(
    {TagSearchType.ALL_TAGS_IN_GALLERY, TagSearchType.ALL_PEOPLE_IN_GALLERY}
)
_SCOPED_SEARCH_TYPES = frozenset(
    {TagSearchType.TAGS_USER_CAN_VIEW, TagSearchType.PEOPLE_USER_CAN_VIEW}
)


def validate_search_options(options: TagSearchOptions | None) -> None:
    """Raise InvalidArgumentException if the options cannot be searched."""
    if options is None:
        raise InvalidArgumentException("Search options are required", field="options")
    if options.search_type == TagSearchType.NOT_SPECIFIED:
        raise InvalidArgumentException(
            "The search type must be set to a valid search type.", field="search_type"
        )
    if options.is_user_authenticated and options.roles is None:
        raise InvalidArgumentException(
            "Roles must be specified when the user is authenticated.", field="roles"
        )
    # Gallery ids start at 1; legacy galleries may use 0
    if options.gallery_id < MIN_GALLERY_ID:
        raise InvalidArgumentException(
            "Invalid gallery ID. The gallery ID must refer to a valid gallery.",
            field="gallery_id",
        )
    if options.max_results < 0:
        raise InvalidArgumentException(
            "max_results must not be negative", field="max_results"
        )


def tag_category_for(search_type: TagSearchType) -> TagCategory:
    """Return the metadata category a search type looks at."""
    if search_type in (TagSearchType.TAGS_USER_CAN_VIEW, TagSearchType.ALL_TAGS_IN_GALLERY):
        return TagCategory.TAGS
    if search_type in (TagSearchType.PEOPLE_USER_CAN_VIEW, TagSearchType.ALL_PEOPLE_IN_GALLERY):
        return TagCategory.PEOPLE
    raise UnsupportedOperationException("tag_category_for", search_type)


class TagSearcher:
    """Finds the descriptive tags or people matching one set of search options.

    Raises InvalidArgumentException from the constructor when the options
    are invalid, so nothing reaches the data layer.
    """

    def __init__(
        self,
        options: TagSearchOptions | None,
        tag_repo: ITagAssociationRepository,
        album_repo: IAlbumRepository,
        access_resolver: IAlbumAccessResolver,
    ) -> None:
        validate_search_options(options)
        assert options is not None
        if options.roles is None:
            options = replace(options, roles=frozenset())
        self.options = options
        self.tag_repo = tag_repo
        self.access = AlbumAccessEvaluator(
            album_repo,
            access_resolver,
            gallery_id=options.gallery_id,
            roles=options.roles,
            is_authenticated=options.is_user_authenticated,
        )
        self._deadline: float | None = None

    @property
    def category(self) -> TagCategory:
        return tag_category_for(self.options.search_type)

    @traced("tag_search.find")
    async def find(self, deadline: float | None = None) -> list[Tag]:
        """Return matching tags, sorted and limited per the options. Never None.

        Args:
            deadline: Optional time.monotonic() value; once passed, the search
                stops before issuing its next store query.

        Raises:
            SearchDeadlineExceededException: Deadline passed before a store query.
            UnsupportedOperationException: Search type has no handler.
            ResourceNotFoundException: Gallery has no root album (scoped searches).
        """
        self._deadline = deadline
        search_type = self.options.search_type
        add_span_attributes(
            **{
                "gallery.id": self.options.gallery_id,
                "tag_search.type": search_type.value,
                "tag_search.authenticated": self.options.is_user_authenticated,
            }
        )
        if search_type in _UNSCOPED_SEARCH_TYPES:
            tags = await self._get_tags()
        elif search_type in _SCOPED_SEARCH_TYPES:
            tags = await self._get_tags_for_user()
        else:
            raise UnsupportedOperationException("TagSearcher.find", search_type)

        result = sort_and_limit(
            tags,
            self.options.sort_property,
            self.options.sort_ascending,
            self.options.max_results,
        )
        logger.debug(
            "Tag search done: gallery_id=%s type=%s results=%d",
            self.options.gallery_id,
            search_type.value,
            len(result),
        )
        return result

    def _check_deadline(self, stage: str) -> None:
        if self._deadline is not None and time.monotonic() >= self._deadline:
            logger.warning(
                "Tag search deadline exceeded before %s (gallery_id=%s)",
                stage,
                self.options.gallery_id,
            )
            raise SearchDeadlineExceededException(self.options.gallery_id, stage)

    def _base_filter(self) -> TagAssociationFilter:
        return TagAssociationFilter(
            gallery_id=self.options.gallery_id,
            category=self.category,
            search_term=self.options.search_term or None,
        )

    async def _count(self, tag_filter: TagAssociationFilter, stage: str) -> list[Tag]:
        self._check_deadline(stage)
        return await self.tag_repo.count_tags(tag_filter)

    async def _get_tags(self) -> list[Tag]:
        """All tags in the gallery regardless of the viewer."""
        return await self._count(self._base_filter(), "gallery_tags")

    async def _get_tags_for_user(self) -> list[Tag]:
        """Tags on albums and media objects the viewer may see."""
        self._check_deadline("access_check")
        rule = await self.access.visibility_rule()
        if rule.deny_all:
            return []

        base = self._base_filter()
        if rule.album_ids is None:
            # Viewer sees the whole gallery (minus private albums when anonymous),
            # so one pass over both association kinds is already complete.
            return await self._count(
                replace(base, public_only=rule.public_only), "gallery_tags"
            )

        # Restricted viewer: album and media object visibility are tracked
        # separately, so count each kind against the viewable album ids.
        album_tags = await self._count(
            replace(base, kind=AssociationKind.ALBUM, album_ids=rule.album_ids),
            "album_tags",
        )
        media_object_tags = await self._count(
            replace(base, kind=AssociationKind.MEDIA_OBJECT, album_ids=rule.album_ids),
            "media_object_tags",
        )
        return merge_tag_counts(album_tags, media_object_tags)
