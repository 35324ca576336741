"""Domain enumerations for the gallery.

Enums represent fixed sets of domain values (search types, tag categories).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class TagCategory(_ValuesMixin, str, Enum):
    """Kind of tag stored in a metadata item (metadata.meta_name).

    Descriptive tags and people share the same storage and aggregation;
    only this category distinguishes them.
    """

    TAGS = "tags"
    PEOPLE = "people"


class TagSearchType(_ValuesMixin, str, Enum):
    """What a tag search looks for and whether the viewer's access applies.

    ALL_* searches ignore the viewer; *_USER_CAN_VIEW searches only count
    tags on albums and media objects the viewer may see.
    """

    NOT_SPECIFIED = "not_specified"
    ALL_TAGS_IN_GALLERY = "all_tags_in_gallery"
    ALL_PEOPLE_IN_GALLERY = "all_people_in_gallery"
    TAGS_USER_CAN_VIEW = "tags_user_can_view"
    PEOPLE_USER_CAN_VIEW = "people_user_can_view"


class TagSortProperty(_ValuesMixin, str, Enum):
    """Property used to order tag search results."""

    NONE = "none"
    VALUE = "value"
    COUNT = "count"


class AssociationKind(_ValuesMixin, str, Enum):
    """Which gallery object a tag association is attached to."""

    ALBUM = "album"
    MEDIA_OBJECT = "media_object"
