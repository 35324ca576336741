"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from gallery.domain.enums import (
    AssociationKind,
    TagCategory,
    TagSearchType,
    TagSortProperty,
)
from gallery.domain.exceptions import (
    ConfigurationException,
    GalleryException,
    InvalidArgumentException,
    PermissionDeniedException,
    ResourceNotFoundException,
    SearchDeadlineExceededException,
    SqlNotConfiguredException,
    UnsupportedOperationException,
)

__all__ = [
    # Enums
    "AssociationKind",
    "TagCategory",
    "TagSearchType",
    "TagSortProperty",
    # Exceptions
    "ConfigurationException",
    "GalleryException",
    "InvalidArgumentException",
    "PermissionDeniedException",
    "ResourceNotFoundException",
    "SearchDeadlineExceededException",
    "SqlNotConfiguredException",
    "UnsupportedOperationException",
]
