"""Infrastructure services (implement application service ports)."""

from gallery.infrastructure.services.album_access_resolver import (
    AlbumAccessResolver,
    albums_under,
)

__all__ = ["AlbumAccessResolver", "albums_under"]
