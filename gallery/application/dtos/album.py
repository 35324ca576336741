"""DTOs for albums and gallery roles (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AlbumResult:
    """Album read-model (result of load_root_album)."""

    id: int
    gallery_id: int
    parent_id: int | None
    title: str
    is_private: bool


@dataclass(frozen=True)
class GalleryRoleResult:
    """Gallery role read-model with the album ids assigned to it."""

    id: int
    role_name: str
    allow_view_album: bool
    allow_administer_site: bool
    album_ids: frozenset[int]

    @property
    def grants_view(self) -> bool:
        return self.allow_view_album or self.allow_administer_site
