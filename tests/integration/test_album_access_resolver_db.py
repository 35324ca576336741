"""AlbumAccessResolver over real repositories (in-memory SQLite)."""

import pytest

from gallery.infrastructure.persistence.repositories import (
    AlbumRepository,
    GalleryRepository,
    GalleryRoleRepository,
)
from gallery.infrastructure.services import AlbumAccessResolver

pytestmark = pytest.mark.requires_db


def _resolver(db_session) -> AlbumAccessResolver:
    return AlbumAccessResolver(
        role_repo=GalleryRoleRepository(db_session),
        album_repo=AlbumRepository(db_session),
        gallery_repo=GalleryRepository(db_session),
    )


async def test_view_role_limited_to_requested_gallery(db_session, seed) -> None:
    gallery = await seed.gallery()
    root = await seed.album(gallery)
    child = await seed.album(gallery, root)
    other = await seed.gallery()
    other_root = await seed.album(other)
    await seed.role("editors", child, other_root)

    ids = await _resolver(db_session).get_viewable_album_ids(frozenset({"editors"}), gallery.id)

    assert ids == frozenset({child.id})


async def test_site_admin_role_sees_whole_gallery(db_session, seed) -> None:
    gallery = await seed.gallery()
    root = await seed.album(gallery)
    child = await seed.album(gallery, root, is_private=True)
    await seed.role("admins", allow_view_album=False, allow_administer_site=True)

    ids = await _resolver(db_session).get_viewable_album_ids(frozenset({"admins"}), gallery.id)

    assert ids == frozenset({root.id, child.id})


async def test_unknown_role_names_are_ignored(db_session, seed) -> None:
    gallery = await seed.gallery()
    await seed.album(gallery)
    ids = await _resolver(db_session).get_viewable_album_ids(frozenset({"ghost"}), gallery.id)
    assert ids == frozenset()


async def test_anonymous_root_access_follows_gallery_flag(db_session, seed) -> None:
    open_gallery = await seed.gallery(allow_anonymous_browsing=True)
    closed_gallery = await seed.gallery(allow_anonymous_browsing=False)
    await seed.album(open_gallery)
    await seed.album(closed_gallery)
    albums = AlbumRepository(db_session)
    resolver = _resolver(db_session)

    open_root = await albums.load_root_album(open_gallery.id)
    closed_root = await albums.load_root_album(closed_gallery.id)

    assert await resolver.can_user_view_album(open_root, frozenset(), False)
    assert not await resolver.can_user_view_album(closed_root, frozenset(), False)
