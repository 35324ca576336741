"""AlbumAccessResolver and albums_under tests (mocked repositories)."""

from unittest.mock import AsyncMock

from gallery.application.dtos.album import AlbumResult, GalleryRoleResult
from gallery.infrastructure.services import AlbumAccessResolver, albums_under

# 1 (root) -> 2 -> 4, 1 -> 3
TREE = {1: None, 2: 1, 3: 1, 4: 2}


def _role(
    name: str,
    album_ids=(),
    allow_view_album: bool = True,
    allow_administer_site: bool = False,
    role_id: int = 1,
) -> GalleryRoleResult:
    return GalleryRoleResult(
        id=role_id,
        role_name=name,
        allow_view_album=allow_view_album,
        allow_administer_site=allow_administer_site,
        album_ids=frozenset(album_ids),
    )


def _resolver(roles=(), allows_anonymous_browsing: bool = True) -> AlbumAccessResolver:
    role_repo = AsyncMock()
    role_repo.get_by_names = AsyncMock(return_value=list(roles))
    album_repo = AsyncMock()
    album_repo.get_album_tree = AsyncMock(return_value=dict(TREE))
    gallery_repo = AsyncMock()
    gallery_repo.allows_anonymous_browsing = AsyncMock(
        return_value=allows_anonymous_browsing
    )
    return AlbumAccessResolver(role_repo, album_repo, gallery_repo)


def _album(album_id: int, is_private: bool = False) -> AlbumResult:
    return AlbumResult(
        id=album_id,
        gallery_id=1,
        parent_id=TREE[album_id],
        title="",
        is_private=is_private,
    )


def test_albums_under_includes_descendants() -> None:
    assert albums_under({2}, TREE) == frozenset({2, 4})


def test_albums_under_root_covers_everything() -> None:
    assert albums_under({1}, TREE) == frozenset(TREE)


def test_albums_under_ignores_albums_outside_tree() -> None:
    assert albums_under({99}, TREE) == frozenset()


def test_albums_under_survives_parent_cycle() -> None:
    assert albums_under({9}, {5: 6, 6: 5, 9: None}) == frozenset({9})


async def test_no_roles_sees_nothing() -> None:
    resolver = _resolver()
    assert await resolver.get_viewable_album_ids(frozenset(), 1) == frozenset()
    resolver.role_repo.get_by_names.assert_not_called()


async def test_role_without_view_permission_grants_nothing() -> None:
    resolver = _resolver(roles=[_role("readers", {1}, allow_view_album=False)])
    assert await resolver.get_viewable_album_ids(frozenset({"readers"}), 1) == frozenset()
    resolver.album_repo.get_album_tree.assert_not_called()


async def test_view_role_sees_assigned_album_and_descendants() -> None:
    resolver = _resolver(roles=[_role("editors", {2})])
    ids = await resolver.get_viewable_album_ids(frozenset({"editors"}), 1)
    assert ids == frozenset({2, 4})


async def test_roles_combine() -> None:
    resolver = _resolver(roles=[_role("a", {2}), _role("b", {3}, role_id=2)])
    ids = await resolver.get_viewable_album_ids(frozenset({"a", "b"}), 1)
    assert ids == frozenset({2, 3, 4})


async def test_site_admin_sees_every_album() -> None:
    resolver = _resolver(
        roles=[_role("admins", (), allow_view_album=False, allow_administer_site=True)]
    )
    ids = await resolver.get_viewable_album_ids(frozenset({"admins"}), 1)
    assert ids == frozenset(TREE)


async def test_authenticated_can_view_granted_album() -> None:
    resolver = _resolver(roles=[_role("editors", {2})])
    assert await resolver.can_user_view_album(_album(4), frozenset({"editors"}), True)
    assert not await resolver.can_user_view_album(_album(1), frozenset({"editors"}), True)


async def test_authenticated_without_grant_ignores_anonymous_browsing() -> None:
    resolver = _resolver(roles=[], allows_anonymous_browsing=True)
    assert not await resolver.can_user_view_album(_album(1), frozenset({"x"}), True)


async def test_anonymous_can_view_public_album_when_browsing_allowed() -> None:
    resolver = _resolver(allows_anonymous_browsing=True)
    assert await resolver.can_user_view_album(_album(1), frozenset(), False)


async def test_anonymous_cannot_view_when_browsing_disabled() -> None:
    resolver = _resolver(allows_anonymous_browsing=False)
    assert not await resolver.can_user_view_album(_album(1), frozenset(), False)


async def test_anonymous_cannot_view_private_album() -> None:
    resolver = _resolver(allows_anonymous_browsing=True)
    assert not await resolver.can_user_view_album(_album(1, is_private=True), frozenset(), False)
    resolver.gallery_repo.allows_anonymous_browsing.assert_not_called()


async def test_viewable_ids_resolved_once_per_roles_and_gallery() -> None:
    resolver = _resolver([_role("editors", {2})])
    roles = frozenset({"editors"})

    assert await resolver.can_user_view_album(_album(4), roles, is_authenticated=True)
    assert await resolver.get_viewable_album_ids(roles, 1) == frozenset({2, 4})

    resolver.role_repo.get_by_names.assert_awaited_once()
    resolver.album_repo.get_album_tree.assert_awaited_once()


async def test_viewable_ids_cached_separately_per_gallery() -> None:
    resolver = _resolver([_role("editors", {2})])
    roles = frozenset({"editors"})

    await resolver.get_viewable_album_ids(roles, 1)
    await resolver.get_viewable_album_ids(roles, 2)

    assert resolver.album_repo.get_album_tree.await_count == 2
