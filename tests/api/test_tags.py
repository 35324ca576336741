"""GET /api/v1/galleries/{id}/tags and /people against in-memory SQLite."""

import pytest
from httpx import AsyncClient

from gallery.api.v1.dependencies import Viewer
from gallery.domain.enums import TagCategory

pytestmark = pytest.mark.requires_db


@pytest.fixture
async def gallery(seed):
    """root (tag root-only) -> shared -> child1, child2; root -> private.

    beach sits on shared, child1, child2 and on two photos in shared
    (3 album-level + 2 media-object-level), plus once on the private album.
    """
    gallery = await seed.gallery(allow_anonymous_browsing=True)
    root = await seed.album(gallery)
    shared = await seed.album(gallery, root)
    child1 = await seed.album(gallery, shared)
    child2 = await seed.album(gallery, shared)
    private = await seed.album(gallery, root, is_private=True)
    photo1 = await seed.media_object(shared)
    photo2 = await seed.media_object(shared)

    await seed.tag(gallery, "root-only", album=root)
    for album in (shared, child1, child2):
        await seed.tag(gallery, "beach", album=album)
    await seed.tag(gallery, "beach", "dog", media_object=photo1)
    await seed.tag(gallery, "beach", media_object=photo2)
    await seed.tag(gallery, "beach", album=private)
    await seed.tag(gallery, "Alice", media_object=photo1, category=TagCategory.PEOPLE)
    await seed.tag(gallery, "Bob", album=private, category=TagCategory.PEOPLE)

    await seed.role("editors", shared)
    await seed.role("admins", allow_view_album=False, allow_administer_site=True)
    return gallery


def _results(response) -> list[tuple[str, int]]:
    assert response.status_code == 200, response.text
    return [(r["value"], r["count"]) for r in response.json()["results"]]


async def test_restricted_viewer_counts_album_and_media_object_tags(
    client: AsyncClient, gallery, viewer
) -> None:
    viewer["current"] = Viewer(roles=frozenset({"editors"}), is_authenticated=True)
    response = await client.get(f"/api/v1/galleries/{gallery.id}/tags")
    assert _results(response) == [("beach", 5), ("dog", 1)]


async def test_site_admin_sees_whole_gallery(client: AsyncClient, gallery, viewer) -> None:
    viewer["current"] = Viewer(roles=frozenset({"admins"}), is_authenticated=True)
    response = await client.get(
        f"/api/v1/galleries/{gallery.id}/tags", params={"sort": "value", "ascending": True}
    )
    assert _results(response) == [("beach", 6), ("dog", 1), ("root-only", 1)]


async def test_anonymous_sees_public_albums_only(client: AsyncClient, gallery) -> None:
    response = await client.get(
        f"/api/v1/galleries/{gallery.id}/tags", params={"sort": "value", "ascending": True}
    )
    assert _results(response) == [("beach", 5), ("dog", 1), ("root-only", 1)]


async def test_anonymous_in_closed_gallery_gets_empty_results(
    client: AsyncClient, seed
) -> None:
    closed = await seed.gallery(allow_anonymous_browsing=False)
    root = await seed.album(closed)
    await seed.tag(closed, "secret", album=root)

    response = await client.get(f"/api/v1/galleries/{closed.id}/tags")

    assert response.status_code == 200
    assert response.json() == {"results": []}


async def test_authenticated_without_roles_gets_empty_results(
    client: AsyncClient, gallery, viewer
) -> None:
    viewer["current"] = Viewer(roles=frozenset(), is_authenticated=True)
    response = await client.get(f"/api/v1/galleries/{gallery.id}/tags")
    assert _results(response) == []


async def test_scope_all_ignores_viewer(client: AsyncClient, gallery) -> None:
    response = await client.get(
        f"/api/v1/galleries/{gallery.id}/people",
        params={"scope": "all", "sort": "value", "ascending": True},
    )
    assert _results(response) == [("Alice", 1), ("Bob", 1)]


async def test_people_viewable_scope_hides_private(client: AsyncClient, gallery) -> None:
    response = await client.get(f"/api/v1/galleries/{gallery.id}/people")
    assert _results(response) == [("Alice", 1)]


async def test_search_term_and_top(client: AsyncClient, gallery, viewer) -> None:
    viewer["current"] = Viewer(roles=frozenset({"admins"}), is_authenticated=True)
    response = await client.get(
        f"/api/v1/galleries/{gallery.id}/tags",
        params={"q": "O", "sort": "value", "ascending": True, "top": 1},
    )
    assert _results(response) == [("dog", 1)]


async def test_identical_requests_return_identical_results(
    client: AsyncClient, gallery
) -> None:
    url = f"/api/v1/galleries/{gallery.id}/tags"
    first = await client.get(url, params={"sort": "count"})
    second = await client.get(url, params={"sort": "count"})
    assert first.json() == second.json()


async def test_tied_counts_truncate_by_value(client: AsyncClient, gallery) -> None:
    response = await client.get(f"/api/v1/galleries/{gallery.id}/tags", params={"top": 2})
    assert _results(response) == [("beach", 5), ("dog", 1)]


async def test_unknown_gallery_returns_404_for_viewable_scope(client: AsyncClient) -> None:
    response = await client.get("/api/v1/galleries/9999/tags")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "RESOURCE_NOT_FOUND"
    assert body["details"]["resource_id"] == "9999"


async def test_unknown_gallery_with_scope_all_is_empty(client: AsyncClient) -> None:
    response = await client.get("/api/v1/galleries/9999/tags", params={"scope": "all"})
    assert response.status_code == 200
    assert response.json() == {"results": []}


@pytest.mark.parametrize(
    "params",
    [{"top": 0}, {"sort": "random"}, {"scope": "mine"}],
)
async def test_invalid_query_rejected(client: AsyncClient, params) -> None:
    response = await client.get("/api/v1/galleries/1/tags", params=params)
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_negative_gallery_id_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/galleries/-1/tags")
    assert response.status_code == 422
