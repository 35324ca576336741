"""Pytest configuration and fixtures for the gallery service.

Environment is set before any gallery import so Settings validates against
an in-memory SQLite database. Repository and API tests share one
StaticPool engine per test, with the schema created from the ORM metadata.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from gallery.api.v1.dependencies import Viewer, get_viewer
from gallery.application.services.app_settings_service import AppSettingsStore
from gallery.core.config import get_settings
from gallery.domain.enums import TagCategory
from gallery.infrastructure.persistence.database import Base, get_db
from gallery.infrastructure.persistence.models import (
    Album,
    Gallery,
    GalleryRole,
    MediaObject,
    Metadata,
    MetadataTag,
    RoleAlbum,
    Tag,
)
from gallery.main import create_app


@pytest.fixture
async def db_session() -> AsyncSession:
    """Session on a fresh in-memory SQLite schema. Discarded after the test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


class GallerySeeder:
    """Inserts galleries, albums, media objects, tag associations and roles."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._tag_names: set[str] = set()

    async def _add(self, obj):
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def gallery(self, allow_anonymous_browsing: bool = True) -> Gallery:
        return await self._add(Gallery(allow_anonymous_browsing=allow_anonymous_browsing))

    async def album(
        self,
        gallery: Gallery,
        parent: Album | None = None,
        is_private: bool = False,
        title: str = "",
    ) -> Album:
        return await self._add(
            Album(
                gallery_id=gallery.id,
                parent_id=parent.id if parent else None,
                is_private=is_private,
                title=title,
            )
        )

    async def media_object(self, album: Album, title: str = "") -> MediaObject:
        return await self._add(MediaObject(album_id=album.id, title=title))

    async def tag(
        self,
        gallery: Gallery,
        *names: str,
        album: Album | None = None,
        media_object: MediaObject | None = None,
        category: TagCategory = TagCategory.TAGS,
    ) -> Metadata:
        """One metadata item on the album or media object, tagged with names."""
        meta = await self._add(
            Metadata(
                meta_name=category.value,
                album_id=album.id if album else None,
                media_object_id=media_object.id if media_object else None,
                value=", ".join(names),
            )
        )
        for name in names:
            if name not in self._tag_names:
                self.session.add(Tag(tag_name=name))
                self._tag_names.add(name)
            self.session.add(
                MetadataTag(gallery_id=gallery.id, metadata_id=meta.id, tag_name=name)
            )
        await self.session.flush()
        return meta

    async def role(
        self,
        name: str,
        *albums: Album,
        allow_view_album: bool = True,
        allow_administer_site: bool = False,
    ) -> GalleryRole:
        role = await self._add(
            GalleryRole(
                role_name=name,
                allow_view_album=allow_view_album,
                allow_administer_site=allow_administer_site,
            )
        )
        for album in albums:
            self.session.add(RoleAlbum(role_id=role.id, album_id=album.id))
        await self.session.flush()
        return role


@pytest.fixture
def seed(db_session: AsyncSession) -> GallerySeeder:
    """Data builder bound to db_session."""
    return GallerySeeder(db_session)


@pytest.fixture
def viewer() -> dict[str, Viewer]:
    """Mutable holder for the viewer the client fixture reports; anonymous by default."""
    return {"current": Viewer.anonymous()}


@pytest.fixture
async def client(db_session: AsyncSession, viewer: dict[str, Viewer]) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) using db_session."""
    get_settings.cache_clear()
    app = create_app()
    app.state.app_settings = AppSettingsStore()

    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_viewer] = lambda: viewer["current"]

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
