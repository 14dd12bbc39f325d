"""
Shared fixtures for the Plant Share API tests

Every test gets its own SQLite database file, a read-only session factory
over it, and a seeder for users, posts, comments, likes and saves.

Run tests:
python -m pytest tests -v
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import httpx
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.logging import get_logger
from app.modules.community_social.infrastructure.database.models import (
    CommentModel,
    PostModel,
    UserModel,
    post_likes,
    post_saves,
)

# "now" shared by the service clock and seeded timestamps
NOW = datetime.now(timezone.utc).replace(microsecond=0)


def days_ago(days: float) -> datetime:
    return NOW - timedelta(days=days)


class CommunitySeeder:
    """Inserts community rows directly through the ORM."""

    def __init__(self, session_maker: async_sessionmaker):
        self._session_maker = session_maker

    async def _add(self, model):
        async with self._session_maker() as session:
            session.add(model)
            await session.commit()
        return model

    async def user(self, name: str, number_of_plants: int = 0, **fields) -> UserModel:
        return await self._add(UserModel(
            id=fields.pop("id", uuid4()),
            name=name,
            email=fields.pop("email", f"{name.lower().replace(' ', '.')}.{uuid4().hex[:6]}@example.com"),
            password_hash="hashed",
            number_of_plants=number_of_plants,
            **fields,
        ))

    async def post(
        self,
        user,
        plant_type: str = "Monstera",
        created_at: Optional[datetime] = None,
        **fields,
    ) -> PostModel:
        user_id = user.id if hasattr(user, "id") else user
        return await self._add(PostModel(
            id=uuid4(),
            user_id=user_id,
            image_url="https://cdn.example.com/plant.jpg",
            plant_type=plant_type,
            created_at=created_at or days_ago(1),
            **fields,
        ))

    async def posts(self, user, count: int, **kwargs) -> None:
        for _ in range(count):
            await self.post(user, **kwargs)

    async def comment(self, user, post, created_at: Optional[datetime] = None) -> CommentModel:
        return await self._add(CommentModel(
            id=uuid4(),
            post_id=post.id,
            user_id=user.id,
            text="Lovely leaves!",
            created_at=created_at or days_ago(1),
        ))

    async def like(self, user, post) -> None:
        async with self._session_maker() as session:
            await session.execute(post_likes.insert().values(post_id=post.id, user_id=user.id))
            await session.commit()

    async def save(self, user, post) -> None:
        async with self._session_maker() as session:
            await session.execute(post_saves.insert().values(post_id=post.id, user_id=user.id))
            await session.commit()


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'community.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def session_factory(session_maker):
    """Read-only session factory in the shape the repositories expect."""

    @asynccontextmanager
    async def factory():
        async with session_maker() as session:
            yield session

    return factory


@pytest.fixture
async def broken_session_factory(tmp_path):
    """Session factory over a database without any tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    maker = async_sessionmaker(engine, expire_on_commit=False)

    @asynccontextmanager
    async def factory():
        async with maker() as session:
            yield session

    yield factory
    await engine.dispose()


@pytest.fixture
def seed(session_maker):
    return CommunitySeeder(session_maker)


@pytest.fixture
def logger():
    return get_logger("tests.community")


@pytest.fixture
def app():
    from app.main import create_application

    return create_application()


@pytest.fixture
async def client(app, session_factory):
    """HTTP client whose requests read from the per-test database."""
    from app.modules.community_social.presentation.dependencies import get_session_factory

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
    app.dependency_overrides.clear()
