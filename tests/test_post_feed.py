"""
Tests for profile post listings: PostFeedRepositoryImpl and PostFeedService
"""

from uuid import uuid4

import pytest

from app.shared.core.exceptions import RepositoryError, UserNotFoundError
from app.modules.community_social.domain.services.post_feed_service import PostFeedService
from app.modules.community_social.infrastructure.database.post_feed_repository_impl import PostFeedRepositoryImpl

from .conftest import days_ago


@pytest.fixture
def post_repository(session_factory, logger):
    return PostFeedRepositoryImpl(session_factory, logger)


@pytest.fixture
def post_feed_service(post_repository, logger):
    return PostFeedService(post_repository, logger)


class TestPostFeedRepository:

    async def test_user_posts_are_newest_first_with_counts(self, seed, post_repository):
        maya = await seed.user("Maya", avatar_url="https://cdn.example.com/maya.png")
        fan = await seed.user("Fan")
        older = await seed.post(maya, created_at=days_ago(4), caption="First cutting")
        newer = await seed.post(maya, created_at=days_ago(1), address="Porto")
        await seed.post(fan)
        await seed.like(fan, older)
        await seed.like(maya, older)
        await seed.comment(fan, older)
        await seed.comment(fan, older)

        posts = await post_repository.list_user_posts(maya.id, offset=0, limit=10)

        assert [post.post_id for post in posts] == [newer.id, older.id]
        first_cutting = posts[1]
        assert first_cutting.caption == "First cutting"
        assert first_cutting.likes == 2
        assert first_cutting.comments_count == 2
        assert first_cutting.is_liked is True
        assert first_cutting.is_commented is False
        assert first_cutting.author.name == "Maya"
        assert first_cutting.author.avatar_url == "https://cdn.example.com/maya.png"
        assert first_cutting.location is None
        assert posts[0].caption == ""
        assert posts[0].location.address == "Porto"

    async def test_offset_and_limit_page_through_posts(self, seed, post_repository):
        maya = await seed.user("Maya")
        created = [await seed.post(maya, created_at=days_ago(day)) for day in range(1, 6)]

        page = await post_repository.list_user_posts(maya.id, offset=2, limit=2)

        assert [post.post_id for post in page] == [created[2].id, created[3].id]
        assert await post_repository.count_user_posts(maya.id) == 5

    async def test_saved_posts_carry_their_authors(self, seed, post_repository):
        reader = await seed.user("Reader")
        author = await seed.user("Author")
        post = await seed.post(author)
        await seed.post(author)
        await seed.save(reader, post)
        await seed.comment(reader, post)

        [saved] = await post_repository.list_saved_posts(reader.id)

        assert saved.post_id == post.id
        assert saved.author.user_id == author.id
        assert saved.is_saved is True
        assert saved.is_commented is True
        assert saved.comments_count == 1

    async def test_user_exists(self, seed, post_repository):
        maya = await seed.user("Maya")

        assert await post_repository.user_exists(maya.id) is True
        assert await post_repository.user_exists(uuid4()) is False

    async def test_database_failure_becomes_repository_error(self, broken_session_factory, logger):
        repository = PostFeedRepositoryImpl(broken_session_factory, logger)

        with pytest.raises(RepositoryError) as exc_info:
            await repository.list_user_posts(uuid4(), offset=0, limit=10)

        assert exc_info.value.details["entity"] == "posts"


class TestPostFeedService:

    async def test_page_reports_totals(self, seed, post_feed_service):
        maya = await seed.user("Maya")
        await seed.posts(maya, 5)

        page = await post_feed_service.get_user_posts(maya.id, page=2, limit=2)

        assert len(page.posts) == 2
        assert page.page == 2
        assert page.total_posts == 5
        assert page.total_pages == 3

    async def test_page_past_the_end_is_empty(self, seed, post_feed_service):
        maya = await seed.user("Maya")
        await seed.posts(maya, 2)

        page = await post_feed_service.get_user_posts(maya.id, page=4, limit=10)

        assert page.posts == []
        assert page.total_posts == 2
        assert page.total_pages == 1

    async def test_user_without_posts(self, seed, post_feed_service):
        newcomer = await seed.user("Newcomer")

        page = await post_feed_service.get_user_posts(newcomer.id, page=1, limit=10)
        saved = await post_feed_service.get_saved_posts(newcomer.id)

        assert (page.posts, page.total_posts, page.total_pages) == ([], 0, 0)
        assert saved == []

    async def test_unknown_user_raises_not_found(self, post_feed_service):
        with pytest.raises(UserNotFoundError):
            await post_feed_service.get_user_posts(uuid4(), page=1, limit=10)

        with pytest.raises(UserNotFoundError):
            await post_feed_service.get_saved_posts(uuid4())
