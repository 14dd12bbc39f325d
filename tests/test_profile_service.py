"""
Tests for ProfileService
"""

from uuid import uuid4

import pytest

from app.shared.core.exceptions import UserNotFoundError
from app.modules.community_social.domain.services.profile_service import ProfileService
from app.modules.community_social.infrastructure.database.community_stats_repository_impl import (
    CommunityStatsRepositoryImpl,
)
from app.modules.community_social.infrastructure.database.post_feed_repository_impl import PostFeedRepositoryImpl

from .conftest import days_ago


@pytest.fixture
def profile_service(session_factory, logger):
    return ProfileService(
        CommunityStatsRepositoryImpl(session_factory, logger),
        PostFeedRepositoryImpl(session_factory, logger),
        logger,
        recent_posts=2,
    )


class TestGetUserProfile:

    async def test_profile_combines_counter_and_activity(self, seed, profile_service):
        maya = await seed.user("Maya", number_of_plants=4, bio="Succulents only")
        fan = await seed.user("Fan")
        first = await seed.post(maya)
        second = await seed.post(maya)
        await seed.like(fan, first)
        await seed.like(fan, second)
        await seed.save(maya, first)

        profile = await profile_service.get_user_profile(maya.id)

        assert profile.user.user_id == maya.id
        assert profile.user.bio == "Succulents only"
        assert profile.stats.plants == 4
        assert profile.stats.environmental_impact == 80
        assert profile.stats.posts == 2
        assert profile.stats.likes_received == 2
        assert profile.stats.saved_posts == 1

    async def test_new_user_has_zero_stats(self, seed, profile_service):
        newcomer = await seed.user("Newcomer")

        profile = await profile_service.get_user_profile(newcomer.id)

        assert profile.stats.posts == 0
        assert profile.stats.likes_received == 0
        assert profile.stats.environmental_impact == 0

    async def test_profile_embeds_latest_posts(self, seed, profile_service):
        maya = await seed.user("Maya")
        await seed.post(maya, created_at=days_ago(5))
        middle = await seed.post(maya, created_at=days_ago(3))
        newest = await seed.post(maya, created_at=days_ago(1))

        profile = await profile_service.get_user_profile(maya.id)

        assert [post.post_id for post in profile.recent_posts] == [newest.id, middle.id]
        assert profile.stats.posts == 3

    async def test_unknown_user_raises_not_found(self, profile_service):
        missing = uuid4()

        with pytest.raises(UserNotFoundError) as exc_info:
            await profile_service.get_user_profile(missing)

        assert exc_info.value.status_code == 404
        assert exc_info.value.details["resource_id"] == str(missing)
