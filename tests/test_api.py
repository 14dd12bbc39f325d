"""
HTTP tests for the leaderboard, statistics and profile endpoints
"""

from uuid import uuid4

import httpx
import pytest

from app.modules.community_social.presentation.dependencies import get_session_factory

from .conftest import days_ago

LEADERBOARD_URL = "/api/v1/users/leaderboard"
STATS_URL = "/api/v1/users/leaderboard/stats"


class TestLeaderboardEndpoint:

    async def test_defaults_are_echoed(self, client):
        response = await client.get(LEADERBOARD_URL)

        assert response.status_code == 200
        assert response.json() == {
            "leaderboard": [],
            "category": "plants",
            "timeRange": "all",
            "limit": 10,
            "totalUsers": 0,
        }

    async def test_invalid_parameters_fall_back(self, client):
        response = await client.get(
            LEADERBOARD_URL, params={"category": "followers", "timeRange": "decade", "limit": "-5"}
        )

        body = response.json()
        assert response.status_code == 200
        assert (body["category"], body["timeRange"], body["limit"]) == ("plants", "all", 10)

    @pytest.mark.parametrize("time_range", ["week", "all"])
    async def test_unknown_category_ranks_like_plants(self, client, seed, time_range):
        for plants in range(1, 4):
            grower = await seed.user(f"Grower {plants}", number_of_plants=10 - plants)
            await seed.posts(grower, plants)

        plants_body = (await client.get(
            LEADERBOARD_URL, params={"category": "plants", "timeRange": time_range}
        )).json()
        bogus_body = (await client.get(
            LEADERBOARD_URL, params={"category": "followers", "timeRange": time_range}
        )).json()

        assert len(plants_body["leaderboard"]) == 3
        assert bogus_body == plants_body

    async def test_limit_reads_leading_digits(self, client):
        response = await client.get(LEADERBOARD_URL, params={"limit": "5abc"})

        assert response.json()["limit"] == 5

    async def test_limit_is_capped(self, client):
        response = await client.get(LEADERBOARD_URL, params={"limit": "1000"})

        assert response.json()["limit"] == 100

    async def test_entries_use_camel_case(self, client, seed):
        maya = await seed.user("Maya", number_of_plants=3)

        response = await client.get(LEADERBOARD_URL, params={"category": "co2"})

        [entry] = response.json()["leaderboard"]
        assert entry == {
            "id": str(maya.id),
            "name": "Maya",
            "avatarUrl": maya.avatar_url,
            "numberOfPlants": 3,
            "score": 60,
            "category": "co2",
            "rank": 1,
            "engagement": None,
        }

    async def test_weekly_engagement(self, client, seed):
        author = await seed.user("Author")
        fan = await seed.user("Fan")
        post = await seed.post(author)
        await seed.post(author, created_at=days_ago(9))
        await seed.like(fan, post)

        response = await client.get(
            LEADERBOARD_URL, params={"category": "engagement", "timeRange": "week"}
        )

        [entry] = response.json()["leaderboard"]
        assert entry["id"] == str(author.id)
        assert entry["score"] == 2
        assert entry["engagement"] == {"posts": 1, "likes": 1, "comments": 0, "total": 2}

    async def test_repository_failure_returns_error_envelope(self, app, client, broken_session_factory):
        app.dependency_overrides[get_session_factory] = lambda: broken_session_factory

        response = await client.get(LEADERBOARD_URL, params={"timeRange": "week"})

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "REPOSITORY_ERROR"
        assert error["request_id"] == response.headers["X-Request-ID"]
        assert response.headers["X-Error-Code"] == "REPOSITORY_ERROR"


class TestLeaderboardStatsEndpoint:

    async def test_stats_shape(self, client, seed):
        alice = await seed.user("Alice", number_of_plants=5)
        bob = await seed.user("Bob", number_of_plants=2)
        post = await seed.post(alice)
        await seed.like(bob, post)
        await seed.comment(bob, post)

        response = await client.get(STATS_URL, params={"timeRange": "week"})

        assert response.status_code == 200
        body = response.json()
        assert body["platformStats"] == {
            "totalUsers": 2,
            "totalPosts": 1,
            "totalComments": 1,
            "totalLikes": 1,
            "totalPlants": 1,
            "environmentalImpact": 20,
            "timeRange": "week",
            "category": "plants",
        }
        assert body["topPerformers"]["topPlantGrower"] == {"id": str(alice.id), "name": "Alice", "plants": 1}
        assert body["topPerformers"]["mostLikedUser"]["totalLikes"] == 1
        assert body["topPerformers"]["mostCommentedUser"]["id"] == str(bob.id)
        assert body["topThree"]["posters"] == [
            {"id": str(alice.id), "name": "Alice", "postCount": 1, "rank": 1}
        ]

    async def test_empty_store(self, client):
        response = await client.get(STATS_URL)

        body = response.json()
        assert response.status_code == 200
        assert body["platformStats"]["totalUsers"] == 0
        assert body["topPerformers"] == {
            "topPlantGrower": None,
            "mostActiveUser": None,
            "mostLikedUser": None,
            "mostCommentedUser": None,
        }
        assert body["topThree"]["plantGrowers"] == []


class TestUserProfileEndpoint:

    async def test_profile(self, client, seed):
        maya = await seed.user("Maya", number_of_plants=2, bio="Herbs", address="Porto")
        post = await seed.post(maya)
        await seed.save(maya, post)

        response = await client.get(f"/api/v1/users/{maya.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(maya.id)
        assert body["bio"] == "Herbs"
        assert body["location"]["address"] == "Porto"
        assert body["stats"] == {
            "posts": 1,
            "plants": 2,
            "likesReceived": 0,
            "savedPosts": 1,
            "environmentalImpact": 40,
        }
        assert "email" not in body
        assert "passwordHash" not in body

    async def test_profile_embeds_recent_posts(self, client, seed):
        maya = await seed.user("Maya")
        older = await seed.post(maya, created_at=days_ago(3))
        newer = await seed.post(maya, created_at=days_ago(1))

        body = (await client.get(f"/api/v1/users/{maya.id}")).json()

        assert [post["id"] for post in body["posts"]] == [str(newer.id), str(older.id)]
        assert body["posts"][0]["userName"] == "Maya"

    async def test_unknown_user_is_404(self, client):
        response = await client.get(f"/api/v1/users/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_malformed_id_is_422(self, client):
        response = await client.get("/api/v1/users/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestHealthEndpoints:

    async def test_basic_health(self, client):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_request_id_is_propagated(self, client):
        response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    async def test_unknown_route_uses_error_envelope(self, client):
        response = await client.get("/api/v1/nope")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestUserPostsEndpoints:

    async def test_posts_page(self, client, seed):
        maya = await seed.user("Maya")
        fan = await seed.user("Fan")
        created = [await seed.post(maya, created_at=days_ago(day)) for day in range(1, 4)]
        await seed.like(fan, created[0])
        await seed.comment(fan, created[0])

        response = await client.get(f"/api/v1/users/{maya.id}/posts", params={"page": "1", "limit": "2"})

        assert response.status_code == 200
        body = response.json()
        assert (body["currentPage"], body["totalPages"], body["totalPosts"]) == (1, 2, 3)
        assert [post["id"] for post in body["posts"]] == [str(created[0].id), str(created[1].id)]
        newest = body["posts"][0]
        assert newest["userId"] == str(maya.id)
        assert newest["likes"] == 1
        assert newest["commentsCount"] == 1
        assert newest["plantType"] == "Monstera"
        assert newest["isLiked"] is False
        assert newest["location"] is None

    async def test_invalid_page_and_limit_fall_back(self, client, seed):
        maya = await seed.user("Maya")
        await seed.posts(maya, 3)

        response = await client.get(
            f"/api/v1/users/{maya.id}/posts", params={"page": "zero", "limit": "-4"}
        )

        body = response.json()
        assert response.status_code == 200
        assert (body["currentPage"], body["totalPages"], len(body["posts"])) == (1, 1, 3)

    async def test_saved_posts(self, client, seed):
        reader = await seed.user("Reader")
        author = await seed.user("Author")
        post = await seed.post(author)
        await seed.save(reader, post)

        response = await client.get(f"/api/v1/users/{reader.id}/saved")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        [saved] = body["posts"]
        assert saved["id"] == str(post.id)
        assert saved["userName"] == "Author"
        assert saved["isSaved"] is True

    @pytest.mark.parametrize("suffix", ["posts", "saved"])
    async def test_unknown_user_is_404(self, client, suffix):
        response = await client.get(f"/api/v1/users/{uuid4()}/{suffix}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_repository_failure_returns_error_envelope(self, app, client, broken_session_factory):
        app.dependency_overrides[get_session_factory] = lambda: broken_session_factory

        response = await client.get(f"/api/v1/users/{uuid4()}/posts")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "REPOSITORY_ERROR"
