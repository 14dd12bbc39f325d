# 📄 File: app/modules/community_social/presentation/api/v1/users.py
#
# 🧭 Purpose (Layman Explanation):
# The web endpoints the app calls to show a grower's public profile, the posts they shared
# and the posts they saved
#
# 🧪 Purpose (Technical Summary):
# FastAPI profile and post listing endpoints delegating to CQRS query handlers; page and limit are
# free strings so unsupported values degrade to defaults instead of failing validation
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.community_social.application (profile and post queries, handlers)
# - app.modules.community_social.presentation.api.schemas.profile_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /users, after the leaderboard routes)

"""
User API Endpoints

Endpoints:
- GET /{user_id}: Public profile with statistics and recent posts
- GET /{user_id}/posts: Paginated posts, newest first
- GET /{user_id}/saved: Posts the user saved
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from app.modules.community_social.application.handlers.query_handlers import (
    GetSavedPostsQueryHandler,
    GetUserPostsQueryHandler,
    GetUserProfileQueryHandler,
)
from app.modules.community_social.application.queries.get_user_posts import (
    GetSavedPostsQuery,
    GetUserPostsQuery,
)
from app.modules.community_social.application.queries.get_user_profile import GetUserProfileQuery
from app.modules.community_social.presentation.api.schemas.profile_schemas import (
    SavedPostsResponse,
    UserPostsResponse,
    UserProfileResponse,
)
from app.modules.community_social.presentation.dependencies import (
    get_saved_posts_query_handler,
    get_user_posts_query_handler,
    get_user_profile_query_handler,
)

users_router = APIRouter()


@users_router.get(
    "/{user_id}",
    response_model=UserProfileResponse,
    summary="Get user profile",
    description="Public profile of a user with post, plant, like and saved-post statistics and recent posts",
    responses={
        200: {"description": "User profile"},
        404: {"description": "User not found"},
        422: {"description": "Malformed user id"},
    }
)
async def get_user_profile(
    user_id: UUID,
    handler: GetUserProfileQueryHandler = Depends(get_user_profile_query_handler),
) -> UserProfileResponse:
    """
    Get a user's public profile.

    Args:
        user_id: UUID of the user to retrieve

    Returns:
        UserProfileResponse: Profile with activity statistics
    """
    profile = await handler.handle(GetUserProfileQuery(user_id=user_id))
    return UserProfileResponse.from_domain(profile)


@users_router.get(
    "/{user_id}/posts",
    response_model=UserPostsResponse,
    summary="Get user posts",
    description="A user's posts, newest first, with like and comment counts",
    responses={
        200: {"description": "One page of posts (possibly empty)"},
        404: {"description": "User not found"},
        422: {"description": "Malformed user id"},
    }
)
async def get_user_posts(
    user_id: UUID,
    page: Optional[str] = Query(None, description="1-based page number"),
    limit: Optional[str] = Query(None, description="Posts per page"),
    handler: GetUserPostsQueryHandler = Depends(get_user_posts_query_handler),
) -> UserPostsResponse:
    """
    Get one page of a user's posts.

    A missing or invalid page means page 1; a missing or invalid limit
    means the default page size.
    """
    post_page = await handler.handle(GetUserPostsQuery(user_id=user_id, page=page, limit=limit))
    return UserPostsResponse.from_domain(post_page)


@users_router.get(
    "/{user_id}/saved",
    response_model=SavedPostsResponse,
    summary="Get saved posts",
    description="Posts a user saved, most recently saved first",
    responses={
        200: {"description": "Saved posts (possibly empty)"},
        404: {"description": "User not found"},
        422: {"description": "Malformed user id"},
    }
)
async def get_saved_posts(
    user_id: UUID,
    handler: GetSavedPostsQueryHandler = Depends(get_saved_posts_query_handler),
) -> SavedPostsResponse:
    posts = await handler.handle(GetSavedPostsQuery(user_id=user_id))
    return SavedPostsResponse.from_domain(posts)
