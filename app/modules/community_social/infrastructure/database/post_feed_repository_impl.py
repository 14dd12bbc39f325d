# 📄 File: app/modules/community_social/infrastructure/database/post_feed_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Fetches the plant posts a grower has shared or saved, along with how many likes and comments
# each one has and whether the grower liked, saved or commented on it
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PostFeedRepository: one query selects the page of posts with their
# authors, then grouped like/comment counts and the owner's interaction flags are fetched
# concurrently for just those post ids
#
# 🔗 Dependencies:
# - SQLAlchemy core select/func
# - app.shared.utils.concurrency (gather_or_cancel)
# - app.modules.community_social.domain (repository interface, post models)
# - query_runner.py (session-per-query execution)
#
# 🔄 Connected Modules / Calls From:
# - PostFeedService (user posts, saved posts)
# - ProfileService (recent posts on the profile)

from typing import Any, Dict, List, Optional, Sequence, Set
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.sql import Select

from app.shared.utils.concurrency import gather_or_cancel

from app.modules.community_social.domain.models.profile import (
    PostAuthor,
    PostSummary,
    UserLocation,
)
from app.modules.community_social.domain.repositories.post_feed_repository import PostFeedRepository
from app.modules.community_social.infrastructure.database.models import (
    CommentModel,
    PostModel,
    UserModel,
    post_likes,
    post_saves,
)
from app.modules.community_social.infrastructure.database.query_runner import ReadOnlyQueryRunner


def _post_listing() -> Select:
    """Posts joined with their authors, without filters or ordering."""
    return (
        select(
            PostModel.id,
            PostModel.caption,
            PostModel.image_url,
            PostModel.plant_type,
            PostModel.longitude,
            PostModel.latitude,
            PostModel.address,
            PostModel.created_at,
            UserModel.id.label("author_id"),
            UserModel.name.label("author_name"),
            UserModel.avatar_url.label("author_avatar_url"),
        )
        .select_from(PostModel)
        .join(UserModel, UserModel.id == PostModel.user_id)
    )


def _location(row: Any) -> Optional[UserLocation]:
    if row.longitude is None and row.latitude is None and not row.address:
        return None
    return UserLocation(longitude=row.longitude, latitude=row.latitude, address=row.address)


class PostFeedRepositoryImpl(ReadOnlyQueryRunner, PostFeedRepository):
    """
    SQLAlchemy implementation of the PostFeedRepository interface.
    """

    async def user_exists(self, user_id: UUID) -> bool:
        stmt = select(UserModel.id).where(UserModel.id == user_id)
        return await self._fetch_scalar(stmt, "find_user", "users", {"user_id": str(user_id)}) is not None

    async def count_user_posts(self, user_id: UUID) -> int:
        stmt = select(func.count(PostModel.id)).where(PostModel.user_id == user_id)
        return int(await self._fetch_scalar(stmt, "count_user_posts", "posts", {"user_id": str(user_id)}) or 0)

    async def list_user_posts(self, user_id: UUID, offset: int, limit: int) -> List[PostSummary]:
        context = {"user_id": str(user_id), "offset": offset, "limit": limit}
        stmt = (
            _post_listing()
            .where(PostModel.user_id == user_id)
            .order_by(PostModel.created_at.desc(), PostModel.id.desc())
            .offset(offset)
            .limit(limit)
        )

        rows = await self._fetch_all(stmt, "list_user_posts", "posts", context)
        return await self._summarise(rows, user_id, context)

    async def list_saved_posts(self, user_id: UUID) -> List[PostSummary]:
        context = {"user_id": str(user_id)}
        stmt = (
            _post_listing()
            .join(post_saves, post_saves.c.post_id == PostModel.id)
            .where(post_saves.c.user_id == user_id)
            .order_by(post_saves.c.created_at.desc(), PostModel.id.desc())
        )

        rows = await self._fetch_all(stmt, "list_saved_posts", "post_saves", context)
        return await self._summarise(rows, user_id, context)

    async def _summarise(
        self,
        rows: Sequence[Any],
        owner_id: UUID,
        context: Dict[str, Any]
    ) -> List[PostSummary]:
        """Attach counts and the owner's interaction flags to listed posts."""
        if not rows:
            return []

        post_ids = [row.id for row in rows]

        likes_stmt = (
            select(post_likes.c.post_id, func.count(post_likes.c.user_id))
            .where(post_likes.c.post_id.in_(post_ids))
            .group_by(post_likes.c.post_id)
        )
        comments_stmt = (
            select(CommentModel.post_id, func.count(CommentModel.id))
            .where(CommentModel.post_id.in_(post_ids))
            .group_by(CommentModel.post_id)
        )
        liked_stmt = select(post_likes.c.post_id).where(
            post_likes.c.post_id.in_(post_ids),
            post_likes.c.user_id == owner_id,
        )
        saved_stmt = select(post_saves.c.post_id).where(
            post_saves.c.post_id.in_(post_ids),
            post_saves.c.user_id == owner_id,
        )
        commented_stmt = (
            select(CommentModel.post_id)
            .where(CommentModel.post_id.in_(post_ids), CommentModel.user_id == owner_id)
            .distinct()
        )

        like_rows, comment_rows, liked_rows, saved_rows, commented_rows = await gather_or_cancel(
            self._fetch_all(likes_stmt, "count_likes_by_post", "post_likes", context),
            self._fetch_all(comments_stmt, "count_comments_by_post", "comments", context),
            self._fetch_all(liked_stmt, "find_owner_likes", "post_likes", context),
            self._fetch_all(saved_stmt, "find_owner_saves", "post_saves", context),
            self._fetch_all(commented_stmt, "find_owner_comments", "comments", context),
        )

        likes: Dict[UUID, int] = {post_id: int(count) for post_id, count in like_rows}
        comments: Dict[UUID, int] = {post_id: int(count) for post_id, count in comment_rows}
        liked: Set[UUID] = {row[0] for row in liked_rows}
        saved: Set[UUID] = {row[0] for row in saved_rows}
        commented: Set[UUID] = {row[0] for row in commented_rows}

        return [
            PostSummary(
                post_id=row.id,
                author=PostAuthor(
                    user_id=row.author_id,
                    name=row.author_name,
                    avatar_url=row.author_avatar_url,
                ),
                caption=row.caption or "",
                image_url=row.image_url,
                plant_type=row.plant_type,
                location=_location(row),
                likes=likes.get(row.id, 0),
                comments_count=comments.get(row.id, 0),
                is_liked=row.id in liked,
                is_saved=row.id in saved,
                is_commented=row.id in commented,
                created_at=row.created_at,
            )
            for row in rows
        ]
