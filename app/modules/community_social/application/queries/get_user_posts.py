# 📄 File: app/modules/community_social/application/queries/get_user_posts.py
# 🧭 Purpose (Layman Explanation):
# Describes a request for a page of a grower's posts, or for the posts they saved,
# quietly fixing up odd page numbers and page sizes
# 🧪 Purpose (Technical Summary):
# CQRS queries for profile post listings; page and limit are free strings resolved leniently
# (leading integer, non-positive page -> 1, bad limit -> default, capped at the maximum)
# 🔗 Dependencies:
# pydantic, uuid, get_leaderboard (integer parsing helpers)
# 🔄 Connected Modules / Calls From:
# GetUserPostsQueryHandler, GetSavedPostsQueryHandler, users API endpoints

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from .get_leaderboard import parse_leading_int, resolve_limit


class GetSavedPostsQuery(BaseModel):
    """Query for the posts a user saved."""

    user_id: UUID = Field(..., description="User whose saved posts to list")


class GetUserPostsQuery(GetSavedPostsQuery):
    """Query for one page of a user's own posts."""

    page: Optional[str] = Field(None, description="1-based page number", examples=["1"])
    limit: Optional[str] = Field(None, description="Posts per page", examples=["10"])

    def resolved_page(self) -> int:
        page = parse_leading_int(self.page)
        return page if page is not None and page > 0 else 1

    def resolved_limit(self, default: int, maximum: int) -> int:
        return resolve_limit(self.limit, default, maximum)
