# 📄 File: app/modules/community_social/application/queries/get_user_profile.py
# 🧭 Purpose (Layman Explanation):
# Describes a request to view one grower's public profile
# 🧪 Purpose (Technical Summary):
# CQRS query for public profile retrieval by user id
# 🔗 Dependencies:
# pydantic, uuid
# 🔄 Connected Modules / Calls From:
# GetUserProfileQueryHandler, users API endpoint

from uuid import UUID

from pydantic import BaseModel, Field


class GetUserProfileQuery(BaseModel):
    """Query for a user's public profile with activity statistics."""

    user_id: UUID = Field(..., description="User to look up")
