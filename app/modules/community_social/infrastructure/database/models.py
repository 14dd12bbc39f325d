# 📄 File: app/modules/community_social/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how growers, their plant posts, comments, likes and saved posts are stored in the database
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the community schema: users, posts, comments and the post-like,
# post-save and comment-like association tables with composite primary keys
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - metric_sources.py and community_stats_repository_impl.py (aggregation queries)
# - migrations/env.py (target metadata)
# - tests (seeding)

"""
SQLAlchemy Models for the Community

Models:
- UserModel: Grower account, public profile and lifetime plant counter
- PostModel: A shared plant photo, tagged with a plant type
- CommentModel: A comment on a post, optionally replying to another comment

Association tables:
- post_likes / post_saves: users who liked or saved a post
- comment_likes: users who liked a comment

Identifiers use the generic Uuid type so the schema works on PostgreSQL
(native UUID) as well as SQLite.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    Uuid,
)
from sqlalchemy.orm import relationship

from app.shared.infrastructure.database.connection import Base
from app.modules.community_social.domain.models.leaderboard import (
    ENVIRONMENTAL_IMPACT_PER_PLANT,
    UNKNOWN_PLANT_TYPE,
)

DEFAULT_AVATAR_URL = "https://cdn-icons-png.flaticon.com/512/149/149071.png"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ASSOCIATION TABLES
# =============================================================================

post_likes = Table(
    "post_likes",
    Base.metadata,
    Column("post_id", Uuid, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime(timezone=True), nullable=False, default=_utcnow),
)

post_saves = Table(
    "post_saves",
    Base.metadata,
    Column("post_id", Uuid, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime(timezone=True), nullable=False, default=_utcnow),
)

comment_likes = Table(
    "comment_likes",
    Base.metadata,
    Column("comment_id", Uuid, ForeignKey("comments.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime(timezone=True), nullable=False, default=_utcnow),
)


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """
    SQLAlchemy model for a grower account.

    `number_of_plants` is a denormalised lifetime counter maintained by the
    posting flow; all-time plant rankings read it directly.
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid4, nullable=False, comment="Unique user identifier")

    name = Column(String(100), nullable=False, comment="Display name")
    email = Column(String(255), unique=True, nullable=False, index=True, comment="Lower-cased email address")
    password_hash = Column(String(255), nullable=False, comment="Hashed password")

    avatar_url = Column(String(500), nullable=True, default=DEFAULT_AVATAR_URL, comment="Profile picture URL")
    cover_image_url = Column(String(500), nullable=True, comment="Profile cover image URL")
    bio = Column(String(250), nullable=True, comment="Short self description")

    longitude = Column(Float, nullable=True)
    latitude = Column(Float, nullable=True)
    address = Column(String(255), nullable=True)

    number_of_plants = Column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Lifetime number of plants shared"
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    posts = relationship("PostModel", back_populates="user", cascade="all, delete-orphan")
    comments = relationship("CommentModel", back_populates="user", cascade="all, delete-orphan")
    saved_posts = relationship("PostModel", secondary=post_saves, back_populates="saved_by")

    __table_args__ = (
        CheckConstraint("number_of_plants >= 0", name="check_number_of_plants_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, name={self.name})>"


# =============================================================================
# POST MODEL
# =============================================================================

class PostModel(Base):
    """SQLAlchemy model for a shared plant post."""
    __tablename__ = "posts"

    id = Column(Uuid, primary_key=True, default=uuid4, nullable=False)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Author of the post"
    )

    image_url = Column(String(500), nullable=False)
    caption = Column(String(500), nullable=True)

    longitude = Column(Float, nullable=True)
    latitude = Column(Float, nullable=True)
    address = Column(String(255), nullable=True)

    plant_type = Column(
        String(100),
        nullable=False,
        default=UNKNOWN_PLANT_TYPE,
        comment="Identified plant type, 'Unknown' when not a plant"
    )
    environmental_impact = Column(
        Integer,
        nullable=False,
        default=ENVIRONMENTAL_IMPACT_PER_PLANT,
        comment="CO2 offset credited for this post"
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    user = relationship("UserModel", back_populates="posts")
    comments = relationship("CommentModel", back_populates="post", cascade="all, delete-orphan")
    liked_by = relationship("UserModel", secondary=post_likes)
    saved_by = relationship("UserModel", secondary=post_saves, back_populates="saved_posts")

    def __repr__(self) -> str:
        return f"<PostModel(id={self.id}, user_id={self.user_id}, plant_type={self.plant_type})>"


# =============================================================================
# COMMENT MODEL
# =============================================================================

class CommentModel(Base):
    """SQLAlchemy model for a comment, with one level of reply threading."""
    __tablename__ = "comments"

    id = Column(Uuid, primary_key=True, default=uuid4, nullable=False)
    post_id = Column(Uuid, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    parent_comment_id = Column(
        Uuid,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
        comment="Comment being replied to"
    )

    text = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    post = relationship("PostModel", back_populates="comments")
    user = relationship("UserModel", back_populates="comments")
    liked_by = relationship("UserModel", secondary=comment_likes)

    __table_args__ = (
        CheckConstraint("length(text) <= 500", name="check_comment_text_length"),
    )

    def __repr__(self) -> str:
        return f"<CommentModel(id={self.id}, post_id={self.post_id}, user_id={self.user_id})>"
