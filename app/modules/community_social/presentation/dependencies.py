# 📄 File: app/modules/community_social/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Wires together everything a leaderboard or profile request needs - database access, logging and
# the services that do the counting - so each endpoint just asks for a ready-made handler
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the community module: session factory, injected structured logger,
# metric sources, stats and post feed repositories, domain services and CQRS query handlers
# 🔗 Dependencies:
# FastAPI Depends, app.shared.config.settings, app.shared.infrastructure.database.session,
# app.shared.utils.logging, community_social application/domain/infrastructure layers
# 🔄 Connected Modules / Calls From:
# app.modules.community_social.presentation.api.v1.*, tests (dependency overrides)

"""
Community Module Dependencies

Tests replace `get_session_factory` (or any service provider) through
`app.dependency_overrides`.
"""

from fastapi import Depends

from app.shared.config.settings import Settings, get_settings
from app.shared.infrastructure.database.session import read_only_database_session
from app.shared.utils.logging import StructuredLogger, get_logger

from app.modules.community_social.application.handlers.query_handlers import (
    GetLeaderboardQueryHandler,
    GetLeaderboardStatsQueryHandler,
    GetSavedPostsQueryHandler,
    GetUserPostsQueryHandler,
    GetUserProfileQueryHandler,
)
from app.modules.community_social.domain.services.leaderboard_service import LeaderboardService
from app.modules.community_social.domain.services.post_feed_service import PostFeedService
from app.modules.community_social.domain.services.profile_service import ProfileService
from app.modules.community_social.infrastructure.database.community_stats_repository_impl import (
    CommunityStatsRepositoryImpl,
)
from app.modules.community_social.infrastructure.database.metric_sources import (
    CounterMetricSource,
    WindowedMetricSource,
)
from app.modules.community_social.infrastructure.database.post_feed_repository_impl import PostFeedRepositoryImpl
from app.modules.community_social.infrastructure.database.query_runner import SessionFactory

COMMUNITY_LOGGER_NAME = "app.modules.community_social"


def get_session_factory() -> SessionFactory:
    """Provide the read-only session factory used by every aggregation query."""
    return read_only_database_session


def get_community_logger() -> StructuredLogger:
    return get_logger(COMMUNITY_LOGGER_NAME)


def get_stats_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
    logger: StructuredLogger = Depends(get_community_logger),
) -> CommunityStatsRepositoryImpl:
    return CommunityStatsRepositoryImpl(session_factory, logger)


def get_post_repository(
    session_factory: SessionFactory = Depends(get_session_factory),
    logger: StructuredLogger = Depends(get_community_logger),
) -> PostFeedRepositoryImpl:
    return PostFeedRepositoryImpl(session_factory, logger)


def get_leaderboard_service(
    session_factory: SessionFactory = Depends(get_session_factory),
    logger: StructuredLogger = Depends(get_community_logger),
    stats_repository: CommunityStatsRepositoryImpl = Depends(get_stats_repository),
    settings: Settings = Depends(get_settings),
) -> LeaderboardService:
    return LeaderboardService(
        counter_source=CounterMetricSource(session_factory, logger),
        windowed_source=WindowedMetricSource(session_factory, logger),
        stats_repository=stats_repository,
        logger=logger,
        top_count=settings.LEADERBOARD_TOP_COUNT,
    )


def get_profile_service(
    stats_repository: CommunityStatsRepositoryImpl = Depends(get_stats_repository),
    post_repository: PostFeedRepositoryImpl = Depends(get_post_repository),
    logger: StructuredLogger = Depends(get_community_logger),
    settings: Settings = Depends(get_settings),
) -> ProfileService:
    return ProfileService(
        stats_repository,
        post_repository,
        logger,
        recent_posts=settings.PROFILE_RECENT_POSTS,
    )


def get_post_feed_service(
    post_repository: PostFeedRepositoryImpl = Depends(get_post_repository),
    logger: StructuredLogger = Depends(get_community_logger),
) -> PostFeedService:
    return PostFeedService(post_repository, logger)


def get_leaderboard_query_handler(
    service: LeaderboardService = Depends(get_leaderboard_service),
    settings: Settings = Depends(get_settings),
) -> GetLeaderboardQueryHandler:
    return GetLeaderboardQueryHandler(
        service,
        default_limit=settings.LEADERBOARD_DEFAULT_LIMIT,
        max_limit=settings.LEADERBOARD_MAX_LIMIT,
    )


def get_leaderboard_stats_query_handler(
    service: LeaderboardService = Depends(get_leaderboard_service),
) -> GetLeaderboardStatsQueryHandler:
    return GetLeaderboardStatsQueryHandler(service)


def get_user_profile_query_handler(
    service: ProfileService = Depends(get_profile_service),
) -> GetUserProfileQueryHandler:
    return GetUserProfileQueryHandler(service)


def get_user_posts_query_handler(
    service: PostFeedService = Depends(get_post_feed_service),
    settings: Settings = Depends(get_settings),
) -> GetUserPostsQueryHandler:
    return GetUserPostsQueryHandler(
        service,
        default_limit=settings.POSTS_DEFAULT_PAGE_SIZE,
        max_limit=settings.POSTS_MAX_PAGE_SIZE,
    )


def get_saved_posts_query_handler(
    service: PostFeedService = Depends(get_post_feed_service),
) -> GetSavedPostsQueryHandler:
    return GetSavedPostsQueryHandler(service)
