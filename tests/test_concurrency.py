"""
Tests for gather_or_cancel
"""

import asyncio

import pytest

from app.shared.core.exceptions import RepositoryError
from app.shared.utils.concurrency import gather_or_cancel


async def test_results_keep_argument_order():
    async def value(result, delay):
        await asyncio.sleep(delay)
        return result

    assert await gather_or_cancel(value("slow", 0.02), value("fast", 0)) == ["slow", "fast"]


async def test_failure_cancels_running_siblings():
    cancelled = asyncio.Event()

    async def slow_query():
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    async def failing_query():
        raise RepositoryError("boom", operation="count_posts")

    with pytest.raises(RepositoryError):
        await gather_or_cancel(slow_query(), failing_query())

    assert cancelled.is_set()


async def test_sibling_failures_are_collected():
    second_failed = asyncio.Event()

    async def first():
        raise RepositoryError("first", operation="count_posts")

    async def second():
        try:
            raise RepositoryError("second", operation="count_comments")
        finally:
            second_failed.set()

    tasks_before = asyncio.all_tasks()

    with pytest.raises(RepositoryError) as exc_info:
        await gather_or_cancel(first(), second())

    assert exc_info.value.message == "first"
    assert second_failed.is_set()
    assert asyncio.all_tasks() == tasks_before
