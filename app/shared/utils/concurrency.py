# 📄 File: app/shared/utils/concurrency.py

# 🧭 Purpose (Layman Explanation):
# Lets the app ask the database several questions at once, and if one of them goes wrong,
# politely stops the others instead of leaving them running in the background.

# 🧪 Purpose (Technical Summary):
# Fan-out/fan-in helper over asyncio.gather that cancels and drains sibling tasks when one fails,
# so no task outlives the request and no sibling exception is left unretrieved.

# 🔗 Dependencies:
# - asyncio: task scheduling, cancellation

# 🔄 Connected Modules / Calls From:
# Used by: LeaderboardService, metric sources, community repositories

import asyncio
from typing import Any, Awaitable, List


async def gather_or_cancel(*aws: Awaitable[Any]) -> List[Any]:
    """
    Run awaitables concurrently and return their results in order.

    The first failure propagates. Siblings still running at that point are
    cancelled and awaited before the exception is re-raised.

    Args:
        *aws: Coroutines or futures to run together

    Returns:
        List of results, in argument order
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()

        # Retrieve every outcome so nothing is reported as never retrieved
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
