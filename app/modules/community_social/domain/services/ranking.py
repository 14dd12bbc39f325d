# 📄 File: app/modules/community_social/domain/services/ranking.py
# 🧭 Purpose (Layman Explanation):
# Puts scored growers in leaderboard order - highest score first - and numbers them 1, 2, 3...
# 🧪 Purpose (Technical Summary):
# Deterministic ranker: score descending with user-id ascending tie-break, positional ranks, truncation
# 🔗 Dependencies:
# Domain models (ScoredEntry, RankedEntry)
# 🔄 Connected Modules / Calls From:
# leaderboard_service.py

from typing import Iterable, List, Optional, Tuple

from ..models.leaderboard import RankedEntry, ScoredEntry


def _sort_key(entry: ScoredEntry) -> Tuple[int, str]:
    # Higher scores first; equal scores ordered by user id for a stable result
    return (-entry.score, str(entry.user_id))


def rank_entries(entries: Iterable[ScoredEntry], limit: Optional[int] = None) -> List[RankedEntry]:
    """
    Rank scored entries.

    Ranks are assigned by position after the full sort (1..N with no gaps
    or shared ranks), then the list is cut to `limit` entries.

    Args:
        entries: Scored entries in any order
        limit: Maximum number of entries to return (None for all)

    Returns:
        Ranked entries, best first
    """
    ordered = sorted(entries, key=_sort_key)
    if limit is not None:
        ordered = ordered[:max(limit, 0)]

    return [
        RankedEntry(**entry.model_dump(), rank=position)
        for position, entry in enumerate(ordered, start=1)
    ]
