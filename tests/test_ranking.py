"""
Tests for leaderboard ranking
"""

from uuid import UUID, uuid4

from app.modules.community_social.domain.services.ranking import rank_entries
from app.modules.community_social.domain.models.leaderboard import ScoredEntry


def entry(score: int, user_id: UUID = None) -> ScoredEntry:
    return ScoredEntry(user_id=user_id or uuid4(), name=f"user-{score}", category="plants", score=score)


class TestRankEntries:

    def test_orders_by_score_descending(self):
        ranked = rank_entries([entry(2), entry(9), entry(5)])

        assert [e.score for e in ranked] == [9, 5, 2]
        assert [e.rank for e in ranked] == [1, 2, 3]

    def test_ties_get_distinct_positions_ordered_by_user_id(self):
        low = UUID("00000000-0000-0000-0000-00000000000a")
        high = UUID("ffffffff-0000-0000-0000-00000000000b")

        ranked = rank_entries([entry(5, high), entry(2), entry(5, low)])

        assert [e.user_id for e in ranked[:2]] == [low, high]
        assert [e.rank for e in ranked] == [1, 2, 3]
        assert ranked[2].score == 2

    def test_limit_truncates_after_ranking(self):
        ranked = rank_entries([entry(score) for score in range(10)], limit=3)

        assert [e.score for e in ranked] == [9, 8, 7]
        assert [e.rank for e in ranked] == [1, 2, 3]

    def test_limit_larger_than_input(self):
        assert len(rank_entries([entry(1), entry(2)], limit=50)) == 2

    def test_empty_input(self):
        assert rank_entries([]) == []

    def test_is_deterministic_regardless_of_input_order(self):
        entries = [entry(3) for _ in range(6)]

        forward = [e.user_id for e in rank_entries(entries)]
        backward = [e.user_id for e in rank_entries(list(reversed(entries)))]

        assert forward == backward
