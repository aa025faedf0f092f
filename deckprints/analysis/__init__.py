from deckprints.analysis.ranker import exclude_card, rank_set_groups

__all__ = ["exclude_card", "rank_set_groups"]
