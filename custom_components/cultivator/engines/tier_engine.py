"""Tier Engine - Pure logic for tier ordering and evolution.

Tiers are totally ordered D < D+ < C < ... < SS+ < SSS. Identities that pass
the level cap evolve along the major-tier ladder D -> C -> B -> A -> S -> SS
-> SSS, saturating at SSS.

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on passed-in data.
"""

from __future__ import annotations

from .. import const


class TierEngine:
    """Pure logic engine for tier comparison and succession.

    All methods are static - no instance state.
    """

    TIER_SCORES: dict[str, int] = {
        tier: index + 1 for index, tier in enumerate(const.TIERS_ASCENDING)
    }

    @staticmethod
    def get_tier_score(tier: str) -> int:
        """Return the 1-based score of a tier, or 0 for an unknown tier."""
        return TierEngine.TIER_SCORES.get(tier, 0)

    @staticmethod
    def compare_tiers(first: str, second: str) -> int:
        """Return negative, zero or positive as first is below, equal or above second."""
        return TierEngine.get_tier_score(first) - TierEngine.get_tier_score(second)

    @staticmethod
    def is_valid_tier(tier: str) -> bool:
        """Return True when tier is one of the known tiers."""
        return tier in TierEngine.TIER_SCORES

    @staticmethod
    def is_max_tier(tier: str) -> bool:
        """Return True for the top tier."""
        return tier == const.TIERS_ASCENDING[-1]

    @staticmethod
    def next_tier(tier: str) -> str:
        """Return the tier directly above, saturating at SSS.

        Unknown tiers are returned unchanged.
        """
        if tier not in TierEngine.TIER_SCORES:
            return tier
        index = const.TIERS_ASCENDING.index(tier)
        return const.TIERS_ASCENDING[min(index + 1, len(const.TIERS_ASCENDING) - 1)]

    @staticmethod
    def previous_tier(tier: str) -> str:
        """Return the tier directly below, saturating at D."""
        if tier not in TierEngine.TIER_SCORES:
            return tier
        index = const.TIERS_ASCENDING.index(tier)
        return const.TIERS_ASCENDING[max(index - 1, 0)]

    @staticmethod
    def major_tier(tier: str) -> str:
        """Return the major tier a plus tier belongs to ("B+" -> "B")."""
        return tier.rstrip("+") or tier

    @staticmethod
    def next_evolution_tier(tier: str) -> str:
        """Return the tier reached by evolving past the level cap.

        Steps one rung up the major-tier ladder. A plus tier evolves to the
        next major tier above it. SSS stays SSS. Unknown tiers are returned
        unchanged.
        """
        if tier not in TierEngine.TIER_SCORES:
            return tier
        ladder = const.TIERS_EVOLUTION
        major = TierEngine.major_tier(tier)
        index = ladder.index(major)
        return ladder[min(index + 1, len(ladder) - 1)]

    @staticmethod
    def default_days_per_level(tier: str) -> int:
        """Return the fallback days-per-level for a tier.

        Plus tiers use their major tier's value; unknown tiers use the global
        default.
        """
        return const.TIER_DEFAULT_DAYS_PER_LEVEL.get(
            TierEngine.major_tier(tier), const.DEFAULT_DAYS_PER_LEVEL
        )
