"""Tests for TierEngine - pure logic, no HA fixtures needed."""

from __future__ import annotations

import pytest

from custom_components.cultivator import const
from custom_components.cultivator.engines.tier_engine import TierEngine

# =============================================================================
# TEST: ORDERING
# =============================================================================


class TestTierOrdering:
    """Test tier scores and comparison."""

    def test_scores_follow_ascending_order(self) -> None:
        """Every tier scores one more than the tier below it."""
        scores = [TierEngine.get_tier_score(tier) for tier in const.TIERS_ASCENDING]
        assert scores == list(range(1, 14))

    def test_unknown_tier_scores_zero(self) -> None:
        """Unknown tiers rank below D."""
        assert TierEngine.get_tier_score("Z") == 0
        assert TierEngine.compare_tiers("Z", const.TIER_D) < 0

    @pytest.mark.parametrize(
        ("lower", "higher"),
        [
            (const.TIER_D, const.TIER_D_PLUS),
            (const.TIER_C_PLUS, const.TIER_B),
            (const.TIER_S, const.TIER_SS),
            (const.TIER_SS_PLUS, const.TIER_SSS),
        ],
    )
    def test_compare_is_antisymmetric(self, lower: str, higher: str) -> None:
        """compare(a, b) and compare(b, a) have opposite signs."""
        assert TierEngine.compare_tiers(lower, higher) < 0
        assert TierEngine.compare_tiers(higher, lower) > 0
        assert TierEngine.compare_tiers(lower, lower) == 0

    def test_is_valid_and_max_tier(self) -> None:
        """Validity and max-tier checks."""
        assert TierEngine.is_valid_tier(const.TIER_A_PLUS)
        assert not TierEngine.is_valid_tier("A++")
        assert TierEngine.is_max_tier(const.TIER_SSS)
        assert not TierEngine.is_max_tier(const.TIER_SS_PLUS)


# =============================================================================
# TEST: SUCCESSION
# =============================================================================


class TestTierSuccession:
    """Test next/previous tier and evolution ladder."""

    def test_next_tier_walks_full_order(self) -> None:
        """next_tier steps through plus tiers."""
        assert TierEngine.next_tier(const.TIER_D) == const.TIER_D_PLUS
        assert TierEngine.next_tier(const.TIER_D_PLUS) == const.TIER_C

    def test_next_tier_saturates(self) -> None:
        """SSS has no successor."""
        assert TierEngine.next_tier(const.TIER_SSS) == const.TIER_SSS

    def test_previous_tier_saturates(self) -> None:
        """D has no predecessor."""
        assert TierEngine.previous_tier(const.TIER_D) == const.TIER_D
        assert TierEngine.previous_tier(const.TIER_C) == const.TIER_D_PLUS

    @pytest.mark.parametrize(
        ("tier", "expected"),
        [
            (const.TIER_D, const.TIER_C),
            (const.TIER_C, const.TIER_B),
            (const.TIER_A, const.TIER_S),
            (const.TIER_S, const.TIER_SS),
            (const.TIER_SS, const.TIER_SSS),
            (const.TIER_SSS, const.TIER_SSS),
            (const.TIER_B_PLUS, const.TIER_A),
        ],
    )
    def test_evolution_ladder(self, tier: str, expected: str) -> None:
        """Evolution climbs one major tier and saturates at SSS."""
        assert TierEngine.next_evolution_tier(tier) == expected

    def test_evolution_never_lowers_tier(self) -> None:
        """Evolution is monotonic over every known tier."""
        for tier in const.TIERS_ASCENDING:
            assert TierEngine.compare_tiers(TierEngine.next_evolution_tier(tier), tier) >= 0

    def test_default_days_per_level(self) -> None:
        """Plus tiers share the major tier's default; unknown uses the global one."""
        assert TierEngine.default_days_per_level(const.TIER_D) == 5
        assert TierEngine.default_days_per_level(const.TIER_B_PLUS) == 15
        assert TierEngine.default_days_per_level(const.TIER_SSS) == 19
        assert (
            TierEngine.default_days_per_level("Z") == const.DEFAULT_DAYS_PER_LEVEL
        )
