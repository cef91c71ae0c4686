import pytest

from adventurers_book.core.exceptions import InvalidArgumentError
from adventurers_book.progression import LevelingCurve


@pytest.fixture
def curve():
    return LevelingCurve(base=300, exponent=2)


class TestThresholds:
    @pytest.mark.parametrize("base,exponent", [(300, 2), (500, 2), (1, 1), (7, 3)])
    def test_strictly_increasing(self, base, exponent):
        curve = LevelingCurve(base=base, exponent=exponent)
        thresholds = [curve.next_level_threshold(level) for level in range(1, 60)]
        assert all(later > earlier for earlier, later in zip(thresholds, thresholds[1:]))

    def test_threshold_values(self, curve):
        assert curve.next_level_threshold(1) == 300
        assert curve.next_level_threshold(2) == 1200
        assert curve.next_level_threshold(3) == 2700

    def test_cumulative_xp(self, curve):
        assert curve.cumulative_xp(1) == 0
        assert curve.cumulative_xp(2) == 300
        assert curve.cumulative_xp(3) == 1500

    def test_level_below_one_rejected(self, curve):
        with pytest.raises(InvalidArgumentError):
            curve.next_level_threshold(0)

    @pytest.mark.parametrize("base,exponent", [(0, 2), (300, 0), (-5, 2)])
    def test_invalid_constants_rejected(self, base, exponent):
        with pytest.raises(InvalidArgumentError):
            LevelingCurve(base=base, exponent=exponent)


class TestApplyXp:
    def test_below_threshold_keeps_level(self, curve):
        result = curve.apply_xp(1, 0, 299)
        assert result.new_level == 1
        assert result.xp_into_level == 299
        assert result.levels_gained == 0

    def test_exact_threshold_levels_up(self, curve):
        result = curve.apply_xp(1, 0, 300)
        assert result.new_level == 2
        assert result.xp_into_level == 0

    def test_rolls_over_several_levels(self, curve):
        result = curve.apply_xp(1, 0, 300 + 1200 + 10)
        assert result.new_level == 3
        assert result.xp_into_level == 10
        assert result.levels_gained == 2

    def test_continues_from_progress(self, curve):
        result = curve.apply_xp(2, 1100, 150)
        assert result.new_level == 3
        assert result.xp_into_level == 50

    def test_zero_award_is_noop(self, curve):
        result = curve.apply_xp(4, 12, 0)
        assert (result.new_level, result.xp_into_level, result.levels_gained) == (4, 12, 0)

    def test_negative_award_rejected(self, curve):
        with pytest.raises(InvalidArgumentError):
            curve.apply_xp(1, 0, -1)

    def test_split_awards_match_single_award(self, curve):
        level, into = 1, 0
        for award in (120, 333, 47, 1000, 0, 2):
            step = curve.apply_xp(level, into, award)
            level, into = step.new_level, step.xp_into_level
        combined = curve.apply_xp(1, 0, 120 + 333 + 47 + 1000 + 0 + 2)
        assert (level, into) == (combined.new_level, combined.xp_into_level)

    def test_level_for_xp(self, curve):
        assert curve.level_for_xp(0) == 1
        assert curve.level_for_xp(299) == 1
        assert curve.level_for_xp(1500) == 3


class TestAdvance:
    def test_on_curve_matches_apply_xp(self, curve):
        # level 2 with 375 total XP sits 75 into level 2
        assert curve.advance(2, 375, 1200) == curve.apply_xp(2, 75, 1200)

    def test_override_deficit_is_filled_first(self, curve):
        # Level 3 starts at 1500 total XP; an override left only 1000
        result = curve.advance(3, 1000, 400)
        assert result.new_level == 3
        assert result.levels_gained == 0

        result = curve.advance(3, 1000, 500 + 2700)
        assert result.new_level == 4
        assert result.xp_into_level == 0

    def test_negative_award_rejected(self, curve):
        with pytest.raises(InvalidArgumentError):
            curve.advance(1, 0, -10)


class TestProgress:
    def test_on_curve(self, curve):
        assert curve.progress(2, 375) == (75, 1125)

    def test_fresh(self, curve):
        assert curve.progress(1, 0) == (0, 300)

    def test_below_band_reports_total_still_needed(self, curve):
        # Needs 4200 total for level 4
        assert curve.progress(3, 1000) == (0, 3200)


class TestLargeTotals:
    @pytest.mark.parametrize("base,exponent", [(300, 2), (500, 2), (1, 1), (7, 3), (2, 5)])
    def test_cumulative_matches_summed_thresholds(self, base, exponent):
        curve = LevelingCurve(base=base, exponent=exponent)
        running = 0
        for level in range(1, 80):
            assert curve.cumulative_xp(level) == running
            running += curve.next_level_threshold(level)

    def test_level_for_xp_on_boundaries(self, curve):
        for level in (2, 17, 500, 12345):
            start = curve.cumulative_xp(level)
            assert curve.level_for_xp(start) == level
            assert curve.level_for_xp(start - 1) == level - 1

    def test_huge_award_resolves_directly(self, curve):
        result = curve.apply_xp(1, 0, 10**24)
        assert curve.cumulative_xp(result.new_level) <= 10**24 < curve.cumulative_xp(result.new_level + 1)
        assert result.xp_into_level == 10**24 - curve.cumulative_xp(result.new_level)
        assert curve.progress(result.new_level, 10**24)[1] == curve.cumulative_xp(result.new_level + 1) - 10**24

    def test_negative_total_rejected(self, curve):
        with pytest.raises(InvalidArgumentError):
            curve.level_for_xp(-1)
