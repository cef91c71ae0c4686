import pytest

from adventurers_book.core.exceptions import InvalidArgumentError
from adventurers_book.progression import (
    LevelingCurve,
    ProficiencyState,
    compute_avatar_level,
    distribute_xp,
)

CURVE = LevelingCurve(base=300, exponent=2)


class TestDistributeXp:
    def test_targets_are_created_and_split_evenly(self):
        result = distribute_xp([], 750, ["swordsmanship", "leadership"], CURVE)

        assert result.created_skills == ["swordsmanship", "leadership"]
        assert result.per_skill_delta == {"swordsmanship": 375, "leadership": 375}
        assert result.states["swordsmanship"] == ProficiencyState("swordsmanship", level=2, experience_points=375)
        assert result.states["leadership"] == ProficiencyState("leadership", level=2, experience_points=375)
        assert result.leveled_skills == ["swordsmanship", "leadership"]

    def test_remainder_goes_to_first_target(self):
        result = distribute_xp([], 751, ["tracking", "archery"], CURVE)
        assert result.per_skill_delta == {"tracking": 376, "archery": 375}

        result = distribute_xp([], 10, ["a", "b", "c"], CURVE)
        assert result.per_skill_delta == {"a": 4, "b": 3, "c": 3}

    def test_existing_target_keeps_its_progress(self):
        current = [ProficiencyState("stealth", level=2, experience_points=350)]
        result = distribute_xp(current, 100, ["stealth"], CURVE)

        assert result.created_skills == []
        assert result.states["stealth"] == ProficiencyState("stealth", level=2, experience_points=450)
        assert result.leveled_skills == []

    def test_no_targets_splits_across_all_proficiencies(self):
        current = [
            ProficiencyState("swordsmanship"),
            ProficiencyState("leadership"),
            ProficiencyState("tracking"),
        ]
        result = distribute_xp(current, 900, None, CURVE)

        assert result.per_skill_delta == {"swordsmanship": 300, "leadership": 300, "tracking": 300}
        assert sorted(result.leveled_skills) == ["leadership", "swordsmanship", "tracking"]
        assert result.created_skills == []

    def test_empty_targets_same_as_none(self):
        current = [ProficiencyState("lore")]
        assert distribute_xp(current, 50, [], CURVE).per_skill_delta == {"lore": 50}

    def test_no_proficiencies_and_no_targets_distributes_nothing(self):
        result = distribute_xp([], 500, None, CURVE)
        assert result.per_skill_delta == {}
        assert result.states == {}
        assert result.leveled_skills == []

    def test_duplicate_targets_count_once(self):
        result = distribute_xp([], 600, ["lore", "lore", "healing"], CURVE)
        assert result.per_skill_delta == {"lore": 300, "healing": 300}

    def test_only_targets_receive_xp(self):
        current = [ProficiencyState("lore"), ProficiencyState("healing")]
        result = distribute_xp(current, 100, ["healing"], CURVE)
        assert set(result.states) == {"healing"}

    def test_negative_total_rejected(self):
        with pytest.raises(InvalidArgumentError):
            distribute_xp([], -1, ["lore"], CURVE)


class TestAvatarLevel:
    def test_no_proficiencies_is_level_one(self):
        assert compute_avatar_level([]) == 1

    @pytest.mark.parametrize("levels,expected", [
        ([1], 1),
        ([2, 2, 1], 1),
        ([3, 4], 3),
        ([5, 5, 5, 6], 5),
        ([10, 1], 5),
    ])
    def test_floor_of_mean(self, levels, expected):
        assert compute_avatar_level(levels) == expected

    def test_accepts_generators(self):
        assert compute_avatar_level(level for level in (4, 4)) == 4
