"""Unit tests for the deterministic roll source."""

import pytest

from app.modules.dice.roller import RollSource, Skew, SkewedRoll, parse_skew


class TestDeterminism:
    def test_same_seed_same_sequence(self):
        a, b = RollSource(7), RollSource(7)
        for sides in (2, 6, 10, 20, 100):
            assert a.roll_die(sides) == b.roll_die(sides)
        assert a.roll_dice(5, 10) == b.roll_dice(5, 10)
        assert a.pick_uniform(9) == b.pick_uniform(9)
        assert a.pick_weighted([1, 2, 3]) == b.pick_weighted([1, 2, 3])
        assert a.roll_fate_dice(4) == b.roll_fate_dice(4)

    def test_string_seed_is_deterministic(self):
        assert RollSource("abc:1").roll_dice(10, 6) == RollSource("abc:1").roll_dice(10, 6)

    def test_different_seeds_diverge(self):
        sequences = {tuple(RollSource(seed).roll_dice(10, 100)) for seed in range(20)}
        assert len(sequences) > 1


class TestPrimitives:
    def test_roll_die_in_range(self, source: RollSource):
        for _ in range(500):
            assert 1 <= source.roll_die(6) <= 6

    def test_one_sided_die(self, source: RollSource):
        assert source.roll_die(1) == 1

    def test_roll_dice_keeps_call_order(self):
        expected = RollSource(3)
        singles = [expected.roll_die(10) for _ in range(6)]
        assert RollSource(3).roll_dice(6, 10) == singles

    def test_roll_zero_dice(self, source: RollSource):
        assert source.roll_dice(0, 6) == []

    def test_pick_uniform_in_range(self, source: RollSource):
        picks = {source.pick_uniform(4) for _ in range(500)}
        assert picks == {0, 1, 2, 3}

    def test_fate_faces(self, source: RollSource):
        faces = set(source.roll_fate_dice(300))
        assert faces == {-1, 0, 1}

    def test_pick_weighted_skips_zero_weights(self, source: RollSource):
        for _ in range(300):
            assert source.pick_weighted([0, 5, 0, 1]) in (1, 3)

    def test_pick_weighted_high_index_frequency(self):
        trials = 4000
        hits = sum(1 for seed in range(trials) if RollSource(seed).pick_weighted([1, 2, 3, 4]) == 3)
        assert abs(hits / trials - 0.4) < 0.04


class TestInvalidArguments:
    @pytest.mark.parametrize("sides", [0, -1])
    def test_roll_die_rejects_non_positive_sides(self, source: RollSource, sides: int):
        with pytest.raises(ValueError):
            source.roll_die(sides)

    def test_roll_dice_rejects_negative_count(self, source: RollSource):
        with pytest.raises(ValueError):
            source.roll_dice(-1, 6)

    def test_roll_dice_rejects_zero_sides(self, source: RollSource):
        with pytest.raises(ValueError):
            source.roll_dice(2, 0)

    def test_pick_uniform_rejects_empty(self, source: RollSource):
        with pytest.raises(ValueError):
            source.pick_uniform(0)

    @pytest.mark.parametrize("weights", [[], [0, 0], [1, -1]])
    def test_pick_weighted_rejects_bad_weights(self, source: RollSource, weights: list[int]):
        with pytest.raises(ValueError):
            source.pick_weighted(weights)

    def test_fate_dice_rejects_negative_count(self, source: RollSource):
        with pytest.raises(ValueError):
            source.roll_fate_dice(-2)


class TestSkew:
    def test_advantage_keeps_higher(self):
        for seed in range(50):
            roll = RollSource(seed).roll_with_advantage(10)
            assert isinstance(roll, SkewedRoll)
            assert roll.chosen == max(roll.first, roll.second)

    def test_disadvantage_keeps_lower(self):
        for seed in range(50):
            roll = RollSource(seed).roll_with_disadvantage(10)
            assert roll.chosen == min(roll.first, roll.second)

    def test_roll_skewed_reports_all_faces(self):
        chosen, faces = RollSource(5).roll_skewed(10, Skew.ADVANTAGE)
        assert len(faces) == 2
        assert chosen == max(faces)

        chosen, faces = RollSource(5).roll_skewed(10)
        assert faces == [chosen]

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("+", Skew.ADVANTAGE),
            ("@+", Skew.ADVANTAGE),
            ("advantage", Skew.ADVANTAGE),
            ("-", Skew.DISADVANTAGE),
            ("@-", Skew.DISADVANTAGE),
            ("none", Skew.NONE),
            (Skew.DISADVANTAGE, Skew.DISADVANTAGE),
        ],
    )
    def test_parse_skew(self, value, expected):
        assert parse_skew(value) is expected

    def test_parse_skew_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown skew"):
            parse_skew("sideways")

    def test_symbols(self):
        assert Skew.NONE.symbol == ""
        assert Skew.ADVANTAGE.symbol == "@+"
        assert Skew.DISADVANTAGE.symbol == "@-"
