"""Lottery mode tests."""
from randcore.logic.generators.lottery import draw_pool, generate_lottery
from randcore.logic.rng import SeededRNG
from randcore.protocol import GeneratorParams, Pool


class TestDrawPool:
    """Tests for a single drum."""

    def test_missing_pool_is_empty(self):
        assert draw_pool(None, SeededRNG(seed=1)) == []

    def test_unique_and_sorted(self):
        rng = SeededRNG(seed=2)
        for _ in range(200):
            drawn = draw_pool(Pool(min=1, max=49, pick=6), rng)
            assert len(drawn) == 6
            assert len(set(drawn)) == 6
            assert drawn == sorted(drawn)
            assert all(1 <= n <= 49 for n in drawn)

    def test_pick_equal_to_size_takes_everything(self):
        drawn = draw_pool(Pool(min=1, max=5, pick=5), SeededRNG(seed=3))
        assert drawn == [1, 2, 3, 4, 5]

    def test_pick_above_size_repeats(self):
        drawn = draw_pool(Pool(min=1, max=3, pick=10), SeededRNG(seed=4))
        assert len(drawn) == 10
        assert set(drawn) <= {1, 2, 3}
        assert drawn == sorted(drawn)

    def test_zero_pick_is_empty(self):
        assert draw_pool(Pool(min=1, max=10, pick=0), SeededRNG(seed=5)) == []

    def test_reversed_bounds(self):
        drawn = draw_pool(Pool(min=10, max=1, pick=10), SeededRNG(seed=6))
        assert drawn == list(range(1, 11))


class TestGenerateLottery:
    """Two independent drums per call."""

    def test_main_and_bonus(self):
        """[1..10] pick 5 + [1..5] pick 1: five ascending distinct values and one bonus."""
        for seed in range(100):
            out = generate_lottery(
                GeneratorParams(
                    pool_a=Pool(min=1, max=10, pick=5),
                    pool_b=Pool(min=1, max=5, pick=1),
                ),
                SeededRNG(seed=seed),
            )
            assert len(out.values) == 5
            assert out.values == sorted(set(out.values))
            assert len(out.bonus_values) == 1
            assert 1 <= out.bonus_values[0] <= 5

    def test_no_pools(self):
        out = generate_lottery(GeneratorParams(), SeededRNG(seed=1))
        assert out.values == []
        assert out.bonus_values == []
