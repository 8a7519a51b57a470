"""Uniform integer sampler tests."""
import math
from collections import Counter

import pytest

from randcore.errors import InvalidRange, RangeTooLarge
from randcore.logic.entropy import GenerationContext
from randcore.logic.rng import (
    MAX_SAFE_INTEGER,
    UINT32_SPACE,
    ProductionRNG,
    RNGBase,
    SeededRNG,
)
from randcore.protocol import GeneratorMode


class ScriptedRNG(RNGBase):
    """RNG replaying a fixed list of 32-bit draws."""

    def __init__(self, draws: list[int]):
        self.draws = list(draws)
        self.calls = 0

    def draw32(self) -> int:
        self.calls += 1
        return self.draws.pop(0)


class TestUniformInRange:
    """Tests for uniform_in_range."""

    def test_degenerate_range_returns_low(self):
        """min == max always returns that value."""
        rng = SeededRNG(seed=1)
        assert all(rng.uniform_in_range(7, 7) == 7 for _ in range(100))

    def test_reversed_endpoints_are_swapped(self):
        """(10, 1) samples the same interval as (1, 10)."""
        rng = SeededRNG(seed=2)
        values = {rng.uniform_in_range(10, 1) for _ in range(2000)}
        assert values == set(range(1, 11))

    def test_negative_range(self):
        rng = SeededRNG(seed=3)
        values = {rng.uniform_in_range(-3, 3) for _ in range(2000)}
        assert values == set(range(-3, 4))

    def test_integral_floats_accepted(self):
        rng = SeededRNG(seed=4)
        assert 1 <= rng.uniform_in_range(1.0, 3.0) <= 3

    @pytest.mark.parametrize("low,high", [
        (0.5, 10),
        (1, 2.25),
        (math.nan, 10),
        (1, math.inf),
        (-math.inf, 0),
        ("1", 10),
        (None, 10),
    ])
    def test_invalid_endpoints_raise(self, low, high):
        """Non-integral, non-finite or non-numeric endpoints raise InvalidRange."""
        with pytest.raises(InvalidRange):
            SeededRNG(seed=5).uniform_in_range(low, high)

    def test_invalid_range_is_value_error(self):
        with pytest.raises(ValueError):
            SeededRNG(seed=5).uniform_in_range(0.5, 1)

    def test_range_too_large_raises(self):
        """A size above 2^53 - 1 cannot be sampled."""
        with pytest.raises(RangeTooLarge):
            SeededRNG(seed=6).uniform_in_range(0, MAX_SAFE_INTEGER)

    def test_largest_safe_range_succeeds(self):
        """Size exactly 2^53 - 1 goes through the 53-bit path."""
        rng = SeededRNG(seed=7)
        for _ in range(100):
            v = rng.uniform_in_range(0, MAX_SAFE_INTEGER - 1)
            assert 0 <= v < MAX_SAFE_INTEGER

    def test_full_32_bit_range_uses_one_draw(self):
        """size == 2^32 accepts every draw32 value."""
        rng = ScriptedRNG([UINT32_SPACE - 1])
        assert rng.uniform_in_range(0, UINT32_SPACE - 1) == UINT32_SPACE - 1
        assert rng.calls == 1

    def test_rejects_draws_above_limit(self):
        """Draws at or above floor(2^32 / size) * size are rejected."""
        # size 3: limit = 4294967295, so 4294967295 is rejected
        rng = ScriptedRNG([UINT32_SPACE - 1, 5])
        assert rng.uniform_in_range(0, 2) == 5 % 3
        assert rng.calls == 2

    def test_53_bit_path_combines_two_draws(self):
        """Above 2^32 the value is built from 21 high bits and 32 low bits."""
        size = UINT32_SPACE + 1
        rng = ScriptedRNG([0, 7])
        assert rng.uniform_in_range(0, size - 1) == 7
        assert rng.calls == 2

    def test_53_bit_path_covers_values_above_32_bits(self):
        rng = SeededRNG(seed=8)
        high = 1 << 40
        values = [rng.uniform_in_range(0, high) for _ in range(200)]
        assert max(values) > UINT32_SPACE

    @pytest.mark.statistical
    def test_size_five_frequencies_within_bounds(self):
        """Over 10,000 production draws every value of [1, 5] lands in 15%..25%."""
        rng = ProductionRNG(GenerationContext(mode=GeneratorMode.RANGE))
        draws = 10_000
        counts = Counter(rng.uniform_in_range(1, 5) for _ in range(draws))
        assert set(counts) == {1, 2, 3, 4, 5}
        for value, n in counts.items():
            assert 0.15 <= n / draws <= 0.25, f"value {value} frequency {n / draws}"


class TestDerivedDraws:
    """Tests for the helpers built on draw32."""

    def test_only_range_based_integer_api(self):
        """Integer draws all go through uniform_in_range."""
        assert not hasattr(RNGBase, "randint")
        assert not hasattr(RNGBase, "random")

    def test_random_open_excludes_endpoints(self):
        assert 0 < ScriptedRNG([0]).random_open() < 1
        assert 0 < ScriptedRNG([UINT32_SPACE - 1]).random_open() < 1

    def test_random_bytes_length(self):
        rng = SeededRNG(seed=10)
        for n in (0, 1, 3, 4, 5, 33):
            assert len(rng.random_bytes(n)) == n

    def test_seeded_rng_is_reproducible(self):
        a = SeededRNG(seed=12)
        b = SeededRNG(seed=12)
        assert [a.uniform_in_range(1, 1000) for _ in range(50)] == [
            b.uniform_in_range(1, 1000) for _ in range(50)
        ]
