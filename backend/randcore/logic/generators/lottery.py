"""Lottery mode: two independent drums drawn per call."""
from randcore.logic.arrays import clamp_int, range_size, round_half_up, safe_finite_number
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.logic.samplers import unique_indices
from randcore.protocol import GeneratorParams, Pool


MAX_PICK = 1_000


def draw_pool(pool: Pool | None, rng: RNGBase) -> list[int]:
    """
    Draw one drum, sorted ascending.

    Unique when pick fits the drum, with replacement otherwise.
    """
    if pool is None:
        return []
    low = safe_finite_number(pool.min, 1)
    high = safe_finite_number(pool.max, 1)
    pick = clamp_int(pool.pick, 0, MAX_PICK, 0)
    size = range_size(low, high, 1)
    if size <= 0 or pick <= 0:
        return []

    if pick <= size:
        indices = unique_indices(rng, size, pick)
    else:
        indices = [rng.uniform_in_range(0, size - 1) for _ in range(pick)]
    base = min(low, high)
    return sorted(round_half_up(base + idx) for idx in indices)


def generate_lottery(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    return GeneratorOutput(
        values=draw_pool(params.pool_a, rng),
        bonus_values=draw_pool(params.pool_b, rng),
    )
