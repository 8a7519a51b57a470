"""Range mode: stepped numeric values over [min, max]."""
from randcore.config import settings
from randcore.logic.arrays import (
    clamp_int,
    range_size,
    round_to_precision,
    safe_finite_number,
    value_at_index,
)
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.logic.samplers import unique_indices
from randcore.protocol import GeneratorParams


# Defaults
DEFAULT_MIN = 1
DEFAULT_MAX = 100
MAX_PRECISION = 12


def generate_range(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """
    Draw count values from the stepped range.

    unique with count > capacity degrades to with-replacement sampling
    and reports it as a warning.
    """
    low = safe_finite_number(params.min, DEFAULT_MIN)
    high = safe_finite_number(params.max, DEFAULT_MAX)
    step = safe_finite_number(params.step, 1)
    precision = clamp_int(params.precision, 0, MAX_PRECISION, 0)
    count = clamp_int(params.count, 1, settings.max_count, 1)
    unique = bool(params.unique)

    if step <= 0:
        step = 1
    if high < low:
        low, high = high, low

    size = range_size(low, high, step)
    out = GeneratorOutput()
    if size <= 0:
        return out

    def at(idx: int):
        return round_to_precision(value_at_index(low, step, idx), precision)

    if unique and count > 1 and count <= size:
        out.values = [at(idx) for idx in unique_indices(rng, size, count)]
    else:
        if unique and count > 1:
            out.warnings.append(
                f"Unique is impossible: requested {count} but capacity is {size}."
            )
        out.values = [at(rng.uniform_in_range(0, size - 1)) for _ in range(count)]

    if params.sort == "asc":
        out.values.sort()
    elif params.sort == "desc":
        out.values.sort(reverse=True)
    return out
