"""Ticket draw: draw-without-replacement across caller-owned state."""
from randcore.config import settings
from randcore.logic.arrays import (
    clamp_int,
    normalize_items_and_weights,
    range_size,
    round_half_up,
    safe_finite_number,
)
from randcore.logic.generators.lists import collect_items
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.logic.samplers import shuffle_in_place, unique_indices
from randcore.protocol import GeneratorParams


def full_pool(params: GeneratorParams, warnings: list[str]) -> list[str]:
    """Every ticket of a fresh draw: the item list or the numeric range."""
    if params.ticket_source == "list":
        items, _, parse_warnings = collect_items(params, with_weights=False)
        warnings.extend(parse_warnings)
        return items

    low = safe_finite_number(params.min, 1)
    high = safe_finite_number(params.max, 100)
    if high < low:
        low, high = high, low
    size = range_size(low, high, 1)
    if size > settings.ticket_max_pool:
        warnings.append(
            f"Ticket range truncated to the first {settings.ticket_max_pool} tickets."
        )
        size = settings.ticket_max_pool
    return [str(round_half_up(low + i)) for i in range(size)]


def generate_ticket(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """
    Draw tickets from the remaining pool.

    The remaining pool is never stored here: it arrives in
    params.ticket_remaining (empty means a full pool) and leaves in
    meta["ticket_remaining"].
    """
    draw = clamp_int(
        params.count if params.count is not None else params.pick,
        1,
        settings.ticket_max_draw,
        1,
    )
    out = GeneratorOutput()

    remaining, _ = normalize_items_and_weights(params.ticket_remaining or [])
    if not remaining:
        remaining = full_pool(params, out.warnings)
    if not remaining:
        out.meta = {}
        return out

    k = min(draw, len(remaining))
    if draw > len(remaining):
        out.warnings.append(f"Only {len(remaining)} tickets left; drawing {k}.")

    indices = unique_indices(rng, len(remaining), k)
    drawn = set(indices)
    next_remaining = [t for i, t in enumerate(remaining) if i not in drawn]
    if not next_remaining:
        out.warnings.append("Ticket pool exhausted; the next draw starts from a full pool.")

    out.values = shuffle_in_place(rng, [remaining[i] for i in indices])
    out.meta = {
        "remaining_count": len(next_remaining),
        "ticket_remaining": next_remaining,
    }
    return out
