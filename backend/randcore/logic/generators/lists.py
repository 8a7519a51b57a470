"""List pick and shuffle modes."""
import logging

from randcore.config import settings
from randcore.logic.arrays import clamp_int, normalize_items_and_weights
from randcore.logic.list_text import parse_items_text
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.logic.samplers import (
    shuffle_in_place,
    unique_indices,
    weighted_pick,
    weighted_without_replacement,
)
from randcore.protocol import GeneratorParams


logger = logging.getLogger(__name__)

MAX_GROUP_SIZE = 1_000


def collect_items(
    params: GeneratorParams, with_weights: bool = True
) -> tuple[list[str], list[float] | None, list[str]]:
    """
    Resolve items and weights from items, or from items_text when items is empty.

    Returns (items, weights, warnings).
    """
    weights = params.weights if with_weights else None
    if params.items:
        items, cleaned_weights = normalize_items_and_weights(params.items, weights)
        return items, cleaned_weights, []

    if params.items_text:
        parse_weights = with_weights and bool(params.parse_weights) and weights is None
        parsed = parse_items_text(params.items_text, parse_weights=parse_weights)
        items, cleaned_weights = normalize_items_and_weights(
            parsed.items, parsed.weights if parse_weights else weights
        )
        return items, cleaned_weights, parsed.warnings

    return [], None, []


def _unique_pick(
    rng: RNGBase, items: list[str], weights: list[float] | None, k: int, warnings: list[str]
) -> list[int]:
    if weights is None:
        return unique_indices(rng, len(items), k)

    indices = weighted_without_replacement(rng, weights, k)
    if len(indices) < k:
        warnings.append("Some items had zero/invalid weight; filling the rest uniformly.")
        selected = set(indices)
        rest = [i for i in range(len(items)) if i not in selected]
        need = min(k - len(indices), len(rest))
        if need > 0:
            indices += [rest[i] for i in unique_indices(rng, len(rest), need)]
    return indices


def generate_list(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """
    Pick count items, optionally weighted and/or unique.

    Unique picks are shuffled so the output does not reveal selection order.
    """
    items, weights, warnings = collect_items(params)
    out = GeneratorOutput(warnings=warnings)
    if not items:
        out.meta = {}
        return out

    count = clamp_int(params.count, 1, settings.list_max_count, 1)

    if params.unique:
        k = min(count, len(items))
        if count > len(items):
            out.warnings.append(f"Only {len(items)} unique items available; returning {k}.")
        indices = shuffle_in_place(rng, _unique_pick(rng, items, weights, k, out.warnings))
        out.values = [items[i] for i in indices]
        out.meta = {"selected_indices": indices}
        return out

    indices = [
        weighted_pick(rng, weights) if weights else rng.uniform_in_range(0, len(items) - 1)
        for _ in range(count)
    ]
    out.values = [items[i] for i in indices]
    out.meta = {
        "selected_indices": indices,
        "selected_index": indices[0] if len(indices) == 1 else None,
    }
    return out


def generate_shuffle(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    items, _, warnings = collect_items(params, with_weights=False)
    if not items:
        return GeneratorOutput(warnings=warnings, meta={})

    group_size = clamp_int(params.group_size, 0, MAX_GROUP_SIZE, 0)
    logger.debug("Shuffling %d items", len(items))
    return GeneratorOutput(
        values=shuffle_in_place(rng, list(items)),
        warnings=warnings,
        meta={"group_size": group_size or None},
    )
