"""Unique, weighted and shuffle samplers built on uniform_in_range()."""
import heapq
import math
from typing import MutableSequence, Sequence, TypeVar

from randcore.logic.rng import RNGBase, UINT32_SPACE


T = TypeVar("T")


def _usable(w) -> bool:
    return isinstance(w, (int, float)) and math.isfinite(w) and w > 0


def unique_indices(rng: RNGBase, n: int, k: int) -> list[int]:
    """
    Draw k distinct indices from [0, n) with Floyd's algorithm.

    O(k) time and memory regardless of n. No ordering guarantee.
    """
    if not 0 <= k <= n:
        raise ValueError(f"unique_indices: need 0 <= k <= n, got n={n}, k={k}")
    chosen: set[int] = set()
    order: list[int] = []
    for j in range(n - k, n):
        t = rng.uniform_in_range(0, j)
        pick = j if t in chosen else t
        chosen.add(pick)
        order.append(pick)
    return order


def weighted_pick(rng: RNGBase, weights: Sequence[float]) -> int:
    """
    Roulette selection: index chosen with probability proportional to weight.

    Non-finite and non-positive weights contribute nothing. An all-zero
    total falls back to a uniform pick. Returns -1 for an empty sequence.
    """
    if not weights:
        return -1
    total = sum(w for w in weights if _usable(w))
    if total <= 0:
        return rng.uniform_in_range(0, len(weights) - 1)

    r = rng.draw32() / UINT32_SPACE * total
    acc = 0.0
    for i, w in enumerate(weights):
        if _usable(w):
            acc += w
        if r < acc:
            return i
    # Float accumulation may leave r just above the final prefix sum.
    return len(weights) - 1


def weighted_without_replacement(
    rng: RNGBase, weights: Sequence[float], k: int
) -> list[int]:
    """
    Efraimidis-Spirakis sampling of up to k distinct indices.

    Each usable item gets key = -ln(U) / w with U in (0, 1); the k smallest
    keys win. Items with non-positive or non-finite weight never compete.
    Fewer than k candidates returns all of them; the caller reports the
    shortfall.
    """
    candidates: list[tuple[float, int, int]] = []
    for i, w in enumerate(weights):
        if not _usable(w):
            continue
        key = -math.log(rng.random_open()) / w
        # subnormal weights overflow the key to inf; ties resolve at random
        candidates.append((key, rng.draw32(), i))

    if len(candidates) <= k:
        return [i for _, _, i in candidates]
    return [i for _, _, i in heapq.nsmallest(k, candidates)]


def shuffle_in_place(rng: RNGBase, items: MutableSequence[T]) -> MutableSequence[T]:
    """Fisher-Yates shuffle from the last index down to 1."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.uniform_in_range(0, i)
        items[i], items[j] = items[j], items[i]
    return items
