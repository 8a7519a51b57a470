"""Numeric guard rails and list normalization applied before sampling."""
import math
from typing import Any, Iterable, Sequence


def is_finite_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def safe_finite_number(value: Any, fallback: float) -> float:
    """Return value if it is a finite number, else fallback."""
    return value if is_finite_number(value) else fallback


def clamp_int(value: Any, low: int, high: int, fallback: int) -> int:
    """
    Floor value and clamp it into [low, high].

    Non-numeric or non-finite values are replaced by fallback first.
    """
    n = math.floor(value) if is_finite_number(value) else fallback
    return min(high, max(low, n))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_to_precision(value: float, precision: int) -> int | float:
    """
    Round to precision decimal places.

    precision <= 0 rounds half up to an int.
    """
    if not math.isfinite(value):
        return value
    if precision <= 0:
        return round_half_up(value)
    return float(f"{value:.{precision}f}")


def range_size(low: float, high: float, step: float) -> int:
    """Number of stepped values in [low, high], or 0 if invalid."""
    if step <= 0:
        return 0
    if high < low:
        low, high = high, low
    span = (high - low) / step
    if not math.isfinite(span):
        return 0
    size = math.floor(span) + 1
    return size if size > 0 else 0


def value_at_index(low: float, step: float, index: int) -> float:
    return low + index * step


def remove_chars(source: str, remove: str | None) -> str:
    """Remove every character of remove from source."""
    if not remove:
        return source
    drop = set(remove)
    return "".join(c for c in source if c not in drop)


def normalize_items_and_weights(
    items: Iterable[Any],
    weights: Sequence[Any] | None = None,
) -> tuple[list[str], list[float] | None]:
    """
    Trim items and pair them with usable weights.

    - empty items are dropped together with their weight
    - a missing or non-finite weight defaults to 1
    - non-positive weights become 0
    - if no weight ends up strictly positive, weights are discarded and
      callers fall back to uniform selection
    """
    cleaned: list[str] = []
    cleaned_weights: list[float] | None = [] if weights is not None else None

    for i, raw in enumerate(items):
        s = "" if raw is None else str(raw).strip()
        if not s:
            continue
        cleaned.append(s)
        if cleaned_weights is not None:
            w = weights[i] if i < len(weights) else None
            w = w if is_finite_number(w) else 1
            cleaned_weights.append(w if w > 0 else 0)

    if cleaned_weights is not None and not any(w > 0 for w in cleaned_weights):
        cleaned_weights = None
    return cleaned, cleaned_weights


def display_number(value: Any) -> Any:
    """Integral floats as int so they render without a trailing ".0"."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
