"""Parse multi-line item text into items and optional weights."""
import math
import re
from dataclasses import dataclass, field

from randcore.config import settings


# Accepts "Name | 3", "Name,3", "Name\t3"
_WEIGHT_SPLIT = re.compile(r"\s*[|,\t]\s*")


@dataclass
class ParsedList:
    items: list[str] = field(default_factory=list)
    weights: list[float] | None = None
    warnings: list[str] = field(default_factory=list)


def _parse_weight(raw: str) -> float | None:
    try:
        n = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(n) or n <= 0:
        return None
    return n


def parse_items_text(
    text: str | None,
    parse_weights: bool = False,
    max_items: int | None = None,
) -> ParsedList:
    """
    Split text into one item per non-empty line.

    Lines starting with '#' are comments. With parse_weights, a trailing
    "| w", ", w" or tab-separated positive number becomes the weight;
    anything else gets weight 1.
    """
    limit = max(1, max_items if max_items is not None else settings.list_text_max_items)
    result = ParsedList(weights=[] if parse_weights else None)

    for line in (text or "").replace("\r\n", "\n").split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        if len(result.items) >= limit:
            result.warnings.append(f"List truncated to {limit} items.")
            break

        if not parse_weights:
            result.items.append(trimmed)
        else:
            parts = _WEIGHT_SPLIT.split(trimmed)
            weight = _parse_weight(parts[-1]) if len(parts) >= 2 else None
            name = " ".join(parts[:-1]).strip() if len(parts) >= 2 else ""
            if name and weight is not None:
                result.items.append(name)
                result.weights.append(weight)
            else:
                result.items.append(trimmed)
                result.weights.append(1)

    return result
