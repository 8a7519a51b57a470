"""Config hash computation.

Shared by:
- telemetry events (generation_served / generation_failed)
- scripts/distribution_audit.py (CSV audit)

The hash MUST be computed identically in both locations.
"""
import hashlib
import json

from randcore.config import settings


def get_config_hash() -> str:
    """
    Generate hash of the current limits snapshot.

    Returns 16-char hex hash. Two runs with the same hash clamp every
    parameter identically.
    """
    config_snapshot = {
        "max_count": settings.max_count,
        "list_max_count": settings.list_max_count,
        "ticket_max_draw": settings.ticket_max_draw,
        "ticket_max_pool": settings.ticket_max_pool,
        "password_max_length": settings.password_max_length,
        "password_max_batch": settings.password_max_batch,
        "dice_max_rolls": settings.dice_max_rolls,
        "dice_max_sides": settings.dice_max_sides,
        "prime_max_limit": settings.prime_max_limit,
    }
    canonical = json.dumps(config_snapshot, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()[:16]
