"""Entropy source and security classification of generation calls."""
import logging
import os
import random
import secrets
from dataclasses import dataclass
from enum import Enum

from randcore.errors import EntropyUnavailable
from randcore.protocol import GeneratorMode


logger = logging.getLogger(__name__)


class SecurityPolicy(str, Enum):
    """
    Process-wide entropy policy.

    SECURE: CSPRNG mandatory for security-sensitive modes, absence is fatal.
    BEST_EFFORT: silent fallback everywhere (never selected here).
    """

    SECURE = "SECURE"
    BEST_EFFORT = "BEST_EFFORT"


# Fixed at import time; not configurable through settings.
SECURITY_POLICY = SecurityPolicy.SECURE

# Modes whose output is secret material (passwords, PINs).
SECURITY_SENSITIVE_MODES = frozenset({GeneratorMode.PASSWORD, GeneratorMode.DIGIT})


@dataclass(frozen=True)
class GenerationContext:
    """
    Mode of the top-level generate() call in flight.

    Created once per call and passed to the sampler that serves it, so
    concurrent calls never observe each other's mode.
    """

    mode: GeneratorMode

    @property
    def security_sensitive(self) -> bool:
        return self.mode in SECURITY_SENSITIVE_MODES


def _probe_system_handle() -> random.SystemRandom | None:
    """Return an os.urandom-backed handle, or None if the platform has none."""
    try:
        os.urandom(1)
    except (NotImplementedError, OSError):
        return None
    return secrets.SystemRandom()


_UNSET = object()


class EntropySource:
    """
    Wraps the platform CSPRNG.

    acquire() is the mandatory path and raises EntropyUnavailable;
    acquire_optional() never fails and returns None when there is no CSPRNG.
    """

    def __init__(self, handle=_UNSET):
        self._handle = _probe_system_handle() if handle is _UNSET else handle

    @classmethod
    def unavailable(cls) -> "EntropySource":
        """Source for a platform without a CSPRNG."""
        return cls(handle=None)

    @property
    def available(self) -> bool:
        return self._handle is not None

    def acquire(self) -> random.SystemRandom:
        if self._handle is None:
            raise EntropyUnavailable(
                "Secure random number generator not available on this platform."
            )
        return self._handle

    def acquire_optional(self) -> random.SystemRandom | None:
        return self._handle


# Non-cryptographic generator for the reduced-guarantee path.
_fallback_random = random.Random()
_fallback_warned = False


def fallback_draw32() -> int:
    """Draw 32 bits from the non-cryptographic fallback generator."""
    global _fallback_warned
    if not _fallback_warned:
        _fallback_warned = True
        logger.warning(
            "CSPRNG unavailable; non-sensitive modes fall back to a "
            "non-cryptographic generator"
        )
    return _fallback_random.getrandbits(32)


# Shared default source; the handle is stateless and safe across threads.
default_entropy_source = EntropySource()
