"""Uniform integer sampler built on the entropy source."""
import math
import random
from abc import ABC, abstractmethod

from randcore.errors import InvalidRange, RangeTooLarge
from randcore.logic.entropy import (
    SECURITY_POLICY,
    EntropySource,
    GenerationContext,
    SecurityPolicy,
    default_entropy_source,
    fallback_draw32,
)


UINT32_SPACE = 1 << 32
UINT53_SPACE = 1 << 53
MAX_SAFE_INTEGER = UINT53_SPACE - 1


def _as_int(value, name: str) -> int:
    """Coerce an integral, finite number to int or raise InvalidRange."""
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidRange(f"uniform_in_range: {name} must be finite, got {value}")
        if not value.is_integer():
            raise InvalidRange(f"uniform_in_range: {name} must be an integer, got {value}")
        return int(value)
    raise InvalidRange(f"uniform_in_range: {name} must be a number, got {type(value).__name__}")


class RNGBase(ABC):
    """
    Abstract sampler interface.

    Subclasses only supply draw32(); every other operation, and every
    sampler in the package, is derived from it through uniform_in_range().
    """

    @abstractmethod
    def draw32(self) -> int:
        """Return one unsigned 32-bit value."""

    def draw53(self) -> int:
        """Return a value in [0, 2^53): 21 high bits + 32 low bits."""
        hi = self.draw32() & 0x1F_FFFF
        lo = self.draw32()
        return hi * UINT32_SPACE + lo

    def uniform_in_range(self, low, high) -> int:
        """
        Return a uniformly distributed integer in inclusive [low, high].

        Reversed endpoints are swapped rather than rejected. Uses rejection
        sampling against draw32() for sizes up to 2^32 and against draw53()
        up to 2^53 - 1.

        Raises:
            InvalidRange: endpoints are not finite integers
            RangeTooLarge: size exceeds 2^53 - 1
        """
        low = _as_int(low, "min")
        high = _as_int(high, "max")
        if high < low:
            low, high = high, low

        size = high - low + 1
        if size <= UINT32_SPACE:
            limit = (UINT32_SPACE // size) * size
            while True:
                x = self.draw32()
                if x < limit:
                    return low + x % size

        if size > MAX_SAFE_INTEGER:
            raise RangeTooLarge(
                f"uniform_in_range: range size {size} exceeds 2^53 - 1"
            )
        limit = (UINT53_SPACE // size) * size
        while True:
            x = self.draw53()
            if x < limit:
                return low + x % size

    def random_open(self) -> float:
        """Return random float in the open interval (0, 1)."""
        return (self.draw32() + 1) / (UINT32_SPACE + 1)

    def random_bytes(self, n: int) -> bytes:
        """Return n random bytes assembled from draw32()."""
        out = bytearray()
        while len(out) < n:
            out += self.draw32().to_bytes(4, "little")
        return bytes(out[:n])


class ProductionRNG(RNGBase):
    """
    Production sampler bound to one generation call.

    Security-sensitive contexts use the mandatory entropy path under the
    SECURE policy; all other contexts use the optional path and fall back
    to a non-cryptographic generator when no CSPRNG exists.
    """

    def __init__(
        self,
        context: GenerationContext,
        entropy: EntropySource | None = None,
        policy: SecurityPolicy = SECURITY_POLICY,
    ):
        self.context = context
        self.entropy = entropy or default_entropy_source
        self.policy = policy

    def draw32(self) -> int:
        if self.policy == SecurityPolicy.SECURE and self.context.security_sensitive:
            return self.entropy.acquire().getrandbits(32)

        handle = self.entropy.acquire_optional()
        if handle is not None:
            return handle.getrandbits(32)
        return fallback_draw32()


class SeededRNG(RNGBase):
    """
    Test/Simulation sampler.

    Deterministic, fully controlled by seed. Never used for production
    password/PIN material.
    """

    def __init__(self, seed: int):
        self._rng = random.Random(seed)
        self.seed = seed

    def draw32(self) -> int:
        return self._rng.getrandbits(32)
