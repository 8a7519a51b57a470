"""Math modes: fractions, percentages, primes and Roman numerals."""
import math
from functools import lru_cache

from randcore.config import settings
from randcore.logic.arrays import clamp_int
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.protocol import GeneratorParams


MAX_FRACTION_DENOMINATOR = 10_000
MAX_ROMAN = 3_999

ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def generate_fraction(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 1)
    max_denom = clamp_int(params.fraction_max, 2, MAX_FRACTION_DENOMINATOR, 100)
    simplify = params.fraction_simplified is not False

    values = []
    for _ in range(count):
        num = rng.uniform_in_range(1, max_denom - 1)
        den = rng.uniform_in_range(2, max_denom)
        if simplify:
            g = math.gcd(num, den)
            num, den = num // g, den // g
        values.append(str(num) if den == 1 else f"{num}/{den}")
    return GeneratorOutput(values=values, meta={"max_denom": max_denom, "simplify": simplify})


def generate_percentage(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """Percentages in [0, 100] with 0 to 2 decimals."""
    count = clamp_int(params.count, 1, settings.max_count, 1)
    decimals = clamp_int(params.percentage_decimals, 0, 2, 0)

    values = []
    for _ in range(count):
        if decimals:
            value = rng.uniform_in_range(0, 10_000) / 100
        else:
            value = rng.uniform_in_range(0, 100)
        values.append(f"{value:.{decimals}f}%")
    return GeneratorOutput(values=values, meta={"decimals": decimals})


@lru_cache(maxsize=8)
def primes_up_to(limit: int) -> tuple[int, ...]:
    """Sieve of Eratosthenes over [2, limit]."""
    if limit < 2:
        return ()
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return tuple(i for i, is_prime in enumerate(sieve) if is_prime)


def generate_prime(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    max_prime = clamp_int(params.prime_max, 2, settings.prime_max_limit, 1000)

    primes = primes_up_to(max_prime)
    values = [str(primes[rng.uniform_in_range(0, len(primes) - 1)]) for _ in range(count)]
    return GeneratorOutput(
        values=values, meta={"max_prime": max_prime, "available_primes": len(primes)}
    )


def to_roman(num: int) -> str:
    parts = []
    for value, numeral in ROMAN_NUMERALS:
        n, num = divmod(num, value)
        parts.append(numeral * n)
    return "".join(parts)


def generate_roman(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    max_value = clamp_int(params.roman_max, 1, MAX_ROMAN, 100)

    values = [to_roman(rng.uniform_in_range(1, max_value)) for _ in range(count)]
    return GeneratorOutput(values=values, meta={"max_value": max_value})
