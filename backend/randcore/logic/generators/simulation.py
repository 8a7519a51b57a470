"""Simulated data: dates, temperatures, prices, phone numbers, emails, usernames."""
import string
import time
from datetime import datetime, timedelta, timezone

from randcore.config import settings
from randcore.logic.arrays import (
    clamp_int,
    display_number,
    round_to_precision,
    safe_finite_number,
)
from randcore.logic.generators.text import pick_from
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.protocol import GeneratorParams


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MS_PER_YEAR = 31_536_000_000
# Representable by datetime: 0001-01-01 .. 9999-12-31
MIN_DATE_MS = -62_135_596_800_000
MAX_DATE_MS = 253_402_300_799_999

FRACTION_STEPS = 1_000
CURRENCY_STEPS = 1_000_000

TEMP_SUFFIX = {"celsius": "C", "fahrenheit": "F", "kelvin": "K"}

ADJECTIVES = (
    "happy", "lucky", "swift", "bright", "clever", "brave", "calm", "eager",
    "gentle", "kind", "proud", "wise", "bold", "cool", "dear", "fair", "glad",
    "keen", "merry", "nice",
)

NOUNS = (
    "fox", "bear", "hawk", "wolf", "lion", "tiger", "eagle", "shark", "owl",
    "deer", "cat", "dog", "bird", "fish", "star", "moon", "sun", "sky", "wave",
    "wind",
)

USERNAME_WORDS = (
    "shadow", "storm", "blaze", "crystal", "phoenix", "dragon", "wolf", "raven",
    "hunter", "warrior", "ninja", "legend", "master", "chief", "king", "queen",
    "star", "moon", "sky", "night",
)


def _parse_date_ms(raw: str | None, field: str, warnings: list[str]) -> int | None:
    """ISO 8601 date/datetime to epoch ms (naive values are UTC)."""
    if not raw:
        return None
    try:
        dt = datetime.fromisoformat(raw.strip())
    except ValueError:
        warnings.append(f"Ignored invalid {field}: {raw!r}.")
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return round(dt.timestamp() * 1000)


def _ms_to_datetime(ms: int) -> datetime:
    return EPOCH + timedelta(milliseconds=ms)


def _iso(ms: int) -> str:
    return _ms_to_datetime(ms).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_date(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """
    Calendar dates drawn uniformly at millisecond resolution.

    The default window is now +/- 365 days; dates are rendered in UTC.
    """
    count = clamp_int(params.count, 1, settings.max_count, 1)
    fmt = params.date_format or "iso"
    out = GeneratorOutput()

    now = int(time.time() * 1000)
    start = _parse_date_ms(params.date_start, "date_start", out.warnings)
    end = _parse_date_ms(params.date_end, "date_end", out.warnings)
    start = now - MS_PER_YEAR if start is None else start
    end = now + MS_PER_YEAR if end is None else end
    start = min(MAX_DATE_MS, max(MIN_DATE_MS, start))
    end = min(MAX_DATE_MS, max(MIN_DATE_MS, end))
    low, high = min(start, end), max(start, end)

    for _ in range(count):
        d = _ms_to_datetime(rng.uniform_in_range(low, high))
        if fmt == "us":
            out.values.append(f"{d.month:02d}/{d.day:02d}/{d.year}")
        elif fmt == "eu":
            out.values.append(f"{d.day:02d}/{d.month:02d}/{d.year}")
        else:
            out.values.append(f"{d.year:04d}-{d.month:02d}-{d.day:02d}")

    out.meta = {"format": fmt, "range": {"start": _iso(low), "end": _iso(high)}}
    return out


def generate_temperature(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    unit = params.temp_unit or "celsius"
    a = safe_finite_number(params.temp_min, -50)
    b = safe_finite_number(params.temp_max, 50)
    low, high = min(a, b), max(a, b)
    decimals = clamp_int(params.temp_decimals, 0, 2, 1)

    values = []
    for _ in range(count):
        raw = low + (high - low) * (rng.uniform_in_range(0, FRACTION_STEPS) / FRACTION_STEPS)
        value = display_number(round_to_precision(raw, decimals))
        values.append(f"{value}{TEMP_SUFFIX[unit]}")
    return GeneratorOutput(
        values=values, meta={"unit": unit, "range": [low, high], "decimals": decimals}
    )


def generate_currency(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    symbol = params.currency_symbol if params.currency_symbol is not None else "$"
    decimals = clamp_int(params.currency_decimals, 0, 4, 2)
    a = safe_finite_number(params.currency_min, 0)
    b = safe_finite_number(params.currency_max, 1000)
    low, high = min(a, b), max(a, b)

    values = []
    for _ in range(count):
        raw = low + (high - low) * (rng.uniform_in_range(0, CURRENCY_STEPS) / CURRENCY_STEPS)
        values.append(f"{symbol}{raw:.{decimals}f}")
    return GeneratorOutput(
        values=values, meta={"symbol": symbol, "range": [low, high], "decimals": decimals}
    )


def _phone_us(rng: RNGBase) -> str:
    area = rng.uniform_in_range(200, 999)
    exchange = rng.uniform_in_range(200, 999)
    return f"+1 ({area}) {exchange}-{rng.uniform_in_range(1000, 9999)}"


# country -> (code, area range, subscriber range)
PHONE_PLANS = {
    "uk": ("44", (100, 999), (1_000_000, 9_999_999)),
    "cn": ("86", (130, 189), (10_000_000, 99_999_999)),
    "jp": ("81", (10, 99), (1_000_000, 9_999_999)),
    "de": ("49", (100, 999), (10_000_000, 99_999_999)),
    "fr": ("33", (100, 999), (10_000_000, 99_999_999)),
}


def generate_phone(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    country = params.phone_country or "international"

    values = []
    for _ in range(count):
        if country == "us":
            values.append(_phone_us(rng))
            continue
        if country in PHONE_PLANS:
            code, area, number = PHONE_PLANS[country]
        else:
            code = str(rng.uniform_in_range(1, 999))
            area, number = (100, 999), (1_000_000, 9_999_999)
        values.append(
            f"+{code} {rng.uniform_in_range(*area)} {rng.uniform_in_range(*number)}"
        )
    return GeneratorOutput(values=values, meta={"country": country})


def _random_letters(rng: RNGBase) -> str:
    length = rng.uniform_in_range(6, 12)
    return "".join(pick_from(rng, string.ascii_lowercase) for _ in range(length))


def generate_email(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    domain = params.email_domain or "example.com"
    style = params.email_user_style or "random"

    values = []
    for _ in range(count):
        if style == "simple":
            user = f"user{rng.uniform_in_range(1000, 9999)}"
        elif style == "professional":
            user = (
                f"{pick_from(rng, ADJECTIVES)}.{pick_from(rng, NOUNS)}"
                f"{rng.uniform_in_range(1, 99)}"
            )
        else:
            user = _random_letters(rng)
        values.append(f"{user}@{domain}")
    return GeneratorOutput(values=values, meta={"domain": domain, "style": style})


def generate_username(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 10)
    style = params.username_style or "mixed"
    sep = params.username_separator if params.username_separator is not None else "_"

    values = []
    for _ in range(count):
        if style == "random":
            values.append(_random_letters(rng))
        elif style == "word":
            values.append(pick_from(rng, USERNAME_WORDS))
        elif style == "number":
            values.append(f"user{rng.uniform_in_range(1, 9999)}")
        else:
            word = pick_from(rng, USERNAME_WORDS)
            if rng.uniform_in_range(0, 1) == 0:
                values.append(f"{word}{sep}{rng.uniform_in_range(1, 9999)}")
            else:
                values.append(f"{word}{sep}{pick_from(rng, USERNAME_WORDS)}")
    return GeneratorOutput(values=values, meta={"style": style, "separator": sep})
