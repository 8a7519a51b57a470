"""Developer data modes: UUID, color, hex, timestamp, coordinates, network, bytes."""
import base64
import colorsys
import math
import time
import uuid
from datetime import datetime, timezone

from randcore.config import settings
from randcore.logic.arrays import clamp_int, round_half_up, safe_finite_number
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.protocol import GeneratorParams


SECONDS_PER_YEAR = 31_536_000
# datetime cannot render beyond 9999-12-31T23:59:59Z
MAX_TIMESTAMP = 253_402_300_799
MAX_HEX_BYTES = 1_024
MAX_BYTES_LENGTH = 1_048_576
MAX_BYTES_COUNT = 1_000
COORD_RESOLUTION = 1_000_000
IPV4_MAX_ATTEMPTS = 100


def generate_uuid(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """Random (version 4) UUIDs."""
    count = clamp_int(params.count, 1, settings.max_count, 1)
    hyphens = params.uuid_hyphens is not False

    values = []
    for _ in range(count):
        u = uuid.UUID(bytes=rng.random_bytes(16), version=4)
        s = str(u) if hyphens else u.hex
        values.append(s.upper() if params.uuid_uppercase else s)
    return GeneratorOutput(values=values)


def _hsl(r: int, g: int, b: int) -> str:
    h, lightness, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return (
        f"hsl({round_half_up(h * 360)}, {round_half_up(s * 100)}%, "
        f"{round_half_up(lightness * 100)}%)"
    )


def generate_color(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 1)
    fmt = params.color_format or "hex"

    values = []
    for _ in range(count):
        r, g, b = (rng.uniform_in_range(0, 255) for _ in range(3))
        if fmt == "rgb":
            values.append(f"rgb({r}, {g}, {b})")
        elif fmt == "hsl":
            values.append(_hsl(r, g, b))
        else:
            values.append(f"#{r:02X}{g:02X}{b:02X}")
    return GeneratorOutput(values=values, meta={"format": fmt})


def generate_hex(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 1)
    n_bytes = clamp_int(params.hex_bytes, 1, MAX_HEX_BYTES, 4)
    prefix = "0x" if params.hex_prefix else ""

    values = [prefix + rng.random_bytes(n_bytes).hex().upper() for _ in range(count)]
    return GeneratorOutput(values=values, meta={"bytes": n_bytes})


def _iso_ms(ms: int) -> str:
    dt = datetime.fromtimestamp(ms // 1000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{ms % 1000:03d}Z"


def generate_timestamp(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """Timestamps inside [start, end] seconds; defaults to now +/- one year."""
    count = clamp_int(params.count, 1, settings.max_count, 1)
    fmt = params.timestamp_format or "unix"
    now = int(time.time())
    start = clamp_int(params.timestamp_start, 0, MAX_TIMESTAMP, now - SECONDS_PER_YEAR)
    end = clamp_int(params.timestamp_end, 0, MAX_TIMESTAMP, now + SECONDS_PER_YEAR)
    low, high = min(start, end), max(start, end)

    values = []
    for _ in range(count):
        ts = rng.uniform_in_range(low, high)
        if fmt == "unix-ms":
            values.append(str(ts * 1000 + rng.uniform_in_range(0, 999)))
        elif fmt == "iso":
            values.append(_iso_ms(ts * 1000))
        else:
            values.append(str(ts))
    return GeneratorOutput(
        values=values, meta={"format": fmt, "range": {"start": low, "end": high}}
    )


def _dms(decimal: float, is_lat: bool) -> str:
    if is_lat:
        direction = "N" if decimal >= 0 else "S"
    else:
        direction = "E" if decimal >= 0 else "W"
    a = abs(decimal)
    deg = math.floor(a)
    minutes = math.floor((a - deg) * 60)
    sec = round_half_up(((a - deg) * 60 - minutes) * 60 * 100) / 100
    return f"{deg}°{minutes}'{sec:.2f}\"{direction}"


def _fraction(rng: RNGBase) -> float:
    return rng.uniform_in_range(0, COORD_RESOLUTION) / COORD_RESOLUTION


def generate_coordinates(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 1)
    fmt = params.coord_format or "decimal"
    lat_a = safe_finite_number(params.lat_min, -90)
    lat_b = safe_finite_number(params.lat_max, 90)
    lng_a = safe_finite_number(params.lng_min, -180)
    lng_b = safe_finite_number(params.lng_max, 180)
    min_lat, max_lat = min(lat_a, lat_b), max(lat_a, lat_b)
    min_lng, max_lng = min(lng_a, lng_b), max(lng_a, lng_b)

    values = []
    for _ in range(count):
        lat = min_lat + (max_lat - min_lat) * _fraction(rng)
        lng = min_lng + (max_lng - min_lng) * _fraction(rng)
        if fmt == "dms":
            values.append(f"{_dms(lat, True)}, {_dms(lng, False)}")
        else:
            values.append(f"{lat:.6f}, {lng:.6f}")
    return GeneratorOutput(
        values=values,
        meta={
            "lat_range": [min_lat, max_lat],
            "lng_range": [min_lng, max_lng],
            "format": fmt,
        },
    )


def _is_private(a: int, b: int) -> bool:
    return (
        a == 10
        or (a == 172 and 16 <= b <= 31)
        or (a == 192 and b == 168)
        or (a == 169 and b == 254)
    )


def _is_reserved(a: int) -> bool:
    return a == 0 or a == 127 or a >= 224


def generate_ipv4(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """
    Random unicast IPv4 addresses.

    Private/reserved blocks are re-drawn unless allowed, at most
    IPV4_MAX_ATTEMPTS times per address.
    """
    count = clamp_int(params.count, 1, settings.max_count, 1)
    include_private = bool(params.ipv4_private)
    include_reserved = bool(params.ipv4_reserved)

    values = []
    for _ in range(count):
        for _attempt in range(IPV4_MAX_ATTEMPTS):
            a = rng.uniform_in_range(1, 223)
            b = rng.uniform_in_range(0, 255)
            c = rng.uniform_in_range(0, 255)
            d = rng.uniform_in_range(1, 254)
            if (include_private or not _is_private(a, b)) and (
                include_reserved or not _is_reserved(a)
            ):
                break
        values.append(f"{a}.{b}.{c}.{d}")
    return GeneratorOutput(
        values=values,
        meta={"include_private": include_private, "include_reserved": include_reserved},
    )


def generate_mac(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, settings.max_count, 1)
    separator = params.mac_separator if params.mac_separator is not None else ":"
    upper = params.mac_case != "lower"

    values = []
    for _ in range(count):
        octets = [f"{rng.uniform_in_range(0, 255):02x}" for _ in range(6)]
        s = separator.join(octets)
        values.append(s.upper() if upper else s)
    return GeneratorOutput(
        values=values, meta={"separator": separator, "case": "upper" if upper else "lower"}
    )


def generate_bytes(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    count = clamp_int(params.count, 1, MAX_BYTES_COUNT, 1)
    length = clamp_int(params.bytes_length, 1, MAX_BYTES_LENGTH, 16)
    fmt = params.bytes_format or "base64"

    values = []
    for _ in range(count):
        raw = rng.random_bytes(length)
        if fmt == "hex":
            values.append(raw.hex().upper())
        elif fmt == "array":
            values.append("[" + ", ".join(str(b) for b in raw) + "]")
        else:
            values.append(base64.b64encode(raw).decode("ascii"))
    return GeneratorOutput(values=values, meta={"length": length, "format": fmt})
