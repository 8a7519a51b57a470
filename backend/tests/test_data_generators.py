"""Developer data, math, text and simulation generator tests."""
import base64
import math
import re
import uuid

import pytest

from randcore.logic.generators import arithmetic, data, simulation, text
from randcore.logic.rng import SeededRNG
from randcore.protocol import GeneratorParams


def run(fn, seed: int = 42, **params):
    return fn(GeneratorParams(**params), SeededRNG(seed=seed))


class TestDataGenerators:
    """UUID, color, hex, timestamp, coordinates, network, bytes."""

    def test_uuid_v4(self):
        out = run(data.generate_uuid, count=20)
        for value in out.values:
            u = uuid.UUID(value)
            assert u.version == 4
            assert u.variant == uuid.RFC_4122
            assert value == value.lower()

    def test_uuid_formatting_options(self):
        value = run(data.generate_uuid, uuid_uppercase=True, uuid_hyphens=False).values[0]
        assert re.fullmatch(r"[0-9A-F]{32}", value)

    @pytest.mark.parametrize("fmt,pattern", [
        ("hex", r"#[0-9A-F]{6}"),
        ("rgb", r"rgb\(\d{1,3}, \d{1,3}, \d{1,3}\)"),
        ("hsl", r"hsl\(\d{1,3}, \d{1,3}%, \d{1,3}%\)"),
    ])
    def test_color_formats(self, fmt, pattern):
        out = run(data.generate_color, count=20, color_format=fmt)
        assert all(re.fullmatch(pattern, v) for v in out.values)

    def test_hex(self):
        out = run(data.generate_hex, hex_bytes=8, hex_prefix=True)
        assert re.fullmatch(r"0x[0-9A-F]{16}", out.values[0])

    def test_hex_defaults_to_four_bytes(self):
        assert re.fullmatch(r"[0-9A-F]{8}", run(data.generate_hex).values[0])

    def test_timestamp_window(self):
        out = run(data.generate_timestamp, count=50, timestamp_start=1000, timestamp_end=2000)
        assert all(1000 <= int(v) <= 2000 for v in out.values)

    def test_timestamp_reversed_window(self):
        out = run(data.generate_timestamp, count=20, timestamp_start=2000, timestamp_end=1000)
        assert all(1000 <= int(v) <= 2000 for v in out.values)

    def test_timestamp_unix_ms(self):
        out = run(data.generate_timestamp, timestamp_format="unix-ms",
                  timestamp_start=1000, timestamp_end=1000)
        assert 1_000_000 <= int(out.values[0]) <= 1_000_999

    def test_timestamp_iso(self):
        out = run(data.generate_timestamp, timestamp_format="iso", timestamp_start=0, timestamp_end=0)
        assert out.values == ["1970-01-01T00:00:00.000Z"]

    def test_coordinates_decimal(self):
        out = run(data.generate_coordinates, count=20, lat_min=10, lat_max=20, lng_min=-5, lng_max=5)
        for value in out.values:
            lat, lng = (float(p) for p in value.split(", "))
            assert 10 <= lat <= 20
            assert -5 <= lng <= 5

    def test_coordinates_dms(self):
        out = run(data.generate_coordinates, coord_format="dms", lat_min=-10, lat_max=-5)
        assert re.fullmatch(r"\d+°\d+'\d+\.\d{2}\"S, \d+°\d+'\d+\.\d{2}\"[EW]", out.values[0])

    def test_ipv4_public_by_default(self):
        out = run(data.generate_ipv4, count=500)
        for value in out.values:
            a, b, _, d = (int(p) for p in value.split("."))
            assert 1 <= a <= 223 and 1 <= d <= 254
            assert a not in (0, 10, 127)
            assert not (a == 192 and b == 168)
            assert not (a == 172 and 16 <= b <= 31)

    def test_mac(self):
        out = run(data.generate_mac, count=10)
        assert all(re.fullmatch(r"([0-9A-F]{2}:){5}[0-9A-F]{2}", v) for v in out.values)
        lower = run(data.generate_mac, mac_separator="-", mac_case="lower").values[0]
        assert re.fullmatch(r"([0-9a-f]{2}-){5}[0-9a-f]{2}", lower)

    def test_bytes_formats(self):
        b64 = run(data.generate_bytes, bytes_length=10).values[0]
        assert len(base64.b64decode(b64)) == 10
        hex_value = run(data.generate_bytes, bytes_length=3, bytes_format="hex").values[0]
        assert re.fullmatch(r"[0-9A-F]{6}", hex_value)
        array = run(data.generate_bytes, bytes_length=3, bytes_format="array").values[0]
        assert re.fullmatch(r"\[\d{1,3}, \d{1,3}, \d{1,3}\]", array)


class TestMathGenerators:
    """Fractions, percentages, primes, Roman numerals."""

    def test_fraction_simplified(self):
        out = run(arithmetic.generate_fraction, count=200, fraction_max=12)
        for value in out.values:
            if "/" in value:
                num, den = (int(p) for p in value.split("/"))
                assert den > 1
                assert math.gcd(num, den) == 1
            else:
                assert int(value) >= 1

    def test_fraction_raw(self):
        out = run(arithmetic.generate_fraction, count=50, fraction_simplified=False)
        assert all(re.fullmatch(r"\d+/\d+", v) for v in out.values)

    @pytest.mark.parametrize("decimals,pattern", [(0, r"\d{1,3}%"), (2, r"\d{1,3}\.\d{2}%")])
    def test_percentage(self, decimals, pattern):
        out = run(arithmetic.generate_percentage, count=50, percentage_decimals=decimals)
        for value in out.values:
            assert re.fullmatch(pattern, value)
            assert 0 <= float(value[:-1]) <= 100

    def test_primes_up_to(self):
        assert arithmetic.primes_up_to(30) == (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)
        assert arithmetic.primes_up_to(2) == (2,)

    def test_prime_values(self):
        out = run(arithmetic.generate_prime, prime_max=50)
        assert len(out.values) == 10
        assert all(int(v) in arithmetic.primes_up_to(50) for v in out.values)
        assert out.meta["available_primes"] == 15

    @pytest.mark.parametrize("n,numeral", [
        (1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (40, "XL"),
        (90, "XC"), (400, "CD"), (1994, "MCMXCIV"), (3999, "MMMCMXCIX"),
    ])
    def test_to_roman(self, n, numeral):
        assert arithmetic.to_roman(n) == numeral

    def test_roman_max(self):
        out = run(arithmetic.generate_roman, count=100, roman_max=3)
        assert set(out.values) <= {"I", "II", "III"}


class TestTextGenerators:
    """Words, letters, Unicode, ASCII."""

    def test_words(self):
        out = run(text.generate_words, word_count=5, word_type="verbs")
        words = out.values[0].split(" ")
        assert len(words) == 5
        assert all(w in text.VERBS for w in words)

    def test_alphabet_vowels_upper(self):
        out = run(text.generate_alphabet, count=100, alphabet_case="upper", alphabet_vowels_only=True)
        assert set(out.values) <= set(text.VOWELS)

    def test_alphabet_mixed_case(self):
        out = run(text.generate_alphabet, count=200)
        assert any(v.isupper() for v in out.values)
        assert any(v.islower() for v in out.values)

    @pytest.mark.parametrize("name", list(text.UNICODE_RANGES))
    def test_unicode_ranges(self, name):
        out = run(text.generate_unicode, count=50, unicode_count=3, unicode_range=name)
        ranges = text.UNICODE_RANGES[name]
        for value in out.values:
            assert len(value) == 3
            value.encode("utf-8")
            for ch in value:
                assert any(lo <= ord(ch) <= hi for lo, hi in ranges)

    def test_ascii_printable(self):
        out = run(text.generate_ascii, ascii_count=100)
        assert all(32 <= ord(c) <= 126 for c in out.values[0])

    def test_ascii_full(self):
        out = run(text.generate_ascii, count=50, ascii_count=100, ascii_printable=False)
        assert all(0 <= ord(c) <= 255 for v in out.values for c in v)


class TestSimulationGenerators:
    """Dates, temperatures, prices, phones, emails, usernames."""

    def test_date_window_iso(self):
        out = run(simulation.generate_date, count=50,
                  date_start="2024-01-01", date_end="2024-01-31")
        for value in out.values:
            assert re.fullmatch(r"2024-01-\d{2}", value)
        assert out.meta["range"]["start"] == "2024-01-01T00:00:00.000Z"

    @pytest.mark.parametrize("fmt,expected", [("us", "03/15/2024"), ("eu", "15/03/2024"), ("iso", "2024-03-15")])
    def test_date_formats(self, fmt, expected):
        out = run(simulation.generate_date, date_format=fmt,
                  date_start="2024-03-15T12:00:00Z", date_end="2024-03-15T12:00:00Z")
        assert out.values == [expected]

    def test_invalid_date_warns_and_uses_default(self):
        out = run(simulation.generate_date, date_start="yesterday-ish")
        assert out.warnings == ["Ignored invalid date_start: 'yesterday-ish'."]
        assert len(out.values) == 1

    def test_window_before_year_one_is_clamped(self):
        """Offsets can push both bounds before 0001-01-01; dates clamp to it."""
        out = run(simulation.generate_date, count=5,
                  date_start="0001-01-01T00:00:00+02:00",
                  date_end="0001-01-01T00:00:00+03:00")
        assert out.values == ["0001-01-01"] * 5
        assert out.meta["range"] == {
            "start": "0001-01-01T00:00:00.000Z",
            "end": "0001-01-01T00:00:00.000Z",
        }

    def test_window_after_year_9999_is_clamped(self):
        out = run(simulation.generate_date, count=5,
                  date_start="9999-12-31T23:00:00-05:00",
                  date_end="9999-12-31T23:30:00-04:00")
        assert out.values == ["9999-12-31"] * 5

    def test_temperature(self):
        out = run(simulation.generate_temperature, temp_min=0, temp_max=10, temp_unit="kelvin")
        assert len(out.values) == 10
        for value in out.values:
            assert value.endswith("K")
            assert 0 <= float(value[:-1]) <= 10

    def test_temperature_integral_values_have_no_trailing_zero(self):
        out = run(simulation.generate_temperature, count=200, temp_min=0, temp_max=1, temp_decimals=0)
        assert all(v in ("0C", "1C") for v in out.values)

    def test_currency(self):
        out = run(simulation.generate_currency, currency_symbol="€", currency_decimals=2)
        assert all(re.fullmatch(r"€\d+\.\d{2}", v) for v in out.values)

    @pytest.mark.parametrize("country,pattern", [
        ("us", r"\+1 \(\d{3}\) \d{3}-\d{4}"),
        ("uk", r"\+44 \d{3} \d{7}"),
        ("cn", r"\+86 1[3-8]\d \d{8}"),
        ("jp", r"\+81 \d{2} \d{7}"),
        ("international", r"\+\d{1,3} \d{3} \d{7}"),
    ])
    def test_phone(self, country, pattern):
        out = run(simulation.generate_phone, count=20, phone_country=country)
        assert all(re.fullmatch(pattern, v) for v in out.values)

    @pytest.mark.parametrize("style,pattern", [
        ("random", r"[a-z]{6,12}@example\.com"),
        ("simple", r"user\d{4}@example\.com"),
        ("professional", r"[a-z]+\.[a-z]+\d{1,2}@example\.com"),
    ])
    def test_email(self, style, pattern):
        out = run(simulation.generate_email, email_user_style=style)
        assert all(re.fullmatch(pattern, v) for v in out.values)

    def test_username_styles(self):
        assert all(v in simulation.USERNAME_WORDS
                   for v in run(simulation.generate_username, username_style="word").values)
        assert all(re.fullmatch(r"user\d{1,4}", v)
                   for v in run(simulation.generate_username, username_style="number").values)
        mixed = run(simulation.generate_username, count=50, username_separator=".").values
        assert all(v.split(".")[0] in simulation.USERNAME_WORDS for v in mixed)
