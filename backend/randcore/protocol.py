"""Public models for the generate(mode, params) entry point."""
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class GeneratorMode(str, Enum):
    """Generator modes accepted by generate()."""

    RANGE = "range"
    DIGIT = "digit"
    PASSWORD = "password"
    LOTTERY = "lottery"
    LIST = "list"
    SHUFFLE = "shuffle"
    DICE = "dice"
    COIN = "coin"
    TICKET = "ticket"
    UUID = "uuid"
    COLOR = "color"
    HEX = "hex"
    TIMESTAMP = "timestamp"
    COORDINATES = "coordinates"
    IPV4 = "ipv4"
    MAC = "mac"
    FRACTION = "fraction"
    PERCENTAGE = "percentage"
    DATE = "date"
    BYTES = "bytes"
    WORDS = "words"
    ALPHABET = "alphabet"
    PRIME = "prime"
    ROMAN = "roman"
    UNICODE = "unicode"
    ASCII = "ascii"
    TEMPERATURE = "temperature"
    CURRENCY = "currency"
    PHONE = "phone"
    EMAIL = "email"
    USERNAME = "username"


Number = int | float
Scalar = int | float | str


class Pool(BaseModel):
    """One lottery drum: inclusive [min, max], pick values."""

    min: Number | None = None
    max: Number | None = None
    pick: Number | None = None


class GeneratorParams(BaseModel):
    """
    Mode-specific generator configuration.

    Every field is optional; generators substitute documented defaults
    and clamp to documented bounds.
    """

    model_config = ConfigDict(extra="ignore")

    # Range
    min: Number | None = None
    max: Number | None = None
    step: Number | None = None
    precision: Number | None = None
    count: Number | None = None
    unique: bool | None = None
    sort: Literal["asc", "desc"] | None = None

    # Digit / Password
    length: Number | None = None
    pad_zero: bool | None = None
    charset: Literal["numeric", "alphanumeric", "hex", "strong", "custom"] | None = None
    custom_charset: str | None = None
    grouping: bool | None = None

    # Password pro options (presence of any selects the pro variant)
    include_lower: bool | None = None
    include_upper: bool | None = None
    include_digits: bool | None = None
    include_symbols: bool | None = None
    exclude_ambiguous: bool | None = None
    exclude_chars: str | None = None
    ensure_each: bool | None = None

    # Lottery
    pool_a: Pool | None = None
    pool_b: Pool | None = None

    # List / Shuffle
    items: list[Scalar | None] | None = None
    weights: list[Number | None] | None = None
    items_text: str | None = None
    parse_weights: bool | None = None
    pick: Number | None = None
    group_size: Number | None = None

    # Dice
    dice_sides: Number | None = None
    dice_rolls: Number | None = None
    dice_adv: Literal["none", "advantage", "disadvantage"] | None = None
    dice_custom_faces: list[Scalar] | None = None
    dice_modifier: Number | None = None

    # Coin
    coin_flips: Number | None = None
    coin_labels: tuple[str, str] | None = None

    # Ticket
    ticket_source: Literal["range", "list"] | None = None
    ticket_remaining: list[Scalar | None] | None = None

    # UUID
    uuid_uppercase: bool | None = None
    uuid_hyphens: bool | None = None

    # Color
    color_format: Literal["hex", "rgb", "hsl"] | None = None

    # Hex
    hex_bytes: Number | None = None
    hex_prefix: bool | None = None

    # Timestamp
    timestamp_format: Literal["unix", "unix-ms", "iso"] | None = None
    timestamp_start: Number | None = None
    timestamp_end: Number | None = None

    # Coordinates
    lat_min: Number | None = None
    lat_max: Number | None = None
    lng_min: Number | None = None
    lng_max: Number | None = None
    coord_format: Literal["decimal", "dms"] | None = None

    # IPv4 / MAC
    ipv4_private: bool | None = None
    ipv4_reserved: bool | None = None
    mac_separator: Literal[":", "-", ".", ""] | None = None
    mac_case: Literal["upper", "lower"] | None = None

    # Fraction / Percentage
    fraction_max: Number | None = None
    fraction_simplified: bool | None = None
    percentage_decimals: Number | None = None

    # Date
    date_start: str | None = None
    date_end: str | None = None
    date_format: Literal["iso", "us", "eu"] | None = None

    # Bytes
    bytes_length: Number | None = None
    bytes_format: Literal["base64", "hex", "array"] | None = None

    # Text
    word_count: Number | None = None
    word_type: Literal["all", "nouns", "verbs", "adjectives"] | None = None
    alphabet_case: Literal["upper", "lower", "mixed"] | None = None
    alphabet_vowels_only: bool | None = None
    unicode_range: Literal["basic", "latin", "emoji", "symbols", "all"] | None = None
    unicode_count: Number | None = None
    ascii_printable: bool | None = None
    ascii_count: Number | None = None

    # Prime / Roman
    prime_max: Number | None = None
    roman_max: Number | None = None

    # Simulation
    temp_unit: Literal["celsius", "fahrenheit", "kelvin"] | None = None
    temp_min: Number | None = None
    temp_max: Number | None = None
    temp_decimals: Number | None = None
    currency_symbol: str | None = None
    currency_decimals: Number | None = None
    currency_min: Number | None = None
    currency_max: Number | None = None
    phone_country: Literal["us", "uk", "cn", "jp", "de", "fr", "international"] | None = None
    email_domain: str | None = None
    email_user_style: Literal["random", "simple", "professional"] | None = None
    username_style: Literal["random", "word", "number", "mixed"] | None = None
    username_separator: str | None = None


class GenerationResult(BaseModel):
    """Result of one generate() call."""

    values: list[Scalar] = Field(default_factory=list)
    bonus_values: list[Scalar] = Field(default_factory=list)
    formatted: str = ""
    timestamp: int
    warnings: list[str] | None = None
    meta: dict[str, Any] | None = None
