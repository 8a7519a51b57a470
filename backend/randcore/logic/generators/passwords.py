"""Password and PIN generators (security-sensitive modes)."""
from randcore.config import settings
from randcore.logic.arrays import clamp_int, remove_chars
from randcore.logic.models import GeneratorOutput, PasswordCharset, ProCharset, SimpleCharset
from randcore.logic.rng import RNGBase
from randcore.logic.samplers import shuffle_in_place
from randcore.protocol import GeneratorParams


CHARSETS = {
    "numeric": "0123456789",
    "hex": "0123456789ABCDEF",
    "alphanumeric": "23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnpqrstuvwxyz",
    "strong": "23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnpqrstuvwxyz!@#$%^&*()_+-=",
}

PASSWORD_SETS = {
    "lower": "abcdefghijkmnpqrstuvwxyz",
    "upper": "ABCDEFGHJKLMNPQRSTUVWXYZ",
    "digits": "23456789",
    "symbols": "!@#$%^&*()_+-=~[]{};:,.?",
}

AMBIGUOUS_CHARS = "0O1lI|`'\"\\,.:;"

PRO_FIELDS = (
    "include_lower",
    "include_upper",
    "include_digits",
    "include_symbols",
    "exclude_ambiguous",
    "exclude_chars",
    "ensure_each",
)

# Largest PIN chunk whose range stays below 2^53.
PIN_CHUNK_DIGITS = 15
MAX_PIN_LENGTH = 18
MIN_PASSWORD_LENGTH = 4
GROUP_WIDTH = 4


def resolve_charset(params: GeneratorParams) -> tuple[PasswordCharset, list[str]]:
    """
    Select the simple or pro variant once, from which fields are present.

    Returns the charset and any warnings raised while building it.
    """
    warnings: list[str] = []
    if not any(getattr(params, name) is not None for name in PRO_FIELDS):
        if params.custom_charset:
            chars = params.custom_charset
        elif params.charset == "custom":
            warnings.append("Custom charset is empty; using the strong charset.")
            chars = CHARSETS["strong"]
        else:
            chars = CHARSETS[params.charset or "strong"]
        return SimpleCharset(chars=chars), warnings

    enabled = {
        "lower": params.include_lower if params.include_lower is not None else True,
        "upper": params.include_upper if params.include_upper is not None else True,
        "digits": params.include_digits if params.include_digits is not None else True,
        "symbols": params.include_symbols if params.include_symbols is not None else True,
    }
    names = [name for name, on in enabled.items() if on]
    groups = [PASSWORD_SETS[name] for name in names]
    if not groups:
        warnings.append("No character classes enabled; using the strong charset.")
        names = ["strong"]
        groups = [CHARSETS["strong"]]

    def exclude(chars: str) -> str:
        if params.exclude_ambiguous:
            chars = remove_chars(chars, AMBIGUOUS_CHARS)
        return remove_chars(chars, params.exclude_chars)

    pool = exclude("".join(groups))
    filtered = [exclude(g) for g in groups]
    if not pool:
        warnings.append("Exclusions removed every character; using the strong charset.")
        pool = CHARSETS["strong"]
    elif params.ensure_each:
        for name, chars in zip(names, filtered):
            if not chars:
                warnings.append(
                    f"Exclusions removed every '{name}' character; "
                    "it cannot be guaranteed."
                )

    charset = ProCharset(groups=filtered, pool=pool, ensure_each=bool(params.ensure_each))
    return charset, warnings


def _group(s: str) -> str:
    return "-".join(s[i:i + GROUP_WIDTH] for i in range(0, len(s), GROUP_WIDTH))


def _pick(rng: RNGBase, chars: str) -> str:
    return chars[rng.uniform_in_range(0, len(chars) - 1)]


def _one_password(rng: RNGBase, charset: PasswordCharset, length: int) -> str:
    if isinstance(charset, SimpleCharset):
        return "".join(_pick(rng, charset.chars) for _ in range(length))

    pieces: list[str] = []
    if charset.ensure_each:
        pieces.extend(_pick(rng, g) for g in charset.groups if g)
    while len(pieces) < length:
        pieces.append(_pick(rng, charset.pool))
    # Guaranteed characters must not sit at predictable positions.
    shuffle_in_place(rng, pieces)
    return "".join(pieces)


def generate_password(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    length = clamp_int(params.length, MIN_PASSWORD_LENGTH, settings.password_max_length, 12)
    batch = clamp_int(params.count, 1, settings.password_max_batch, 1)
    charset, warnings = resolve_charset(params)

    values = []
    for _ in range(batch):
        value = _one_password(rng, charset, length)
        if params.grouping and length > GROUP_WIDTH:
            value = _group(value)
        values.append(value)

    return GeneratorOutput(
        values=values,
        warnings=warnings,
        meta={"password": {"length": length, "batch": batch, "variant": charset.kind}},
    )


def generate_digit(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """
    Uniform PIN over [0, 10^length).

    Drawn as independent chunks of at most 15 digits so every draw stays
    inside the 53-bit envelope; the concatenation is still uniform.
    """
    length = clamp_int(params.length, 1, MAX_PIN_LENGTH, 4)
    pad_zero = params.pad_zero if params.pad_zero is not None else True

    chunks = []
    remaining = length
    while remaining > 0:
        width = min(remaining, PIN_CHUNK_DIGITS)
        chunk = rng.uniform_in_range(0, 10 ** width - 1)
        chunks.append(str(chunk).zfill(width))
        remaining -= width

    digits = "".join(chunks)
    value = digits if pad_zero else str(int(digits))
    return GeneratorOutput(values=[value])
