"""Generator engine: the single generate(mode, params) entry point."""
import logging
import time
from typing import Any, Callable, Mapping

from randcore.config import settings
from randcore.config_hash import get_config_hash
from randcore.errors import GenerationError
from randcore.logic.arrays import clamp_int, display_number
from randcore.logic.entropy import EntropySource, GenerationContext
from randcore.logic.generators import (
    arithmetic,
    data,
    dice,
    lists,
    lottery,
    passwords,
    ranges,
    simulation,
    text,
    tickets,
)
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import ProductionRNG, RNGBase
from randcore.protocol import GenerationResult, GeneratorMode, GeneratorParams
from randcore.telemetry import (
    GenerationFailedEvent,
    GenerationServedEvent,
    TelemetryService,
    telemetry_service,
)
from randcore.validators import coerce_params


logger = logging.getLogger(__name__)

Generator = Callable[[GeneratorParams, RNGBase], GeneratorOutput]
RNGFactory = Callable[[GenerationContext], RNGBase]

GENERATORS: dict[GeneratorMode, Generator] = {
    GeneratorMode.RANGE: ranges.generate_range,
    GeneratorMode.DIGIT: passwords.generate_digit,
    GeneratorMode.PASSWORD: passwords.generate_password,
    GeneratorMode.LOTTERY: lottery.generate_lottery,
    GeneratorMode.LIST: lists.generate_list,
    GeneratorMode.SHUFFLE: lists.generate_shuffle,
    GeneratorMode.DICE: dice.generate_dice,
    GeneratorMode.COIN: dice.generate_coin,
    GeneratorMode.TICKET: tickets.generate_ticket,
    GeneratorMode.UUID: data.generate_uuid,
    GeneratorMode.COLOR: data.generate_color,
    GeneratorMode.HEX: data.generate_hex,
    GeneratorMode.TIMESTAMP: data.generate_timestamp,
    GeneratorMode.COORDINATES: data.generate_coordinates,
    GeneratorMode.IPV4: data.generate_ipv4,
    GeneratorMode.MAC: data.generate_mac,
    GeneratorMode.BYTES: data.generate_bytes,
    GeneratorMode.FRACTION: arithmetic.generate_fraction,
    GeneratorMode.PERCENTAGE: arithmetic.generate_percentage,
    GeneratorMode.PRIME: arithmetic.generate_prime,
    GeneratorMode.ROMAN: arithmetic.generate_roman,
    GeneratorMode.WORDS: text.generate_words,
    GeneratorMode.ALPHABET: text.generate_alphabet,
    GeneratorMode.UNICODE: text.generate_unicode,
    GeneratorMode.ASCII: text.generate_ascii,
    GeneratorMode.DATE: simulation.generate_date,
    GeneratorMode.TEMPERATURE: simulation.generate_temperature,
    GeneratorMode.CURRENCY: simulation.generate_currency,
    GeneratorMode.PHONE: simulation.generate_phone,
    GeneratorMode.EMAIL: simulation.generate_email,
    GeneratorMode.USERNAME: simulation.generate_username,
}

MAX_FORMAT_GROUP = 10_000


def _now_ms() -> int:
    return int(time.time() * 1000)


def _text(value: Any) -> str:
    return str(display_number(value))


def format_grouped_lines(values: list, group_size: int) -> str:
    """One value per line, or group_size values per line joined by ", "."""
    if group_size <= 0:
        return "\n".join(_text(v) for v in values)
    return "\n".join(
        ", ".join(_text(v) for v in values[i:i + group_size])
        for i in range(0, len(values), group_size)
    )


def format_output(
    mode: GeneratorMode, params: GeneratorParams, out: GeneratorOutput
) -> str:
    """Joined rendering of values and bonus values."""
    values = out.values
    group_size = clamp_int(params.group_size, 0, MAX_FORMAT_GROUP, 0)

    if mode == GeneratorMode.PASSWORD and len(values) > 1:
        formatted = "\n".join(_text(v) for v in values)
    elif mode == GeneratorMode.SHUFFLE:
        formatted = format_grouped_lines(values, group_size)
    elif mode == GeneratorMode.TICKET:
        formatted = "\n".join(_text(v) for v in values)
    elif mode == GeneratorMode.LIST and len(values) > 1:
        formatted = format_grouped_lines(values, group_size)
    else:
        formatted = ", ".join(_text(v) for v in values)

    if out.bonus_values:
        formatted += " + " + ", ".join(_text(v) for v in out.bonus_values)
    return formatted


def _resolve_mode(mode: GeneratorMode | str) -> GeneratorMode | None:
    try:
        return GeneratorMode(mode)
    except (TypeError, ValueError):
        return None


class GeneratorEngine:
    """
    Dispatches generate() calls to the mode generators.

    Every call builds its own GenerationContext and asks rng_factory for
    a sampler bound to it, so concurrent calls never share a security
    classification. Tests inject a factory returning SeededRNG.
    """

    def __init__(
        self,
        rng_factory: RNGFactory | None = None,
        entropy: EntropySource | None = None,
        telemetry: TelemetryService | None = None,
    ):
        self.entropy = entropy
        self.rng_factory = rng_factory or self._production_rng
        self.telemetry = telemetry or telemetry_service

    def _production_rng(self, context: GenerationContext) -> RNGBase:
        return ProductionRNG(context, entropy=self.entropy)

    def generate(
        self,
        mode: GeneratorMode | str,
        params: GeneratorParams | Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """
        Run one generation.

        An unknown mode returns an empty result. Degraded outcomes come
        back as warnings.

        Raises:
            EntropyUnavailable: CSPRNG missing for a security-sensitive mode
            InvalidRange / RangeTooLarge: unrepresentable bounds
        """
        resolved = _resolve_mode(mode)
        if resolved is None:
            logger.debug("Unknown generator mode %r; returning empty result", mode)
            return GenerationResult(timestamp=_now_ms())

        started = time.monotonic()
        coerced, dropped = coerce_params(params)
        context = GenerationContext(mode=resolved)
        rng = self.rng_factory(context)

        try:
            out = GENERATORS[resolved](coerced, rng)
        except GenerationError as e:
            logger.warning("Generation failed: mode=%s code=%s (%s)",
                           resolved.value, e.code.value, e.message)
            if settings.telemetry_enabled:
                self.telemetry.emit_generation_failed(
                    GenerationFailedEvent(
                        mode=resolved.value,
                        reason=e.code.value,
                        config_hash=get_config_hash(),
                    )
                )
            raise

        warnings = list(out.warnings)
        if dropped:
            warnings.insert(0, f"Ignored invalid parameter(s): {', '.join(dropped)}.")
        if warnings:
            logger.info("Degraded result: mode=%s warnings=%s", resolved.value, warnings)

        result = GenerationResult(
            values=out.values,
            bonus_values=out.bonus_values,
            formatted=format_output(resolved, coerced, out),
            timestamp=_now_ms(),
            warnings=warnings or None,
            meta=out.meta,
        )

        duration_ms = (time.monotonic() - started) * 1000
        logger.debug(
            "Generated mode=%s values=%d bonus=%d in %.2fms",
            resolved.value, len(out.values), len(out.bonus_values), duration_ms,
        )
        if settings.telemetry_enabled:
            self.telemetry.emit_generation_served(
                GenerationServedEvent(
                    mode=resolved.value,
                    value_count=len(out.values),
                    bonus_count=len(out.bonus_values),
                    warning_count=len(warnings),
                    duration_ms=round(duration_ms, 3),
                    security_sensitive=context.security_sensitive,
                    config_hash=get_config_hash(),
                )
            )
        return result


# Global instance
engine = GeneratorEngine()


def generate(
    mode: GeneratorMode | str,
    params: GeneratorParams | Mapping[str, Any] | None = None,
) -> GenerationResult:
    """Run one generation on the shared production engine."""
    return engine.generate(mode, params)
