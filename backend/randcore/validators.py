"""Coercion of untrusted parameter mappings into GeneratorParams."""
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from randcore.protocol import GeneratorParams


logger = logging.getLogger(__name__)

# Each pass drops at least one field, so this only bounds pathological input.
MAX_COERCE_PASSES = 8


def _invalid_fields(exc: ValidationError) -> set[str]:
    return {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}


def coerce_params(
    raw: GeneratorParams | Mapping[str, Any] | None,
) -> tuple[GeneratorParams, list[str]]:
    """
    Validate raw parameters, dropping fields that fail validation.

    A dropped field falls back to its documented default inside the
    generator. Never raises.

    Returns:
        (params, dropped field names in sorted order)
    """
    if raw is None:
        return GeneratorParams(), []
    if isinstance(raw, GeneratorParams):
        return raw, []
    if not isinstance(raw, Mapping):
        logger.debug("Ignoring non-mapping params of type %s", type(raw).__name__)
        return GeneratorParams(), []

    data = dict(raw)
    dropped: set[str] = set()
    for _ in range(MAX_COERCE_PASSES):
        try:
            return GeneratorParams.model_validate(data), sorted(dropped)
        except ValidationError as exc:
            bad = _invalid_fields(exc) & data.keys()
            if not bad:
                break
            dropped |= bad
            for name in bad:
                del data[name]

    logger.debug("Parameter coercion gave up; using defaults")
    return GeneratorParams(), sorted(dropped | data.keys() & GeneratorParams.model_fields.keys())
