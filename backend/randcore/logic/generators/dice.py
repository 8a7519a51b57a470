"""Dice and coin modes."""
from randcore.config import settings
from randcore.logic.arrays import clamp_int, display_number, safe_finite_number
from randcore.logic.models import GeneratorOutput
from randcore.logic.rng import RNGBase
from randcore.protocol import GeneratorParams


D20 = 20
DEFAULT_SIDES = 6


def _with_modifier(value: int, modifier: float):
    return display_number(value + modifier)


def generate_dice(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """
    Roll dice.

    Advantage/disadvantage applies only to a single d20 roll: two
    independent draws, the kept one is the primary value and the dropped
    one is reported as the bonus value. The modifier is added after
    resolution.
    """
    rolls = clamp_int(params.dice_rolls, 1, settings.dice_max_rolls, 1)
    modifier = safe_finite_number(params.dice_modifier, 0)
    adv = params.dice_adv or "none"

    faces = [str(f) for f in params.dice_custom_faces or []]
    if len(faces) >= 2:
        indices = [rng.uniform_in_range(0, len(faces) - 1) for _ in range(rolls)]
        return GeneratorOutput(
            values=[faces[i] for i in indices],
            meta={"faces": len(faces), "selected_indices": indices},
        )

    sides = clamp_int(params.dice_sides, 2, settings.dice_max_sides, DEFAULT_SIDES)

    if adv in ("advantage", "disadvantage") and sides == D20 and rolls == 1:
        a = rng.uniform_in_range(1, D20)
        b = rng.uniform_in_range(1, D20)
        kept = max(a, b) if adv == "advantage" else min(a, b)
        dropped = b if kept == a else a
        return GeneratorOutput(
            values=[_with_modifier(kept, modifier)],
            bonus_values=[_with_modifier(dropped, modifier)],
            meta={
                "d20": {
                    "a": a,
                    "b": b,
                    "kept": kept,
                    "dropped": dropped,
                    "modifier": modifier,
                    "mode": adv,
                }
            },
        )

    raw = [rng.uniform_in_range(1, sides) for _ in range(rolls)]
    values = [_with_modifier(n, modifier) for n in raw]
    return GeneratorOutput(
        values=values,
        meta={
            "sides": sides,
            "rolls": rolls,
            "modifier": modifier,
            "total": sum(values),
            "raw": raw,
        },
    )


def generate_coin(params: GeneratorParams, rng: RNGBase) -> GeneratorOutput:
    """Flip coins and track the longest streak."""
    flips = clamp_int(
        params.coin_flips if params.coin_flips is not None else params.count,
        1,
        settings.max_count,
        1,
    )
    if params.coin_labels:
        heads_label, tails_label = params.coin_labels
    elif params.items and len(params.items) >= 2:
        heads_label, tails_label = str(params.items[0]), str(params.items[1])
    else:
        heads_label, tails_label = "HEADS", "TAILS"

    sequence: list[str] = []
    heads = 0
    longest, longest_side = 0, None
    current, current_side = 0, None
    for _ in range(flips):
        is_heads = rng.uniform_in_range(0, 1) == 0
        side = heads_label if is_heads else tails_label
        sequence.append(side)
        heads += is_heads

        if side == current_side:
            current += 1
        else:
            current_side, current = side, 1
        if current > longest:
            longest, longest_side = current, current_side

    return GeneratorOutput(
        values=sequence,
        meta={
            "flips": flips,
            "heads": heads,
            "tails": flips - heads,
            "longest_streak": {"length": longest, "side": longest_side},
        },
    )
