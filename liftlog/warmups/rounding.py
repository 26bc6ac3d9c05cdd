"""Gym rounding utilities.

Converts raw computed weights into loads that can actually be put on a bar or
picked off a dumbbell rack. All functions are total: non-finite input yields 0,
values too large to hold a fraction pass through, and nothing here raises.

round_to_gym_half is the rounding system of record for warm-up prescription.
snap_to_step is the configurable-granularity helper used by set entry and
display; it supersedes the older fixed-increment rounding helpers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Literal

from liftlog.config.settings import DEFAULT_GYM_ROUND_DOWN_MAX, DEFAULT_GYM_ROUND_HALF_MAX, settings

SnapMode = Literal["nearest", "floor", "ceil"]

DEFAULT_SNAP_STEP = 0.25


@dataclass(frozen=True)
class GymHalfRule:
    """Break points for snapping a fractional remainder to .0 / .5 / 1.0.

    Remainders up to round_down_max drop to the whole kilo, remainders up to
    round_half_max snap to the half kilo, anything above goes to the next kilo.

    Attributes:
        round_down_max: Largest remainder that rounds down (default 0.2)
        round_half_max: Largest remainder that snaps to .5 (default 0.7)
    """

    round_down_max: float = DEFAULT_GYM_ROUND_DOWN_MAX
    round_half_max: float = DEFAULT_GYM_ROUND_HALF_MAX


def default_gym_half_rule() -> GymHalfRule:
    """Rule built from the configured break points."""
    return GymHalfRule(
        round_down_max=settings.gym_round_down_max,
        round_half_max=settings.gym_round_half_max,
    )


def as_finite_float(value: Any) -> float | None:
    """Coerce a number to a finite float, or None when that is impossible.

    Integers too large for a float count as non-finite.
    """
    if not isinstance(value, int | float):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _round_half_up(value: float, places: int) -> float:
    # Decimal(value) is the exact binary value, so 0.25 -> 0.3 but 0.15 (0.1499...) -> 0.1
    exact = Decimal(value)
    with localcontext() as ctx:
        # Precision must cover every integer digit plus the kept places
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        quantum = Decimal(1).scaleb(-places)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_gym_half(value: float, rule: GymHalfRule | None = None) -> float:
    """Snap a weight to the nearest gym-loadable .0 / .5 kg.

    The remainder is first rounded to one decimal to strip float noise
    (0.29999 -> 0.3), then:

    - remainder 0 or <= 0.2: round down to the whole kilo
    - 0.2 < remainder <= 0.7: snap to the half kilo (0.5 itself stays)
    - remainder > 0.7: round up to the next kilo

    Args:
        value: Raw weight. Negative values keep their sign.
        rule: Break points; defaults to the configured rule

    Returns:
        Rounded weight, or 0 for non-finite input
    """
    value = as_finite_float(value)
    if value is None:
        return 0.0

    rule = rule or default_gym_half_rule()
    sign = -1.0 if value < 0 else 1.0
    magnitude = abs(value)
    base = math.floor(magnitude)
    remainder = _round_half_up(magnitude - base, 1)

    if remainder <= rule.round_down_max:
        rounded = float(base)
    elif remainder <= rule.round_half_max:
        rounded = base + 0.5
    else:
        rounded = float(base + 1)

    if rounded == 0:
        return 0.0
    return sign * rounded


def _step_decimals(step: float) -> int:
    exponent = Decimal(repr(step)).normalize().as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


def snap_to_step(value: float, step: float = DEFAULT_SNAP_STEP, mode: SnapMode = "nearest") -> float:
    """Snap a value to a multiple of `step`.

    Output precision follows the step: two decimals for 0.25, one for 0.5,
    none for whole-number steps. "nearest" rounds ties upward.

    Args:
        value: Raw value
        step: Snap granularity. Non-positive or non-finite steps fall back to 0.25.
        mode: "nearest", "floor" or "ceil"

    Returns:
        Snapped value, or 0 for non-finite input
    """
    value = as_finite_float(value)
    if value is None:
        return 0.0
    step = as_finite_float(step)
    if step is None or step <= 0:
        step = DEFAULT_SNAP_STEP

    quotient = value / step
    if not math.isfinite(quotient):
        # Too large to carry any fraction of the step
        return value
    if mode == "floor":
        snapped = math.floor(quotient) * step
    elif mode == "ceil":
        snapped = math.ceil(quotient) * step
    else:
        snapped = math.floor(quotient + 0.5) * step
    if not math.isfinite(snapped):
        return value

    result = _round_half_up(snapped, _step_decimals(step))
    return result if result != 0 else 0.0


def snap_to_half(value: float) -> float:
    """Snap to the nearest 0.5 kg (set entry)."""
    return snap_to_step(value, 0.5)


def format_weight_half(value: float | None) -> str:
    """Render a weight snapped to 0.5 kg for display.

    Returns "" for missing or non-finite values, "80" for whole kilos and
    "80.5" otherwise.
    """
    value = as_finite_float(value)
    if value is None:
        return ""
    snapped = snap_to_half(value)
    if snapped.is_integer():
        return str(int(snapped))
    return f"{snapped:.1f}"
