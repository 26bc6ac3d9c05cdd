"""Warm-up prescription.

Turns a working weight and an archetype (or a stored per-exercise config) into
the ordered warm-up sets that lead up to it. Pure computation: the same inputs
always produce the same steps, nothing is cached and nothing raises.

Invariant: every returned step is strictly lighter than the working weight,
except for unloaded bodyweight work (working weight 0), where every step is
kept.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from liftlog.config.settings import settings
from liftlog.warmups.catalog import get_template_steps
from liftlog.warmups.classifier import classify_exercise
from liftlog.warmups.constants import (
    DEFAULT_MIN_INCREMENT_KG,
    EMPTY_BAR_LABEL,
    EMPTY_BAR_REPS,
    EMPTY_BAR_REST,
    LIGHT_ASSISTED_LABEL,
    LIGHT_ASSISTED_REPS,
    LIGHT_ASSISTED_REST,
    MIN_INCREMENT_KG,
)
from liftlog.warmups.enums import AppliesTo, ExerciseEquipment, StepKind, WarmupArchetype, parse_archetype
from liftlog.warmups.errors import InvalidStepSpecError, UnknownArchetypeError, WarmupError
from liftlog.warmups.models import StepSpec, WarmupConfig, WarmupStep, load_warmup_config, parse_step_spec
from liftlog.warmups.rounding import as_finite_float, format_weight_half, round_to_gym_half


def min_increment_for(archetype: WarmupArchetype, rounding_increment_kg: float | None = None) -> float:
    """Smallest load a percent step may carry after rounding.

    Args:
        archetype: Warm-up archetype
        rounding_increment_kg: Per-exercise override, used when positive

    Returns:
        2.5 kg for dumbbell and isolation work, 5 kg otherwise, unless overridden
    """
    increment = as_finite_float(rounding_increment_kg)
    if increment is not None and increment > 0:
        return increment
    return MIN_INCREMENT_KG.get(archetype, DEFAULT_MIN_INCREMENT_KG)


def _percent_label(percent: float) -> str:
    return f"{percent * 100:g}%"


def _label_step(spec: StepSpec, archetype: WarmupArchetype, working_weight: float) -> WarmupStep:
    if archetype == WarmupArchetype.BODYWEIGHT and working_weight == 0:
        return WarmupStep(
            label=LIGHT_ASSISTED_LABEL,
            weight_total=0.0,
            reps=LIGHT_ASSISTED_REPS,
            rest=LIGHT_ASSISTED_REST,
            note=spec.note,
        )
    return WarmupStep(label=spec.label or "", weight_total=0.0, reps=spec.target_reps, rest=spec.rest, note=spec.note)


def _percent_step(
    spec: StepSpec,
    archetype: WarmupArchetype,
    working_weight: float,
    min_increment: float,
) -> WarmupStep | None:
    percent = spec.percent
    if percent is None or not math.isfinite(percent):
        return None

    note = spec.note
    if archetype == WarmupArchetype.BODYWEIGHT and spec.applies_to == AppliesTo.ADDED:
        # Working weight of a bodyweight lift is the load added on top of the body
        if working_weight <= 0:
            return None
        added_note = f"{_percent_label(percent)} of {format_weight_half(working_weight)}kg added"
        note = f"{added_note}. {note}" if note else added_note

    weight = round_to_gym_half(working_weight * percent)
    if weight <= 0:
        weight = min_increment

    return WarmupStep(label=_percent_label(percent), weight_total=weight, reps=spec.target_reps, rest=spec.rest, note=note)


def compute_warmup(
    archetype: WarmupArchetype | str,
    working_weight: float,
    is_lower_body_barbell: bool = False,
    override_steps: Sequence[StepSpec] | None = None,
    rounding_increment_kg: float | None = None,
) -> list[WarmupStep]:
    """Compute the warm-up sets for one working set.

    Args:
        archetype: Warm-up archetype (enum member or persisted value)
        working_weight: Planned top-set load in kg; for bodyweight lifts, the
            added load (0 means unloaded)
        is_lower_body_barbell: Prepend a bar-only step for HEAVY_BARBELL
        override_steps: Replaces the catalog ramp when non-empty
        rounding_increment_kg: Override of the per-archetype floor increment

    Returns:
        Ordered warm-up steps, lightest first. Empty when no warm-up applies.
    """
    try:
        archetype = parse_archetype(archetype)
    except UnknownArchetypeError as e:
        logger.warning(f"No warm-up prescribed: {e}")
        return []

    if archetype == WarmupArchetype.NONE:
        return []

    finite_weight = as_finite_float(working_weight)
    if finite_weight is None:
        logger.warning("No warm-up prescribed: working weight is not a finite number", archetype=archetype.value)
        return []
    working_weight = finite_weight

    if override_steps:
        try:
            specs = tuple(parse_step_spec(spec) for spec in override_steps)
        except InvalidStepSpecError as e:
            logger.warning(f"No warm-up prescribed: malformed override steps ({e})")
            return []
    else:
        specs = get_template_steps(archetype)
    if not specs:
        return []

    min_increment = min_increment_for(archetype, rounding_increment_kg)
    steps: list[WarmupStep] = []

    if archetype == WarmupArchetype.HEAVY_BARBELL and is_lower_body_barbell:
        steps.append(
            WarmupStep(
                label=EMPTY_BAR_LABEL,
                weight_total=settings.warmup_empty_bar_kg,
                reps=EMPTY_BAR_REPS,
                rest=EMPTY_BAR_REST,
            )
        )

    for spec in specs:
        if spec.kind == StepKind.LABEL:
            steps.append(_label_step(spec, archetype, working_weight))
            continue
        step = _percent_step(spec, archetype, working_weight, min_increment)
        if step is not None:
            steps.append(step)

    unloaded_bodyweight = archetype == WarmupArchetype.BODYWEIGHT and working_weight == 0
    kept = steps if unloaded_bodyweight else [step for step in steps if step.weight_total < working_weight]

    logger.debug(
        "Computed warm-up",
        archetype=archetype.value,
        working_weight=working_weight,
        override=bool(override_steps),
        step_count=len(kept),
        filtered_count=len(steps) - len(kept),
    )
    return kept


def compute_warmup_for_config(config: WarmupConfig, working_weight: float) -> list[WarmupStep]:
    """Compute warm-up sets from a stored per-exercise config.

    The deprecated is_weighted_bodyweight flag is never consulted.
    """
    return compute_warmup(
        archetype=config.archetype,
        working_weight=working_weight,
        is_lower_body_barbell=config.is_lower_body_barbell,
        override_steps=config.override_steps,
        rounding_increment_kg=config.rounding_increment_kg,
    )


def prescribe_warmup(
    exercise_name: str | None,
    working_weight: float,
    equipment: ExerciseEquipment | str | None = None,
    config: WarmupConfig | Mapping[str, Any] | None = None,
) -> list[WarmupStep]:
    """Prescribe warm-up sets for an exercise as the data layer knows it.

    A stored config wins. When it is missing or cannot be parsed, the exercise
    is classified from its equipment tag or, failing that, its name.

    Args:
        exercise_name: Exercise display name
        working_weight: Planned top-set load in kg
        equipment: Equipment tag, if the exercise record has one
        config: Stored warm-up config (model or raw document)

    Returns:
        Ordered warm-up steps
    """
    resolved: WarmupConfig | None = None
    if isinstance(config, WarmupConfig):
        resolved = config
    elif config is not None:
        try:
            resolved = load_warmup_config(config)
        except WarmupError as e:
            logger.warning(f"Ignoring stored warm-up config for {exercise_name!r}: {e}")

    if resolved is None:
        resolved = classify_exercise(exercise_name, equipment).to_config()

    return compute_warmup_for_config(resolved, working_weight)
