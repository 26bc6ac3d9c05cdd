"""Enumerations for warm-up prescription.

Values are the strings persisted on exercise documents, so they must not change.
"""

from __future__ import annotations

from enum import StrEnum

from liftlog.warmups.errors import UnknownArchetypeError


class WarmupArchetype(StrEnum):
    """Warm-up ramp behaviour tied to how an exercise is loaded."""

    HEAVY_BARBELL = "HEAVY_BARBELL"
    HEAVY_DUMBBELL = "HEAVY_DB"
    MACHINE_COMPOUND = "MACHINE_COMPOUND"
    BODYWEIGHT = "BODYWEIGHT"
    ISOLATION = "ISOLATION"
    NONE = "NONE"


class StepKind(StrEnum):
    """How a template step derives its load."""

    PERCENT = "PERCENT"
    LABEL = "LABEL"


class AppliesTo(StrEnum):
    """Which load a percent step is taken from (bodyweight work only)."""

    TOTAL = "TOTAL"
    ADDED = "ADDED"


class ExerciseEquipment(StrEnum):
    """Explicit equipment tag set by the exercise data layer."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"
    CABLE = "cable"
    BODYWEIGHT = "bodyweight"
    OTHER = "other"
    NONE = "none"


def parse_archetype(value: WarmupArchetype | str) -> WarmupArchetype:
    """Resolve an archetype from its persisted value or member name.

    Matching is case-insensitive and accepts either form, so both "HEAVY_DB"
    and "heavy_dumbbell" resolve to HEAVY_DUMBBELL.

    Raises:
        UnknownArchetypeError: If the value names no archetype.
    """
    if isinstance(value, WarmupArchetype):
        return value
    if not isinstance(value, str):
        raise UnknownArchetypeError(f"Archetype must be a string, got {type(value).__name__}")

    key = value.strip().upper().replace(" ", "_").replace("-", "_")
    for archetype in WarmupArchetype:
        if key in {archetype.value, archetype.name}:
            return archetype
    raise UnknownArchetypeError(f"Unknown warm-up archetype: {value!r}")
