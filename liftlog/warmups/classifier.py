"""Warm-up archetype classification.

Exercises tagged with an ExerciseEquipment by the data layer map directly to an
archetype. Legacy untagged records fall back to keyword matching on the
exercise name, first match wins:

1. dumbbell / db                                   -> HEAVY_DUMBBELL
2. pull-up, chin-up, dip, push-up, leg raise        -> BODYWEIGHT
3. barbell, squat, deadlift, rdl, ohp, bench        -> HEAVY_BARBELL
4. machine, smith, leg press, chest press, ...      -> MACHINE_COMPOUND
5. anything else                                    -> ISOLATION

Dumbbell precedes barbell so that "Dumbbell Squat" ramps like a dumbbell lift.
"""

from __future__ import annotations

from loguru import logger

from liftlog.warmups.constants import (
    BARBELL_KEYWORDS,
    BODYWEIGHT_KEYWORDS,
    DUMBBELL_KEYWORDS,
    EQUIPMENT_ARCHETYPES,
    LOWER_BODY_BARBELL_KEYWORDS,
    MACHINE_KEYWORDS,
)
from liftlog.warmups.enums import ExerciseEquipment, WarmupArchetype
from liftlog.warmups.models import ArchetypeInference


def _contains_any(name: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in name for keyword in keywords)


def _is_lower_body_barbell(name: str) -> bool:
    return _contains_any(name.lower(), LOWER_BODY_BARBELL_KEYWORDS)


def infer_archetype(name: str | None) -> ArchetypeInference:
    """Infer a warm-up archetype from an exercise name.

    Args:
        name: Exercise display name (case-insensitive)

    Returns:
        ArchetypeInference. is_weighted_bodyweight is always False; it is
        decided from the working weight at prescription time.
    """
    lowered = (name or "").lower()

    if _contains_any(lowered, DUMBBELL_KEYWORDS):
        return ArchetypeInference(archetype=WarmupArchetype.HEAVY_DUMBBELL)

    if _contains_any(lowered, BODYWEIGHT_KEYWORDS):
        return ArchetypeInference(archetype=WarmupArchetype.BODYWEIGHT)

    if _contains_any(lowered, BARBELL_KEYWORDS):
        return ArchetypeInference(
            archetype=WarmupArchetype.HEAVY_BARBELL,
            is_lower_body_barbell=_is_lower_body_barbell(lowered),
        )

    if _contains_any(lowered, MACHINE_KEYWORDS):
        return ArchetypeInference(archetype=WarmupArchetype.MACHINE_COMPOUND)

    return ArchetypeInference(archetype=WarmupArchetype.ISOLATION)


def archetype_for_equipment(equipment: ExerciseEquipment, name: str | None = "") -> ArchetypeInference:
    """Map an explicit equipment tag to an archetype.

    The name is only consulted to decide whether a barbell lift is lower-body.
    """
    archetype = EQUIPMENT_ARCHETYPES.get(equipment, WarmupArchetype.ISOLATION)
    lower_body = archetype == WarmupArchetype.HEAVY_BARBELL and _is_lower_body_barbell(name or "")
    return ArchetypeInference(archetype=archetype, is_lower_body_barbell=lower_body)


def classify_exercise(name: str | None, equipment: ExerciseEquipment | str | None = None) -> ArchetypeInference:
    """Classify an exercise, preferring its equipment tag over its name.

    Args:
        name: Exercise display name
        equipment: Equipment tag from the data layer, if the record has one

    Returns:
        ArchetypeInference for the exercise
    """
    if equipment is not None:
        try:
            tag = ExerciseEquipment(equipment.lower() if isinstance(equipment, str) else equipment)
        except ValueError:
            logger.warning(f"Unknown equipment tag {equipment!r} for exercise {name!r}, classifying by name")
        else:
            return archetype_for_equipment(tag, name)

    inference = infer_archetype(name)
    logger.debug(
        "Classified exercise by name",
        exercise=name,
        archetype=inference.archetype.value,
        lower_body_barbell=inference.is_lower_body_barbell,
    )
    return inference
