"""Constants for warm-up prescription.

Keyword tables are matched as lowercase substrings of the exercise name.
"""

from liftlog.warmups.enums import ExerciseEquipment, WarmupArchetype

# Bar-only familiarization step for lower-body barbell lifts
EMPTY_BAR_LABEL = "Empty Bar"
EMPTY_BAR_REPS = "10-15"
EMPTY_BAR_REST = "45s"

# Replaces the catalog label when a bodyweight lift is logged with no load
LIGHT_ASSISTED_LABEL = "Light/assisted"
LIGHT_ASSISTED_REPS = "10-12"
LIGHT_ASSISTED_REST = "45s"

# Floor applied when a percent step rounds to zero or below
DEFAULT_MIN_INCREMENT_KG = 5.0
MIN_INCREMENT_KG: dict[WarmupArchetype, float] = {
    WarmupArchetype.HEAVY_DUMBBELL: 2.5,
    WarmupArchetype.ISOLATION: 2.5,
}

DUMBBELL_KEYWORDS = ("dumbbell", "db")
BODYWEIGHT_KEYWORDS = ("pull-up", "chin-up", "dip", "push-up", "leg raise")
BARBELL_KEYWORDS = ("barbell", "squat", "deadlift", "rdl", "ohp", "bench")
LOWER_BODY_BARBELL_KEYWORDS = ("squat", "deadlift", "rdl")
MACHINE_KEYWORDS = (
    "machine",
    "smith",
    "leg press",
    "chest press",
    "seated row",
    "shoulder press",
    "hack squat",
)

EQUIPMENT_ARCHETYPES: dict[ExerciseEquipment, WarmupArchetype] = {
    ExerciseEquipment.BARBELL: WarmupArchetype.HEAVY_BARBELL,
    ExerciseEquipment.DUMBBELL: WarmupArchetype.HEAVY_DUMBBELL,
    ExerciseEquipment.MACHINE: WarmupArchetype.MACHINE_COMPOUND,
    ExerciseEquipment.BODYWEIGHT: WarmupArchetype.BODYWEIGHT,
    ExerciseEquipment.CABLE: WarmupArchetype.ISOLATION,
    ExerciseEquipment.OTHER: WarmupArchetype.ISOLATION,
    ExerciseEquipment.NONE: WarmupArchetype.NONE,
}
