"""Warm-up template catalog.

Single source of truth for the ramp of every archetype. Steps are ordered
lightest to heaviest; percentages are fractions of the working weight unless a
step applies to the added load of a bodyweight exercise.
"""

from __future__ import annotations

from types import MappingProxyType

from liftlog.warmups.enums import AppliesTo, WarmupArchetype
from liftlog.warmups.models import StepSpec, label_step, percent_step

BODYWEIGHT_LABEL = "Bodyweight"

_TEMPLATES: dict[WarmupArchetype, tuple[StepSpec, ...]] = {
    WarmupArchetype.HEAVY_BARBELL: (
        percent_step(0.40, "12", "30-45s"),
        percent_step(0.65, "8", "60s"),
        percent_step(0.80, "4-6", "90s"),
    ),
    WarmupArchetype.HEAVY_DUMBBELL: (
        percent_step(0.50, "12", "45s"),
        percent_step(0.70, "6-8", "60-75s"),
    ),
    WarmupArchetype.MACHINE_COMPOUND: (
        percent_step(0.50, "12", "45s"),
        percent_step(0.70, "6-8", "60-75s"),
    ),
    WarmupArchetype.BODYWEIGHT: (
        label_step(BODYWEIGHT_LABEL, "8-10", "60s"),
        percent_step(0.50, "5", "90s", applies_to=AppliesTo.ADDED),
    ),
    WarmupArchetype.ISOLATION: (percent_step(0.50, "10-12", "30s"),),
    WarmupArchetype.NONE: (),
}

WARMUP_TEMPLATES = MappingProxyType(_TEMPLATES)


def get_template_steps(archetype: WarmupArchetype) -> tuple[StepSpec, ...]:
    """Return the catalog ramp for an archetype (empty when it has none)."""
    return WARMUP_TEMPLATES.get(archetype, ())
