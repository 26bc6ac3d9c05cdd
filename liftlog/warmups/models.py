"""Warm-up prescription models.

StepSpec and WarmupConfig validate the shape of template data, including the
camelCase shape persisted on exercise documents. WarmupStep is the engine's
output and is rebuilt on every call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from liftlog.warmups.enums import AppliesTo, StepKind, WarmupArchetype, parse_archetype
from liftlog.warmups.errors import InvalidStepSpecError, InvalidWarmupConfigError, UnknownArchetypeError
from liftlog.warmups.rounding import as_finite_float


class StepSpec(BaseModel):
    """One ramp step of a warm-up template.

    PERCENT steps carry a fraction of the working weight in (0, 1];
    LABEL steps carry a fixed display label and no load.
    """

    model_config = ConfigDict(frozen=True)

    kind: StepKind = Field(validation_alias=AliasChoices("kind", "type"))
    percent: float | None = Field(default=None, gt=0, le=1, description="Fraction of working weight")
    target_reps: str = Field(
        min_length=1,
        validation_alias=AliasChoices("target_reps", "reps", "targetReps"),
        description="Display reps, e.g. '8' or '4-6'",
    )
    rest: str = Field(min_length=1, description="Display rest, e.g. '60s'")
    applies_to: AppliesTo = Field(
        default=AppliesTo.TOTAL,
        validation_alias=AliasChoices("applies_to", "appliesTo"),
    )
    label: str | None = None
    note: str | None = None

    @model_validator(mode="after")
    def validate_kind_fields(self) -> StepSpec:
        if self.kind == StepKind.PERCENT:
            if self.percent is None:
                raise ValueError("PERCENT step requires percent")
            if self.label is not None:
                raise ValueError("PERCENT step must not carry a label")
        else:
            if not self.label:
                raise ValueError("LABEL step requires a non-empty label")
            if self.percent is not None:
                raise ValueError("LABEL step must not carry a percent")
        return self


def percent_step(percent: float, target_reps: str, rest: str, applies_to: AppliesTo = AppliesTo.TOTAL, note: str | None = None) -> StepSpec:
    """Build a PERCENT step."""
    return StepSpec(
        kind=StepKind.PERCENT,
        percent=percent,
        target_reps=target_reps,
        rest=rest,
        applies_to=applies_to,
        note=note,
    )


def label_step(label: str, target_reps: str, rest: str, note: str | None = None) -> StepSpec:
    """Build a LABEL step."""
    return StepSpec(kind=StepKind.LABEL, label=label, target_reps=target_reps, rest=rest, note=note)


def parse_step_spec(data: Mapping[str, Any] | StepSpec) -> StepSpec:
    """Validate a single step from a stored document.

    Raises:
        InvalidStepSpecError: If the step is malformed.
    """
    if isinstance(data, StepSpec):
        return data
    try:
        return StepSpec.model_validate(data)
    except ValidationError as e:
        raise InvalidStepSpecError(f"Invalid warm-up step {data!r}: {e.error_count()} validation error(s)") from e


class WarmupConfig(BaseModel):
    """Per-exercise warm-up configuration supplied by the exercise data layer.

    Attributes:
        archetype: Warm-up archetype (persisted as `template`)
        is_lower_body_barbell: Prepend a bar-only step for HEAVY_BARBELL
        is_weighted_bodyweight: Deprecated. Accepted from old documents and
            ignored; added weight is inferred from the working weight.
        rounding_increment_kg: Floor applied when a percent step rounds to zero
            or below (defaults per archetype when None)
        override_steps: Replaces the catalog steps when non-empty
    """

    model_config = ConfigDict(frozen=True)

    archetype: WarmupArchetype = Field(validation_alias=AliasChoices("archetype", "template"))
    is_lower_body_barbell: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_lower_body_barbell", "isLowerBodyBarbell"),
    )
    is_weighted_bodyweight: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("is_weighted_bodyweight", "isWeightedBodyweight"),
        deprecated="Inferred from the working weight; this flag is ignored",
    )
    rounding_increment_kg: float | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("rounding_increment_kg", "roundingIncrementKg"),
    )
    override_steps: tuple[StepSpec, ...] | None = Field(
        default=None,
        validation_alias=AliasChoices("override_steps", "overrideSteps"),
    )

    @field_validator("archetype", mode="before")
    @classmethod
    def coerce_archetype(cls, value: Any) -> WarmupArchetype:
        try:
            return parse_archetype(value)
        except UnknownArchetypeError as e:
            raise ValueError(str(e)) from e


# Persisted camelCase key first; it wins when a document carries both
_OVERRIDE_KEYS = ("overrideSteps", "override_steps")
_INCREMENT_KEYS = ("roundingIncrementKg", "rounding_increment_kg")


def _pop_stored_field(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    present = [key for key in keys if key in data]
    values = [data.pop(key) for key in present]
    if len(present) > 1:
        logger.warning(f"Warm-up config carries both {present[0]!r} and {present[1]!r}, using {present[0]!r}")
    return values[0] if values else None


def load_warmup_config(document: Mapping[str, Any]) -> WarmupConfig:
    """Parse the `warmup` document stored on an exercise.

    A malformed override list is dropped as a whole (the catalog steps are used
    instead) and logged; a partial override is never kept. A rounding increment
    that is not a positive number is dropped the same way, so the archetype's
    floor applies and the stored template still wins.

    Args:
        document: Stored warm-up mapping (camelCase or snake_case keys)

    Returns:
        Validated WarmupConfig

    Raises:
        InvalidWarmupConfigError: If the document is not a mapping or its
            template/flags are invalid.
    """
    if not isinstance(document, Mapping):
        raise InvalidWarmupConfigError(f"Warm-up config must be a mapping, got {type(document).__name__}")

    data = dict(document)
    raw_overrides = _pop_stored_field(data, _OVERRIDE_KEYS)
    raw_increment = _pop_stored_field(data, _INCREMENT_KEYS)

    try:
        config = WarmupConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidWarmupConfigError(f"Invalid warm-up config: {e.error_count()} validation error(s)") from e

    if raw_increment is not None:
        increment = as_finite_float(raw_increment)
        if increment is not None and increment > 0:
            config = config.model_copy(update={"rounding_increment_kg": increment})
        else:
            logger.warning(
                "Ignoring warm-up rounding increment: expected a positive number",
                archetype=config.archetype.value,
                rounding_increment=repr(raw_increment),
            )

    if not raw_overrides:
        return config

    if not isinstance(raw_overrides, list | tuple):
        logger.warning(
            "Ignoring warm-up override steps: expected a list",
            archetype=config.archetype.value,
            override_type=type(raw_overrides).__name__,
        )
        return config

    try:
        steps = tuple(parse_step_spec(step) for step in raw_overrides)
    except InvalidStepSpecError as e:
        logger.warning(
            "Ignoring malformed warm-up override steps, using catalog template",
            archetype=config.archetype.value,
            error=str(e),
        )
        return config

    return config.model_copy(update={"override_steps": steps})


class WarmupStep(BaseModel):
    """One prescribed warm-up set."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Display label, e.g. '65%', 'Empty Bar', 'Bodyweight'")
    weight_total: float = Field(description="Rounded load for the set (kg)")
    reps: str
    rest: str
    note: str | None = None


@dataclass(frozen=True)
class ArchetypeInference:
    """Result of classifying an exercise.

    Attributes:
        archetype: Inferred warm-up archetype
        is_lower_body_barbell: True for squat/deadlift/RDL barbell lifts
        is_weighted_bodyweight: Always False; added weight is decided from the
            logged working weight at prescription time
    """

    archetype: WarmupArchetype
    is_lower_body_barbell: bool = False
    is_weighted_bodyweight: bool = False

    def to_config(self) -> WarmupConfig:
        return WarmupConfig(archetype=self.archetype, is_lower_body_barbell=self.is_lower_body_barbell)
