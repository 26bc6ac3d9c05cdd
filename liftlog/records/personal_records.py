"""Personal-record helpers over logged sets.

Warm-up sets never count toward a record. A set beats another when it is
heavier, or equally heavy with more reps.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from pydantic import BaseModel, Field

from liftlog.warmups.models import WarmupStep


class LoggedSet(BaseModel):
    """A set as entered in the training log. Empty inputs are None."""

    reps: float | None = None
    weight: float | None = None
    is_warmup: bool = Field(default=False, description="Set was prescribed or logged as a warm-up")


class BestSet(BaseModel):
    """A validated working set."""

    reps: float
    weight: float


def _is_valid_number(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def valid_working_sets(sets: Iterable[LoggedSet] | None) -> list[BestSet]:
    """Keep working sets with positive, finite reps and weight."""
    return [
        BestSet(reps=s.reps, weight=s.weight)
        for s in (sets or [])
        if not s.is_warmup and _is_valid_number(s.reps) and _is_valid_number(s.weight)
    ]


def _beats(candidate: BestSet, current: BestSet) -> bool:
    if candidate.weight != current.weight:
        return candidate.weight > current.weight
    return candidate.reps > current.reps


def pick_best_set(sets: Iterable[LoggedSet] | None) -> BestSet | None:
    """Best working set of a session, or None when there is none."""
    best: BestSet | None = None
    for candidate in valid_working_sets(sets):
        if best is None or _beats(candidate, best):
            best = candidate
    return best


def is_better_pr(candidate: BestSet | None, current: BestSet | None) -> bool:
    """Whether candidate sets a new record over current."""
    if current is None:
        return candidate is not None
    if candidate is None:
        return False
    return _beats(candidate, current)


def _format_number(value: float) -> str:
    # Shortest round-trip form, never exponent notation for gym-sized numbers
    number = float(value)
    return str(int(number)) if number.is_integer() else repr(number)


def format_pr(best: BestSet | None) -> str:
    """Badge text, e.g. "PR: 5x102.5kg"."""
    if best is None:
        return "PR: N/A"
    return f"PR: {_format_number(best.reps)}x{_format_number(best.weight)}kg"


def warmup_steps_as_logged_sets(steps: Iterable[WarmupStep]) -> list[LoggedSet]:
    """Pre-fill the log with prescribed warm-ups, flagged so records skip them.

    Rep ranges ("4-6") are logged at their upper bound; unparseable reps are left empty.
    """
    logged: list[LoggedSet] = []
    for step in steps:
        upper = step.reps.split("-")[-1].strip()
        reps = float(upper) if upper.isdigit() else None
        logged.append(LoggedSet(reps=reps, weight=step.weight_total, is_warmup=True))
    return logged
