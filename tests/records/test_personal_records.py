"""Tests for personal-record helpers.

Tests verify that:
- Warm-up and incomplete sets never count as working sets
- Heavier weight wins, then more reps
- Prescribed warm-ups logged into a session are ignored by record detection
"""

import math
import sys
from pathlib import Path

import pytest

# Add project root to path
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from liftlog.records.personal_records import (
    BestSet,
    LoggedSet,
    format_pr,
    is_better_pr,
    pick_best_set,
    valid_working_sets,
    warmup_steps_as_logged_sets,
)
from liftlog.warmups.enums import WarmupArchetype
from liftlog.warmups.generator import compute_warmup


@pytest.fixture
def session_sets() -> list[LoggedSet]:
    """A squat session with warm-ups, working sets and an empty row."""
    return [
        LoggedSet(reps=10, weight=20, is_warmup=True),
        LoggedSet(reps=5, weight=100),
        LoggedSet(reps=8, weight=100),
        LoggedSet(reps=3, weight=102.5),
        LoggedSet(reps=None, weight=None),
    ]


def test_valid_working_sets_filters(session_sets: list[LoggedSet]) -> None:
    """Test that warm-ups and empty rows are dropped."""
    assert valid_working_sets(session_sets) == [
        BestSet(reps=5, weight=100),
        BestSet(reps=8, weight=100),
        BestSet(reps=3, weight=102.5),
    ]


@pytest.mark.parametrize(
    "logged",
    [
        LoggedSet(reps=0, weight=100),
        LoggedSet(reps=5, weight=0),
        LoggedSet(reps=-1, weight=100),
        LoggedSet(reps=5, weight=math.nan),
        LoggedSet(reps=math.inf, weight=100),
        LoggedSet(reps=5, weight=None),
    ],
)
def test_invalid_sets_excluded(logged: LoggedSet) -> None:
    assert valid_working_sets([logged]) == []


def test_valid_working_sets_handles_none() -> None:
    assert valid_working_sets(None) == []


def test_pick_best_set_prefers_weight(session_sets: list[LoggedSet]) -> None:
    """Test that the heaviest set wins even with fewer reps."""
    assert pick_best_set(session_sets) == BestSet(reps=3, weight=102.5)


def test_pick_best_set_breaks_ties_on_reps() -> None:
    """Test that equal weight is decided by reps."""
    sets = [LoggedSet(reps=5, weight=100), LoggedSet(reps=8, weight=100), LoggedSet(reps=6, weight=100)]

    assert pick_best_set(sets) == BestSet(reps=8, weight=100)


def test_pick_best_set_empty() -> None:
    assert pick_best_set([]) is None
    assert pick_best_set([LoggedSet(reps=10, weight=60, is_warmup=True)]) is None


@pytest.mark.parametrize(
    ("candidate", "current", "expected"),
    [
        (BestSet(reps=5, weight=100), None, True),
        (None, None, False),
        (None, BestSet(reps=5, weight=100), False),
        (BestSet(reps=5, weight=102.5), BestSet(reps=8, weight=100), True),
        (BestSet(reps=6, weight=100), BestSet(reps=5, weight=100), True),
        (BestSet(reps=5, weight=100), BestSet(reps=5, weight=100), False),
        (BestSet(reps=10, weight=95), BestSet(reps=5, weight=100), False),
    ],
)
def test_is_better_pr(candidate: BestSet | None, current: BestSet | None, expected: bool) -> None:
    assert is_better_pr(candidate, current) is expected


@pytest.mark.parametrize(
    ("best", "expected"),
    [
        (BestSet(reps=5, weight=102.5), "PR: 5x102.5kg"),
        (BestSet(reps=5, weight=100.0), "PR: 5x100kg"),
        (BestSet(reps=5, weight=1234567.5), "PR: 5x1234567.5kg"),
        (BestSet(reps=2.5, weight=0.125), "PR: 2.5x0.125kg"),
        (None, "PR: N/A"),
    ],
)
def test_format_pr(best: BestSet | None, expected: str) -> None:
    assert format_pr(best) == expected


def test_prescribed_warmups_logged_as_warmups() -> None:
    """Test conversion of prescribed steps into flagged log rows."""
    steps = compute_warmup(WarmupArchetype.HEAVY_BARBELL, 100, is_lower_body_barbell=True)

    logged = warmup_steps_as_logged_sets(steps)

    assert [s.reps for s in logged] == [15, 12, 8, 6]
    assert [s.weight for s in logged] == [20, 40, 65, 80]
    assert all(s.is_warmup for s in logged)


def test_prescribed_warmups_do_not_count_toward_pr() -> None:
    """Test that warm-ups never become the session's best set."""
    steps = compute_warmup(WarmupArchetype.HEAVY_BARBELL, 100)
    logged = warmup_steps_as_logged_sets(steps) + [LoggedSet(reps=5, weight=60)]

    assert pick_best_set(logged) == BestSet(reps=5, weight=60)


def test_non_numeric_reps_left_empty() -> None:
    """Test that reps like 'AMRAP' are not guessed."""
    steps = compute_warmup(WarmupArchetype.BODYWEIGHT, 0)
    steps = [step.model_copy(update={"reps": "AMRAP"}) for step in steps]

    assert warmup_steps_as_logged_sets(steps)[0].reps is None
