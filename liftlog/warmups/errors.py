"""Domain-specific errors for warm-up prescription.

The engine itself never raises. These errors are raised where persisted or
caller-supplied data is parsed, and are caught by the entry points that fall
back to the catalog or to an empty prescription.
"""


class WarmupError(Exception):
    """Base exception for all warm-up errors."""

    pass


class UnknownArchetypeError(WarmupError):
    """Raised when an archetype/template name is not recognized."""

    pass


class InvalidStepSpecError(WarmupError):
    """Raised when a template step violates its shape (e.g., PERCENT without percent)."""

    pass


class InvalidWarmupConfigError(WarmupError):
    """Raised when a stored warm-up config document cannot be parsed."""

    pass
