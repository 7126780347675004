"""Response consistency validation."""

from .validator import (
    ConsistencyValidator,
    ValidationResult,
    HardDependency,
    HelperReference,
    DEFAULT_HARD_DEPENDENCIES,
    DEFAULT_HELPER_REFERENCES,
)

__all__ = [
    "ConsistencyValidator",
    "ValidationResult",
    "HardDependency",
    "HelperReference",
    "DEFAULT_HARD_DEPENDENCIES",
    "DEFAULT_HELPER_REFERENCES",
]
