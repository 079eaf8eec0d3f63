"""Configuration models for the string matching system."""

import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple
from enum import Enum

from config.errors import ConfigurationError

DEFAULT_MIN_LENGTH = 2
DEFAULT_MAX_RELATIVE_DISTANCE = 0.2
DEFAULT_WEIGHT = 1.0

NormalizeFn = Callable[[str], str]
DistanceFn = Callable[[str, str], float]


class DistanceMode(str, Enum):
    """How a computed distance is compared against the threshold."""
    RELATIVE = "relative"  # distance / len(reference)
    ABSOLUTE = "absolute"


def check_weight(name: str, value: float) -> float:
    """
    Validate a single edit weight.

    Args:
        name: Name of the weight, used in the error message
        value: Weight to validate

    Returns:
        float: The weight as a float

    Raises:
        ConfigurationError: If the weight is not a finite number greater than zero
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not value > 0 or math.isinf(value):
        raise ConfigurationError(f"{name} must be a finite number > 0, got {value!r}")
    return float(value)


def check_threshold(name: str, value: float) -> float:
    """Validate a distance threshold (finite or infinite, but never negative)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not value >= 0:
        raise ConfigurationError(f"{name} must be >= 0, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class MatcherConfig:
    """Immutable configuration of a ``Matcher``."""
    min_length: int = DEFAULT_MIN_LENGTH
    low_length_action: bool = False
    max_relative_distance: float = DEFAULT_MAX_RELATIVE_DISTANCE
    max_absolute_distance: Optional[float] = None
    mode: DistanceMode = DistanceMode.RELATIVE
    is_case_sensitive: bool = False
    is_exact: bool = False
    weight_insert: float = DEFAULT_WEIGHT
    weight_delete: float = DEFAULT_WEIGHT
    weight_substitute: float = DEFAULT_WEIGHT
    normalize_reference: Tuple[NormalizeFn, ...] = ()
    normalize_candidate: Tuple[NormalizeFn, ...] = ()
    distance_fn: Optional[DistanceFn] = None  # None: weighted Wagner-Fischer

    def __post_init__(self):
        """Validate values and coerce containers to their canonical types."""
        if (isinstance(self.min_length, bool)
                or not isinstance(self.min_length, int)
                or self.min_length < 0):
            raise ConfigurationError(
                f"min_length must be an integer >= 0, got {self.min_length!r}"
            )

        for name in ('weight_insert', 'weight_delete', 'weight_substitute'):
            object.__setattr__(self, name, check_weight(name, getattr(self, name)))

        object.__setattr__(
            self,
            'max_relative_distance',
            check_threshold('max_relative_distance', self.max_relative_distance)
        )
        if self.max_absolute_distance is not None:
            object.__setattr__(
                self,
                'max_absolute_distance',
                check_threshold('max_absolute_distance', self.max_absolute_distance)
            )

        try:
            object.__setattr__(self, 'mode', DistanceMode(self.mode))
        except ValueError:
            raise ConfigurationError(f"Unknown distance mode: {self.mode!r}") from None
        if self.mode is DistanceMode.ABSOLUTE and self.max_absolute_distance is None:
            raise ConfigurationError(
                "max_absolute_distance is required in absolute mode"
            )

        for name in ('normalize_reference', 'normalize_candidate'):
            fns = tuple(getattr(self, name))
            for fn in fns:
                if not callable(fn):
                    raise ConfigurationError(
                        f"{name} entries must be callable, got {fn!r}"
                    )
            object.__setattr__(self, name, fns)

        if self.distance_fn is not None and not callable(self.distance_fn):
            raise ConfigurationError(
                f"distance_fn must be callable, got {self.distance_fn!r}"
            )

    @property
    def weights(self) -> Tuple[float, float, float]:
        """(insert, delete, substitute) weights."""
        return self.weight_insert, self.weight_delete, self.weight_substitute
