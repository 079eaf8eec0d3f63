"""Weighted edit distance engines."""

from dataclasses import dataclass, replace
from typing import Any, Callable, Sequence

import Levenshtein

from config.errors import ConfigurationError
from config.models import DEFAULT_WEIGHT, check_weight

DistanceFn = Callable[[Sequence[Any], Sequence[Any]], float]


def wagner_fischer(
    reference: Sequence[Any],
    candidate: Sequence[Any],
    weight_insert: float = DEFAULT_WEIGHT,
    weight_delete: float = DEFAULT_WEIGHT,
    weight_substitute: float = DEFAULT_WEIGHT
) -> float:
    """
    Calculate the weighted edit distance transforming reference into candidate.

    Insertions add a unit of the candidate to the reference, deletions remove
    a unit of the reference. An empty reference therefore costs
    ``len(candidate) * weight_insert`` and an empty candidate costs
    ``len(reference) * weight_delete``.

    Only two rows of the Wagner-Fischer grid are kept, sized by the shorter
    input. Units are compared with ``==``, so any sequence works (characters
    of a string, tokens of a list, ...).

    Args:
        reference: Sequence to transform
        candidate: Sequence to transform into
        weight_insert: Cost of one insertion
        weight_delete: Cost of one deletion
        weight_substitute: Cost of replacing one unit by a different one

    Returns:
        float: Minimum total cost, >= 0

    Raises:
        ConfigurationError: If any weight is not strictly positive
    """
    weight_insert = check_weight('weight_insert', weight_insert)
    weight_delete = check_weight('weight_delete', weight_delete)
    weight_substitute = check_weight('weight_substitute', weight_substitute)

    # d(a, b, ins, del) == d(b, a, del, ins): keep the rows on the shorter side
    if len(candidate) > len(reference):
        reference, candidate = candidate, reference
        weight_insert, weight_delete = weight_delete, weight_insert

    previous = [j * weight_insert for j in range(len(candidate) + 1)]
    if not reference:
        return previous[-1]

    for i, ref_unit in enumerate(reference, start=1):
        current = [i * weight_delete]
        for j, cand_unit in enumerate(candidate, start=1):
            current.append(min(
                current[j - 1] + weight_insert,
                previous[j] + weight_delete,
                previous[j - 1] + (0.0 if ref_unit == cand_unit else weight_substitute)
            ))
        previous = current

    return previous[-1]


@dataclass(frozen=True)
class WagnerFischer:
    """Weighted Wagner-Fischer (Levenshtein) distance metric."""
    weight_insert: float = DEFAULT_WEIGHT
    weight_delete: float = DEFAULT_WEIGHT
    weight_substitute: float = DEFAULT_WEIGHT

    def __post_init__(self):
        for name in ('weight_insert', 'weight_delete', 'weight_substitute'):
            object.__setattr__(self, name, check_weight(name, getattr(self, name)))

    def weights(
        self,
        weight_insert: float,
        weight_delete: float,
        weight_substitute: float
    ) -> 'WagnerFischer':
        """Return a copy of this engine using the given weights."""
        return replace(
            self,
            weight_insert=weight_insert,
            weight_delete=weight_delete,
            weight_substitute=weight_substitute
        )

    def __call__(self, reference: Sequence[Any], candidate: Sequence[Any]) -> float:
        return wagner_fischer(
            reference,
            candidate,
            self.weight_insert,
            self.weight_delete,
            self.weight_substitute
        )

    def generate_fn(self) -> DistanceFn:
        """Generate a plain distance function bound to this engine's weights."""
        weights = (self.weight_insert, self.weight_delete, self.weight_substitute)

        def distance(reference: Sequence[Any], candidate: Sequence[Any]) -> float:
            return wagner_fischer(reference, candidate, *weights)

        return distance


@dataclass(frozen=True)
class LevenshteinDistance:
    """
    Edit distance backed by the ``Levenshtein`` C extension.

    Uses the same insert/delete convention as ``wagner_fischer`` but only
    accepts integer weights and string inputs.
    """
    weight_insert: int = 1
    weight_delete: int = 1
    weight_substitute: int = 1

    def __post_init__(self):
        for name in ('weight_insert', 'weight_delete', 'weight_substitute'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"{name} must be an integer for the Levenshtein backend, got {value!r}"
                )
            check_weight(name, value)

    def __call__(self, reference: str, candidate: str) -> float:
        return float(Levenshtein.distance(
            reference,
            candidate,
            weights=(self.weight_insert, self.weight_delete, self.weight_substitute)
        ))
