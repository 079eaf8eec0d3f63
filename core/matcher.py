"""Main string matcher implementation."""

import logging
from dataclasses import replace
from typing import Any, Optional, Protocol, Tuple, Union

from config.errors import UnsupportedInputKind
from config.models import (
    DistanceFn,
    DistanceMode,
    MatcherConfig,
    NormalizeFn
)
from core.distance import WagnerFischer
from core.normalize import registry

logger = logging.getLogger(__name__)


class Stringer(Protocol):
    """Protocol for values that render themselves as a string."""
    def __str__(self) -> str:
        ...


def _as_string(value: Any) -> Optional[str]:
    """
    Render value as a string if its type provides its own representation.

    Returns:
        Optional[str]: The string, or None if value has no string representation
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bytes, bytearray)):
        return None
    if type(value).__str__ is object.__str__:
        return None
    return str(value)


class Matcher:
    """
    Decides whether two strings match, exactly or within an edit distance.

    A matcher is immutable: every configuration method returns a new matcher,
    so chains such as ``Matcher().case_sensitive().exact()`` never modify a
    matcher that is already in use. One instance may be shared freely between
    threads as long as the injected normalization and distance functions are
    pure.
    """

    def __init__(self, config: Optional[MatcherConfig] = None):
        """
        Initialize the matcher.

        Args:
            config: Configuration to use (defaults: case insensitive, fuzzy,
                min length 2, max relative distance 0.2, unit weights)
        """
        self._config = config if config is not None else MatcherConfig()
        if self._config.distance_fn is not None:
            self._distance_fn = self._config.distance_fn
        else:
            self._distance_fn = WagnerFischer(*self._config.weights)

    @classmethod
    def from_config(cls, config: MatcherConfig) -> 'Matcher':
        return cls(config)

    @property
    def config(self) -> MatcherConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Matcher({self._config!r})"

    def _with(self, **changes: Any) -> 'Matcher':
        return Matcher(replace(self._config, **changes))

    def exact(self, flag: bool = True) -> 'Matcher':
        """Compare strings for equality instead of by edit distance."""
        return self._with(is_exact=flag)

    def case_sensitive(self, flag: bool = True) -> 'Matcher':
        return self._with(is_case_sensitive=flag)

    def min_length(self, min_length: int) -> 'Matcher':
        """Set the minimum reference / candidate length required to compare."""
        return self._with(min_length=min_length)

    def low_length_action(self, result: bool) -> 'Matcher':
        """Set the result returned when an input is shorter than the minimum length."""
        return self._with(low_length_action=result)

    def max_relative_distance(self, max_distance: float) -> 'Matcher':
        """
        Match when distance / len(reference) does not exceed max_distance.

        Switches the matcher to relative mode.
        """
        return self._with(
            max_relative_distance=max_distance,
            mode=DistanceMode.RELATIVE
        )

    def max_absolute_distance(self, max_distance: float) -> 'Matcher':
        """
        Match when the distance itself does not exceed max_distance.

        Switches the matcher to absolute mode.
        """
        return self._with(
            max_absolute_distance=max_distance,
            mode=DistanceMode.ABSOLUTE
        )

    def weights(
        self,
        weight_insert: float,
        weight_delete: float,
        weight_substitute: float
    ) -> 'Matcher':
        """
        Set the edit weights of the built-in distance.

        Weights have no effect once a custom distance function is set.
        """
        return self._with(
            weight_insert=weight_insert,
            weight_delete=weight_delete,
            weight_substitute=weight_substitute
        )

    def distance_fn(self, fn: Optional[DistanceFn]) -> 'Matcher':
        """Replace the distance metric; None restores the weighted Wagner-Fischer."""
        return self._with(distance_fn=fn)

    def normalize(self, *fns: Union[str, NormalizeFn]) -> 'Matcher':
        """
        Set the normalization functions applied to the candidate, in order.

        Args:
            *fns: Callables or names registered in ``core.normalize.registry``
        """
        return self._with(normalize_candidate=tuple(registry.resolve(fn) for fn in fns))

    def normalize_reference(self, *fns: Union[str, NormalizeFn]) -> 'Matcher':
        """Set the normalization functions applied to the reference, in order."""
        return self._with(normalize_reference=tuple(registry.resolve(fn) for fn in fns))

    def normalize_fns(self, *fns: Union[str, NormalizeFn]) -> 'Matcher':
        """Set the same normalization functions on both sides."""
        resolved = tuple(registry.resolve(fn) for fn in fns)
        return self._with(normalize_reference=resolved, normalize_candidate=resolved)

    def _prepare(self, reference: str, candidate: str) -> Tuple[str, str]:
        """Run both normalization pipelines."""
        for fn in self._config.normalize_reference:
            reference = fn(reference)
        for fn in self._config.normalize_candidate:
            candidate = fn(candidate)
        return reference, candidate

    def _distance(self, reference: str, candidate: str) -> float:
        if not self._config.is_case_sensitive:
            reference, candidate = reference.lower(), candidate.lower()
        return self._distance_fn(reference, candidate)

    def distance(self, reference: str, candidate: str) -> float:
        """
        Calculate the configured distance between two strings.

        Normalization and case handling are applied as in ``match_string``;
        the length gate is not.
        """
        return self._distance(*self._prepare(reference, candidate))

    def match_string(self, reference: str, candidate: str) -> bool:
        """
        Match two strings.

        Args:
            reference: Known-good value
            candidate: Value to check against the reference

        Returns:
            bool: Whether the candidate matches the reference
        """
        config = self._config

        if len(reference) < config.min_length or len(candidate) < config.min_length:
            logger.debug(
                f"Input shorter than {config.min_length}, "
                f"returning {config.low_length_action}"
            )
            return config.low_length_action

        reference, candidate = self._prepare(reference, candidate)

        if config.is_exact:
            if config.is_case_sensitive:
                return reference == candidate
            return reference.casefold() == candidate.casefold()

        distance = self._distance(reference, candidate)

        if config.mode is DistanceMode.ABSOLUTE:
            is_match = distance <= config.max_absolute_distance
        elif not reference:
            # Only reachable when normalization or min_length 0 leaves nothing
            is_match = distance == 0
        else:
            is_match = distance / len(reference) <= config.max_relative_distance

        logger.debug(f"{reference!r} vs {candidate!r}: distance {distance}, match {is_match}")
        return is_match

    __call__ = match_string

    def match_stringer(self, reference: Stringer, candidate: Stringer) -> bool:
        """Match two values by their string representations."""
        return self.match_string(str(reference), str(candidate))

    def match(
        self,
        reference: Any,
        candidate: Any
    ) -> Tuple[bool, Optional[UnsupportedInputKind]]:
        """
        Match two values of arbitrary type, if possible.

        Strings and objects whose type defines ``__str__`` are accepted.
        The error is returned, not raised.

        Args:
            reference: Known-good value
            candidate: Value to check against the reference

        Returns:
            Tuple[bool, Optional[UnsupportedInputKind]]: Match result and the
            error describing an unsupported input (``(False, error)``)
        """
        rendered = []
        for side, value in (('reference', reference), ('candidate', candidate)):
            text = _as_string(value)
            if text is None:
                error = UnsupportedInputKind(side, value)
                logger.warning(f"Cannot match: {error}")
                return False, error
            rendered.append(text)

        return self.match_string(*rendered), None
