"""Example usage of the string matcher with noisy identifiers and passport names."""

import logging
from typing import Dict, List, Optional

from core.matcher import Matcher
from core.normalize import replace_unicode_to_icao, upper


def create_identifier_matcher(
    max_relative_distance: float = 0.2,
    min_length: int = 3
) -> Matcher:
    """
    Create a matcher for product / account identifiers typed by hand.

    Args:
        max_relative_distance: Share of the reference that may be edited
        min_length: Identifiers shorter than this never match

    Returns:
        Matcher: Configured matcher instance
    """
    return (
        Matcher()
        .min_length(min_length)
        .low_length_action(False)
        .normalize_fns('strip', 'remove_punctuation', 'collapse_whitespace')
        # A missing character is a more common typo than an extra one
        .weights(1.0, 0.5, 1.0)
        .max_relative_distance(max_relative_distance)
    )


def create_passport_name_matcher() -> Matcher:
    """Create a matcher comparing MRZ names against names in native spelling."""
    return (
        Matcher()
        .case_sensitive()
        .exact()
        .normalize_fns(upper, replace_unicode_to_icao())
    )


def match_identifiers(
    references: List[str],
    candidates: List[str],
    matcher: Optional[Matcher] = None
) -> Dict[str, Optional[str]]:
    """
    Find the first matching reference for every candidate.

    Args:
        references: Known-good identifiers
        candidates: Noisy identifiers to resolve
        matcher: Matcher to use (defaults to ``create_identifier_matcher()``)

    Returns:
        Dict[str, Optional[str]]: Candidate to matched reference (None if unmatched)
    """
    matcher = matcher or create_identifier_matcher()
    results = {}

    for candidate in candidates:
        results[candidate] = next(
            (ref for ref in references if matcher.match_string(ref, candidate)),
            None
        )

    matched = sum(1 for ref in results.values() if ref is not None)
    logging.info(f"Matched {matched} of {len(candidates)} identifiers")
    return results


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    results = match_identifiers(
        references=['INV-2023-00417', 'INV-2023-00981', 'CUST-ACME-01'],
        candidates=['inv 2023 00417', 'INV-2023-0981', 'CUST-ACNE-01', 'XYZ']
    )
    for candidate, reference in results.items():
        logging.info(f"{candidate!r} -> {reference!r}")

    passport = create_passport_name_matcher()
    logging.info(
        f"MUELLER vs Müller: {passport.match_string('MUELLER', 'Müller')}"
    )
