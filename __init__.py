"""
String Matcher
==============

Decide whether two strings should be considered the same: exactly, ignoring
case, or within a weighted edit distance.

Key Features:
- Weighted Wagner-Fischer (Levenshtein) distance with separate insert,
  delete and substitute costs
- Relative or absolute distance thresholds
- Minimum length gate with a configurable fallback result
- Ordered normalization pipelines per side, including ICAO transliteration
- Immutable, thread-safe matchers built by chaining
"""

from core.matcher import Matcher, Stringer
from core.distance import WagnerFischer, LevenshteinDistance, wagner_fischer
from core import normalize

from config.models import DistanceMode, MatcherConfig
from config.errors import (
    ConfigurationError,
    MatcherError,
    UnsupportedInputKind
)

__version__ = "1.0.0"
