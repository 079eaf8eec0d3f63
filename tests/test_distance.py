"""Unit tests for the edit distance engines."""

import pytest

from config.errors import ConfigurationError
from core.distance import LevenshteinDistance, WagnerFischer, wagner_fischer


class TestWagnerFischer:
    """Weighted Wagner-Fischer distance."""

    def test_kitten_sitting(self):
        assert wagner_fischer("kitten", "sitting", 1, 1, 1) == 3

    def test_identical(self):
        assert wagner_fischer("abc", "abc") == 0

    def test_both_empty(self):
        assert wagner_fischer("", "") == 0

    def test_empty_reference_costs_insertions(self):
        assert wagner_fischer("", "abc", weight_insert=2, weight_delete=5) == 6

    def test_empty_candidate_costs_deletions(self):
        assert wagner_fischer("abc", "", weight_insert=5, weight_delete=2) == 6

    def test_insert_weight_applies_when_candidate_is_longer(self):
        assert wagner_fischer("abcd", "abcde", weight_insert=3, weight_delete=1) == 3

    def test_delete_weight_applies_when_reference_is_longer(self):
        assert wagner_fischer("abcde", "abcd", weight_insert=3, weight_delete=1) == 1

    def test_substitution_is_avoided_when_cheaper_to_delete_and_insert(self):
        # one substitution (10) vs delete + insert (1 + 1)
        assert wagner_fischer("abc", "abx", 1, 1, 10) == 2

    def test_substitution_weight(self):
        assert wagner_fischer("abc", "abx", 1, 1, 0.5) == 0.5

    def test_generic_units(self):
        reference = ["main", "street", "12"]
        candidate = ["main", "st", "12"]
        assert wagner_fischer(reference, candidate) == 1

    @pytest.mark.parametrize("weights", [(0, 1, 1), (1, -1, 1), (1, 1, float('nan'))])
    def test_rejects_non_positive_weights(self, weights):
        with pytest.raises(ConfigurationError):
            wagner_fischer("a", "b", *weights)

    def test_engine_is_callable(self):
        engine = WagnerFischer()
        assert engine("kitten", "sitting") == 3

    def test_engine_weights_returns_copy(self):
        engine = WagnerFischer()
        heavy = engine.weights(2, 2, 2)

        assert engine("kitten", "sitting") == 3
        assert heavy("kitten", "sitting") == 6

    def test_generate_fn(self):
        fn = WagnerFischer(weight_insert=2).generate_fn()
        assert fn("ab", "abc") == 2

    def test_engine_rejects_zero_weight(self):
        with pytest.raises(ConfigurationError):
            WagnerFischer(weight_substitute=0)


class TestLevenshteinDistance:
    """Distance backed by the Levenshtein extension."""

    def test_kitten_sitting(self):
        assert LevenshteinDistance()("kitten", "sitting") == 3

    def test_agrees_with_wagner_fischer(self):
        pairs = [("abcde", "abcd"), ("flaw", "lawn"), ("", "abc"), ("abc", "")]
        engine = LevenshteinDistance(2, 3, 4)
        for reference, candidate in pairs:
            assert engine(reference, candidate) == wagner_fischer(reference, candidate, 2, 3, 4)

    def test_rejects_float_weights(self):
        with pytest.raises(ConfigurationError):
            LevenshteinDistance(weight_insert=1.5)

    def test_rejects_zero_weights(self):
        with pytest.raises(ConfigurationError):
            LevenshteinDistance(weight_delete=0)
