"""Tests for the example matchers."""

import logging

from examples.matcher_example import (
    create_identifier_matcher,
    create_passport_name_matcher,
    match_identifiers
)

REFERENCES = ['INV-2023-00417', 'INV-2023-00981', 'CUST-ACME-01']


class TestIdentifierMatching:
    """Hand-typed identifiers resolved against a reference list."""

    def test_match_identifiers(self):
        results = match_identifiers(
            REFERENCES,
            ['inv 2023 00417', 'INV-2023-0981', 'CUST-ACNE-01', 'XYZ']
        )
        assert results == {
            'inv 2023 00417': 'INV-2023-00417',
            'INV-2023-0981': 'INV-2023-00981',
            'CUST-ACNE-01': 'CUST-ACME-01',
            'XYZ': None,
        }

    def test_short_identifiers_never_match(self):
        matcher = create_identifier_matcher(min_length=3)
        assert not matcher.match_string('AB', 'AB')

    def test_missing_character_is_cheap(self):
        matcher = create_identifier_matcher(max_relative_distance=0.1)
        # one missing character over a 10 character reference costs 0.05
        assert matcher.match_string('ABCDEFGHIJ', 'ABCDEFGHI')
        # one extra character costs 0.1
        assert matcher.match_string('ABCDEFGHIJ', 'ABCDEFGHIJK')
        assert not matcher.match_string('ABCDEFGHIJ', 'ABCDEFGHIJKL')

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO):
            match_identifiers(REFERENCES, ['CUST-ACME-01'])
        assert 'Matched 1 of 1 identifiers' in caplog.text


class TestPassportNames:
    """MRZ names against native spelling."""

    def test_umlaut(self):
        assert create_passport_name_matcher().match_string('MUELLER', 'Müller')

    def test_different_names(self):
        assert not create_passport_name_matcher().match_string('MUELLER', 'Miller')
