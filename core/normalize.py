"""
Pure string normalization functions applied before matching.

Every function maps a string to a string without side effects, so a matcher
holding them stays safe to share between threads.
"""

import unicodedata
from typing import Callable, Dict, Union

import regex as re

from config.errors import ConfigurationError

NormalizeFn = Callable[[str], str]

_WHITESPACE = re.compile(r'\s+')
_PUNCTUATION = re.compile(r'\p{P}+')

# ICAO Doc 9303 (part 3) transliteration of Latin characters for MRZ fields
_ICAO_UPPER = {
    'À': 'A', 'Á': 'A', 'Â': 'A', 'Ã': 'A', 'Ä': 'AE', 'Å': 'AA', 'Æ': 'AE',
    'Ç': 'C', 'È': 'E', 'É': 'E', 'Ê': 'E', 'Ë': 'E',
    'Ì': 'I', 'Í': 'I', 'Î': 'I', 'Ï': 'I', 'Ð': 'D', 'Ñ': 'N',
    'Ò': 'O', 'Ó': 'O', 'Ô': 'O', 'Õ': 'O', 'Ö': 'OE', 'Ø': 'OE',
    'Ù': 'U', 'Ú': 'U', 'Û': 'U', 'Ü': 'UE', 'Ý': 'Y', 'Þ': 'TH',
    'Ā': 'A', 'Ă': 'A', 'Ą': 'A', 'Ć': 'C', 'Ĉ': 'C', 'Ċ': 'C', 'Č': 'C',
    'Ď': 'D', 'Đ': 'D', 'Ē': 'E', 'Ĕ': 'E', 'Ė': 'E', 'Ę': 'E', 'Ě': 'E',
    'Ĝ': 'G', 'Ğ': 'G', 'Ġ': 'G', 'Ģ': 'G', 'Ĥ': 'H', 'Ħ': 'H',
    'Ĩ': 'I', 'Ī': 'I', 'Ĭ': 'I', 'Į': 'I', 'İ': 'I', 'Ĳ': 'IJ', 'Ĵ': 'J',
    'Ķ': 'K', 'Ĺ': 'L', 'Ļ': 'L', 'Ľ': 'L', 'Ŀ': 'L', 'Ł': 'L',
    'Ń': 'N', 'Ņ': 'N', 'Ň': 'N', 'Ŋ': 'N',
    'Ō': 'O', 'Ŏ': 'O', 'Ő': 'O', 'Œ': 'OE',
    'Ŕ': 'R', 'Ŗ': 'R', 'Ř': 'R', 'Ś': 'S', 'Ŝ': 'S', 'Ş': 'S', 'Š': 'S',
    'Ţ': 'T', 'Ť': 'T', 'Ŧ': 'T',
    'Ũ': 'U', 'Ū': 'U', 'Ŭ': 'U', 'Ů': 'U', 'Ű': 'U', 'Ų': 'U',
    'Ŵ': 'W', 'Ŷ': 'Y', 'Ÿ': 'Y', 'Ź': 'Z', 'Ż': 'Z', 'Ž': 'Z',
}


def _build_icao_table() -> Dict[int, str]:
    """Extend the uppercase table with the matching lowercase letters."""
    table = {ord(char): replacement for char, replacement in _ICAO_UPPER.items()}
    for char, replacement in _ICAO_UPPER.items():
        lower = char.lower()
        if len(lower) == 1 and lower != char:
            table.setdefault(ord(lower), replacement.lower())
    table[ord('ß')] = 'ss'
    table[ord('ı')] = 'i'
    return table


_ICAO_TABLE = _build_icao_table()


def upper(text: str) -> str:
    return text.upper()


def lower(text: str) -> str:
    return text.lower()


def casefold(text: str) -> str:
    return text.casefold()


def strip(text: str) -> str:
    return text.strip()


def strip_accents(text: str) -> str:
    """Decompose and drop combining marks ('é' -> 'e')."""
    return ''.join(
        c for c in unicodedata.normalize('NFD', text)
        if unicodedata.category(c) != 'Mn'
    )


def collapse_whitespace(text: str) -> str:
    """Trim and reduce every whitespace run to a single space."""
    return _WHITESPACE.sub(' ', text).strip()


def remove_punctuation(text: str) -> str:
    return _PUNCTUATION.sub('', text)


def transliterate_icao(text: str) -> str:
    """
    Transliterate Latin characters following ICAO Doc 9303.

    Characters without an ICAO mapping are kept unchanged. Case is
    preserved, so uppercase input yields MRZ-style output:
    ``transliterate_icao('MÜLLER') == 'MUELLER'``.
    """
    return text.translate(_ICAO_TABLE)


def replace_unicode_to_icao() -> NormalizeFn:
    """Return the ICAO transliteration as a normalization function."""
    return transliterate_icao


def pipeline(*fns: NormalizeFn) -> NormalizeFn:
    """
    Compose normalization functions, applied left to right.

    Args:
        *fns: Functions to apply in order

    Returns:
        NormalizeFn: Function applying all of them (identity if none given)
    """
    def apply(text: str) -> str:
        for fn in fns:
            text = fn(text)
        return text

    return apply


class NormalizerRegistry:
    """Registry of normalization functions addressable by name."""

    def __init__(self):
        self._normalizers: Dict[str, NormalizeFn] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default normalizers."""
        self.register('upper', upper)
        self.register('lower', lower)
        self.register('casefold', casefold)
        self.register('strip', strip)
        self.register('strip_accents', strip_accents)
        self.register('collapse_whitespace', collapse_whitespace)
        self.register('remove_punctuation', remove_punctuation)
        self.register('icao', transliterate_icao)

    def register(self, name: str, fn: NormalizeFn) -> None:
        """
        Register a normalization function.

        Args:
            name: Name to register the function under
            fn: Pure ``str -> str`` function

        Raises:
            ConfigurationError: If fn is not callable
        """
        if not callable(fn):
            raise ConfigurationError(f"Normalizer '{name}' is not callable: {fn!r}")
        self._normalizers[name] = fn

    def get(self, name: str) -> NormalizeFn:
        """
        Look up a registered normalization function.

        Raises:
            ConfigurationError: If no function is registered under name
        """
        fn = self._normalizers.get(name)
        if fn is None:
            raise ConfigurationError(f"Unknown normalizer: {name}")
        return fn

    def resolve(self, fn: Union[str, NormalizeFn]) -> NormalizeFn:
        """Return fn itself, or the registered function if fn is a name."""
        if isinstance(fn, str):
            return self.get(fn)
        if not callable(fn):
            raise ConfigurationError(f"Normalizer must be a name or callable, got {fn!r}")
        return fn

    def names(self):
        return sorted(self._normalizers)


# Global registry instance
registry = NormalizerRegistry()


def register_normalizer(name: str, fn: NormalizeFn) -> None:
    """Register a normalization function globally."""
    registry.register(name, fn)
