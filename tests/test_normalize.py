"""Unit tests for normalization functions."""

import pytest

from config.errors import ConfigurationError
from core import normalize
from core.normalize import NormalizerRegistry


class TestFunctions:
    """Individual normalization functions."""

    def test_strip_accents(self):
        assert normalize.strip_accents("Crème Brûlée") == "Creme Brulee"

    def test_collapse_whitespace(self):
        assert normalize.collapse_whitespace("  a \t b\n\nc ") == "a b c"

    def test_remove_punctuation(self):
        assert normalize.remove_punctuation("INV-2023/00.4!") == "INV2023004"

    def test_remove_punctuation_keeps_letters_and_symbols(self):
        assert normalize.remove_punctuation("a+b=c") == "a+b=c"

    def test_casefold(self):
        assert normalize.casefold("Straße") == "strasse"


class TestICAO:
    """ICAO Doc 9303 transliteration."""

    @pytest.mark.parametrize("text, expected", [
        ("MÜLLER", "MUELLER"),
        ("ÅSE", "AASE"),
        ("ĲSSEL", "IJSSEL"),
        ("ŁÓDŹ", "LODZ"),
        ("ÞÓR", "THOR"),
        ("GRÖẞE", "GROEẞE"),
    ])
    def test_uppercase(self, text, expected):
        assert normalize.transliterate_icao(text) == expected

    def test_lowercase(self):
        assert normalize.transliterate_icao("müller straße") == "mueller strasse"

    def test_unmapped_characters_are_kept(self):
        assert normalize.transliterate_icao("ABC-123 Ω") == "ABC-123 Ω"

    def test_factory(self):
        fn = normalize.replace_unicode_to_icao()
        assert fn("ÉMILE") == "EMILE"


class TestPipeline:
    """Composition of normalization functions."""

    def test_order(self):
        fn = normalize.pipeline(normalize.strip_accents, normalize.upper)
        assert fn(" é ") == " E "

    def test_identity(self):
        assert normalize.pipeline()("As Is") == "As Is"


class TestRegistry:
    """Normalizer registry."""

    def test_defaults(self):
        registry = NormalizerRegistry()
        assert registry.get("icao") is normalize.transliterate_icao
        assert "collapse_whitespace" in registry.names()

    def test_register(self):
        registry = NormalizerRegistry()
        registry.register("reverse", lambda s: s[::-1])
        assert registry.get("reverse")("abc") == "cba"

    def test_register_rejects_non_callable(self):
        with pytest.raises(ConfigurationError):
            NormalizerRegistry().register("broken", "upper")

    def test_unknown(self):
        with pytest.raises(ConfigurationError):
            NormalizerRegistry().get("missing")

    def test_resolve(self):
        registry = NormalizerRegistry()
        assert registry.resolve("upper") is normalize.upper
        assert registry.resolve(str.title) is str.title

    def test_global_registration(self):
        normalize.register_normalizer("digits_only", lambda s: "".join(c for c in s if c.isdigit()))
        assert normalize.registry.get("digits_only")("A1B2") == "12"
