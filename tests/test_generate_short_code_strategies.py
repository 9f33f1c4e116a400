"""
Tests for short code generation strategies.
"""
import random
import string

import pytest

from shortlink_app.services.short_code_strategies import RandomShortCodeStrategy


ALPHABET = set(string.ascii_letters + string.digits)


class TestRandomStrategy:
    """Test random generation strategy"""

    def test_generates_correct_length(self):
        """Test that codes always have the configured length"""
        strategy = RandomShortCodeStrategy(length=6, rng=random.Random(1))

        for _ in range(100):
            assert len(strategy.generate()) == 6

    def test_custom_length(self):
        """Test that length is configurable"""
        strategy = RandomShortCodeStrategy(length=10, rng=random.Random(1))

        assert len(strategy.generate()) == 10

    def test_only_alphanumeric(self):
        """Test that codes only use the 62-symbol alphabet"""
        strategy = RandomShortCodeStrategy(length=6, rng=random.Random(2))

        for _ in range(200):
            assert set(strategy.generate()) <= ALPHABET

    def test_every_symbol_is_reachable(self):
        """Test that draws cover the whole alphabet"""
        strategy = RandomShortCodeStrategy(length=6, rng=random.Random(3))

        seen = set()
        for _ in range(5000):
            seen.update(strategy.generate())

        assert seen == ALPHABET

    def test_same_seed_same_codes(self):
        """Test that an injected seeded source makes generation deterministic"""
        first = RandomShortCodeStrategy(length=6, rng=random.Random(42))
        second = RandomShortCodeStrategy(length=6, rng=random.Random(42))

        assert [first.generate() for _ in range(20)] == [second.generate() for _ in range(20)]

    def test_codes_rarely_repeat(self):
        """Test that a sample of codes is unique (62^6 possibilities)"""
        strategy = RandomShortCodeStrategy(length=6, rng=random.Random(7))

        codes = {strategy.generate() for _ in range(1000)}

        assert len(codes) == 1000

    def test_default_source(self):
        """Test that a generator works without an injected source"""
        strategy = RandomShortCodeStrategy()

        code = strategy.generate()

        assert strategy.is_valid(code)

    @pytest.mark.parametrize("length", [0, -1, 2.5, "6", True])
    def test_rejects_invalid_length(self, length):
        """Test that nonsensical lengths are refused up front"""
        with pytest.raises(ValueError):
            RandomShortCodeStrategy(length=length)


class TestCodeValidation:
    """Test is_valid used for incoming and loaded codes"""

    def test_accepts_well_formed_code(self):
        strategy = RandomShortCodeStrategy(length=6)

        assert strategy.is_valid("AbC123")

    @pytest.mark.parametrize("code", ["", "AbC12", "AbC1234", "AbC-12", "AbC 12", "AbC12é", None, 123456])
    def test_rejects_malformed_codes(self, code):
        strategy = RandomShortCodeStrategy(length=6)

        assert not strategy.is_valid(code)
