"""Tests for TreeConfig and the ordering helpers."""

import pytest

from ternarytreelib import (
    Comparison,
    OrderingSource,
    TreeConfig,
    case_insensitive_order,
    compare,
    key_order,
    natural_order,
    reversed_order,
)


class TestOrderingHelpers:

    @pytest.mark.parametrize("a, b, expected", [
        (1, 2, Comparison.LESS),
        (2, 2, Comparison.EQUAL),
        (3, 2, Comparison.GREATER),
        ("a", "b", Comparison.LESS),
    ])
    def test_natural_order(self, a, b, expected):
        assert compare(natural_order, a, b) is expected

    def test_compare_normalises_large_results(self):
        def ordering(a, b):
            return (a - b) * 1000

        assert compare(ordering, 1, 5) is Comparison.LESS
        assert compare(ordering, 5, 1) is Comparison.GREATER
        assert compare(ordering, 5, 5) is Comparison.EQUAL

    def test_natural_order_only_needs_lt(self):
        class Version:
            def __init__(self, n):
                self.n = n

            def __lt__(self, other):
                return self.n < other.n

        assert natural_order(Version(1), Version(2)) == -1
        assert natural_order(Version(2), Version(1)) == 1
        assert natural_order(Version(2), Version(2)) == 0

    def test_key_order(self):
        by_length = key_order(len)
        assert by_length("abc", "de") == 1
        assert by_length("ab", "de") == 0
        assert "len" in by_length.__name__

    def test_reversed_order(self):
        descending = reversed_order(natural_order)
        assert descending(1, 2) == 1
        assert descending(2, 1) == -1
        assert descending(2, 2) == 0

    def test_case_insensitive_order(self):
        assert case_insensitive_order("ABC", "abc") == 0
        assert case_insensitive_order("abc", "ABD") == -1


class TestTreeConfig:

    def test_defaults_are_natural(self):
        config = TreeConfig()
        assert config.source is OrderingSource.NATURAL
        assert config.validate() == []
        assert config.resolve_ordering() is natural_order

    def test_custom_source(self):
        config = TreeConfig(ordering=case_insensitive_order)
        assert config.source is OrderingSource.CUSTOM
        assert config.resolve_ordering() is case_insensitive_order

    def test_key_source(self):
        config = TreeConfig.by_key(len)
        assert config.source is OrderingSource.KEY
        assert config.resolve_ordering()("aa", "b") == 1

    def test_reverse(self):
        ordering = TreeConfig.natural(reverse=True).resolve_ordering()
        assert ordering(1, 2) == 1

    def test_case_insensitive_constructor(self):
        config = TreeConfig.case_insensitive()
        assert config.resolve_ordering()("Q", "q") == 0

    def test_validate_collects_every_error(self):
        config = TreeConfig(ordering="nope", key=42, reverse="yes")
        errors = config.validate()
        assert "ordering and key are mutually exclusive" in errors
        assert "ordering must be callable" in errors
        assert "key must be callable" in errors
        assert "reverse must be a bool" in errors
