"""Shared pytest configuration for the TernaryTreeLib test-suite."""

import pytest

from ternarytreelib import TernaryTree


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running tests excluded by run_tests.py by default"
    )


@pytest.fixture
def int_tree():
    """Empty tree with natural integer ordering."""
    return TernaryTree.create()


@pytest.fixture
def example_tree():
    """Tree built from the shape example 5, 4, 9, 5, 7, 2, 2."""
    tree = TernaryTree.create()
    tree.extend([5, 4, 9, 5, 7, 2, 2])
    return tree
