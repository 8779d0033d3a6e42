"""Pytest fixtures shared across the fuzzio test suite.

Global test safety measures:
 - Drop any FUZZIO_* variables inherited from the shell so config tests see defaults
"""
import os
from typing import List

import pytest

from fuzzio.match import MatchingEngine


def pytest_sessionstart(session):  # type: ignore[no-untyped-def]
    for key in list(os.environ):
        if key.startswith('FUZZIO_'):
            del os.environ[key]


@pytest.fixture
def default_needle() -> str:
    return 'test'


@pytest.fixture
def default_haystack() -> List[str]:
    """Mixed ASCII / Cyrillic haystack with a few unrelated words."""
    return ['test', 'tested', 'testing', 'тест', 'test1', 'тесты', 'hello', 'world']


@pytest.fixture
def numbered_haystack() -> List[str]:
    return ['test', 'test1', 'test2', 'test12', 'test123']


@pytest.fixture
def engine(default_needle, default_haystack) -> MatchingEngine:
    return MatchingEngine(default_needle, default_haystack)


@pytest.fixture
def lowercase():
    def _lower(s: str) -> str:
        return s.lower()
    return _lower
