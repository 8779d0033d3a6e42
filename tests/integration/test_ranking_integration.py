"""End-to-end ranking scenarios mixing normalizers, thresholds and Cyrillic text."""

import pytest

from fuzzio import MatchingEngine
from fuzzio.utils.normalization import trim_lower


@pytest.fixture
def names_engine():
    engine = MatchingEngine('John')
    engine.set_normalizer(trim_lower)
    engine.set_haystack(['John ', 'Jon', 'Johns', 'JANE', 'Janie'])
    return engine


@pytest.fixture
def surnames_engine():
    return MatchingEngine('иванв', ['иванов', 'ивановы', 'ивановой', 'Иванов', 'иван', 'вано', 'ваня'])


def test_normalized_exact_match_wins(names_engine):
    assert names_engine.has_exact_match()
    assert names_engine.get_closest_one().original == 'John '
    assert names_engine.get_closest_one().normalized == 'john'


def test_cyrillic_ranking(surnames_engine):
    assert not surnames_engine.has_exact_match()
    assert surnames_engine.get_closest_one().original == 'иванов'
    assert surnames_engine.get_closest_one().distance == 1
    assert [c.original for c in surnames_engine.get(80, 1)] == ['иванов', 'иван']


def test_stored_thresholds_and_reset(surnames_engine):
    surnames_engine.set_min_similarity_threshold(80)
    assert [c.original for c in surnames_engine.get()] == ['иванов', 'иван', 'ивановы']

    surnames_engine.set_max_levenshtein_distance_threshold(1)
    assert len(surnames_engine.get()) == 2

    surnames_engine.set_min_similarity_threshold(0)
    surnames_engine.set_max_levenshtein_distance_threshold(0)
    assert len(surnames_engine.get()) == 7


def test_grow_then_shrink(surnames_engine):
    surnames_engine.add_to_haystack(['иванв', 'иван'])
    assert len(surnames_engine.get()) == 8
    assert surnames_engine.has_exact_match()
    assert surnames_engine.get_max_similarity() == 100.0

    surnames_engine.remove_from_haystack(['иванв'])
    assert len(surnames_engine.get()) == 7
    assert not surnames_engine.has_exact_match()
    assert surnames_engine.get_max_similarity() == pytest.approx(1000 / 11)
