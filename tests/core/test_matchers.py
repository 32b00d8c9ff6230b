# tests\core\test_matchers.py
import pytest

from soundchange.core.domain.matchers import (
    EMPTY_ALTERNATION,
    FAIL,
    NULL,
    WORD_BOUNDARY,
    Alternation,
    FeatureLeaf,
    Repeated,
    Sequence,
    SymbolLeaf,
    match_length,
    next_match,
)
from soundchange.core.domain.models import FeatureDiff

HIGH = FeatureLeaf(FeatureDiff.parse("+high"))
FRONT = FeatureLeaf(FeatureDiff.parse("+front"))

class TestLeaves:
    def test_null(self, vowels):
        a, u, e, i = vowels.phonemes
        assert match_length(NULL, [a, u], 1) == 0
        assert match_length(NULL, [], 0) == 0

    def test_word_boundary(self, vowels):
        word = list(vowels.phonemes[:2])
        assert match_length(WORD_BOUNDARY, word, 0) == 0
        assert match_length(WORD_BOUNDARY, word, 1) == FAIL
        assert match_length(WORD_BOUNDARY, word, 2) == 0

    def test_symbol(self, vowels):
        a, u, e, i = vowels.phonemes
        assert match_length(SymbolLeaf("u"), [a, u], 1) == 1
        assert match_length(SymbolLeaf("u"), [a, u], 0) == FAIL
        assert match_length(SymbolLeaf("u"), [a, u], 2) == FAIL

    def test_features(self, vowels):
        a, u, e, i = vowels.phonemes
        not_front_high = FeatureLeaf(FeatureDiff.parse("+high -front"))
        assert match_length(not_front_high, [u], 0) == 1
        assert match_length(not_front_high, [i], 0) == FAIL
        assert match_length(not_front_high, [u], 1) == FAIL

class TestComposites:
    def test_sequence(self, vowels):
        a, u, e, i = vowels.phonemes
        node = Sequence((SymbolLeaf("a"), HIGH, WORD_BOUNDARY))
        assert match_length(node, [a, i], 0) == 2
        assert match_length(node, [a, i, a], 0) == FAIL
        assert match_length(node, [e, a, u], 1) == 2

    def test_alternation_takes_longest(self, vowels):
        a, u, e, i = vowels.phonemes
        node = Alternation((SymbolLeaf("a"), Sequence((SymbolLeaf("a"), SymbolLeaf("u")))))
        assert match_length(node, [a, u], 0) == 2
        assert match_length(node, [a, a], 0) == 1

    def test_alternation_failure(self, vowels):
        a, u, e, i = vowels.phonemes
        assert match_length(Alternation((SymbolLeaf("e"), SymbolLeaf("i"))), [a], 0) == FAIL
        assert match_length(EMPTY_ALTERNATION, [a], 0) == FAIL

    def test_zero_width_option(self, vowels):
        a = vowels.phonemes[0]
        assert match_length(Alternation((NULL, SymbolLeaf("e"))), [a], 0) == 0

class TestRepeated:
    def test_min_zero_never_fails(self, vowels):
        a, u, e, i = vowels.phonemes
        node = Repeated(HIGH, 0)
        for word in ([], [a], [i, u, a], [a, e, a, i, i]):
            for start in range(len(word) + 1):
                assert match_length(node, word, start) >= 0

    def test_greedy_consumes_whole_run(self, vowels):
        i = vowels.phonemes[3]
        assert match_length(Repeated(HIGH, 2), [i, i, i], 0) == 3

    def test_minimum_not_reached(self, vowels):
        a, u, e, i = vowels.phonemes
        assert match_length(Repeated(HIGH, 2), [i, a, i], 0) == FAIL

    def test_no_backtracking(self, vowels):
        """A greedy repetition never gives back phonemes to a following sibling."""
        i = vowels.phonemes[3]
        node = Sequence((Repeated(HIGH, 0), HIGH))
        assert match_length(node, [i, i], 0) == FAIL

    def test_zero_width_base_terminates(self, vowels):
        a = vowels.phonemes[0]
        assert match_length(Repeated(NULL, 3), [a], 0) == 0
        assert match_length(Repeated(WORD_BOUNDARY, 1), [a], 1) == 0

class TestNextMatch:
    def test_scan(self, vowels):
        a, u, e, i = vowels.phonemes
        word = [a, e, a, e]
        assert next_match(SymbolLeaf("e"), word, 0) == (1, 1)
        assert next_match(SymbolLeaf("e"), word, 2) == (3, 1)
        assert next_match(SymbolLeaf("e"), word, 4) is None

    def test_zero_width_match(self, vowels):
        a, u, e, i = vowels.phonemes
        assert next_match(NULL, [a, u], 1) == (1, 0)

    @pytest.mark.parametrize("start", [1, 2])
    def test_end_of_word_is_not_scanned(self, vowels, start):
        a, u, e, i = vowels.phonemes
        assert next_match(WORD_BOUNDARY, [a, u], start) is None
        assert next_match(NULL, [], 0) is None
