# tests\core\test_rule.py
import pytest
from structlog.testing import capture_logs

from soundchange.core.domain.exceptions import (
    NotationSyntaxError,
    OutputLengthMismatchError,
    UnknownPhonemeError,
)
from soundchange.core.domain.matchers import NULL, WORD_BOUNDARY, FeatureLeaf, Repeated, SymbolLeaf
from soundchange.core.domain.models import FeatureDiff, Phoneme
from soundchange.core.domain.rule import Rule, Segment

class TestCompile:
    def test_parts(self, vowels):
        rule = Rule.compile("[-high] → [+high] / _#", vowels)
        assert rule.input == FeatureLeaf(FeatureDiff(absent={"high"}))
        assert rule.context_prefix == NULL
        assert rule.context_suffix == WORD_BOUNDARY
        assert rule.output == (FeatureDiff(present={"high"}),)

    def test_anchor_flags(self, vowels):
        final = Rule.compile("[-high] → [+high] / _#", vowels)
        assert final.requires_word_final and not final.requires_word_initial

        initial = Rule.compile("a → e / #_", vowels)
        assert initial.requires_word_initial and not initial.requires_word_final

        both = Rule.compile("a → e / #_#", vowels)
        assert both.requires_word_initial and both.requires_word_final

        inner = Rule.compile("a → e / u_i", vowels)
        assert not inner.requires_word_initial and not inner.requires_word_final

    def test_output_slots(self, vowels):
        a, u, e, i = vowels.phonemes
        rule = Rule.compile("ia → e Ø [+front] / _", vowels)
        assert rule.output == (e, None, FeatureDiff(present={"front"}))

    def test_quantified_input(self, vowels):
        rule = Rule.compile("i₂ → i / _", vowels)
        assert rule.input == Repeated(SymbolLeaf("i"), 2)

    def test_unknown_output_symbol(self, vowels):
        with pytest.raises(UnknownPhonemeError) as excinfo:
            Rule.compile("a → z / _", vowels)
        assert excinfo.value.symbol == "z"

    @pytest.mark.parametrize("notation", ["a e / _", "a → e _", "a → e / u", "[a → e / _"])
    def test_malformed_rules(self, vowels, notation):
        with pytest.raises(NotationSyntaxError):
            Rule.compile(notation, vowels)

    def test_str_renders_canonical_form(self, vowels):
        assert str(Rule.compile("[-high] → [+high] / _#", vowels)) == "[-high] → [+high] / _#"
        assert str(Rule.compile(" i₂  →  i /  _ ", vowels)) == "i₂ → i / _"

class TestProcessWord:
    def test_feature_change_with_suffix_context(self, vowels):
        a, u, e, i = vowels.phonemes
        rule = Rule.compile("i → [-high] / _[-high]", vowels)
        assert rule.process_word([i, a]) == [Segment(True, (e,)), Segment(False, (a,))]

    def test_literal_output_replaces_whole_run(self, vowels):
        i = vowels.phonemes[3]
        rule = Rule.compile("i₂ → i / _", vowels)
        assert rule.process_word([i, i, i, i]) == [Segment(True, (i,))]

    def test_contexts_see_the_original_word(self, vowels):
        a, u, e, i = vowels.phonemes
        rule = Rule.compile("a → e / a_", vowels)
        assert rule.process_word([a, a, a]) == [
            Segment(False, (a,)),
            Segment(True, (e,)),
            Segment(False, (a,)),
        ]

    def test_suffix_context_can_be_next_prefix(self, vowels):
        a, u, e, i = vowels.phonemes
        rule = Rule.compile("u → i / a_a", vowels)
        assert rule.process_word([a, u, a, u, a]) == [
            Segment(False, (a,)),
            Segment(True, (i,)),
            Segment(False, (a,)),
            Segment(True, (i,)),
            Segment(False, (a,)),
        ]

    def test_deletion(self, vowels):
        a, u, e, i = vowels.phonemes
        rule = Rule.compile("a → Ø / _#", vowels)
        assert rule.process_word([u, a]) == [Segment(False, (u,)), Segment(True, ())]

    def test_insertion_terminates(self, lenition_language):
        a, e, i, u, p, f = lenition_language.phonemes
        rule = Rule.compile("Ø → e / #_p", lenition_language)
        assert rule.process_word([p, a]) == [Segment(True, (e,)), Segment(False, (p, a))]

    def test_no_match(self, vowels):
        a, u, e, i = vowels.phonemes
        rule = Rule.compile("i → e / _", vowels)
        assert rule.process_word([a, u]) == [Segment(False, (a, u))]
        assert rule.process_word([]) == []

    def test_length_mismatch(self, vowels):
        a, u, e, i = vowels.phonemes
        rule = Rule.compile("ia → [+high] / _", vowels)
        with pytest.raises(OutputLengthMismatchError):
            rule.process_word([i, a])

    def test_placeholder_for_missing_phoneme(self, vowels):
        a = vowels.phonemes[0]
        rule = Rule.compile("a → [+round] / _", vowels)
        with capture_logs() as logs:
            segments = rule.process_word([a])
        assert segments == [Segment(True, (Phoneme("?", ["round"]),))]
        assert any(log["event"] == "phoneme_not_in_inventory" for log in logs)
