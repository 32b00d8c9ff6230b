# soundchange\core\domain\ruleset.py
"""
Rule sets: one notation string, several concrete rules.

A notation may contain shorthand that stands for more than one rule:

- ``(...)``   optional material; the rule exists with and without it
              (a parenthesised group followed by a quantifier is a
              repetition instead, see the parser);
- ``<...>``   material present in one variant and absent in the other;
- ``α``, ``β`` polarity variables; each letter becomes ``+`` in one variant
              and ``-`` in the other, consistently across the rule.

``make_rule_list`` resolves the shorthand by case splitting, always on the
first construct left, in that priority order and with the "present" / ``+``
variant first. ``RuleSet.process`` then runs the concrete rules in that
order over a word, tracking which parts of the word have already changed.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Optional, Sequence as Seq, Tuple, Union

import structlog

from soundchange.core.domain.exceptions import NotationSyntaxError
from soundchange.core.domain.models import Language, Phoneme
from soundchange.core.domain.notation import NotationConfig
from soundchange.core.domain.rule import Rule, Segment
from soundchange.core.domain.segmentation import join_phonemes, segment_word

logger = structlog.get_logger()

_OPTIONAL_GROUP = re.compile(r"\(([^()]*)\)")
_ALTERNATIVE_GROUP = re.compile(r"<([^<>]*)>")


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


def make_rule_list(notation: str, config: Optional[NotationConfig] = None) -> List[str]:
    """
    Expands optional groups, alternative groups and polarity letters into
    the ordered list of concrete rule strings.

    Example:
        make_rule_list("a → e / (i)_<#>")
        -> ["a → e / i_#", "a → e / i_", "a → e / _#", "a → e / _"]
    """
    config = config or NotationConfig()
    if "<" in config.arrow or ">" in config.arrow:
        raise NotationSyntaxError("Arrow collides with the angle-bracket group syntax", config.arrow)
    return _expand(notation, config)


def _expand(notation: str, config: NotationConfig) -> List[str]:
    group = _first_optional_group(notation, config) or _ALTERNATIVE_GROUP.search(notation)
    if group is not None:
        kept = notation[:group.start()] + group.group(1) + notation[group.end():]
        removed = notation[:group.start()] + notation[group.end():]
        return _expand(kept, config) + _expand(removed, config)

    letter = next((char for char in notation if char in config.greek_letters), None)
    if letter is not None:
        return _expand(notation.replace(letter, "+"), config) + _expand(notation.replace(letter, "-"), config)

    return [notation]


def _first_optional_group(notation: str, config: NotationConfig):
    for group in _OPTIONAL_GROUP.finditer(notation):
        following = notation[group.end():].lstrip()
        if following and config.is_quantifier(following[0]):
            continue
        return group
    return None


# ---------------------------------------------------------------------------
# Segment bookkeeping
# ---------------------------------------------------------------------------


def merge_segments(segments: Iterable[Segment]) -> List[Segment]:
    """Drops empty segments and joins neighbours that share the same flag."""
    merged: List[Segment] = []
    for segment in segments:
        if not segment.phonemes:
            continue
        if merged and merged[-1].changed == segment.changed:
            merged[-1] = Segment(segment.changed, merged[-1].phonemes + segment.phonemes)
        else:
            merged.append(segment)
    return merged


def apply_rule(rule: Rule, segments: List[Segment]) -> List[Segment]:
    """
    Runs one rule over a partitioned word. Only unchanged segments are
    scanned; anchored rules only look at the first or last segment.
    """
    if rule.requires_word_initial and rule.requires_word_final and len(segments) > 1:
        # A rule anchored at both ends only runs on a word nothing has touched yet.
        return segments

    if rule.requires_word_final:
        if not segments or segments[-1].changed:
            return segments
        return segments[:-1] + rule.process_word(segments[-1].phonemes)

    if rule.requires_word_initial:
        if not segments or segments[0].changed:
            return segments
        return rule.process_word(segments[0].phonemes) + segments[1:]

    result: List[Segment] = []
    for segment in segments:
        if segment.changed:
            result.append(segment)
        else:
            result.extend(rule.process_word(segment.phonemes))
    return result


# ---------------------------------------------------------------------------
# RuleSet
# ---------------------------------------------------------------------------


class RuleSet:
    """
    The ordered concrete rules behind one notation string, bound to a language.

    Construction compiles every expanded rule up front; any syntax or
    inventory error aborts construction. A RuleSet is never modified after
    construction and can process any number of words.
    """

    def __init__(self, notation: str, language: Language, config: Optional[NotationConfig] = None):
        self.notation = notation
        self.language = language
        self.config = config or NotationConfig()
        self.rules: Tuple[Rule, ...] = tuple(
            Rule.compile(concrete, language, self.config)
            for concrete in make_rule_list(notation, self.config)
        )
        logger.debug("ruleset_compiled", notation=notation, rule_count=len(self.rules))

    @classmethod
    def from_rules(
        cls,
        rules: Iterable[Rule],
        language: Language,
        config: Optional[NotationConfig] = None,
    ) -> "RuleSet":
        """Builds a RuleSet around already compiled rules, applied in the given order."""
        ruleset = cls.__new__(cls)
        ruleset.rules = tuple(rules)
        ruleset.language = language
        ruleset.config = config or NotationConfig()
        ruleset.notation = "; ".join(rule.notation for rule in ruleset.rules)
        return ruleset

    def process(self, word: Union[str, Seq[Phoneme]]) -> List[Phoneme]:
        """
        Applies every rule in order and returns the resulting phonemes.
        A string is segmented against the language inventory first.
        """
        if isinstance(word, str):
            word = segment_word(word, self.language)

        segments = [Segment(False, tuple(word))]
        for rule in self.rules:
            segments = merge_segments(apply_rule(rule, segments))
        return [phoneme for segment in segments for phoneme in segment.phonemes]

    def transform(self, text: str) -> str:
        """String in, string out convenience wrapper around ``process``."""
        return join_phonemes(self.process(text))

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __str__(self) -> str:
        return self.notation

    def __repr__(self) -> str:
        return f"RuleSet({self.notation!r}, rules={len(self.rules)})"
