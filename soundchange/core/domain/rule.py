# soundchange\core\domain\rule.py
"""
A single concrete sound-change rule.

Notation::

    <input> → <output> / <prefix>_<suffix>

``Rule.compile`` turns the notation into three matchers (input, prefix
context, suffix context) plus an output specification, and
``Rule.process_word`` applies the rule once, left to right, over a phoneme
sequence. The result is a list of segments flagged as changed or unchanged;
the RuleSet driver uses the flags to keep later rules away from phonemes
that have already been rewritten.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence as Seq, Tuple, Union

import structlog

from soundchange.core.domain.exceptions import (
    NotationSyntaxError,
    OutputLengthMismatchError,
    UnknownPhonemeError,
)
from soundchange.core.domain.matchers import MatcherAST, NodeKind, match_length, next_match, render
from soundchange.core.domain.models import FeatureDiff, Language, Phoneme
from soundchange.core.domain.notation import BOUNDARY, FOCUS, NotationConfig
from soundchange.core.domain.parser import PatternParser, split_delimited

logger = structlog.get_logger()

OutputSlot = Union[Phoneme, FeatureDiff, None]
"""A literal phoneme, a feature change applied to the matched phoneme, or a deletion."""


@dataclass(frozen=True)
class Segment:
    """A run of a word, flagged with whether a rule has already rewritten it."""

    changed: bool
    phonemes: Tuple[Phoneme, ...] = ()


@dataclass(frozen=True)
class Rule:
    notation: str
    language: Language
    input: MatcherAST
    context_prefix: MatcherAST
    context_suffix: MatcherAST
    output: Tuple[OutputSlot, ...]
    config: NotationConfig
    requires_word_initial: bool = False
    requires_word_final: bool = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def compile(
        cls,
        notation: str,
        language: Language,
        config: Optional[NotationConfig] = None,
    ) -> "Rule":
        """
        Compiles one concrete rule (no optional groups or polarity letters).

        Raises:
            NotationSyntaxError: missing arrow / slash / focus, or malformed patterns.
            UnknownPhonemeError: an output literal is not in ``language``.
        """
        config = config or NotationConfig()
        parser = PatternParser(config)

        if config.arrow not in notation:
            raise NotationSyntaxError(f"Missing arrow '{config.arrow}' in rule", notation)
        input_spec, remainder = notation.split(config.arrow, 1)
        if "/" not in remainder:
            raise NotationSyntaxError("Missing '/' before the environment in rule", notation)
        output_spec, environment = remainder.split("/", 1)

        environment = environment.strip()
        if environment and FOCUS not in environment:
            raise NotationSyntaxError(f"Missing focus '{FOCUS}' in environment", notation)
        prefix_spec, _, suffix_spec = environment.partition(FOCUS)
        prefix_spec, suffix_spec = prefix_spec.strip(), suffix_spec.strip()

        rule = cls(
            notation=notation,
            language=language,
            input=parser.parse(input_spec),
            context_prefix=parser.parse(prefix_spec),
            context_suffix=parser.parse(suffix_spec),
            output=cls._parse_output(output_spec.strip(), language, config),
            config=config,
            requires_word_initial=prefix_spec.startswith(BOUNDARY),
            requires_word_final=suffix_spec.endswith(BOUNDARY),
        )
        logger.debug("rule_compiled", notation=notation, canonical=str(rule))
        return rule

    @staticmethod
    def _parse_output(spec: str, language: Language, config: NotationConfig) -> Tuple[OutputSlot, ...]:
        slots: List[OutputSlot] = []
        for i, part in enumerate(split_delimited(spec, "[", "]", "brackets")):
            if i % 2:
                slots.append(FeatureDiff.parse(part))
                continue
            for char in part:
                if char.isspace():
                    continue
                if char == config.null_symbol:
                    slots.append(None)
                    continue
                phoneme = language.find_symbol(char)
                if phoneme is not None:
                    slots.append(phoneme)
                    continue
                phoneme_class = config.phoneme_class(char)
                if phoneme_class is None:
                    raise UnknownPhonemeError(char)
                slots.append(phoneme_class)
        return tuple(slots)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def apply(self, span: Seq[Phoneme]) -> List[Phoneme]:
        """
        Rewrites a matched input span.

        An output made only of literals replaces the whole span, whatever its
        length. An output with feature changes is applied slot by slot and
        must have exactly one slot per matched phoneme.
        """
        if not any(isinstance(slot, FeatureDiff) for slot in self.output):
            return [slot for slot in self.output if slot is not None]
        if len(span) != len(self.output):
            raise OutputLengthMismatchError(len(span), len(self.output))

        result: List[Phoneme] = []
        for phoneme, slot in zip(span, self.output):
            if slot is None:
                continue
            if isinstance(slot, FeatureDiff):
                result.append(self.language.apply_changes(phoneme, slot))
            else:
                result.append(slot)
        return result

    def process_word(self, word: Seq[Phoneme]) -> List[Segment]:
        """
        Applies the rule once over ``word``.

        Contexts are matched against the original word, so every rewrite
        sees the input as it was before this pass. Unchanged empty segments
        are dropped from the result.
        """
        word = tuple(word)
        segments: List[Segment] = []
        index = 0
        last_match_end = 0

        while True:
            prefix = next_match(self.context_prefix, word, index)
            if prefix is None:
                break
            prefix_index, prefix_length = prefix
            # Retry one position further if this prefix occurrence fails
            index = prefix_index + 1

            input_index = prefix_index + prefix_length
            input_length = match_length(self.input, word, input_index)
            if input_length < 0:
                continue
            suffix_index = input_index + input_length
            if match_length(self.context_suffix, word, suffix_index) < 0:
                continue

            segments.append(Segment(False, word[last_match_end:input_index]))
            segments.append(Segment(True, tuple(self.apply(word[input_index:suffix_index]))))
            # The suffix context stays unconsumed; a zero-width match must still move on.
            last_match_end = suffix_index
            index = max(suffix_index, prefix_index + 1)

        segments.append(Segment(False, word[last_match_end:]))
        return [s for s in segments if s.changed or s.phonemes]

    # ------------------------------------------------------------------

    def _render_output(self) -> str:
        rendered = []
        for slot in self.output:
            if slot is None:
                rendered.append(self.config.null_symbol)
            else:
                rendered.append(str(slot))
        return "".join(rendered) or self.config.null_symbol

    def __str__(self) -> str:
        prefix = "" if self.context_prefix.kind is NodeKind.NULL else render(self.context_prefix, self.config)
        suffix = "" if self.context_suffix.kind is NodeKind.NULL else render(self.context_suffix, self.config)
        return (
            f"{render(self.input, self.config)} {self.config.arrow} "
            f"{self._render_output()} / {prefix}{FOCUS}{suffix}"
        )
