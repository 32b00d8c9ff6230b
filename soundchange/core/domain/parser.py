# soundchange\core\domain\parser.py
"""
Pattern parser: notation text -> canonical matcher tree.

Supported syntax (no nesting of ``{}`` or ``[]``):

    Ø              the empty pattern
    #              word boundary
    a              a phoneme by symbol
    V, C, ...      a configured phoneme class
    [+high -back]  a phoneme by features
    {a,e,[+high]}  longest-matching option
    a*  [+syll]₂   greedy repetition, minimum 0 / minimum 2
    (ab)*          repetition of a group

Parsing happens in passes over the flat string: quantifiers first, then
brace groups, then bracket groups, then single characters. Each pass
splits the string and hands the plain pieces back to ``_parse``.
"""

from __future__ import annotations

import re
from typing import List, Optional

from soundchange.core.domain.canonical import canonicalize
from soundchange.core.domain.exceptions import NotationSyntaxError
from soundchange.core.domain.matchers import (
    NULL,
    WORD_BOUNDARY,
    Alternation,
    FeatureLeaf,
    MatcherAST,
    Repeated,
    Sequence,
    SymbolLeaf,
)
from soundchange.core.domain.models import FeatureDiff
from soundchange.core.domain.notation import BOUNDARY, STAR, NotationConfig

# The unit a quantifier applies to: a whole bracket/brace/paren group or one
# visible character, possibly followed by whitespace.
_ATOM_BEFORE_QUANTIFIER = re.compile(r"(\[[^\]]*\]|\{[^}]*\}|\([^)]*\)|\S)\s*$")


def split_delimited(text: str, opening: str, closing: str, label: str) -> List[str]:
    """
    Splits ``text`` on a flat pair of delimiters.

    The result alternates outside / inside spans, starting and ending with an
    outside span (possibly empty), so inside spans sit at odd indexes.
    Raises NotationSyntaxError when the delimiters do not pair up.
    """
    parts = re.split(f"[{re.escape(opening)}{re.escape(closing)}]", text)
    if len(parts) % 2 != 1:
        raise NotationSyntaxError(f"Odd number of {label} in string", text)

    expected = opening
    for char in text:
        if char in (opening, closing):
            if char != expected:
                raise NotationSyntaxError(f"Unbalanced {label} in string", text)
            expected = closing if expected == opening else opening
    return parts


class PatternParser:
    """
    Compiles pattern notation into matcher trees using one NotationConfig.

    The parser holds no state besides its configuration; one instance can
    parse any number of patterns.
    """

    def __init__(self, config: Optional[NotationConfig] = None):
        self.config = config or NotationConfig()

    def parse(self, text: str) -> MatcherAST:
        """Parses ``text`` and returns the canonical matcher tree."""
        return canonicalize(self._parse(text))

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _parse(self, text: str) -> MatcherAST:
        text = text.strip()
        if not text or text == self.config.null_symbol:
            return NULL
        if text == BOUNDARY:
            return WORD_BOUNDARY

        quantified = self._parse_quantifiers(text)
        if quantified is not None:
            return quantified

        braces = split_delimited(text, "{", "}", "braces")
        if len(braces) > 1:
            return Sequence(tuple(
                self._parse_alternation(part) if i % 2 else self._parse(part)
                for i, part in enumerate(braces)
            ))

        brackets = split_delimited(text, "[", "]", "brackets")
        if len(brackets) > 1:
            return Sequence(tuple(
                FeatureLeaf(FeatureDiff.parse(part)) if i % 2 else self._parse(part)
                for i, part in enumerate(brackets)
            ))

        return Sequence(tuple(self._parse_char(char) for char in text if not char.isspace()))

    def _parse_quantifiers(self, text: str) -> Optional[MatcherAST]:
        """
        Wraps every quantified atom in a Repeated node. Returns None when the
        text has no quantifier at all.
        """
        items: List[MatcherAST] = []
        last_end = 0
        index = 0

        while index < len(text):
            char = text[index]
            if char == STAR:
                min_count = 0
                end = index + 1
            elif self.config.subscript_value(char) >= 0:
                end = index
                digits = ""
                while end < len(text) and self.config.subscript_value(text[end]) >= 0:
                    digits += str(self.config.subscript_value(text[end]))
                    end += 1
                min_count = int(digits)
            else:
                index += 1
                continue

            atom = _ATOM_BEFORE_QUANTIFIER.search(text, last_end, index)
            if atom is None:
                raise NotationSyntaxError("Quantifier without a preceding atom", text)

            items.append(self._parse(text[last_end:atom.start()]))
            items.append(Repeated(self._parse_atom(atom.group(1)), min_count))
            last_end = index = end

        if not items:
            return None
        items.append(self._parse(text[last_end:]))
        return Sequence(tuple(items))

    def _parse_atom(self, atom: str) -> MatcherAST:
        if atom.startswith("(") and atom.endswith(")"):
            return self._parse(atom[1:-1])
        return self._parse(atom)

    def _parse_alternation(self, group: str) -> MatcherAST:
        return Alternation(tuple(self._parse(option) for option in group.split(",")))

    def _parse_char(self, char: str) -> MatcherAST:
        if char == BOUNDARY:
            return WORD_BOUNDARY
        if char == self.config.null_symbol:
            return NULL
        phoneme_class = self.config.phoneme_class(char)
        if phoneme_class is not None:
            return FeatureLeaf(phoneme_class)
        return SymbolLeaf(char)
