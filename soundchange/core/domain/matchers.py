# soundchange\core\domain\matchers.py
"""
Matcher AST and matching engine.

A compiled pattern is a small immutable tree built from seven node kinds:

- ``Null``          matches the empty string anywhere.
- ``WordBoundary``  matches the empty string at either end of the word.
- ``SymbolLeaf``    matches one phoneme by symbol.
- ``FeatureLeaf``   matches one phoneme by features.
- ``Sequence``      concatenation.
- ``Repeated``      greedy repetition with a minimum count.
- ``Alternation``   longest match among several options.

Every node carries a ``kind`` tag and the engine dispatches on it, so the
set of node kinds is closed. Matching reports the number of phonemes
consumed from a given offset, or ``FAIL``.

Repetition is greedy and never backtracks: ``[+syll]*[+syll]`` can never
match, because the starred part eats every vowel before the second leaf is
tried. This is intentional.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Sequence as Seq, Tuple, Union

from soundchange.core.domain.models import FeatureDiff, Phoneme
from soundchange.core.domain.notation import BOUNDARY, STAR, NotationConfig

FAIL = -1
"""Returned by ``match_length`` when a node does not match."""


class NodeKind(str, Enum):
    NULL = "null"
    BOUNDARY = "boundary"
    SYMBOL = "symbol"
    FEATURES = "features"
    SEQUENCE = "sequence"
    REPEATED = "repeated"
    ALTERNATION = "alternation"


# ---------------------------------------------------------------------------
# Node kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Null:
    kind: ClassVar[NodeKind] = NodeKind.NULL


@dataclass(frozen=True)
class WordBoundary:
    kind: ClassVar[NodeKind] = NodeKind.BOUNDARY


@dataclass(frozen=True)
class SymbolLeaf:
    symbol: str
    kind: ClassVar[NodeKind] = NodeKind.SYMBOL


@dataclass(frozen=True)
class FeatureLeaf:
    diff: FeatureDiff = field(default_factory=FeatureDiff)
    kind: ClassVar[NodeKind] = NodeKind.FEATURES

    @property
    def present(self):
        return self.diff.present

    @property
    def absent(self):
        return self.diff.absent


@dataclass(frozen=True)
class Sequence:
    children: Tuple["MatcherAST", ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.SEQUENCE


@dataclass(frozen=True)
class Repeated:
    base: "MatcherAST"
    min_count: int = 0
    kind: ClassVar[NodeKind] = NodeKind.REPEATED


@dataclass(frozen=True)
class Alternation:
    children: Tuple["MatcherAST", ...] = ()
    kind: ClassVar[NodeKind] = NodeKind.ALTERNATION


MatcherAST = Union[Null, WordBoundary, SymbolLeaf, FeatureLeaf, Sequence, Repeated, Alternation]

NULL = Null()
WORD_BOUNDARY = WordBoundary()
EMPTY_ALTERNATION = Alternation()

COMPOSITE_KINDS = (NodeKind.SEQUENCE, NodeKind.ALTERNATION)


def identity_empty(kind: NodeKind) -> MatcherAST:
    """The node a composite of ``kind`` collapses to when it has no children."""
    if kind is NodeKind.SEQUENCE:
        return NULL
    if kind is NodeKind.ALTERNATION:
        return EMPTY_ALTERNATION
    raise ValueError(f"{kind.value} is not a composite kind")


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


def match_length(node: MatcherAST, word: Seq[Phoneme], start: int = 0) -> int:
    """
    Number of phonemes ``node`` consumes when matched at ``word[start]``,
    or ``FAIL``.
    """
    kind = node.kind

    if kind is NodeKind.NULL:
        return 0

    if kind is NodeKind.BOUNDARY:
        return 0 if start == 0 or start == len(word) else FAIL

    if kind is NodeKind.SYMBOL:
        return 1 if start < len(word) and word[start].symbol == node.symbol else FAIL

    if kind is NodeKind.FEATURES:
        return 1 if start < len(word) and node.diff.matches(word[start]) else FAIL

    if kind is NodeKind.SEQUENCE:
        total = 0
        for child in node.children:
            if start + total > len(word):
                return FAIL
            length = match_length(child, word, start + total)
            if length < 0:
                return FAIL
            total += length
        return total

    if kind is NodeKind.REPEATED:
        total = 0
        count = 0
        while True:
            length = match_length(node.base, word, start + total)
            if length < 0:
                break
            count += 1
            total += length
            if length == 0:
                # A zero-width success repeats forever without moving.
                count = max(count, node.min_count)
                break
        return total if count >= node.min_count else FAIL

    if kind is NodeKind.ALTERNATION:
        return max((match_length(child, word, start) for child in node.children), default=FAIL)

    raise TypeError(f"Unknown matcher node: {node!r}")


def next_match(node: MatcherAST, word: Seq[Phoneme], start: int = 0) -> Optional[Tuple[int, int]]:
    """
    First ``(index, length)`` at or after ``start`` where ``node`` matches.
    Only offsets that point at a phoneme are tried.
    """
    for index in range(start, len(word)):
        length = match_length(node, word, index)
        if length >= 0:
            return index, length
    return None


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render(node: MatcherAST, config: Optional[NotationConfig] = None) -> str:
    """Notation text for ``node``; the canonical form of a parsed pattern reparses to itself."""
    config = config or NotationConfig()
    kind = node.kind

    if kind is NodeKind.NULL:
        return config.null_symbol
    if kind is NodeKind.BOUNDARY:
        return BOUNDARY
    if kind is NodeKind.SYMBOL:
        return node.symbol
    if kind is NodeKind.FEATURES:
        return str(node.diff)
    if kind is NodeKind.SEQUENCE:
        return "".join(render(child, config) for child in node.children)
    if kind is NodeKind.ALTERNATION:
        return "{" + ",".join(render(child, config) for child in node.children) + "}"
    if kind is NodeKind.REPEATED:
        base = render(node.base, config)
        if node.base.kind not in (NodeKind.SYMBOL, NodeKind.FEATURES, NodeKind.ALTERNATION):
            base = f"({base})"
        suffix = STAR if node.min_count == 0 else config.to_subscript(node.min_count)
        return base + suffix

    raise TypeError(f"Unknown matcher node: {node!r}")
