# soundchange\core\domain\canonical.py
"""
Canonical form for matcher trees.

``canonicalize`` rewrites a tree bottom-up so that:

- no Sequence directly contains a Sequence, and no Alternation directly
  contains an Alternation (children are spliced in);
- identity-empty children are dropped (``Null`` inside a Sequence, the empty
  Alternation inside an Alternation);
- composites with zero children become their kind's empty node, and
  composites with one child become that child;
- ``Repeated(Repeated(b, m), n)`` becomes ``Repeated(b, n + m)``.

Nodes that are already canonical are returned unchanged, so the transform is
idempotent.
"""

from __future__ import annotations

from typing import List

from soundchange.core.domain.matchers import (
    COMPOSITE_KINDS,
    MatcherAST,
    NodeKind,
    Repeated,
    identity_empty,
)


def canonicalize(node: MatcherAST) -> MatcherAST:
    if node.kind in COMPOSITE_KINDS:
        return _canonicalize_composite(node)
    if node.kind is NodeKind.REPEATED:
        return _canonicalize_repeated(node)
    return node


def _canonicalize_composite(node) -> MatcherAST:
    empty = identity_empty(node.kind)
    children: List[MatcherAST] = []
    modified = False

    for child in node.children:
        canonical = canonicalize(child)
        if canonical == empty:
            modified = True
            continue
        if canonical.kind is node.kind:
            modified = True
            children.extend(canonical.children)
            continue
        modified = modified or canonical != child
        children.append(canonical)

    if node.kind is NodeKind.ALTERNATION:
        # Options form a set; keep the first occurrence for stable rendering.
        unique = list(dict.fromkeys(children))
        modified = modified or len(unique) != len(children)
        children = unique

    if not children:
        return empty
    if len(children) == 1:
        return children[0]
    if not modified:
        return node
    return type(node)(tuple(children))


def _canonicalize_repeated(node: Repeated) -> MatcherAST:
    base = canonicalize(node.base)
    if base.kind is NodeKind.REPEATED:
        return Repeated(base.base, base.min_count + node.min_count)
    if base == node.base:
        return node
    return Repeated(base, node.min_count)
